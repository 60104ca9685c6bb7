from flask import Flask, current_app
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

from .config.docs import (
    DEFAULT_TITLE,
    DEFAULT_VERSION,
    DEFAULT_SPEC_PATH,
    DEFAULT_DOCS_PATH,
    DEFAULT_LOG_LEVEL,
    env_flag,
)
from .services.registry import RouteRegistry

load_dotenv()

REGISTRY_EXTENSION = 'route_registry'


def create_app(config: Optional[Dict[str, Any]] = None, registry: Optional[RouteRegistry] = None):
    app = Flask(__name__)

    app.config['OPENAPI_TITLE'] = os.getenv('OPENAPI_TITLE', DEFAULT_TITLE)
    app.config['OPENAPI_VERSION'] = os.getenv('OPENAPI_VERSION', DEFAULT_VERSION)
    app.config['OPENAPI_SPEC_PATH'] = os.getenv('OPENAPI_SPEC_PATH', DEFAULT_SPEC_PATH)
    app.config['OPENAPI_DOCS_PATH'] = os.getenv('OPENAPI_DOCS_PATH', DEFAULT_DOCS_PATH)
    app.config['OPENAPI_STRICT_REGISTRY'] = env_flag(os.getenv('OPENAPI_STRICT_REGISTRY'))
    app.config['LOG_LEVEL'] = os.getenv('LOG_LEVEL', DEFAULT_LOG_LEVEL)

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    app.logger.setLevel(str(app.config['LOG_LEVEL']).upper())
    # keep registration order for paths and methods in the served JSON
    app.json.sort_keys = False

    if registry is None:
        registry = RouteRegistry(strict=env_flag(app.config['OPENAPI_STRICT_REGISTRY']))
    app.extensions[REGISTRY_EXTENSION] = registry

    from .routes.docs import create_docs_blueprint
    app.register_blueprint(create_docs_blueprint(
        registry,
        spec_path=app.config['OPENAPI_SPEC_PATH'],
        docs_path=app.config['OPENAPI_DOCS_PATH'],
    ))

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app


def get_registry() -> RouteRegistry:
    return current_app.extensions[REGISTRY_EXTENSION]
