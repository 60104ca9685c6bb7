from __future__ import annotations
from flask import Blueprint, current_app
from markupsafe import escape
from apidocs.errors import SerializationError
from apidocs.openapi import build_openapi_spec
from apidocs.services.registry import RouteRegistry
from apidocs.config.docs import DEFAULT_SPEC_PATH, DEFAULT_DOCS_PATH, DEFAULT_TITLE, DEFAULT_VERSION

REDOC_PAGE = (
    "<!DOCTYPE html><html><head><title>{title}</title>"
    "<link rel=\"stylesheet\" href=\"https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css\" />"
    "</head><body><redoc spec-url='{spec_url}'></redoc>"
    "<script src='https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js'></script>"
    "</body></html>"
)


def serialize_spec(spec: dict) -> str:
    try:
        return current_app.json.dumps(spec)
    except (TypeError, ValueError) as exc:
        current_app.logger.error('OpenAPI document serialization failed: %s', exc)
        raise SerializationError() from exc


def create_docs_blueprint(registry: RouteRegistry, spec_path: str = DEFAULT_SPEC_PATH,
                          docs_path: str = DEFAULT_DOCS_PATH) -> Blueprint:
    docs_bp = Blueprint('docs', __name__)

    @docs_bp.get(spec_path)
    def openapi_spec():
        spec = build_openapi_spec(
            registry.list(),
            title=current_app.config.get('OPENAPI_TITLE', DEFAULT_TITLE),
            version=current_app.config.get('OPENAPI_VERSION', DEFAULT_VERSION),
        )
        body = serialize_spec(spec)
        return current_app.response_class(body, status=200, mimetype='application/json')

    @docs_bp.get(docs_path)
    def docs_index():
        # Lightweight HTML referencing Redoc CDN (no local install) for quick browsing
        title = current_app.config.get('OPENAPI_TITLE', DEFAULT_TITLE)
        return REDOC_PAGE.format(title=escape(title), spec_url=escape(spec_path))

    return docs_bp


__all__ = ['create_docs_blueprint', 'serialize_spec']
