"""Defaults for the documentation endpoints.

Each value can be overridden through the environment (see `create_app`) or an
explicit config mapping passed to the factory.
"""
from apidocs.openapi_parts.constants import DEFAULT_TITLE, DEFAULT_VERSION

DEFAULT_SPEC_PATH = '/openapi.json'
DEFAULT_DOCS_PATH = '/docs'
DEFAULT_LOG_LEVEL = 'INFO'

TRUTHY = {'1', 'true', 'yes', 'on'}


def env_flag(raw) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw or '').strip().lower() in TRUTHY


__all__ = [
    'DEFAULT_TITLE',
    'DEFAULT_VERSION',
    'DEFAULT_SPEC_PATH',
    'DEFAULT_DOCS_PATH',
    'DEFAULT_LOG_LEVEL',
    'env_flag',
]
