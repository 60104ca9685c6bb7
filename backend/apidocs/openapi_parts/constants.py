"""Centralized constants for the OpenAPI document builder.

Splitting these out keeps `apidocs/openapi_builder.py` concise. Tests depend
on the exact header values and wording below.
"""
OPENAPI_VERSION = "3.0.0"

DEFAULT_TITLE = "API Documentation"
DEFAULT_VERSION = "1.0.0"

JSON_MEDIA_TYPE = "application/json"

# Every generated operation documents a single success response.
SUCCESS_STATUS = "200"
SUCCESS_DESCRIPTION = "Success"

# Parameter location tags, emitted in this order within an operation.
PARAM_IN_QUERY = "query"
PARAM_IN_PATH = "path"

# Method that never carries a request body once registered.
BODYLESS_METHOD = "GET"

__all__ = [
    "OPENAPI_VERSION",
    "DEFAULT_TITLE",
    "DEFAULT_VERSION",
    "JSON_MEDIA_TYPE",
    "SUCCESS_STATUS",
    "SUCCESS_DESCRIPTION",
    "PARAM_IN_QUERY",
    "PARAM_IN_PATH",
    "BODYLESS_METHOD",
]
