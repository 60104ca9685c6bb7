"""Deterministic OpenAPI 3.0 document builder.

Scope (purposefully narrow):
- one operation per (path, method); a later registration replaces an earlier one
- parameters: query entries first, then path entries, each in registration order
- requestBody only when the descriptor carries a body
- a single "200" response whose schema is normalized (collections -> array)

No validation happens here: malformed descriptors are emitted as given.
This is the canonical builder module; `apidocs/openapi.py` re-exports from here.
"""
from typing import Any, Dict, Iterable

from .models.route import RouteDescriptor
from .openapi_parts.constants import (
    DEFAULT_TITLE,
    DEFAULT_VERSION,
    OPENAPI_VERSION,
    PARAM_IN_PATH,
    PARAM_IN_QUERY,
)
from .openapi_parts.helpers import parameter_list, request_body, success_responses
from .openapi_parts.schemas import normalize_response_schema, render_schema

__all__ = ["build_openapi_spec", "build_operation"]


def build_operation(route: RouteDescriptor) -> Dict[str, Any]:
    operation: Dict[str, Any] = {
        "summary": route.summary,
        "responses": success_responses(normalize_response_schema(route.response)),
    }
    if route.has_parameters:
        operation["parameters"] = parameter_list(route.query, PARAM_IN_QUERY) + parameter_list(
            route.path_vars, PARAM_IN_PATH
        )
    if route.body is not None:
        operation["requestBody"] = request_body(render_schema(route.body))
    return operation


def build_openapi_spec(
    routes: Iterable[RouteDescriptor],
    *,
    title: str = DEFAULT_TITLE,
    version: str = DEFAULT_VERSION,
) -> Dict[str, Any]:
    paths: Dict[str, Any] = {}
    for route in routes:
        # method key is used verbatim; insertion order follows first registration
        paths.setdefault(route.path, {})[route.method] = build_operation(route)

    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": title, "version": version},
        "paths": paths,
    }
