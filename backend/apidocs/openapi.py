"""Public import for the OpenAPI builder.

Keeps a stable import path while the implementation lives in
`openapi_builder.py` and `openapi_parts/`.
"""
from .models.route import ParamSchema, RouteDescriptor  # noqa: F401
from .openapi_builder import build_openapi_spec  # noqa: F401
from .openapi_parts.schemas import ArrayOf, normalize_response_schema  # noqa: F401
from .services.registry import RouteRegistry  # noqa: F401

__all__ = [
    "build_openapi_spec",
    "normalize_response_schema",
    "ArrayOf",
    "ParamSchema",
    "RouteDescriptor",
    "RouteRegistry",
]
