"""Immutable route descriptors consumed by the OpenAPI builder.

Descriptors are created once by `RouteRegistry.register` and never changed
afterwards; sequences are stored as tuples so a snapshot can be handed to the
builder without copying.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class ParamSchema:
    """One query or path parameter."""

    name: str
    description: str = ''
    required: bool = False
    type: str = 'string'


@dataclass(frozen=True)
class RouteDescriptor:
    """One documented operation.

    `body` and `response` are opaque schema values (usually dicts); `None`
    means absent. `method` is kept exactly as registered.
    """

    method: str
    path: str
    summary: str = ''
    body: Any = None
    query: Tuple[ParamSchema, ...] = ()
    path_vars: Tuple[ParamSchema, ...] = ()
    response: Any = None

    @property
    def has_parameters(self) -> bool:
        return bool(self.query or self.path_vars)


__all__ = ['ParamSchema', 'RouteDescriptor']
