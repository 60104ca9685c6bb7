"""Ordered, thread-safe collection of documented routes.

Usage:
    registry = RouteRegistry()
    registry.register('GET', '/items', 'List items', response=[{'type': 'string'}])
    build_openapi_spec(registry.list())

The registry is owned explicitly (one per app, see `create_app`) instead of
living in module state. Appends happen under a lock and `list()` hands out a
tuple snapshot, so serving and late registration may overlap safely.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, Iterable, Iterator, List, Tuple

from apidocs.errors import InvalidDescriptorError
from apidocs.models.route import ParamSchema, RouteDescriptor
from apidocs.openapi_parts.constants import BODYLESS_METHOD

logger = logging.getLogger(__name__)


class RouteRegistry:
    def __init__(self, strict: bool = False):
        self.strict = strict
        self._routes: List[RouteDescriptor] = []
        self._lock = threading.Lock()

    def register(
        self,
        method: str,
        path: str,
        summary: str = '',
        body: Any = None,
        query: Iterable[ParamSchema] = (),
        path_vars: Iterable[ParamSchema] = (),
        response: Any = None,
    ) -> None:
        if self.strict and (not method or not path):
            raise InvalidDescriptorError(f"method and path are required (got method={method!r}, path={path!r})")
        # GET never documents a request body, whatever the caller passed
        if method == BODYLESS_METHOD:
            body = None
        route = RouteDescriptor(
            method=method,
            path=path,
            summary=summary,
            body=body,
            query=tuple(query),
            path_vars=tuple(path_vars),
            response=response,
        )
        with self._lock:
            if any(r.path == path and r.method == method for r in self._routes):
                logger.debug('Route %s %s registered again; the later entry wins', method, path)
            self._routes.append(route)

    def document(
        self,
        method: str,
        path: str,
        summary: str = '',
        *,
        body: Any = None,
        query: Iterable[ParamSchema] = (),
        path_vars: Iterable[ParamSchema] = (),
        response: Any = None,
    ):
        """Decorator form of `register` for view functions.

        The view is returned unchanged; registration happens at decoration time.
        """
        def outer(fn):
            doc_summary = (fn.__doc__ or '').strip().split('\n')[0]
            self.register(method, path, summary or doc_summary, body, query, path_vars, response)
            return fn
        return outer

    def list(self) -> Tuple[RouteDescriptor, ...]:
        with self._lock:
            return tuple(self._routes)

    def clear(self) -> None:
        with self._lock:
            self._routes.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)

    def __iter__(self) -> Iterator[RouteDescriptor]:
        return iter(self.list())


__all__ = ['RouteRegistry']
