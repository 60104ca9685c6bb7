"""Response schema classification.

A schema value is any JSON-compatible object handed in at registration time.
Only one question is ever asked about it: does it describe a collection?

Collections are recognized structurally:
- `ArrayOf(items)` is the explicit variant and always counts.
- a `list` / `tuple` value counts; its first element describes one item.

Dicts are never collections, even `{"type": "array", ...}`, so normalizing
an already wrapped schema is a no-op.

`ArrayOf` may appear anywhere inside a schema (object properties, list
elements); `render_schema` replaces every occurrence with its JSON form.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Set


@dataclass(frozen=True)
class ArrayOf:
    """Explicit "list of `items`" schema value."""

    items: Any


def is_collection(schema: Any) -> bool:
    return isinstance(schema, (ArrayOf, list, tuple))


def element_schema(schema: Any, _active: Optional[Set[int]] = None) -> Any:
    """Return the schema describing one element of a collection value.

    Empty sequences carry no element shape and map to `{}` (any value).
    Longer sequences are assumed homogeneous; the first entry wins.
    """
    if isinstance(schema, ArrayOf):
        return render_schema(schema.items, _active)
    if not schema:
        return {}
    return render_schema(schema[0], _active)


def array_schema(items: Any) -> Dict[str, Any]:
    return {"type": "array", "items": items}


def render_schema(schema: Any, _active: Optional[Set[int]] = None) -> Any:
    """Expand every nested `ArrayOf` into its JSON form.

    Containers without an `ArrayOf` inside are returned as the same object.
    A container already being rendered further up is left untouched, so a
    cyclic value stays cyclic and fails later at JSON encoding.
    """
    if isinstance(schema, ArrayOf):
        return array_schema(element_schema(schema, _active))
    if not isinstance(schema, (dict, list, tuple)):
        return schema

    active = _active if _active is not None else set()
    key = id(schema)
    if key in active:
        return schema
    active.add(key)
    try:
        if isinstance(schema, dict):
            rendered = {k: render_schema(v, active) for k, v in schema.items()}
            changed = any(rendered[k] is not v for k, v in schema.items())
        else:
            items = [render_schema(v, active) for v in schema]
            changed = any(new is not old for new, old in zip(items, schema))
            rendered = items if isinstance(schema, list) else tuple(items)
    finally:
        active.discard(key)
    return rendered if changed else schema


def normalize_response_schema(schema: Any) -> Optional[Any]:
    if schema is None:
        return None
    if is_collection(schema):
        return array_schema(element_schema(schema))
    # single record or opaque value
    return render_schema(schema)


__all__ = [
    "ArrayOf",
    "is_collection",
    "element_schema",
    "array_schema",
    "render_schema",
    "normalize_response_schema",
]
