"""Helper functions for the OpenAPI document builder.

These are deliberately tiny so the builder loop reads top to bottom. Each call
returns freshly allocated dicts; nothing here is shared between operations.
"""
from typing import Any, Dict, Iterable, List

from .constants import JSON_MEDIA_TYPE, SUCCESS_DESCRIPTION, SUCCESS_STATUS


def json_content(schema: Any) -> Dict[str, Any]:
    return {JSON_MEDIA_TYPE: {"schema": schema}}


def success_responses(schema: Any) -> Dict[str, Any]:
    return {
        SUCCESS_STATUS: {
            "description": SUCCESS_DESCRIPTION,
            "content": json_content(schema),
        }
    }


def request_body(schema: Any) -> Dict[str, Any]:
    return {"content": json_content(schema)}


def parameter_object(param, location: str) -> Dict[str, Any]:
    return {
        "name": param.name,
        "in": location,
        "required": param.required,
        "schema": {"type": param.type},
        "description": param.description,
    }


def parameter_list(params: Iterable, location: str) -> List[Dict[str, Any]]:
    return [parameter_object(p, location) for p in params]


__all__ = ["json_content", "success_responses", "request_body", "parameter_object", "parameter_list"]
