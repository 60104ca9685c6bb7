"""Error types raised at the edges of the documentation service.

The builder itself never raises; these belong to the registry and the HTTP
layer.
"""
from werkzeug.exceptions import InternalServerError


class InvalidDescriptorError(ValueError):
    """A strict registry rejected a descriptor with an empty method or path."""


class SerializationError(InternalServerError):
    """The assembled document could not be encoded as JSON.

    Subclasses werkzeug's 500 so the app-wide error handler renders it with
    the standard error payload.
    """

    description = 'OpenAPI document could not be serialized'


__all__ = ['InvalidDescriptorError', 'SerializationError']
