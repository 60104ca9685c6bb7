"""Modular pieces for the OpenAPI document builder.

This package holds constants, schema classification and small helpers that
the main builder imports to keep the assembly loop readable.
"""

__all__ = [
    "constants",
    "helpers",
    "schemas",
]
