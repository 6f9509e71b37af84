"""
TypeScript code generator module.

Generates zero-dependency TypeScript declarations from a datamodel.
"""

from .generator import (
    DEFAULT_OUTPUT,
    RenderedBlock,
    TypeScriptGenerator,
    is_optional_field,
    merge_custom_types,
)
from .types import (
    CUSTOM_TYPES,
    SCALAR_TYPE_GETTERS,
    ScalarType,
    parse_scalar_type,
    resolve_scalar_type,
)

__all__ = [
    # Generator
    "TypeScriptGenerator",
    "RenderedBlock",
    "DEFAULT_OUTPUT",
    "is_optional_field",
    "merge_custom_types",
    # Types
    "ScalarType",
    "SCALAR_TYPE_GETTERS",
    "CUSTOM_TYPES",
    "parse_scalar_type",
    "resolve_scalar_type",
]
