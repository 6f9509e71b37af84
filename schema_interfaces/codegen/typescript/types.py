"""
TypeScript type mappings.

Maps datamodel scalars to TypeScript types and holds the standalone
declarations emitted for helper types, so that the generated file never
imports anything.
"""

from typing import Callable, Dict
from enum import Enum

from ..core.config import GeneratorConfig
from ..core.schema import SchemaConsistencyError


class ScalarType(Enum):
    """Scalar types a datamodel field can hold."""

    STRING = "String"
    BOOLEAN = "Boolean"
    INT = "Int"
    FLOAT = "Float"
    JSON = "Json"
    DATE_TIME = "DateTime"
    BIG_INT = "BigInt"
    DECIMAL = "Decimal"
    BYTES = "Bytes"


# Scalar to TypeScript type, some depending on configuration
SCALAR_TYPE_GETTERS: Dict[ScalarType, Callable[[GeneratorConfig], str]] = {
    ScalarType.STRING: lambda config: "string",
    ScalarType.BOOLEAN: lambda config: "boolean",
    ScalarType.INT: lambda config: "number",
    ScalarType.FLOAT: lambda config: "number",
    ScalarType.JSON: lambda config: "JsonValue",
    ScalarType.DATE_TIME: lambda config: config.date_type,
    ScalarType.BIG_INT: lambda config: config.big_int_type,
    ScalarType.DECIMAL: lambda config: config.decimal_type,
    ScalarType.BYTES: lambda config: config.bytes_type,
}

# Structural stand-ins for library types. They are compatible with the real
# runtime values; users needing the library types can cast.
CUSTOM_TYPES: Dict[str, str] = {
    "ArrayObject": "type ArrayObject = { [index: number]: number } & { length?: never };",
    "BufferObject": 'type BufferObject = { type: "Buffer"; data: number[] };',
    "Decimal": "type Decimal = { valueOf(): string };",
    "JsonValue": (
        "type JsonValue = string | number | boolean | { [key in string]?: JsonValue }"
        " | Array<JsonValue> | null;"
    ),
}


def parse_scalar_type(type_name: str) -> ScalarType:
    """Parse a scalar name from the datamodel."""
    try:
        return ScalarType(type_name)
    except ValueError:
        raise SchemaConsistencyError(f"Unknown scalar type: {type_name}") from None


def resolve_scalar_type(type_name: str, config: GeneratorConfig) -> str:
    """
    Get the TypeScript type for a scalar.

    Args:
        type_name: Scalar name as found in the datamodel (e.g. "DateTime")
        config: Generator configuration

    Returns:
        TypeScript type token

    Raises:
        SchemaConsistencyError: If the scalar is not known
    """
    return SCALAR_TYPE_GETTERS[parse_scalar_type(type_name)](config)
