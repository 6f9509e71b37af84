"""
Core schema representation for code generation.

Converts a DMMF-style datamodel document into a normalized, read-only
internal format that the TypeScript generator works with.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum


class SchemaConsistencyError(Exception):
    """Raised when the schema document does not match what the generator expects."""

    pass


class FieldKind(Enum):
    """Kinds of fields a datamodel can describe."""

    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"  # Relation to a model or composite type
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class Field:
    """Represents a single field of a model or composite type."""

    name: str
    kind: FieldKind
    type: str  # Scalar name, enum name or model/type name depending on kind
    is_required: bool = False
    is_list: bool = False

    @property
    def is_relation(self) -> bool:
        """Whether the field references another model or composite type."""
        return self.kind == FieldKind.OBJECT


@dataclass(frozen=True)
class Model:
    """A model or composite type with its ordered fields."""

    name: str
    fields: Tuple[Field, ...] = ()


@dataclass(frozen=True)
class DatamodelEnum:
    """An enumeration and its ordered value names."""

    name: str
    values: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Datamodel:
    """The complete schema handed to the generator."""

    enums: Tuple[DatamodelEnum, ...] = ()
    models: Tuple[Model, ...] = ()
    types: Tuple[Model, ...] = field(default=())

    def get_summary(self) -> Dict[str, int]:
        """Get item counts for reporting."""
        return {
            "enums": len(self.enums),
            "models": len(self.models),
            "types": len(self.types),
            "fields": sum(len(m.fields) for m in self.models + self.types),
        }


def convert_dmmf(document: Dict[str, Any]) -> Datamodel:
    """
    Convert a DMMF-style document to the internal Datamodel representation.

    Accepts a full generator options document (``{"dmmf": {"datamodel": ...}}``),
    a ``{"datamodel": ...}`` wrapper, or the datamodel object itself.

    Args:
        document: Parsed JSON document

    Returns:
        Datamodel: Normalized, immutable schema

    Raises:
        SchemaConsistencyError: If the document structure is not understood
    """
    datamodel = _unwrap_datamodel(document)

    def parse_kind(raw_kind: Any) -> FieldKind:
        try:
            return FieldKind(raw_kind)
        except ValueError:
            raise SchemaConsistencyError(f"Unknown field kind: {raw_kind}") from None

    def convert_field(field_data: Dict[str, Any], owner: str) -> Field:
        if not isinstance(field_data, dict) or "name" not in field_data:
            raise SchemaConsistencyError(f"Malformed field in {owner}: {field_data!r}")

        return Field(
            name=field_data["name"],
            kind=parse_kind(field_data.get("kind")),
            type=field_data.get("type", ""),
            is_required=bool(field_data.get("isRequired", False)),
            is_list=bool(field_data.get("isList", False)),
        )

    def convert_model(model_data: Dict[str, Any]) -> Model:
        if not isinstance(model_data, dict) or "name" not in model_data:
            raise SchemaConsistencyError(f"Malformed model: {model_data!r}")

        name = model_data["name"]
        fields = tuple(
            convert_field(field_data, name)
            for field_data in _get_list(model_data, "fields", name)
        )
        return Model(name=name, fields=fields)

    def convert_enum(enum_data: Dict[str, Any]) -> DatamodelEnum:
        if not isinstance(enum_data, dict) or "name" not in enum_data:
            raise SchemaConsistencyError(f"Malformed enum: {enum_data!r}")

        name = enum_data["name"]
        values = []
        for value in _get_list(enum_data, "values", name):
            # Values are objects in DMMF, plain strings are accepted too
            if isinstance(value, dict) and "name" in value:
                values.append(value["name"])
            elif isinstance(value, str):
                values.append(value)
            else:
                raise SchemaConsistencyError(f"Malformed value of enum {name}: {value!r}")
        return DatamodelEnum(name=name, values=tuple(values))

    return Datamodel(
        enums=tuple(convert_enum(e) for e in _get_list(datamodel, "enums", "datamodel")),
        models=tuple(
            convert_model(m) for m in _get_list(datamodel, "models", "datamodel")
        ),
        types=tuple(convert_model(t) for t in _get_list(datamodel, "types", "datamodel")),
    )


def _unwrap_datamodel(document: Any) -> Dict[str, Any]:
    """Find the datamodel object inside the supported envelopes."""
    if not isinstance(document, dict):
        raise SchemaConsistencyError(
            f"Expected a JSON object, got {type(document).__name__}"
        )

    if isinstance(document.get("dmmf"), dict):
        document = document["dmmf"]

    if "datamodel" in document:
        document = document["datamodel"]
        if not isinstance(document, dict):
            raise SchemaConsistencyError("'datamodel' must be a JSON object")

    return document


def _get_list(data: Dict[str, Any], key: str, owner: str) -> List[Any]:
    """Get a list member, treating a missing key as empty."""
    value = data.get(key) or []
    if not isinstance(value, list):
        raise SchemaConsistencyError(f"'{key}' of {owner} must be a list")
    return value
