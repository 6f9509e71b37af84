"""
Configuration management for code generation.

The host hands over generator options as a flat mapping of strings. This
module merges them over the defaults, coerces the string-encoded booleans
and validates every closed-choice option, producing one immutable
GeneratorConfig.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_HEADER_COMMENT = "This file was auto-generated by schema-interfaces"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


class ModelType(Enum):
    """Declaration shape used for models and composite types."""

    INTERFACE = "interface"
    TYPE = "type"


class EnumType(Enum):
    """Declaration shape used for enums."""

    STRING_UNION = "stringUnion"
    ENUM = "enum"
    OBJECT = "object"


DATE_TYPES = ("Date", "string", "number")
BIG_INT_TYPES = ("bigint", "string", "number")
DECIMAL_TYPES = ("Decimal", "string", "number")
BYTES_TYPES = ("Uint8Array", "Buffer", "ArrayObject", "BufferObject", "string", "number[]")


@dataclass(frozen=True)
class GeneratorConfig:
    """Validated rendering policy for one generation run."""

    # Naming affixes
    enum_prefix: str = ""
    enum_suffix: str = ""
    enum_object_prefix: str = ""
    enum_object_suffix: str = ""
    model_prefix: str = ""
    model_suffix: str = ""
    type_prefix: str = ""
    type_suffix: str = ""

    header_comment: str = DEFAULT_HEADER_COMMENT

    # Output shapes
    model_type: ModelType = ModelType.INTERFACE
    enum_type: EnumType = EnumType.STRING_UNION

    # Scalar representations
    date_type: str = "Date"
    big_int_type: str = "bigint"
    decimal_type: str = "Decimal"
    bytes_type: str = "Uint8Array"

    # Field policy
    export_enums: bool = True
    optional_relations: bool = True
    omit_relations: bool = False
    optional_nullables: bool = False

    # External formatter
    prettier: bool = False
    resolve_prettier_config: bool = True

    def __post_init__(self):
        # Shape selectors may be given as their raw option values
        object.__setattr__(self, "model_type", ModelType(self.model_type))
        object.__setattr__(self, "enum_type", EnumType(self.enum_type))


@dataclass(frozen=True)
class OptionSpec:
    """One raw host option and how it becomes a GeneratorConfig attribute."""

    key: str
    attr: str
    default: str
    parse: Callable[[str], Any]
    choices: Tuple[str, ...] = ()
    description: str = ""

    def resolve(self, raw: Optional[str]) -> Any:
        """Parse the raw value, falling back to the default when absent."""
        return self.parse(self.default if raw is None else raw)

    def validate(self, raw: str) -> Optional[str]:
        """Return an error message for an invalid raw value, None when valid."""
        if not isinstance(raw, str):
            return f"Invalid {self.key}: expected a string, got {type(raw).__name__}"
        if self.choices and raw not in self.choices:
            return f"Invalid {self.key}: {raw}"
        return None


def _text(key: str, attr: str, description: str, default: str = "") -> OptionSpec:
    return OptionSpec(key, attr, default, str, description=description)


def _choice(
    key: str,
    attr: str,
    choices: Tuple[str, ...],
    description: str,
    convert: Callable[[str], Any] = str,
) -> OptionSpec:
    return OptionSpec(key, attr, choices[0], convert, choices, description)


def _flag(key: str, attr: str, default: bool, description: str) -> OptionSpec:
    # Only the literal opposite of the default flips a flag
    if default:
        parse = lambda raw: raw != "false"
    else:
        parse = lambda raw: raw == "true"
    return OptionSpec(key, attr, "true" if default else "false", parse, (), description)


OPTION_SPECS: Tuple[OptionSpec, ...] = (
    _text("enumPrefix", "enum_prefix", "Prefix for enum names"),
    _text("enumSuffix", "enum_suffix", "Suffix for enum names"),
    _text("enumObjectPrefix", "enum_object_prefix", "Prefix for enum objects (enumType=object)"),
    _text("enumObjectSuffix", "enum_object_suffix", "Suffix for enum objects (enumType=object)"),
    _text("modelPrefix", "model_prefix", "Prefix for model names"),
    _text("modelSuffix", "model_suffix", "Suffix for model names"),
    _text("typePrefix", "type_prefix", "Prefix for composite type names"),
    _text("typeSuffix", "type_suffix", "Suffix for composite type names"),
    _text(
        "headerComment",
        "header_comment",
        "Comment placed at the top of the file",
        DEFAULT_HEADER_COMMENT,
    ),
    _choice(
        "modelType",
        "model_type",
        tuple(m.value for m in ModelType),
        "Declaration used for models",
        ModelType,
    ),
    _choice(
        "enumType",
        "enum_type",
        tuple(e.value for e in EnumType),
        "Declaration used for enums",
        EnumType,
    ),
    _choice("dateType", "date_type", DATE_TYPES, "Type used for DateTime fields"),
    _choice("bigIntType", "big_int_type", BIG_INT_TYPES, "Type used for BigInt fields"),
    _choice("decimalType", "decimal_type", DECIMAL_TYPES, "Type used for Decimal fields"),
    _choice("bytesType", "bytes_type", BYTES_TYPES, "Type used for Bytes fields"),
    _flag("exportEnums", "export_enums", True, "Export enum declarations"),
    _flag(
        "optionalRelations",
        "optional_relations",
        True,
        "Mark nullable relation fields optional (?)",
    ),
    _flag("omitRelations", "omit_relations", False, "Leave relation fields out"),
    _flag(
        "optionalNullables",
        "optional_nullables",
        False,
        "Mark nullable scalar fields optional (?)",
    ),
    _flag("prettier", "prettier", False, "Format the output with Prettier"),
    _flag(
        "resolvePrettierConfig",
        "resolve_prettier_config",
        True,
        "Use the project's Prettier config file",
    ),
)

_SPECS_BY_KEY: Dict[str, OptionSpec] = {spec.key: spec for spec in OPTION_SPECS}


def resolve_config(raw_options: Optional[Mapping[str, Any]] = None) -> GeneratorConfig:
    """
    Build a validated configuration from raw host options.

    Args:
        raw_options: Option name to raw string value; absent keys use defaults

    Returns:
        Immutable GeneratorConfig

    Raises:
        ConfigError: Listing every invalid option at once
    """
    raw_options = dict(raw_options or {})

    unknown = sorted(key for key in raw_options if key not in _SPECS_BY_KEY)
    for key in unknown:
        logger.warning("Ignoring unknown generator option: %s", key)

    errors = []
    values: Dict[str, Any] = {}

    for spec in OPTION_SPECS:
        raw = raw_options.get(spec.key)
        if raw is not None:
            error = spec.validate(raw)
            if error:
                errors.append(error)
                continue
        values[spec.attr] = spec.resolve(raw)

    if errors:
        logger.error("Invalid generator configuration (%d problem(s))", len(errors))
        raise ConfigError(errors)

    config = GeneratorConfig(**values)
    logger.debug("Resolved configuration: %s", config)
    return config


def describe_options() -> Iterator[OptionSpec]:
    """Iterate over the supported options in declaration order."""
    return iter(OPTION_SPECS)


def load_config_file(config_path: Union[str, Path]) -> Dict[str, str]:
    """
    Load raw generator options from a JSON file.

    Scalar JSON values are converted to the strings a host would pass
    (``true`` becomes ``"true"``).

    Raises:
        ConfigError: If the file is missing, not JSON or not an object
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    logger.info("Loaded %d option(s) from %s", len(config), path)
    return stringify_options(config)


def stringify_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert JSON option values to host strings, dropping nulls."""
    return {
        key: stringify_option(value) for key, value in options.items() if value is not None
    }


def stringify_option(value: Any) -> Any:
    """Convert a JSON scalar to its host string form; other values pass through."""
    if isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, (int, float)):
        return str(value)
    return value
