"""
Core code generation components.

Provides the schema model, configuration, naming and the generator
base used by the TypeScript generator.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    Datamodel,
    DatamodelEnum,
    Field,
    FieldKind,
    Model,
    SchemaConsistencyError,
    convert_dmmf,
)
from .naming import NameMaps, apply_affixes, build_name_maps, find_name_collisions
from .config import (
    ConfigError,
    EnumType,
    GeneratorConfig,
    ModelType,
    OptionSpec,
    describe_options,
    load_config_file,
    resolve_config,
)
from .formatter import FormatterError, PrettierFormatter
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema system
    "Datamodel",
    "DatamodelEnum",
    "Field",
    "FieldKind",
    "Model",
    "SchemaConsistencyError",
    "convert_dmmf",
    # Naming
    "NameMaps",
    "apply_affixes",
    "build_name_maps",
    "find_name_collisions",
    # Configuration system
    "ConfigError",
    "EnumType",
    "GeneratorConfig",
    "ModelType",
    "OptionSpec",
    "describe_options",
    "load_config_file",
    "resolve_config",
    # External formatter
    "FormatterError",
    "PrettierFormatter",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
