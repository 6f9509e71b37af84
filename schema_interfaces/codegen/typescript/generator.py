"""
TypeScript code generator implementation.

Generates dependency-free TypeScript declarations (enums, interfaces or
type aliases, and helper types) from a datamodel using templates.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from ...logging_config import get_logger
from ..core.config import EnumType, GeneratorConfig, ModelType
from ..core.formatter import PrettierFormatter
from ..core.generator import CodeGenerator
from ..core.naming import NameMaps, apply_affixes, build_name_maps, find_name_collisions
from ..core.schema import Datamodel, DatamodelEnum, Field, FieldKind, Model, SchemaConsistencyError
from .templates import TYPESCRIPT_TEMPLATES
from .types import CUSTOM_TYPES, resolve_scalar_type

logger = get_logger(__name__)

DEFAULT_OUTPUT = "interfaces.ts"
PRETTIER_PARSER = "typescript"
UNSUPPORTED_TYPE = "any"

ENUM_TEMPLATES = {
    EnumType.STRING_UNION: "enum_string_union.ts",
    EnumType.ENUM: "enum_native.ts",
    EnumType.OBJECT: "enum_object.ts",
}

MODEL_TEMPLATES = {
    ModelType.INTERFACE: "interface.ts",
    ModelType.TYPE: "type_alias.ts",
}


@dataclass(frozen=True)
class RenderedBlock:
    """A rendered declaration and the helper types it references, in first-use order."""

    code: str
    custom_types: Tuple[str, ...] = ()


def is_optional_field(field: Field, config: GeneratorConfig) -> bool:
    """Whether a field is rendered with the optional (``?``) marker."""
    if field.is_required:
        return False
    if field.is_relation:
        return config.optional_relations
    return config.optional_nullables


def merge_custom_types(blocks: Iterable[RenderedBlock]) -> List[str]:
    """Combine the helper types of several blocks, keeping first-use order."""
    merged = {}
    for block in blocks:
        merged.update(dict.fromkeys(block.custom_types))
    return list(merged)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces, type aliases and enums."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        output_path: Optional[Union[str, Path]] = None,
        formatter: Optional[PrettierFormatter] = None,
    ):
        """
        Initialize TypeScript generator.

        Args:
            config: Validated generator configuration
            output_path: Target file, used to locate the project's Prettier config
            formatter: Formatter to use when ``config.prettier`` is set
        """
        super().__init__(config)
        self.output_path = Path(output_path) if output_path else None
        self.formatter = formatter

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def get_templates(self) -> Mapping[str, str]:
        """Return the TypeScript declaration templates."""
        return TYPESCRIPT_TEMPLATES

    def generate(self, datamodel: Datamodel) -> str:
        """Generate the complete TypeScript file for a datamodel."""
        name_maps = build_name_maps(datamodel, self.config)

        enum_blocks = [self.render_enum(enum, name_maps) for enum in datamodel.enums]

        # Models and composite types share the same rendering rules
        model_blocks = [
            self.render_model(model, name_maps.models[model.name], name_maps)
            for model in datamodel.models
        ]
        model_blocks += [
            self.render_model(type_, name_maps.types[type_.name], name_maps)
            for type_ in datamodel.types
        ]

        custom_types = merge_custom_types(model_blocks)
        if custom_types:
            logger.debug("Adding helper types: %s", ", ".join(custom_types))

        blocks = enum_blocks
        blocks += [block.code for block in model_blocks]
        blocks += [CUSTOM_TYPES[token] for token in custom_types]

        logger.info(
            "Generated %d enum(s), %d model(s) and %d type(s)",
            len(datamodel.enums),
            len(datamodel.models),
            len(datamodel.types),
        )

        return self.render_template(
            "document.ts",
            {"header": self.config.header_comment, "blocks": blocks},
        )

    def render_enum(self, enum: DatamodelEnum, name_maps: NameMaps) -> str:
        """Render one enum in the configured shape."""
        template_name = ENUM_TEMPLATES.get(self.config.enum_type)
        if template_name is None:
            raise SchemaConsistencyError(f"Unknown enumType: {self.config.enum_type}")

        name = name_maps.enums[enum.name]
        logger.debug("Rendering enum %s as %s", name, self.config.enum_type.value)

        return self.render_template(
            template_name,
            {
                "export": "export " if self.config.export_enums else "",
                "name": name,
                "object_name": apply_affixes(
                    name, self.config.enum_object_prefix, self.config.enum_object_suffix
                ),
                "values": list(enum.values),
            },
        )

    def render_model(self, model: Model, name: str, name_maps: NameMaps) -> RenderedBlock:
        """
        Render one model or composite type.

        Args:
            model: Model or composite type to render
            name: Emitted declaration name
            name_maps: Name lookups for referenced enums, models and types

        Returns:
            RenderedBlock with the declaration and the helper types it uses
        """
        template_name = MODEL_TEMPLATES.get(self.config.model_type)
        if template_name is None:
            raise SchemaConsistencyError(f"Unknown modelType: {self.config.model_type}")

        logger.debug("Rendering %s (%d field(s))", name, len(model.fields))

        field_lines = []
        custom_types = []

        for field in model.fields:
            if field.is_relation and self.config.omit_relations:
                continue

            resolved_type = self._resolve_field_type(field, name_maps)

            if (
                field.kind == FieldKind.SCALAR
                and resolved_type in CUSTOM_TYPES
                and resolved_type not in custom_types
            ):
                custom_types.append(resolved_type)

            field_lines.append(self.render_field(field, resolved_type))

        code = self.render_template(template_name, {"name": name, "fields": field_lines})
        return RenderedBlock(code, tuple(custom_types))

    def render_field(self, field: Field, resolved_type: str) -> str:
        """Render one field line from its already resolved base type."""
        optional = is_optional_field(field, self.config)

        type_str = f"{resolved_type}[]" if field.is_list else resolved_type
        if not field.is_required and not optional:
            # Present but possibly without a value
            type_str = f"{type_str} | undefined"

        return self.render_template(
            "field.ts", {"name": field.name, "optional": optional, "type": type_str}
        )

    def _resolve_field_type(self, field: Field, name_maps: NameMaps) -> str:
        """Get the TypeScript base type of a field."""
        if field.kind == FieldKind.SCALAR:
            return resolve_scalar_type(field.type, self.config)
        elif field.kind == FieldKind.ENUM:
            return name_maps.resolve_enum(field.type)
        elif field.kind == FieldKind.OBJECT:
            return name_maps.resolve_relation(field.type)
        elif field.kind == FieldKind.UNSUPPORTED:
            return UNSUPPORTED_TYPE

        raise SchemaConsistencyError(f"Unknown field kind: {field.kind}")

    def validate_datamodel(self, datamodel: Datamodel) -> List[str]:
        """Validate the datamodel, adding declaration name collisions."""
        warnings = super().validate_datamodel(datamodel)

        collisions = find_name_collisions(build_name_maps(datamodel, self.config))
        for emitted, owners in collisions.items():
            logger.warning("Name collision on %s: %s", emitted, ", ".join(owners))
            warnings.append(
                f"Declaration name '{emitted}' is generated for {', '.join(owners)}"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """Run Prettier over the generated code when enabled."""
        if not self.config.prettier:
            return code

        formatter = self.formatter or PrettierFormatter()
        formatter.load()

        target = self.output_path or Path(DEFAULT_OUTPUT)

        config_path = None
        if self.config.resolve_prettier_config:
            config_path = formatter.resolve_config(target)

        logger.info("Formatting output with Prettier")
        return formatter.format(
            code, parser=PRETTIER_PARSER, config_path=config_path, file_path=target
        )
