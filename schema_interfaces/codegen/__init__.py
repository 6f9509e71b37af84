"""
Schema Interfaces Code Generation Module

Generates dependency-free TypeScript declarations from a DMMF datamodel.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..logging_config import get_logger
from ..utils import write_output
from .core.generator import GenerationResult, GeneratorError, generate_code
from .core.schema import SchemaConsistencyError, convert_dmmf
from .core.config import ConfigError, GeneratorConfig, resolve_config, stringify_options
from .core.formatter import FormatterError, PrettierFormatter
from .typescript import DEFAULT_OUTPUT, TypeScriptGenerator

logger = get_logger(__name__)

MANIFEST = {
    "prettyName": "Typescript Interfaces",
    "defaultOutput": DEFAULT_OUTPUT,
}


def get_document_options(document: Dict[str, Any]) -> Tuple[Dict[str, Any], Optional[str]]:
    """
    Extract generator options and output path from a generator options document.

    Documents without a ``generator`` section yield no options and no path.

    Returns:
        Tuple of (raw options, output path or None)
    """
    generator = document.get("generator") if isinstance(document, dict) else None
    if not isinstance(generator, dict):
        return {}, None

    options = generator.get("config") or {}
    if not isinstance(options, dict):
        raise ConfigError("'generator.config' must be a JSON object")

    output = generator.get("output")
    if isinstance(output, dict):
        output = output.get("value")

    return stringify_options(options), output or None


def generate_from_dmmf(
    dmmf: Dict[str, Any],
    options: Optional[Mapping[str, Any]] = None,
    output_path: Optional[Union[str, Path]] = None,
    formatter: Optional[PrettierFormatter] = None,
) -> GenerationResult:
    """
    Generate TypeScript from a DMMF document.

    Args:
        dmmf: DMMF document (options envelope, ``{"datamodel": ...}`` or datamodel)
        options: Raw generator options (string values)
        output_path: Target file path, used for Prettier config resolution
        formatter: Formatter override, defaults to the prettier CLI

    Returns:
        GenerationResult with generated code

    Raises:
        ConfigError: If any option is invalid; raised before the schema is read
    """
    config = resolve_config(options)
    generator = TypeScriptGenerator(config, output_path=output_path, formatter=formatter)

    try:
        datamodel = convert_dmmf(dmmf)
    except SchemaConsistencyError as e:
        logger.error("Invalid schema document: %s", e)
        return GenerationResult.error(f"Invalid schema document: {e}", exception=e)

    return generate_code(generator, datamodel)


def quick_generate(dmmf: Dict[str, Any], **options) -> str:
    """
    Quick code generation from a DMMF document.

    Args:
        dmmf: DMMF document
        **options: Raw generator options, e.g. ``enumType="enum"``

    Returns:
        Generated code string
    """
    result = generate_from_dmmf(dmmf, options)

    if result.success:
        return result.code
    raise GeneratorError(result.error_message) from result.exception


def generate_to_file(
    dmmf: Dict[str, Any],
    output_path: Union[str, Path],
    options: Optional[Mapping[str, Any]] = None,
    formatter: Optional[PrettierFormatter] = None,
) -> GenerationResult:
    """
    Generate TypeScript and write it to ``output_path``.

    Nothing is written unless generation fully succeeds.

    Raises:
        ConfigError: If any option is invalid
        GeneratorError: If generation fails
    """
    result = generate_from_dmmf(dmmf, options, output_path, formatter)
    if not result.success:
        raise GeneratorError(result.error_message) from result.exception

    written = write_output(output_path, result.code)
    result.metadata["output_file"] = str(written)
    return result


__version__ = "0.1.0"

__all__ = [
    "MANIFEST",
    "ConfigError",
    "FormatterError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "SchemaConsistencyError",
    "TypeScriptGenerator",
    "generate_from_dmmf",
    "generate_to_file",
    "get_document_options",
    "quick_generate",
    "resolve_config",
]
