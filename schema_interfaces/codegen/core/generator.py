"""
Base generator interface for code generation targets.

Defines the contract a generator implements and the error-handling
wrapper that turns a run into a GenerationResult.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Mapping, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .formatter import FormatterError
from .schema import Datamodel, SchemaConsistencyError
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_templates())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_templates(self) -> Mapping[str, str]:
        """
        Return the in-memory templates used by this generator.

        Returns:
            Template name to template source
        """
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, datamodel: Datamodel) -> str:
        """
        Generate the complete document for a datamodel.

        Args:
            datamodel: Schema to generate code for

        Returns:
            Generated code as a string
        """
        pass

    def validate_datamodel(self, datamodel: Datamodel) -> List[str]:
        """
        Report structural oddities that do not stop generation.

        Args:
            datamodel: Schema to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for model in datamodel.models + datamodel.types:
            if not model.fields:
                warnings.append(f"'{model.name}' has no fields")

        for enum in datamodel.enums:
            if not enum.values:
                warnings.append(f"Enum '{enum.name}' has no values")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply final formatting to generated code.

        Args:
            code: Assembled code

        Returns:
            Formatted code
        """
        return code

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render one of this generator's templates."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, datamodel: Datamodel) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    A failed run yields no code at all.

    Args:
        generator: Code generator instance
        datamodel: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_datamodel(datamodel)

        code = generator.generate(datamodel)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            **datamodel.get_summary(),
            "formatted": generator.config.prettier,
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except (SchemaConsistencyError, FormatterError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
