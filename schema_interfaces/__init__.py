"""Generate dependency-free TypeScript declarations from Prisma DMMF documents."""

__version__ = "0.1.0"

from .codegen import (
    MANIFEST,
    ConfigError,
    GenerationResult,
    GeneratorError,
    generate_from_dmmf,
    generate_to_file,
    quick_generate,
)

__all__ = [
    "MANIFEST",
    "ConfigError",
    "GenerationResult",
    "GeneratorError",
    "generate_from_dmmf",
    "generate_to_file",
    "quick_generate",
]
