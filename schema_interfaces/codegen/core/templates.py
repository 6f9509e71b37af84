"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with the filters the declaration templates rely on.
"""

from typing import Any, Dict, Mapping, Optional

from jinja2 import DictLoader, Environment, StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
        """
        self._env = None
        self._setup_environment(templates or {})

    def _setup_environment(self, templates: Mapping[str, str]):
        """Setup Jinja2 environment with code generation utilities."""
        # Output is TypeScript, not markup: no escaping, exact whitespace
        self._env = Environment(
            loader=DictLoader(dict(templates)),
            autoescape=False,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["quote"] = self._quote_filter
        self._env.filters["comment"] = self._comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    # Template filters for code generation

    def _quote_filter(self, value: Any) -> str:
        """Render a value as a double-quoted string literal."""
        return f'"{value}"'

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Prefix every line with a line comment marker."""
        return "\n".join(f"{style} {line}" for line in str(value).split("\n"))


def create_template_engine(templates: Optional[Mapping[str, str]] = None) -> TemplateEngine:
    """Create a template engine holding the given in-memory templates."""
    return TemplateEngine(templates)
