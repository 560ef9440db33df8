"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Any, Dict

from jinja2 import DictLoader, Environment, TemplateNotFound

from .errors import RenderFailure


class TemplateError(RenderFailure):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self):
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        # Generated TypeScript must not be HTML-escaped
        self._env = Environment(
            loader=DictLoader({}),
            autoescape=False,
            lstrip_blocks=True,
        )

        # Add custom filters for code generation
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["doc_comment"] = self._doc_comment_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {template_name}") from e
        except Exception as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template.

        Args:
            name: Template name
            content: Template content
        """
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False

    # Template filters for code generation

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all non-empty lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _doc_comment_filter(self, value: str) -> str:
        """Wrap text in a /** ... */ block comment."""
        lines = str(value).split("\n")
        body = "\n".join(f" * {line}" if line.strip() else " *" for line in lines)
        return f"/**\n{body}\n */"


# Built-in templates

DELIVERY_MODEL_TEMPLATE = """\
{{ note | doc_comment }}
import { {{ imports | join(", ") }} } from '{{ sdk_module }}';

export type {{ type_name }} = IContentItem<{
{%- if elements_code %}
{{ elements_code | indent(4) }}
{%- endif %}
}>;
"""


def create_template_engine() -> TemplateEngine:
    """Create a template engine with the built-in templates registered."""
    engine = TemplateEngine()
    engine.add_template("delivery_model.ts.j2", DELIVERY_MODEL_TEMPLATE)
    return engine
