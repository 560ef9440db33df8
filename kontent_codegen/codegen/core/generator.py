"""
Base generator interface for model generation targets.

Defines the contract that model generators implement and the
GeneratedModel container they produce.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .config import GenerationConfig
from .errors import GeneratorError, RenderFailure, WriteFailure
from .formatter import CodeFormatter, create_formatter
from .schema import ContentTypeSchema
from .templates import TemplateEngine, create_template_engine

__all__ = [
    "GeneratorError",
    "RenderFailure",
    "WriteFailure",
    "GeneratedModel",
    "ModelGenerator",
]


@dataclass(frozen=True)
class GeneratedModel:
    """Rendered source of one content type and the file it belongs in."""

    filename: str
    content: str
    content_type: ContentTypeSchema


class ModelGenerator(ABC):
    """Abstract base class for model generators."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        formatter: Optional[CodeFormatter] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Generation settings, defaults when omitted
            formatter: Formatter override, built from the config when omitted
        """
        self.config = config or GenerationConfig()
        self.formatter = formatter or create_formatter(
            self.config.formatter, self.config.effective_format_options()
        )
        self._template_engine = None

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine()
        return self._template_engine

    @abstractmethod
    def render(self, content_type: ContentTypeSchema) -> str:
        """
        Render the formatted source for one content type.

        Args:
            content_type: Content type to generate a model for

        Returns:
            Formatted source text
        """
        pass

    @abstractmethod
    def plan_filename(self, content_type: ContentTypeSchema) -> str:
        """Return the output file name for a content type."""
        pass

    def format_code(self, code: str) -> str:
        """Run the configured formatter; its errors are not caught here."""
        return self.formatter.format(code)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def build(self, content_type: ContentTypeSchema) -> GeneratedModel:
        """Render a content type and plan its file name."""
        if content_type is None:
            raise RenderFailure("Invalid content type")

        content = self.render(content_type)
        return GeneratedModel(
            filename=self.plan_filename(content_type),
            content=content,
            content_type=content_type,
        )

    def write(
        self, model: GeneratedModel, output_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Write a generated model, replacing any existing file.

        Args:
            model: Model to write
            output_dir: Target directory, the configured output_dir by default

        Returns:
            Path of the written file

        Raises:
            WriteFailure: If the file cannot be written
        """
        directory = Path(output_dir if output_dir is not None else self.config.output_dir)
        path = directory / model.filename

        try:
            path.write_text(model.content, encoding="utf-8")
        except OSError as e:
            raise WriteFailure(model.filename, e) from e

        return path
