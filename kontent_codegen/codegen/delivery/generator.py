"""
Delivery model generator implementation.

Generates one TypeScript model per content type, typed with the element
types of the Kontent Delivery SDK.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..core.config import GenerationConfig
from ..core.formatter import CodeFormatter
from ..core.generator import ModelGenerator
from ..core.naming import resolve_file_stem, resolve_name, to_pascal_case
from ..core.schema import ContentTypeSchema, ElementSchema
from .types import DeliveryTypeMapper, ElementType
from ... import __version__

MODEL_TEMPLATE = "delivery_model.ts.j2"


class DeliveryModelGenerator(ModelGenerator):
    """Code generator for Delivery SDK content item models."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        formatter: Optional[CodeFormatter] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize Delivery model generator with configuration."""
        super().__init__(config, formatter)
        self.type_mapper = DeliveryTypeMapper(strict=self.config.strict_element_kinds)
        self.clock = clock

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def render(self, content_type: ContentTypeSchema) -> str:
        """Generate the formatted model source for a content type."""
        elements = self._generate_elements(content_type)

        context = {
            "note": self.get_autogenerate_note(),
            "imports": self.type_mapper.get_all_imports(t for _, t in elements),
            "sdk_module": self.config.sdk_module,
            "type_name": to_pascal_case(content_type.codename),
            "elements_code": self.get_elements_code(elements),
        }

        code = self.render_template(MODEL_TEMPLATE, context)
        return self.format_code(code)

    def get_autogenerate_note(self) -> str:
        """Header placed at the top of every generated file."""
        note = (
            f"This file has been auto-generated by kontent-codegen {__version__}. "
            "Do not edit it manually."
        )
        if self.config.add_timestamp:
            timestamp = self.clock().isoformat(timespec="seconds")
            note += f" Generated at {timestamp}."
        return note

    def _generate_elements(
        self, content_type: ContentTypeSchema
    ) -> List[Tuple[str, ElementType]]:
        """Resolve names and types of all mappable elements, in order."""
        elements = []
        for element in content_type.elements:
            element_type = self.type_mapper.map_element(
                element.kind, f"{content_type.codename}.{element.codename}"
            )
            if element_type is None:
                continue
            elements.append((self.get_element_name(content_type, element), element_type))
        return elements

    def get_elements_code(self, elements: List[Tuple[str, ElementType]]) -> str:
        """One 'name: Type;' line per element, without a trailing newline."""
        return "\n".join(f"{name}: {element_type.name};" for name, element_type in elements)

    def get_element_name(self, content_type: ContentTypeSchema, element: ElementSchema) -> str:
        """Resolve the property name of an element."""
        return resolve_name(
            element.codename, self.config.element_resolver, context=content_type.codename
        )

    def plan_filename(self, content_type: ContentTypeSchema) -> str:
        """Return the model file name for a content type."""
        stem = resolve_file_stem(
            content_type.codename, self.config.file_resolver, content_type
        )
        return f"{stem}{self.file_extension}"


def create_delivery_generator(
    config: Optional[GenerationConfig] = None, **overrides
) -> DeliveryModelGenerator:
    """
    Create a Delivery model generator.

    Args:
        config: Base configuration, defaults when omitted
        **overrides: GenerationConfig fields to override

    Returns:
        Configured generator
    """
    if overrides:
        from dataclasses import replace

        config = replace(config or GenerationConfig(), **overrides)
    return DeliveryModelGenerator(config)
