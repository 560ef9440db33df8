"""
Kontent Model Generation Module

Generates TypeScript models from Kontent content type schemas.
"""

from typing import Optional

from .core.config import GenerationConfig, ConfigManager, load_config
from .core.errors import GeneratorError, RenderFailure, WriteFailure
from .core.generator import GeneratedModel, ModelGenerator
from .core.naming import InvalidConfiguration, NamingConvention, resolve_name
from .core.schema import (
    ContentTypeSchema,
    ElementKind,
    ElementSchema,
    convert_delivery_types,
)
from .delivery import DeliveryModelGenerator, UnsupportedElementKind, map_kind
from .orchestrator import (
    GenerationOrchestrator,
    GenerationState,
    Reporter,
    generate_models,
)


# Convenience functions
def render_model(
    content_type: ContentTypeSchema, config: Optional[GenerationConfig] = None
) -> GeneratedModel:
    """
    Render a single content type without writing it.

    Args:
        content_type: Content type to render
        config: Generation settings, defaults when omitted

    Returns:
        GeneratedModel with file name and formatted source
    """
    return DeliveryModelGenerator(config).build(content_type)


# Export main interfaces
__all__ = [
    "GenerationConfig",
    "ConfigManager",
    "load_config",
    "GeneratorError",
    "RenderFailure",
    "WriteFailure",
    "UnsupportedElementKind",
    "InvalidConfiguration",
    "GeneratedModel",
    "ModelGenerator",
    "DeliveryModelGenerator",
    "NamingConvention",
    "resolve_name",
    "ContentTypeSchema",
    "ElementSchema",
    "ElementKind",
    "convert_delivery_types",
    "map_kind",
    "GenerationOrchestrator",
    "GenerationState",
    "Reporter",
    "generate_models",
    "render_model",
]
