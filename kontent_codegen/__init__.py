"""
kontent-codegen

Generates strongly typed TypeScript models from the content types of a
Kontent project.
"""

__version__ = "0.1.0"

from .codegen import (  # noqa: E402
    ContentTypeSchema,
    DeliveryModelGenerator,
    ElementSchema,
    GeneratedModel,
    GenerationConfig,
    GenerationOrchestrator,
    Reporter,
    generate_models,
    load_config,
    render_model,
)
from .utils import DeliveryClient, FetchFailure, load_types_from_file  # noqa: E402

__all__ = [
    "__version__",
    "ContentTypeSchema",
    "ElementSchema",
    "GeneratedModel",
    "GenerationConfig",
    "GenerationOrchestrator",
    "DeliveryModelGenerator",
    "Reporter",
    "generate_models",
    "load_config",
    "render_model",
    "DeliveryClient",
    "FetchFailure",
    "load_types_from_file",
]
