"""
Core code generation components.

Provides base classes and utilities used by the model generators.
"""

from .errors import GeneratorError, RenderFailure, WriteFailure
from .generator import GeneratedModel, ModelGenerator
from .schema import (
    ContentTypeSchema,
    ElementKind,
    ElementSchema,
    SchemaError,
    convert_delivery_types,
)
from .naming import (
    CustomResolver,
    InvalidConfiguration,
    KeywordResolver,
    NamingConvention,
    accepted_keywords,
    as_resolver,
    convert_case,
    resolve_file_stem,
    resolve_name,
)
from .config import GenerationConfig, ConfigManager, ConfigError, load_config
from .formatter import BasicFormatter, CodeFormatter, FormatterError, PrettierFormatter
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "ModelGenerator",
    "GeneratedModel",
    "GeneratorError",
    "RenderFailure",
    "WriteFailure",
    # Schema system
    "ContentTypeSchema",
    "ElementSchema",
    "ElementKind",
    "SchemaError",
    "convert_delivery_types",
    # Naming
    "NamingConvention",
    "KeywordResolver",
    "CustomResolver",
    "InvalidConfiguration",
    "as_resolver",
    "convert_case",
    "resolve_name",
    "resolve_file_stem",
    "accepted_keywords",
    # Configuration system
    "GenerationConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Formatting
    "CodeFormatter",
    "BasicFormatter",
    "PrettierFormatter",
    "FormatterError",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
