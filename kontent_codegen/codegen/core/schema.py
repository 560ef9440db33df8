"""
Core schema representation for code generation.

Converts Delivery API content type payloads into a normalized, immutable
format that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum


class SchemaError(ValueError):
    """Raised when a content type payload cannot be converted."""

    pass


class ElementKind(Enum):
    """Element types served by the Delivery API."""

    TEXT = "text"
    NUMBER = "number"
    DATE_TIME = "date_time"
    ASSET = "asset"
    RICH_TEXT = "rich_text"
    MULTIPLE_CHOICE = "multiple_choice"
    URL_SLUG = "url_slug"
    TAXONOMY = "taxonomy"
    MODULAR_CONTENT = "modular_content"  # Linked items
    CUSTOM = "custom"

    @classmethod
    def lookup(cls, value: str) -> Optional["ElementKind"]:
        """Find a kind by its string form, ignoring case and '-' vs '_'."""
        normalized = str(value).strip().lower().replace("-", "_")
        for kind in cls:
            if kind.value == normalized:
                return kind
        return None


@dataclass(frozen=True)
class ElementSchema:
    """Represents a single element of a content type."""

    codename: str
    kind: str  # Raw type string as served by the API
    name: Optional[str] = None


@dataclass(frozen=True)
class ContentTypeSchema:
    """Represents a content type and its elements in declaration order."""

    codename: str
    name: str
    elements: Tuple[ElementSchema, ...] = field(default_factory=tuple)
    id: Optional[str] = None
    last_modified: Optional[str] = None

    def get_element(self, codename: str) -> Optional[ElementSchema]:
        """Get element by codename."""
        for element in self.elements:
            if element.codename == codename:
                return element
        return None


def convert_content_type(data: Dict[str, Any]) -> ContentTypeSchema:
    """
    Convert one Delivery API content type object.

    Args:
        data: Object with 'system' and 'elements' keys

    Returns:
        ContentTypeSchema with elements in payload order
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Expected content type object, got {type(data).__name__}")

    system = data.get("system")
    if not isinstance(system, dict) or "codename" not in system:
        raise SchemaError("Content type is missing 'system.codename'")

    codename = system["codename"]
    if not isinstance(codename, str) or not codename:
        raise SchemaError(f"Content type codename must be a non-empty string, got {codename!r}")

    name = system.get("name")
    if name is not None and not isinstance(name, str):
        raise SchemaError(f"Content type '{codename}' has a non-string name")

    elements_data = data.get("elements") or {}

    elements: List[ElementSchema] = []
    if isinstance(elements_data, dict):
        # Delivery API keys elements by codename
        for element_codename, element_data in elements_data.items():
            elements.append(_convert_element(element_data, element_codename, codename))
    elif isinstance(elements_data, list):
        for element_data in elements_data:
            elements.append(_convert_element(element_data, None, codename))
    else:
        raise SchemaError(f"Invalid elements in content type '{codename}'")

    return ContentTypeSchema(
        codename=codename,
        name=name or codename,
        elements=tuple(elements),
        id=system.get("id"),
        last_modified=system.get("last_modified"),
    )


def _convert_element(
    data: Any, codename: Optional[str], type_codename: str
) -> ElementSchema:
    """Convert one element entry."""
    if not isinstance(data, dict):
        raise SchemaError(f"Invalid element in content type '{type_codename}'")

    codename = codename or data.get("codename")
    if not codename:
        raise SchemaError(f"Element without codename in content type '{type_codename}'")
    if not isinstance(codename, str):
        raise SchemaError(
            f"Element codename in content type '{type_codename}' must be a string, got {codename!r}"
        )

    kind = data.get("type")
    if not isinstance(kind, str):
        raise SchemaError(f"Element '{type_codename}.{codename}' has no type")

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise SchemaError(f"Element '{type_codename}.{codename}' has a non-string name")

    return ElementSchema(codename=codename, kind=kind, name=name)


def convert_delivery_types(payload: Any) -> List[ContentTypeSchema]:
    """
    Convert a Delivery API types payload.

    Accepts the '/types' listing response, a single content type object
    or a bare list of content type objects.

    Returns:
        Content types in payload order
    """
    if isinstance(payload, dict) and "types" in payload:
        items = payload["types"]
    elif isinstance(payload, dict) and "system" in payload:
        items = [payload]
    elif isinstance(payload, list):
        items = payload
    else:
        raise SchemaError("Payload does not contain content types")

    if not isinstance(items, list):
        raise SchemaError("'types' must be a list")

    return [convert_content_type(item) for item in items]
