"""
Delivery SDK type system for code generation.

Maps content type element kinds to the element types exported by the
Kontent Delivery SDK.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from ..core.errors import RenderFailure
from ..core.schema import ElementKind
from ...logging_config import get_logger

logger = get_logger(__name__)

CONTENT_ITEM_TYPE = "IContentItem"


class UnsupportedElementKind(RenderFailure):
    """Raised for unknown element kinds when strict mapping is enabled."""

    def __init__(self, kind: str, context: str = ""):
        self.kind = kind
        self.context = context
        where = f" in '{context}'" if context else ""
        super().__init__(f"Unsupported element type '{kind}'{where}")


@dataclass(frozen=True)
class ElementType:
    """
    Immutable representation of an SDK element type.

    Carries the type expression used in generated code and the SDK
    names it needs imported.
    """

    name: str  # e.g. "TextElement", "LinkedItemsElement<IContentItem>"
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Default imports to the base name of the type expression."""
        if not self.imports_needed:
            base = self.name.split("<", 1)[0]
            object.__setattr__(self, "imports_needed", frozenset({base}))


_ELEMENT_TYPES: Dict[ElementKind, ElementType] = {
    ElementKind.TEXT: ElementType("TextElement"),
    ElementKind.NUMBER: ElementType("NumberElement"),
    ElementKind.MODULAR_CONTENT: ElementType(
        f"LinkedItemsElement<{CONTENT_ITEM_TYPE}>",
        frozenset({"LinkedItemsElement", CONTENT_ITEM_TYPE}),
    ),
    ElementKind.ASSET: ElementType("AssetsElement"),
    ElementKind.DATE_TIME: ElementType("DateTimeElement"),
    ElementKind.RICH_TEXT: ElementType("RichTextElement"),
    ElementKind.MULTIPLE_CHOICE: ElementType("MultipleChoiceElement"),
    ElementKind.URL_SLUG: ElementType("UrlSlugElement"),
    ElementKind.TAXONOMY: ElementType("TaxonomyElement"),
    ElementKind.CUSTOM: ElementType("CustomElement"),
}


class DeliveryTypeMapper:
    """Maps element kinds to Delivery SDK element types."""

    def __init__(self, strict: bool = False):
        """
        Initialize mapper.

        Args:
            strict: Raise UnsupportedElementKind instead of skipping
        """
        self.strict = strict

    def map_element(
        self, kind: Union[str, ElementKind], context: str = ""
    ) -> Optional[ElementType]:
        """
        Map an element kind to its SDK type.

        Args:
            kind: Element kind, matched case-insensitively
            context: Element path used in messages

        Returns:
            ElementType, or None when the kind is not supported
        """
        element_kind = kind if isinstance(kind, ElementKind) else ElementKind.lookup(kind)
        if element_kind is not None:
            return _ELEMENT_TYPES[element_kind]

        if self.strict:
            raise UnsupportedElementKind(str(kind), context)

        if context:
            logger.warning("Unsupported element type '%s' (%s)", kind, context)
        else:
            logger.warning("Unsupported element type '%s'", kind)
        return None

    def map_kind(self, kind: Union[str, ElementKind]) -> Optional[str]:
        """Return the target type name for a kind, or None if unmapped."""
        element_type = self.map_element(kind)
        return element_type.name if element_type else None

    def get_all_imports(self, types: Iterable[ElementType]) -> List[str]:
        """
        Collect SDK names to import for the given types.

        IContentItem always comes first since every model extends it.
        """
        imports = set()
        for element_type in types:
            imports.update(element_type.imports_needed)
        imports.discard(CONTENT_ITEM_TYPE)
        return [CONTENT_ITEM_TYPE] + sorted(imports)


def supported_kinds() -> List[str]:
    """Return the canonical string of every supported element kind."""
    return [kind.value for kind in _ELEMENT_TYPES]


def map_kind(kind: Union[str, ElementKind]) -> Optional[str]:
    """Module-level shortcut for DeliveryTypeMapper().map_kind."""
    return DeliveryTypeMapper().map_kind(kind)
