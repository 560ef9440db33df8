import logging

import pytest

from kontent_codegen.codegen.core.schema import ElementKind
from kontent_codegen.codegen.delivery.types import (
    DeliveryTypeMapper,
    UnsupportedElementKind,
    map_kind,
    supported_kinds,
)

EXPECTED = {
    "text": "TextElement",
    "number": "NumberElement",
    "date_time": "DateTimeElement",
    "asset": "AssetsElement",
    "rich_text": "RichTextElement",
    "multiple_choice": "MultipleChoiceElement",
    "url_slug": "UrlSlugElement",
    "taxonomy": "TaxonomyElement",
    "modular_content": "LinkedItemsElement<IContentItem>",
    "custom": "CustomElement",
}


@pytest.mark.parametrize(("kind", "type_name"), sorted(EXPECTED.items()))
def test_every_kind_maps_case_insensitively(kind: str, type_name: str) -> None:
    assert map_kind(kind) == type_name
    assert map_kind(kind.upper()) == map_kind(kind)
    assert map_kind(kind.title()) == type_name


def test_table_covers_all_element_kinds() -> None:
    assert sorted(supported_kinds()) == sorted(EXPECTED)
    assert {kind.value for kind in ElementKind} == set(EXPECTED)


def test_hyphenated_spelling_is_accepted() -> None:
    assert map_kind("date-time") == "DateTimeElement"
    assert map_kind("URL-slug") == "UrlSlugElement"


def test_unknown_kind_warns_and_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert map_kind("snippet") is None

    assert "Unsupported element type 'snippet'" in caplog.text


def test_strict_mapper_raises() -> None:
    mapper = DeliveryTypeMapper(strict=True)

    with pytest.raises(UnsupportedElementKind) as exc_info:
        mapper.map_element("snippet", "article.meta")

    assert exc_info.value.kind == "snippet"
    assert "article.meta" in str(exc_info.value)


def test_imports_start_with_content_item_and_are_unique() -> None:
    mapper = DeliveryTypeMapper()
    types = [
        mapper.map_element("text"),
        mapper.map_element("modular_content"),
        mapper.map_element("text"),
        mapper.map_element("asset"),
    ]

    assert mapper.get_all_imports(types) == [
        "IContentItem",
        "AssetsElement",
        "LinkedItemsElement",
        "TextElement",
    ]
    assert mapper.get_all_imports([]) == ["IContentItem"]
