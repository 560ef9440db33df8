import pytest

from kontent_codegen.codegen.core.schema import (
    ElementKind,
    SchemaError,
    convert_content_type,
    convert_delivery_types,
)


def test_convert_types_listing_preserves_order(types_payload) -> None:
    types = convert_delivery_types(types_payload)

    assert [t.codename for t in types] == ["article", "author"]
    article = types[0]
    assert article.name == "Article"
    assert article.id == "b7aa4a53-d9b1-48cf-b7a6-ed0b182c4b89"
    assert [e.codename for e in article.elements] == ["title", "post_date", "related_articles"]
    assert [e.kind for e in article.elements] == ["text", "date_time", "modular_content"]
    assert article.get_element("post_date").name == "Post date"


def test_convert_single_type_and_bare_list(types_payload) -> None:
    single = types_payload["types"][1]

    assert [t.codename for t in convert_delivery_types(single)] == ["author"]
    assert len(convert_delivery_types(types_payload["types"])) == 2


def test_element_list_form_uses_codename_field() -> None:
    content_type = convert_content_type(
        {
            "system": {"codename": "tag"},
            "elements": [{"codename": "label", "type": "text"}],
        }
    )

    assert content_type.name == "tag"
    assert content_type.elements[0].codename == "label"


@pytest.mark.parametrize(
    "payload",
    [
        {"items": []},
        {"types": {"system": {}}},
        {"types": [{"elements": {}}]},
        {"types": [{"system": {"codename": "a"}, "elements": {"x": {"name": "X"}}}]},
        "types",
    ],
)
def test_malformed_payloads_raise_schema_error(payload) -> None:
    with pytest.raises(SchemaError):
        convert_delivery_types(payload)


def test_element_kind_lookup_is_case_and_separator_insensitive() -> None:
    assert ElementKind.lookup("TEXT") is ElementKind.TEXT
    assert ElementKind.lookup("Rich-Text") is ElementKind.RICH_TEXT
    assert ElementKind.lookup("date_time") is ElementKind.DATE_TIME
    assert ElementKind.lookup("snippet") is None


@pytest.mark.parametrize(
    "content_type",
    [
        {"system": {"codename": 5}, "elements": {}},
        {"system": {"codename": ""}, "elements": {}},
        {"system": {"codename": "page", "name": ["Page"]}, "elements": {}},
        {"system": {"codename": "page"}, "elements": [{"codename": 7, "type": "text"}]},
        {"system": {"codename": "page"}, "elements": {"title": {"type": 1}}},
        {"system": {"codename": "page"}, "elements": {"title": {"type": "text", "name": 3}}},
    ],
)
def test_non_string_identifiers_raise_schema_error(content_type) -> None:
    with pytest.raises(SchemaError):
        convert_content_type(content_type)
