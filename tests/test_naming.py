import pytest

from kontent_codegen.codegen.core.naming import (
    CustomResolver,
    InvalidConfiguration,
    KeywordResolver,
    NamingConvention,
    accepted_keywords,
    as_resolver,
    convert_case,
    resolve_file_stem,
    resolve_name,
    to_pascal_case,
)


@pytest.mark.parametrize(
    ("keyword", "expected"),
    [
        ("camelCase", "releaseDateTime"),
        ("pascalCase", "ReleaseDateTime"),
        ("PascalCase", "ReleaseDateTime"),
        ("snakeCase", "release_date_time"),
        ("snake_case", "release_date_time"),
    ],
)
def test_resolve_name_with_keywords(keyword: str, expected: str) -> None:
    assert resolve_name("release_date_time", keyword) == expected


def test_conversions_handle_kebab_and_mixed_case() -> None:
    assert convert_case("hero-banner", NamingConvention.CAMEL_CASE) == "heroBanner"
    assert convert_case("heroBanner", NamingConvention.SNAKE_CASE) == "hero_banner"
    assert to_pascal_case("article_item") == "ArticleItem"
    assert to_pascal_case("item_2") == "Item2"


def test_resolve_name_is_deterministic() -> None:
    first = resolve_name("page_title", "camelCase")
    second = resolve_name("page_title", "camelCase")
    assert first == second == "pageTitle"


def test_resolve_name_without_convention_keeps_codename() -> None:
    assert resolve_name("page_title", None) == "page_title"


def test_custom_function_takes_full_responsibility() -> None:
    seen = []

    def resolver(context, text):
        seen.append((context, text))
        return "x_" + text

    assert resolve_name("page_title", resolver, context="article") == "x_page_title"
    assert seen == [("article", "page_title")]


@pytest.mark.parametrize("value", ["kebabCase", "CAMELCASE", "", 42, ["camelCase"]])
def test_invalid_convention_is_rejected(value) -> None:
    with pytest.raises(InvalidConfiguration) as exc_info:
        resolve_name("title", value)

    message = str(exc_info.value)
    for keyword in ("camelCase", "pascalCase", "snakeCase"):
        assert keyword in message


def test_as_resolver_builds_tagged_variants() -> None:
    def func(context, text):
        return text

    assert as_resolver(None) is None
    assert as_resolver("camelCase") == KeywordResolver(NamingConvention.CAMEL_CASE)
    assert as_resolver(NamingConvention.SNAKE_CASE).describe() == "snakeCase"
    custom = as_resolver(func)
    assert isinstance(custom, CustomResolver)
    assert custom.describe() == "custom"
    assert as_resolver(custom) is custom


def test_accepted_keywords_include_aliases() -> None:
    assert accepted_keywords() == ["camelCase", "pascalCase", "snakeCase", "PascalCase", "snake_case"]
    for keyword in accepted_keywords():
        assert isinstance(as_resolver(keyword), KeywordResolver)


def test_resolve_file_stem_passes_only_the_content_type_to_functions() -> None:
    content_type = object()
    seen = []

    def resolver(*args):
        seen.append(args)
        return "custom_stem"

    assert resolve_file_stem("blog_post", resolver, content_type) == "custom_stem"
    assert seen == [(content_type,)]


def test_resolve_file_stem_with_keywords() -> None:
    assert resolve_file_stem("blog_post", None) == "blog_post"
    assert resolve_file_stem("blog_post", "PascalCase") == "BlogPost"
    assert resolve_file_stem("blog_post", KeywordResolver(NamingConvention.CAMEL_CASE)) == "blogPost"
