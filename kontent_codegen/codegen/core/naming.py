"""
Naming utilities for generated models.

Converts content type and element codenames into camelCase, PascalCase
or snake_case identifiers, or hands them to a caller-supplied resolver.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union


class InvalidConfiguration(ValueError):
    """Raised for naming conventions or settings that cannot be used."""

    pass


class NamingConvention(Enum):
    """Naming conventions available as keywords."""

    CAMEL_CASE = "camelCase"  # articleItem
    PASCAL_CASE = "pascalCase"  # ArticleItem
    SNAKE_CASE = "snakeCase"  # article_item

    @classmethod
    def parse(cls, value: str) -> "NamingConvention":
        """
        Look up a convention by keyword.

        Args:
            value: Keyword such as 'camelCase' or one of its aliases

        Returns:
            Matching NamingConvention

        Raises:
            InvalidConfiguration: If the keyword is not recognised
        """
        for convention in cls:
            if value == convention.value:
                return convention

        if value in _ALIASES:
            return _ALIASES[value]

        raise InvalidConfiguration(
            f"Invalid name resolver '{value}'. "
            f"Available options are: {', '.join(valid_keywords())}"
        )


_ALIASES = {
    "PascalCase": NamingConvention.PASCAL_CASE,
    "snake_case": NamingConvention.SNAKE_CASE,
}


def valid_keywords() -> list[str]:
    """Return the primary keyword of every convention."""
    return [convention.value for convention in NamingConvention]


def accepted_keywords() -> list[str]:
    """Return the primary keywords followed by their aliases."""
    return valid_keywords() + list(_ALIASES)


# Case conversion


def _split_words(text: str) -> list[str]:
    """Split a codename into lowercase words."""
    # Insert underscore before uppercase letters
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", text)
    # Anything that is not a letter or digit separates words
    return [part.lower() for part in re.split(r"[^a-zA-Z0-9]+", text) if part]


def to_snake_case(text: str) -> str:
    """Convert to snake_case."""
    return "_".join(_split_words(text))


def to_camel_case(text: str) -> str:
    """Convert to camelCase."""
    words = _split_words(text)
    if not words:
        return text
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_pascal_case(text: str) -> str:
    """Convert to PascalCase."""
    return "".join(word.capitalize() for word in _split_words(text))


_CONVERTERS = {
    NamingConvention.CAMEL_CASE: to_camel_case,
    NamingConvention.PASCAL_CASE: to_pascal_case,
    NamingConvention.SNAKE_CASE: to_snake_case,
}


def convert_case(text: str, convention: NamingConvention) -> str:
    """Convert text to the given naming convention."""
    return _CONVERTERS[convention](text)


# Resolvers


@dataclass(frozen=True)
class KeywordResolver:
    """Resolver backed by one of the built-in conventions."""

    convention: NamingConvention

    def describe(self) -> str:
        return self.convention.value

    def convert(self, text: str) -> str:
        return convert_case(text, self.convention)


@dataclass(frozen=True)
class CustomResolver:
    """
    Resolver backed by a caller-supplied function.

    The function owns the result entirely; its arguments depend on where
    the resolver is used (element names get the type codename and the
    element codename, file names get the whole content type).
    """

    func: Callable[..., str]

    def describe(self) -> str:
        return "custom"


Resolver = Union[KeywordResolver, CustomResolver]
ResolverSpec = Union[None, str, NamingConvention, Callable[..., str], Resolver]


def as_resolver(value: Any) -> Optional[Resolver]:
    """
    Normalise a resolver setting into a tagged resolver.

    Args:
        value: None, a keyword, a NamingConvention, a callable or a resolver

    Returns:
        KeywordResolver, CustomResolver or None when nothing is configured

    Raises:
        InvalidConfiguration: If the value is none of the accepted forms
    """
    if value is None:
        return None
    if isinstance(value, (KeywordResolver, CustomResolver)):
        return value
    if isinstance(value, NamingConvention):
        return KeywordResolver(value)
    if isinstance(value, str):
        return KeywordResolver(NamingConvention.parse(value))
    if callable(value):
        return CustomResolver(value)

    raise InvalidConfiguration(
        f"Invalid name resolver {value!r}. "
        f"Available options are: {', '.join(valid_keywords())} or a function"
    )


def resolve_name(text: str, convention: ResolverSpec, context: Any = "") -> str:
    """
    Resolve an identifier using a keyword convention or a custom function.

    Args:
        text: Raw codename
        convention: Keyword, NamingConvention, callable or resolver
        context: First argument passed to a custom function

    Returns:
        Resolved identifier; the codename itself when no convention is given
    """
    resolver = as_resolver(convention)
    if resolver is None:
        return text
    if isinstance(resolver, CustomResolver):
        return resolver.func(context, text)
    return resolver.convert(text)


def resolve_file_stem(codename: str, convention: ResolverSpec, content_type: Any = None) -> str:
    """
    Resolve the file name stem of a content type.

    Unlike element names, a custom function receives only the content type.

    Args:
        codename: Content type codename
        convention: Keyword, NamingConvention, callable or resolver
        content_type: Object passed to a custom function

    Returns:
        File name without extension
    """
    resolver = as_resolver(convention)
    if isinstance(resolver, CustomResolver):
        return resolver.func(content_type)
    return resolve_name(codename, resolver)
