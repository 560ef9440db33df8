"""Shared fixtures for kontent-codegen tests."""

import io
from typing import Dict, List, Tuple

import pytest
from rich.console import Console

from kontent_codegen.codegen.core.config import GenerationConfig
from kontent_codegen.codegen.core.schema import ContentTypeSchema, ElementSchema


def make_type(codename: str, elements: List[Tuple[str, str]], name: str = None) -> ContentTypeSchema:
    return ContentTypeSchema(
        codename=codename,
        name=name or codename.replace("_", " ").capitalize(),
        elements=tuple(ElementSchema(codename=c, kind=k) for c, k in elements),
    )


@pytest.fixture
def type_factory():
    return make_type


@pytest.fixture
def article_type() -> ContentTypeSchema:
    return make_type("article_item", [("title", "text"), ("views", "number")])


@pytest.fixture
def basic_config(tmp_path) -> GenerationConfig:
    return GenerationConfig(formatter="basic", output_dir=str(tmp_path))


@pytest.fixture
def console_buffer() -> Tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, color_system=None, width=200, highlight=False)
    return console, buffer


@pytest.fixture
def types_payload() -> Dict:
    return {
        "types": [
            {
                "system": {
                    "id": "b7aa4a53-d9b1-48cf-b7a6-ed0b182c4b89",
                    "name": "Article",
                    "codename": "article",
                    "last_modified": "2021-03-04T12:09:00.4512456Z",
                },
                "elements": {
                    "title": {"type": "text", "name": "Title"},
                    "post_date": {"type": "date_time", "name": "Post date"},
                    "related_articles": {"type": "modular_content", "name": "Related articles"},
                },
            },
            {
                "system": {"id": "c2b0ae8e", "name": "Author", "codename": "author"},
                "elements": {"full_name": {"type": "text", "name": "Full name"}},
            },
        ],
        "pagination": {"skip": 0, "limit": 0, "count": 2, "next_page": ""},
    }
