import pytest

from kontent_codegen.codegen.core.templates import TemplateEngine, TemplateError, create_template_engine


def test_doc_comment_filter() -> None:
    engine = TemplateEngine()
    engine.add_template("note", "{{ text | doc_comment }}")

    assert engine.render_template("note", {"text": "first\n\nsecond"}) == "/**\n * first\n *\n * second\n */"


def test_indent_filter_skips_blank_lines() -> None:
    engine = TemplateEngine()
    engine.add_template("body", "{{ code | indent(2) }}")

    assert engine.render_template("body", {"code": "a;\n\nb;"}) == "  a;\n\n  b;"


def test_builtin_model_template_is_registered() -> None:
    assert create_template_engine().template_exists("delivery_model.ts.j2")


def test_missing_template_raises_template_error() -> None:
    with pytest.raises(TemplateError, match="Template not found"):
        TemplateEngine().render_template("missing.j2", {})


def test_templates_are_not_html_escaped() -> None:
    engine = TemplateEngine()
    engine.add_template("generic", "{{ t }}")

    assert engine.render_template("generic", {"t": "LinkedItemsElement<IContentItem>"}) == (
        "LinkedItemsElement<IContentItem>"
    )
