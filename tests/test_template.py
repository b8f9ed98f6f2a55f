import pytest

from rfdoc.template import (
    MissingRequiredFields,
    RenderableRfdTemplate,
    RfdTemplate,
    TemplateError,
)


def test_render_fills_required_fields():
    template = RfdTemplate(template="Hello {name}", required_fields=["name"])
    rendered = template.field("name", "World").build().render()
    assert rendered == "Hello World"


def test_render_replaces_every_occurrence():
    template = RfdTemplate(template="{x} and {x}", required_fields=["x"])
    rendered = template.field("x", "y").build().render()
    assert "{x}" not in rendered
    assert rendered.count("y") == 2


def test_missing_fields_are_reported_in_order():
    template = RfdTemplate(template="{a}{b}{c}", required_fields=["a", "b", "c"])
    with pytest.raises(MissingRequiredFields) as info:
        template.field("b", "2").build()
    assert info.value.values == ["a", "c"]
    assert info.value.template.values == {"b": "2"}


def test_missing_fields_is_template_error():
    with pytest.raises(TemplateError):
        RfdTemplate(template="{a}", required_fields=["a"]).build()


def test_field_does_not_change_original():
    original = RfdTemplate(template="{a}", required_fields=["a"])
    updated = original.field("a", "1")
    assert original.values == {}
    assert updated.values == {"a": "1"}


def test_only_required_fields_are_substituted():
    template = RfdTemplate(
        template="{number} {other}",
        values={"number": "5", "other": "ignored"},
        required_fields=["number"],
    )
    rendered = template.build().render()
    assert rendered.startswith("5 ")
    assert "{other}" in rendered


def test_empty_template_renders_empty():
    assert RfdTemplate().build().render() == ""


def test_build_returns_renderable_wrapping_template():
    template = RfdTemplate(template="text", values={"k": "v"})
    renderable = template.build()
    assert isinstance(renderable, RenderableRfdTemplate)
    assert renderable.template == template
    assert renderable.render() == "text"