"""Unit tests for loading content model YAML files.

These tests write small ``content.yaml`` files into ``tmp_path`` and check
that sections, page types, and navigations come back as structcms
definitions, and that malformed files raise ``ContentModelError`` with a
pointer to the offending entry.
"""

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from structcms.config import ContentModel, load_content_model, parse_content_model
from structcms.definitions import NavigationItem
from structcms.errors import ContentModelError, DuplicateDefinitionError
from structcms.fields import is_field_type

if typ.TYPE_CHECKING:
    from pathlib import Path

CONTENT_YAML = """
settings:
  strict: true
sections:
  hero:
    fields:
      title: {type: string, min_length: 1, max_length: 80}
      subtitle: {type: text, optional: true}
      image: {type: image, optional: true}
      ctas:
        type: array
        max_length: 2
        items:
          type: object
          fields:
            label: string
            href: reference
  content:
    fields:
      body: richtext
page_types:
  landing:
    allowed_sections: [hero, content]
  blog: [content]
navigations:
  main: {}
  footer:
    fields:
      label: string
      href: string
      icon: {type: image, optional: true}
"""


@pytest.fixture
def content_model(tmp_path: Path) -> ContentModel:
    """Write the sample content model and load it."""
    path = tmp_path / "content.yaml"
    path.write_text(CONTENT_YAML.strip() + "\n", encoding="utf-8")
    return load_content_model(path)


def test_loads_sections_in_file_order(content_model: ContentModel) -> None:
    assert [s.name for s in content_model.sections] == ["hero", "content"]
    assert content_model.strict is True
    assert content_model.source is not None
    assert content_model.source.name == "content.yaml"


def test_section_fields_are_tagged(content_model: ContentModel) -> None:
    hero = content_model.sections[0]
    assert is_field_type(hero.fields["title"], "string")
    assert is_field_type(hero.fields["subtitle"], "text")
    assert is_field_type(hero.fields["ctas"], "array")
    assert is_field_type(content_model.sections[1].fields["body"], "richtext")


def test_section_constraints_are_applied(content_model: ContentModel) -> None:
    hero = content_model.sections[0]
    value = hero.validate(
        {"title": "Hello", "ctas": [{"label": "Go", "href": "start"}]}
    )
    assert value.subtitle is None
    with pytest.raises(msgspec.ValidationError):
        hero.validate({"title": "", "ctas": []})
    with pytest.raises(msgspec.ValidationError):
        hero.validate({"title": "x" * 81, "ctas": []})
    too_many = [{"label": "a", "href": "b"}] * 3
    with pytest.raises(msgspec.ValidationError):
        hero.validate({"title": "Hello", "ctas": too_many})


def test_page_types_accept_list_shorthand(content_model: ContentModel) -> None:
    assert [(p.name, p.allowed_sections) for p in content_model.page_types] == [
        ("landing", ("hero", "content")),
        ("blog", ("content",)),
    ]


def test_navigations_default_and_custom(content_model: ContentModel) -> None:
    main, footer = content_model.navigations
    assert main.schema is NavigationItem
    assert footer.schema.__name__ == "footerItem"
    links = footer.validate([{"label": "GitHub", "href": "https://github.com"}])
    assert links[0].icon is None


def test_build_registry(content_model: ContentModel) -> None:
    registry = content_model.build_registry()
    assert registry.get_section("hero") is content_model.sections[0]
    assert registry.get_page_type("blog").allowed_sections == ("content",)
    assert registry.get_navigation("main") is not None


def test_strict_setting_rejects_duplicate_names() -> None:
    model = parse_content_model(
        {
            "settings": {"strict": True},
            "sections": {"hero": {"fields": {"title": "string"}}},
            "page_types": {"landing": ["hero"]},
        }
    )
    model.page_types.append(model.page_types[0])
    with pytest.raises(DuplicateDefinitionError):
        model.build_registry()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="not found"):
        load_content_model(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        (["not", "a", "mapping"], "Top-level content model"),
        ({}, "No sections defined"),
        ({"sections": {"hero": []}}, "'sections.hero' must be a mapping"),
        ({"sections": {"hero": {}}}, "'sections.hero.fields' must be a mapping"),
        ({"sections": {"hero": {"fields": {}}}}, "at least one field"),
        (
            {"sections": {"hero": {"fields": {"title": "video"}}}},
            "unknown type 'video'",
        ),
        (
            {"sections": {"hero": {"fields": {"title": {"min_length": 1}}}}},
            "needs a 'type'",
        ),
        (
            {"sections": {"hero": {"fields": {"tags": "array"}}}},
            "requires 'items'",
        ),
        (
            {"sections": {"hero": {"fields": {"title": {"type": "string", "min_length": "one"}}}}},
            "Field 'sections.hero.fields.title' is invalid",
        ),
        (
            {
                "sections": {
                    "hero": {
                        "fields": {
                            "cta": {
                                "type": "object",
                                "min_length": 1,
                                "fields": {"label": "string"},
                            }
                        }
                    }
                }
            },
            "Field 'sections.hero.fields.cta' is invalid",
        ),
        (
            {"sections": {"hero": {"fields": {"title": {"type": "string", "optional": "no"}}}}},
            "use true or false",
        ),
        (
            {
                "sections": {"hero": {"fields": {"title": "string"}}},
                "page_types": {"landing": {"sections": ["hero"]}},
            },
            "requires 'allowed_sections'",
        ),
        (
            {
                "sections": {"hero": {"fields": {"title": "string"}}},
                "page_types": {"landing": ["hero", ""]},
            },
            "contains an empty name",
        ),
        (
            {
                "sections": {"hero": {"fields": {"title": "string"}}},
                "navigations": {"main": ["label"]},
            },
            "'navigations.main' must be a mapping",
        ),
    ],
)
def test_invalid_models_raise(raw: object, message: str) -> None:
    with pytest.raises(ContentModelError, match=message):
        parse_content_model(raw)
