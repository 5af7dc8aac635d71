"""Behaviour tests for rendering a page of stored sections.

These pytest-bdd scenarios, backed by ``features/page_rendering.feature``,
build a small content model, validate a landing page against it, and render
the page through a section renderer whose text component is broken. They
check that one failing component only affects its own section.

Usage:
    pytest tests/bdd/test_page_rendering.py -v
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from structcms import (
    SectionData,
    create_registry,
    create_section_renderer,
    define_page_type,
    define_section,
    fields,
)
from structcms.validation import PageDocument, validate_page

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "page_rendering.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, typ.Any]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {"components": {}, "fallback": None}


@given("a content model with hero and text sections")
def given_content_model(scenario_state: dict[str, typ.Any]) -> None:
    """Register hero and text sections on a landing page type."""
    scenario_state["registry"] = create_registry(
        sections=[
            define_section(name="hero", fields={"title": fields.string(min_length=1)}),
            define_section(name="text", fields={"body": fields.richtext()}),
        ],
        page_types=[
            define_page_type(name="landing", allowed_sections=["hero", "text", "gallery"])
        ],
    )


@given("a renderer whose text component fails")
def given_failing_text_component(scenario_state: dict[str, typ.Any]) -> None:
    """Register a working hero component and a text component that raises."""

    def hero(data: typ.Mapping[str, typ.Any], key: int | str) -> str:
        return f"<h1 data-key={key}>{data['title']}</h1>"

    def text(data: typ.Mapping[str, typ.Any], key: int | str) -> str:
        msg = "sanitizer crashed"
        raise RuntimeError(msg)

    scenario_state["components"] = {"hero": hero, "text": text}


@given("a fallback component")
def given_fallback(scenario_state: dict[str, typ.Any]) -> None:
    """Install a fallback that renders a placeholder tagged with the key."""

    def fallback(data: typ.Mapping[str, typ.Any], key: int | str) -> str:
        return f"<div data-key={key}>unavailable</div>"

    scenario_state["fallback"] = fallback


@when("I render a landing page with a hero, a text, and a gallery section")
def when_render_page(
    scenario_state: dict[str, typ.Any], caplog: pytest.LogCaptureFixture
) -> None:
    """Validate the page, then render every section in order."""
    page = PageDocument(
        page_type="landing",
        sections=[
            SectionData(type="hero", data={"title": "Welcome"}),
            SectionData(type="text", data={"body": "<p>Hello</p>"}),
            SectionData(type="gallery", data={"images": []}),
        ],
    )
    problems = validate_page(scenario_state["registry"], page)
    assert problems == ["Section 2: unknown section type 'gallery'."]
    render = create_section_renderer(
        components=scenario_state["components"],
        fallback=scenario_state["fallback"],
    )
    with caplog.at_level(logging.ERROR, logger="structcms.rendering.dispatcher"):
        scenario_state["output"] = render.render_all(page.sections)
    scenario_state["log"] = caplog.text


@then("the hero section is rendered by its component")
def then_hero_rendered(scenario_state: dict[str, typ.Any]) -> None:
    assert scenario_state["output"][0] == "<h1 data-key=0>Welcome</h1>"


@then("the text and gallery sections are rendered by the fallback")
def then_fallback_rendered(scenario_state: dict[str, typ.Any]) -> None:
    assert scenario_state["output"][1:] == [
        "<div data-key=1>unavailable</div>",
        "<div data-key=2>unavailable</div>",
    ]


@then("the text failure is logged with its index")
def then_failure_logged(scenario_state: dict[str, typ.Any]) -> None:
    assert 'Error rendering section type "text" at index 1' in scenario_state["log"]
    assert "gallery" not in scenario_state["log"]


@then("only the hero section is rendered")
def then_only_hero(scenario_state: dict[str, typ.Any]) -> None:
    assert scenario_state["output"] == ["<h1 data-key=0>Welcome</h1>"]
