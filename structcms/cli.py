"""Cyclopts CLI entrypoint for inspecting and checking structcms content models.

The ``structcms`` console script loads a content model YAML file and can
print a summary of its sections, page types, and navigations, emit the JSON
schema of a single section, or validate a stored page document against the
model. Typical usage involves running ``structcms validate`` in CI over
exported pages so content drift is caught before deployment.

Examples
--------
Summarize the default content model:

>>> from structcms.cli import main
>>> main()  # doctest: +SKIP

Validate an exported page against a custom model file:

>>> from structcms.cli import app
>>> app(["validate", "pages/home.json", "--config", "cms/content.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec
from cyclopts import App, Parameter

from .config import load_content_model
from .logging_config import configure_logging
from .validation import PageDocument, validate_page

if typ.TYPE_CHECKING:
    from .registry import Registry

DEFAULT_CONFIG = Path("content.yaml")

app = App(name="structcms", config=cyclopts.config.Env("STRUCTCMS_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to the content model", env_var="STRUCTCMS_CONFIG")
]


def _load_registry(config: Path, *, verbose: bool) -> Registry:
    configure_logging(level=logging.DEBUG if verbose else logging.INFO)
    return load_content_model(config).build_registry()


def _print_json(payload: object) -> None:
    print(msgspec.json.format(msgspec.json.encode(payload), indent=2).decode("utf-8"))


def _schema_name(schema: object) -> str:
    return getattr(schema, "__name__", None) or repr(schema)


def summarize(registry: Registry) -> dict[str, list[dict[str, typ.Any]]]:
    """Return a JSON-ready summary of every definition in ``registry``."""
    return {
        "sections": [
            {
                "name": section.name,
                "fields": [
                    {
                        "name": field.name,
                        "label": field.label,
                        "fieldType": field.field_type,
                        "required": field.required,
                    }
                    for field in section.describe_fields()
                ],
            }
            for section in registry.get_all_sections()
        ],
        "pageTypes": [
            {"name": page_type.name, "allowedSections": list(page_type.allowed_sections)}
            for page_type in registry.get_all_page_types()
        ],
        "navigations": [
            {"name": navigation.name, "itemSchema": _schema_name(navigation.schema)}
            for navigation in registry.get_all_navigations()
        ],
    }


@app.command(help="Print the sections, page types, and navigations of a model.")
def inspect(*, config: ConfigOption = DEFAULT_CONFIG, verbose: bool = False) -> None:
    """Print a JSON summary of the content model at ``config``."""
    _print_json(summarize(_load_registry(config, verbose=verbose)))


@app.command(help="Print the JSON schema of one section.")
def schema(
    section: str, *, config: ConfigOption = DEFAULT_CONFIG, verbose: bool = False
) -> None:
    """Print the JSON schema for ``section``.

    Raises
    ------
    SystemExit
        With status 1 if the section is not registered.
    """
    definition = _load_registry(config, verbose=verbose).get_section(section)
    if definition is None:
        print(f"unknown section '{section}'")
        raise SystemExit(1)
    _print_json(definition.json_schema())


@app.command(help="Validate a page JSON document against the content model.")
def validate(
    page: Path, *, config: ConfigOption = DEFAULT_CONFIG, verbose: bool = False
) -> None:
    """Validate the page stored at ``page``.

    Parameters
    ----------
    page : Path
        JSON file shaped ``{"pageType": ..., "sections": [{"type", "data"}]}``.
    config : Path, optional
        Content model file (overridable via ``STRUCTCMS_CONFIG``).
    verbose : bool, optional
        Emit debug logging.

    Raises
    ------
    SystemExit
        With status 1 when the document is malformed or has problems.
    """
    registry = _load_registry(config, verbose=verbose)
    try:
        document = msgspec.json.decode(page.read_bytes(), type=PageDocument)
    except msgspec.DecodeError as exc:
        print(f"{page}: {exc}")
        raise SystemExit(1) from exc
    problems = validate_page(registry, document)
    for problem in problems:
        print(f"{page}: {problem}")
    if problems:
        raise SystemExit(1)
    print(f"{page}: ok")


def main() -> None:
    """Invoke the Cyclopts application behind the ``structcms`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
