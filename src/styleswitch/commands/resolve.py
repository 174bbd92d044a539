"""Business logic for `styleswitch resolve`."""

import json
from pathlib import Path

import click

from styleswitch.commands import (
    as_click_error,
    build_resolution_config,
    listing_excludes_or_usage_error,
    load_project_config,
    setup_logging,
)
from styleswitch.errors import StyleSwitchError
from styleswitch.filesystem import list_siblings
from styleswitch.resolver import (
    CreateCompanion,
    NoCompanionFound,
    OpenCandidate,
    ResolutionResult,
    check_supported,
    resolve,
)


def result_to_dict(result: ResolutionResult) -> dict:
    """JSON-ready view of a resolution result."""
    if isinstance(result, OpenCandidate):
        return {
            "kind": "open",
            "path": str(result.path),
            "placement": result.placement.value,
        }
    if isinstance(result, CreateCompanion):
        return {
            "kind": "create",
            "default_filename": result.default_filename,
            "path": str(result.default_path),
            "placement": result.placement.value,
        }
    if isinstance(result, NoCompanionFound):
        return {"kind": "none", "reason": result.reason}
    raise TypeError(f"Unknown resolution result: {result!r}")


def run_resolve(
    file_path: str,
    project_path: str | None,
    css_ext: str | None,
    js_ext: str | None,
    no_directory_name: bool,
    other_column: bool,
    verbose: bool,
) -> None:
    """Resolve the companion of file_path and print it as JSON. No side effects."""
    setup_logging(verbose)

    current = Path(file_path).resolve()
    config = load_project_config(current, project_path)
    resolution_config = build_resolution_config(
        config, css_ext, js_ext, no_directory_name, other_column,
    )
    excludes = listing_excludes_or_usage_error(config)

    try:
        check_supported(current)
        result = resolve(current, list_siblings(current.parent, excludes), resolution_config)
    except StyleSwitchError as e:
        raise as_click_error(e) from e

    click.echo(json.dumps(result_to_dict(result), indent=2))
