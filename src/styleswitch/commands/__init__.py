"""Shared helpers for CLI commands."""

import logging
from pathlib import Path

import click

from styleswitch.errors import StyleSwitchError


def setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)


def load_project_config(file_path: Path, project_path: str | None) -> dict | None:
    """Load config from --project, else from the nearest .styleswitch above the file.

    A missing config is not an error: every option has a default.
    """
    from styleswitch.config import find_project_root, load_config

    if project_path is not None:
        return load_config(Path(project_path).resolve())
    root = find_project_root(file_path.parent)
    if root is None:
        return None
    return load_config(root)


def build_resolution_config(
    config: dict | None,
    css_ext: str | None,
    js_ext: str | None,
    no_directory_name: bool,
    other_column: bool,
):
    """Resolve the ResolutionConfig: CLI flag -> [companion] config -> default."""
    from styleswitch.config import resolution_config_from

    overrides = {
        "css_companion_extension": css_ext,
        "js_companion_extension": js_ext,
        "use_directory_name": False if no_directory_name else None,
        "use_other_column": True if other_column else None,
    }
    try:
        return resolution_config_from(config, overrides)
    except (RuntimeError, ValueError) as e:
        raise click.UsageError(str(e)) from e


def listing_excludes_or_usage_error(config: dict | None) -> tuple[str, ...]:
    from styleswitch.config import listing_excludes

    try:
        return listing_excludes(config)
    except RuntimeError as e:
        raise click.UsageError(str(e)) from e


def as_click_error(error: StyleSwitchError) -> click.ClickException:
    """Wrap a domain error as the user-facing message."""
    return click.ClickException(f"styleswitch: {error}")
