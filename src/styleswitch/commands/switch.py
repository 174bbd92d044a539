"""Business logic for `styleswitch switch`."""

import functools
import logging
from pathlib import Path

import click

from styleswitch.commands import (
    as_click_error,
    build_resolution_config,
    listing_excludes_or_usage_error,
    load_project_config,
    setup_logging,
)
from styleswitch.errors import NoCompanion, StyleSwitchError
from styleswitch.filesystem import create_empty_file, list_siblings
from styleswitch.switcher import switch_companion

logger = logging.getLogger(__name__)

PROMPT_TEXT = "Enter the name of the new companion file"


def _prompt_filename(default_filename: str, assume_yes: bool) -> str | None:
    """Ask for the companion name. Ctrl-C/Ctrl-D dismisses the prompt."""
    if assume_yes:
        return default_filename
    try:
        return click.prompt(PROMPT_TEXT, default=default_filename, err=True)
    except click.Abort:
        return None


def _open_file(path: Path, column: int, edit: bool, show_column: bool) -> None:
    if show_column:
        click.echo(f"{path}\t{column}")
    else:
        click.echo(str(path))
    if edit:
        click.edit(filename=str(path))


def run_switch(
    file_path: str,
    project_path: str | None,
    css_ext: str | None,
    js_ext: str | None,
    no_directory_name: bool,
    other_column: bool,
    active_column: int | None,
    assume_yes: bool,
    edit: bool,
    verbose: bool,
) -> None:
    """Open (print) the companion of file_path, offering to create one if missing."""
    setup_logging(verbose)

    current = Path(file_path).resolve()
    config = load_project_config(current, project_path)
    resolution_config = build_resolution_config(
        config, css_ext, js_ext, no_directory_name, other_column,
    )
    excludes = listing_excludes_or_usage_error(config)

    try:
        outcome = switch_companion(
            current,
            resolution_config,
            list_siblings=functools.partial(list_siblings, exclude=excludes),
            prompt_filename=functools.partial(_prompt_filename, assume_yes=assume_yes),
            create_file=create_empty_file,
            open_file=functools.partial(
                _open_file, edit=edit, show_column=active_column is not None,
            ),
            active_column=active_column,
        )
        if outcome.action == "none":
            raise NoCompanion(outcome.message)
    except StyleSwitchError as e:
        raise as_click_error(e) from e

    if outcome.action == "abandoned":
        logger.info("No companion created")
