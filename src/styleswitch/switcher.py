"""Switch pipeline: read listing -> resolve -> open, or prompt -> create -> open.

The host supplies the collaborators; each invocation is independent and keeps
no state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from styleswitch.resolver import (
    CreateCompanion,
    NoCompanionFound,
    OpenCandidate,
    ResolutionConfig,
    check_supported,
    resolve,
    target_column,
)

logger = logging.getLogger(__name__)

VALID_ACTIONS = ("opened", "created", "abandoned", "none")


class SiblingLister(Protocol):
    def __call__(self, directory: Path) -> list[str]: ...


class FilenamePrompt(Protocol):
    def __call__(self, default_filename: str) -> str | None: ...


class FileCreator(Protocol):
    def __call__(self, path: Path) -> object: ...


class FileOpener(Protocol):
    def __call__(self, path: Path, column: int) -> object: ...


@dataclass
class SwitchOutcome:
    """What a single switch invocation ended up doing."""

    action: str
    path: Path | None = None
    column: int | None = None
    message: str = ""

    def __post_init__(self):
        if self.action not in VALID_ACTIONS:
            raise ValueError(f"action must be one of {VALID_ACTIONS}, got {self.action!r}")


def switch_companion(
    current_path: Path,
    config: ResolutionConfig,
    *,
    list_siblings: SiblingLister,
    prompt_filename: FilenamePrompt,
    create_file: FileCreator,
    open_file: FileOpener,
    active_column: int | None = None,
) -> SwitchOutcome:
    """Open the companion of current_path, creating it first if the user agrees.

    DirectoryReadError and FileCreateError from the collaborators propagate
    unchanged. A dismissed or empty prompt abandons the switch without
    creating anything.
    """
    check_supported(current_path)
    siblings = list_siblings(current_path.parent)
    result = resolve(current_path, siblings, config)
    column = target_column(active_column, config.placement)

    if isinstance(result, OpenCandidate):
        open_file(result.path, column)
        return SwitchOutcome("opened", path=result.path, column=column)

    if isinstance(result, NoCompanionFound):
        logger.info(result.reason)
        return SwitchOutcome("none", message=result.reason)

    assert isinstance(result, CreateCompanion)
    answer = prompt_filename(result.default_filename)
    if not answer or not answer.strip():
        logger.debug("Creation prompt dismissed for %s", current_path.name)
        return SwitchOutcome("abandoned")

    new_path = result.directory / answer.strip()
    create_file(new_path)
    open_file(new_path, column)
    return SwitchOutcome("created", path=new_path, column=column)
