"""Companion resolution: pick the next companion file or propose one to create.

Pure functions of (current path, sibling listing, config). Nothing here
touches the filesystem; the listing is supplied by the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

from styleswitch.constants import (
    DEFAULT_SCRIPT_EXTENSION,
    DEFAULT_STYLE_EXTENSION,
    INDEX_NAME,
    FileType,
    base_name,
    file_type_of,
)
from styleswitch.errors import UnsupportedFileType

logger = logging.getLogger(__name__)

# Host option name -> ResolutionConfig field
_OPTION_ALIASES: dict[str, str] = {
    "cssCompanionExtension": "style_extension",
    "css_companion_extension": "style_extension",
    "style_extension": "style_extension",
    "jsCompanionExtension": "script_extension",
    "js_companion_extension": "script_extension",
    "script_extension": "script_extension",
    "useDirectoryName": "use_directory_name",
    "use_directory_name": "use_directory_name",
    "useOtherColumn": "use_other_column",
    "use_other_column": "use_other_column",
}


class Placement(Enum):
    """Where the host should show the resolved file."""

    CURRENT = "current"
    OTHER = "other"


@dataclass(frozen=True)
class ResolutionConfig:
    style_extension: str = DEFAULT_STYLE_EXTENSION
    script_extension: str = DEFAULT_SCRIPT_EXTENSION
    use_directory_name: bool = True
    use_other_column: bool = False

    def __post_init__(self):
        for name in ("style_extension", "script_extension"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {type(value).__name__}")
            if not value.startswith(".") or len(value) < 2:
                raise ValueError(f"{name} must start with '.', got {value!r}")

    @property
    def placement(self) -> Placement:
        return Placement.OTHER if self.use_other_column else Placement.CURRENT

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None) -> ResolutionConfig:
        """Build a config from raw host options, applying the defaulting rules.

        Empty or missing extensions fall back to the defaults. Directory-name
        mode stays on unless explicitly ``False``; the alternate column is
        used only when explicitly ``True``. Unknown keys are ignored.
        """
        raw: dict[str, Any] = {}
        for key, value in (options or {}).items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            raw[field_name] = value

        return cls(
            style_extension=raw.get("style_extension") or DEFAULT_STYLE_EXTENSION,
            script_extension=raw.get("script_extension") or DEFAULT_SCRIPT_EXTENSION,
            use_directory_name=raw.get("use_directory_name") is not False,
            use_other_column=raw.get("use_other_column") is True,
        )


@dataclass(frozen=True)
class OpenCandidate:
    path: Path
    placement: Placement = Placement.CURRENT


@dataclass(frozen=True)
class CreateCompanion:
    default_filename: str
    directory: Path
    placement: Placement = Placement.CURRENT

    @property
    def default_path(self) -> Path:
        return self.directory / self.default_filename


@dataclass(frozen=True)
class NoCompanionFound:
    reason: str


ResolutionResult = Union[OpenCandidate, CreateCompanion, NoCompanionFound]


def find_candidates(
    current_file: str, sibling_names: Sequence[str], file_type: FileType,
) -> list[str]:
    """Siblings sharing current_file's base name and of the opposite type.

    Listing order is preserved. An empty base name (dotfile) matches nothing.
    """
    name = base_name(current_file)
    if not name:
        return []
    wanted = file_type.opposite()
    return [
        sibling for sibling in sibling_names
        if sibling != current_file
        and base_name(sibling) == name
        and file_type_of(sibling) is wanted
    ]


def fallback_candidates(
    current_file: str,
    directory_name: str,
    sibling_names: Sequence[str],
    file_type: FileType,
) -> list[str]:
    """Directory-name and index fallbacks, in extension priority order.

    A script named ``index`` looks for ``<directory><style ext>``; a style
    file looks for ``index<script ext>``. Every existing match is returned.
    """
    extensions = file_type.companion_extensions()
    if file_type is FileType.SCRIPT:
        if base_name(current_file) != INDEX_NAME or not directory_name:
            return []
        names = [f"{directory_name}{ext}" for ext in extensions]
    elif file_type is FileType.STYLE:
        names = [f"{INDEX_NAME}{ext}" for ext in extensions]
    else:
        return []

    present = set(sibling_names)
    return [n for n in names if n in present and n != current_file]


def select_next(
    candidates: Sequence[str], current_file: str, sibling_names: Sequence[str],
) -> str:
    """Pick the first candidate listed after current_file, wrapping around.

    Candidates are ranked by their position in sibling_names; absent ones
    rank last. Raises ValueError on an empty candidate list.
    """
    if not candidates:
        raise ValueError("select_next requires at least one candidate")

    positions: dict[str, int] = {}
    for i, sibling in enumerate(sibling_names):
        positions.setdefault(sibling, i)
    unlisted = len(sibling_names)

    current_pos = positions.get(current_file, -1)
    ranked = sorted(candidates, key=lambda c: positions.get(c, unlisted))
    for candidate in ranked:
        if positions.get(candidate, unlisted) > current_pos:
            return candidate
    return ranked[0]


def default_companion_name(
    current_file: str,
    directory_name: str,
    file_type: FileType,
    config: ResolutionConfig,
) -> str | None:
    """Filename to propose when no companion exists, or None if underivable."""
    name = base_name(current_file)
    if not name:
        return None

    if file_type is FileType.SCRIPT:
        if name == INDEX_NAME and config.use_directory_name and directory_name:
            return f"{directory_name}{config.style_extension}"
        return f"{name}{config.style_extension}"
    if file_type is FileType.STYLE:
        if name == directory_name and config.use_directory_name:
            return f"{INDEX_NAME}{config.script_extension}"
        return f"{name}{config.script_extension}"
    return None


def check_supported(current_file_path: str | Path) -> FileType:
    """FileType of the current file; raises UnsupportedFileType for UNKNOWN."""
    filename = Path(current_file_path).name
    file_type = file_type_of(filename)
    if file_type is FileType.UNKNOWN:
        raise UnsupportedFileType(filename)
    return file_type


def resolve(
    current_file_path: str | Path,
    sibling_names: Iterable[str],
    config: ResolutionConfig | None = None,
) -> ResolutionResult:
    """Resolve the companion of current_file_path among its siblings.

    Raises UnsupportedFileType when the file is neither script nor style.
    """
    config = config or ResolutionConfig()
    current = Path(current_file_path)
    filename = current.name
    file_type = check_supported(current)

    siblings = list(sibling_names)
    directory_name = current.parent.name

    candidates = find_candidates(filename, siblings, file_type)
    if not candidates and config.use_directory_name:
        candidates = fallback_candidates(filename, directory_name, siblings, file_type)
        if candidates:
            logger.debug("Fallback matched for %s: %s", filename, candidates)

    if candidates:
        chosen = select_next(candidates, filename, siblings)
        logger.debug("Companion of %s: %s (of %d)", filename, chosen, len(candidates))
        return OpenCandidate(path=current.parent / chosen, placement=config.placement)

    default_name = default_companion_name(filename, directory_name, file_type, config)
    if default_name is None:
        return NoCompanionFound(reason=f"No companion found for {filename}")
    return CreateCompanion(
        default_filename=default_name,
        directory=current.parent,
        placement=config.placement,
    )


def target_column(active_column: int | None, placement: Placement) -> int:
    """Editor column for the resolved file, given the active one (1-based)."""
    if active_column is None:
        return 1
    if placement is Placement.CURRENT:
        return active_column
    return 2 if active_column == 1 else 1
