"""Filesystem collaborators: sibling listing and empty-file creation."""

import logging
from collections.abc import Iterable
from pathlib import Path

import pathspec

from styleswitch.errors import DirectoryReadError, FileCreateError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE: tuple[str, ...] = (
    "*.min.css",
    "*.min.js",
    "*.map",
)


def compile_excludes(patterns: Iterable[str]) -> pathspec.PathSpec | None:
    """Compile gitignore-style patterns. Returns None when there are none."""
    lines = [p for p in patterns if p.strip()]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def list_siblings(
    directory: Path, exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> list[str]:
    """Return the names of regular files in directory, sorted by name.

    Names matching an exclude pattern are dropped. Any OSError while reading
    the directory is raised as DirectoryReadError.
    """
    spec = compile_excludes(exclude)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
        names = [entry.name for entry in entries if entry.is_file()]
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    if spec is not None:
        kept = [name for name in names if not spec.match_file(name)]
        if len(kept) != len(names):
            logger.debug("Excluded %d file(s) in %s", len(names) - len(kept), directory)
        names = kept
    return names


def create_empty_file(path: Path) -> Path:
    """Create an empty file at path. Never truncates an existing file."""
    try:
        with open(path, "x", encoding="utf-8"):
            pass
    except OSError as e:
        raise FileCreateError(path, e) from e
    logger.info("Created %s", path)
    return path
