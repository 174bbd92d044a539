"""Centralized companion extension constants and file classification."""

from enum import Enum

SCRIPT_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Order is fallback priority; compound suffixes come before their tails.
STYLE_EXTENSIONS: tuple[str, ...] = (".module.scss", ".css", ".scss", ".sass", ".less")

DEFAULT_STYLE_EXTENSION = ".css"
DEFAULT_SCRIPT_EXTENSION = ".js"

INDEX_NAME = "index"


class FileType(Enum):
    SCRIPT = "script"
    STYLE = "style"
    UNKNOWN = "unknown"

    def opposite(self) -> "FileType":
        if self is FileType.SCRIPT:
            return FileType.STYLE
        if self is FileType.STYLE:
            return FileType.SCRIPT
        return FileType.UNKNOWN

    def companion_extensions(self) -> tuple[str, ...]:
        """Extensions a companion of this file type may carry."""
        if self is FileType.SCRIPT:
            return STYLE_EXTENSIONS
        if self is FileType.STYLE:
            return SCRIPT_EXTENSIONS
        return ()


def classify(extension: str) -> FileType:
    """Map an extension (leading dot included) to its FileType."""
    if extension in SCRIPT_EXTENSIONS:
        return FileType.SCRIPT
    if extension in STYLE_EXTENSIONS:
        return FileType.STYLE
    return FileType.UNKNOWN


def dotted_suffixes(filename: str) -> list[str]:
    """Every dotted suffix of filename, longest first.

    ``"a.module.scss"`` -> ``[".module.scss", ".scss"]``. A leading dot on a
    dotfile is part of its suffix chain.
    """
    suffixes = []
    idx = filename.find(".")
    while idx != -1:
        suffixes.append(filename[idx:])
        idx = filename.find(".", idx + 1)
    return suffixes


def file_type_of(filename: str) -> FileType:
    """Classify a bare filename by its longest recognized suffix."""
    for suffix in dotted_suffixes(filename):
        file_type = classify(suffix)
        if file_type is not FileType.UNKNOWN:
            return file_type
    return FileType.UNKNOWN


def base_name(filename: str) -> str:
    """Filename with everything from the first dot removed."""
    return filename.split(".", 1)[0]
