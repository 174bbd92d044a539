"""Error taxonomy for companion resolution and the host collaborators."""

from pathlib import Path


class StyleSwitchError(Exception):
    """Base class for every error surfaced to the user."""


class UnsupportedFileType(StyleSwitchError):
    """The current file is neither a script nor a style file."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"File must be a JS or CSS file: {filename}")


class DirectoryReadError(StyleSwitchError):
    """Listing the current file's directory failed."""

    def __init__(self, directory: Path, cause: OSError):
        self.directory = directory
        self.cause = cause
        super().__init__(f"Could not read directory {directory}: {cause}")


class FileCreateError(StyleSwitchError):
    """Writing the new companion file failed."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not create file {path}: {cause}")


class NoCompanion(StyleSwitchError):
    """No companion exists and none can be proposed for creation."""
