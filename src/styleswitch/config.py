"""TOML config loader and validation."""

import tomllib
from pathlib import Path

from styleswitch.filesystem import DEFAULT_EXCLUDE
from styleswitch.resolver import ResolutionConfig

CONFIG_DIR = ".styleswitch"
CONFIG_FILE = "config.toml"


def load_config(project_path: Path) -> dict | None:
    """Load .styleswitch/config.toml. Returns None if the file doesn't exist."""
    config_file = project_path / CONFIG_DIR / CONFIG_FILE
    if not config_file.exists():
        return None
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def find_project_root(start: Path) -> Path | None:
    """Nearest directory at or above start that holds a .styleswitch directory."""
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / CONFIG_DIR).is_dir():
            return candidate
    return None


def optional_config_section(config: dict | None, section: str) -> dict:
    """Extract an optional config section; {} when absent, error if not a table."""
    if config is None:
        return {}
    value = config.get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RuntimeError(
            f"[{section}] in config.toml must be a table, got {type(value).__name__}"
        )
    return value


def resolution_config_from(
    config: dict | None, overrides: dict | None = None,
) -> ResolutionConfig:
    """Merge [companion] with CLI overrides (None values are ignored)."""
    options = dict(optional_config_section(config, "companion"))
    for key, value in (overrides or {}).items():
        if value is not None:
            options[key] = value
    return ResolutionConfig.from_options(options)


def listing_excludes(config: dict | None) -> tuple[str, ...]:
    """Exclude patterns from [listing], or the built-in defaults."""
    listing = optional_config_section(config, "listing")
    exclude = listing.get("exclude")
    if exclude is None:
        return DEFAULT_EXCLUDE
    if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
        raise RuntimeError("[listing] exclude in config.toml must be a list of strings")
    return tuple(exclude)


def create_default_config(project_path: Path) -> Path:
    """Create a default config.toml in .styleswitch/. Returns the path."""
    config_dir = project_path / CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    config_path = config_dir / CONFIG_FILE
    if config_path.exists():
        raise FileExistsError(f"Config already exists: {config_path}")
    config_path.write_text(
        '[companion]\n'
        '# Extension given to a new stylesheet created from a script file\n'
        'css_companion_extension = ".css"\n'
        '# Extension given to a new script created from a stylesheet\n'
        'js_companion_extension = ".js"\n'
        '# index.tsx <-> <directory>.scss fallback\n'
        'use_directory_name = true\n'
        'use_other_column = false\n'
        '\n'
        '[listing]\n'
        'exclude = ["*.min.css", "*.min.js", "*.map"]\n'
    )
    return config_path
