"""Configuration defaults for nodetui."""

import os

# Version from package (can be updated)
VERSION = "0.1.0"

# Fallback screen size when the environment does not provide one
DEFAULT_COLUMNS = 80
DEFAULT_ROWS = 24

# Environment variables consulted for the default screen size
ENV_COLUMNS = "COLUMNS"
ENV_ROWS = "LINES"

# Automatic layout mode used when a Layout is created without one
DEFAULT_LAYOUT_MODE = "inline"


def _read_positive_int(name: str, fallback: int) -> int:
    value = os.environ.get(name)
    if not value:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def get_default_size() -> tuple[int, int]:
    """Get the default screen size as ``(columns, rows)``.

    Checks ENV_COLUMNS and ENV_ROWS first, then falls back to
    DEFAULT_COLUMNS x DEFAULT_ROWS. Non-numeric or non-positive values
    are ignored.

    Returns:
        Tuple of (columns, rows)
    """
    return (
        _read_positive_int(ENV_COLUMNS, DEFAULT_COLUMNS),
        _read_positive_int(ENV_ROWS, DEFAULT_ROWS),
    )
