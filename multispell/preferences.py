"""Persistence of the enabled-dictionaries preference."""

import json
from pathlib import Path

from loguru import logger

from multispell.core.types import ActiveSet
from multispell.utils.helpers import write_file_safely

PREFERENCE_KEY = "enabled_dictionaries"


def load_enabled_dictionaries(path: str | Path | None) -> ActiveSet | None:
    """Read the stored active set.

    Returns:
        The stored list, or None if nothing is stored (no path, missing file,
        or unreadable content)
    """
    if not path:
        return None

    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"⚠️  Ignoring unreadable preferences file {path}: {e}")
        return None

    enabled = data.get(PREFERENCE_KEY) if isinstance(data, dict) else None
    if not isinstance(enabled, list):
        logger.warning(f"⚠️  Preferences file {path} has no '{PREFERENCE_KEY}' list")
        return None
    return [str(dictionary) for dictionary in enabled]


def save_enabled_dictionaries(path: str | Path | None, active_set: ActiveSet) -> None:
    """Store the active set, keeping any other keys already in the file."""
    if not path:
        return

    path = Path(path)
    data = {}
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            data = {}
        if not isinstance(data, dict):
            data = {}
    data[PREFERENCE_KEY] = list(active_set)

    write_file_safely(
        path,
        lambda f: json.dump(data, f, indent=2),
        operation_name="writing preferences",
    )
    logger.debug(f"Saved {len(active_set)} enabled dictionaries to {path}")
