"""Read-only user defaults for the pager.

Defaults are stored in a JSON file in an OS-appropriate config location.
The file is only ever read; nothing about a session is written back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


@dataclass
class PagerSettings:
    """Startup defaults; command-line flags override them."""
    numbers: bool = False
    relative: bool = False
    quit_at_eof: bool = False
    offset: int = 0


def default_config_path() -> Path:
    """Return the platform-specific location of the config file."""
    return Path(platformdirs.user_config_dir("multipager")) / CONFIG_FILENAME


def _read_json(path: Path) -> Dict[str, Any]:
    """Load the config file, returning an empty dict if it is missing or bad."""
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> PagerSettings:
    """Load settings from ``path`` or the default config file.

    Unknown keys are ignored; values of the wrong type are logged and
    replaced by the default.
    """
    path = Path(path) if path is not None else default_config_path()
    data = _read_json(path)
    settings = PagerSettings()

    for key in ('numbers', 'relative', 'quit_at_eof'):
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, bool):
            setattr(settings, key, value)
        else:
            logger.warning(f"Ignoring setting {key!r}: expected a boolean, got {value!r}")

    if 'offset' in data:
        value = data['offset']
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            settings.offset = value
        else:
            logger.warning(f"Ignoring setting 'offset': expected a non-negative integer, got {value!r}")

    return settings
