"""
Settings Module for PickScan

Provides persistent storage for extraction preferences using JSON.
Settings are stored in pickscan.json in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

# Settings file location (working directory)
SETTINGS_FILE = Path("pickscan.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "search_radius": 100.0,
    "recognizer": "tesseract",
    "tesseract_cmd": None,
    "language": "eng",
    "upscale": 1.0,
    "min_confidence": 0.0,
    "debug_enabled": False,
}


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Settings file (default: SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE

    if not settings_file.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(settings_file, 'r', encoding='utf-8') as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise ValueError("settings root must be an object")

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Union[str, Path]] = None) -> None:
    """
    Save settings to a JSON file.

    Args:
        settings: Settings dictionary to save
        path: Settings file (default: SETTINGS_FILE)
    """
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    try:
        with open(settings_file, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")


def recognizer_config(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Recognizer keyword options taken from settings."""
    return {
        "tesseract_cmd": settings.get("tesseract_cmd"),
        "language": settings.get("language"),
        "upscale": settings.get("upscale"),
        "min_confidence": settings.get("min_confidence"),
    }
