import json
import logging
import os

from utils import external_path

SETTINGS_FILE = external_path("settings.json")

logger = logging.getLogger(__name__)

# key -> (default, minimum)
DEFAULTS = {
    "segment_count": (12, 2),
    "spin_duration_ms": (3500, 0),
    "extra_turns": (5, 0),
    "window_width": (520, 200),
    "window_height": (640, 200),
}


def default_settings():
    return {key: default for key, (default, _) in DEFAULTS.items()}


def load_settings(path=None):
    """Read display settings, falling back to defaults for anything unusable.

    The file is optional and never written. Problems are logged and never
    raised.
    """
    if path is None:
        path = SETTINGS_FILE
    settings = default_settings()

    if not os.path.exists(path):
        return settings

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s, using defaults: %s", path, e)
        return settings

    if not isinstance(data, dict):
        logger.warning("%s does not hold a JSON object, using defaults", path)
        return settings

    for key, (default, minimum) in DEFAULTS.items():
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass but never a sensible count
        if isinstance(value, bool) or not isinstance(value, int):
            logger.warning("Ignoring %s=%r: expected an integer", key, value)
            continue
        if value < minimum:
            logger.warning("Ignoring %s=%r: must be at least %d", key, value, minimum)
            continue
        settings[key] = value

    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings
