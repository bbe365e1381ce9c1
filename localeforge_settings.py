"""
LocaleForge Settings Module
Handles loading and saving of application settings.
"""

import json
import localeforge_config as config
from localeforge_exceptions import SettingsLoadError
from localeforge_logger import get_logger
logger = get_logger("settings")


def default_settings() -> dict:
    """Return a fresh copy of the default settings."""
    return {
        "assets_dir": str(config.DEFAULT_ASSETS_DIR),
        "active_engine": config.DEFAULT_ENGINE_ID,
        "translation_timeout_sec": config.DEFAULT_TRANSLATION_TIMEOUT_SEC,
        "translation_max_workers": config.DEFAULT_TRANSLATION_MAX_WORKERS,
        "window_size_w": config.DEFAULT_WINDOW_W,
        "window_size_h": config.DEFAULT_WINDOW_H,
    }


def _read_settings_file(settings_file) -> dict:
    try:
        with settings_file.open('r', encoding='utf-8') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsLoadError("Settings file is corrupt (invalid JSON)", details=str(settings_file)) from e
    except OSError as e:
        raise SettingsLoadError(f"Settings file could not be read: {e}", details=str(settings_file)) from e

    if not isinstance(loaded_data, dict):
        raise SettingsLoadError("Settings file format is invalid (not a mapping)", details=str(settings_file))
    return loaded_data


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def load_settings():
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = config.SETTINGS_FILE_PATH
    defaults = default_settings()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return defaults

    logger.debug(f"Loading settings: {settings_file}")
    try:
        loaded_data = _read_settings_file(settings_file)
    except SettingsLoadError as e:
        logger.error(f"{e}. Using defaults.")
        return defaults

    settings = defaults.copy()
    settings.update(loaded_data)

    if not isinstance(settings.get("assets_dir"), str) or not settings["assets_dir"].strip():
        logger.warning("Invalid 'assets_dir' value. Using default.")
        settings["assets_dir"] = defaults["assets_dir"]

    if not isinstance(settings.get("active_engine"), str):
        logger.warning(f"Invalid 'active_engine' value ({settings.get('active_engine')}). Using default.")
        settings["active_engine"] = defaults["active_engine"]

    # None is a valid value: no timeout policy
    timeout = settings.get("translation_timeout_sec")
    if timeout is not None and not _is_positive_number(timeout):
        logger.warning(f"Invalid 'translation_timeout_sec' value ({timeout}). Timeout disabled.")
        settings["translation_timeout_sec"] = None

    workers = settings.get("translation_max_workers")
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
        logger.warning(f"Invalid 'translation_max_workers' value ({workers}). Using default.")
        settings["translation_max_workers"] = defaults["translation_max_workers"]

    for key in ("window_size_w", "window_size_h"):
        if not isinstance(settings.get(key), int):
            logger.warning(f"Invalid '{key}' value. Using default.")
            settings[key] = defaults[key]

    logger.debug("Settings loaded successfully.")
    return settings


def save_settings(settings_data):
    """Save settings to JSON file."""

    settings_file = config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")

        settings_file.parent.mkdir(parents=True, exist_ok=True)

        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.info("Settings saved successfully.")
        return True
    except (OSError, TypeError) as e:
        logger.critical(f"Settings could not be saved ({settings_file}): {e}")
        return False
