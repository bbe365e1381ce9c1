from pathlib import Path

VERSION = "0.1.0"
WINDOW_NAME = "Localization Explorer"

SETTINGS_DIR = Path.home() / ".localeforge"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

# Default directory scanned for *.asset.json files
DEFAULT_ASSETS_DIR = SETTINGS_DIR / "assets"
ASSET_FILE_SUFFIX = ".asset.json"

DEFAULT_ENGINE_ID = "localeforge.engine.google_free"
DUMMY_ENGINE_ID = "localeforge.engine.dummy"

# None = wait for the translation service forever (no timeout policy)
DEFAULT_TRANSLATION_TIMEOUT_SEC = None
DEFAULT_TRANSLATION_MAX_WORKERS = 4

DEFAULT_WINDOW_W = 900
DEFAULT_WINDOW_H = 600

__all__ = [
    "VERSION", "WINDOW_NAME",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "DEFAULT_ASSETS_DIR", "ASSET_FILE_SUFFIX",
    "DEFAULT_ENGINE_ID", "DUMMY_ENGINE_ID",
    "DEFAULT_TRANSLATION_TIMEOUT_SEC", "DEFAULT_TRANSLATION_MAX_WORKERS",
    "DEFAULT_WINDOW_W", "DEFAULT_WINDOW_H",
]

# Import logger at the end to avoid circular imports
from localeforge_logger import get_logger
_logger = get_logger("config")
_logger.debug("localeforge_config.py loaded")
