# -*- coding: utf-8 -*-
"""
LocaleForge logging setup.

Everything logs under the 'localeforge' namespace. Handlers live on that
logger only: a console handler (INFO, or LOCALEFORGE_LOG_LEVEL) and a daily
file in ~/.localeforge/logs that records DEBUG and up. Module loggers come
from get_logger() and never carry handlers of their own.
"""

import logging
import os
from datetime import date
from pathlib import Path
from typing import List, Optional

ROOT_LOGGER_NAME = "localeforge"
LOG_DIR = Path.home() / ".localeforge" / "logs"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "LOCALEFORGE_LOG_LEVEL"


def log_file_for(day: date, log_dir: Path = LOG_DIR) -> Path:
    return log_dir / f"localeforge_{day:%Y%m%d}.log"


def _console_level() -> int:
    name = os.environ.get(LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_handlers(log_dir: Path = LOG_DIR) -> List[logging.Handler]:
    """
    Create the console and file handlers.

    The file handler is left out when the log directory cannot be created
    or opened; console logging keeps working.
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(_console_level())
    console.setFormatter(formatter)
    handlers: List[logging.Handler] = [console]

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_for(date.today(), log_dir), encoding='utf-8')
    except OSError as e:
        console.handle(logging.makeLogRecord({
            'name': ROOT_LOGGER_NAME,
            'levelno': logging.WARNING,
            'levelname': 'WARNING',
            'msg': f"File logging disabled, {log_dir} is not writable: {e}",
        }))
        return handlers

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    handlers.append(file_handler)
    return handlers


def configure_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """Attach handlers to the 'localeforge' logger. Later calls are no-ops."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if root.handlers:
        return root

    root.setLevel(logging.DEBUG)
    # Records stop here; Python's root logger never sees them twice
    root.propagate = False
    for handler in build_handlers(log_dir or LOG_DIR):
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return the 'localeforge.<name>' logger, configuring logging on first use."""
    configure_logging()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
