# -*- coding: utf-8 -*-
"""
LocaleForge Translation Engines

Built-in machine translation engines, selected by id.
"""

from typing import Dict, List, Optional

import localeforge_config as config
from interfaces.i_translation import ITranslationEngine
from localeforge_logger import get_logger

logger = get_logger("plugins")


def available_engines() -> Dict[str, ITranslationEngine]:
    """Instantiate every built-in engine, keyed by id."""
    from plugins.built_in.dummy_engine import DummyEngine
    from plugins.built_in.google_translator import GoogleTranslateEngine

    engines = [GoogleTranslateEngine(), DummyEngine()]
    return {engine.id: engine for engine in engines}


def engine_ids() -> List[str]:
    return list(available_engines().keys())


def get_engine(engine_id: Optional[str]) -> ITranslationEngine:
    """Return the engine with the given id, falling back to the default engine."""
    engines = available_engines()
    engine = engines.get(engine_id or config.DEFAULT_ENGINE_ID)
    if engine is None:
        logger.warning(f"Engine '{engine_id}' not found. Falling back to {config.DEFAULT_ENGINE_ID}.")
        engine = engines[config.DEFAULT_ENGINE_ID]
    return engine


__all__ = ['available_engines', 'engine_ids', 'get_engine']
