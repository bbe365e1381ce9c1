from deep_translator import GoogleTranslator

import localeforge_config as config
from interfaces.i_translation import ITranslationEngine
from localeforge_logger import get_logger

logger = get_logger("plugin.google")


class GoogleTranslateEngine(ITranslationEngine):
    """
    Google Translate (Free) engine using deep-translator.
    """

    @property
    def id(self) -> str:
        return config.DEFAULT_ENGINE_ID

    @property
    def name(self) -> str:
        return "Google Translate (Free)"

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        # A translator instance per call: workers run concurrently
        translator = GoogleTranslator(source=source_code, target=target_code)
        translated = translator.translate(text)
        if translated is None:
            logger.warning(f"Empty response for {source_code}->{target_code}")
            raise ValueError(f"Google returned no translation for {source_code}->{target_code}")
        return translated

    def is_available(self) -> bool:
        return True
