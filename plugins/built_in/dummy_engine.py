import localeforge_config as config
from interfaces.i_translation import ITranslationEngine


class DummyEngine(ITranslationEngine):
    """
    A dummy translation engine for testing and offline use.
    Returns the source text tagged with the target language code.
    """

    def __init__(self, prefix: str = "[{target}] ", available: bool = True):
        self.prefix = prefix
        self.available = available

    @property
    def id(self) -> str:
        return config.DUMMY_ENGINE_ID

    @property
    def name(self) -> str:
        return "Dummy Engine (Test)"

    def translate(self, text: str, source_code: str, target_code: str) -> str:
        return f"{self.prefix.format(source=source_code, target=target_code)}{text}"

    def is_available(self) -> bool:
        return self.available
