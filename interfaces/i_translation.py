from abc import ABC, abstractmethod
from typing import Callable

from localeforge_enums import Language


class ITranslationEngine(ABC):
    """
    Interface for machine translation engines.

    Engines are synchronous and may block on network I/O; they are only
    ever called from worker threads.
    """

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate one text.

        Raises:
            Any exception on failure; callers turn it into a TranslationFailure.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Checked before each request; an unavailable engine fails the request at once."""
        pass


class ITranslationService(ABC):
    """
    Fire-and-forget translation requests.

    Exactly one of on_success(text) or on_failure(message) is called per
    request, from any thread.
    """

    @abstractmethod
    def request_translation(self,
                            source_language: Language,
                            target_language: Language,
                            source_text: str,
                            on_success: Callable[[str], None],
                            on_failure: Callable[[str], None]) -> None:
        pass

    def shutdown(self, wait_ms: int = 0) -> None:
        """Release worker resources. Optional."""
        pass
