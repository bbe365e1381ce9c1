"""
Threaded translation service.

Runs a synchronous ITranslationEngine on a QThreadPool, one QRunnable per
request, and reports exactly one terminal callback per request.
"""

import threading
from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from interfaces.i_translation import ITranslationEngine, ITranslationService
from localeforge_enums import Language
from localeforge_logger import get_logger

logger = get_logger("core.translation_service")


class TranslationWorkerSignals(QObject):
    """Signals for the TranslationWorker."""
    succeeded = Signal(str)
    failed = Signal(str)


class TranslationWorker(QRunnable):
    """Background worker translating a single text."""

    def __init__(self, engine: ITranslationEngine, source_language: Language,
                 target_language: Language, text: str):
        super().__init__()
        self.engine = engine
        self.source_language = source_language
        self.target_language = target_language
        self.text = text
        self.signals = TranslationWorkerSignals()

    @Slot()
    def run(self):
        source_code = self.source_language.code
        target_code = self.target_language.code
        if source_code is None or target_code is None:
            missing = self.source_language if source_code is None else self.target_language
            self.signals.failed.emit(f"Language '{missing.value}' has no translation code")
            return

        try:
            translated = self.engine.translate(self.text, source_code, target_code)
        except Exception as e:
            logger.warning(f"{self.engine.name}: {source_code}->{target_code} failed: {e}")
            self.signals.failed.emit(str(e) or e.__class__.__name__)
            return

        self.signals.succeeded.emit(translated or "")


class ThreadPoolTranslationService(ITranslationService):
    """
    ITranslationService backed by a QThreadPool.

    Callbacks are invoked from whatever thread Qt delivers the worker
    signals on; consumers must marshal to their own thread.
    """

    def __init__(self, engine: ITranslationEngine, max_workers: int = 4,
                 pool: Optional[QThreadPool] = None):
        self._engine = engine
        self._pool = pool or QThreadPool()
        self._pool.setMaxThreadCount(max_workers)
        self._active: Dict[int, TranslationWorker] = {}
        self._lock = threading.Lock()
        logger.debug(f"Translation service ready: {engine.name} ({max_workers} workers)")

    @property
    def engine(self) -> ITranslationEngine:
        return self._engine

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._active)

    def request_translation(self,
                            source_language: Language,
                            target_language: Language,
                            source_text: str,
                            on_success: Callable[[str], None],
                            on_failure: Callable[[str], None]) -> None:
        if not self._engine.is_available():
            logger.warning(f"{self._engine.name} is not available; request not dispatched")
            on_failure(f"Translation engine '{self._engine.name}' is not available")
            return

        worker = TranslationWorker(self._engine, source_language, target_language, source_text)
        key = id(worker)

        def finish(callback, payload):
            with self._lock:
                self._active.pop(key, None)
            callback(payload)

        worker.signals.succeeded.connect(lambda text: finish(on_success, text))
        worker.signals.failed.connect(lambda message: finish(on_failure, message))

        with self._lock:
            self._active[key] = worker
        self._pool.start(worker)

    def shutdown(self, wait_ms: int = 0) -> None:
        self._pool.clear()
        if wait_ms:
            self._pool.waitForDone(wait_ms)
