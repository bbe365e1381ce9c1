# -*- coding: utf-8 -*-
"""
LocaleForge Translation Engine

Fills the empty locale items of a text asset from a chosen source item.

One independent request is dispatched per empty target item. Requests
complete in any order, on any thread; every completion is re-emitted
through a Qt signal owned by the engine so that it is applied on the
engine's (owner) thread. Failures are reported per item and never stop
sibling requests.

Request lifecycle:  DISPATCHED -> COMPLETED | FAILED | TIMED_OUT
Batch lifecycle:    IDLE -> DISPATCHED -> SETTLED

No cancellation: a new batch simply races with an older one and the last
completion written to an item wins.
"""

import itertools
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Dict, List, Optional

from PySide6.QtCore import QObject, QThread, QTimer, Signal, Slot

from interfaces.i_asset_store import IAssetStore
from interfaces.i_translation import ITranslationService
from models.asset_registry import AssetRegistry
from models.localized_asset import LocaleItem, LocalizedAsset
from localeforge_enums import Language
from localeforge_exceptions import InvariantViolation, NotFoundError, TranslationFailure
from localeforge_logger import get_logger

logger = get_logger("core.translation_engine")


class RequestState(str, Enum):
    DISPATCHED = 'dispatched'
    COMPLETED = 'completed'
    FAILED = 'failed'
    TIMED_OUT = 'timed_out'


class BatchState(str, Enum):
    IDLE = 'idle'
    DISPATCHED = 'dispatched'
    SETTLED = 'settled'


@dataclass(eq=False)
class TranslationRequest:
    """One (source language, source text) -> target language request."""
    request_id: int
    batch: 'TranslationBatch'
    item: LocaleItem
    source_language: Language
    target_language: Language
    source_text: str
    state: RequestState = RequestState.DISPATCHED
    error: Optional[str] = None
    timer: Optional[QTimer] = field(default=None, repr=False)

    @property
    def is_terminal(self) -> bool:
        return self.state is not RequestState.DISPATCHED


@dataclass(eq=False)
class TranslationBatch:
    """All requests dispatched by one translate_missing_locales() call."""
    batch_id: int
    asset: LocalizedAsset
    source_item: LocaleItem
    requests: List[TranslationRequest] = field(default_factory=list)
    state: BatchState = BatchState.IDLE
    dispatch_complete: bool = False

    @property
    def completed_count(self) -> int:
        return sum(1 for r in self.requests if r.state is RequestState.COMPLETED)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.requests if r.state in (RequestState.FAILED, RequestState.TIMED_OUT))

    @property
    def is_settled(self) -> bool:
        return self.state is BatchState.SETTLED


class TranslationEngine(QObject):
    """
    Machine translation of missing locales.

    Signals:
        item_translated(request): a value was written into request.item
        item_failed(request, failure): one request failed (TranslationFailure)
        batch_settled(batch): every request of the batch is terminal
        asset_changed(asset): an asset's values changed and it is dirty
    """

    item_translated = Signal(object)
    item_failed = Signal(object, object)
    batch_settled = Signal(object)
    asset_changed = Signal(object)

    # Internal: carries completions from any thread to the owner thread
    _completion_received = Signal(object, bool, str)

    def __init__(self, service: ITranslationService, store: IAssetStore, registry: AssetRegistry,
                 timeout_sec: Optional[float] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._service = service
        self._store = store
        self._registry = registry
        self._timeout_sec = timeout_sec
        self._batch_ids = itertools.count(1)
        self._request_ids = itertools.count(1)
        self._batches: Dict[int, TranslationBatch] = {}

        self._completion_received.connect(self._on_completion)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def timeout_sec(self) -> Optional[float]:
        return self._timeout_sec

    @timeout_sec.setter
    def timeout_sec(self, value: Optional[float]):
        """Applies to batches dispatched afterwards. None disables the timeout."""
        self._timeout_sec = value

    def in_flight_batches(self, asset: Optional[LocalizedAsset] = None) -> List[TranslationBatch]:
        batches = list(self._batches.values())
        if asset is not None:
            batches = [b for b in batches if b.asset == asset]
        return batches

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    @staticmethod
    def translation_sources(asset: LocalizedAsset) -> List[LocaleItem]:
        """Items that can serve as translation source (non-empty value)."""
        if asset is None or not asset.is_text:
            return []
        return [item for item in asset.locale_items if not item.is_empty]

    def translate_missing_locales(self, asset: LocalizedAsset, source_item: LocaleItem) -> TranslationBatch:
        """
        Dispatch one translation request per empty locale item.

        Args:
            asset: A registered text asset
            source_item: Item of the asset whose value is translated

        Returns:
            The dispatched TranslationBatch (already settled if nothing was missing)

        Raises:
            NotFoundError: asset is gone or source_item is not part of it
            InvariantViolation: asset is not text or the source value is empty
        """
        if asset is None or not self._registry.contains(asset):
            raise NotFoundError("Asset no longer exists", asset_id=asset.id if asset else None)
        if not asset.is_text:
            raise InvariantViolation(f"Only text assets can be translated ('{asset.name}' is "
                                     f"{asset.value_type.value})", asset_id=asset.id, operation="translate")
        if source_item not in asset.locale_items:
            raise NotFoundError("Source locale item no longer exists", asset_id=asset.id)
        if source_item.is_empty:
            raise InvariantViolation("Source locale item has no value to translate",
                                     asset_id=asset.id, operation="translate")

        batch = TranslationBatch(batch_id=next(self._batch_ids), asset=asset, source_item=source_item,
                                 state=BatchState.DISPATCHED)
        self._batches[batch.batch_id] = batch

        targets = [item for item in asset.locale_items
                   if item.is_empty and item.language is not source_item.language]
        logger.info(f"Batch {batch.batch_id}: translating '{asset.name}' from "
                    f"{source_item.language.value} into {len(targets)} locale(s)")

        for item in targets:
            request = TranslationRequest(
                request_id=next(self._request_ids),
                batch=batch,
                item=item,
                source_language=source_item.language,
                target_language=item.language,
                source_text=source_item.value,
            )
            batch.requests.append(request)
            self._dispatch(request)

        batch.dispatch_complete = True
        self._settle_if_done(batch)
        return batch

    # =========================================================================
    # DISPATCH & COMPLETION
    # =========================================================================

    def _dispatch(self, request: TranslationRequest) -> None:
        if self._timeout_sec is not None:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(partial(self._on_timeout, request))
            request.timer = timer
            timer.start(int(self._timeout_sec * 1000))

        try:
            self._service.request_translation(
                request.source_language,
                request.target_language,
                request.source_text,
                partial(self._deliver, request, True),
                partial(self._deliver, request, False),
            )
        except Exception as e:
            logger.error(f"Translation service refused request {request.request_id}: {e}")
            self._on_completion(request, False, str(e))

    def _deliver(self, request: TranslationRequest, ok: bool, payload: str) -> None:
        # May run on any thread: only hand the result over, never touch state here
        self._completion_received.emit(request, ok, payload if payload is not None else "")

    @Slot(object, bool, str)
    def _on_completion(self, request: TranslationRequest, ok: bool, payload: str) -> None:
        if QThread.currentThread() != self.thread():
            logger.critical(f"Completion of request {request.request_id} arrived off the owner thread; ignored")
            return
        if request.is_terminal:
            logger.debug(f"Late completion for request {request.request_id} ({request.state.value}) ignored")
            return
        self._stop_timer(request)

        if ok and payload:
            self._apply_success(request, payload)
        else:
            self._apply_failure(request, RequestState.FAILED, payload or "Empty translation returned")

        self._settle_if_done(request.batch)

    def _on_timeout(self, request: TranslationRequest) -> None:
        if request.is_terminal:
            return
        self._stop_timer(request)
        self._apply_failure(request, RequestState.TIMED_OUT,
                            f"No response within {self._timeout_sec} seconds")
        self._settle_if_done(request.batch)

    def _apply_success(self, request: TranslationRequest, text: str) -> None:
        asset = request.batch.asset
        if not self._registry.contains(asset) or request.item not in asset.locale_items:
            self._apply_failure(request, RequestState.FAILED, "Locale item no longer exists")
            return

        request.item.value = text
        request.state = RequestState.COMPLETED
        asset.dirty = True
        self._store.mark_dirty(asset)
        logger.debug(f"Request {request.request_id}: {request.target_language.value} translated")
        self.item_translated.emit(request)
        self.asset_changed.emit(asset)

    def _apply_failure(self, request: TranslationRequest, state: RequestState, message: str) -> None:
        request.state = state
        request.error = message
        asset = request.batch.asset
        failure = TranslationFailure(
            message,
            asset_id=asset.id,
            source_lang=request.source_language.value,
            target_lang=request.target_language.value,
        )
        logger.error(f"Translation to {request.target_language.value} failed for '{asset.name}': {message}")
        self.item_failed.emit(request, failure)

    def _settle_if_done(self, batch: TranslationBatch) -> None:
        if batch.is_settled or not batch.dispatch_complete:
            return
        if all(r.is_terminal for r in batch.requests):
            batch.state = BatchState.SETTLED
            self._batches.pop(batch.batch_id, None)
            logger.info(f"Batch {batch.batch_id} settled: {batch.completed_count} translated, "
                        f"{batch.failed_count} failed")
            self.batch_settled.emit(batch)

    @staticmethod
    def _stop_timer(request: TranslationRequest) -> None:
        if request.timer is not None:
            request.timer.stop()
            request.timer.deleteLater()
            request.timer = None
