# -*- coding: utf-8 -*-
"""
LocaleForge Application Bootstrap (Composition Root)

Creates and wires one explorer session:
- Asset store and registry
- Mutation operations and translation engine
- Explorer controller

The SessionContext is passed explicitly to whoever needs it and torn down
with close(); no component reaches for global state.
"""

from dataclasses import dataclass
from typing import Optional

from core.json_asset_store import JsonAssetStore
from core.mutation_ops import MutationOps
from core.translation_engine import TranslationEngine
from core.translation_service import ThreadPoolTranslationService
from controllers.explorer_controller import ExplorerController
from interfaces.i_asset_store import IAssetStore
from interfaces.i_translation import ITranslationService
from models.asset_registry import AssetRegistry
from localeforge_settings import load_settings
from localeforge_logger import get_logger
import plugins

logger = get_logger("bootstrap")


@dataclass
class SessionContext:
    """Everything one explorer session owns."""
    settings: dict
    store: IAssetStore
    registry: AssetRegistry
    mutations: MutationOps
    service: ITranslationService
    engine: TranslationEngine
    controller: ExplorerController
    closed: bool = False

    def close(self, wait_ms: int = 2000) -> None:
        """Tear the session down: persist dirty assets and stop translation workers."""
        if self.closed:
            return
        self.closed = True
        try:
            self.store.save_dirty()
        finally:
            self.service.shutdown(wait_ms)
            logger.info("Session closed")


def create_session(settings: Optional[dict] = None,
                   store: Optional[IAssetStore] = None,
                   service: Optional[ITranslationService] = None) -> SessionContext:
    """
    Build a SessionContext.

    Args:
        settings: Settings dict; loaded from disk when omitted
        store: Asset store; a JsonAssetStore over settings["assets_dir"] when omitted
        service: Translation service; a thread pool over settings["active_engine"] when omitted

    Returns:
        A wired SessionContext with its projection already built
    """
    logger.info("=== LocaleForge Session Starting ===")
    settings = settings if settings is not None else load_settings()

    if store is None:
        store = JsonAssetStore(settings["assets_dir"])
        logger.debug(f"  - Asset store: {settings['assets_dir']}")

    if service is None:
        engine_impl = plugins.get_engine(settings.get("active_engine"))
        service = ThreadPoolTranslationService(engine_impl, settings.get("translation_max_workers", 4))
        logger.debug(f"  - Translation engine: {engine_impl.name}")

    registry = AssetRegistry(store)
    mutations = MutationOps(store, registry)
    engine = TranslationEngine(service, store, registry, timeout_sec=settings.get("translation_timeout_sec"))
    controller = ExplorerController(store, registry, mutations, engine)
    controller.rebuild()

    logger.info("=== LocaleForge Session Ready ===")
    return SessionContext(
        settings=settings,
        store=store,
        registry=registry,
        mutations=mutations,
        service=service,
        engine=engine,
        controller=controller,
    )
