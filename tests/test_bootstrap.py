# -*- coding: utf-8 -*-
"""
Tests for session bootstrap and command line handling.
"""

from localeforge_settings import default_settings


class TestCreateSession:

    def test_session_with_injected_collaborators(self, qapp, store, deferred_service):
        from app_bootstrap import create_session

        session = create_session(default_settings(), store=store, service=deferred_service)
        assert session.registry.find("greeting") is not None
        assert [n.asset.id for n in session.controller.projection] == ["farewell", "greeting", "logo"]
        assert session.engine.timeout_sec is None

    def test_session_over_json_directory(self, qapp, assets_dir):
        import localeforge_config as config
        from app_bootstrap import create_session
        from core.json_asset_store import JsonAssetStore
        from core.translation_service import ThreadPoolTranslationService

        settings = default_settings()
        settings["assets_dir"] = str(assets_dir)
        settings["active_engine"] = config.DUMMY_ENGINE_ID
        settings["translation_timeout_sec"] = 3

        session = create_session(settings)
        try:
            assert isinstance(session.store, JsonAssetStore)
            assert isinstance(session.service, ThreadPoolTranslationService)
            assert session.service.engine.id == config.DUMMY_ENGINE_ID
            assert session.engine.timeout_sec == 3
            assert {a.id for a in session.registry.all()} == {"greeting", "logo"}
        finally:
            session.close()

    def test_close_saves_dirty_assets_once(self, qapp, store, deferred_service, greeting_asset):
        from app_bootstrap import create_session

        session = create_session(default_settings(), store=store, service=deferred_service)
        session.mutations.set_value(greeting_asset, greeting_asset.locale_items[1], "Bonjour")

        session.close()
        assert session.closed
        assert not greeting_asset.dirty

        greeting_asset.dirty = True
        store.dirty.append(greeting_asset)
        session.close()
        assert greeting_asset.dirty


class TestCommandLine:

    def test_arguments_override_settings(self, tmp_path):
        from main import apply_arguments, build_parser

        args = build_parser().parse_args([str(tmp_path), "--engine", "x.y", "--timeout", "2.5"])
        settings = apply_arguments(default_settings(), args)
        assert settings["assets_dir"] == str(tmp_path)
        assert settings["active_engine"] == "x.y"
        assert settings["translation_timeout_sec"] == 2.5

    def test_non_positive_timeout_disables(self):
        from main import apply_arguments, build_parser

        settings = default_settings()
        settings["translation_timeout_sec"] = 10
        args = build_parser().parse_args(["--timeout", "0"])
        assert apply_arguments(settings, args)["translation_timeout_sec"] is None

    def test_no_arguments_keep_settings(self):
        from main import apply_arguments, build_parser

        settings = default_settings()
        assert apply_arguments(settings, build_parser().parse_args([])) == settings
