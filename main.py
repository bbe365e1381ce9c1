import sys
import argparse

from localeforge_logger import get_logger
logger = get_logger("main")

import localeforge_config as config
from localeforge_settings import load_settings
from app_bootstrap import create_session
from gui.qt import QApplication, get_qt_binding


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Localization Explorer: manage localized assets and translate missing locales (LocaleForge).",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "assets_dir",
        help="Directory containing *.asset.json files (defaults to the configured directory).",
        nargs='?',
        default=None
    )
    parser.add_argument(
        "--engine",
        default=None,
        help=f"Translation engine id (e.g. {config.DEFAULT_ENGINE_ID} or {config.DUMMY_ENGINE_ID})."
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds before an unanswered translation request is reported as failed (default: no timeout)."
    )
    return parser


def apply_arguments(settings: dict, args: argparse.Namespace) -> dict:
    """Overlay command line arguments on the loaded settings."""
    settings = dict(settings)
    if args.assets_dir:
        settings["assets_dir"] = args.assets_dir
    if args.engine:
        settings["active_engine"] = args.engine
    if args.timeout is not None:
        settings["translation_timeout_sec"] = args.timeout if args.timeout > 0 else None
    return settings


def main():
    args = build_parser().parse_args()
    settings = apply_arguments(load_settings(), args)

    app = QApplication(sys.argv)
    logger.debug(f"Qt binding: {get_qt_binding()}")

    from gui.explorer_window import ExplorerWindow

    session = create_session(settings)
    window = ExplorerWindow(session.controller)
    window.resize(settings["window_size_w"], settings["window_size_h"])
    app.aboutToQuit.connect(session.close)

    window.show()
    logger.info(f"{config.WINDOW_NAME} started ({settings['assets_dir']}).")

    exit_code = app.exec()
    logger.info(f"LocaleForge finished with exit code {exit_code}.")
    sys.exit(exit_code)


if __name__ == "__main__":
    logger.info("Starting LocaleForge...")
    main()
