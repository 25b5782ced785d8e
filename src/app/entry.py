"""
Application Entry Point.

This module contains the main() function and cleanup logic for the application.
Separated from MainWindow to allow for easier testing.
"""

import sys

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from PySide6.QtWidgets import QApplication  # noqa: E402

from src.app.constants import WINDOW_SETTINGS_APP, WINDOW_SETTINGS_KEY  # noqa: E402
from src.core.app_config import AppConfig  # noqa: E402
from src.core.logging_config import (  # noqa: E402
    get_logger,
    setup_logging,
    shutdown_logging,
)

logger = get_logger(__name__)


def main() -> None:
    """Application entry point."""
    from src.app.main_window import MainWindow

    config = AppConfig.from_env()
    setup_logging(
        debug_mode=config.debug_mode,
        log_to_console=config.log_to_console,
        log_dir=config.log_dir,
    )

    try:
        logger.info("Starting Application...")

        app = QApplication(sys.argv)
        app.setOrganizationName(WINDOW_SETTINGS_KEY)
        app.setApplicationName(WINDOW_SETTINGS_APP)

        window = MainWindow(config=config)
        window.show()

        logger.info("Entering Event Loop...")
        exit_code = app.exec()
        cleanup_app()
        sys.exit(exit_code)
    except Exception:
        logger.exception("CRITICAL: Unhandled exception in main application loop")
        sys.exit(1)


def cleanup_app() -> None:
    """Performs global cleanup operations before exit."""
    logger.info("Shutting down logging.")
    shutdown_logging()
