"""Application entry point and setup for the Seedling tracker."""

import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from seedling.core.coordinator import AppCoordinator
from seedling.core.settings import Settings
from seedling.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_coordinator(settings: Optional[Settings] = None) -> AppCoordinator:
    settings = settings or Settings.from_env()
    coordinator = AppCoordinator(settings)
    logging.info(
        "Tracker ready: %d challenges, %d points per level",
        len(coordinator.ledger.challenges.value),
        settings.points_per_level,
    )
    return coordinator


def run() -> None:
    """Initialize the application state and start the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("Seedling")
    app.setApplicationDisplayName("Seedling")

    coordinator = build_coordinator(settings)
    window = MainWindow(coordinator)
    window.show()

    sys.exit(app.exec())
