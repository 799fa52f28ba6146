from __future__ import annotations

from typing import Dict

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from seedling.core.coordinator import AppCoordinator, Screen
from seedling.ui.colors import GardenColors
from seedling.ui.screens import ChallengeScreen, HomeScreen, ProgressScreen


class MainWindow(QMainWindow):
    """Hosts the three screens and follows ``coordinator.current_screen``."""

    def __init__(self, coordinator: AppCoordinator) -> None:
        super().__init__()
        self._coordinator = coordinator
        self.setWindowTitle("Seedling")
        self.setMinimumSize(480, 720)

        self._stack = QStackedWidget()
        self._home_screen = HomeScreen(coordinator)
        self._progress_screen = ProgressScreen(coordinator)
        self._challenge_screen = ChallengeScreen(coordinator)
        self._screens: Dict[Screen, QWidget] = {
            Screen.HOME: self._home_screen,
            Screen.PROGRESS: self._progress_screen,
            Screen.CHALLENGE: self._challenge_screen,
        }
        for widget in self._screens.values():
            self._stack.addWidget(widget)

        self.setCentralWidget(self._stack)
        self.setStyleSheet(
            f"QMainWindow {{ background: qlineargradient(x1:0, y1:0, x2:0, y2:1,"
            f" stop:0 {GardenColors.BG_TOP}, stop:1 {GardenColors.BG_BOTTOM}); }}"
        )
        self._unsubscribe_screen = coordinator.current_screen.subscribe(self._show_screen)

    def _show_screen(self, screen: Screen) -> None:
        self._stack.setCurrentWidget(self._screens[screen])

    def closeEvent(self, event: QCloseEvent) -> None:
        self._unsubscribe_screen()
        self._progress_screen.detach()
        self._challenge_screen.detach()
        self._coordinator.close()
        super().closeEvent(event)
