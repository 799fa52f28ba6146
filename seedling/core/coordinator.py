from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from seedling.core.challenges import ChallengeRepository
from seedling.core.ledger import ChallengeLedger
from seedling.core.observable import Observable
from seedling.core.progress import ProgressEngine
from seedling.core.settings import Settings

logger = logging.getLogger(__name__)


class Screen(Enum):
    HOME = "home"
    PROGRESS = "progress"
    CHALLENGE = "challenge"


class AppCoordinator:
    """Application-level state: navigation plus the ledger-to-progress link.

    Owns one ``ChallengeLedger`` and one ``ProgressEngine`` for its whole life.
    Every point the ledger gains is turned into one ``1 / points_per_level``
    step of progress. ``previous_total_points`` remembers the last total already
    converted, so a replayed or repeated total never counts twice.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or Settings()
        seed = ChallengeRepository(self._settings.catalog_path).all()
        self.ledger = ChallengeLedger(seed, points_per_item=self._settings.points_per_item)
        self.progress = ProgressEngine()

        self.current_screen: Observable[Screen] = Observable(Screen.HOME, "current_screen")
        self.on_progress_screen: Observable[bool] = Observable(False, "on_progress_screen")

        self._step = self._settings.progress_per_point
        self.previous_total_points = self.ledger.total_points.value
        self._unsubscribe: Optional[Callable[[], None]] = self.ledger.total_points.subscribe(
            self._on_total_points
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def navigate_to(self, screen: Screen) -> None:
        self.current_screen.set(screen)
        self.on_progress_screen.set(screen is Screen.PROGRESS)

    def navigate_home(self) -> None:
        self.navigate_to(Screen.HOME)

    def donate_clothing(self, item_count: int) -> None:
        self.ledger.donate(item_count)

    def close(self) -> None:
        """Stop listening to the ledger. Later point changes no longer move progress."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_total_points(self, total_points: int) -> None:
        delta = max(0, total_points - self.previous_total_points)
        self.previous_total_points = total_points
        if delta:
            logger.debug("Converting %d new point(s) into progress", delta)
        for _ in range(delta):
            self.progress.advance(self._step)
