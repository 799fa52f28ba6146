"""The three screens: home, plant progress and challenge list.

Screens only read observables from the coordinator and call its commands.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from seedling.core.challenges import Challenge
from seedling.core.coordinator import AppCoordinator, Screen
from seedling.core.progress import MAX_LEVEL
from seedling.ui.colors import GardenColors, level_fill
from seedling.ui.models import (
    COSMETICS,
    cosmetic_label,
    format_progress,
    parse_item_count,
    plant_label,
    show_carousel,
)


def _primary_button(text: str, on_click: Callable[[], None]) -> QPushButton:
    button = QPushButton(text)
    button.setCursor(Qt.PointingHandCursor)
    button.setMinimumHeight(44)
    button.setStyleSheet(
        f"QPushButton {{ background: {GardenColors.PRIMARY}; color: white;"
        f" border: none; border-radius: 10px; font-size: 15px; padding: 0 18px; }}"
        f"QPushButton:hover {{ background: {GardenColors.PRIMARY_LIGHT}; }}"
        f"QPushButton:disabled {{ background: {GardenColors.TEXT_MUTED}; }}"
    )
    button.clicked.connect(on_click)
    return button


class HomeScreen(QWidget):
    def __init__(self, coordinator: AppCoordinator, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        title = QLabel("🌱 Seedling")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: 34px; font-weight: 700; color: {GardenColors.PRIMARY_DARK};")

        subtitle = QLabel("Grow your tree with small sustainable habits.")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"font-size: 15px; color: {GardenColors.TEXT_SECONDARY};")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(18)
        layout.addStretch(1)
        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addWidget(
            _primary_button("Start Donation", lambda: coordinator.navigate_to(Screen.PROGRESS)),
            0,
            Qt.AlignHCenter,
        )
        layout.addStretch(1)


class ProgressScreen(QWidget):
    """Plant (or cosmetic carousel), level, progress bar and the donation form."""

    def __init__(self, coordinator: AppCoordinator, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._coordinator = coordinator
        engine = coordinator.progress

        self._plant = QLabel("")
        self._plant.setAlignment(Qt.AlignCenter)
        self._plant.setStyleSheet("font-size: 42px;")

        self._next_cosmetic = _primary_button(
            "Next cosmetic", lambda: engine.advance_cosmetic(len(COSMETICS))
        )

        self._level = QLabel("")
        self._level.setAlignment(Qt.AlignCenter)
        self._level.setStyleSheet(f"font-size: 22px; font-weight: 600; color: {GardenColors.TEXT_PRIMARY};")

        self._bar = QProgressBar()
        self._bar.setRange(0, 1000)
        self._bar.setTextVisible(False)
        self._bar.setFixedHeight(14)

        self._percent = QLabel("")
        self._percent.setAlignment(Qt.AlignCenter)
        self._points = QLabel("")
        self._points.setAlignment(Qt.AlignCenter)
        self._points.setStyleSheet(f"color: {GardenColors.TEXT_SECONDARY};")

        self._count_input = QLineEdit()
        self._count_input.setPlaceholderText("Number of clothing items, e.g. 5")
        self._count_input.textChanged.connect(self._on_count_changed)
        self._donate = _primary_button(
            f"Donate (+{coordinator.ledger.points_per_item} pts each)", self._donate_clicked
        )
        self._donate.setEnabled(False)
        self._message = QLabel("")
        self._message.setAlignment(Qt.AlignCenter)

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(14)
        layout.addWidget(self._plant)
        layout.addWidget(self._next_cosmetic, 0, Qt.AlignHCenter)
        layout.addWidget(self._level)
        layout.addWidget(self._bar)
        layout.addWidget(self._percent)
        layout.addWidget(self._points)
        layout.addWidget(_primary_button("Challenges", lambda: coordinator.navigate_to(Screen.CHALLENGE)))
        layout.addWidget(_primary_button("Go Back", coordinator.navigate_home))
        layout.addWidget(divider)
        layout.addWidget(QLabel("Donate clothing"))
        layout.addWidget(self._count_input)
        layout.addWidget(self._donate)
        layout.addWidget(self._message)
        layout.addStretch(1)

        self._unsubscribers = [
            engine.progress.subscribe(lambda _: self._refresh()),
            engine.level.subscribe(lambda _: self._refresh()),
            engine.cosmetic_index.subscribe(lambda _: self._refresh()),
            coordinator.ledger.total_points.subscribe(
                lambda total: self._points.setText(f"Total Points: {total}")
            ),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _refresh(self) -> None:
        engine = self._coordinator.progress
        fraction = engine.progress.value
        level = engine.level.value
        carousel = show_carousel(engine.is_max_level.value, fraction)
        if carousel:
            self._plant.setText(cosmetic_label(engine.cosmetic_index.value))
        else:
            self._plant.setText(plant_label(level))
        self._next_cosmetic.setVisible(carousel)
        self._level.setText(f"Level {level}")
        self._bar.setValue(int(round(fraction * 1000)))
        self._bar.setStyleSheet(
            f"QProgressBar {{ background: {GardenColors.PROGRESS_TRACK}; border: none; border-radius: 7px; }}"
            f"QProgressBar::chunk {{ background: {level_fill(level, MAX_LEVEL)}; border-radius: 7px; }}"
        )
        self._percent.setText(format_progress(fraction))

    def _on_count_changed(self, text: str) -> None:
        self._donate.setEnabled(bool(text.strip()))

    def _donate_clicked(self) -> None:
        count = parse_item_count(self._count_input.text())
        if count is None:
            self._message.setText("Enter a positive number.")
            return
        self._coordinator.donate_clothing(count)
        self._message.setText(
            f"✅ Donated {count} item(s) → +{count * self._coordinator.ledger.points_per_item} points!"
        )
        self._count_input.clear()


class ChallengeCard(QFrame):
    def __init__(self, on_toggle: Callable[[int, bool], None], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._on_toggle = on_toggle
        self._challenge: Optional[Challenge] = None

        self._title = QLabel("")
        self._title.setStyleSheet(f"font-size: 16px; font-weight: 600; color: {GardenColors.TEXT_PRIMARY};")
        self._description = QLabel("")
        self._description.setWordWrap(True)
        self._description.setStyleSheet(f"color: {GardenColors.TEXT_SECONDARY};")
        self._meta = QLabel("")
        self._meta.setStyleSheet(f"color: {GardenColors.TEXT_MUTED};")
        self._toggle = QPushButton("")
        self._toggle.setCursor(Qt.PointingHandCursor)
        self._toggle.clicked.connect(self._toggle_clicked)

        text_col = QVBoxLayout()
        text_col.addWidget(self._title)
        text_col.addWidget(self._description)
        text_col.addWidget(self._meta)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        layout.addLayout(text_col, 1)
        layout.addWidget(self._toggle, 0, Qt.AlignVCenter)

    def set_challenge(self, challenge: Challenge) -> None:
        self._challenge = challenge
        self._title.setText(challenge.title)
        self._description.setText(challenge.description)
        self._meta.setText(f"{challenge.category.display_name} · {challenge.points} pts")
        self._toggle.setText("Undo" if challenge.completed else "Complete")
        background = GardenColors.CARD_COMPLETED if challenge.completed else GardenColors.CARD_BG
        self.setStyleSheet(f"ChallengeCard {{ background: {background}; border-radius: 12px; }}")

    def _toggle_clicked(self) -> None:
        if self._challenge is not None:
            self._on_toggle(self._challenge.id, self._challenge.completed)


class ChallengeScreen(QWidget):
    def __init__(self, coordinator: AppCoordinator, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._coordinator = coordinator
        self._cards: List[ChallengeCard] = []

        self._total = QLabel("")
        self._total.setAlignment(Qt.AlignCenter)
        self._total.setStyleSheet(f"font-size: 22px; font-weight: 700; color: {GardenColors.PRIMARY};")

        list_host = QWidget()
        self._list_layout = QVBoxLayout(list_host)
        self._list_layout.setSpacing(12)
        self._list_layout.addStretch(1)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setWidget(list_host)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.addWidget(QLabel("Total Points Earned"), 0, Qt.AlignHCenter)
        layout.addWidget(self._total)
        layout.addWidget(scroll, 1)
        layout.addWidget(_primary_button("Go Back", lambda: coordinator.navigate_to(Screen.PROGRESS)))

        ledger = coordinator.ledger
        self._unsubscribers = [
            ledger.total_points.subscribe(lambda total: self._total.setText(f"{total} pts")),
            ledger.challenges.subscribe(self._render),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _render(self, challenges: Tuple[Challenge, ...]) -> None:
        while len(self._cards) < len(challenges):
            card = ChallengeCard(self._toggle)
            self._list_layout.insertWidget(len(self._cards), card)
            self._cards.append(card)
        for card, challenge in zip(self._cards, challenges):
            card.set_challenge(challenge)

    def _toggle(self, challenge_id: int, completed: bool) -> None:
        if completed:
            self._coordinator.ledger.reset(challenge_id)
        else:
            self._coordinator.ledger.complete(challenge_id)
