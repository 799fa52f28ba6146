"""Tests for seedling.core.coordinator – navigation and points-to-progress wiring."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from seedling.core.coordinator import AppCoordinator, Screen
from seedling.core.progress import MAX_LEVEL
from seedling.core.settings import Settings


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def app() -> AppCoordinator:
    return AppCoordinator()


@pytest.fixture()
def advance_calls(app: AppCoordinator, monkeypatch: pytest.MonkeyPatch) -> list:
    """Record every amount the coordinator passes to ProgressEngine.advance."""
    calls: list = []
    original = app.progress.advance

    def _recording(amount):
        calls.append(amount)
        original(amount)

    monkeypatch.setattr(app.progress, "advance", _recording)
    return calls


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------

class TestNavigation:
    def test_starts_home(self, app: AppCoordinator):
        assert app.current_screen.value is Screen.HOME
        assert app.on_progress_screen.value is False

    def test_navigate_to_progress(self, app: AppCoordinator):
        app.navigate_to(Screen.PROGRESS)
        assert app.current_screen.value is Screen.PROGRESS
        assert app.on_progress_screen.value is True

    def test_navigate_to_challenge(self, app: AppCoordinator):
        app.navigate_to(Screen.PROGRESS)
        app.navigate_to(Screen.CHALLENGE)
        assert app.current_screen.value is Screen.CHALLENGE
        assert app.on_progress_screen.value is False

    def test_navigate_home(self, app: AppCoordinator):
        app.navigate_to(Screen.PROGRESS)
        app.navigate_home()
        assert app.current_screen.value is Screen.HOME
        assert app.on_progress_screen.value is False

    def test_screen_changes_are_published(self, app: AppCoordinator):
        seen = []
        app.current_screen.subscribe(seen.append, replay=False)
        app.navigate_to(Screen.CHALLENGE)
        app.navigate_home()
        assert seen == [Screen.CHALLENGE, Screen.HOME]


# ---------------------------------------------------------------------------
# Points to progress
# ---------------------------------------------------------------------------

class TestPointsToProgress:
    def test_owns_fresh_leaves(self, app: AppCoordinator):
        assert app.ledger.total_points.value == 0
        assert app.progress.level.value == 1
        assert app.previous_total_points == 0

    def test_complete_fifteen_points(self, app: AppCoordinator, advance_calls: list):
        app.ledger.complete(2)
        assert len(advance_calls) == 15
        assert all(float(amount) == pytest.approx(1 / 50) for amount in advance_calls)
        assert app.progress.progress.value == pytest.approx(0.3)
        assert app.progress.level.value == 1
        assert app.previous_total_points == 15

    def test_repeat_complete_adds_nothing(self, app: AppCoordinator, advance_calls: list):
        app.ledger.complete(2)
        app.ledger.complete(2)
        assert len(advance_calls) == 15

    def test_level_up_from_points(self, app: AppCoordinator):
        app.ledger.complete(5)  # 30
        app.ledger.complete(4)  # 25
        assert app.progress.level.value == 2
        assert app.progress.progress.value == pytest.approx(0.1)

    def test_whole_catalog_reaches_max(self, app: AppCoordinator):
        for challenge in app.ledger.challenges.value:
            app.ledger.complete(challenge.id)
        assert app.ledger.total_points.value == 190
        assert app.progress.level.value == MAX_LEVEL
        assert app.progress.progress.value == 1.0

    def test_reset_does_not_regress_progress(self, app: AppCoordinator, advance_calls: list):
        app.ledger.complete(3)  # 20
        app.ledger.reset(3)
        assert len(advance_calls) == 20
        assert app.progress.progress.value == pytest.approx(0.4)
        assert app.previous_total_points == 0

    def test_points_earned_again_after_reset_count_again(self, app: AppCoordinator):
        app.ledger.complete(3)
        app.ledger.reset(3)
        app.ledger.complete(3)
        assert app.progress.progress.value == pytest.approx(0.8)

    def test_donation_drives_progress(self, app: AppCoordinator, advance_calls: list):
        app.donate_clothing(5)
        assert app.ledger.total_points.value == 50
        assert len(advance_calls) == 50
        assert app.progress.level.value == 2
        assert app.progress.progress.value == 0.0

    def test_replayed_total_is_not_counted_twice(self, app: AppCoordinator, advance_calls: list):
        app.ledger.complete(1)
        # A late subscriber replays the current total; the coordinator must ignore it.
        app._on_total_points(app.ledger.total_points.value)
        assert len(advance_calls) == 10

    def test_level_and_fraction_published_per_point(self, app: AppCoordinator):
        fractions = []
        app.progress.progress.subscribe(fractions.append, replay=False)
        app.ledger.complete(1)
        assert len(fractions) == 10
        assert fractions[-1] == pytest.approx(0.2)


# ---------------------------------------------------------------------------
# Teardown
# ---------------------------------------------------------------------------

class TestClose:
    def test_close_stops_progress(self, app: AppCoordinator):
        app.close()
        app.ledger.complete(2)
        assert app.ledger.total_points.value == 15
        assert app.progress.progress.value == 0.0
        assert app.ledger.total_points.listener_count == 0

    def test_close_twice(self, app: AppCoordinator):
        app.close()
        app.close()


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettingsWiring:
    def test_points_per_level(self):
        app = AppCoordinator(Settings(points_per_level=10))
        app.ledger.complete(2)
        assert app.progress.level.value == 2
        assert app.progress.progress.value == pytest.approx(0.5)

    def test_step_comes_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        app = AppCoordinator(Settings(points_per_level=8))
        calls = []
        monkeypatch.setattr(app.progress, "advance", calls.append)
        app.ledger.complete(1)
        assert calls == [app.settings.progress_per_point] * 10

    def test_points_per_item(self):
        app = AppCoordinator(Settings(points_per_item=1))
        app.donate_clothing(4)
        assert app.ledger.total_points.value == 4

    def test_custom_catalog(self, tmp_path: Path):
        path = tmp_path / "c.yaml"
        path.write_text(textwrap.dedent("""\
            challenges:
              - {id: 1, title: Compost, points: 50, category: waste}
        """), encoding="utf-8")
        app = AppCoordinator(Settings(catalog_path=path))
        app.ledger.complete(1)
        assert app.progress.level.value == 2
