from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Union

from seedling.core.observable import Observable

logger = logging.getLogger(__name__)

MIN_PROGRESS = 0.0
MAX_PROGRESS = 1.0
MAX_LEVEL = 4

# One plant stage per level, 1-based.
GROWTH_STAGES = ("sprout", "sprout_1", "sprout_2", "tree")

# A float is snapped to the nearest fraction with at most this denominator
# only when that fraction is non-zero and within _SNAP_TOLERANCE (relative)
# of the float, so 50 steps of 1/50 add up to exactly one level while tiny
# amounts keep their exact binary value.
_MAX_DENOMINATOR = 10**9
_SNAP_TOLERANCE = Fraction(1, 10**12)

Amount = Union[float, int, Fraction]


def _exact(amount: Amount) -> Fraction:
    exact = Fraction(amount)
    if exact.denominator <= _MAX_DENOMINATOR:
        return exact
    snapped = exact.limit_denominator(_MAX_DENOMINATOR)
    if snapped and abs(snapped - exact) <= abs(exact) * _SNAP_TOLERANCE:
        return snapped
    return exact


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class ProgressEngine:
    """Progress within the current level, the level itself and the cosmetic rotation.

    The running total is kept as an exact ``Fraction``; subscribers only ever see
    floats. Levels go 1..MAX_LEVEL. At MAX_LEVEL the progress is pinned to full
    and further advancement is absorbed. Only ``reset`` moves back to level 1.
    """

    def __init__(self, initial_progress: float = MIN_PROGRESS, initial_level: int = 1) -> None:
        level = int(_clamp(initial_level, 1, MAX_LEVEL))
        self._accumulator = _exact(_clamp(initial_progress, MIN_PROGRESS, MAX_PROGRESS))
        self.level: Observable[int] = Observable(level, "level")
        self.progress: Observable[float] = Observable(float(self._accumulator), "progress")
        self.is_max_level: Observable[bool] = Observable(level >= MAX_LEVEL, "is_max_level")
        self.cosmetic_index: Observable[int] = Observable(0, "cosmetic_index")
        self._normalize()
        self.progress.set(float(self._accumulator))

    @property
    def growth_stage(self) -> str:
        return GROWTH_STAGES[self.level.value - 1]

    def advance(self, amount: Amount) -> None:
        """Add ``amount`` to the progress, levelling up once per whole unit crossed.

        NaN and infinite amounts are ignored.
        """
        if not math.isfinite(amount):
            logger.debug("Ignoring advance(%r)", amount)
            return
        self._accumulator = max(Fraction(0), self._accumulator + _exact(amount))
        self._normalize()
        self.progress.set(float(self._accumulator))

    def set_progress(self, value: float) -> None:
        """Set the progress directly, clamped to [0, 1].

        Reaching 1 below MAX_LEVEL levels up exactly once; unlike ``advance`` there
        is no carry into further levels. NaN is ignored.
        """
        if math.isnan(value):
            logger.debug("Ignoring set_progress(nan)")
            return
        new_progress = _clamp(float(value), MIN_PROGRESS, MAX_PROGRESS)
        if new_progress >= MAX_PROGRESS and self.level.value < MAX_LEVEL:
            self._accumulator = Fraction(0)
            self._level_up()
            if self.level.value >= MAX_LEVEL:
                self._accumulator = Fraction(1)
                self.progress.set(MAX_PROGRESS)
        elif self.level.value >= MAX_LEVEL:
            self._accumulator = Fraction(1)
            self.progress.set(MAX_PROGRESS)
        else:
            self._accumulator = _exact(new_progress)
            self.progress.set(new_progress)

    def reset(self) -> None:
        """Back to level 1 with empty progress. The cosmetic choice is kept."""
        self._accumulator = Fraction(0)
        self.progress.set(MIN_PROGRESS)
        self.level.set(1)
        self.is_max_level.set(False)
        logger.info("Progress reset to level 1")

    def advance_cosmetic(self, total_cosmetics: int) -> None:
        if total_cosmetics <= 0:
            return
        self.cosmetic_index.set((self.cosmetic_index.value + 1) % total_cosmetics)

    def is_complete(self) -> bool:
        return self.progress.value >= MAX_PROGRESS

    def _normalize(self) -> None:
        while self._accumulator >= 1 and self.level.value < MAX_LEVEL:
            self._accumulator -= 1
            self._level_up()
        if self.level.value >= MAX_LEVEL:
            self._accumulator = Fraction(1)

    def _level_up(self) -> None:
        if self.level.value >= MAX_LEVEL:
            return
        self.level.set(self.level.value + 1)
        self.progress.set(MIN_PROGRESS)
        logger.info("Level up: now level %d (%s)", self.level.value, self.growth_stage)
        if self.level.value >= MAX_LEVEL:
            self.is_max_level.set(True)
            logger.info("Reached max level %d", MAX_LEVEL)
