from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List, Optional, Tuple

from seedling.core.challenges import Challenge, ChallengeRepository
from seedling.core.observable import Observable
from seedling.core.settings import POINTS_PER_ITEM

logger = logging.getLogger(__name__)


class ChallengeLedger:
    """Tracks challenge completion and the running points total.

    ``total_points`` has two sources: completed challenges and clothing
    donations. Donations are not tied to any challenge, so the total is kept as
    its own value rather than summed from the catalog.
    """

    def __init__(
        self,
        challenges: Optional[Iterable[Challenge]] = None,
        points_per_item: int = POINTS_PER_ITEM,
    ) -> None:
        seed = list(challenges) if challenges is not None else ChallengeRepository().all()
        self._points_per_item = points_per_item
        self.challenges: Observable[Tuple[Challenge, ...]] = Observable(tuple(seed), "challenges")
        self.total_points: Observable[int] = Observable(0, "total_points")

    @property
    def points_per_item(self) -> int:
        return self._points_per_item

    def get(self, challenge_id: int) -> Optional[Challenge]:
        for challenge in self.challenges.value:
            if challenge.id == challenge_id:
                return challenge
        return None

    def completed_challenges(self) -> List[Challenge]:
        return [c for c in self.challenges.value if c.completed]

    def complete(self, challenge_id: int) -> None:
        """Mark a challenge completed and award its points. Unknown or done ids are ignored."""
        index = self._index_of(challenge_id)
        if index is None or self.challenges.value[index].completed:
            logger.debug("Ignoring complete(%s)", challenge_id)
            return
        challenge = self._replace(index, completed=True)
        self.total_points.set(self.total_points.value + challenge.points)

    def reset(self, challenge_id: int) -> None:
        """Undo a completion and take its points back. Unknown or open ids are ignored."""
        index = self._index_of(challenge_id)
        if index is None or not self.challenges.value[index].completed:
            logger.debug("Ignoring reset(%s)", challenge_id)
            return
        challenge = self._replace(index, completed=False)
        self.total_points.set(self.total_points.value - challenge.points)

    def donate(self, item_count: int) -> None:
        """Grant points for donated items. ``item_count`` must already be a positive int."""
        granted = item_count * self._points_per_item
        logger.info("Donation of %d item(s): +%d points", item_count, granted)
        self.total_points.set(self.total_points.value + granted)

    def _index_of(self, challenge_id: int) -> Optional[int]:
        for index, challenge in enumerate(self.challenges.value):
            if challenge.id == challenge_id:
                return index
        return None

    def _replace(self, index: int, completed: bool) -> Challenge:
        current = list(self.challenges.value)
        challenge = current[index]
        current[index] = dataclasses.replace(challenge, completed=completed)
        self.challenges.set(tuple(current))
        return challenge
