from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "challenges.yaml"


class ChallengeCategory(Enum):
    ENERGY = "Energy"
    WATER = "Water"
    WASTE = "Waste"
    TRANSPORT = "Transport"
    FOOD = "Food"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> "ChallengeCategory":
        """Look up a category by member name, case-insensitively."""
        try:
            return cls[str(raw).strip().upper()]
        except KeyError:
            raise ValueError(f"unknown challenge category: {raw!r}") from None


@dataclass(frozen=True)
class Challenge:
    id: int
    title: str
    description: str
    points: int
    category: ChallengeCategory
    completed: bool = False


class ChallengeRepository:
    """Seed catalog of challenges, loaded once from a YAML file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_CATALOG
        self._challenges = self._load_challenges()

    @property
    def path(self) -> Path:
        return self._path

    def all(self) -> List[Challenge]:
        return list(self._challenges.values())

    def get(self, challenge_id: int) -> Challenge:
        return self._challenges[challenge_id]

    def _load_challenges(self) -> Dict[int, Challenge]:
        if not self._path.exists():
            raise FileNotFoundError(f"Challenge catalog not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict) or not isinstance(raw.get("challenges"), list):
            raise ValueError(f"{self._path.name}: expected YAML with a 'challenges' list")

        challenges: Dict[int, Challenge] = {}
        for position, entry in enumerate(raw["challenges"]):
            challenge = _parse_entry(self._path.name, position, entry)
            if challenge.id in challenges:
                raise ValueError(f"{self._path.name}: duplicate challenge id {challenge.id}")
            challenges[challenge.id] = challenge

        if not challenges:
            raise ValueError(f"{self._path.name}: 'challenges' is empty")
        logger.info("Loaded %d challenges from %s", len(challenges), self._path)
        return challenges


def _parse_entry(file_name: str, position: int, entry: object) -> Challenge:
    where = f"{file_name}: entry {position}"
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a mapping")

    challenge_id = entry.get("id")
    if not isinstance(challenge_id, int) or isinstance(challenge_id, bool):
        raise ValueError(f"{where}: missing or invalid 'id'")

    title = entry.get("title")
    if not title or not isinstance(title, str):
        raise ValueError(f"{where}: missing or invalid 'title'")

    points = entry.get("points")
    # bool is an int subclass; `points: yes` is not a score
    if not isinstance(points, int) or isinstance(points, bool) or points <= 0:
        raise ValueError(f"{where}: 'points' must be a positive integer")

    if "category" not in entry:
        raise ValueError(f"{where}: missing 'category'")
    try:
        category = ChallengeCategory.parse(entry["category"])
    except ValueError as e:
        raise ValueError(f"{where}: {e}") from None

    return Challenge(
        id=challenge_id,
        title=title.strip(),
        description=str(entry.get("description") or "").strip(),
        points=points,
        category=category,
    )
