from __future__ import annotations

import os
from dataclasses import dataclass
from fractions import Fraction
from pathlib import Path
from typing import Mapping, Optional

POINTS_PER_LEVEL = 50
POINTS_PER_ITEM = 10


@dataclass(frozen=True)
class Settings:
    """Tunable knobs for the tracker. Defaults match the shipped game balance."""

    points_per_level: int = POINTS_PER_LEVEL
    points_per_item: int = POINTS_PER_ITEM
    catalog_path: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def progress_per_point(self) -> Fraction:
        return Fraction(1, self.points_per_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``SEEDLING_*`` environment variables."""
        env = os.environ if environ is None else environ
        catalog = env.get("SEEDLING_CATALOG")
        return cls(
            points_per_level=_positive_int(env, "SEEDLING_POINTS_PER_LEVEL", POINTS_PER_LEVEL),
            points_per_item=_positive_int(env, "SEEDLING_POINTS_PER_ITEM", POINTS_PER_ITEM),
            catalog_path=Path(catalog).expanduser() if catalog else None,
            log_level=env.get("SEEDLING_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )


def _positive_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value
