"""Theme colors and color utilities for the UI."""


class GardenColors:
    """Light green palette for the three screens."""

    BG_TOP = "#f1f8e9"
    BG_BOTTOM = "#dcedc8"

    PRIMARY = "#2e7d32"
    PRIMARY_LIGHT = "#60ad5e"
    PRIMARY_DARK = "#005005"

    CARD_BG = "rgba(255, 255, 255, 0.9)"
    CARD_COMPLETED = "#e8f5e9"

    TEXT_PRIMARY = "#1b3a1d"
    TEXT_SECONDARY = "#4a6350"
    TEXT_MUTED = "#7d917f"

    # Progress bar fill blends from SPROUT_FILL to TREE_FILL as the level rises
    PROGRESS_TRACK = "#e6efe0"
    SPROUT_FILL = "#9ccc65"
    TREE_FILL = "#1b5e20"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Malformed input returns ``a``."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def level_fill(level: int, max_level: int) -> str:
    """Progress bar fill color for ``level`` out of ``max_level``."""
    if max_level <= 1:
        return GardenColors.TREE_FILL
    return blend_hex(GardenColors.SPROUT_FILL, GardenColors.TREE_FILL, (level - 1) / (max_level - 1))
