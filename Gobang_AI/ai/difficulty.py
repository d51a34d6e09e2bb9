"""AI difficulty presets (search depth in plies)."""

EASY = "easy"
MEDIUM = "medium"
HARD = "hard"

DEPTHS = {
    EASY: 2,
    MEDIUM: 3,
    HARD: 4,
}

DEFAULT = MEDIUM


def depth_for(name):
    """Return the search depth for a preset name (case-insensitive)."""
    key = str(name).strip().lower()
    if key not in DEPTHS:
        raise ValueError(f"Unknown difficulty {name!r}; expected one of {sorted(DEPTHS)}")
    return DEPTHS[key]


def name_for(depth):
    """Return the preset name for a depth, or None if it is not a preset."""
    for name, value in DEPTHS.items():
        if value == depth:
            return name
    return None
