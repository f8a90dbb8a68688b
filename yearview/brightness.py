# yearview/brightness.py
from __future__ import annotations

import math

EMPTY_BRIGHTNESS = 0.08
MIN_ACTIVE_BRIGHTNESS = 0.15
ACTIVE_RANGE = 0.85


def calculate_brightness(particle_count: int, personal_max: int) -> float:
    """Map a day's particle count to a cell brightness in [0.08, 1.0].

    Log scale against the year's personal max:
      - 0 particles (or no activity all year) -> 0.08
      - 1 particle -> at least 0.15
      - particle_count == personal_max -> 1.0
    """
    if particle_count <= 0:
        return EMPTY_BRIGHTNESS
    if personal_max <= 0:
        return EMPTY_BRIGHTNESS
    if particle_count == personal_max:
        return 1.0

    normalized = math.log(particle_count + 1) / math.log(personal_max + 1)
    return min(1.0, MIN_ACTIVE_BRIGHTNESS + normalized * ACTIVE_RANGE)


def brightness_level(brightness: float, levels: int = 5) -> int:
    """Bucket a brightness into 0..levels-1; 0 is reserved for the empty floor."""
    if levels < 2:
        raise ValueError("levels must be >= 2")
    if brightness <= EMPTY_BRIGHTNESS:
        return 0
    span = ACTIVE_RANGE
    frac = (min(1.0, brightness) - MIN_ACTIVE_BRIGHTNESS) / span
    frac = max(0.0, frac)
    return 1 + min(levels - 2, int(frac * (levels - 1)))
