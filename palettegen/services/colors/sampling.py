"""
Selection primitives shared by the palette selections.

All randomness comes from an injected ``rand`` callable returning a float
in [0, 1), so results are reproducible for a deterministic ``rand``.
"""

import math
from functools import cmp_to_key
from typing import Callable, List, Optional, Sequence

from .model import ColorValue

Rand = Callable[[], float]


def comparator_shuffle(colors: Sequence[ColorValue], rand: Rand) -> List[ColorValue]:
    """
    Shuffle by sorting with a comparator returning ``rand() - 0.5``.

    This is a biased shuffle (not Fisher-Yates); the permutation depends on
    the sort's comparison order as well as on ``rand``.
    """
    return sorted(colors, key=cmp_to_key(lambda a, b: rand() - 0.5))


def keep_odd_indices(colors: Sequence[ColorValue]) -> List[ColorValue]:
    """Keep the elements at odd positions (1, 3, 5, ...)."""
    return list(colors[1::2])


def filter_by_bounds(
    colors: Sequence[ColorValue],
    min_brightness: float = 0,
    max_brightness: float = 100,
    min_saturation: float = 0,
    max_saturation: float = 100,
) -> List[ColorValue]:
    """Keep colors whose HSV value and saturation fall within the bounds (inclusive)."""
    return [
        color for color in colors
        if min_brightness <= color.hsv.v <= max_brightness
        and min_saturation <= color.hsv.s <= max_saturation
    ]


def split_brightness_bands(
    colors: Sequence[ColorValue],
    dark_max: float,
    light_min: float,
):
    """
    Partition colors by HSV value.

    Returns:
        Tuple of (dark, light, mid) lists: v <= dark_max, v >= light_min,
        and everything strictly between
    """
    dark = [c for c in colors if c.hsv.v <= dark_max]
    light = [c for c in colors if c.hsv.v >= light_min]
    mid = [c for c in colors if dark_max < c.hsv.v < light_min]
    return dark, light, mid


def random_index(colors: Sequence[ColorValue], rand: Rand) -> int:
    return math.floor(rand() * len(colors))


def sample_without_replacement(
    band: Sequence[ColorValue],
    count: int,
    rand: Rand,
    exclude: Optional[ColorValue] = None,
) -> List[ColorValue]:
    """
    Draw up to ``count`` distinct band members by rejection sampling.

    Indexes are drawn uniformly until one is found that was not picked yet
    and does not equal ``exclude``. The number of draws is capped by the
    number of eligible members so the loop always terminates.
    """
    if not band:
        return []

    eligible = sum(1 for color in band if exclude is None or not color.equals(exclude))
    iterations = min(count, eligible)

    chosen: List[int] = []
    for _ in range(iterations):
        index = None
        while (
            index is None
            or index in chosen
            or (exclude is not None and band[index].equals(exclude))
        ):
            index = random_index(band, rand)
        chosen.append(index)

    return [band[i] for i in chosen]


def sort_by_brightness(colors: Sequence[ColorValue]) -> List[ColorValue]:
    """Stable sort from dark to light by HSV value."""
    return sorted(colors, key=lambda color: color.hsv.v)
