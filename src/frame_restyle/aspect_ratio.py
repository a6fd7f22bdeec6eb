"""Mapping of arbitrary frame aspect ratios onto the ratios Imagen supports."""

import math
from enum import Enum


class AspectRatio(str, Enum):
    """Aspect ratios accepted by the text-to-image backend."""

    SQUARE_1_1 = "1:1"
    PORTRAIT_3_4 = "3:4"
    LANDSCAPE_4_3 = "4:3"
    PORTRAIT_9_16 = "9:16"
    LANDSCAPE_16_9 = "16:9"


# Scan order decides ties: the first listed reference wins.
SUPPORTED_RATIOS: tuple[tuple[AspectRatio, float], ...] = (
    (AspectRatio.SQUARE_1_1, 1.0),
    (AspectRatio.LANDSCAPE_4_3, 4 / 3),
    (AspectRatio.PORTRAIT_3_4, 3 / 4),
    (AspectRatio.LANDSCAPE_16_9, 16 / 9),
    (AspectRatio.PORTRAIT_9_16, 9 / 16),
)


def nearest_supported_ratio(ratio: float) -> AspectRatio:
    """Map a width/height ratio to the closest supported aspect ratio.

    Args:
        ratio: Frame width divided by frame height.

    Returns:
        The supported AspectRatio with the smallest absolute difference.
        Equidistant inputs resolve to the earlier entry of SUPPORTED_RATIOS.

    Raises:
        ValueError: If ratio is not a finite positive number.
    """
    if not math.isfinite(ratio) or ratio <= 0:
        raise ValueError(f"Aspect ratio must be a finite positive number, got {ratio!r}")

    closest, reference = SUPPORTED_RATIOS[0]
    min_diff = abs(ratio - reference)

    for candidate, reference in SUPPORTED_RATIOS[1:]:
        diff = abs(ratio - reference)
        if diff < min_diff:
            min_diff = diff
            closest = candidate

    return closest
