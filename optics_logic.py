"""
Depth of field using the thin-lens hyperfocal approximation.

All distances are in millimeters:

    - lens focal length [mm]
    - circle of confusion [mm]
    - focusing distance [mm]
    - lens f-stop, e.g. 5.6
"""

import logging
import math

logger = logging.getLogger(__name__)


def hyperfocal_distance(focal_length: float, circle_of_confusion: float, f_stop: float) -> float:
    """Focusing distance (mm) beyond which everything to infinity is acceptably sharp."""
    return (focal_length ** 2) / (f_stop * circle_of_confusion) + focal_length


def near_distance_of_acceptable_sharpness(
    focal_length: float, circle_of_confusion: float, focusing_distance: float, f_stop: float
) -> float:
    """Nearest distance (mm) that is still acceptably sharp."""
    a = f_stop
    c = circle_of_confusion
    d = focusing_distance
    f = focal_length

    return d * f * f / (f * f + (a * c * (d - f)))


def far_distance_of_acceptable_sharpness(
    focal_length: float, circle_of_confusion: float, focusing_distance: float, f_stop: float
) -> float:
    """
    Farthest distance (mm) that is still acceptably sharp.

    Returns math.inf when focused at or beyond the hyperfocal distance.
    """
    a = f_stop
    c = circle_of_confusion
    d = focusing_distance
    f = focal_length

    denominator = f * f - (a * c * (d - f))
    if denominator <= 0:
        logger.debug(
            "Focusing distance %s mm is at or beyond hyperfocal, far limit is infinite",
            focusing_distance,
        )
        return math.inf

    return d * f * f / denominator


def depth_of_field(
    focal_length: float, circle_of_confusion: float, focusing_distance: float, f_stop: float
) -> float:
    """Depth of field (mm); math.inf when the far limit is at infinity."""
    return (
        far_distance_of_acceptable_sharpness(focal_length, circle_of_confusion, focusing_distance, f_stop)
        - near_distance_of_acceptable_sharpness(focal_length, circle_of_confusion, focusing_distance, f_stop)
    )
