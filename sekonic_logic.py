"""
Reading and writing exposure times the way a Sekonic light meter shows them.

The meter displays shutter speeds in three shapes:

    '500'     1/500th of a second
    '15s'     15 seconds (one decimal allowed, e.g. '15.5s')
    '2m'      2 minutes (one decimal allowed, e.g. '0.3m')

Any of them may carry a single trailing digit giving tenths of an EV to add,
so '500 3' means 1/500th of a second plus 0.3 EV.
"""

import logging
import math
import re
from typing import Callable, Final, Optional

from exposure_logic import adjust_exposure_time, time_difference_to_delta_ev

logger = logging.getLogger(__name__)

# Shutter speed denominators the formatter snaps to, fastest first.
STANDARD_SHUTTER_SPEEDS: Final[tuple[int, ...]] = (
    8000, 4000, 2000, 1000, 500, 400, 250, 125, 60, 30, 15, 8, 4, 2
)

SECONDS_PER_MINUTE: Final[int] = 60

# Order matters: the first shape that matches wins.
_EXPOSURE_TIME_SHAPES: Final[tuple[tuple[re.Pattern, Callable[[str], float]], ...]] = (
    (re.compile(r"(\d+(?:\.\d)?)m\s*(\d)?", re.ASCII), lambda number: float(number) * SECONDS_PER_MINUTE),
    (re.compile(r"(\d+(?:\.\d)?)s\s*(\d)?", re.ASCII), lambda number: float(number)),
    (re.compile(r"(\d+)(?:\s+(\d))?", re.ASCII), lambda number: 1 / int(number)),
)


def parse_sekonic_exposure_time(exposure_time_string: str) -> Optional[float]:
    """
    Parse a light meter readout into an exposure time in seconds.

    Returns None when the text is not in any of the meter's shapes.
    """
    value = exposure_time_string.strip()

    for pattern, to_seconds in _EXPOSURE_TIME_SHAPES:
        match = pattern.fullmatch(value)
        if match is None:
            continue

        number, decimal_ev = match.groups()
        try:
            exposure_time = to_seconds(number)
        except ZeroDivisionError:
            logger.debug("Zero shutter speed denominator in %r", exposure_time_string)
            return None

        decimal_ev = int(decimal_ev) / 10 if decimal_ev else 0
        return adjust_exposure_time(exposure_time, decimal_ev)

    logger.debug("Not a Sekonic exposure time: %r", exposure_time_string)
    return None


def _delta_ev_suffix(displayed_exposure_time: float, real_exposure_time: float) -> str:
    delta_ev = time_difference_to_delta_ev(displayed_exposure_time, real_exposure_time)
    # one significant digit, expressed in tenths of an EV
    tenths = round(float(f"{delta_ev:.1g}") * 10)

    if tenths == 0:
        return ""
    return f" {tenths}"


def format_sekonic_exposure_time(exposure_time_sec: float) -> str:
    """
    Format an exposure time (seconds) the way the light meter would display it.

    E.g. 1/60th of a second is '60', 60 seconds is '1m' and 5.8 seconds
    is '5s 2' (5 seconds plus 0.2 EV).

    Raises:
        ValueError: if the exposure time is not a positive finite number
    """
    if not math.isfinite(exposure_time_sec) or exposure_time_sec <= 0:
        raise ValueError(f"Exposure time must be positive and finite, got {exposure_time_sec}")

    if exposure_time_sec < 1:
        for speed in STANDARD_SHUTTER_SPEEDS:
            if exposure_time_sec <= 1 / speed:
                break
        else:
            # between 1/2 and 1 second: fall back to the slowest speed
            speed = STANDARD_SHUTTER_SPEEDS[-1]
        suffix = _delta_ev_suffix(exposure_time_sec, 1 / speed)
        return f"{speed}{suffix}"

    if exposure_time_sec < SECONDS_PER_MINUTE:
        exposure_time_rounded = math.floor(exposure_time_sec)
        suffix = _delta_ev_suffix(exposure_time_rounded, exposure_time_sec)
        return f"{exposure_time_rounded}s{suffix}"

    exposure_minutes = exposure_time_sec / SECONDS_PER_MINUTE
    exposure_time_rounded = math.floor(exposure_minutes)
    suffix = _delta_ev_suffix(exposure_time_rounded, exposure_minutes)
    return f"{exposure_time_rounded}m{suffix}"
