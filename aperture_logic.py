from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Optional, Union


class ApertureScale(str, Enum):
    """Spacing between the marked f-stops on a lens."""

    FULL_STOP = "full-stop"
    HALF_OF_A_STOP = "half-of-a-stop"
    THIRD_OF_A_STOP = "third-of-a-stop"


class UnsupportedApertureScale(ValueError):
    """Raised for an aperture scale name that has no f-stop table."""


# Marked values as engraved on lenses, not the exact powers of sqrt(2).
_F_STOPS: Final[Mapping[ApertureScale, tuple[float, ...]]] = MappingProxyType({
    ApertureScale.FULL_STOP: (
        1.0, 1.4, 2, 2.8, 4, 5.6, 8, 11, 16, 22, 32, 45, 64, 90,
    ),
    ApertureScale.HALF_OF_A_STOP: (
        1.0, 1.2, 1.4, 1.7, 2, 2.4, 2.8, 3.3, 4, 4.8, 5.6, 6.7, 8,
        9.5, 11, 13, 16, 19, 22, 27, 32, 38, 45, 54, 64, 76, 90,
    ),
    ApertureScale.THIRD_OF_A_STOP: (
        1.0, 1.1, 1.2, 1.4, 1.6, 1.8, 2, 2.2, 2.5, 2.8, 3.2, 3.5,
        4, 4.5, 5.0, 5.6, 6.3, 7.1, 8, 9, 10, 11, 13, 14, 16, 18,
        20, 22, 25, 29, 32, 36, 40, 45, 51, 57, 64, 72, 80, 90,
    ),
})


def _scale_table(scale: Union[ApertureScale, str]) -> tuple[float, ...]:
    try:
        return _F_STOPS[ApertureScale(scale)]
    except ValueError as err:
        raise UnsupportedApertureScale(f"Unsupported aperture scale: {scale!r}") from err


def f_stops(scale: Union[ApertureScale, str]) -> list[float]:
    """
    List the f-stops of a scale, widest first.

    Raises:
        UnsupportedApertureScale: if the scale is not one of ApertureScale
    """
    return list(_scale_table(scale))


def _neighbour_f_stop(f_stop: Optional[float], scale: Union[ApertureScale, str], step: int) -> Optional[float]:
    table = _scale_table(scale)
    if f_stop is None:
        return None

    try:
        index = table.index(f_stop)
    except ValueError:
        return None

    neighbour = index + step
    if not 0 <= neighbour < len(table):
        return None
    return table[neighbour]


def next_wider_f_stop(f_stop: Optional[float], scale: Union[ApertureScale, str]) -> Optional[float]:
    """Next wider (numerically smaller) f-stop on the scale, or None."""
    return _neighbour_f_stop(f_stop, scale, -1)


def next_narrower_f_stop(f_stop: Optional[float], scale: Union[ApertureScale, str]) -> Optional[float]:
    """Next narrower (numerically larger) f-stop on the scale, or None."""
    return _neighbour_f_stop(f_stop, scale, 1)
