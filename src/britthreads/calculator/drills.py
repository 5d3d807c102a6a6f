"""
Drill catalogs and nearest-drill selection.

Catalogs are built once at import and never mutated. Every candidate is
normalized to inches; metric drills keep their millimetre name.

Catalog priority (the tie-break when two drills are equally close):
fractional, letter, number, metric.
"""

import logging
from math import gcd
from typing import Iterable, List, Optional, Tuple, Union

from ..enums import DrillSet, UnitSystem
from ..models import DrillCandidate, _coerce_drill_set
from .constants import DRILL_TIE_EPSILON, MM_PER_INCH
from .errors import InvalidInputError

logger = logging.getLogger(__name__)

# Published number drill sizes, #80 to #1 (inches)
_NUMBER_SIZES_IN = (
    0.0135, 0.0145, 0.0160, 0.0180, 0.0200, 0.0210, 0.0225, 0.0240, 0.0250, 0.0260,
    0.0280, 0.0292, 0.0310, 0.0320, 0.0330, 0.0350, 0.0360, 0.0370, 0.0380, 0.0390,
    0.0400, 0.0410, 0.0420, 0.0430, 0.0465, 0.0520, 0.0550, 0.0595, 0.0635, 0.0670,
    0.0700, 0.0730, 0.0760, 0.0785, 0.0810, 0.0820, 0.0860, 0.0890, 0.0935, 0.0960,
    0.0980, 0.0995, 0.1015, 0.1040, 0.1065, 0.1100, 0.1110, 0.1130, 0.1160, 0.1200,
    0.1285, 0.1360, 0.1405, 0.1440, 0.1470, 0.1495, 0.1520, 0.1540, 0.1570, 0.1590,
    0.1610, 0.1660, 0.1695, 0.1730, 0.1770, 0.1800, 0.1820, 0.1850, 0.1890, 0.1910,
    0.1935, 0.1960, 0.1990, 0.2010, 0.2040, 0.2055, 0.2090, 0.2130, 0.2210, 0.2280,
)

# Published letter drill sizes, A to Z (inches)
_LETTER_SIZES_IN = (
    0.234, 0.238, 0.242, 0.246, 0.250, 0.257, 0.261, 0.266, 0.272, 0.277,
    0.281, 0.290, 0.295, 0.302, 0.316, 0.323, 0.332, 0.339, 0.348, 0.358,
    0.368, 0.377, 0.386, 0.397, 0.404, 0.413,
)

# Fractional ranges in 64ths: (first, last, step)
_FRACTIONAL_RANGES = (
    (1, 112, 1),     # 1/64" to 1 3/4" by 1/64
    (114, 144, 2),   # to 2 1/4" by 1/32
    (148, 192, 4),   # to 3" by 1/16
    (200, 384, 8),   # to 6" by 1/8
)

# Metric ranges in hundredths of a millimetre: (first, last, step, decimals)
# Integer steps keep the sizes free of accumulated float drift
_METRIC_RANGES = (
    (10, 300, 5, 2),       # 0.10 to 3.00mm by 0.05
    (310, 1300, 10, 1),    # 3.1 to 13.0mm by 0.1
    (1350, 2000, 50, 1),   # 13.5 to 20.0mm by 0.5
)


def _fraction_name(sixty_fourths: int) -> str:
    """Name a fractional drill: 1/64", 1 1/32", 2"."""
    whole, remainder = divmod(sixty_fourths, 64)
    if remainder == 0:
        return f'{whole}"'
    factor = gcd(remainder, 64)
    fraction = f"{remainder // factor}/{64 // factor}"
    if whole:
        return f'{whole} {fraction}"'
    return f'{fraction}"'


def _build_fractional() -> Tuple[DrillCandidate, ...]:
    drills = []
    for first, last, step in _FRACTIONAL_RANGES:
        for i in range(first, last + 1, step):
            drills.append(DrillCandidate(
                name=_fraction_name(i),
                diameter_inches=i / 64,
                kind=DrillSet.FRACTIONAL
            ))
    return tuple(drills)


def _build_letter() -> Tuple[DrillCandidate, ...]:
    return tuple(
        DrillCandidate(name=chr(ord("A") + i), diameter_inches=size, kind=DrillSet.LETTER)
        for i, size in enumerate(_LETTER_SIZES_IN)
    )


def _build_number() -> Tuple[DrillCandidate, ...]:
    return tuple(
        DrillCandidate(name=f"#{80 - i}", diameter_inches=size, kind=DrillSet.NUMBER)
        for i, size in enumerate(_NUMBER_SIZES_IN)
    )


def _build_metric() -> Tuple[DrillCandidate, ...]:
    drills = []
    for first, last, step, decimals in _METRIC_RANGES:
        for i in range(first, last + 1, step):
            size_mm = i / 100
            drills.append(DrillCandidate(
                name=f"{size_mm:.{decimals}f}mm",
                diameter_inches=size_mm / MM_PER_INCH,
                kind=DrillSet.METRIC
            ))
    return tuple(drills)


FRACTIONAL_DRILLS = _build_fractional()
LETTER_DRILLS = _build_letter()
NUMBER_DRILLS = _build_number()
METRIC_DRILLS = _build_metric()

_CATALOGS = {
    DrillSet.FRACTIONAL: FRACTIONAL_DRILLS,
    DrillSet.LETTER: LETTER_DRILLS,
    DrillSet.NUMBER: NUMBER_DRILLS,
    DrillSet.METRIC: METRIC_DRILLS,
}

ALL_DRILL_SETS: Tuple[DrillSet, ...] = tuple(DrillSet)


def normalize_drill_sets(drill_sets: Iterable[Union[DrillSet, str]]) -> List[DrillSet]:
    """
    Convert drill set names to DrillSet members.

    Accepts enum members or names such as "Metric", "Number", "Letter",
    "Imperial" (alias for fractional), case-insensitively.

    Raises:
        InvalidInputError: For an unknown catalog name
    """
    result = []
    for item in drill_sets:
        kind = _coerce_drill_set(item)
        if not isinstance(kind, DrillSet):
            raise InvalidInputError(f"Unknown drill set: {item!r}")
        result.append(kind)
    return result


def get_drill_catalog(kind: Union[DrillSet, str]) -> Tuple[DrillCandidate, ...]:
    """Return the full catalog for one drill set, smallest first."""
    return _CATALOGS[normalize_drill_sets([kind])[0]]


def find_drill(name: str) -> Optional[DrillCandidate]:
    """Look up a drill by its catalog name (e.g. '#43', 'F', '1/4"', '3.3mm')."""
    for kind in ALL_DRILL_SETS:
        for drill in _CATALOGS[kind]:
            if drill.name == name:
                return drill
    return None


def nearest_drill(
    target_diameter: float,
    unit: Union[UnitSystem, str] = "in",
    drill_sets: Optional[Iterable[Union[DrillSet, str]]] = None
) -> Optional[DrillCandidate]:
    """
    Find the catalog drill closest to a target diameter.

    Enabled catalogs are searched in fixed priority order (fractional,
    letter, number, metric) regardless of the order given. When two drills
    are equidistant within 1e-10 the one met first wins, so a fractional
    drill beats an identical metric one.

    Args:
        target_diameter: Diameter to match
        unit: Unit of target_diameter ("in" or "mm")
        drill_sets: Catalogs to search; None enables all of them

    Returns:
        Closest DrillCandidate, or None if no catalog is enabled
    """
    if isinstance(unit, str):
        unit = UnitSystem(unit.lower())

    target_inches = target_diameter / MM_PER_INCH if unit == UnitSystem.MM else target_diameter

    if drill_sets is None:
        enabled = set(ALL_DRILL_SETS)
    else:
        enabled = set(normalize_drill_sets(drill_sets))

    best = None
    best_distance = 0.0
    for kind in ALL_DRILL_SETS:
        if kind not in enabled:
            continue
        for drill in _CATALOGS[kind]:
            distance = abs(drill.diameter_inches - target_inches)
            if best is None:
                best, best_distance = drill, distance
                continue
            # Effectively equal: keep the earlier (higher priority) drill
            if abs(distance - best_distance) < DRILL_TIE_EPSILON:
                continue
            if distance < best_distance:
                best, best_distance = drill, distance

    if best is None:
        logger.debug("No drill sets enabled, no drill selected")
    else:
        logger.debug(f"Nearest drill to {target_inches:.5f}in: {best.name}")
    return best
