"""
Standard registry - descriptive metadata for each thread standard.

Read-only data consumed by the engines and by front ends: unit, included
angle, series and tolerance class names, and the drill sets searched by
default.
"""

from typing import Dict, List, Union

from .enums import DrillSet, ThreadStandard, UnitSystem
from .models import StandardInfo

_IMPERIAL_DRILLS = [DrillSet.NUMBER, DrillSet.LETTER, DrillSet.FRACTIONAL]

STANDARDS: Dict[ThreadStandard, StandardInfo] = {
    ThreadStandard.WHITWORTH: StandardInfo(
        id=ThreadStandard.WHITWORTH,
        name="British Standard Whitworth (BSW/BSF)",
        unit=UnitSystem.INCH,
        angle_deg=55.0,
        sort_order=1,
        thread_form=7,
        series=["BSW", "BSF"],
        classes=["Close", "Medium", "Free", "Normal"],
        default_drill_sets=_IMPERIAL_DRILLS,
    ),
    ThreadStandard.BA: StandardInfo(
        id=ThreadStandard.BA,
        name="British Association (BA)",
        unit=UnitSystem.MM,
        angle_deg=47.5,
        sort_order=2,
        thread_form=8,
        series=["BA"],
        classes=["Close", "Normal"],
        default_drill_sets=[DrillSet.METRIC, DrillSet.NUMBER],
    ),
    ThreadStandard.ME: StandardInfo(
        id=ThreadStandard.ME,
        name="Model Engineer (ME)",
        unit=UnitSystem.INCH,
        angle_deg=55.0,
        sort_order=3,
        thread_form=8,
        series=["Fine (40 TPI)", "Medium (32 TPI)", "BSB (26 TPI)"],
        classes=["Medium"],
        default_drill_sets=_IMPERIAL_DRILLS,
    ),
    ThreadStandard.BSC: StandardInfo(
        id=ThreadStandard.BSC,
        name="British Standard Cycle (BSC/CEI)",
        unit=UnitSystem.INCH,
        angle_deg=60.0,
        sort_order=4,
        thread_form=8,
        series=["Standard", "BSA"],
        classes=["Close", "Medium", "Free"],
        default_drill_sets=_IMPERIAL_DRILLS,
    ),
    ThreadStandard.BSB: StandardInfo(
        id=ThreadStandard.BSB,
        name="British Standard Brass (BSB)",
        unit=UnitSystem.INCH,
        angle_deg=55.0,
        sort_order=5,
        thread_form=8,
        series=["BSB"],
        classes=["Medium"],
        default_drill_sets=_IMPERIAL_DRILLS,
    ),
}


def get_standard(standard: Union[ThreadStandard, str]) -> StandardInfo:
    """Look up registry metadata for a standard (enum or its value)."""
    if isinstance(standard, str):
        standard = ThreadStandard(standard)
    return STANDARDS[standard]


def list_standards() -> List[StandardInfo]:
    """All standards in display order."""
    return sorted(STANDARDS.values(), key=lambda s: s.sort_order)
