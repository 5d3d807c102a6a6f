"""
Published size tables for each standard.

These are input data for the calculator, not part of it: the engines never
read them. Designations, series names and CAD thread designations (CTD)
are derived per standard by explicit matching on ThreadStandard.

References: BS 84 (Whitworth), BS 93 (BA), SMEE practice (ME),
BS 811 / CEI 1902 (BSC), BS 84 brass series (BSB).
"""

from typing import Dict, List, Optional, Tuple, Union

from .calculator.constants import BA_TABLE
from .calculator.geometry import parse_fraction
from .enums import ThreadStandard
from .models import ThreadPreset

# (size, TPI)
BSW_SIZES: Tuple[Tuple[str, float], ...] = (
    ("1/16", 60), ("3/32", 48), ("1/8", 40), ("5/32", 32), ("3/16", 24),
    ("7/32", 24), ("1/4", 20), ("5/16", 18), ("3/8", 16), ("7/16", 14),
    ("1/2", 12), ("9/16", 12), ("5/8", 11), ("11/16", 11), ("3/4", 10),
    ("7/8", 9), ("1", 8), ("1 1/8", 7), ("1 1/4", 7), ("1 1/2", 6),
    ("1 3/4", 5), ("2", 4.5),
)

BSF_SIZES: Tuple[Tuple[str, float], ...] = (
    ("3/16", 32), ("7/32", 28), ("1/4", 26), ("9/32", 26), ("5/16", 22),
    ("3/8", 20), ("7/16", 18), ("1/2", 16), ("9/16", 16), ("5/8", 14),
    ("11/16", 14), ("3/4", 12), ("7/8", 11), ("1", 10), ("1 1/8", 9),
    ("1 1/4", 9), ("1 1/2", 8), ("1 3/4", 7), ("2", 7),
)

ME_SIZES: Tuple[Tuple[str, float], ...] = (
    ("1/8", 40), ("5/32", 40), ("3/16", 40), ("7/32", 40),
    ("1/4", 26), ("1/4", 32), ("1/4", 40), ("9/32", 32), ("9/32", 40),
    ("5/16", 26), ("5/16", 32), ("5/16", 40), ("3/8", 26), ("3/8", 32), ("3/8", 40),
    ("7/16", 26), ("7/16", 32), ("7/16", 40), ("1/2", 26), ("1/2", 32), ("1/2", 40),
    ("5/8", 26),
)

BSC_SIZES: Tuple[Tuple[str, float], ...] = (
    ("1/8", 40), ("5/32", 32), ("3/16", 32), ("1/4", 26), ("5/16", 26),
    ("3/8", 26), ("7/16", 26), ("1/2", 26), ("9/16", 26), ("1", 26),
    ("1.370", 24),
)

# BSA heavy (deviation) series
BSA_SIZES: Tuple[Tuple[str, float], ...] = (
    ("7/16", 20), ("1/2", 20), ("9/16", 20), ("5/8", 20), ("3/4", 20),
)

BSB_SIZES: Tuple[str, ...] = (
    "1/8", "1/4", "3/8", "1/2", "5/8", "3/4", "7/8", "1", "1 1/8", "1 1/4", "1 1/2",
)

BSB_TPI = 26


def series_for(standard: ThreadStandard, tpi: Optional[float] = None, heavy: bool = False) -> str:
    """Series name for a size of the given standard."""
    if standard == ThreadStandard.WHITWORTH:
        return "BSF" if heavy else "BSW"
    elif standard == ThreadStandard.BA:
        return "BA"
    elif standard == ThreadStandard.ME:
        if tpi == 40:
            return "Fine (40 TPI)"
        if tpi == 26:
            return "BSB (26 TPI)"
        return "Medium (32 TPI)"
    elif standard == ThreadStandard.BSC:
        return "BSA" if heavy else "Standard"
    return "BSB"


def designation_for(standard: ThreadStandard, size: str, tpi: Optional[float], series: str) -> str:
    """Human designation, e.g. '1/4 BSW', '2 BA', 'ME 1/4 x 40'."""
    if standard == ThreadStandard.WHITWORTH:
        return f"{size} {series}"
    elif standard == ThreadStandard.BA:
        return f"{size} BA"
    elif standard == ThreadStandard.ME:
        if tpi == 26:
            return f"ME {size} x 26 BSB"
        return f"ME {size} x {tpi:g}"
    elif standard == ThreadStandard.BSC:
        return f"{size} {'BSA' if series == 'BSA' else 'BSC'}"
    return f"BSB {size} x {tpi:g}"


def ctd_for(standard: ThreadStandard, size: str, tpi: Optional[float], series: str) -> str:
    """CAD thread designation, e.g. '1/4 - 20 BSW'."""
    if standard == ThreadStandard.WHITWORTH:
        return f"{size} - {tpi:g} {series}"
    elif standard == ThreadStandard.BA:
        return f"{size} BA"
    elif standard == ThreadStandard.ME:
        return f"{size} - {tpi:g} {'BSB' if tpi == 26 else 'ME'}"
    elif standard == ThreadStandard.BSC:
        return f"{size} - {tpi:g} {'BSA' if series == 'BSA' else 'BSC'}"
    return f"{size} - {tpi:g} BSB"


def _preset(standard: ThreadStandard, size: str, tpi: Optional[float], heavy: bool = False) -> ThreadPreset:
    series = series_for(standard, tpi, heavy)
    return ThreadPreset(
        standard=standard,
        designation=designation_for(standard, size, tpi, series),
        series=series,
        nominal_size=parse_fraction(size),
        nominal_fraction=size,
        pitch_or_tpi=tpi,
        ctd=ctd_for(standard, size, tpi, series)
    )


def _build_presets() -> Dict[ThreadStandard, Tuple[ThreadPreset, ...]]:
    return {
        ThreadStandard.WHITWORTH: tuple(
            [_preset(ThreadStandard.WHITWORTH, s, t) for s, t in BSW_SIZES]
            + [_preset(ThreadStandard.WHITWORTH, s, t, heavy=True) for s, t in BSF_SIZES]
        ),
        # BA pitch is implied by the size number
        ThreadStandard.BA: tuple(
            _preset(ThreadStandard.BA, str(n), None) for n in sorted(BA_TABLE)
        ),
        ThreadStandard.ME: tuple(_preset(ThreadStandard.ME, s, t) for s, t in ME_SIZES),
        ThreadStandard.BSC: tuple(
            [_preset(ThreadStandard.BSC, s, t) for s, t in BSC_SIZES]
            + [_preset(ThreadStandard.BSC, s, t, heavy=True) for s, t in BSA_SIZES]
        ),
        ThreadStandard.BSB: tuple(_preset(ThreadStandard.BSB, s, BSB_TPI) for s in BSB_SIZES),
    }


PRESETS = _build_presets()


def get_presets(standard: Union[ThreadStandard, str], series: Optional[str] = None) -> List[ThreadPreset]:
    """Published sizes for a standard, optionally filtered by series name."""
    if isinstance(standard, str):
        standard = ThreadStandard(standard)
    presets = PRESETS[standard]
    if series is not None:
        return [p for p in presets if p.series == series]
    return list(presets)
