"""Type-safe enums for the thread calculator.

ThreadStandard is the tagged variant every engine dispatches on; the other
enums replace the bare strings the UI sends.
"""

from enum import Enum


class ThreadStandard(Enum):
    """Supported British thread standards"""
    WHITWORTH = "Whitworth"  # BSW (coarse) and BSF (fine), BS 84
    BA = "BA"                # British Association, BS 93
    ME = "ME"                # Model Engineer, 32/40 TPI series
    BSC = "BSC"              # British Standard Cycle / CEI, BS 811
    BSB = "BSB"              # British Standard Brass, constant 26 TPI


class UnitSystem(Enum):
    """Unit the standard is tabulated in"""
    INCH = "in"
    MM = "mm"


class Gender(Enum):
    """Thread gender"""
    EXTERNAL = "external"  # Bolt
    INTERNAL = "internal"  # Nut / tapped hole


class Material(Enum):
    """Substrate group driving the target thread engagement"""
    HARD = "hard"        # Stainless, tool steel, titanium
    FERROUS = "ferrous"  # General steels and cast iron
    SOFT = "soft"        # Brass, bronze, aluminium, plastics


class DrillSet(Enum):
    """Drill catalogs, declared in tie-break priority order"""
    FRACTIONAL = "fractional"
    LETTER = "letter"
    NUMBER = "number"
    METRIC = "metric"


class FitStatus(Enum):
    """Tap drill fit classification"""
    CATASTROPHIC_LARGE = "catastrophic-large"
    CATASTROPHIC_SMALL = "catastrophic-small"
    DANGER_LOOSE = "danger-loose"
    WARNING_LOOSE = "warning-loose"
    DANGER_TIGHT = "danger-tight"
    WARNING_TIGHT = "warning-tight"
    OPTIMAL = "optimal"
