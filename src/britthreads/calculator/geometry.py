"""
Basic thread geometry from first principles.

Derives the fundamental triangle, working depth and crest/root radius
from the included angle and pitch, then the basic major, effective
(pitch) and minor diameters from the nominal size.

BA sizes are not derived: BS 93 tabulates them, so they are looked up.

Values are kept at full precision here and rounded only when the
BasicGeometry model is built.
"""

from math import isfinite, radians, sin, tan
from typing import Any, Dict, Optional, Union

from ..enums import ThreadStandard, UnitSystem
from ..models import BasicGeometry
from .constants import (
    BA_TABLE,
    BSC_DEPTH_FACTOR,
    BSC_HEIGHT_FACTOR,
    BSC_RADIUS_FACTOR,
    OUTPUT_DECIMALS,
    WHITWORTH_ANGLE_DEG,
    WHITWORTH_DEPTH_FACTOR,
    WHITWORTH_TRUNCATION_FACTOR,
)
from .errors import InvalidInputError

WHITWORTH_FORM_STANDARDS = (ThreadStandard.WHITWORTH, ThreadStandard.ME, ThreadStandard.BSB)


def fmt(value: float) -> float:
    """Round to machining precision (6 decimal places)."""
    return round(value, OUTPUT_DECIMALS)


def require_positive(value: Any, name: str) -> float:
    """
    Parse a positive, finite number.

    Raises:
        InvalidInputError: If value is non-numeric, non-finite or <= 0
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not isfinite(number) or number <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value!r}")
    return number


def whitworth_form(pitch: float, angle_deg: float = WHITWORTH_ANGLE_DEG) -> Dict[str, float]:
    """
    Derive the Whitworth form for a given pitch.

    θ = half the included angle
    H = p / (2 tan θ)                  fundamental triangle height
    d = 2/3 H                          working depth (H/6 off crest and root)
    r = (H/6) / (csc θ - 1)            crest/root radius

    Returns:
        Dict with H, d and r in the unit of pitch
    """
    theta = radians(angle_deg / 2)
    height = pitch / (2 * tan(theta))
    depth = WHITWORTH_DEPTH_FACTOR * height
    radius = (height * WHITWORTH_TRUNCATION_FACTOR) / ((1 / sin(theta)) - 1)
    return {"H": height, "d": depth, "r": radius}


def bsc_form(pitch: float) -> Dict[str, float]:
    """
    BS 811 cycle form (60°).

    H = (√3/2) p, d = (√3/2 - 1/3) p = 0.5327p, r = p/6
    """
    return {
        "H": BSC_HEIGHT_FACTOR * pitch,
        "d": BSC_DEPTH_FACTOR * pitch,
        "r": BSC_RADIUS_FACTOR * pitch,
    }


def calculate_inch_geometry(
    standard: ThreadStandard,
    diameter: Any,
    tpi: Any
) -> BasicGeometry:
    """
    Basic geometry for an inch standard given nominal diameter and TPI.

    Args:
        standard: Whitworth, ME, BSB or BSC
        diameter: Nominal (major) diameter in inches
        tpi: Threads per inch

    Raises:
        InvalidInputError: Non-positive/non-numeric input, a pitch too
            coarse for the diameter (minor diameter <= 0), or one too fine
            to separate the diameters at 6 decimal places
    """
    diameter = require_positive(diameter, "Nominal diameter")
    tpi = require_positive(tpi, "TPI")
    pitch = 1 / tpi

    if standard in WHITWORTH_FORM_STANDARDS:
        form = whitworth_form(pitch)
    elif standard == ThreadStandard.BSC:
        form = bsc_form(pitch)
    else:
        raise InvalidInputError(f"{standard.value} is not an inch-pitch standard")

    depth = form["d"]
    major = diameter
    effective = major - depth
    minor = major - 2 * depth

    if minor <= 0:
        raise InvalidInputError(
            f"{tpi:g} TPI is too coarse for a {diameter:g}in thread (minor diameter {minor:.4f}in)"
        )
    if not fmt(major) > fmt(effective) > fmt(minor):
        raise InvalidInputError(
            f"{tpi:g} TPI is too fine for a {diameter:g}in thread (thread depth {depth:.2e}in)"
        )

    return BasicGeometry(
        standard=standard,
        unit=UnitSystem.INCH,
        major_diameter=fmt(major),
        pitch_diameter=fmt(effective),
        minor_diameter=fmt(minor),
        thread_depth=fmt(depth),
        root_radius=fmt(form["r"]),
        pitch=fmt(pitch),
        fundamental_height=fmt(form["H"]),
        tpi=tpi
    )


def parse_ba_size(size_number: Any) -> int:
    """
    Parse a BA size number ("2", "2BA", 2).

    Raises:
        InvalidInputError: If the value is not a whole number
    """
    if isinstance(size_number, bool):
        raise InvalidInputError(f"BA size must be a whole number, got {size_number!r}")
    if isinstance(size_number, str):
        text = size_number.strip().upper()
        if text.endswith("BA"):
            text = text[:-2].strip()
        size_number = text
    try:
        number = float(size_number)
    except (TypeError, ValueError):
        raise InvalidInputError(f"BA size must be a whole number, got {size_number!r}")
    if not isfinite(number) or number != int(number):
        raise InvalidInputError(f"BA size must be a whole number, got {size_number!r}")
    return int(number)


def calculate_ba_geometry(size_number: Any) -> Optional[BasicGeometry]:
    """
    Basic geometry for a BA size from the BS 93 table (millimetres).

    Returns:
        BasicGeometry, or None if the size is not tabulated (0-16 BA)

    Raises:
        InvalidInputError: If size_number is not a whole number
    """
    size = BA_TABLE.get(parse_ba_size(size_number))
    if size is None:
        return None

    pitch, depth, major, effective, minor, radius = size
    return BasicGeometry(
        standard=ThreadStandard.BA,
        unit=UnitSystem.MM,
        major_diameter=fmt(major),
        pitch_diameter=fmt(effective),
        minor_diameter=fmt(minor),
        thread_depth=fmt(depth),
        root_radius=fmt(radius),
        pitch=fmt(pitch)
    )


def compute_basic_geometry(
    standard: ThreadStandard,
    nominal: Any,
    pitch_or_tpi: Any = None
) -> Optional[BasicGeometry]:
    """
    Basic geometry for any standard.

    For BA, nominal is the size number and pitch_or_tpi is ignored;
    an untabulated size returns None. Other standards take the nominal
    diameter (inches) and TPI.
    """
    if isinstance(standard, str):
        standard = ThreadStandard(standard)
    if standard == ThreadStandard.BA:
        return calculate_ba_geometry(nominal)
    return calculate_inch_geometry(standard, nominal, pitch_or_tpi)


def parse_fraction(value: Union[str, float, int]) -> float:
    """
    Convert a fractional size to a decimal: "1 1/8" -> 1.125, "3/16" -> 0.1875.

    Raises:
        InvalidInputError: If the text is not a number or fraction
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        text = str(value).strip().rstrip('"')
        parts = text.split()
        if len(parts) == 2:
            whole, fraction = parts
            numerator, denominator = fraction.split("/")
            return float(whole) + float(numerator) / float(denominator)
        if "/" in text:
            numerator, denominator = text.split("/")
            return float(numerator) / float(denominator)
        return float(text)
    except (ValueError, ZeroDivisionError):
        raise InvalidInputError(f"Cannot parse size {value!r}")
