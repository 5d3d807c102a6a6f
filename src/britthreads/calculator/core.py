"""
Thread Calculator - Core Calculations

Tolerance engines and per-standard entry points. Each entry point derives
the basic geometry, applies the standard's tolerance formulas for every
class it publishes, and attaches a validated tap drill to each internal
class.

Reference standards:
- BS 84 (Whitworth BSW/BSF; tolerance form also used for ME and BSB)
- BS 93 (British Association)
- BS 811 (British Standard Cycle)
"""

import logging
from math import sqrt
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ..enums import Gender, ThreadStandard, UnitSystem
from ..models import (
    BasicGeometry,
    BatchEntry,
    CalculationOptions,
    ClassLimits,
    DiameterLimits,
    ExternalThreadLimits,
    InternalThreadLimits,
    TapDrillRecommendation,
    ThreadResult,
    ThreadSpecification,
)
from ..registry import get_standard
from .constants import (
    BA_CLOSE_BOLT_EFFECTIVE,
    BA_CLOSE_BOLT_MAJOR_P,
    BA_CLOSE_BOLT_MINOR,
    BA_CLOSE_MAX_SIZE,
    BA_NORMAL_BOLT_EFFECTIVE,
    BA_NORMAL_BOLT_MAJOR_LARGE_P,
    BA_NORMAL_BOLT_MAJOR_SMALL_P,
    BA_NORMAL_BOLT_MINOR,
    BA_NORMAL_NUT_EFFECTIVE,
    BA_NORMAL_NUT_MINOR_P,
    BA_TABLE,
    BSC_CLASSES,
    BSC_T_DIAMETER_COEFF,
    BSC_T_PITCH_COEFF,
    MAJOR_TOLERANCE_SQRT_P,
    MEDIUM_ONLY_CLASSES,
    MINOR_TOLERANCE_SQRT_P,
    NORMAL_NUT_MINOR_DIVISOR,
    NUT_MINOR_MEDIUM_MIN_TPI,
    NUT_MINOR_FINE_MIN_TPI,
    NUT_MINOR_OFFSET_COARSE_IN,
    NUT_MINOR_OFFSET_FINE_IN,
    NUT_MINOR_OFFSET_MEDIUM_IN,
    NUT_MINOR_PITCH_FACTOR,
    WHITWORTH_CLASSES,
    WHITWORTH_T_DIAMETER_COEFF,
    WHITWORTH_T_LENGTH_COEFF,
    WHITWORTH_T_PITCH_COEFF,
)
from .drills import nearest_drill
from .errors import InvalidInputError, ThreadCalculationError, UnsupportedClassError
from .geometry import (
    calculate_ba_geometry,
    calculate_inch_geometry,
    fmt,
    parse_fraction,
    require_positive,
)
from .validation import target_engagement, tap_drill_target, validate_tap_drill

logger = logging.getLogger(__name__)

ClassTable = Dict[str, Tuple[Optional[float], Optional[float]]]

# BA pitches are unique, so the size number can be recovered from geometry
_BA_SIZE_BY_PITCH = {row[0]: size for size, row in BA_TABLE.items()}


# =============================================================================
# Tolerance factors
# =============================================================================

def whitworth_tolerance(diameter: float, pitch: float, engagement_length: Optional[float] = None) -> float:
    """
    BS 84 Medium class effective diameter tolerance (inches).

    T = 0.002 D^(1/3) + 0.003 L^(1/2) + 0.005 p^(1/2)

    Engagement length L defaults to the nominal diameter.
    """
    length = diameter if engagement_length is None else engagement_length
    return (
        WHITWORTH_T_DIAMETER_COEFF * diameter ** (1 / 3)
        + WHITWORTH_T_LENGTH_COEFF * sqrt(length)
        + WHITWORTH_T_PITCH_COEFF * sqrt(pitch)
    )


def bsc_tolerance(diameter: float, pitch: float) -> float:
    """
    BS 811 effective diameter tolerance (inches).

    T = 0.006 p^(1/2) + 0.001 D^(1/2)
    """
    return BSC_T_PITCH_COEFF * sqrt(pitch) + BSC_T_DIAMETER_COEFF * sqrt(diameter)


def nut_minor_tolerance(standard: ThreadStandard, tpi: float, pitch: float) -> float:
    """
    Nut minor diameter tolerance, 0.2p plus an offset chosen by pitch bracket.

    Whitworth (BS 84 footnotes): 26 TPI and finer +0.004, 24 and 22 TPI
    +0.005, 20 TPI and coarser +0.007. ME uses the fine offset at 26 TPI
    and finer, otherwise the coarse one. BSB and BSC are always fine.
    """
    if standard == ThreadStandard.WHITWORTH:
        if tpi >= NUT_MINOR_FINE_MIN_TPI:
            offset = NUT_MINOR_OFFSET_FINE_IN
        elif tpi >= NUT_MINOR_MEDIUM_MIN_TPI:
            offset = NUT_MINOR_OFFSET_MEDIUM_IN
        else:
            offset = NUT_MINOR_OFFSET_COARSE_IN
    elif standard == ThreadStandard.ME:
        offset = NUT_MINOR_OFFSET_FINE_IN if tpi >= NUT_MINOR_FINE_MIN_TPI else NUT_MINOR_OFFSET_COARSE_IN
    else:
        offset = NUT_MINOR_OFFSET_FINE_IN
    return NUT_MINOR_PITCH_FACTOR * pitch + offset


# =============================================================================
# Limits helpers
# =============================================================================

def _external(nominal: float, tolerance: float) -> DiameterLimits:
    """Bolt limits: the basic size is the upper (MMC) limit."""
    return DiameterLimits(nominal=fmt(nominal), min=fmt(nominal - tolerance), max=fmt(nominal))


def _internal(nominal: float, tolerance: Optional[float]) -> DiameterLimits:
    """Nut limits: the basic size is the lower (MMC) limit."""
    return DiameterLimits(
        nominal=fmt(nominal),
        min=fmt(nominal),
        max=None if tolerance is None else fmt(nominal + tolerance)
    )


def _tap_drill(
    basic: BasicGeometry,
    minor_max: float,
    options: CalculationOptions
) -> Optional[TapDrillRecommendation]:
    """Nearest enabled drill to the engagement target, scored by the validator."""
    drill_sets = options.drill_sets
    if drill_sets is None:
        drill_sets = get_standard(basic.standard).default_drill_sets

    target = tap_drill_target(basic.major_diameter, basic.thread_depth, options.material)
    drill = nearest_drill(target, basic.unit, drill_sets)
    if drill is None:
        logger.debug(f"No admissible drill for {basic.standard.value} {basic.major_diameter}")
        return None

    tool_diameter = drill.diameter_mm if basic.unit == UnitSystem.MM else drill.diameter_inches
    check = validate_tap_drill(
        tool_diameter,
        basic.major_diameter,
        basic.minor_diameter,
        minor_max,
        options.material
    )
    return TapDrillRecommendation(
        target_diameter=fmt(target),
        target_engagement_percent=target_engagement(options.material),
        drill=drill,
        tool_diameter=fmt(tool_diameter),
        engagement_percent=check.engagement_percent,
        status=check.status,
        label=check.label
    )


def _class_multiplier(table: ClassTable, class_name: str, gender: Gender, standard: ThreadStandard) -> float:
    if class_name not in table:
        raise UnsupportedClassError(
            f"Class '{class_name}' is not defined for {standard.value}. "
            f"Valid classes: {', '.join(table)}"
        )
    external, internal = table[class_name]
    multiplier = external if gender == Gender.EXTERNAL else internal
    if multiplier is None:
        raise UnsupportedClassError(
            f"Class '{class_name}' of {standard.value} has no {gender.value} limits"
        )
    return multiplier


# =============================================================================
# Tolerance engines
# =============================================================================

def _inch_class_limits(
    basic: BasicGeometry,
    class_name: str,
    gender: Gender,
    options: CalculationOptions
) -> Union[ExternalThreadLimits, InternalThreadLimits]:
    """Whitworth, ME, BSB and BSC: T scaled by class, offsets scaled by sqrt(p)."""
    standard = basic.standard
    diameter = basic.major_diameter
    pitch = basic.pitch

    if standard == ThreadStandard.BSC:
        table = BSC_CLASSES
        tolerance = bsc_tolerance(diameter, pitch)
    else:
        table = WHITWORTH_CLASSES if standard == ThreadStandard.WHITWORTH else MEDIUM_ONLY_CLASSES
        # BSB fixes the engagement length at the nominal diameter
        length = None if standard == ThreadStandard.BSB else options.engagement_length
        tolerance = whitworth_tolerance(diameter, pitch, length)

    t_eff = tolerance * _class_multiplier(table, class_name, gender, standard)

    if gender == Gender.EXTERNAL:
        return ExternalThreadLimits(
            major=_external(basic.major_diameter, t_eff + MAJOR_TOLERANCE_SQRT_P * sqrt(pitch)),
            pitch=_external(basic.pitch_diameter, t_eff),
            minor=_external(basic.minor_diameter, t_eff + MINOR_TOLERANCE_SQRT_P * sqrt(pitch)),
            tolerance=fmt(t_eff)
        )

    minor_tol = nut_minor_tolerance(standard, basic.tpi, pitch)
    if standard == ThreadStandard.WHITWORTH and class_name == "Normal":
        # Scaled from the Medium nut value
        minor_tol = minor_tol * (WHITWORTH_CLASSES["Normal"][1] / NORMAL_NUT_MINOR_DIVISOR)
    minor_max = basic.minor_diameter + minor_tol

    return InternalThreadLimits(
        major=_internal(basic.major_diameter, None),
        pitch=_internal(basic.pitch_diameter, t_eff),
        minor=_internal(basic.minor_diameter, minor_tol),
        tolerance=fmt(t_eff),
        tap_drill=_tap_drill(basic, minor_max, options)
    )


def _ba_size(basic: BasicGeometry) -> int:
    """
    Recover the BA size number from a BA geometry.

    Raises:
        InvalidInputError: If the pitch is not a BS 93 pitch
    """
    size = _BA_SIZE_BY_PITCH.get(basic.pitch)
    if size is None:
        raise InvalidInputError(f"{basic.pitch}mm is not a BA pitch")
    return size


def _ba_class_limits(
    basic: BasicGeometry,
    class_name: str,
    gender: Gender,
    options: CalculationOptions
) -> Union[ExternalThreadLimits, InternalThreadLimits]:
    """BS 93 limits in millimetres: tolerance = factor * p + offset."""
    pitch = basic.pitch
    size = _ba_size(basic)
    table = ba_classes(size)
    _class_multiplier(table, class_name, gender, ThreadStandard.BA)

    if gender == Gender.EXTERNAL:
        if class_name == "Close":
            major_tol = BA_CLOSE_BOLT_MAJOR_P * pitch
            eff_factor, eff_offset = BA_CLOSE_BOLT_EFFECTIVE
            minor_factor, minor_offset = BA_CLOSE_BOLT_MINOR
        else:
            major_factor = BA_NORMAL_BOLT_MAJOR_SMALL_P if size <= BA_CLOSE_MAX_SIZE else BA_NORMAL_BOLT_MAJOR_LARGE_P
            major_tol = major_factor * pitch
            eff_factor, eff_offset = BA_NORMAL_BOLT_EFFECTIVE
            minor_factor, minor_offset = BA_NORMAL_BOLT_MINOR
        eff_tol = eff_factor * pitch + eff_offset
        return ExternalThreadLimits(
            major=_external(basic.major_diameter, major_tol),
            pitch=_external(basic.pitch_diameter, eff_tol),
            minor=_external(basic.minor_diameter, minor_factor * pitch + minor_offset),
            tolerance=fmt(eff_tol)
        )

    eff_factor, eff_offset = BA_NORMAL_NUT_EFFECTIVE
    eff_tol = eff_factor * pitch + eff_offset
    minor_tol = BA_NORMAL_NUT_MINOR_P * pitch
    minor_max = basic.minor_diameter + minor_tol

    return InternalThreadLimits(
        major=_internal(basic.major_diameter, None),
        pitch=_internal(basic.pitch_diameter, eff_tol),
        minor=_internal(basic.minor_diameter, minor_tol),
        tolerance=fmt(eff_tol),
        tap_drill=_tap_drill(basic, minor_max, options)
    )


def ba_classes(size: int) -> ClassTable:
    """BA classes for a size: Close bolts exist only up to 10 BA."""
    table: ClassTable = {}
    if size <= BA_CLOSE_MAX_SIZE:
        table["Close"] = (1.0, None)
    table["Normal"] = (1.0, 1.0)
    return table


def class_table(basic: BasicGeometry) -> ClassTable:
    """Ordered classes, with the genders each defines, for a thread."""
    if basic.standard == ThreadStandard.WHITWORTH:
        return WHITWORTH_CLASSES
    elif basic.standard == ThreadStandard.BSC:
        return BSC_CLASSES
    elif basic.standard == ThreadStandard.BA:
        return ba_classes(_ba_size(basic))
    return MEDIUM_ONLY_CLASSES


def compute_class_limits(
    basic: BasicGeometry,
    class_name: str,
    gender: Union[Gender, str],
    options: Optional[CalculationOptions] = None
) -> Union[ExternalThreadLimits, InternalThreadLimits]:
    """
    Limits of one gender of one tolerance class.

    Args:
        basic: Basic geometry from the geometry engine
        class_name: Class name, e.g. "Medium"
        gender: External (bolt) or internal (nut)
        options: Drill sets, material and engagement length

    Returns:
        ExternalThreadLimits or InternalThreadLimits (with tap drill)

    Raises:
        UnsupportedClassError: If the class, or this gender of it, is not
            defined for the standard
        InvalidInputError: If a BA geometry carries a pitch that BS 93 does
            not list
    """
    if isinstance(gender, str):
        gender = Gender(gender.lower())
    if options is None:
        options = CalculationOptions()

    if basic.standard == ThreadStandard.BA:
        return _ba_class_limits(basic, class_name, gender, options)
    return _inch_class_limits(basic, class_name, gender, options)


def _build_result(basic: BasicGeometry, options: CalculationOptions) -> ThreadResult:
    """Run every class and gender the standard defines."""
    classes = {}
    for class_name, (external, internal) in class_table(basic).items():
        classes[class_name] = ClassLimits(
            external=compute_class_limits(basic, class_name, Gender.EXTERNAL, options) if external is not None else None,
            internal=compute_class_limits(basic, class_name, Gender.INTERNAL, options) if internal is not None else None
        )
    return ThreadResult(
        standard=basic.standard,
        unit=basic.unit,
        basic=basic,
        classes=classes
    )


def _options(options: Optional[CalculationOptions]) -> CalculationOptions:
    if options is None:
        return CalculationOptions()
    if options.engagement_length is not None:
        require_positive(options.engagement_length, "Engagement length")
    return options


# =============================================================================
# Entry points
# =============================================================================

def calculate_whitworth(
    diameter: Any,
    tpi: Any,
    options: Optional[CalculationOptions] = None
) -> ThreadResult:
    """
    Calculate a Whitworth (BSW or BSF) thread per BS 84.

    Args:
        diameter: Nominal diameter (inches)
        tpi: Threads per inch
        options: Drill sets, material and engagement length

    Returns:
        ThreadResult with Close/Medium/Free bolt and Medium/Normal nut classes
    """
    basic = calculate_inch_geometry(ThreadStandard.WHITWORTH, diameter, tpi)
    return _build_result(basic, _options(options))


def calculate_me(
    diameter: Any,
    tpi: Any,
    options: Optional[CalculationOptions] = None
) -> ThreadResult:
    """
    Calculate a Model Engineer thread.

    ME has no formal tolerance standard; the BS 84 Medium class formula is
    applied to the 55° form.
    """
    basic = calculate_inch_geometry(ThreadStandard.ME, diameter, tpi)
    return _build_result(basic, _options(options))


def calculate_bsb(
    diameter: Any,
    tpi: Any = 26,
    options: Optional[CalculationOptions] = None
) -> ThreadResult:
    """
    Calculate a British Standard Brass thread (constant 26 TPI, Medium class).

    The tolerance assumes an engagement length equal to the nominal
    diameter; options.engagement_length is validated but not used.
    """
    basic = calculate_inch_geometry(ThreadStandard.BSB, diameter, tpi)
    return _build_result(basic, _options(options))


def calculate_bsc(
    diameter: Any,
    tpi: Any,
    options: Optional[CalculationOptions] = None
) -> ThreadResult:
    """
    Calculate a British Standard Cycle thread per BS 811 (60° form).

    The BS 811 tolerance does not depend on engagement length.
    """
    basic = calculate_inch_geometry(ThreadStandard.BSC, diameter, tpi)
    return _build_result(basic, _options(options))


def calculate_ba(
    size_number: Any,
    options: Optional[CalculationOptions] = None
) -> Optional[ThreadResult]:
    """
    Calculate a British Association thread per BS 93 (millimetres).

    Args:
        size_number: BA number 0-16 (int, or text such as "2" or "2BA")
        options: Drill sets and material

    Returns:
        ThreadResult, or None when the size is not tabulated

    Raises:
        InvalidInputError: If size_number is not a whole number
    """
    basic = calculate_ba_geometry(size_number)
    if basic is None:
        logger.debug(f"BA size {size_number!r} not in table")
        return None
    return _build_result(basic, _options(options))


def calculate(
    standard: Union[ThreadStandard, str],
    nominal: Any,
    pitch_or_tpi: Any = None,
    options: Optional[CalculationOptions] = None
) -> Optional[ThreadResult]:
    """
    Calculate any supported standard.

    For BA, nominal is the size number and pitch_or_tpi is ignored; the
    result is None for an untabulated size. All other standards take the
    nominal diameter in inches and TPI.
    """
    if isinstance(standard, str):
        standard = ThreadStandard(standard)

    if standard == ThreadStandard.WHITWORTH:
        return calculate_whitworth(nominal, pitch_or_tpi, options)
    elif standard == ThreadStandard.BA:
        return calculate_ba(nominal, options)
    elif standard == ThreadStandard.ME:
        return calculate_me(nominal, pitch_or_tpi, options)
    elif standard == ThreadStandard.BSC:
        return calculate_bsc(nominal, pitch_or_tpi, options)
    return calculate_bsb(nominal, 26 if pitch_or_tpi is None else pitch_or_tpi, options)


def calculate_specification(
    spec: ThreadSpecification,
    options: Optional[CalculationOptions] = None
) -> Optional[ThreadResult]:
    """
    Calculate a ThreadSpecification.

    A material set on the specification overrides the material in
    options; otherwise options.material applies.
    Fractional text sizes such as "1 1/8" are accepted.
    """
    if options is None:
        options = CalculationOptions()
    if spec.material is not None:
        options = options.model_copy(update={"material": spec.material})

    nominal = spec.nominal_diameter
    if spec.standard != ThreadStandard.BA and isinstance(nominal, str):
        nominal = parse_fraction(nominal)

    return calculate(spec.standard, nominal, spec.pitch_or_tpi, options)


def calculate_batch(
    specs: Iterable[ThreadSpecification],
    options: Optional[CalculationOptions] = None
) -> List[BatchEntry]:
    """
    Calculate many specifications independently.

    A failing specification records its error and does not affect the
    others. Untabulated BA sizes are reported with found=False.
    """
    entries = []
    for spec in specs:
        try:
            result = calculate_specification(spec, options)
        except ThreadCalculationError as e:
            logger.debug(f"Batch entry {spec.designation or spec.nominal_diameter!r} failed: {e}")
            entries.append(BatchEntry(specification=spec, error=str(e)))
            continue
        entries.append(BatchEntry(specification=spec, result=result, found=result is not None))
    return entries
