"""
British Thread Calculator - geometry, tolerances and tap drills.

All entry points return ThreadResult models for type safety.

Example:
    >>> from britthreads.calculator import calculate_whitworth, to_summary
    >>>
    >>> # 1/4" BSW
    >>> result = calculate_whitworth(0.25, 20)
    >>> print(to_summary(result))
"""

from .core import (
    # Tolerance factors
    whitworth_tolerance,
    bsc_tolerance,
    nut_minor_tolerance,

    # Tolerance engine
    compute_class_limits,
    class_table,
    ba_classes,

    # Per-standard entry points (return ThreadResult)
    calculate_whitworth,
    calculate_ba,
    calculate_me,
    calculate_bsc,
    calculate_bsb,
    calculate,
    calculate_specification,
    calculate_batch,
)

from .geometry import (
    # Geometry engine
    compute_basic_geometry,
    calculate_inch_geometry,
    calculate_ba_geometry,
    whitworth_form,
    bsc_form,
    parse_ba_size,
    parse_fraction,
)

from .drills import (
    # Drill catalogs and selection
    FRACTIONAL_DRILLS,
    LETTER_DRILLS,
    NUMBER_DRILLS,
    METRIC_DRILLS,
    get_drill_catalog,
    find_drill,
    nearest_drill,
)

from .validation import (
    # Tap drill validation
    validate_tap_drill,
    classify_fit,
    target_engagement,
    engagement_range,
    tap_drill_target,
)

from .errors import (
    ThreadCalculationError,
    InvalidInputError,
    UnsupportedClassError,
    InvalidThreadError,
)

from .output import (
    # Output formatters
    to_json,
    to_markdown,
    to_summary,
)


__all__ = [
    # Tolerance factors
    "whitworth_tolerance",
    "bsc_tolerance",
    "nut_minor_tolerance",

    # Tolerance engine
    "compute_class_limits",
    "class_table",
    "ba_classes",

    # Entry points
    "calculate_whitworth",
    "calculate_ba",
    "calculate_me",
    "calculate_bsc",
    "calculate_bsb",
    "calculate",
    "calculate_specification",
    "calculate_batch",

    # Geometry
    "compute_basic_geometry",
    "calculate_inch_geometry",
    "calculate_ba_geometry",
    "whitworth_form",
    "bsc_form",
    "parse_ba_size",
    "parse_fraction",

    # Drills
    "FRACTIONAL_DRILLS",
    "LETTER_DRILLS",
    "NUMBER_DRILLS",
    "METRIC_DRILLS",
    "get_drill_catalog",
    "find_drill",
    "nearest_drill",

    # Validation
    "validate_tap_drill",
    "classify_fit",
    "target_engagement",
    "engagement_range",
    "tap_drill_target",

    # Errors
    "ThreadCalculationError",
    "InvalidInputError",
    "UnsupportedClassError",
    "InvalidThreadError",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
