"""
britthreads - British screw thread calculator.

Geometry, tolerance limits and tap drill selection for Whitworth (BSW/BSF),
British Association (BA), Model Engineer (ME), British Standard Cycle (BSC)
and British Standard Brass (BSB) threads.

Example:
    >>> from britthreads import calculate_ba, get_presets
    >>>
    >>> result = calculate_ba(2)
    >>> result.basic.major_diameter
    4.7
    >>> [p.designation for p in get_presets("BSC")][:2]
    ['1/8 BSC', '5/32 BSC']

Note: All imports are lazy-loaded, so importing the package does not build
the drill catalogs or preset tables until they are used.
"""

__version__ = "1.0.0-alpha"

# Define which names come from which submodule

_ENUMS = {"ThreadStandard", "UnitSystem", "Gender", "Material", "DrillSet", "FitStatus"}

_MODELS = {
    "ThreadSpecification",
    "CalculationOptions",
    "BasicGeometry",
    "DiameterLimits",
    "ExternalThreadLimits",
    "InternalThreadLimits",
    "ClassLimits",
    "ThreadResult",
    "DrillCandidate",
    "TapDrillValidation",
    "TapDrillRecommendation",
    "BatchEntry",
    "StandardInfo",
    "ThreadPreset",
}

_CALCULATOR = {
    "calculate",
    "calculate_whitworth",
    "calculate_ba",
    "calculate_me",
    "calculate_bsc",
    "calculate_bsb",
    "calculate_specification",
    "calculate_batch",
    "compute_basic_geometry",
    "compute_class_limits",
    "nearest_drill",
    "find_drill",
    "get_drill_catalog",
    "validate_tap_drill",
    "engagement_range",
    "parse_fraction",
    "ThreadCalculationError",
    "InvalidInputError",
    "UnsupportedClassError",
    "InvalidThreadError",
    "to_json",
    "to_markdown",
    "to_summary",
}

_REGISTRY = {"STANDARDS", "get_standard", "list_standards"}

_PRESETS = {"PRESETS", "get_presets"}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _MODELS:
        if "models" not in _modules:
            from . import models
            _modules["models"] = models
        return getattr(_modules["models"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _REGISTRY:
        if "registry" not in _modules:
            from . import registry
            _modules["registry"] = registry
        return getattr(_modules["registry"], name)

    if name in _PRESETS:
        if "presets" not in _modules:
            from . import presets
            _modules["presets"] = presets
        return getattr(_modules["presets"], name)

    raise AttributeError(f"module 'britthreads' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "ThreadStandard",
    "UnitSystem",
    "Gender",
    "Material",
    "DrillSet",
    "FitStatus",

    # Models (lazy loaded from models)
    "ThreadSpecification",
    "CalculationOptions",
    "BasicGeometry",
    "DiameterLimits",
    "ExternalThreadLimits",
    "InternalThreadLimits",
    "ClassLimits",
    "ThreadResult",
    "DrillCandidate",
    "TapDrillValidation",
    "TapDrillRecommendation",
    "BatchEntry",
    "StandardInfo",
    "ThreadPreset",

    # Calculator (lazy loaded from calculator)
    "calculate",
    "calculate_whitworth",
    "calculate_ba",
    "calculate_me",
    "calculate_bsc",
    "calculate_bsb",
    "calculate_specification",
    "calculate_batch",
    "compute_basic_geometry",
    "compute_class_limits",
    "nearest_drill",
    "find_drill",
    "get_drill_catalog",
    "validate_tap_drill",
    "engagement_range",
    "parse_fraction",
    "ThreadCalculationError",
    "InvalidInputError",
    "UnsupportedClassError",
    "InvalidThreadError",
    "to_json",
    "to_markdown",
    "to_summary",

    # Registry and presets
    "STANDARDS",
    "get_standard",
    "list_standards",
    "PRESETS",
    "get_presets",
]
