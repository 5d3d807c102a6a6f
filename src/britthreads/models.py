"""
Typed data model for thread calculations.

Uses Pydantic for validation and enum coercion, so the same models serve
the Python API and the JSON bridge. Result models are frozen: a result is
never mutated after the calculator returns it.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import DrillSet, FitStatus, Material, ThreadStandard, UnitSystem

MM_PER_INCH = 25.4


def _coerce_enum(enum_cls, value):
    """Accept enum members or their (case-insensitive) string values."""
    if isinstance(value, str):
        for member in enum_cls:
            if member.value.lower() == value.lower():
                return member
    return value


def _coerce_drill_set(value):
    if isinstance(value, str) and value.lower() == "imperial":
        # The UI labels fractional drills "Imperial"
        return DrillSet.FRACTIONAL
    return _coerce_enum(DrillSet, value)


class DrillCandidate(BaseModel):
    """A catalog drill, normalized to inches."""
    model_config = ConfigDict(frozen=True)

    name: str
    diameter_inches: float
    kind: DrillSet

    @property
    def diameter_mm(self) -> float:
        return self.diameter_inches * MM_PER_INCH


class TapDrillValidation(BaseModel):
    """Engagement and fit classification for a drill in a given thread."""
    model_config = ConfigDict(frozen=True)

    engagement_percent: float
    status: FitStatus
    label: str


class TapDrillRecommendation(BaseModel):
    """Nearest real drill to the engagement target for one internal class.

    target_diameter and tool_diameter are in the standard's unit.
    """
    model_config = ConfigDict(frozen=True)

    target_diameter: float
    target_engagement_percent: float
    drill: DrillCandidate
    tool_diameter: float
    engagement_percent: float
    status: FitStatus
    label: str


class BasicGeometry(BaseModel):
    """Basic (zero tolerance) thread form, in the standard's unit."""
    model_config = ConfigDict(frozen=True)

    standard: ThreadStandard
    unit: UnitSystem
    major_diameter: float
    pitch_diameter: float
    minor_diameter: float
    thread_depth: float
    root_radius: float
    pitch: float
    fundamental_height: Optional[float] = None  # Not tabulated for BA
    tpi: Optional[float] = None                 # Inch standards only


class DiameterLimits(BaseModel):
    """Limits of one diameter.

    External: max is the nominal (MMC), min = nominal - tolerance.
    Internal: min is the nominal (MMC), max = nominal + tolerance, or None
    where the standard sets no upper limit.
    """
    model_config = ConfigDict(frozen=True)

    nominal: float
    min: float
    max: Optional[float] = None


class ExternalThreadLimits(BaseModel):
    """Bolt limits for one tolerance class."""
    model_config = ConfigDict(frozen=True)

    major: DiameterLimits
    pitch: DiameterLimits
    minor: DiameterLimits
    tolerance: float  # Effective diameter tolerance


class InternalThreadLimits(BaseModel):
    """Nut limits for one tolerance class.

    tap_drill is None when no enabled catalog offers a drill.
    """
    model_config = ConfigDict(frozen=True)

    major: DiameterLimits
    pitch: DiameterLimits
    minor: DiameterLimits
    tolerance: float
    tap_drill: Optional[TapDrillRecommendation] = None


class ClassLimits(BaseModel):
    """Both genders of a tolerance class; either may be absent."""
    model_config = ConfigDict(frozen=True)

    external: Optional[ExternalThreadLimits] = None
    internal: Optional[InternalThreadLimits] = None


class ThreadResult(BaseModel):
    """Complete calculation result for one thread size."""
    model_config = ConfigDict(frozen=True)

    standard: ThreadStandard
    unit: UnitSystem
    basic: BasicGeometry
    classes: Dict[str, ClassLimits]


class CalculationOptions(BaseModel):
    """Per-call configuration.

    drill_sets: catalogs to search for tap drills; None means the
        standard's default drill sets from the registry.
    material: substrate group setting the target engagement (ferrous).
    engagement_length: length of engagement for the tolerance factor, in
        the standard's unit; None means the nominal diameter.
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    drill_sets: Optional[List[DrillSet]] = None
    material: Material = Material.FERROUS
    engagement_length: Optional[float] = None

    @field_validator('drill_sets', mode='before')
    @classmethod
    def coerce_drill_sets(cls, v):
        if v is None:
            return None
        return [_coerce_drill_set(s) for s in v]

    @field_validator('material', mode='before')
    @classmethod
    def coerce_material(cls, v):
        return _coerce_enum(Material, v)


class ThreadSpecification(BaseModel):
    """One thread to calculate.

    For BA, nominal_diameter is the size number and pitch_or_tpi is unused.
    material overrides CalculationOptions.material when set.
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    standard: ThreadStandard
    nominal_diameter: Union[float, str]
    pitch_or_tpi: Optional[Union[float, str]] = None
    designation: Optional[str] = None
    material: Optional[Material] = None

    @field_validator('standard', mode='before')
    @classmethod
    def coerce_standard(cls, v):
        return _coerce_enum(ThreadStandard, v)

    @field_validator('material', mode='before')
    @classmethod
    def coerce_material(cls, v):
        return _coerce_enum(Material, v)


class BatchEntry(BaseModel):
    """Outcome of one specification in a batch."""
    model_config = ConfigDict(frozen=True)

    specification: ThreadSpecification
    result: Optional[ThreadResult] = None
    error: Optional[str] = None
    found: bool = True  # False when a lookup standard has no such size


class StandardInfo(BaseModel):
    """Registry metadata for a standard."""
    model_config = ConfigDict(frozen=True)

    id: ThreadStandard
    name: str
    unit: UnitSystem
    angle_deg: float
    sort_order: int
    thread_form: int  # CAD thread form code
    series: List[str] = Field(default_factory=list)
    classes: List[str] = Field(default_factory=list)
    default_drill_sets: List[DrillSet] = Field(default_factory=list)


class ThreadPreset(BaseModel):
    """A published size from a standard's table."""
    model_config = ConfigDict(frozen=True)

    standard: ThreadStandard
    designation: str
    series: str
    nominal_size: float  # Size number for BA
    nominal_fraction: str
    pitch_or_tpi: Optional[float] = None
    ctd: str
