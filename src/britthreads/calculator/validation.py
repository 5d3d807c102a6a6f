"""
Tap drill validation.

Scores a drill against the thread it is meant to tap: how much of the
basic thread depth the drill leaves for the tap to cut (percentage of
thread engagement, PTE) and whether the fit is safe to tap.

The fit thresholds are fixed. Material only moves the target engagement
used upstream to choose the drill.
"""

from typing import Dict, Optional, Tuple, Union

from ..enums import FitStatus, Material
from ..models import TapDrillValidation
from .constants import (
    PTE_BAND_HALF_WIDTH_PERCENT,
    PTE_DANGER_LOOSE_PERCENT,
    PTE_DANGER_TIGHT_PERCENT,
    PTE_WARNING_TIGHT_PERCENT,
    TARGET_PTE_FERROUS_PERCENT,
    TARGET_PTE_HARD_PERCENT,
    TARGET_PTE_SOFT_PERCENT,
)
from .errors import InvalidThreadError

STATUS_LABELS: Dict[FitStatus, str] = {
    FitStatus.CATASTROPHIC_LARGE: "No Thread Remaining",
    FitStatus.CATASTROPHIC_SMALL: "Tap Breakage Certain",
    FitStatus.DANGER_LOOSE: "Stripping Risk",
    FitStatus.WARNING_LOOSE: "Loose Fit",
    FitStatus.DANGER_TIGHT: "Tap Breakage Risk",
    FitStatus.WARNING_TIGHT: "Tight Fit",
    FitStatus.OPTIMAL: "Optimal Fit",
}


def _material(material: Union[Material, str, None]) -> Material:
    if material is None:
        return Material.FERROUS
    if isinstance(material, str):
        return Material(material.lower())
    return material


def target_engagement(material: Union[Material, str, None] = None) -> float:
    """
    Target percentage of thread engagement for a material group.

    - hard (stainless, tool steel): 60%
    - ferrous (general steels, default): 70%
    - soft (brass, aluminium, plastics): 80%
    """
    material = _material(material)
    if material == Material.HARD:
        return TARGET_PTE_HARD_PERCENT
    elif material == Material.SOFT:
        return TARGET_PTE_SOFT_PERCENT
    return TARGET_PTE_FERROUS_PERCENT


def engagement_range(material: Union[Material, str, None] = None) -> Dict[str, float]:
    """Optimal engagement band around the material target, for meters."""
    target = target_engagement(material)
    return {
        "min": target - PTE_BAND_HALF_WIDTH_PERCENT,
        "target": target,
        "max": target + PTE_BAND_HALF_WIDTH_PERCENT,
    }


def tap_drill_target(
    major_diameter: float,
    thread_depth: float,
    material: Union[Material, str, None] = None
) -> float:
    """
    Ideal drill diameter for the material's target engagement.

    Cut tap formula: D_drill = D_major - 2d * PTE / 100
    """
    return major_diameter - 2 * thread_depth * target_engagement(material) / 100


def classify_fit(
    drill_diameter: float,
    major_diameter: float,
    minor_diameter: float,
    nut_minor_max: float,
    engagement_percent: float
) -> Tuple[FitStatus, str]:
    """Classify a drill; the first matching rule wins."""
    if drill_diameter >= major_diameter:
        status = FitStatus.CATASTROPHIC_LARGE
    elif drill_diameter <= minor_diameter:
        status = FitStatus.CATASTROPHIC_SMALL
    elif engagement_percent < PTE_DANGER_LOOSE_PERCENT:
        status = FitStatus.DANGER_LOOSE
    elif drill_diameter > nut_minor_max:
        status = FitStatus.WARNING_LOOSE
    elif engagement_percent > PTE_DANGER_TIGHT_PERCENT:
        status = FitStatus.DANGER_TIGHT
    elif engagement_percent > PTE_WARNING_TIGHT_PERCENT:
        status = FitStatus.WARNING_TIGHT
    else:
        status = FitStatus.OPTIMAL
    return status, STATUS_LABELS[status]


def validate_tap_drill(
    drill_diameter: float,
    major_diameter: float,
    minor_diameter: float,
    nut_minor_max: float,
    material: Optional[Union[Material, str]] = None
) -> TapDrillValidation:
    """
    Validate a drill selection against thread form limits.

    All diameters must share one unit.

    Args:
        drill_diameter: Selected drill size
        major_diameter: Basic major diameter
        minor_diameter: Basic minor diameter (100% engagement)
        nut_minor_max: Upper limit of the nut minor diameter
        material: Substrate group (does not change the thresholds)

    Returns:
        TapDrillValidation with engagement percent, status and label

    Raises:
        InvalidThreadError: If major <= minor (no thread height)
    """
    total_height = (major_diameter - minor_diameter) / 2
    if total_height <= 0:
        raise InvalidThreadError(
            f"Major diameter {major_diameter} must exceed minor diameter {minor_diameter}"
        )

    engagement = max(0.0, (major_diameter - drill_diameter) / (2 * total_height) * 100)

    status, label = classify_fit(
        drill_diameter, major_diameter, minor_diameter, nut_minor_max, engagement
    )

    return TapDrillValidation(
        engagement_percent=engagement,
        status=status,
        label=label
    )
