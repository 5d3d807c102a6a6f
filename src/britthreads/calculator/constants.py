"""
Engineering constants for British thread calculations.

This module centralizes all numerical constants used by the geometry,
tolerance and tap drill functions. Each constant is documented with its
source (British Standard, published handbook, or workshop practice).

MODIFICATION GUIDELINES:
- Never change BS constants without updating the standard reference
- Workshop practice constants may be adjusted based on experience
- Add new constants here rather than hardcoding in functions
- Always include units in constant names (_IN, _MM, _DEG, _PERCENT)

Constants are grouped by category:
- Thread form: included angles and form factors
- BS 84: Whitworth tolerances (also used for ME and BSB)
- BS 811: British Standard Cycle tolerances
- BS 93: British Association table and tolerances
- Tap drills: engagement targets and fit thresholds
"""

from typing import Dict, Optional, Tuple

# =============================================================================
# Thread Form
# =============================================================================

MM_PER_INCH: float = 25.4

# Included angles
WHITWORTH_ANGLE_DEG: float = 55.0   # Whitworth, ME, BSB
BA_ANGLE_DEG: float = 47.5          # BS 93
BSC_ANGLE_DEG: float = 60.0         # BS 811 / CEI

# Whitworth form: 1/6 of the fundamental triangle is rounded off at crest
# and root, leaving a working depth of 2/3 H
WHITWORTH_DEPTH_FACTOR: float = 2.0 / 3.0
WHITWORTH_TRUNCATION_FACTOR: float = 1.0 / 6.0

# BS 811 cycle form, as fractions of pitch
BSC_HEIGHT_FACTOR: float = 3 ** 0.5 / 2                 # H / p
BSC_DEPTH_FACTOR: float = BSC_HEIGHT_FACTOR - 1.0 / 3.0  # d / p = 0.5327
BSC_RADIUS_FACTOR: float = 1.0 / 6.0                    # r / p

# Results are reported at machining precision
OUTPUT_DECIMALS: int = 6

# =============================================================================
# BS 84 - Whitworth Tolerances
# =============================================================================

# Medium class effective diameter tolerance (inches):
# T = 0.002 D^(1/3) + 0.003 L^(1/2) + 0.005 p^(1/2)
WHITWORTH_T_DIAMETER_COEFF: float = 0.002
WHITWORTH_T_LENGTH_COEFF: float = 0.003
WHITWORTH_T_PITCH_COEFF: float = 0.005

# Bolt major/minor tolerances add these multiples of sqrt(p) to tEff
MAJOR_TOLERANCE_SQRT_P: float = 0.01
MINOR_TOLERANCE_SQRT_P: float = 0.02

# Nut minor diameter tolerance = 0.2p + bracket offset (BS 84 table footnotes)
NUT_MINOR_PITCH_FACTOR: float = 0.2
NUT_MINOR_OFFSET_FINE_IN: float = 0.004     # 26 TPI and finer
NUT_MINOR_OFFSET_MEDIUM_IN: float = 0.005   # 24 and 22 TPI
NUT_MINOR_OFFSET_COARSE_IN: float = 0.007   # 20 TPI and coarser
NUT_MINOR_FINE_MIN_TPI: float = 26.0
NUT_MINOR_MEDIUM_MIN_TPI: float = 22.0

# Class multipliers on T as (bolt, nut); None means the class does not
# define that gender. BS 84 grades bolts Close/Medium/Free and nuts
# Medium/Normal.
WHITWORTH_CLASSES: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "Close": (2.0 / 3.0, None),
    "Medium": (1.0, 1.0),
    "Free": (1.5, None),
    "Normal": (None, 1.5),
}

# Normal class nut minor tolerance is scaled from the Medium nut value by
# multiplier / 1.125
NORMAL_NUT_MINOR_DIVISOR: float = 1.125

# ME and BSB publish a single Medium grade
MEDIUM_ONLY_CLASSES: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "Medium": (1.0, 1.0),
}

# =============================================================================
# BS 811 - British Standard Cycle Tolerances
# =============================================================================

# T = 0.006 p^(1/2) + 0.001 D^(1/2)
BSC_T_PITCH_COEFF: float = 0.006
BSC_T_DIAMETER_COEFF: float = 0.001

BSC_CLASSES: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "Close": (0.75, 1.0),
    "Medium": (1.0, 1.25),
    "Free": (1.5, 1.5),
}

# =============================================================================
# BS 93 - British Association
# =============================================================================

# Size number -> (pitch, depth, major, effective, minor, radius), all mm
BA_TABLE: Dict[int, Tuple[float, float, float, float, float, float]] = {
    0: (1.00, 0.600, 6.00, 5.400, 4.80, 0.1808),
    1: (0.90, 0.540, 5.30, 4.760, 4.22, 0.1627),
    2: (0.81, 0.485, 4.70, 4.215, 3.73, 0.1465),
    3: (0.73, 0.440, 4.10, 3.660, 3.22, 0.1320),
    4: (0.66, 0.395, 3.60, 3.205, 2.81, 0.1193),
    5: (0.59, 0.355, 3.20, 2.845, 2.49, 0.1067),
    6: (0.53, 0.320, 2.80, 2.480, 2.16, 0.0958),
    7: (0.48, 0.290, 2.50, 2.210, 1.92, 0.0868),
    8: (0.43, 0.260, 2.20, 1.940, 1.68, 0.0778),
    9: (0.39, 0.235, 1.90, 1.665, 1.43, 0.0705),
    10: (0.35, 0.210, 1.70, 1.490, 1.28, 0.0633),
    11: (0.31, 0.185, 1.50, 1.315, 1.13, 0.0561),
    12: (0.28, 0.170, 1.30, 1.130, 0.96, 0.0506),
    13: (0.25, 0.150, 1.20, 1.050, 0.90, 0.0452),
    14: (0.23, 0.140, 1.00, 0.860, 0.72, 0.0416),
    15: (0.21, 0.125, 0.90, 0.775, 0.65, 0.0380),
    16: (0.19, 0.115, 0.79, 0.675, 0.56, 0.0344),
}

# Close class bolts are only tabulated up to 10 BA; smaller sizes also get
# the wider Normal major tolerance
BA_CLOSE_MAX_SIZE: int = 10

# Normal class (mm): tolerance = factor * p + offset
BA_NORMAL_BOLT_MAJOR_SMALL_P: float = 0.20    # 0-10 BA
BA_NORMAL_BOLT_MAJOR_LARGE_P: float = 0.25    # 11-16 BA
BA_NORMAL_BOLT_EFFECTIVE: Tuple[float, float] = (0.10, 0.025)
BA_NORMAL_BOLT_MINOR: Tuple[float, float] = (0.20, 0.05)
BA_NORMAL_NUT_EFFECTIVE: Tuple[float, float] = (0.12, 0.03)
BA_NORMAL_NUT_MINOR_P: float = 0.375

# Close class bolts (mm)
BA_CLOSE_BOLT_MAJOR_P: float = 0.15
BA_CLOSE_BOLT_EFFECTIVE: Tuple[float, float] = (0.08, 0.02)
BA_CLOSE_BOLT_MINOR: Tuple[float, float] = (0.16, 0.04)

# =============================================================================
# Tap Drills
# =============================================================================

# Target percentage of thread engagement by material group
# Source: workshop practice - tap torque rises steeply above ~75%
TARGET_PTE_HARD_PERCENT: float = 60.0
TARGET_PTE_FERROUS_PERCENT: float = 70.0
TARGET_PTE_SOFT_PERCENT: float = 80.0

# Half-width of the "optimal" band drawn around the target
PTE_BAND_HALF_WIDTH_PERCENT: float = 5.0

# Validator thresholds (fixed, independent of material)
PTE_DANGER_LOOSE_PERCENT: float = 50.0
PTE_WARNING_TIGHT_PERCENT: float = 82.0
PTE_DANGER_TIGHT_PERCENT: float = 90.0

# Two candidates closer than this are treated as equidistant; the earlier
# catalog wins
DRILL_TIE_EPSILON: float = 1e-10
