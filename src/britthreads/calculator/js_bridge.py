"""
JavaScript-Python bridge for Pyodide.

Provides a single entry point for all JS->Python calculator calls.
All inputs are validated via Pydantic models before processing.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify(inputs));
    const result = await pyodide.runPythonAsync(`
        from britthreads.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
import logging
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..enums import Material
from ..models import CalculationOptions, ThreadSpecification
from .core import calculate_specification
from .errors import ThreadCalculationError
from .output import to_json, to_markdown, to_summary
from .validation import engagement_range

logger = logging.getLogger(__name__)


# ============================================================================
# Input Models (Pydantic validation for JS inputs)
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs from the calculator UI.

    nominal is the diameter in inches (number or fraction text such as
    "1 1/8") or, for BA, the size number.
    """
    model_config = ConfigDict(extra='ignore')

    standard: str = "Whitworth"
    nominal: Union[float, str]
    pitch_or_tpi: Optional[Union[float, str]] = None
    designation: Optional[str] = None

    # Options
    drill_sets: Optional[List[str]] = None  # None = the standard's defaults
    material: str = "ferrous"
    engagement_length: Optional[float] = None

    @field_validator('material', mode='before')
    @classmethod
    def normalize_material(cls, v):
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator('pitch_or_tpi', 'engagement_length', mode='before')
    @classmethod
    def blank_to_none(cls, v):
        # Empty form fields arrive as ""
        if v == "":
            return None
        return v


# ============================================================================
# Output Models
# ============================================================================

class EngagementBand(BaseModel):
    """Optimal engagement band for the UI meter."""
    model_config = ConfigDict(extra='ignore')

    min: float
    target: float
    max: float


class CalculatorOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None
    found: bool = True  # False for a BA size not in the table

    # Result data (JSON string for JS to parse)
    result_json: Optional[str] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    engagement_band: Optional[EngagementBand] = None
    messages: List[str] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all calculator operations from JavaScript.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        spec = ThreadSpecification(
            standard=inputs.standard,
            nominal_diameter=inputs.nominal,
            pitch_or_tpi=inputs.pitch_or_tpi,
            designation=inputs.designation,
            material=inputs.material
        )
        options = CalculationOptions(
            drill_sets=inputs.drill_sets,
            material=inputs.material,
            engagement_length=inputs.engagement_length
        )
        band = EngagementBand(**engagement_range(Material(inputs.material)))

        result = calculate_specification(spec, options)
        if result is None:
            return CalculatorOutput(
                success=True,
                found=False,
                engagement_band=band,
                messages=[f"{inputs.nominal} BA is not a tabulated size"]
            ).model_dump_json()

        messages = []
        for class_name, limits in result.classes.items():
            if limits.internal is not None and limits.internal.tap_drill is None:
                messages.append(f"No tap drill available for the {class_name} nut in the enabled drill sets")

        output = CalculatorOutput(
            success=True,
            result_json=to_json(result),
            summary=to_summary(result),
            markdown=to_markdown(result),
            engagement_band=band,
            messages=messages
        )
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except (ThreadCalculationError, ValidationError, ValueError) as e:
        logger.debug(f"Calculation rejected: {e}")
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()
