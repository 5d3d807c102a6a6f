"""Output formatters for thread calculations.

Converts typed ThreadResult models to JSON, Markdown and a plain text
summary. All functions expect ThreadResult - no dict handling.

Uses Pydantic's model_dump(mode='json') so enums serialize to their
string values.
"""

import json

from ..models import ThreadResult
from ..enums import UnitSystem

SCHEMA_VERSION = "1.0"


def _model_to_dict(model) -> dict:
    """Convert Pydantic model to dict with JSON-compatible types.

    Optional fields that are None (e.g. the BA fundamental height or a
    class's missing gender) are dropped.
    """
    return model.model_dump(mode='json', exclude_none=True)


def _places(unit: str) -> int:
    # Inch work is read to 0.0001", metric to 0.001 mm
    return 4 if unit == UnitSystem.INCH.value else 3


def _limit(value, places: int) -> str:
    if value is None:
        return "-"
    return f"{value:.{places}f}"


def to_json(result: ThreadResult, indent: int = 2) -> str:
    """Convert ThreadResult to JSON string.

    Args:
        result: ThreadResult from calculate_*() functions
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version and the full result
    """
    result_dict = _model_to_dict(result)
    result_dict['schema_version'] = SCHEMA_VERSION
    return json.dumps(result_dict, indent=indent)


def to_markdown(result: ThreadResult) -> str:
    """Convert ThreadResult to a markdown specification.

    Args:
        result: ThreadResult from calculate_*() functions

    Returns:
        Markdown with basic geometry, per-class limits and tap drills
    """
    result_dict = _model_to_dict(result)
    basic = result_dict["basic"]
    unit = result_dict["unit"]
    places = _places(unit)

    md = f"# {result_dict['standard']} Thread Specification\n\n"

    md += "## Basic Geometry\n\n"
    md += "| Dimension | Value |\n"
    md += "|-----------|-------|\n"
    md += f"| Major Diameter | {basic['major_diameter']:.{places}f} {unit} |\n"
    md += f"| Effective Diameter | {basic['pitch_diameter']:.{places}f} {unit} |\n"
    md += f"| Minor Diameter | {basic['minor_diameter']:.{places}f} {unit} |\n"
    md += f"| Pitch | {basic['pitch']:.{places}f} {unit} |\n"
    if basic.get('tpi'):
        md += f"| Threads per Inch | {basic['tpi']:g} |\n"
    md += f"| Thread Depth | {basic['thread_depth']:.{places}f} {unit} |\n"
    md += f"| Crest/Root Radius | {basic['root_radius']:.{places}f} {unit} |\n"
    if basic.get('fundamental_height'):
        md += f"| Fundamental Height | {basic['fundamental_height']:.{places}f} {unit} |\n"
    md += "\n"

    for class_name, limits in result_dict["classes"].items():
        md += f"## {class_name} Class\n\n"
        for gender, title in (("external", "Bolt (External)"), ("internal", "Nut (Internal)")):
            thread = limits.get(gender)
            if thread is None:
                continue
            md += f"### {title}\n\n"
            md += f"| Diameter | Min ({unit}) | Max ({unit}) |\n"
            md += "|----------|-----|-----|\n"
            for key, label in (("major", "Major"), ("pitch", "Effective"), ("minor", "Minor")):
                md += (
                    f"| {label} | {_limit(thread[key].get('min'), places)} "
                    f"| {_limit(thread[key].get('max'), places)} |\n"
                )
            md += f"\n**Effective Tolerance:** {thread['tolerance']:.{places}f} {unit}\n\n"

            drill = thread.get("tap_drill")
            if gender == "internal":
                if drill:
                    md += (
                        f"**Tap Drill:** {drill['drill']['name']} "
                        f"({drill['tool_diameter']:.{places}f} {unit}) - "
                        f"{drill['engagement_percent']:.1f}% engagement, {drill['label']}\n\n"
                    )
                else:
                    md += "**Tap Drill:** no drill available in the enabled sets\n\n"

    md += "## Notes\n\n"
    md += f"- All dimensions in {'inches' if unit == UnitSystem.INCH.value else 'millimetres'}\n"
    md += "- Nut major diameter has no upper limit\n"
    md += "- Tap drill engagement is relative to the basic thread depth\n"
    md += "\n"

    md += "---\n"
    md += "*Generated by British Thread Calculator*\n"

    return md


def to_summary(result: ThreadResult) -> str:
    """Convert ThreadResult to a short text summary.

    Returns:
        Multi-line formatted summary string
    """
    result_dict = _model_to_dict(result)
    basic = result_dict["basic"]
    unit = result_dict["unit"]
    places = _places(unit)

    lines = [
        f"═══ {result_dict['standard']} Thread ═══",
        f"Major diameter:     {basic['major_diameter']:.{places}f} {unit}",
        f"Effective diameter: {basic['pitch_diameter']:.{places}f} {unit}",
        f"Minor diameter:     {basic['minor_diameter']:.{places}f} {unit}",
        f"Pitch:              {basic['pitch']:.{places}f} {unit}",
    ]
    if basic.get('tpi'):
        lines.append(f"TPI:                {basic['tpi']:g}")

    lines.append("")
    for class_name, limits in result_dict["classes"].items():
        genders = [g for g in ("external", "internal") if g in limits]
        lines.append(f"{class_name}: {', '.join(genders)}")
        internal = limits.get("internal")
        if internal and internal.get("tap_drill"):
            drill = internal["tap_drill"]
            lines.append(
                f"  Tap drill: {drill['drill']['name']} "
                f"({drill['engagement_percent']:.0f}%, {drill['label']})"
            )

    return "\n".join(lines)
