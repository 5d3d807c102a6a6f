"""
Tests for the basic geometry engine.
"""

import math

import pytest

from britthreads.calculator.constants import BA_TABLE
from britthreads.calculator.errors import InvalidInputError
from britthreads.calculator.geometry import (
    bsc_form,
    calculate_ba_geometry,
    calculate_inch_geometry,
    compute_basic_geometry,
    parse_ba_size,
    parse_fraction,
    whitworth_form,
)
from britthreads.enums import ThreadStandard, UnitSystem


class TestWhitworthForm:
    """55° form derived from the fundamental triangle."""

    @pytest.mark.parametrize("tpi", [4.5, 8, 20, 26, 40, 60])
    def test_radius_identity(self, tpi):
        """r = (H/6) / (csc 27.5° - 1)."""
        pitch = 1 / tpi
        form = whitworth_form(pitch)
        theta = math.radians(27.5)
        expected = (form["H"] / 6) / (1 / math.sin(theta) - 1)
        assert abs(form["r"] - expected) < 1e-9

    def test_published_ratios(self):
        """BS 84: H = 0.960491p, d = 0.640327p, r = 0.137329p."""
        form = whitworth_form(1.0)
        assert form["H"] == pytest.approx(0.960491, abs=1e-6)
        assert form["d"] == pytest.approx(0.640327, abs=1e-6)
        assert form["r"] == pytest.approx(0.137329, abs=1e-6)

    def test_depth_is_two_thirds_height(self):
        form = whitworth_form(0.05)
        assert form["d"] == pytest.approx(form["H"] * 2 / 3)


class TestBscForm:
    """60° BS 811 form."""

    def test_ratios(self):
        form = bsc_form(1.0)
        assert form["H"] == pytest.approx(math.sqrt(3) / 2)
        assert form["d"] == pytest.approx(0.5327, abs=1e-4)
        assert form["r"] == pytest.approx(1 / 6)


class TestInchGeometry:
    """calculate_inch_geometry for Whitworth-form and BSC threads."""

    def test_quarter_bsw(self):
        basic = calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.25, 20)
        assert basic.unit == UnitSystem.INCH
        assert basic.pitch == 0.05
        assert basic.tpi == 20
        assert basic.major_diameter == 0.25
        assert basic.thread_depth == pytest.approx(0.032016, abs=1e-6)
        assert basic.pitch_diameter == pytest.approx(0.217984, abs=1e-6)
        assert basic.minor_diameter == pytest.approx(0.185967, abs=1e-6)

    def test_quarter_bsc(self):
        basic = calculate_inch_geometry(ThreadStandard.BSC, 0.25, 26)
        assert basic.thread_depth == pytest.approx(0.5327 / 26, abs=1e-5)
        assert basic.root_radius == pytest.approx(1 / 26 / 6, abs=1e-6)

    @pytest.mark.parametrize("standard", [ThreadStandard.WHITWORTH, ThreadStandard.ME, ThreadStandard.BSB, ThreadStandard.BSC])
    def test_diameter_ordering(self, standard):
        basic = calculate_inch_geometry(standard, 0.5, 26)
        assert basic.major_diameter > basic.pitch_diameter > basic.minor_diameter
        assert basic.major_diameter - 2 * basic.thread_depth == pytest.approx(basic.minor_diameter, abs=2e-6)

    def test_rounded_to_six_places(self):
        basic = calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.3125, 18)
        for value in (basic.pitch_diameter, basic.minor_diameter, basic.thread_depth, basic.root_radius):
            assert value == round(value, 6)

    def test_string_inputs_accepted(self):
        basic = calculate_inch_geometry(ThreadStandard.WHITWORTH, "0.25", "20")
        assert basic == calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.25, 20)

    @pytest.mark.parametrize("diameter", [0, -0.25, "abc", None, float("nan"), float("inf"), True])
    def test_invalid_diameter(self, diameter):
        with pytest.raises(InvalidInputError):
            calculate_inch_geometry(ThreadStandard.WHITWORTH, diameter, 20)

    @pytest.mark.parametrize("tpi", [0, -20, "twenty", None, float("nan")])
    def test_invalid_tpi(self, tpi):
        with pytest.raises(InvalidInputError):
            calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.25, tpi)

    def test_pitch_too_coarse(self):
        """A 4 TPI thread would cut straight through a 0.05in rod."""
        with pytest.raises(InvalidInputError, match="too coarse"):
            calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.05, 4)

    def test_pitch_too_fine(self):
        """A thread depth below the rounding resolution would collapse the diameters."""
        with pytest.raises(InvalidInputError, match="too fine"):
            calculate_inch_geometry(ThreadStandard.WHITWORTH, 0.25, 1e8)
        with pytest.raises(InvalidInputError, match="too fine"):
            calculate_inch_geometry(ThreadStandard.BSC, 0.25, 1e8)

    def test_ba_is_not_inch_pitch(self):
        with pytest.raises(InvalidInputError):
            calculate_inch_geometry(ThreadStandard.BA, 0.25, 20)


class TestBaGeometry:
    """BS 93 table lookups."""

    def test_zero_ba(self):
        basic = calculate_ba_geometry(0)
        assert basic.unit == UnitSystem.MM
        assert basic.major_diameter == 6.0
        assert basic.pitch == 1.0
        assert basic.thread_depth == 0.6
        assert basic.pitch_diameter == 5.4
        assert basic.minor_diameter == 4.8
        assert basic.fundamental_height is None
        assert basic.tpi is None

    def test_untabulated_size_returns_none(self):
        assert calculate_ba_geometry(17) is None
        assert calculate_ba_geometry(99) is None
        assert calculate_ba_geometry(-1) is None

    def test_pitch_follows_nine_tenths_rule(self):
        """Each BA pitch is roughly 0.9 of the one before: p(n) ≈ 0.9^n mm."""
        for size, row in BA_TABLE.items():
            assert row[0] == pytest.approx(0.9 ** size, rel=0.03)

    def test_table_consistency(self):
        for size, (pitch, depth, major, effective, minor, radius) in BA_TABLE.items():
            assert major > effective > minor
            assert (major - minor) / 2 == pytest.approx(depth, abs=1e-9)
            assert major - depth == pytest.approx(effective, abs=1e-9)

    def test_pitches_unique(self):
        pitches = [row[0] for row in BA_TABLE.values()]
        assert len(set(pitches)) == len(pitches)


class TestParsing:
    """Size parsing helpers."""

    @pytest.mark.parametrize("text,expected", [
        ("2", 2), ("2BA", 2), ("2 ba", 2), (" 10 BA ", 10), (4, 4), (4.0, 4),
    ])
    def test_parse_ba_size(self, text, expected):
        assert parse_ba_size(text) == expected

    @pytest.mark.parametrize("value", [2.5, "two", "", True, None])
    def test_parse_ba_size_invalid(self, value):
        with pytest.raises(InvalidInputError):
            parse_ba_size(value)

    @pytest.mark.parametrize("text,expected", [
        ("1 1/8", 1.125), ("3/16", 0.1875), ('1/4"', 0.25), ("0.25", 0.25), ("1.370", 1.37), (0.5, 0.5), (2, 2.0),
    ])
    def test_parse_fraction(self, text, expected):
        assert parse_fraction(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["abc", "1/0", "1 1/8/2", ""])
    def test_parse_fraction_invalid(self, text):
        with pytest.raises(InvalidInputError):
            parse_fraction(text)


class TestComputeBasicGeometry:
    """Dispatch by standard."""

    def test_dispatch_by_string(self):
        assert compute_basic_geometry("BSC", 0.25, 26).standard == ThreadStandard.BSC

    def test_ba_ignores_pitch(self):
        assert compute_basic_geometry(ThreadStandard.BA, 2, 999) == calculate_ba_geometry(2)

    def test_ba_not_found(self):
        assert compute_basic_geometry(ThreadStandard.BA, 20) is None
