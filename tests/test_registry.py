"""
Tests for the standard registry and published size tables.
"""

import pytest

from britthreads.calculator import calculate
from britthreads.enums import DrillSet, ThreadStandard, UnitSystem
from britthreads.presets import (
    PRESETS,
    designation_for,
    get_presets,
    series_for,
)
from britthreads.registry import STANDARDS, get_standard, list_standards


class TestRegistry:
    """Standard metadata."""

    def test_every_standard_registered(self):
        assert set(STANDARDS) == set(ThreadStandard)

    def test_display_order(self):
        order = [s.id for s in list_standards()]
        assert order == [
            ThreadStandard.WHITWORTH,
            ThreadStandard.BA,
            ThreadStandard.ME,
            ThreadStandard.BSC,
            ThreadStandard.BSB,
        ]

    def test_lookup_by_value(self):
        ba = get_standard("BA")
        assert ba.unit == UnitSystem.MM
        assert ba.angle_deg == 47.5
        assert ba.default_drill_sets == [DrillSet.METRIC, DrillSet.NUMBER]

    def test_unknown_standard(self):
        with pytest.raises(ValueError):
            get_standard("UNF")

    def test_angles(self):
        assert get_standard(ThreadStandard.WHITWORTH).angle_deg == 55.0
        assert get_standard(ThreadStandard.BSC).angle_deg == 60.0

    @pytest.mark.parametrize("standard,nominal,tpi", [
        ("Whitworth", 0.25, 20),
        ("BA", 2, None),
        ("BA", 14, None),
        ("ME", 0.25, 40),
        ("BSC", 0.25, 26),
        ("BSB", 0.5, 26),
    ])
    def test_result_classes_follow_registry_order(self, standard, nominal, tpi):
        result = calculate(standard, nominal, tpi)
        registered = get_standard(standard).classes
        classes = list(result.classes)
        assert set(classes) <= set(registered)
        assert classes == [c for c in registered if c in classes]


class TestPresets:
    """Published sizes."""

    def test_counts(self):
        assert len(get_presets("Whitworth", series="BSW")) == 22
        assert len(get_presets("Whitworth", series="BSF")) == 19
        assert len(get_presets("BA")) == 17
        assert len(get_presets(ThreadStandard.BSB)) == 11

    def test_whitworth(self):
        bsf = get_presets("Whitworth", series="BSF")[0]
        assert bsf.designation == "3/16 BSF"
        assert bsf.ctd == "3/16 - 32 BSF"
        assert bsf.nominal_size == pytest.approx(0.1875)
        assert bsf.pitch_or_tpi == 32

        bsw = get_presets("Whitworth", series="BSW")[-1]
        assert bsw.designation == "2 BSW"
        assert bsw.pitch_or_tpi == 4.5

    def test_ba(self):
        first = get_presets("BA")[0]
        assert first.designation == "0 BA"
        assert first.nominal_size == 0
        assert first.pitch_or_tpi is None
        assert first.series == "BA"

    def test_me(self):
        designations = [p.designation for p in get_presets("ME")]
        assert "ME 1/4 x 40" in designations
        assert "ME 1/4 x 26 BSB" in designations
        assert series_for(ThreadStandard.ME, 32) == "Medium (32 TPI)"
        assert series_for(ThreadStandard.ME, 40) == "Fine (40 TPI)"

    def test_bsc_and_bsa(self):
        bsc = get_presets("BSC", series="Standard")
        assert bsc[-1].designation == "1.370 BSC"
        assert bsc[-1].nominal_size == pytest.approx(1.37)

        bsa = get_presets("BSC", series="BSA")
        assert [p.designation for p in bsa][:2] == ["7/16 BSA", "1/2 BSA"]
        assert bsa[0].ctd == "7/16 - 20 BSA"

    def test_bsb(self):
        first = get_presets("BSB")[0]
        assert first.designation == "BSB 1/8 x 26"
        assert first.ctd == "1/8 - 26 BSB"

    def test_designation_for(self):
        assert designation_for(ThreadStandard.BA, "4", None, "BA") == "4 BA"
        assert designation_for(ThreadStandard.WHITWORTH, "1/2", 12, "BSW") == "1/2 BSW"

    def test_unknown_series_is_empty(self):
        assert get_presets("Whitworth", series="UNC") == []

    def test_presets_are_immutable_tuples(self):
        for presets in PRESETS.values():
            assert isinstance(presets, tuple)
