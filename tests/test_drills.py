"""
Tests for drill catalogs and nearest-drill selection.
"""

import pytest

from britthreads.calculator.drills import (
    FRACTIONAL_DRILLS,
    LETTER_DRILLS,
    METRIC_DRILLS,
    NUMBER_DRILLS,
    find_drill,
    get_drill_catalog,
    nearest_drill,
    normalize_drill_sets,
)
from britthreads.calculator.errors import InvalidInputError
from britthreads.enums import DrillSet


class TestCatalogs:
    """Catalog construction."""

    def test_catalog_sizes(self):
        assert len(FRACTIONAL_DRILLS) == 164
        assert len(LETTER_DRILLS) == 26
        assert len(NUMBER_DRILLS) == 80
        assert len(METRIC_DRILLS) == 173

    def test_fractional_range(self):
        """1/64" to 6" with coarser steps above 1 3/4"."""
        assert FRACTIONAL_DRILLS[0].name == '1/64"'
        assert FRACTIONAL_DRILLS[0].diameter_inches == pytest.approx(1 / 64)
        assert FRACTIONAL_DRILLS[-1].name == '6"'
        assert FRACTIONAL_DRILLS[-1].diameter_inches == 6.0

        names = [d.name for d in FRACTIONAL_DRILLS]
        assert '1 3/4"' in names
        assert '1 25/32"' in names
        assert '1 49/64"' not in names
        assert '2 9/32"' not in names

    def test_fraction_names_reduced(self):
        assert find_drill('1/4"').diameter_inches == 0.25
        assert find_drill('2"').diameter_inches == 2.0
        assert find_drill('16/64"') is None

    def test_number_and_letter_sizes(self):
        assert NUMBER_DRILLS[0].name == "#80"
        assert NUMBER_DRILLS[-1].name == "#1"
        assert find_drill("#43").diameter_inches == 0.0890
        assert find_drill("#1").diameter_inches == 0.2280
        assert find_drill("A").diameter_inches == 0.234
        assert find_drill("F").diameter_inches == 0.257
        assert find_drill("Z").diameter_inches == 0.413

    def test_metric_range(self):
        assert METRIC_DRILLS[0].name == "0.10mm"
        assert METRIC_DRILLS[-1].name == "20.0mm"
        drill = find_drill("3.3mm")
        assert drill.kind == DrillSet.METRIC
        assert drill.diameter_mm == pytest.approx(3.3)
        assert find_drill("13.1mm") is None

    def test_catalogs_sorted_ascending(self):
        for catalog in (FRACTIONAL_DRILLS, LETTER_DRILLS, NUMBER_DRILLS, METRIC_DRILLS):
            sizes = [d.diameter_inches for d in catalog]
            assert sizes == sorted(sizes)

    def test_get_drill_catalog(self):
        assert get_drill_catalog("Number") is NUMBER_DRILLS
        assert get_drill_catalog(DrillSet.METRIC) is METRIC_DRILLS
        assert get_drill_catalog("Imperial") is FRACTIONAL_DRILLS

    def test_find_unknown_drill(self):
        assert find_drill("#99") is None


class TestNormalizeDrillSets:
    """Drill set name coercion."""

    def test_names_case_insensitive(self):
        assert normalize_drill_sets(["METRIC", "letter"]) == [DrillSet.METRIC, DrillSet.LETTER]

    def test_imperial_alias(self):
        assert normalize_drill_sets(["Imperial"]) == [DrillSet.FRACTIONAL]

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidInputError, match="Unknown drill set"):
            normalize_drill_sets(["Jobber"])


class TestNearestDrill:
    """Tests for nearest_drill."""

    def test_exact_match(self):
        assert nearest_drill(0.0890, drill_sets=["number"]).name == "#43"

    def test_fractional_beats_equal_letter(self):
        """1/4" and letter E are both 0.250"; fractional has priority."""
        drill = nearest_drill(0.25)
        assert drill.name == '1/4"'
        assert drill.kind == DrillSet.FRACTIONAL

    def test_letter_when_fractional_disabled(self):
        assert nearest_drill(0.25, drill_sets=["letter", "number"]).name == "E"

    def test_fractional_beats_equal_metric(self):
        """12.7mm is exactly 1/2"."""
        assert nearest_drill(12.7, "mm").name == '1/2"'
        assert nearest_drill(12.7, "mm", ["metric"]).name == "12.7mm"

    def test_priority_independent_of_given_order(self):
        forward = nearest_drill(0.5, drill_sets=["fractional", "metric"])
        reverse = nearest_drill(0.5, drill_sets=["metric", "fractional"])
        assert forward == reverse
        assert forward.kind == DrillSet.FRACTIONAL

    def test_millimetre_target(self):
        assert nearest_drill(3.3, "mm", ["metric"]).name == "3.3mm"
        assert nearest_drill(4.021, "mm", ["metric"]).name == "4.0mm"

    def test_no_enabled_sets_returns_none(self):
        assert nearest_drill(0.25, drill_sets=[]) is None

    def test_unknown_set_raises(self):
        with pytest.raises(InvalidInputError):
            nearest_drill(0.25, drill_sets=["bogus"])

    def test_beyond_catalog_picks_largest(self):
        assert nearest_drill(10.0, drill_sets=["fractional"]).name == '6"'
        assert nearest_drill(0.001, drill_sets=["number"]).name == "#80"

    @pytest.mark.parametrize("target", [0.0137, 0.0921, 0.1502, 0.2055, 0.3333, 0.7071, 1.9, 3.14159])
    def test_minimal_distance(self, target):
        """No enabled drill is strictly closer than the one chosen."""
        drill = nearest_drill(target)
        best = abs(drill.diameter_inches - target)
        for catalog in (FRACTIONAL_DRILLS, LETTER_DRILLS, NUMBER_DRILLS, METRIC_DRILLS):
            for candidate in catalog:
                assert abs(candidate.diameter_inches - target) >= best - 1e-10

    def test_deterministic(self):
        assert nearest_drill(0.2052) == nearest_drill(0.2052)
