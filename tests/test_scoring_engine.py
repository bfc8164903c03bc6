# tests/test_scoring_engine.py

"""
Scoring Engine Tests - result -> points and points -> estimated result
"""

import math

import pytest

from multievent.models.enumerations import EventKind, EventType, FormulaUnit
from multievent.scoring import DEFAULT_SCORING_TABLE, ScoringEngine, calculate_points, estimate_result
from multievent.scoring.formulas import ScoringFormula, build_scoring_table
from multievent.scoring.utils import parse_leading_float, parse_leading_int, round_half_up



# PINNED SCENARIOS


class TestPinnedScores:
    """Known table values."""

    def test_decathlon_100m(self):
        points = calculate_points("decathlon", "100m", "10.45", "time")
        assert points == round(25.4347 * 7.55 ** 1.81)
        assert points == 987

    def test_decathlon_long_jump_uses_centimeters(self):
        points = calculate_points("decathlon", "Long Jump", "7.50", "measurement")
        assert points == round(0.14354 * 530 ** 1.4)
        assert points == 935

    def test_heptathlon_800m_minutes_format(self):
        points = calculate_points("heptathlon", "800m", "2:10.50", "time")
        assert points == round(0.11193 * 123.5 ** 1.88)
        assert points == 958

    def test_decathlon_high_jump(self):
        assert calculate_points("decathlon", "High Jump", "2.10") == round(0.8465 * 135 ** 1.42)

    def test_decathlon_1500m(self):
        assert calculate_points("decathlon", "1500m", "4:25.50") == round(0.03768 * 214.5 ** 1.85)

    def test_pentathlon_shares_heptathlon_coefficients(self):
        for event in ("100m Hurdles", "High Jump", "Shot Put", "200m", "800m"):
            hept = DEFAULT_SCORING_TABLE.lookup("heptathlon", event)
            pent = DEFAULT_SCORING_TABLE.lookup("pentathlon", event)
            assert hept == pent

    def test_accepts_enum_arguments(self):
        assert calculate_points(EventType.DECATHLON, "100m", "10.45", EventKind.TIME) == 987

    def test_kind_defaults_to_event_kind(self):
        assert calculate_points("decathlon", "100m", "10.45") == 987
        assert calculate_points("decathlon", "Long Jump", "7.50") == 935



# SENTINEL CASES


class TestCalculatePointsSentinels:
    """Anything not scoreable is 0, never an exception."""

    def test_unknown_event_name(self):
        assert calculate_points("decathlon", "Triple Jump", "15.00", "measurement") == 0

    def test_unknown_event_type(self):
        assert calculate_points("triathlon", "100m", "10.45", "time") == 0

    def test_event_not_in_pentathlon(self):
        assert calculate_points("pentathlon", "Long Jump", "6.50") == 0

    def test_kind_mismatch(self):
        assert calculate_points("decathlon", "100m", "10.45", "measurement") == 0
        assert calculate_points("decathlon", "Long Jump", "7.50", "time") == 0

    def test_unknown_kind(self):
        assert calculate_points("decathlon", "100m", "10.45", "distance") == 0

    def test_not_a_number(self):
        assert calculate_points("decathlon", "Long Jump", "not-a-number", "measurement") == 0

    def test_zero_time(self):
        assert calculate_points("decathlon", "100m", "0:00.00", "time") == 0

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-5", "0", "1:2:3"])
    def test_unscoreable_time(self, raw):
        assert calculate_points("decathlon", "100m", raw, "time") == 0

    @pytest.mark.parametrize("raw", ["", "-7.5", "0", "0.00", "m7.50", "1e400"])
    def test_unscoreable_measurement(self, raw):
        assert calculate_points("decathlon", "Long Jump", raw, "measurement") == 0

    def test_time_at_baseline(self):
        assert calculate_points("decathlon", "100m", "18.00", "time") == 0

    def test_time_slower_than_baseline(self):
        assert calculate_points("decathlon", "100m", "19.20", "time") == 0

    def test_measurement_at_baseline(self):
        assert calculate_points("heptathlon", "Shot Put", "1.50", "measurement") == 0

    def test_measurement_below_baseline(self):
        assert calculate_points("decathlon", "Long Jump", "1.90", "measurement") == 0

    def test_non_string_result(self):
        assert calculate_points("decathlon", "100m", None, "time") == 0

    def test_non_string_event_name(self):
        assert calculate_points("decathlon", None, "10.45") == 0



# LENIENT PARSING


class TestLenientParsing:
    """Number parsing follows a browser parseFloat: leading numeric prefix wins."""

    def test_trailing_unit_ignored(self):
        assert calculate_points("decathlon", "100m", "10.45s") == 987

    def test_leading_whitespace(self):
        assert calculate_points("decathlon", "Long Jump", "  7.50") == 935

    def test_trailing_text_on_measurement(self):
        assert calculate_points("decathlon", "Long Jump", "7.50m") == 935

    def test_minutes_use_integer_prefix(self):
        # "2.5" minutes reads as 2
        assert calculate_points("heptathlon", "800m", "2.5:10.50") == 958

    def test_parse_leading_float(self):
        assert parse_leading_float("10.45s") == 10.45
        assert parse_leading_float(".5") == 0.5
        assert parse_leading_float("7.") == 7.0
        assert parse_leading_float("abc") is None
        assert parse_leading_float(None) is None

    def test_parse_leading_int(self):
        assert parse_leading_int("2.5") == 2
        assert parse_leading_int(" 12 ") == 12
        assert parse_leading_int("x1") is None



# ROUNDING


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (10.5, 11),
        (10.4999, 10),
        (0.5, 1),
        (2.5, 3),
        (986.999, 987),
    ])
    def test_halves_round_up(self, value, expected):
        assert round_half_up(value) == expected



# ESTIMATES


class TestEstimateResult:

    def test_zero_points_returns_baseline_measurement(self):
        assert estimate_result("heptathlon", "Shot Put", 0) == "1.50"

    def test_zero_points_returns_baseline_time(self):
        assert estimate_result("decathlon", "100m", 0) == "18.00"

    def test_time_over_a_minute_uses_minutes(self):
        assert estimate_result("decathlon", "1500m", 0) == "8:00.00"

    def test_cm_formula_estimate_in_meters(self):
        estimate = estimate_result("decathlon", "Long Jump", 935, "measurement")
        assert estimate == "7.50"
        assert calculate_points("decathlon", "Long Jump", estimate) == 935

    def test_round_trip_800m(self):
        estimate = estimate_result("heptathlon", "800m", 958, "time")
        assert ":" in estimate
        assert abs(calculate_points("heptathlon", "800m", estimate) - 958) <= 1

    @pytest.mark.parametrize("points", [-1, -0.01, math.nan, math.inf, -math.inf, "abc", None])
    def test_invalid_points(self, points):
        assert estimate_result("decathlon", "100m", points) == ""

    def test_numeric_string_points(self):
        assert estimate_result("heptathlon", "Shot Put", "0") == "1.50"

    def test_unknown_event(self):
        assert estimate_result("decathlon", "Triple Jump", 800) == ""

    def test_kind_mismatch(self):
        assert estimate_result("decathlon", "100m", 800, "measurement") == ""

    def test_time_estimate_below_zero_is_invalid(self):
        # Far more points than the event can award: the time would be negative
        assert estimate_result("decathlon", "100m", 1_000_000) == ""



# INJECTED TABLES


class TestScoringTable:

    def test_custom_table(self):
        table = build_scoring_table({
            EventType.DECATHLON: {"60m": ScoringFormula(10.0, 10, 2.0, FormulaUnit.SECONDS)},
        })
        engine = ScoringEngine(table)
        assert engine.calculate_points("decathlon", "60m", "7.00") == 90
        assert engine.calculate_points("decathlon", "100m", "10.45") == 0
        assert engine.estimate_result("decathlon", "60m", 90) == "7.00"

    @pytest.mark.parametrize("A,B,C", [
        (0.0, 18, 1.81),
        (25.4347, 18, 0.0),
        (-1.0, 18, 1.81),
        (25.4347, 18, -1.81),
        (math.nan, 18, 1.81),
        (25.4347, math.inf, 1.81),
    ])
    def test_degenerate_formula_rejected(self, A, B, C):
        with pytest.raises(ValueError):
            ScoringFormula(A, B, C, FormulaUnit.SECONDS)

    @pytest.mark.parametrize("field", ["A", "C"])
    def test_zero_coefficient_never_raises(self, field):
        formula = ScoringFormula(10.0, 10, 2.0, FormulaUnit.SECONDS)
        object.__setattr__(formula, field, 0.0)
        engine = ScoringEngine(build_scoring_table({EventType.DECATHLON: {"60m": formula}}))
        assert engine.estimate_result("decathlon", "60m", 500) == ""
        assert isinstance(engine.calculate_points("decathlon", "60m", "7.00"), int)

    def test_table_is_read_only(self):
        events = DEFAULT_SCORING_TABLE.events_for("decathlon")
        with pytest.raises(TypeError):
            events["100m"] = ScoringFormula(1, 1, 1, FormulaUnit.SECONDS)

    def test_formula_is_frozen(self):
        formula = DEFAULT_SCORING_TABLE.lookup("decathlon", "100m")
        with pytest.raises(AttributeError):
            formula.A = 1.0

    def test_formula_kind_from_unit(self):
        assert DEFAULT_SCORING_TABLE.lookup("decathlon", "100m").kind == EventKind.TIME
        assert DEFAULT_SCORING_TABLE.lookup("decathlon", "Pole Vault").kind == EventKind.MEASUREMENT
        assert DEFAULT_SCORING_TABLE.lookup("decathlon", "Discus").kind == EventKind.MEASUREMENT

    def test_event_names(self):
        assert len(DEFAULT_SCORING_TABLE.event_names("decathlon")) == 10
        assert len(DEFAULT_SCORING_TABLE.event_names("heptathlon")) == 7
        assert len(DEFAULT_SCORING_TABLE.event_names("pentathlon")) == 5
        assert DEFAULT_SCORING_TABLE.event_names("triathlon") == ()

    def test_contains_and_iter(self):
        assert "decathlon" in DEFAULT_SCORING_TABLE
        assert "triathlon" not in DEFAULT_SCORING_TABLE
        assert set(DEFAULT_SCORING_TABLE) == set(EventType)

    def test_as_dict(self):
        data = DEFAULT_SCORING_TABLE.as_dict()
        assert data["decathlon"]["Long Jump"] == {"A": 0.14354, "B": 220, "C": 1.4, "unit": "cm"}
