import math

import pytest

from folio.tools.numeric import finite, first_number, pct_diff, safe_number


class TestSafeNumber:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (12, 12.0),
            (1.5, 1.5),
            ("189.43", 189.43),
            (" 7 ", 7.0),
            (0, 0.0),
        ],
    )
    def test_parses_numbers_and_numeric_strings(self, raw, expected):
        assert safe_number(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "n/a", float("nan"), float("inf"), float("-inf"), "NaN", "Infinity", True, False, {}, []],
    )
    def test_rejects_everything_else(self, raw):
        assert safe_number(raw) is None


def test_first_number_prefers_earlier_candidate():
    assert first_number(21.4, 19.0) == 21.4
    assert first_number(None, "19.0") == 19.0
    assert first_number("NaN", float("inf"), None) is None


def test_finite_drops_unparseable_values():
    assert finite(["1", None, "x", 2.5, float("nan")]) == [1.0, 2.5]


class TestPctDiff:
    def test_sign_follows_direction(self):
        assert pct_diff(110.0, 100.0) == pytest.approx(10.0)
        assert pct_diff(90.0, 100.0) == pytest.approx(-10.0)

    def test_absent_operand_gives_none(self):
        assert pct_diff(None, 100.0) is None
        assert pct_diff(100.0, None) is None

    def test_zero_reference_gives_none(self):
        assert pct_diff(5.0, 0.0) is None

    def test_result_is_always_finite(self):
        result = pct_diff(1e308, 1e-308)
        assert result is None or math.isfinite(result)
