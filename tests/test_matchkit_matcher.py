"""Tests for the matcher contract and the leaf matchers.

Tests cover:
- MatchResult and MatchPolicy
- The default explain_match of the Matcher base class
- eq, anything, is_infinite
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from matchkit.description import Description
from matchkit.logic.matcher import Matcher, MatchPolicy, MatchResult
from matchkit.matchers import anything, eq, is_infinite


class IsEven(Matcher[int]):
    """Custom matcher used to exercise the base class."""

    def matches(self, actual):
        return MatchResult.from_bool(actual % 2 == 0)

    def describe(self, result):
        return Description.of("is even" if result.is_match() else "is odd")


# =============================================================================
# Types Tests
# =============================================================================


class TestMatchResult:
    """Tests for MatchResult."""

    def test_from_bool(self):
        assert MatchResult.from_bool(True) is MatchResult.MATCH
        assert MatchResult.from_bool(False) is MatchResult.NO_MATCH

    def test_predicates(self):
        assert MatchResult.MATCH.is_match()
        assert not MatchResult.MATCH.is_no_match()
        assert MatchResult.NO_MATCH.is_no_match()

    def test_negate(self):
        assert MatchResult.MATCH.negate() is MatchResult.NO_MATCH
        assert MatchResult.NO_MATCH.negate() is MatchResult.MATCH


class TestMatchPolicy:
    """Tests for MatchPolicy."""

    def test_labels(self):
        assert MatchPolicy.EXACT.label == "perfect"
        assert MatchPolicy.COVERING_SUBSET.label == "superset"
        assert MatchPolicy.COVERING_SUPERSET.label == "subset"

    def test_required_sides(self):
        assert MatchPolicy.EXACT.requires_all_matchers
        assert MatchPolicy.EXACT.requires_all_actual
        assert MatchPolicy.COVERING_SUBSET.requires_all_matchers
        assert not MatchPolicy.COVERING_SUBSET.requires_all_actual
        assert not MatchPolicy.COVERING_SUPERSET.requires_all_matchers
        assert MatchPolicy.COVERING_SUPERSET.requires_all_actual

    def test_values_round_trip(self):
        assert MatchPolicy("covering-subset") is MatchPolicy.COVERING_SUBSET


# =============================================================================
# Matcher Base Tests
# =============================================================================


class TestMatcherBase:
    """Tests for the Matcher abstract base class."""

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Matcher()

    def test_default_explain_match(self):
        assert IsEven().explain_match(3) == "which is odd"
        assert IsEven().explain_match(4) == "which is even"

    def test_repr_uses_description(self):
        assert repr(IsEven()) == "<IsEven: is even>"

    def test_matches_is_repeatable(self):
        matcher = IsEven()
        assert [matcher.matches(2), matcher.matches(3), matcher.matches(2)] == [
            MatchResult.MATCH,
            MatchResult.NO_MATCH,
            MatchResult.MATCH,
        ]


# =============================================================================
# Leaf Matcher Tests
# =============================================================================


class TestEq:
    """Tests for eq."""

    def test_matches_equal_value(self):
        assert eq(1).matches(1) is MatchResult.MATCH

    def test_rejects_other_value(self):
        assert eq(1).matches(0) is MatchResult.NO_MATCH

    def test_describe(self):
        assert eq(1).describe(MatchResult.MATCH) == "is equal to 1"
        assert eq(1).describe(MatchResult.NO_MATCH) == "isn't equal to 1"

    def test_describe_uses_debug_rendering(self):
        assert eq("123").describe(MatchResult.MATCH) == "is equal to '123'"

    def test_explain_match(self):
        assert eq(2).explain_match(1) == "which isn't equal to 2"
        assert eq(1).explain_match(1) == "which is equal to 1"


class TestAnything:
    """Tests for anything."""

    @pytest.mark.parametrize("value", [0, None, "x", [], object()])
    def test_matches_everything(self, value):
        assert anything().matches(value) is MatchResult.MATCH

    def test_describe(self):
        assert anything().describe(MatchResult.MATCH) == "is anything"
        assert anything().describe(MatchResult.NO_MATCH) == "never matches"


class TestIsInfinite:
    """Tests for is_infinite, for single and double precision."""

    def test_matches_double_positive_infinity(self):
        assert is_infinite().matches(math.inf) is MatchResult.MATCH

    def test_matches_double_negative_infinity(self):
        assert is_infinite().matches(-math.inf) is MatchResult.MATCH

    def test_does_not_match_double_number(self):
        assert is_infinite().matches(0.0) is MatchResult.NO_MATCH

    def test_matches_single_positive_infinity(self):
        np = pytest.importorskip("numpy")
        assert is_infinite().matches(np.float32(np.inf)) is MatchResult.MATCH

    def test_matches_single_negative_infinity(self):
        np = pytest.importorskip("numpy")
        assert is_infinite().matches(np.float32(-np.inf)) is MatchResult.MATCH

    def test_does_not_match_single_number(self):
        np = pytest.importorskip("numpy")
        assert is_infinite().matches(np.float32(0.0)) is MatchResult.NO_MATCH

    def test_does_not_match_nan(self):
        assert is_infinite().matches(math.nan) is MatchResult.NO_MATCH

    def test_matches_decimal_infinity(self):
        assert is_infinite().matches(Decimal("-Infinity")) is MatchResult.MATCH

    def test_huge_int_is_finite(self):
        assert is_infinite().matches(10**400) is MatchResult.NO_MATCH

    def test_huge_decimal_is_finite(self):
        assert is_infinite().matches(Decimal("1e400")) is MatchResult.NO_MATCH

    def test_decimal_nan_is_not_infinite(self):
        assert is_infinite().matches(Decimal("NaN")) is MatchResult.NO_MATCH

    def test_huge_fraction_is_finite(self):
        assert is_infinite().matches(Fraction(10**400)) is MatchResult.NO_MATCH

    def test_small_fraction_is_finite(self):
        assert is_infinite().matches(Fraction(1, 3)) is MatchResult.NO_MATCH

    def test_non_numeric_is_no_match(self):
        assert is_infinite().matches("inf") is MatchResult.NO_MATCH

    def test_describe(self):
        assert is_infinite().describe(MatchResult.MATCH) == "is Infinite"
        assert is_infinite().describe(MatchResult.NO_MATCH) == "isn't Infinite"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
