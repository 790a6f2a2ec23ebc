"""Tests for combinators and the failure envelope.

Tests cover:
- not_ (negation, double negation)
- ok (success/failure adapter)
- points_to (dereferencing adapter over Box, Shared, weakref.ref)
- render_failure / verify_that / assert_that
"""

import weakref
from concurrent.futures import ThreadPoolExecutor

import pytest

from matchkit import (
    Box,
    Failure,
    MatchAssertionError,
    Shared,
    Success,
    assert_that,
    render_failure,
    verify_that,
)
from matchkit.logic.matcher import MatchResult
from matchkit.matchers import (
    anything,
    container_eq,
    elements_are,
    eq,
    is_infinite,
    not_,
    ok,
    points_to,
)

SAMPLE_VALUES = [0, 1, 2, -1, "x", None, [1], float("inf")]
SAMPLE_MATCHERS = [eq(1), not_(eq(1)), anything(), is_infinite(), elements_are(eq(1))]


class Node:
    """Weak-referenceable object."""


# =============================================================================
# not_ Tests
# =============================================================================


class TestNot:
    """Tests for not_."""

    def test_flips_verdict(self):
        assert not_(eq(1)).matches(2) is MatchResult.MATCH
        assert not_(eq(1)).matches(1) is MatchResult.NO_MATCH

    def test_swaps_descriptions(self):
        matcher = not_(eq(1))
        assert matcher.describe(MatchResult.MATCH) == "isn't equal to 1"
        assert matcher.describe(MatchResult.NO_MATCH) == "is equal to 1"

    def test_explanation_comes_from_inner(self):
        assert not_(eq(1)).explain_match(1) == "which is equal to 1"

    @pytest.mark.parametrize("inner", SAMPLE_MATCHERS)
    def test_double_negation_is_identity(self, inner):
        double = not_(not_(inner))
        for value in SAMPLE_VALUES:
            assert double.matches(value) is inner.matches(value)
            assert double.explain_match(value) == inner.explain_match(value)
        for result in MatchResult:
            assert double.describe(result) == inner.describe(result)


# =============================================================================
# ok Tests
# =============================================================================


class TestOk:
    """Tests for ok."""

    def test_matches_success_with_value(self):
        assert ok(eq(1)).matches(Success(1)) is MatchResult.MATCH

    def test_does_not_match_success_with_wrong_value(self):
        assert ok(eq(1)).matches(Success(0)) is MatchResult.NO_MATCH

    def test_does_not_match_failure(self):
        assert ok(eq(1)).matches(Failure(1)) is MatchResult.NO_MATCH

    def test_does_not_match_plain_value(self):
        assert ok(eq(1)).matches(1) is MatchResult.NO_MATCH

    def test_matches_owned_string(self):
        assert ok(eq("123")).matches(Success("123")) is MatchResult.MATCH
        assert not_(ok(eq("123"))).matches(Success("321")) is MatchResult.MATCH
        assert not_(ok(eq("123"))).matches(Failure("123")) is MatchResult.MATCH

    def test_describe_match(self):
        assert ok(eq(1)).describe(MatchResult.MATCH) == (
            "is a success containing a value, which is equal to 1"
        )

    def test_describe_no_match(self):
        assert ok(eq(1)).describe(MatchResult.NO_MATCH) == (
            "is an error or a success containing a value, which isn't equal to 1"
        )

    def test_explain_success_matching(self):
        assert ok(eq(1)).explain_match(Success(1)) == "which is a success\n  which is equal to 1"

    def test_explain_success_not_matching(self):
        assert ok(eq(2)).explain_match(Success(1)) == (
            "which is a success\n  which isn't equal to 2"
        )

    def test_explain_failure(self):
        assert ok(eq(2)).explain_match(Failure(1)) == "which is an error"

    def test_explain_string_value(self):
        assert ok(eq("123")).explain_match(Success("321")) == (
            "which is a success\n  which isn't equal to '123'"
        )

    def test_explain_plain_value(self):
        assert ok(eq(1)).explain_match(1) == "which is neither a success nor an error"

    @pytest.mark.parametrize("inner", SAMPLE_MATCHERS)
    def test_delegates_to_inner_on_success(self, inner):
        for value in SAMPLE_VALUES:
            assert ok(inner).matches(Success(value)) is inner.matches(value)
            assert ok(inner).matches(Failure(value)) is MatchResult.NO_MATCH

    def test_full_error_message(self):
        message = verify_that(Success(1), ok(eq(2)), expression="Success(1)")
        assert message == (
            "Value of: Success(1)\n"
            "Expected: is a success containing a value, which is equal to 2\n"
            "Actual: Success(value=1),\n"
            "  which is a success\n"
            "    which isn't equal to 2"
        )


# =============================================================================
# points_to Tests
# =============================================================================


class TestPointsTo:
    """Tests for points_to."""

    def test_matches_box_of_int(self):
        assert points_to(eq(123)).matches(Box(123)) is MatchResult.MATCH

    def test_matches_shared_of_int(self):
        assert points_to(eq(123)).matches(Shared(123)) is MatchResult.MATCH

    def test_matches_shared_owned_string(self):
        assert points_to(eq("A string")).matches(Shared("A string")) is MatchResult.MATCH

    def test_matches_through_clone(self):
        original = Shared([1, 2])
        handle = original.clone()
        assert handle.ptr_eq(original)
        assert points_to(eq([1, 2])).matches(handle) is MatchResult.MATCH

    def test_matches_weak_reference(self):
        node = Node()
        assert points_to(eq(node)).matches(weakref.ref(node)) is MatchResult.MATCH

    def test_does_not_match_wrong_value(self):
        assert points_to(eq(123)).matches(Box(321)) is MatchResult.NO_MATCH

    def test_plain_value_is_no_match(self):
        matcher = points_to(eq(123))
        assert matcher.matches(123) is MatchResult.NO_MATCH
        assert matcher.explain_match(123) == "which doesn't point to a value"

    @pytest.mark.parametrize("inner", SAMPLE_MATCHERS)
    def test_forwards_everything(self, inner):
        for owner in (Box, Shared):
            for value in SAMPLE_VALUES:
                assert points_to(inner).matches(owner(value)) is inner.matches(value)
                assert points_to(inner).explain_match(owner(value)) == inner.explain_match(value)
        for result in MatchResult:
            assert points_to(inner).describe(result) == inner.describe(result)

    def test_match_explanation_references_actual_value(self):
        message = verify_that(Box([1]), points_to(container_eq([])))
        assert "Actual: Box(value=[1]), which contains the unexpected element 1" in message


# =============================================================================
# Failure Envelope Tests
# =============================================================================


class TestFailureEnvelope:
    """Tests for render_failure, verify_that and assert_that."""

    def test_single_line_explanation(self):
        assert render_failure("x", 1, eq(2)) == (
            "Value of: x\n"
            "Expected: is equal to 2\n"
            "Actual: 1, which isn't equal to 2"
        )

    def test_verify_that_returns_none_on_match(self):
        assert verify_that(1, eq(1)) is None

    def test_expression_defaults_to_rendering(self):
        assert verify_that([1], container_eq([])).startswith("Value of: [1]\n")

    def test_assert_that_raises(self):
        with pytest.raises(MatchAssertionError) as exc_info:
            assert_that(Failure("boom"), ok(anything()), expression="result")

        error = exc_info.value
        assert isinstance(error, AssertionError)
        assert error.actual == Failure("boom")
        assert str(error).endswith("Actual: Failure(error='boom'), which is an error")

    def test_assert_that_passes(self):
        assert_that(Box(Success(1)), points_to(ok(eq(1))))

    def test_rendering_is_deterministic(self):
        matcher = ok(elements_are(eq(1), eq(2)))
        first = render_failure("v", Success([2, 1]), matcher)
        second = render_failure("v", Success([2, 1]), matcher)
        assert first == second


class TestConcurrentUse:
    """Matchers are pure and can be shared between threads."""

    def test_shared_matcher_across_threads(self):
        matcher = ok(points_to(eq(3)))
        inputs = [Success(Box(i % 5)) for i in range(200)]
        expected = [matcher.matches(value) for value in inputs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(matcher.matches, inputs))

        assert results == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
