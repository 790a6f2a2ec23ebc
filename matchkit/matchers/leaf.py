"""Leaf matchers.

Minimal scalar predicates used on their own and inside the combinators
and container matchers.
"""

import math
from decimal import Decimal
from typing import Any, SupportsFloat

from matchkit.description import Description
from matchkit.logic.matcher import Matcher, MatchResult
from matchkit.serializer.canonical import debug_repr


class EqMatcher(Matcher[Any]):
    """Matches values equal to expected.

    Capability: actual must support == against expected.
    """

    def __init__(self, expected: Any):
        self.expected = expected

    def matches(self, actual: Any) -> MatchResult:
        return MatchResult.from_bool(actual == self.expected)

    def describe(self, result: MatchResult) -> Description:
        verb = "is equal to" if result.is_match() else "isn't equal to"
        return Description.of(f"{verb} {debug_repr(self.expected)}")


class AnythingMatcher(Matcher[Any]):
    """Matches every value."""

    def matches(self, actual: Any) -> MatchResult:
        return MatchResult.MATCH

    def describe(self, result: MatchResult) -> Description:
        return Description.of("is anything" if result.is_match() else "never matches")


class IsInfiniteMatcher(Matcher[SupportsFloat]):
    """Matches positive or negative infinity.

    Capability: actual must convert to float (float, numpy floating types,
    Decimal, Fraction, ...). Anything else is a NO_MATCH. Decimal answers
    with its own is_infinite(), so finite values beyond the float range
    stay finite.
    """

    def matches(self, actual: SupportsFloat) -> MatchResult:
        if isinstance(actual, Decimal):
            return MatchResult.from_bool(actual.is_infinite())
        # int has no infinity
        if not isinstance(actual, SupportsFloat) or isinstance(actual, int):
            return MatchResult.NO_MATCH
        try:
            as_float = float(actual)
        except OverflowError:
            # Only finite values overflow; infinities convert to inf
            return MatchResult.NO_MATCH
        return MatchResult.from_bool(math.isinf(as_float))

    def describe(self, result: MatchResult) -> Description:
        return Description.of("is Infinite" if result.is_match() else "isn't Infinite")


def eq(expected: Any) -> EqMatcher:
    """Match a value equal to expected."""
    return EqMatcher(expected)


def anything() -> AnythingMatcher:
    """Match any value."""
    return AnythingMatcher()


def is_infinite() -> IsInfiniteMatcher:
    """Match a floating point value which is infinite."""
    return IsInfiniteMatcher()
