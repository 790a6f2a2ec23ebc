"""Combinators: matchers built by wrapping another matcher.

- not_(inner): flips the verdict
- ok(inner): looks inside a Success, rejects a Failure
- points_to(inner): looks through an owner (Box, Shared, weakref.ref)

None of them re-implements matching logic; they only adapt the actual
value and the wording.
"""

from typing import Any

from matchkit.description import Description
from matchkit.dto.values import Failure, Success, deref, is_dereferenceable
from matchkit.logic.matcher import Matcher, MatchResult


class NotMatcher(Matcher[Any]):
    """Negation of an inner matcher.

    describe(MATCH) of the negation is describe(NO_MATCH) of the inner
    matcher and vice versa, so not_(not_(m)) behaves exactly like m.
    """

    def __init__(self, inner: Matcher):
        self.inner = inner

    def matches(self, actual: Any) -> MatchResult:
        return self.inner.matches(actual).negate()

    def explain_match(self, actual: Any) -> Description:
        return self.inner.explain_match(actual)

    def describe(self, result: MatchResult) -> Description:
        return self.inner.describe(result.negate())


class OkMatcher(Matcher[Any]):
    """Matches a Success whose value is matched by inner.

    A Failure, or any value that isn't a Success, never matches.
    """

    def __init__(self, inner: Matcher):
        self.inner = inner

    def matches(self, actual: Any) -> MatchResult:
        if not isinstance(actual, Success):
            return MatchResult.NO_MATCH
        return self.inner.matches(actual.value)

    def explain_match(self, actual: Any) -> Description:
        if isinstance(actual, Success):
            return Description().text("which is a success").nested(
                self.inner.explain_match(actual.value)
            )
        if isinstance(actual, Failure):
            return Description.of("which is an error")
        return Description.of("which is neither a success nor an error")

    def describe(self, result: MatchResult) -> Description:
        if result.is_match():
            return Description.of(
                f"is a success containing a value, which {self.inner.describe(MatchResult.MATCH)}"
            )
        return Description.of(
            "is an error or a success containing a value, "
            f"which {self.inner.describe(MatchResult.NO_MATCH)}"
        )


class PointsToMatcher(Matcher[Any]):
    """Applies inner to the value an owner points to.

    Pure forwarding: all three operations go to inner unchanged. A value
    that owns nothing is a NO_MATCH.
    """

    def __init__(self, inner: Matcher):
        self.inner = inner

    def matches(self, actual: Any) -> MatchResult:
        if not is_dereferenceable(actual):
            return MatchResult.NO_MATCH
        return self.inner.matches(deref(actual))

    def explain_match(self, actual: Any) -> Description:
        if not is_dereferenceable(actual):
            return Description.of("which doesn't point to a value")
        return self.inner.explain_match(deref(actual))

    def describe(self, result: MatchResult) -> Description:
        return self.inner.describe(result)


def not_(inner: Matcher) -> NotMatcher:
    """Match values that inner doesn't match.

    Example:
        >>> not_(eq(1)).matches(2)
        <MatchResult.MATCH: 'match'>
    """
    return NotMatcher(inner)


def ok(inner: Matcher) -> OkMatcher:
    """Match a Success containing a value matched by inner.

    Example:
        >>> ok(eq(1)).matches(Success(1))
        <MatchResult.MATCH: 'match'>
        >>> ok(eq(1)).matches(Failure(1))
        <MatchResult.NO_MATCH: 'no_match'>
    """
    return OkMatcher(inner)


def points_to(inner: Matcher) -> PointsToMatcher:
    """Match an owner (Box, Shared, weakref.ref) whose value inner matches.

    Example:
        >>> points_to(eq(123)).matches(Box(123))
        <MatchResult.MATCH: 'match'>
    """
    return PointsToMatcher(inner)
