"""Matcher contract.

Every matcher implements three pure operations:

- matches(actual) -> MatchResult
- explain_match(actual) -> Description
- describe(result) -> Description

Usage:
    from matchkit.description import Description
    from matchkit.logic.matcher import Matcher, MatchResult

    class IsEven(Matcher[int]):
        def matches(self, actual):
            return MatchResult.from_bool(actual % 2 == 0)

        def describe(self, result):
            return Description.of("is even" if result.is_match() else "is odd")
"""

from matchkit.logic.matcher.types import MatchPolicy, MatchResult
from matchkit.logic.matcher.matcher import Matcher

__all__ = [
    # Types
    "MatchPolicy",
    "MatchResult",
    # Interface
    "Matcher",
]
