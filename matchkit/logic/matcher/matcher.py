"""Matcher interface.

Defines the abstract interface that all matcher implementations must follow.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from matchkit.description import Description
from matchkit.logic.matcher.types import MatchResult

T = TypeVar("T")


class Matcher(ABC, Generic[T]):
    """Abstract base class for matchers.

    All matchers must:
    1. Be pure: no side effects, no state carried between calls
    2. Keep explain_match consistent with matches
    3. Describe both verdicts without looking at any actual value

    A matcher may be shared freely between threads; none of the three
    operations mutates it.
    """

    @abstractmethod
    def matches(self, actual: T) -> MatchResult:
        """Decide whether actual satisfies this matcher.

        Args:
            actual: The value under test

        Returns:
            MatchResult.MATCH or MatchResult.NO_MATCH
        """
        pass

    @abstractmethod
    def describe(self, result: MatchResult) -> Description:
        """Describe the condition producing the given verdict.

        Args:
            result: The verdict to describe

        Returns:
            Description such as "is equal to 1" for MATCH
            and "isn't equal to 1" for NO_MATCH
        """
        pass

    def explain_match(self, actual: T) -> Description:
        """Explain why actual does or doesn't match.

        The default phrasing is "which <describe(verdict)>".

        Args:
            actual: The value under test

        Returns:
            Value-specific explanation
        """
        return Description.of(f"which {self.describe(self.matches(actual))}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.describe(MatchResult.MATCH)}>"
