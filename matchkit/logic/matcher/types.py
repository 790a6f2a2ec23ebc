"""Type definitions for matchers.

Defines the match verdict and the container matching policies.
"""

from enum import Enum


class MatchResult(Enum):
    """Two-valued verdict of a matcher."""

    MATCH = "match"
    NO_MATCH = "no_match"

    @classmethod
    def from_bool(cls, value: bool) -> "MatchResult":
        return cls.MATCH if value else cls.NO_MATCH

    def is_match(self) -> bool:
        return self is MatchResult.MATCH

    def is_no_match(self) -> bool:
        return self is MatchResult.NO_MATCH

    def negate(self) -> "MatchResult":
        """Return the opposite verdict."""
        return MatchResult.NO_MATCH if self is MatchResult.MATCH else MatchResult.MATCH


class MatchPolicy(Enum):
    """Discipline used when matching a collection against a list of matchers.

    Attributes:
        EXACT: Same size on both sides and a perfect matching
        COVERING_SUBSET: Every matcher consumes a distinct element;
            extra actual elements are allowed
        COVERING_SUPERSET: Every actual element is consumed by a distinct
            matcher; extra matchers are allowed
    """

    EXACT = "exact"
    COVERING_SUBSET = "covering-subset"
    COVERING_SUPERSET = "covering-superset"

    @property
    def label(self) -> str:
        """Relation of the actual collection to the expected one."""
        return _POLICY_LABELS[self]

    @property
    def requires_all_matchers(self) -> bool:
        return self in (MatchPolicy.EXACT, MatchPolicy.COVERING_SUBSET)

    @property
    def requires_all_actual(self) -> bool:
        return self in (MatchPolicy.EXACT, MatchPolicy.COVERING_SUPERSET)


_POLICY_LABELS: dict[MatchPolicy, str] = {
    MatchPolicy.EXACT: "perfect",
    MatchPolicy.COVERING_SUBSET: "superset",
    MatchPolicy.COVERING_SUPERSET: "subset",
}
