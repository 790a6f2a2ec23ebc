"""Matchers shipped with matchkit.

Usage:
    from matchkit.matchers import eq, ok, points_to, unordered_elements_are

    ok(eq(1)).matches(Success(1))                       # MATCH
    points_to(eq(123)).matches(Box(123))                # MATCH
    unordered_elements_are(eq(1), eq(2)).matches([2, 1])  # MATCH
"""

from matchkit.matchers.leaf import (
    AnythingMatcher,
    EqMatcher,
    IsInfiniteMatcher,
    anything,
    eq,
    is_infinite,
)
from matchkit.matchers.combinators import (
    NotMatcher,
    OkMatcher,
    PointsToMatcher,
    not_,
    ok,
    points_to,
)
from matchkit.matchers.containers import (
    ContainerEqMatcher,
    ElementsAreMatcher,
    SequenceEqMatcher,
    UnorderedElementsMatcher,
    container_eq,
    contains_each,
    elements_are,
    is_contained_in,
    sequence_eq,
    unordered_elements_are,
)

__all__ = [
    # Leaf
    "AnythingMatcher",
    "EqMatcher",
    "IsInfiniteMatcher",
    "anything",
    "eq",
    "is_infinite",
    # Combinators
    "NotMatcher",
    "OkMatcher",
    "PointsToMatcher",
    "not_",
    "ok",
    "points_to",
    # Containers
    "ContainerEqMatcher",
    "ElementsAreMatcher",
    "SequenceEqMatcher",
    "UnorderedElementsMatcher",
    "container_eq",
    "contains_each",
    "elements_are",
    "is_contained_in",
    "sequence_eq",
    "unordered_elements_are",
]
