"""Frequency counter based on pairwise equivalence.

Counts occurrences without hashing: two elements fall into the same class
when the equivalence predicate says so. Elements such as dicts and lists
can therefore be counted, and "sameness" can be defined by a matcher.

Cost is O(n * k) comparisons for n elements and k distinct classes,
which is fine for test fixtures.
"""

import operator
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")

Equivalence = Callable[[object, object], bool]


@dataclass(frozen=True)
class ElementCount(Generic[T]):
    """One equivalence class and its size.

    Attributes:
        representative: First element seen in the class
        count: Number of elements in the class
    """

    representative: T
    count: int


def count_elements(
    elements: Iterable[T],
    equivalent: Equivalence = operator.eq,
) -> list[ElementCount[T]]:
    """Count elements per equivalence class.

    Args:
        elements: Elements to count
        equivalent: Predicate deciding whether two elements are the same

    Returns:
        One ElementCount per class, in order of first occurrence
    """
    representatives: list[T] = []
    counts: list[int] = []

    for element in elements:
        for index, representative in enumerate(representatives):
            if equivalent(representative, element):
                counts[index] += 1
                break
        else:
            representatives.append(element)
            counts.append(1)

    return [ElementCount(rep, count) for rep, count in zip(representatives, counts)]


def count_of(
    counts: list[ElementCount[T]],
    element: object,
    equivalent: Equivalence = operator.eq,
) -> int:
    """Look up how often element's class occurs in counts."""
    for entry in counts:
        if equivalent(entry.representative, element):
            return entry.count
    return 0


def multiset_difference(
    left: Iterable[T],
    right: Iterable[object],
    equivalent: Equivalence = operator.eq,
) -> list[T]:
    """Elements of left not accounted for in right, respecting multiplicity.

    Example:
        >>> multiset_difference([1, 1, 2], [1, 3])
        [1, 2]
    """
    left_counts = count_elements(left, equivalent)
    right_counts = count_elements(right, equivalent)

    surplus: list[T] = []
    for entry in left_counts:
        missing = entry.count - count_of(right_counts, entry.representative, equivalent)
        surplus.extend([entry.representative] * max(missing, 0))
    return surplus
