"""Container matchers.

Built on the support layer:
- elements_are: ordered, positional (paired sequence iterator)
- unordered_elements_are / contains_each / is_contained_in: unordered
  (match matrix, one policy each)
- container_eq: equality explained as missing/unexpected elements
  (frequency counter)
- sequence_eq: equality explained as a minimal diff (edit-distance engine)

Capability: actual must be a Collection (sized and re-iterable). One-shot
iterators are rejected with NO_MATCH since matching them would consume them.
"""

from collections.abc import Collection, Mapping, Set
from typing import Any, Iterable, Sequence

from matchkit.config.schema import DiffConfig
from matchkit.description import Description
from matchkit.logic.matcher import Matcher, MatchPolicy, MatchResult
from matchkit.logic.support import (
    ABSENT,
    MatchMatrix,
    edit_script,
    multiset_difference,
    render_expected_item,
    summarize_edit_script,
    summarize_unmatched,
    zip_sequences,
)
from matchkit.serializer.canonical import debug_repr

NOT_A_COLLECTION = "which isn't a collection"


def _as_list(actual: Any) -> list | None:
    if not isinstance(actual, Collection):
        return None
    return list(actual)


def _enumerated(matchers: Sequence[Matcher]) -> Description:
    return Description.collect(
        str(matcher.describe(MatchResult.MATCH)) for matcher in matchers
    ).enumerate()


# =============================================================================
# Ordered
# =============================================================================


class ElementsAreMatcher(Matcher[Collection]):
    """Matches a collection whose i-th element is matched by the i-th matcher."""

    def __init__(self, matchers: Sequence[Matcher]):
        self.elements = tuple(matchers)

    def matches(self, actual: Collection) -> MatchResult:
        items = _as_list(actual)
        if items is None or len(items) != len(self.elements):
            return MatchResult.NO_MATCH
        return MatchResult.from_bool(
            all(m.matches(item).is_match() for item, m in zip(items, self.elements))
        )

    def explain_match(self, actual: Collection) -> Description:
        items = _as_list(actual)
        if items is None:
            return Description.of(NOT_A_COLLECTION)

        mismatches: list[str] = []
        for index, item, matcher in zip_sequences(items, self.elements):
            if matcher is ABSENT:
                mismatches.append(f"element #{index} is {debug_repr(item)}, which is unexpected")
            elif item is ABSENT:
                mismatches.append(
                    f"element #{index} is absent, but expected an element which "
                    f"{matcher.describe(MatchResult.MATCH)}"
                )
            elif matcher.matches(item).is_no_match():
                mismatches.append(
                    f"element #{index} is {debug_repr(item)}, {matcher.explain_match(item)}"
                )

        if not mismatches:
            return Description.of("whose elements all match")
        if len(mismatches) == 1:
            return Description.of(f"where {mismatches[0]}")
        return Description().text("where:").nested(Description.collect(mismatches).bullet_list())

    def describe(self, result: MatchResult) -> Description:
        head = "has elements:" if result.is_match() else "doesn't have elements:"
        return Description().text(head).nested(_enumerated(self.elements))


# =============================================================================
# Unordered
# =============================================================================


_UNORDERED_PHRASES: dict[MatchPolicy, tuple[str, str]] = {
    MatchPolicy.EXACT: (
        "contains elements matching in any order:",
        "doesn't contain elements matching in any order:",
    ),
    MatchPolicy.COVERING_SUBSET: (
        "contains a distinct element matching each of:",
        "doesn't contain a distinct element matching each of:",
    ),
    MatchPolicy.COVERING_SUPERSET: (
        "has each element matching a distinct one of:",
        "doesn't have each element matching a distinct one of:",
    ),
}


class UnorderedElementsMatcher(Matcher[Collection]):
    """Matches a collection against matchers in any order, under a policy.

    Each call builds its own MatchMatrix; nothing is cached on the matcher.
    """

    def __init__(self, matchers: Sequence[Matcher], policy: MatchPolicy):
        self.elements = tuple(matchers)
        self.policy = policy

    def matches(self, actual: Collection) -> MatchResult:
        items = _as_list(actual)
        if items is None:
            return MatchResult.NO_MATCH
        matrix = MatchMatrix.generate(items, self.elements)
        return MatchResult.from_bool(matrix.is_match_for(self.policy))

    def explain_match(self, actual: Collection) -> Description:
        items = _as_list(actual)
        if items is None:
            return Description.of(NOT_A_COLLECTION)

        matrix = MatchMatrix.generate(items, self.elements)
        assignment = matrix.find_best_match()
        if assignment.satisfies(self.policy):
            return Description.of("whose elements all match")
        return summarize_unmatched(matrix, assignment, items, self.elements, self.policy)

    def describe(self, result: MatchResult) -> Description:
        matched, unmatched = _UNORDERED_PHRASES[self.policy]
        head = matched if result.is_match() else unmatched
        return Description().text(head).nested(_enumerated(self.elements))


# =============================================================================
# Equality with explanations
# =============================================================================


def _missing_and_unexpected(missing: list, unexpected: list) -> str:
    def one_or_many(values: list, single: str, plural: str) -> str:
        if len(values) == 1:
            return f"{single} {debug_repr(values[0])}"
        return f"{plural} {debug_repr(values)}"

    parts: list[str] = []
    if missing:
        parts.append("is missing " + one_or_many(missing, "the element", "the elements"))
    if unexpected:
        parts.append(
            "contains " + one_or_many(unexpected, "the unexpected element", "the unexpected elements")
        )
    return "which " + " and ".join(parts)


def _is_unordered(value: Any) -> bool:
    return isinstance(value, (Set, Mapping))


def _entries(value: Collection) -> list:
    if isinstance(value, Mapping):
        return list(value.items())
    return list(value)


class ContainerEqMatcher(Matcher[Collection]):
    """Matches a collection equal to expected.

    Sets and mappings compare with their own ==, so iteration order never
    matters for them; other collections compare element by element, in
    order. Mismatches are explained as missing and unexpected elements,
    counted with multiplicity (mapping entries as (key, value) pairs).
    """

    def __init__(self, expected: Iterable):
        self.expected = expected if isinstance(expected, Collection) else list(expected)

    def matches(self, actual: Collection) -> MatchResult:
        if not isinstance(actual, Collection):
            return MatchResult.NO_MATCH
        if _is_unordered(actual) or _is_unordered(self.expected):
            return MatchResult.from_bool(actual == self.expected)
        return MatchResult.from_bool(list(actual) == list(self.expected))

    def explain_match(self, actual: Collection) -> Description:
        if not isinstance(actual, Collection):
            return Description.of(NOT_A_COLLECTION)

        if self.matches(actual).is_match():
            return Description.of("which contains all the elements")

        items = _entries(actual)
        expected = _entries(self.expected)
        missing = multiset_difference(expected, items)
        unexpected = multiset_difference(items, expected)
        if missing or unexpected:
            return Description.of(_missing_and_unexpected(missing, unexpected))
        if _is_unordered(actual) or _is_unordered(self.expected):
            return Description.of(
                "which contains all the elements, but isn't the same kind of container"
            )
        return Description.of("which contains all the elements in a different order")

    def describe(self, result: MatchResult) -> Description:
        verb = "is equal to" if result.is_match() else "isn't equal to"
        return Description.of(f"{verb} {debug_repr(self.expected)}")


def _item_matches(actual_item: Any, expected_item: Any) -> bool:
    if isinstance(expected_item, Matcher):
        return expected_item.matches(actual_item).is_match()
    return actual_item == expected_item


class SequenceEqMatcher(Matcher[Collection]):
    """Matches a collection equal to expected, in order.

    Items of expected that are matchers are applied as matchers. On
    mismatch the explanation is a minimal edit-script diff.
    """

    def __init__(self, expected: Iterable, config: DiffConfig | None = None):
        self.expected = expected if isinstance(expected, (list, tuple)) else list(expected)
        self.config = config or DiffConfig()

    def matches(self, actual: Collection) -> MatchResult:
        items = _as_list(actual)
        if items is None or len(items) != len(self.expected):
            return MatchResult.NO_MATCH
        return MatchResult.from_bool(
            all(_item_matches(a, e) for a, e in zip(items, self.expected))
        )

    def explain_match(self, actual: Collection) -> Description:
        items = _as_list(actual)
        if items is None:
            return Description.of(NOT_A_COLLECTION)
        script = edit_script(items, self.expected, _item_matches)
        return summarize_edit_script(script, items, self.expected, self.config)

    def describe(self, result: MatchResult) -> Description:
        if not any(isinstance(item, Matcher) for item in self.expected):
            verb = "is equal to" if result.is_match() else "isn't equal to"
            return Description.of(f"{verb} {debug_repr(self.expected)}")

        head = (
            "is a sequence whose elements are, in order:"
            if result.is_match()
            else "isn't a sequence whose elements are, in order:"
        )
        return Description().text(head).nested(
            Description.collect(render_expected_item(item) for item in self.expected).enumerate()
        )


# =============================================================================
# Factories
# =============================================================================


def elements_are(*matchers: Matcher) -> ElementsAreMatcher:
    """Match a collection element by element, in order.

    Example:
        >>> elements_are(eq(1), eq(2)).matches([1, 2])
        <MatchResult.MATCH: 'match'>
    """
    return ElementsAreMatcher(matchers)


def unordered_elements_are(*matchers: Matcher) -> UnorderedElementsMatcher:
    """Match a collection with one distinct element per matcher, nothing more."""
    return UnorderedElementsMatcher(matchers, MatchPolicy.EXACT)


def contains_each(*matchers: Matcher) -> UnorderedElementsMatcher:
    """Match a collection holding a distinct element for every matcher."""
    return UnorderedElementsMatcher(matchers, MatchPolicy.COVERING_SUBSET)


def is_contained_in(*matchers: Matcher) -> UnorderedElementsMatcher:
    """Match a collection whose every element matches a distinct matcher."""
    return UnorderedElementsMatcher(matchers, MatchPolicy.COVERING_SUPERSET)


def container_eq(expected: Iterable) -> ContainerEqMatcher:
    """Match a collection equal to expected.

    Example:
        >>> str(container_eq([]).explain_match([1]))
        'which contains the unexpected element 1'
    """
    return ContainerEqMatcher(expected)


def sequence_eq(expected: Iterable, config: DiffConfig | None = None) -> SequenceEqMatcher:
    """Match a collection equal to expected in order, explained as a diff."""
    return SequenceEqMatcher(expected, config)
