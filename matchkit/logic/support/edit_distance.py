"""Edit-distance engine.

Computes a minimal edit script turning the actual sequence into the
expected one, using the Wagner-Fischer dynamic program with unit costs:

    cost[i][j] = min(cost[i-1][j] + 1,           # delete actual[i-1]
                     cost[i][j-1] + 1,           # insert expected[j-1]
                     cost[i-1][j-1] + (0 if same else 1))

The backtrace runs from (len(actual), len(expected)) to (0, 0) and, where
several minimal paths exist, prefers copy, then substitute, then delete,
then insert. The resulting script is therefore stable for identical
inputs, and a substitution always wins over an equal-cost delete+insert.
"""

import logging
import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

Equivalence = Callable[[object, object], bool]


class EditOp(Enum):
    """Kind of edit."""

    COPY = "copy"
    INSERT = "insert"
    DELETE = "delete"
    SUBSTITUTE = "substitute"


@dataclass(frozen=True)
class Edit:
    """One step of an edit script.

    Attributes:
        op: Kind of edit
        actual_index: Index into the actual sequence (None for INSERT)
        expected_index: Index into the expected sequence (None for DELETE)
    """

    op: EditOp
    actual_index: int | None
    expected_index: int | None


@dataclass(frozen=True)
class EditScript:
    """Ordered edits; applying them to actual yields expected."""

    edits: tuple[Edit, ...]

    @property
    def distance(self) -> int:
        """Number of non-copy edits."""
        return sum(1 for edit in self.edits if edit.op is not EditOp.COPY)

    def is_identity(self) -> bool:
        return self.distance == 0

    def __iter__(self):
        return iter(self.edits)

    def __len__(self) -> int:
        return len(self.edits)


def _equivalence_table(
    actual: Sequence, expected: Sequence, equivalent: Equivalence
) -> list[list[bool]]:
    return [[equivalent(a, e) for e in expected] for a in actual]


def _cost_table(same: list[list[bool]], n: int, m: int) -> list[list[int]]:
    cost = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        cost[i][0] = i
    for j in range(m + 1):
        cost[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost[i][j] = min(
                cost[i - 1][j] + 1,
                cost[i][j - 1] + 1,
                cost[i - 1][j - 1] + (0 if same[i - 1][j - 1] else 1),
            )
    return cost


def edit_script(
    actual: Sequence,
    expected: Sequence,
    equivalent: Equivalence = operator.eq,
) -> EditScript:
    """Compute a minimal edit script from actual to expected.

    Args:
        actual: Actual sequence
        expected: Expected sequence
        equivalent: equivalent(actual_item, expected_item); each pair is
            evaluated once

    Returns:
        EditScript whose distance equals the edit distance
    """
    n, m = len(actual), len(expected)
    same = _equivalence_table(actual, expected, equivalent)
    cost = _cost_table(same, n, m)

    edits: list[Edit] = []
    i, j = n, m
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            if same[i - 1][j - 1] and cost[i][j] == cost[i - 1][j - 1]:
                edits.append(Edit(EditOp.COPY, i - 1, j - 1))
                i, j = i - 1, j - 1
                continue
            if cost[i][j] == cost[i - 1][j - 1] + 1:
                edits.append(Edit(EditOp.SUBSTITUTE, i - 1, j - 1))
                i, j = i - 1, j - 1
                continue
        if i > 0 and cost[i][j] == cost[i - 1][j] + 1:
            edits.append(Edit(EditOp.DELETE, i - 1, None))
            i -= 1
        else:
            edits.append(Edit(EditOp.INSERT, None, j - 1))
            j -= 1

    edits.reverse()
    script = EditScript(tuple(edits))
    logger.debug(f"Edit script {n}->{m}: distance {script.distance}")
    return script


def edit_distance(
    actual: Sequence,
    expected: Sequence,
    equivalent: Equivalence = operator.eq,
) -> int:
    """Minimal number of insert/delete/substitute operations."""
    n, m = len(actual), len(expected)
    return _cost_table(_equivalence_table(actual, expected, equivalent), n, m)[n][m]
