"""Match matrix for unordered container matching.

Cell (i, j) of the matrix records whether matcher j matches actual
element i. Every pair is evaluated exactly once, when the matrix is
generated. A maximum bipartite matching is then found by repeated
augmenting-path search (Kuhn's algorithm), started from the smaller side
so the cost stays within O(n * m * min(n, m)).

The verdict and the failure explanation both come from the same
Assignment, so they cannot disagree.
"""

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from matchkit.logic.matcher import Matcher, MatchPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Assignment:
    """Partial injective mapping from actual indices to matcher indices.

    Attributes:
        pairs: (actual_index, matcher_index) pairs, sorted by actual index
        actual_count: Number of actual elements (n)
        matcher_count: Number of matchers (m)
    """

    pairs: tuple[tuple[int, int], ...]
    actual_count: int
    matcher_count: int

    def __post_init__(self):
        """Validate injectivity."""
        actual_side = [a for a, _ in self.pairs]
        matcher_side = [m for _, m in self.pairs]
        if len(set(actual_side)) != len(actual_side) or len(set(matcher_side)) != len(matcher_side):
            raise ValueError(f"Assignment is not injective: {self.pairs}")

    @property
    def size(self) -> int:
        return len(self.pairs)

    def unmatched_actual(self) -> tuple[int, ...]:
        """Actual indices not covered by the assignment."""
        covered = {a for a, _ in self.pairs}
        return tuple(i for i in range(self.actual_count) if i not in covered)

    def unsatisfied_matchers(self) -> tuple[int, ...]:
        """Matcher indices not covered by the assignment."""
        covered = {m for _, m in self.pairs}
        return tuple(j for j in range(self.matcher_count) if j not in covered)

    def satisfies(self, policy: MatchPolicy) -> bool:
        """Check whether this assignment fulfills the policy."""
        if policy.requires_all_matchers and self.unsatisfied_matchers():
            return False
        if policy.requires_all_actual and self.unmatched_actual():
            return False
        return True


@dataclass(frozen=True)
class MatchMatrix:
    """Boolean feasibility grid between actual elements and matchers.

    Attributes:
        cells: n rows (actual elements) of m booleans (matchers)
        matcher_count: Number of matchers, kept separately for n == 0
    """

    cells: tuple[tuple[bool, ...], ...]
    matcher_count: int

    @classmethod
    def generate(cls, actual: Sequence[Any], matchers: Sequence[Matcher]) -> "MatchMatrix":
        """Evaluate every (element, matcher) pair once.

        Args:
            actual: Actual elements
            matchers: Matchers, in expected order

        Returns:
            The populated MatchMatrix
        """
        cells = tuple(
            tuple(matcher.matches(element).is_match() for matcher in matchers)
            for element in actual
        )
        return cls(cells=cells, matcher_count=len(matchers))

    @property
    def actual_count(self) -> int:
        return len(self.cells)

    def is_edge(self, actual_index: int, matcher_index: int) -> bool:
        return self.cells[actual_index][matcher_index]

    def has_any_edge(self) -> bool:
        """True if at least one element satisfies at least one matcher."""
        return any(any(row) for row in self.cells)

    def find_best_match(self) -> Assignment:
        """Compute a maximum matching by augmenting paths.

        Returns:
            Assignment of maximum size; ties are broken towards lower indices
        """
        n, m = self.actual_count, self.matcher_count

        if n <= m:
            owner = self._augment(n, m, self.is_edge)
            pairs = [(a, j) for j, a in enumerate(owner) if a is not None]
        else:
            owner = self._augment(m, n, lambda j, i: self.is_edge(i, j))
            pairs = [(i, j) for i, j in enumerate(owner) if j is not None]

        assignment = Assignment(
            pairs=tuple(sorted(pairs)),
            actual_count=n,
            matcher_count=m,
        )
        logger.debug(f"Match matrix {n}x{m}: maximum matching of size {assignment.size}")
        return assignment

    @staticmethod
    def _augment(left_count, right_count, edge) -> list[int | None]:
        """Kuhn's algorithm from the left side.

        The depth-first search for an augmenting path keeps its own stack,
        so long alternating chains don't hit the recursion limit.
        Candidates are tried in index order.

        Returns:
            owner[r] = left index assigned to right index r, or None
        """
        owner: list[int | None] = [None] * right_count

        for root in range(left_count):
            visited = [False] * right_count
            # stack[k] = [left, next right to try]; path[k] = right tried by stack[k]
            stack = [[root, 0]]
            path: list[int] = []

            while stack:
                frame = stack[-1]
                left = frame[0]
                right = next(
                    (
                        r
                        for r in range(frame[1], right_count)
                        if not visited[r] and edge(left, r)
                    ),
                    None,
                )

                if right is None:
                    stack.pop()
                    if path:
                        path.pop()
                    continue

                visited[right] = True
                frame[1] = right + 1
                path.append(right)

                current = owner[right]
                if current is None:
                    for (assigned_left, _), assigned_right in zip(stack, path):
                        owner[assigned_right] = assigned_left
                    break
                stack.append([current, 0])

        return owner

    def is_match_for(self, policy: MatchPolicy) -> bool:
        """Decide the verdict for a policy from the maximum matching."""
        return self.find_best_match().satisfies(policy)
