"""Diff summarizer.

Turns edit scripts and match-matrix failures into Descriptions.

Edit scripts render one line per edit:

    1                    (copy)
    unexpected 5         (delete)
    missing 3            (insert)
    found 4, expected 2  (substitute)

Match-matrix failures render the unsatisfied matchers and the unmatched
actual elements of the maximum matching. When no element satisfies any
matcher at all, the explanation collapses to the short
"which contains the unexpected element X" form.
"""

from typing import Any, Sequence

from matchkit.config.schema import DiffConfig
from matchkit.description import Description
from matchkit.logic.matcher import Matcher, MatchPolicy, MatchResult
from matchkit.logic.support.edit_distance import EditOp, EditScript
from matchkit.logic.support.match_matrix import Assignment, MatchMatrix
from matchkit.serializer.canonical import debug_repr


def render_expected_item(item: Any) -> str:
    """Render an expected item, which may be a plain value or a matcher."""
    if isinstance(item, Matcher):
        return f"an element which {item.describe(MatchResult.MATCH)}"
    return debug_repr(item)


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


# =============================================================================
# Edit scripts
# =============================================================================


def _edit_lines(script: EditScript, actual: Sequence, expected: Sequence) -> list[str]:
    lines: list[str] = []
    for edit in script:
        if edit.op is EditOp.COPY:
            lines.append(debug_repr(actual[edit.actual_index]))
        elif edit.op is EditOp.DELETE:
            lines.append(f"unexpected {debug_repr(actual[edit.actual_index])}")
        elif edit.op is EditOp.INSERT:
            lines.append(f"missing {render_expected_item(expected[edit.expected_index])}")
        else:
            lines.append(
                f"found {debug_repr(actual[edit.actual_index])}, "
                f"expected {render_expected_item(expected[edit.expected_index])}"
            )
    return lines


def _collapse_common(script: EditScript, lines: list[str], context_lines: int) -> list[str]:
    """Replace copies far from every change with an omission marker."""
    changes = [k for k, edit in enumerate(script) if edit.op is not EditOp.COPY]
    if not changes:
        return lines

    keep = [False] * len(lines)
    for k in changes:
        for near in range(max(k - context_lines, 0), min(k + context_lines + 1, len(lines))):
            keep[near] = True

    collapsed: list[str] = []
    omitted = 0
    for line, kept in zip(lines, keep):
        if kept:
            if omitted:
                collapsed.append(f"<---- {_plural(omitted, 'common element')} omitted ---->")
                omitted = 0
            collapsed.append(line)
        else:
            omitted += 1
    if omitted:
        collapsed.append(f"<---- {_plural(omitted, 'common element')} omitted ---->")
    return collapsed


def summarize_edit_script(
    script: EditScript,
    actual: Sequence,
    expected: Sequence,
    config: DiffConfig | None = None,
) -> Description:
    """Render an edit script as an explanation.

    Args:
        script: Script computed from actual to expected
        actual: Actual sequence
        expected: Expected sequence (values or matchers)
        config: Diff rendering settings (defaults if None)

    Returns:
        Description with a header line and one nested line per edit
    """
    config = config or DiffConfig()

    if script.is_identity():
        return Description.of("which is equal to the expected sequence")

    if script.distance > config.max_edit_distance:
        return Description.of(
            f"which differs from the expected sequence by more than "
            f"{_plural(config.max_edit_distance, 'edit')}"
        )

    lines = _collapse_common(script, _edit_lines(script, actual, expected), config.context_lines)
    return (
        Description()
        .text(f"which differs from the expected sequence by {_plural(script.distance, 'edit')}:")
        .nested(Description.collect(lines))
    )


# =============================================================================
# Match-matrix failures
# =============================================================================


def _describe_elements(values: list[Any]) -> str:
    if len(values) == 1:
        return f"the unexpected element {debug_repr(values[0])}"
    return f"the unexpected elements {debug_repr(values)}"


def _collapsed_explanation(
    actual: Sequence,
    matchers: Sequence[Matcher],
    policy: MatchPolicy,
) -> Description:
    """Explanation when no element satisfies any matcher."""
    head: list[str] = []
    missing_list: Description | None = None

    if policy.requires_all_actual and actual:
        head.append(f"contains {_describe_elements(list(actual))}")

    if policy.requires_all_matchers and matchers:
        if len(matchers) == 1:
            head.append(f"is missing an element which {matchers[0].describe(MatchResult.MATCH)}")
        else:
            head.append("is missing elements which:")
            missing_list = Description.collect(
                str(matcher.describe(MatchResult.MATCH)) for matcher in matchers
            ).enumerate()

    explanation = Description.of(f"which {' and '.join(head)}")
    if missing_list is not None:
        explanation = explanation.nested(missing_list)
    return explanation


def summarize_unmatched(
    matrix: MatchMatrix,
    assignment: Assignment,
    actual: Sequence,
    matchers: Sequence[Matcher],
    policy: MatchPolicy,
) -> Description:
    """Render a failed container match.

    Args:
        matrix: The generated match matrix
        assignment: Maximum matching found in matrix
        actual: Actual elements
        matchers: Expected matchers
        policy: Policy that the assignment failed to satisfy

    Returns:
        Description of the unsatisfied matchers and unmatched elements
    """
    if not matrix.has_any_edge():
        return _collapsed_explanation(actual, matchers, policy)

    explanation = Description.of(
        f"which does not have a {policy.label} match with the expected elements"
    )

    unsatisfied = assignment.unsatisfied_matchers() if policy.requires_all_matchers else ()
    if unsatisfied:
        explanation = explanation.nested(
            Description()
            .text("where no element satisfies:")
            .nested(
                Description.collect(
                    f"#{j}: {matchers[j].describe(MatchResult.MATCH)}" for j in unsatisfied
                )
            )
        )

    unmatched = assignment.unmatched_actual() if policy.requires_all_actual else ()
    if unmatched:
        explanation = explanation.nested(
            Description()
            .text("where these elements are unmatched:")
            .nested(Description.collect(f"#{i}: {debug_repr(actual[i])}" for i in unmatched))
        )

    return explanation
