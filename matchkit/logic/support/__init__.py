"""Algorithms shared by the container matchers.

Tests normally do not need anything from this module; it is useful for
writing custom matchers.
"""

from matchkit.logic.support.zipped import ABSENT, ZippedIterator, zip_sequences
from matchkit.logic.support.frequency import (
    ElementCount,
    count_elements,
    count_of,
    multiset_difference,
)
from matchkit.logic.support.match_matrix import Assignment, MatchMatrix
from matchkit.logic.support.edit_distance import (
    Edit,
    EditOp,
    EditScript,
    edit_distance,
    edit_script,
)
from matchkit.logic.support.summarize_diff import (
    render_expected_item,
    summarize_edit_script,
    summarize_unmatched,
)

__all__ = [
    # Paired iteration
    "ABSENT",
    "ZippedIterator",
    "zip_sequences",
    # Frequency counting
    "ElementCount",
    "count_elements",
    "count_of",
    "multiset_difference",
    # Match matrix
    "Assignment",
    "MatchMatrix",
    # Edit distance
    "Edit",
    "EditOp",
    "EditScript",
    "edit_distance",
    "edit_script",
    # Summaries
    "render_expected_item",
    "summarize_edit_script",
    "summarize_unmatched",
]
