"""matchkit: composable matchers with precise failure explanations.

This package provides:
- Matcher contract and verdicts (matchkit/logic/matcher/)
- Container matching algorithms (matchkit/logic/support/)
- Matchers and combinators (matchkit/matchers/)
- Description trees (matchkit/description/)
- Config management (matchkit/config/)
- CLI (matchkit/cli.py)
"""

__version__ = "0.1.0"

from matchkit.assertions import MatchAssertionError, assert_that, render_failure, verify_that
from matchkit.description import Description
from matchkit.dto import Box, Failure, Shared, Success
from matchkit.logic.matcher import Matcher, MatchPolicy, MatchResult
from matchkit.matchers import (
    anything,
    container_eq,
    contains_each,
    elements_are,
    eq,
    is_contained_in,
    is_infinite,
    not_,
    ok,
    points_to,
    sequence_eq,
    unordered_elements_are,
)

__all__ = [
    "__version__",
    # Assertions
    "MatchAssertionError",
    "assert_that",
    "render_failure",
    "verify_that",
    # Core types
    "Description",
    "Matcher",
    "MatchPolicy",
    "MatchResult",
    # Values
    "Box",
    "Failure",
    "Shared",
    "Success",
    # Matchers
    "anything",
    "container_eq",
    "contains_each",
    "elements_are",
    "eq",
    "is_contained_in",
    "is_infinite",
    "not_",
    "ok",
    "points_to",
    "sequence_eq",
    "unordered_elements_are",
]
