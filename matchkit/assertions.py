"""Assertion helpers.

Wraps a verdict and its explanation into the failure envelope:

    Value of: <expression>
    Expected: <describe(MATCH)>
    Actual: <debug rendering>, <explanation>

A multi-line explanation starts on its own line, indented by one level:

    Actual: Success(1),
      which is a success
        which isn't equal to 2
"""

import logging
from typing import Any

from matchkit.logic.matcher import Matcher, MatchResult
from matchkit.serializer.canonical import debug_repr

logger = logging.getLogger(__name__)


class MatchAssertionError(AssertionError):
    """Raised by assert_that when the matcher doesn't match.

    Attributes:
        actual: The value under test
        matcher: The matcher that rejected it
    """

    def __init__(self, message: str, actual: Any, matcher: Matcher):
        super().__init__(message)
        self.actual = actual
        self.matcher = matcher


def render_failure(expression: str, actual: Any, matcher: Matcher) -> str:
    """Render the failure envelope.

    Args:
        expression: Source text of the value under test
        actual: The value under test
        matcher: The matcher applied to it

    Returns:
        Envelope text, without trailing newline
    """
    explanation = matcher.explain_match(actual)
    lines = [
        f"Value of: {expression}",
        f"Expected: {matcher.describe(MatchResult.MATCH)}",
    ]
    if explanation.is_multiline():
        lines.append(f"Actual: {debug_repr(actual)},")
        lines.append(str(explanation.indent()))
    else:
        lines.append(f"Actual: {debug_repr(actual)}, {explanation}")
    return "\n".join(lines)


def verify_that(actual: Any, matcher: Matcher, expression: str | None = None) -> str | None:
    """Check actual against matcher without raising.

    Args:
        actual: The value under test
        matcher: The matcher to apply
        expression: Source text of the value (defaults to its rendering)

    Returns:
        None on match, the failure envelope otherwise
    """
    if matcher.matches(actual).is_match():
        return None

    message = render_failure(expression or debug_repr(actual), actual, matcher)
    logger.debug(f"Match failed for {expression or type(actual).__name__}")
    return message


def assert_that(actual: Any, matcher: Matcher, expression: str | None = None) -> None:
    """Assert that matcher matches actual.

    Raises:
        MatchAssertionError: If it doesn't; the message is the failure envelope
    """
    message = verify_that(actual, matcher, expression)
    if message is not None:
        raise MatchAssertionError(message, actual, matcher)
