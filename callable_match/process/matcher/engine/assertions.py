# Path: callable_match/process/matcher/engine/assertions.py
"""
Assertion Engine

Applies a matcher to a value and raises when the verdict disagrees with
the caller's expectation. This is the only place failures are raised:
a matcher returning passed=False is a verdict, not an error.
"""

from typing import Any

# Import IPO logging (OUTPUT layer for assertion reporting)
from ....core.logger.ipo_logging import get_output_logger

from ..evaluators.base_evaluator import Matcher
from ..models.match_result import MatchResult


logger = get_output_logger('assertions')


class MatcherAssertionError(AssertionError):
    """
    Raised when a matcher assertion fails.

    Subclasses AssertionError so test runners report it as an ordinary
    assertion failure.

    Attributes:
        result: The MatchResult that caused the failure
        negated: True if raised by a "should not" assertion
    """

    def __init__(self, result: MatchResult, negated: bool = False):
        self.result = result
        self.negated = negated
        super().__init__(result.message_for(negated))


def should(value: Any, matcher: Matcher) -> MatchResult:
    """
    Assert that value satisfies matcher.

    Args:
        value: CallableDescriptor or live callable member
        matcher: Matcher to apply

    Returns:
        The passing MatchResult

    Raises:
        MatcherAssertionError: With the failure message if the verdict failed
    """
    result = matcher.test(value)
    if not result.passed:
        logger.info(result.failure_message)
        raise MatcherAssertionError(result)
    return result


def should_not(value: Any, matcher: Matcher) -> MatchResult:
    """
    Assert that value does not satisfy matcher.

    Args:
        value: CallableDescriptor or live callable member
        matcher: Matcher to apply

    Returns:
        The failing MatchResult

    Raises:
        MatcherAssertionError: With the negated message if the verdict passed
    """
    result = matcher.test(value)
    if result.passed:
        logger.info(result.negated_failure_message)
        raise MatcherAssertionError(result, negated=True)
    return result


# Plain-function names for call sites that prefer them
assert_that = should
assert_not = should_not


__all__ = [
    'MatcherAssertionError',
    'should',
    'should_not',
    'assert_that',
    'assert_not',
]
