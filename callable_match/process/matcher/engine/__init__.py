# Path: callable_match/process/matcher/engine/__init__.py
"""
Assertion Engine

Turns matcher verdicts into assertion failures:
- should / assert_that: fail when the matcher does not pass
- should_not / assert_not: fail when the matcher passes
- MatcherAssertionError: the failure raised by both
"""

from .assertions import (
    MatcherAssertionError,
    should,
    should_not,
    assert_that,
    assert_not,
)

__all__ = [
    'MatcherAssertionError',
    'should',
    'should_not',
    'assert_that',
    'assert_not',
]
