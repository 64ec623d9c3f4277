# Path: callable_match/process/matcher/evaluators/visibility_evaluator.py
"""
Visibility Matcher

Checks a member's visibility against an expected value. Visibility is a
flat enumerated value: public is not "more visible" than protected as far
as this matcher is concerned, only equality counts.
"""

from typing import Union

from .base_evaluator import Matcher
from ..models.callable_descriptor import CallableDescriptor
from ..models.match_result import MatchResult
from ....constants import Messages, Visibility


class VisibilityMatcher(Matcher):
    """
    Matches members whose visibility equals the expected value.

    Example:
        matcher = VisibilityMatcher(Visibility.PROTECTED)
        matcher.test(Repository._load).passed  # True
    """

    def __init__(self, expected: Union[Visibility, str]):
        """
        Initialize matcher.

        Args:
            expected: Visibility or its string value ('public', 'private', ...)

        Raises:
            ValueError: If expected is not a known visibility
        """
        self.expected = Visibility(expected)
        super().__init__()

    @property
    def matcher_type(self) -> str:
        return "visibility"

    def evaluate(self, descriptor: CallableDescriptor) -> MatchResult:
        expected = self.expected.human_name
        return MatchResult(
            passed=descriptor.visibility == self.expected,
            failure_message=Messages.VISIBILITY.format(
                member=descriptor, expected=expected
            ),
            negated_failure_message=Messages.NOT_VISIBILITY.format(
                member=descriptor, expected=expected
            ),
        )

    def __repr__(self) -> str:
        return f"VisibilityMatcher({self.expected.value!r})"


def have_callable_visibility(expected: Union[Visibility, str]) -> VisibilityMatcher:
    """Matcher for members with exactly the given visibility."""
    return VisibilityMatcher(expected)


__all__ = ['VisibilityMatcher', 'have_callable_visibility']
