# Path: callable_match/process/matcher/models/match_result.py
"""
Match Result Models

Models representing the verdict of a single matcher evaluation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """
    Result of testing a value against a matcher.

    Both messages are always built. The assertion engine decides which
    one to surface: the failure message when a positive assertion fails,
    the negated message when a negated assertion fails.

    Attributes:
        passed: Verdict of the predicate
        failure_message: Shown when "should" fails
        negated_failure_message: Shown when "should not" fails
    """
    passed: bool
    failure_message: str
    negated_failure_message: str

    def message_for(self, negated: bool) -> str:
        """
        Pick the message for an assertion form.

        Args:
            negated: True for "should not" assertions

        Returns:
            The matching failure message
        """
        return self.negated_failure_message if negated else self.failure_message

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'passed': self.passed,
            'failure_message': self.failure_message,
            'negated_failure_message': self.negated_failure_message,
        }


__all__ = ['MatchResult']
