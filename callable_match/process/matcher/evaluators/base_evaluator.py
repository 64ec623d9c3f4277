# Path: callable_match/process/matcher/evaluators/base_evaluator.py
"""
Base Matcher

Abstract base class for all callable matchers.
Defines the interface that all matchers must implement.
"""

from abc import ABC, abstractmethod
from typing import Any

from ....core.logger import get_process_logger
from ..models.callable_descriptor import CallableDescriptor
from ..models.match_result import MatchResult


class Matcher(ABC):
    """
    Abstract base class for callable matchers.

    Each matcher tests one property of a callable member:
    - VisibilityMatcher: Visibility equals an expected value
    - TraitMatcher: A boolean flag (final, open, abstract, suspendable)
    - ParameterTypeMatcher: Declared parameter types accept expected classes
    - ParameterNameMatcher: Declared parameter names equal expected names

    Subclasses must implement matcher_type and evaluate(). Matchers hold
    only their expected values and are safe to reuse and share.

    Example:
        matcher = be_final()
        result = matcher.test(Shape.area)
        print(result.passed, result.failure_message)
    """

    def __init__(self):
        """Initialize matcher."""
        self.logger = get_process_logger(f'matcher.{self.matcher_type}')

    @property
    @abstractmethod
    def matcher_type(self) -> str:
        """Return the type name of this matcher."""
        pass

    @abstractmethod
    def evaluate(self, descriptor: CallableDescriptor) -> MatchResult:
        """
        Evaluate the predicate against a descriptor.

        Args:
            descriptor: Reflection snapshot of the member

        Returns:
            MatchResult with verdict and both failure messages
        """
        pass

    def test(self, value: Any) -> MatchResult:
        """
        Test a descriptor or a live callable.

        Live functions, methods and properties are described on demand.

        Args:
            value: CallableDescriptor or a Python callable member

        Returns:
            MatchResult with verdict and both failure messages
        """
        from ....loaders.callable_reader import as_descriptor

        descriptor = as_descriptor(value)
        result = self.evaluate(descriptor)
        self.logger.debug(
            f"{self.matcher_type} on {descriptor.qualified_name}: "
            f"{'passed' if result.passed else 'failed'}"
        )
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = ['Matcher']
