# Path: callable_match/process/matcher/evaluators/parameter_evaluator.py
"""
Parameter Matchers

Evaluate a member's declared parameter list against an expected ordered
list, ignoring the receiver slot.

Rules shared by both matchers:
- The member must have exactly one more slot than expected values
  (slot 0 is the receiver and carries no obligation)
- Slot i must satisfy expected[i - 1] for every i in 1..n
- No expected values means the member takes only its receiver

ParameterTypeMatcher compares declared types (a declared type may be
broader than the expected class, never narrower). ParameterNameMatcher
compares declared names by exact string equality.
"""

from abc import abstractmethod
from typing import Any, Sequence

from .base_evaluator import Matcher
from ..models.callable_descriptor import CallableDescriptor, ParameterDescriptor
from ..models.match_result import MatchResult
from ..models.type_ref import type_name
from ....constants import Messages, PARAMETER_SEPARATOR


class ParameterListMatcher(Matcher):
    """
    Base class for matchers over the declared parameter list.

    Subclasses define how one declared slot is compared to one expected
    value and which message templates are used.
    """

    failure_template: str = ''
    negated_failure_template: str = ''

    def __init__(self, expected: Sequence[Any]):
        """
        Initialize matcher.

        Args:
            expected: Ordered expected values, one per declared parameter
        """
        self.expected = tuple(expected)
        super().__init__()

    @abstractmethod
    def slot_matches(self, parameter: ParameterDescriptor, expected: Any) -> bool:
        """Compare one declared parameter to its expected value."""
        pass

    @abstractmethod
    def describe_expected(self, expected: Any) -> str:
        """Render one expected value for messages."""
        pass

    def parameters_match(self, parameters: Sequence[ParameterDescriptor]) -> bool:
        """
        Check the full parameter list.

        Args:
            parameters: All slots of the member, receiver first

        Returns:
            True if the length rule and every slot comparison hold
        """
        if len(parameters) != len(self.expected) + 1:
            return False

        for parameter, expected in zip(parameters[1:], self.expected):
            if not self.slot_matches(parameter, expected):
                return False
        return True

    def evaluate(self, descriptor: CallableDescriptor) -> MatchResult:
        listed = PARAMETER_SEPARATOR.join(
            self.describe_expected(e) for e in self.expected
        )
        return MatchResult(
            passed=self.parameters_match(descriptor.parameters),
            failure_message=self.failure_template.format(
                member=descriptor, expected=listed
            ),
            negated_failure_message=self.negated_failure_template.format(
                member=descriptor, expected=listed
            ),
        )

    def __repr__(self) -> str:
        listed = PARAMETER_SEPARATOR.join(
            self.describe_expected(e) for e in self.expected
        )
        return f"{self.__class__.__name__}([{listed}])"


class ParameterTypeMatcher(ParameterListMatcher):
    """
    Matches members whose declared parameter types accept the expected classes.

    Example:
        def scale(self, factor: float) -> None: ...

        ParameterTypeMatcher([float]).test(Shape.scale).passed   # True
        ParameterTypeMatcher([object]).test(Shape.scale).passed  # False
    """

    failure_template = Messages.ACCEPT_PARAMETERS
    negated_failure_template = Messages.NOT_ACCEPT_PARAMETERS

    @property
    def matcher_type(self) -> str:
        return "parameter_types"

    def slot_matches(self, parameter: ParameterDescriptor, expected: Any) -> bool:
        return parameter.type.is_supertype_of(expected)

    def describe_expected(self, expected: Any) -> str:
        return type_name(expected)


class ParameterNameMatcher(ParameterListMatcher):
    """
    Matches members whose declared parameter names equal the expected names.

    Example:
        ParameterNameMatcher(['factor']).test(Shape.scale).passed  # True
    """

    failure_template = Messages.PARAMETER_NAMES
    negated_failure_template = Messages.NOT_PARAMETER_NAMES

    @property
    def matcher_type(self) -> str:
        return "parameter_names"

    def slot_matches(self, parameter: ParameterDescriptor, expected: Any) -> bool:
        return parameter.name == expected

    def describe_expected(self, expected: Any) -> str:
        return str(expected)


def accept_parameters_of_type(parameters: Sequence[Any]) -> ParameterTypeMatcher:
    """Matcher for members accepting arguments of the given classes, in order."""
    return ParameterTypeMatcher(parameters)


def have_parameters_with_name(parameters: Sequence[str]) -> ParameterNameMatcher:
    """Matcher for members declaring parameters with the given names, in order."""
    return ParameterNameMatcher(parameters)


__all__ = [
    'ParameterListMatcher',
    'ParameterTypeMatcher',
    'ParameterNameMatcher',
    'accept_parameters_of_type',
    'have_parameters_with_name',
]
