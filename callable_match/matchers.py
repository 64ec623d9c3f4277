# Path: callable_match/matchers.py
"""
Callable Matcher Assertions

One-call assertions combining matcher construction with should /
should_not. Every function accepts a CallableDescriptor or a live
callable member (function, method, property, static or class method).

Example:
    from callable_match.matchers import (
        should_be_abstract,
        should_accept_parameters,
        should_have_visibility,
    )

    should_be_abstract(Shape.area)
    should_have_visibility(Shape._cache_key, Visibility.PROTECTED)
    should_accept_parameters(Shape.scale, [float])
"""

from typing import Any, Callable, Optional, Sequence, Union

from .constants import Visibility
from .loaders import as_descriptor
from .process.matcher.engine import should, should_not
from .process.matcher.evaluators import (
    accept_parameters_of_type,
    be_abstract,
    be_final,
    be_open,
    be_suspendable,
    have_callable_visibility,
    have_parameters_with_name,
)
from .process.matcher.models import MatchResult, ParameterDescriptor

ParameterBlock = Callable[[tuple[ParameterDescriptor, ...]], Any]


# ==============================================================================
# VISIBILITY
# ==============================================================================

def should_have_visibility(member: Any, visibility: Union[Visibility, str]) -> MatchResult:
    return should(member, have_callable_visibility(visibility))


def should_not_have_visibility(member: Any, visibility: Union[Visibility, str]) -> MatchResult:
    return should_not(member, have_callable_visibility(visibility))


# ==============================================================================
# TRAITS
# ==============================================================================

def should_be_final(member: Any) -> MatchResult:
    return should(member, be_final())


def should_not_be_final(member: Any) -> MatchResult:
    return should_not(member, be_final())


def should_be_open(member: Any) -> MatchResult:
    return should(member, be_open())


def should_not_be_open(member: Any) -> MatchResult:
    return should_not(member, be_open())


def should_be_abstract(member: Any) -> MatchResult:
    return should(member, be_abstract())


def should_not_be_abstract(member: Any) -> MatchResult:
    return should_not(member, be_abstract())


def should_be_suspendable(member: Any) -> MatchResult:
    return should(member, be_suspendable())


def should_not_be_suspendable(member: Any) -> MatchResult:
    return should_not(member, be_suspendable())


# ==============================================================================
# PARAMETERS
# ==============================================================================

def should_accept_parameters(
    member: Any,
    parameters: Sequence[Any],
    block: Optional[ParameterBlock] = None
) -> MatchResult:
    """
    Assert the member accepts arguments of the given classes, in order.

    Args:
        member: Descriptor or live callable
        parameters: Expected classes, receiver excluded
        block: Called with all parameter slots (receiver included) once
            the assertion has passed, for further per-parameter checks

    Returns:
        The passing MatchResult

    Example:
        should_accept_parameters(
            Repository.find, [str],
            lambda params: params[1].is_optional or pytest.fail("required"),
        )
    """
    descriptor = as_descriptor(member)
    result = should(descriptor, accept_parameters_of_type(parameters))
    if block is not None:
        block(descriptor.parameters)
    return result


def should_not_accept_parameters(member: Any, parameters: Sequence[Any]) -> MatchResult:
    return should_not(member, accept_parameters_of_type(parameters))


def should_have_parameters_with_name(
    member: Any,
    parameters: Sequence[str],
    block: Optional[ParameterBlock] = None
) -> MatchResult:
    """
    Assert the member declares parameters with the given names, in order.

    Args:
        member: Descriptor or live callable
        parameters: Expected names, receiver excluded
        block: Called with all parameter slots (receiver included) once
            the assertion has passed

    Returns:
        The passing MatchResult
    """
    descriptor = as_descriptor(member)
    result = should(descriptor, have_parameters_with_name(parameters))
    if block is not None:
        block(descriptor.parameters)
    return result


def should_not_have_parameters_with_name(member: Any, parameters: Sequence[str]) -> MatchResult:
    return should_not(member, have_parameters_with_name(parameters))


__all__ = [
    'should_have_visibility',
    'should_not_have_visibility',
    'should_be_final',
    'should_not_be_final',
    'should_be_open',
    'should_not_be_open',
    'should_be_abstract',
    'should_not_be_abstract',
    'should_be_suspendable',
    'should_not_be_suspendable',
    'should_accept_parameters',
    'should_not_accept_parameters',
    'should_have_parameters_with_name',
    'should_not_have_parameters_with_name',
]
