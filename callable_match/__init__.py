# Path: callable_match/__init__.py
"""
callable_match

Fluent assertion helpers for callable members inspected through runtime
reflection: visibility, finality, openness, abstractness, suspendability
and parameter shape.

Layers (IPO pattern):
    - loaders: INPUT, live objects to CallableDescriptor
    - process.matcher: PROCESS, matchers and the assertion engine
    - matchers: one-call should_* / should_not_* assertions

Example:
    from callable_match import should, be_final, describe_member

    should(describe_member(Money, 'amount'), be_final())
"""

from .constants import Visibility, ParameterKind, MemberKind, Trait
from .process.matcher import (
    CallableDescriptor,
    ParameterDescriptor,
    TypeRef,
    MatchResult,
    Matcher,
    have_callable_visibility,
    be_final,
    be_open,
    be_abstract,
    be_suspendable,
    accept_parameters_of_type,
    have_parameters_with_name,
    MatcherAssertionError,
    should,
    should_not,
    assert_that,
    assert_not,
)
from .loaders import CallableReader, describe, describe_member
from .matchers import (
    should_have_visibility,
    should_not_have_visibility,
    should_be_final,
    should_not_be_final,
    should_be_open,
    should_not_be_open,
    should_be_abstract,
    should_not_be_abstract,
    should_be_suspendable,
    should_not_be_suspendable,
    should_accept_parameters,
    should_not_accept_parameters,
    should_have_parameters_with_name,
    should_not_have_parameters_with_name,
)

__version__ = '0.1.0'

__all__ = [
    'Visibility',
    'ParameterKind',
    'MemberKind',
    'Trait',
    'CallableDescriptor',
    'ParameterDescriptor',
    'TypeRef',
    'MatchResult',
    'Matcher',
    'have_callable_visibility',
    'be_final',
    'be_open',
    'be_abstract',
    'be_suspendable',
    'accept_parameters_of_type',
    'have_parameters_with_name',
    'MatcherAssertionError',
    'should',
    'should_not',
    'assert_that',
    'assert_not',
    'CallableReader',
    'describe',
    'describe_member',
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
