# Path: callable_match/process/matcher/__init__.py
"""
Callable Matchers

Fluent predicates over callable members, built on reflection snapshots.

Core Components:
    - Models: CallableDescriptor, ParameterDescriptor, TypeRef, MatchResult
    - Evaluators: One matcher per predicate (visibility, traits, parameters)
    - Engine: should / should_not assertions

Example:
    from callable_match.process.matcher import should, be_abstract

    should(Shape.area, be_abstract())
"""

from .models import (
    CallableDescriptor,
    ParameterDescriptor,
    TypeRef,
    MatchResult,
)
from .evaluators import (
    Matcher,
    VisibilityMatcher,
    TraitMatcher,
    ParameterTypeMatcher,
    ParameterNameMatcher,
    have_callable_visibility,
    be_final,
    be_open,
    be_abstract,
    be_suspendable,
    accept_parameters_of_type,
    have_parameters_with_name,
)
from .engine import (
    MatcherAssertionError,
    should,
    should_not,
    assert_that,
    assert_not,
)

__all__ = [
    'CallableDescriptor',
    'ParameterDescriptor',
    'TypeRef',
    'MatchResult',
    'Matcher',
    'VisibilityMatcher',
    'TraitMatcher',
    'ParameterTypeMatcher',
    'ParameterNameMatcher',
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
]
