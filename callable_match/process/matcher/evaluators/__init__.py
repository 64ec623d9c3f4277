# Path: callable_match/process/matcher/evaluators/__init__.py
"""
Matchers

Each matcher tests one property of a callable member and returns a
MatchResult carrying the verdict and both failure messages.

Matchers:
- VisibilityMatcher: Visibility equality
- TraitMatcher: Final, open, abstract, suspendable flags
- ParameterTypeMatcher: Declared parameter types
- ParameterNameMatcher: Declared parameter names
"""

from .base_evaluator import Matcher
from .visibility_evaluator import VisibilityMatcher, have_callable_visibility
from .trait_evaluator import (
    TraitMatcher,
    be_final,
    be_open,
    be_abstract,
    be_suspendable,
)
from .parameter_evaluator import (
    ParameterListMatcher,
    ParameterTypeMatcher,
    ParameterNameMatcher,
    accept_parameters_of_type,
    have_parameters_with_name,
)

__all__ = [
    'Matcher',
    'VisibilityMatcher',
    'have_callable_visibility',
    'TraitMatcher',
    'be_final',
    'be_open',
    'be_abstract',
    'be_suspendable',
    'ParameterListMatcher',
    'ParameterTypeMatcher',
    'ParameterNameMatcher',
    'accept_parameters_of_type',
    'have_parameters_with_name',
]
