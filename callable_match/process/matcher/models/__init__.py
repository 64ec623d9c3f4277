# Path: callable_match/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the matcher library:
- CallableDescriptor: Reflection snapshot of a callable member
- ParameterDescriptor: One parameter slot of a callable
- TypeRef: Declared type with supertype checks
- MatchResult: Verdict plus positive and negated failure messages
"""

from .type_ref import TypeRef, type_name, NONE_TYPE

from .callable_descriptor import (
    CallableDescriptor,
    ParameterDescriptor,
)

from .match_result import MatchResult

__all__ = [
    # Types
    'TypeRef',
    'type_name',
    'NONE_TYPE',
    # Descriptors
    'CallableDescriptor',
    'ParameterDescriptor',
    # Match Result
    'MatchResult',
]
