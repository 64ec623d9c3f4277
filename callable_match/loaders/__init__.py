# Path: callable_match/loaders/__init__.py
"""
callable_match Loaders Package

Readers turning live Python objects into CallableDescriptor snapshots.
Single entry point for all reflection access across callable_match.

Example:
    from callable_match.loaders import CallableReader, describe_member

    reader = CallableReader(config)
    descriptor = reader.describe(Shape.area)

    # Or with the default configuration
    descriptor = describe_member(Shape, 'area')
"""

from .callable_reader import (
    CallableReader,
    describe,
    describe_member,
    as_descriptor,
)

__all__ = [
    'CallableReader',
    'describe',
    'describe_member',
    'as_descriptor',
]
