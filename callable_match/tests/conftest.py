# Path: callable_match/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for callable_match

Provides common test fixtures used across all test modules.
"""

import logging
import os
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest

from callable_match.constants import ParameterKind, Visibility
from callable_match.process.matcher.models import (
    CallableDescriptor,
    ParameterDescriptor,
    TypeRef,
)


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'CALLABLE_MATCH_ENVIRONMENT': 'test',
        'CALLABLE_MATCH_DEBUG': 'true',
        'CALLABLE_MATCH_LOG_LEVEL': 'debug',
        'CALLABLE_MATCH_LOG_CONSOLE': 'false',
        'CALLABLE_MATCH_INFER_INTERNAL_VISIBILITY': 'true',
        'CALLABLE_MATCH_RECEIVER_NAMES': 'self, cls, this',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from callable_match.config_loader import ConfigLoader

    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'debug': True,
        'log_dir': None,
        'log_level': 'DEBUG',
        'log_console': False,
        'infer_internal_visibility': True,
        'receiver_names': ('self', 'cls'),
    }.get(key, default)
    return config


# ==============================================================================
# DESCRIPTOR FIXTURES
# ==============================================================================

def build_descriptor(
    parameters=(),
    name='member',
    receiver='self',
    **flags
) -> CallableDescriptor:
    """
    Build a descriptor by hand.

    Args:
        parameters: (name, annotation) pairs for the declared parameters
        name: Member name
        receiver: Receiver name, None for a synthetic slot
        **flags: visibility, is_final, is_open, is_abstract, is_suspend

    Returns:
        CallableDescriptor with the receiver at slot 0
    """
    slots = [ParameterDescriptor(
        index=0,
        name=receiver,
        type=TypeRef.undeclared(),
        kind=ParameterKind.INSTANCE,
    )]
    for index, (param_name, annotation) in enumerate(parameters, start=1):
        slots.append(ParameterDescriptor(
            index=index,
            name=param_name,
            type=TypeRef.of(annotation),
        ))
    return CallableDescriptor(
        name=name,
        qualified_name=f'tests.Sample.{name}',
        parameters=tuple(slots),
        **flags
    )


@pytest.fixture
def make_descriptor():
    """Factory fixture building descriptors by hand."""
    return build_descriptor


@pytest.fixture
def zero_arg_function():
    """Descriptor for a public f() taking nothing but its receiver."""
    return build_descriptor(name='f', receiver=None, visibility=Visibility.PUBLIC)


@pytest.fixture
def int_param_function():
    """Descriptor for g(x: int)."""
    return build_descriptor(parameters=[('x', int)], name='g')


@pytest.fixture
def abstract_open_member():
    """Descriptor flagged both abstract and open."""
    return build_descriptor(name='area', is_abstract=True, is_open=True)


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def capture_logs():
    """Capture library log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    loggers = [logging.getLogger(name) for name in ('input', 'process', 'output')]
    previous_levels = [logger.level for logger in loggers]
    for logger in loggers:
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    yield log_capture

    for logger, level in zip(loggers, previous_levels):
        logger.removeHandler(handler)
        logger.setLevel(level)
