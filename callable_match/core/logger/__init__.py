# Path: callable_match/core/logger/__init__.py
"""
callable_match Logger Package

IPO-aware logging for the matcher library.

Provides separate log streams for:
- INPUT layer (reflection loaders)
- PROCESS layer (matchers)
- OUTPUT layer (assertions)
"""

from .ipo_logging import (
    setup_ipo_logging,
    setup_from_config,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'setup_from_config',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
