# Path: callable_match/core/__init__.py
"""
callable_match Core Package

Core utilities for the matcher library.

Submodules:
    - logger: IPO-aware logging system
"""

from .logger import setup_ipo_logging, setup_from_config

__all__ = [
    'setup_ipo_logging',
    'setup_from_config',
]
