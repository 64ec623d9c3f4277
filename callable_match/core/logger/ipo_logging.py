# Path: callable_match/core/logger/ipo_logging.py
"""
IPO-Aware Logging for callable_match

Input-Process-Output separated logging for the matcher library.

This module sets up logging with separate streams for:
- INPUT layer (reflection loaders building descriptors)
- PROCESS layer (matchers evaluating descriptors)
- OUTPUT layer (assertions raising failures)
- Full activity (everything combined)

The library never configures logging on import. Applications and test
suites call setup_ipo_logging() or setup_from_config() when they want
the output.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...constants import LogCategory

LIBRARY_LOGGER_NAMES = tuple(category.value for category in LogCategory)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class IPOFilter(logging.Filter):
    """Filter logs by IPO layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for specific IPO layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name.startswith(self.layer)


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up IPO-aware logging for callable_match.

    When log_dir is given, creates separate log files for:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all activities combined)

    Handlers are attached to the three layer loggers only, so the host
    application's root logger is left alone.

    Args:
        log_dir: Directory for log files, None for no files
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Raises:
        ValueError: If log_level is not a standard logging level

    Example:
        setup_ipo_logging(
            log_dir=Path('/tmp/callable_match/logs'),
            log_level='DEBUG',
            console_output=False
        )
    """
    level_name = log_level.strip().upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {log_level!r}")
    level = getattr(logging, level_name)

    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers: list[logging.Handler] = []

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        handlers.append(full_handler)

        for layer in LIBRARY_LOGGER_NAMES:
            layer_handler = logging.FileHandler(log_dir / f'{layer}_activity.log')
            layer_handler.setLevel(logging.DEBUG)
            layer_handler.setFormatter(formatter)
            layer_handler.addFilter(IPOFilter(layer))
            handlers.append(layer_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        # Simpler format for console
        console_handler.setFormatter(logging.Formatter(
            '[%(levelname)s] %(name)s - %(message)s'
        ))
        handlers.append(console_handler)

    for name in LIBRARY_LOGGER_NAMES:
        layer_logger = logging.getLogger(name)
        layer_logger.setLevel(level)
        for handler in list(layer_logger.handlers):
            layer_logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            layer_logger.addHandler(handler)


def setup_from_config(config=None) -> None:
    """
    Set up logging from ConfigLoader settings.

    Args:
        config: Optional ConfigLoader instance

    Raises:
        ValueError: If CALLABLE_MATCH_LOG_LEVEL is not a standard level
    """
    from ...config_loader import ConfigLoader

    config = config if config else ConfigLoader()
    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', False),
    )


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'callable_reader')

    Returns:
        Logger configured for INPUT layer
    """
    return logging.getLogger(f'{LogCategory.INPUT.value}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer (matcher evaluation).

    Args:
        name: Logger name (e.g., 'matcher.visibility')

    Returns:
        Logger configured for PROCESS layer

    Example:
        logger = get_process_logger('matcher.final')
        logger.debug("Evaluated final flag")
    """
    return logging.getLogger(f'{LogCategory.PROCESS.value}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer (assertions)."""
    return logging.getLogger(f'{LogCategory.OUTPUT.value}.{name}')


__all__ = [
    'setup_ipo_logging',
    'setup_from_config',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
