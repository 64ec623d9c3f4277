# Path: callable_match/config_loader.py
"""
Configuration Loader for callable_match

Loads configuration from .env file and environment variables.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths, NO magic numbers.
All configuration comes from environment variables prefixed CALLABLE_MATCH_.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from .constants import DEFAULT_RECEIVER_NAMES


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_ENVIRONMENT: str = 'development'

ENV_PREFIX: str = 'CALLABLE_MATCH_'


class ConfigLoader:
    """
    Singleton configuration loader for callable_match.

    Loads configuration from environment variables with type
    conversion and sensible defaults. Nothing is required, the
    library works with an empty environment.

    Example:
        config = ConfigLoader()
        log_dir = config.get('log_dir')  # Returns Path object or None
        receivers = config.get('receiver_names')  # Returns tuple of str
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        and reads all configuration on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # callable_match/config_loader.py -> .env is in same directory
        env_path = Path(__file__).resolve().parent / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT & DEBUG
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', DEFAULT_ENVIRONMENT),
            'debug': self._get_bool('DEBUG', False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_log_level('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', False),

            # ================================================================
            # REFLECTION CONFIGURATION
            # ================================================================
            'infer_internal_visibility': self._get_bool(
                'INFER_INTERNAL_VISIBILITY', True
            ),
            'receiver_names': self._get_list(
                'RECEIVER_NAMES', DEFAULT_RECEIVER_NAMES
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name without prefix
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None or value == '':
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX}{key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def _get_list(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        """Get comma separated environment variable as a tuple."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(',') if item.strip())
        return items or default

    def _get_log_level(self, key: str, default: str) -> str:
        """
        Get logging level name, upper-cased.

        Not validated here: only setup_from_config() uses it, so a bad
        value must not break reflection.
        """
        return self._get_env(key, default).strip().upper()

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"environment={self._config.get('environment')}, "
            f"log_level={self._config.get('log_level')})"
        )


__all__ = ['ConfigLoader']
