# Path: budget_lens/config_loader.py
"""
Configuration Loader for Budget Lens

Loads configuration from a .env file and BUDGET_LENS_* environment
variables. Singleton pattern ensures consistent configuration across
the command-line entry point and data loaders.

The navigation store and matching engine never read configuration
directly; callers pass plain values into their constructors.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Data Defaults
DEFAULT_DATA_DIR: Path = Path(__file__).resolve().parent / 'data'
DEFAULT_TREE_FILE: str = 'budget_tree.json'
DEFAULT_UNITS_FILE: str = 'comparison_units.json'
DEFAULT_SPENDING_FILE: str = 'spending_items.json'

# Navigation / Matching Defaults
DEFAULT_URL_PATH_PARAM: str = 'path'
DEFAULT_MAX_ALTERNATIVES: int = 3


class ConfigLoader:
    """
    Singleton configuration loader for Budget Lens.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        data_dir = config.get('data_dir')  # Returns Path object
        max_alts = config.get('max_alternatives')  # Returns int
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

        Only runs once due to singleton pattern. Loads the .env file
        sitting next to this module when one exists.
        """
        if ConfigLoader._initialized:
            return

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
            'environment': self._get_env('BUDGET_LENS_ENVIRONMENT', 'development'),
            'debug': self._get_bool('BUDGET_LENS_DEBUG', False),

            # ================================================================
            # DATA FILES (READ-ONLY)
            # ================================================================
            'data_dir': self._get_path('BUDGET_LENS_DATA_DIR') or DEFAULT_DATA_DIR,
            'tree_file': self._get_env('BUDGET_LENS_TREE_FILE', DEFAULT_TREE_FILE),
            'units_file': self._get_env('BUDGET_LENS_UNITS_FILE', DEFAULT_UNITS_FILE),
            'spending_file': self._get_env(
                'BUDGET_LENS_SPENDING_FILE', DEFAULT_SPENDING_FILE
            ),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('BUDGET_LENS_LOG_DIR'),
            'log_level': self._get_env('BUDGET_LENS_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('BUDGET_LENS_LOG_CONSOLE', True),

            # ================================================================
            # NAVIGATION & MATCHING
            # ================================================================
            'url_path_param': self._get_env(
                'BUDGET_LENS_URL_PATH_PARAM', DEFAULT_URL_PATH_PARAM
            ),
            'max_alternatives': self._get_int(
                'BUDGET_LENS_MAX_ALTERNATIVES', DEFAULT_MAX_ALTERNATIVES
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

    def data_file(self, key: str) -> Path:
        """
        Resolve one of the configured data file names against data_dir.

        Args:
            key: 'tree_file', 'units_file' or 'spending_file'

        Returns:
            Absolute path of the data file
        """
        return Path(self._config['data_dir']) / self._config[key]

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key paths."""
        return (
            f"ConfigLoader("
            f"data_dir={self._config.get('data_dir')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
