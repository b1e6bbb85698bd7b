# Path: budget_lens/core/logger/layered_logging.py
"""
Layered Logging for Budget Lens

Input-Process-Output separated logging.

When a log directory is configured this module writes:
- input_activity.log (INPUT layer: loaders, CLI arguments)
- process_activity.log (PROCESS layer: store transitions, matching)
- output_activity.log (OUTPUT layer: formatting, rendering)
- full_activity.log (everything combined)

Without a log directory only the console handler is installed.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LAYER_FILES: dict[str, str] = {
    'input': 'input_activity.log',
    'process': 'process_activity.log',
    'output': 'output_activity.log',
}

FILE_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s - %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LayerFilter(logging.Filter):
    """Filter logs by layer prefix."""

    def __init__(self, layer: str):
        """
        Initialize filter for a specific layer.

        Args:
            layer: 'input', 'process', or 'output'
        """
        super().__init__()
        self.layer = layer

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter records by logger name prefix."""
        return record.name == self.layer or record.name.startswith(f'{self.layer}.')


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = True
) -> None:
    """
    Set up layer-aware logging for Budget Lens.

    Args:
        log_dir: Directory for log files, or None for console-only logging
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_logging(
            log_dir=Path('/var/log/budget_lens'),
            log_level='DEBUG',
            console_output=False
        )
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT)

        full_handler = logging.FileHandler(log_dir / 'full_activity.log')
        full_handler.setLevel(logging.DEBUG)
        full_handler.setFormatter(formatter)
        root_logger.addHandler(full_handler)

        for layer, filename in LAYER_FILES.items():
            handler = logging.FileHandler(log_dir / filename)
            handler.setLevel(logging.DEBUG)
            handler.setFormatter(formatter)
            handler.addFilter(LayerFilter(layer))
            root_logger.addHandler(handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Args:
        name: Logger name (e.g., 'budget_data', 'cli')

    Returns:
        Logger named 'input.<name>'
    """
    return logging.getLogger(f'input.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """
    Get logger for PROCESS layer.

    Args:
        name: Logger name (e.g., 'hierarchy.store', 'matcher.engine')

    Returns:
        Logger named 'process.<name>'
    """
    return logging.getLogger(f'process.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """
    Get logger for OUTPUT layer.

    Args:
        name: Logger name (e.g., 'formatters.number')

    Returns:
        Logger named 'output.<name>'
    """
    return logging.getLogger(f'output.{name}')


__all__ = [
    'LayerFilter',
    'setup_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
