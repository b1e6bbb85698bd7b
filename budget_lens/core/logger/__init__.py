# Path: budget_lens/core/logger/__init__.py
"""
Budget Lens Logger Package

Layer-aware logging for the budget dashboard core.

Provides separate log streams for:
- INPUT layer (loaders, command-line arguments)
- PROCESS layer (hierarchy store, keyboard navigation, matching engine)
- OUTPUT layer (formatters, rendering)
"""

from .layered_logging import (
    LayerFilter,
    setup_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'LayerFilter',
    'setup_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
