# Path: budget_lens/constants.py
"""
System-Wide Constants for Budget Lens

Display chrome and status markers shared by the command-line
entry point. Domain constants live next to the code that owns
them (process/hierarchy/constants.py, process/matcher/scoring).
"""

from typing import Final


# ==============================================================================
# STATUS MARKERS
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_WARN: Final[str] = '[WARN]'
STATUS_INFO: Final[str] = '[INFO]'


# ==============================================================================
# MENU / REPORT CHROME
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_HEADER: Final[str] = '=' * MENU_WIDTH
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
INDENT: Final[str] = '  '


# ==============================================================================
# EXIT CODES
# ==============================================================================

EXIT_OK: Final[int] = 0
EXIT_DATA_ERROR: Final[int] = 1
EXIT_UNKNOWN_UNIT: Final[int] = 2
