# Path: budget_lens/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for Budget Lens

Provides common test fixtures used across all test modules.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from budget_lens.process.hierarchy import BudgetNode, InMemoryUrlState
from budget_lens.process.matcher import ComparisonUnit, SpendingItem, SpendingTier


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'BUDGET_LENS_ENVIRONMENT': 'test',
        'BUDGET_LENS_DEBUG': 'true',
        'BUDGET_LENS_DATA_DIR': str(temp_dir / 'data'),
        'BUDGET_LENS_TREE_FILE': 'tree.json',
        'BUDGET_LENS_UNITS_FILE': 'units.json',
        'BUDGET_LENS_SPENDING_FILE': 'spending.json',
        'BUDGET_LENS_LOG_LEVEL': 'DEBUG',
        'BUDGET_LENS_LOG_CONSOLE': 'false',
        'BUDGET_LENS_URL_PATH_PARAM': 'path',
        'BUDGET_LENS_MAX_ALTERNATIVES': '3',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from budget_lens.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures them."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


# ==============================================================================
# TREE FIXTURES
# ==============================================================================

@pytest.fixture
def sample_tree():
    """
    R (100)
      A (60)
        A1 (40)
      B (40)
    """
    a1 = BudgetNode(id="A1", name="Alpha One", amount=40.0, parent_id="A")
    a = BudgetNode(id="A", name="Alpha", amount=60.0, parent_id="R", children=(a1,))
    b = BudgetNode(id="B", name="Beta", amount=40.0, parent_id="R")
    return BudgetNode(id="R", name="Root", amount=100.0, children=(a, b))


@pytest.fixture
def deep_tree():
    """Federal-style tree three levels deep."""
    f35 = BudgetNode(id="f35", name="F-35 Program", amount=13.2e9, parent_id="weapons")
    carrier = BudgetNode(id="carrier", name="Aircraft Carrier", amount=13e9, parent_id="weapons")
    weapons = BudgetNode(
        id="weapons", name="Weapons Systems", amount=26.2e9, parent_id="dod",
        children=(f35, carrier),
    )
    personnel = BudgetNode(id="personnel", name="Military Personnel", amount=180e9, parent_id="dod")
    dod = BudgetNode(
        id="dod", name="Defense", amount=842e9, parent_id="federal",
        children=(personnel, weapons),
    )
    medicare = BudgetNode(id="medicare", name="Medicare", amount=874e9, parent_id="hhs")
    hhs = BudgetNode(
        id="hhs", name="Health & Human Services", amount=1.8e12, parent_id="federal",
        children=(medicare,),
    )
    va = BudgetNode(id="va", name="Veterans Affairs", amount=323e9, parent_id="federal")
    return BudgetNode(
        id="federal", name="Federal Budget", amount=6.75e12, fiscal_year=2025,
        children=(dod, hhs, va),
    )


@pytest.fixture
def url_state():
    """Empty in-memory page URL."""
    return InMemoryUrlState("https://example.org/budget")


# ==============================================================================
# MATCHER FIXTURES
# ==============================================================================

@pytest.fixture
def carrier_unit():
    return ComparisonUnit(
        id="carrier-unit", name="aircraft carriers", name_singular="aircraft carrier",
        category="infrastructure", cost_per_unit=80_000_000,
    )


@pytest.fixture
def sample_units(carrier_unit):
    """Units across several categories, plus one without a usable cost."""
    return [
        ComparisonUnit(id="teacher-salary", name="teacher salaries",
                       name_singular="teacher salary", category="education",
                       cost_per_unit=68_000),
        ComparisonUnit(id="school-bus", name="school buses", name_singular="school bus",
                       category="education", cost_per_unit=100_000),
        ComparisonUnit(id="used-car", name="used cars", name_singular="used car",
                       category="transportation", cost_per_unit=28_000),
        ComparisonUnit(id="food-bank-meal", name="food bank meals",
                       name_singular="food bank meal", category="food", cost_per_unit=3),
        ComparisonUnit(id="va-healthcare", name="VA healthcare years",
                       name_singular="VA healthcare year", category="veterans",
                       cost_per_unit=15_000),
        carrier_unit,
        ComparisonUnit(id="free-lunch", name="free lunches", name_singular="free lunch",
                       category="food", cost_per_unit=0),
    ]


@pytest.fixture
def sample_spending():
    return [
        SpendingItem(id="dept-defense", name="Defense", amount=842e9,
                     tier=SpendingTier.DEPARTMENT),
        SpendingItem(id="program-f35", name="F-35 Program", amount=13.2e9,
                     tier=SpendingTier.PROGRAM),
        SpendingItem(id="event-wall", name="Border Wall", amount=25e9,
                     tier=SpendingTier.CURRENT_EVENT),
        SpendingItem(id="program-tiny", name="Tiny Grant", amount=50_000,
                     tier=SpendingTier.PROGRAM),
    ]


# ==============================================================================
# DATA FILE FIXTURES
# ==============================================================================

@pytest.fixture
def sample_tree_dict():
    """Raw budget tree in data-file form."""
    return {
        "id": "federal",
        "name": "Federal Budget",
        "amount": 6750000000000,
        "fiscalYear": 2025,
        "children": [
            {
                "id": "dept-defense",
                "name": "Department of Defense",
                "amount": 895000000000,
                "parentId": "federal",
                "children": [
                    {"id": "program-f35", "name": "F-35", "amount": 13200000000},
                ],
            },
            {"id": "dept-va", "name": "Veterans Affairs", "amount": 323000000000},
        ],
    }


@pytest.fixture
def sample_unit_records():
    return [
        {"id": "teacher-salary", "name": "teacher salaries", "nameSingular": "teacher salary",
         "cost": 68000, "category": "education"},
        {"id": "env-solar-panel", "name": "Solar Panel Installations",
         "nameSingular": "Solar Panel Installation", "costPerUnit": 20000,
         "category": "environment", "period": "unit"},
    ]


@pytest.fixture
def sample_spending_records():
    return [
        {"id": "dept-defense", "name": "Department of Defense", "amount": 895000000000,
         "tier": "department", "fiscalYear": 2025},
        {"id": "program-f35", "name": "F-35 Fighter Program", "amount": 13200000000,
         "tier": "program"},
    ]


@pytest.fixture
def data_dir(temp_dir, sample_tree_dict, sample_unit_records, sample_spending_records):
    """Data directory laid out the way mock_env_vars configures it."""
    directory = temp_dir / 'data'
    directory.mkdir()
    (directory / 'tree.json').write_text(json.dumps(sample_tree_dict), encoding='utf-8')
    (directory / 'units.json').write_text(json.dumps(sample_unit_records), encoding='utf-8')
    (directory / 'spending.json').write_text(json.dumps(sample_spending_records), encoding='utf-8')
    return directory
