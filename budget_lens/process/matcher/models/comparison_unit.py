# Path: budget_lens/process/matcher/models/comparison_unit.py
"""
Comparison Unit Model

A real-world thing with a price tag ("teacher salaries", "used cars")
that a dollar amount can be expressed in.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CostPeriod(str, Enum):
    """What one unit of cost covers."""
    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    UNIT = "unit"


class UnitCategory(str, Enum):
    """Known unit categories. Data files may carry others; they are kept verbatim."""
    EDUCATION = "education"
    ENVIRONMENT = "environment"
    FOOD = "food"
    PUBLIC_SERVICES = "public-services"
    TRANSPORTATION = "transportation"
    VETERANS = "veterans"
    HEALTHCARE = "healthcare"
    HOUSING = "housing"
    INFRASTRUCTURE = "infrastructure"
    EVERYDAY = "everyday"
    VEHICLES = "vehicles"
    BUILDINGS = "buildings"
    ENTERTAINMENT = "entertainment"
    PRODUCTS = "products"
    SALARY = "salary"
    INCOME = "income"
    GENERAL = "general"
    MISC = "misc"

    @classmethod
    def is_known(cls, value: Optional[str]) -> bool:
        """Check if a category string is one of the known values."""
        return isinstance(value, str) and value in {member.value for member in cls}


@dataclass(frozen=True)
class ComparisonUnit:
    """
    A unit to express dollar amounts in.

    Attributes:
        id: Unique identifier
        name: Plural display name
        name_singular: Singular display name
        category: Category tag (see UnitCategory)
        cost_per_unit: Dollar cost of one unit; zero, negative or
                       missing makes the unit unusable for matching
        source: Citation for the cost figure
        source_url: Link to the source
        period: Span the cost covers (see CostPeriod), optional
        icon: Icon name or emoji
        description: Short description
    """
    id: str
    name: str
    name_singular: str
    category: str = UnitCategory.MISC.value
    cost_per_unit: Optional[float] = None
    source: Optional[str] = None
    source_url: Optional[str] = None
    period: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        """Check if the unit has a positive, finite cost."""
        cost = self.cost_per_unit
        return cost is not None and math.isfinite(cost) and cost > 0

    def display_name(self, count: float) -> str:
        """Singular name for exactly one unit, plural otherwise."""
        return self.name_singular if count == 1 else self.name

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase dictionary used by the data files."""
        return {
            'id': self.id,
            'name': self.name,
            'nameSingular': self.name_singular,
            'category': self.category,
            'costPerUnit': self.cost_per_unit,
            'source': self.source,
            'sourceUrl': self.source_url,
            'period': self.period,
            'icon': self.icon,
            'description': self.description,
        }


__all__ = ['ComparisonUnit', 'UnitCategory', 'CostPeriod']
