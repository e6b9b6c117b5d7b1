"""
Ingredient Model

A single ingredient line of a recipe: how much, in which unit, and what it costs.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from constants import DEFAULT_CATEGORY


@dataclass(frozen=True)
class Ingredient:
    """
    Ingredient quantity with its total cost in USD.

    Category is informational only (grocery list grouping); it never affects
    conversion or merge identity.
    """
    name: str
    amount: float
    unit: str
    cost: float = 0.0
    category: Optional[str] = DEFAULT_CATEGORY

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            amount=data['amount'],
            unit=data['unit'],
            cost=data.get('cost') or 0.0,
            category=data.get('category') or DEFAULT_CATEGORY,
        )
