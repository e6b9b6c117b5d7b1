"""
Shopping Models

Contains the GroceryListItem and GroceryList models for the consolidated
shopping list built from a meal plan.
"""

from dataclasses import dataclass, field, asdict
from typing import Optional

from constants import DEFAULT_CATEGORY


def grocery_item_key(name, unit):
    """Merge identity of an ingredient: lowercase name plus the unit as authored."""
    return f"{name.lower()}-{unit}"


@dataclass(frozen=True)
class GroceryListItem:
    """One consolidated line of the grocery list."""
    id: str
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
            id=data.get('id') or grocery_item_key(data['name'], data['unit']),
            name=data['name'],
            amount=data['amount'],
            unit=data['unit'],
            cost=data.get('cost') or 0.0,
            category=data.get('category') or DEFAULT_CATEGORY,
        )


@dataclass
class GroceryList:
    """
    Grocery list items plus the shopper's checked state.

    Items are replaced wholesale on every regeneration, so checked flags
    keyed by item id are reset at the same time.
    """
    items: list = field(default_factory=list)
    checked: dict = field(default_factory=dict)

    @property
    def checked_count(self):
        return sum(1 for value in self.checked.values() if value)

    @property
    def all_checked(self):
        return bool(self.items) and self.checked_count == len(self.items)

    def replace(self, items):
        self.items = list(items)
        self.checked = {}

    def remove(self, item_id):
        self.items = [item for item in self.items if item.id != item_id]
        self.checked.pop(item_id, None)

    def toggle(self, item_id):
        """Flip an item's checked flag; ids not on the list are ignored."""
        if not any(item.id == item_id for item in self.items):
            return
        self.checked[item_id] = not self.checked.get(item_id, False)

    def clear_checked(self):
        self.checked = {}

    def clear(self):
        self.items = []
        self.checked = {}

    def to_dict(self):
        return {
            'items': [item.to_dict() for item in self.items],
            'checked': dict(self.checked),
        }
