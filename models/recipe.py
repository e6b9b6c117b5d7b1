"""
Recipe Model

Recipes are loaded by the recipe browsing layer and only read here.
"""

from dataclasses import dataclass, field
from typing import Optional

from .ingredient import Ingredient


@dataclass(frozen=True)
class Recipe:
    """Recipe with a serving count and its ingredient list."""
    id: Optional[str]
    name: str = ''
    servings: int = 4
    ingredients: tuple = field(default_factory=tuple)  # tuple[Ingredient]

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'servings': self.servings,
            'ingredients': [ing.to_dict() for ing in self.ingredients],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get('id'),
            name=data.get('name') or '',
            servings=data.get('servings', 4),
            ingredients=tuple(Ingredient.from_dict(ing) for ing in data.get('ingredients') or ()),
        )
