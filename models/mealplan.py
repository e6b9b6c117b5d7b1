"""
Meal Plan Model

Recipes placed on the days of a weekly plan.
"""

from dataclasses import dataclass, field

from .recipe import Recipe


@dataclass
class MealPlan:
    """Days of the week mapped to the recipes planned for them (day -> [Recipe])."""
    days: int = 7
    recipes: dict = field(default_factory=dict)

    def add_recipe(self, day, recipe):
        self.recipes[day] = [*self.recipes.get(day, []), recipe]

    def remove_recipe(self, day, recipe_id):
        self.recipes[day] = [r for r in self.recipes.get(day, []) if r.id != recipe_id]

    def clear(self):
        self.recipes = {}

    def all_recipes(self):
        """Flatten the plan into one recipe list, in day order."""
        return [recipe for day in sorted(self.recipes) for recipe in self.recipes[day]]

    def to_dict(self):
        return {
            'days': self.days,
            'recipes': {
                str(day): [r.to_dict() for r in recipes]
                for day, recipes in self.recipes.items()
            },
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            days=data.get('days', 7),
            recipes={
                int(day): [Recipe.from_dict(r) for r in recipes]
                for day, recipes in (data.get('recipes') or {}).items()
            },
        )
