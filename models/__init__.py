"""
Models Package

Exports the plain data models used by the services.
"""

from .ingredient import Ingredient
from .recipe import Recipe
from .shopping import GroceryListItem, GroceryList, grocery_item_key
from .mealplan import MealPlan

__all__ = [
    'Ingredient',
    'Recipe',
    'GroceryListItem',
    'GroceryList',
    'grocery_item_key',
    'MealPlan',
]
