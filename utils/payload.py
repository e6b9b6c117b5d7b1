"""
Request Payload Parsing

Turns JSON request bodies into model objects, rejecting malformed input
with PayloadError before it reaches the services.
"""

import math

from models import Ingredient, Recipe, MealPlan, GroceryListItem

from .sanitizer import (
    sanitize_ingredient_name, sanitize_recipe_name, sanitize_unit, sanitize_category,
)


class PayloadError(Exception):
    """Raised when a request payload is missing fields or has bad values."""
    pass


def require_object(data, what='request body'):
    if not isinstance(data, dict):
        raise PayloadError(f"{what} must be a JSON object")
    return data


def parse_number(value, field, min_val=None, allow_zero=True):
    """Parse a finite number, optionally bounded below."""
    if isinstance(value, bool):
        raise PayloadError(f"{field} must be a number")
    try:
        result = float(value)
    except (ValueError, TypeError):
        raise PayloadError(f"{field} must be a number")
    if not math.isfinite(result):
        raise PayloadError(f"{field} must be finite")
    if min_val is not None and result < min_val:
        raise PayloadError(f"{field} must be at least {min_val}")
    if not allow_zero and result == 0:
        raise PayloadError(f"{field} must not be zero")
    return result


def parse_servings(value, field='servings', min_val=1, max_val=None):
    """Servings are whole numbers within [min_val, max_val]."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise PayloadError(f"{field} must be a whole number")
    if isinstance(value, float) and not math.isfinite(value):
        raise PayloadError(f"{field} must be finite")
    try:
        result = int(value)
    except (ValueError, TypeError, OverflowError):
        raise PayloadError(f"{field} must be a whole number")
    if isinstance(value, float) and value != result:
        raise PayloadError(f"{field} must be a whole number")
    if result < min_val:
        raise PayloadError(f"{field} must be at least {min_val}")
    if max_val is not None and result > max_val:
        raise PayloadError(f"{field} must be at most {max_val}")
    return result


def parse_unit(value, field='unit'):
    unit = sanitize_unit(value)
    if not unit:
        raise PayloadError(f"{field} is required")
    return unit


def parse_ingredient(data):
    require_object(data, 'ingredient')
    name = sanitize_ingredient_name(data.get('name'))
    if not name:
        raise PayloadError("ingredient name is required")
    return Ingredient(
        name=name,
        amount=parse_number(data.get('amount'), 'amount', min_val=0),
        unit=parse_unit(data.get('unit')),
        cost=parse_number(data.get('cost') or 0, 'cost', min_val=0),
        category=sanitize_category(data.get('category')) or None,
    )


def parse_recipe(data):
    require_object(data, 'recipe')
    ingredients = data.get('ingredients') or []
    if not isinstance(ingredients, list):
        raise PayloadError("recipe ingredients must be a list")
    return Recipe(
        id=data.get('id'),
        name=sanitize_recipe_name(data.get('name')),
        servings=parse_servings(data.get('servings', 4), 'recipe servings'),
        ingredients=tuple(parse_ingredient(ing) for ing in ingredients),
    )


def parse_recipes(data, max_recipes):
    if not isinstance(data, list):
        raise PayloadError("recipes must be a list")
    if len(data) > max_recipes:
        raise PayloadError(f"at most {max_recipes} recipes per request")
    return [parse_recipe(r) for r in data]


def parse_meal_plan(data, max_recipes):
    require_object(data, 'meal_plan')
    days = data.get('recipes') or {}
    if not isinstance(days, dict):
        raise PayloadError("meal_plan recipes must map days to recipe lists")
    plan = MealPlan(days=parse_servings(data.get('days', 7), 'days'))
    total = 0
    for day, recipes in days.items():
        try:
            day_number = int(day)
        except (ValueError, TypeError):
            raise PayloadError(f"invalid meal plan day: {day!r}")
        for recipe in parse_recipes(recipes, max_recipes):
            plan.add_recipe(day_number, recipe)
            total += 1
    if total > max_recipes:
        raise PayloadError(f"at most {max_recipes} recipes per request")
    return plan


def parse_grocery_items(data):
    if not isinstance(data, list):
        raise PayloadError("items must be a list")
    items = []
    for item in data:
        ing = parse_ingredient(item)
        items.append(GroceryListItem.from_dict(ing.to_dict()))
    return items
