# Utility modules for the grocery engine
from .sanitizer import (
    sanitize_text, sanitize_ingredient_name, sanitize_recipe_name,
    sanitize_unit, sanitize_category
)
from .payload import (
    PayloadError, parse_number, parse_servings, parse_unit, parse_ingredient,
    parse_recipe, parse_recipes, parse_meal_plan, parse_grocery_items
)
