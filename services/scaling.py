"""
Recipe Scaling Service

Proportional scaling of ingredient amounts and costs to a serving count.
"""

from dataclasses import replace


def scale_ingredients(ingredients, original_servings, target_servings):
    """
    Scale ingredient amounts and costs from one serving count to another.

    Returns new Ingredient objects rounded to 2 decimals; the input list is
    left untouched. original_servings must be non-zero.
    """
    multiplier = target_servings / original_servings
    return [
        replace(
            ing,
            amount=round(ing.amount * multiplier, 2),
            cost=round((ing.cost or 0) * multiplier, 2),
        )
        for ing in ingredients
    ]


def scale_recipe(recipe, target_servings):
    """Return a copy of the recipe made for target_servings."""
    return replace(
        recipe,
        servings=target_servings,
        ingredients=tuple(scale_ingredients(recipe.ingredients, recipe.servings, target_servings)),
    )
