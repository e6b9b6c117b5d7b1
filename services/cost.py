"""
Cost Calculation Service

Functions for re-expressing ingredient costs in other units and for
recipe cost totals.
"""

from .conversion import get_conversion_factor


def convert_cost_for_unit(cost, amount, from_unit, to_unit, ingredient_name=None):
    """
    Total cost of an ingredient after changing its unit.

    The physical quantity does not change when 1 lb is shown as 16 oz, so
    the total cost stays the same. Returns None when the units cannot be
    converted, meaning the unit must not be relabelled.
    """
    if from_unit == to_unit:
        return cost

    factor = get_conversion_factor(from_unit, to_unit, ingredient_name)
    if factor is None:
        return None

    return cost


def get_cost_per_unit_converted(cost_per_unit, from_unit, to_unit, ingredient_name=None):
    """
    Price of one to_unit given the price of one from_unit.

    $5 per lb at 16 oz per lb is $5 / 16 = $0.3125 per oz. The factor says
    how many new units make one old unit, so the price divides by it.
    """
    if from_unit == to_unit:
        return cost_per_unit

    factor = get_conversion_factor(from_unit, to_unit, ingredient_name)
    if factor is None:
        return None

    return cost_per_unit / factor


def recipe_cost(recipe):
    """Sum of ingredient costs for a recipe."""
    return sum(ing.cost or 0 for ing in recipe.ingredients)


def cost_per_serving(recipe):
    return recipe_cost(recipe) / recipe.servings


def adjusted_cost(recipe, servings):
    """Cost of the recipe made for a different number of servings."""
    return cost_per_serving(recipe) * servings


def ingredient_cost(amount, unit, cost_per_unit, base_unit=None, ingredient_name=None):
    """
    Total cost of an ingredient priced per base_unit but measured in unit.

    The price is re-expressed in the ingredient's unit first. When there is
    no base unit, or the units cannot be converted, the base price is used
    as is. Rounded to cents.
    """
    effective = cost_per_unit
    if base_unit and base_unit != unit:
        converted = get_cost_per_unit_converted(cost_per_unit, base_unit, unit, ingredient_name)
        if converted is not None:
            effective = converted
    return round(amount * effective, 2)
