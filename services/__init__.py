"""
Services Package

Unit conversion, cost, scaling and grocery list logic.
"""

from .conversion import (
    get_unit_type,
    get_conversion_factor,
    convert_amount,
    get_available_units,
    has_density,
    grams_per_cup,
)

from .cost import (
    convert_cost_for_unit,
    get_cost_per_unit_converted,
    ingredient_cost,
    recipe_cost,
    cost_per_serving,
    adjusted_cost,
)

from .scaling import (
    scale_ingredients,
    scale_recipe,
)

from .shopping import (
    aggregate,
    generate_grocery_list,
    regenerate_grocery_list,
    meal_plan_total_cost,
    add_item_to_grocery_list,
    remove_item,
    grocery_list_total,
    group_by_category,
    category_rank,
)

from .formatting import (
    format_amount,
    format_money,
    format_grocery_qty,
)

__all__ = [
    # Conversion
    'get_unit_type',
    'get_conversion_factor',
    'convert_amount',
    'get_available_units',
    'has_density',
    'grams_per_cup',
    # Cost
    'convert_cost_for_unit',
    'get_cost_per_unit_converted',
    'ingredient_cost',
    'recipe_cost',
    'cost_per_serving',
    'adjusted_cost',
    # Scaling
    'scale_ingredients',
    'scale_recipe',
    # Shopping
    'aggregate',
    'generate_grocery_list',
    'regenerate_grocery_list',
    'meal_plan_total_cost',
    'add_item_to_grocery_list',
    'remove_item',
    'grocery_list_total',
    'group_by_category',
    'category_rank',
    # Formatting
    'format_amount',
    'format_money',
    'format_grocery_qty',
]
