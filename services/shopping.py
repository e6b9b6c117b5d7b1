"""
Shopping List Service

Functions for building the grocery list from the recipes in a meal plan.

Ingredients merge only when both the lowercased name and the unit match;
"2 cloves garlic" and "1 head garlic" stay on separate lines.
"""

from constants import CATEGORY_ORDER, DEFAULT_CATEGORY
from models import GroceryListItem, grocery_item_key

from .cost import recipe_cost

_CATEGORY_RANK = {category: rank for rank, category in enumerate(CATEGORY_ORDER)}


def category_rank(category):
    """Position of a category in shopping order; unknown categories rank as 'other'."""
    return _CATEGORY_RANK.get(category, _CATEGORY_RANK[DEFAULT_CATEGORY])


def sort_by_category(items):
    return sorted(items, key=lambda item: category_rank(item.category))


def aggregate(recipes):
    """
    Consolidate the ingredients of several recipes into one grocery list.

    Amounts and costs are summed per (lowercase name, unit) key. The first
    occurrence of a key fixes its display name and category. The result is
    a new list sorted by aisle category.
    """
    consolidated = {}
    for recipe in recipes:
        for ing in recipe.ingredients:
            key = grocery_item_key(ing.name, ing.unit)
            cost = ing.cost or 0
            if key in consolidated:
                consolidated[key]['amount'] += ing.amount
                consolidated[key]['cost'] += cost
            else:
                consolidated[key] = {
                    'id': key,
                    'name': ing.name,
                    'amount': ing.amount,
                    'unit': ing.unit,
                    'cost': cost,
                    'category': ing.category,
                }

    return sort_by_category(GroceryListItem(**item) for item in consolidated.values())


def generate_grocery_list(meal_plan):
    """Aggregate every recipe placed in the meal plan."""
    return aggregate(meal_plan.all_recipes())


def regenerate_grocery_list(grocery_list, meal_plan):
    """Rebuild a grocery list from the meal plan, resetting checked items."""
    grocery_list.replace(generate_grocery_list(meal_plan))
    return grocery_list


def meal_plan_total_cost(meal_plan):
    return sum(recipe_cost(recipe) for recipe in meal_plan.all_recipes())


def add_item_to_grocery_list(items, item):
    """
    Add a single ingredient to an existing grocery list.

    Merges into the line with the same key, otherwise inserts a new line
    (category defaults to 'other') and re-sorts by category.
    """
    key = grocery_item_key(item.name, item.unit)
    cost = item.cost or 0
    new_items = list(items)

    for index, existing in enumerate(new_items):
        if existing.id == key:
            new_items[index] = GroceryListItem(
                id=existing.id,
                name=existing.name,
                amount=existing.amount + item.amount,
                unit=existing.unit,
                cost=existing.cost + cost,
                category=existing.category,
            )
            return new_items

    new_items.append(GroceryListItem(
        id=key,
        name=item.name,
        amount=item.amount,
        unit=item.unit,
        cost=cost,
        category=item.category or DEFAULT_CATEGORY,
    ))
    return sort_by_category(new_items)


def remove_item(items, item_id):
    return [item for item in items if item.id != item_id]


def grocery_list_total(items):
    """Total estimated cost of the grocery list."""
    return sum(item.cost for item in items)


def group_by_category(items):
    """
    Group items into aisle sections.

    Returns [(category, [items])] in shopping order, skipping empty
    categories. Unknown categories are grouped under 'other'.
    """
    groups = {}
    for item in items:
        category = item.category if item.category in _CATEGORY_RANK else DEFAULT_CATEGORY
        groups.setdefault(category, []).append(item)
    return [(category, groups[category]) for category in CATEGORY_ORDER if category in groups]
