import pytest

from models import Ingredient, Recipe, GroceryListItem, GroceryList, MealPlan
from services import (
    aggregate, generate_grocery_list, regenerate_grocery_list, meal_plan_total_cost,
    add_item_to_grocery_list, remove_item, grocery_list_total, group_by_category,
    category_rank,
)


def _recipe(recipe_id, *ingredients):
    return Recipe(id=recipe_id, servings=2, ingredients=tuple(ingredients))


def _totals(items):
    amounts = {item.id: item.amount for item in items}
    costs = {item.id: item.cost for item in items}
    return amounts, costs


def test_merge_same_name_and_unit():
    garlic = Ingredient("garlic", 2, "cloves", 0.20, "produce")
    items = aggregate([_recipe("a", garlic), _recipe("b", garlic)])
    assert len(items) == 1
    assert items[0].id == "garlic-cloves"
    assert items[0].amount == 4
    assert items[0].cost == pytest.approx(0.40)


def test_merge_ignores_name_case(pasta, stir_fry):
    items = aggregate([pasta, stir_fry])
    garlic = [item for item in items if item.id == "garlic-cloves"]
    assert len(garlic) == 1
    assert garlic[0].name == "Garlic"
    assert garlic[0].amount == 4


def test_no_cross_unit_merge():
    items = aggregate([
        _recipe("a", Ingredient("onion", 1, "whole", 0.50, "produce")),
        _recipe("b", Ingredient("onion", 100, "g", 0.30, "produce")),
    ])
    assert sorted(item.id for item in items) == ["onion-g", "onion-whole"]


def test_aggregate_is_order_insensitive(pasta, stir_fry):
    amounts, costs = _totals(aggregate([pasta, stir_fry]))
    swapped_amounts, swapped_costs = _totals(aggregate([stir_fry, pasta]))
    assert swapped_amounts == pytest.approx(amounts)
    assert swapped_costs == pytest.approx(costs)


def test_aggregate_three_recipes_any_order(pasta, stir_fry):
    third = _recipe("c", Ingredient("Garlic", 1, "cloves", 0.10, "produce"))
    forward = {i.id: (i.amount, i.cost) for i in aggregate([pasta, stir_fry, third])}
    backward = {i.id: (i.amount, i.cost) for i in aggregate([third, stir_fry, pasta])}
    assert forward.keys() == backward.keys()
    for key, (amount, cost) in forward.items():
        assert backward[key][0] == pytest.approx(amount)
        assert backward[key][1] == pytest.approx(cost)


def test_category_ordering():
    items = aggregate([_recipe(
        "a",
        Ingredient("Peas", 1, "cup", 1.0, "frozen"),
        Ingredient("Kale", 1, "bunch", 2.0, "produce"),
        Ingredient("Milk", 1, "cup", 0.5, "dairy"),
    )])
    assert [item.category for item in items] == ["produce", "dairy", "frozen"]


def test_unknown_category_sorts_with_other():
    items = aggregate([_recipe(
        "a",
        Ingredient("Mystery", 1, "whole", 0, "gadgets"),
        Ingredient("Foil", 1, "packet", 0, "other"),
        Ingredient("Juice", 1, "cup", 0, "drinks"),
        Ingredient("No Aisle", 1, "whole", 0, None),
    )])
    assert [item.name for item in items] == ["Juice", "Mystery", "Foil", "No Aisle"]
    assert category_rank("gadgets") == category_rank("other")


def test_zero_amount_and_cost_kept():
    items = aggregate([_recipe("a", Ingredient("Salt", 0, "tsp", 0, "spices"))])
    assert items == [GroceryListItem("salt-tsp", "Salt", 0, "tsp", 0, "spices")]


def test_aggregate_empty():
    assert aggregate([]) == []
    assert aggregate([_recipe("empty")]) == []


def test_aggregate_returns_new_list(pasta):
    assert aggregate([pasta]) is not aggregate([pasta])


def test_meal_plan_grocery_list(pasta, stir_fry):
    plan = MealPlan()
    plan.add_recipe(3, stir_fry)
    plan.add_recipe(0, pasta)
    plan.add_recipe(0, stir_fry)
    assert [r.id for r in plan.all_recipes()] == ["pasta", "stir-fry", "stir-fry"]

    items = generate_grocery_list(plan)
    garlic = next(item for item in items if item.id == "garlic-cloves")
    assert garlic.amount == 6
    assert meal_plan_total_cost(plan) == pytest.approx(3.70 + 1.30 * 2)


def test_meal_plan_remove_and_clear(pasta, stir_fry):
    plan = MealPlan()
    plan.add_recipe(1, pasta)
    plan.add_recipe(1, stir_fry)
    plan.remove_recipe(1, "pasta")
    assert [r.id for r in plan.all_recipes()] == ["stir-fry"]
    plan.clear()
    assert generate_grocery_list(plan) == []


def test_regenerate_resets_checked_state(pasta, stir_fry):
    plan = MealPlan()
    plan.add_recipe(0, pasta)
    grocery_list = GroceryList()
    regenerate_grocery_list(grocery_list, plan)
    grocery_list.toggle("garlic-cloves")
    assert grocery_list.checked_count == 1

    plan.add_recipe(1, stir_fry)
    regenerate_grocery_list(grocery_list, plan)
    assert grocery_list.checked_count == 0
    assert len(grocery_list.items) == 5


def test_grocery_list_state():
    grocery_list = GroceryList()
    assert not grocery_list.all_checked
    grocery_list.toggle("kale-bunch")
    assert grocery_list.checked_count == 0
    assert not grocery_list.all_checked
    grocery_list.replace([
        GroceryListItem("kale-bunch", "Kale", 1, "bunch", 2.0, "produce"),
        GroceryListItem("milk-cup", "Milk", 1, "cup", 0.5, "dairy"),
    ])
    grocery_list.toggle("kale-bunch")
    grocery_list.toggle("milk-cup")
    assert grocery_list.all_checked
    grocery_list.toggle("milk-cup")
    assert grocery_list.checked_count == 1

    grocery_list.toggle("eggs-whole")
    assert "eggs-whole" not in grocery_list.checked
    assert grocery_list.checked_count == 1

    grocery_list.remove("kale-bunch")
    assert [item.id for item in grocery_list.items] == ["milk-cup"]
    assert "kale-bunch" not in grocery_list.checked

    grocery_list.clear_checked()
    assert grocery_list.checked == {}
    grocery_list.clear()
    assert grocery_list.to_dict() == {"items": [], "checked": {}}


def test_add_item_merges_existing():
    items = [GroceryListItem("garlic-cloves", "Garlic", 2, "cloves", 0.20, "produce")]
    merged = add_item_to_grocery_list(items, Ingredient("GARLIC", 3, "cloves", 0.30, "pantry"))
    assert len(merged) == 1
    assert merged[0].amount == 5
    assert merged[0].cost == pytest.approx(0.50)
    assert merged[0].category == "produce"
    assert items[0].amount == 2


def test_add_item_inserts_in_category_order():
    items = [
        GroceryListItem("kale-bunch", "Kale", 1, "bunch", 2.0, "produce"),
        GroceryListItem("peas-cup", "Peas", 1, "cup", 1.0, "frozen"),
    ]
    added = add_item_to_grocery_list(items, Ingredient("Milk", 1, "cup", 0.5, "dairy"))
    assert [item.id for item in added] == ["kale-bunch", "milk-cup", "peas-cup"]

    uncategorized = add_item_to_grocery_list(items, Ingredient("Twine", 1, "whole", None, None))
    assert uncategorized[-1].category == "other"
    assert uncategorized[-1].cost == 0


def test_remove_item_and_total():
    items = [
        GroceryListItem("kale-bunch", "Kale", 1, "bunch", 2.0, "produce"),
        GroceryListItem("milk-cup", "Milk", 1, "cup", 0.5, "dairy"),
    ]
    assert grocery_list_total(items) == pytest.approx(2.5)
    remaining = remove_item(items, "kale-bunch")
    assert [item.id for item in remaining] == ["milk-cup"]
    assert grocery_list_total([]) == 0


def test_group_by_category():
    items = [
        GroceryListItem("kale-bunch", "Kale", 1, "bunch", 2.0, "produce"),
        GroceryListItem("foil-packet", "Foil", 1, "packet", 1.0, "hardware"),
        GroceryListItem("milk-cup", "Milk", 1, "cup", 0.5, "dairy"),
        GroceryListItem("apple-whole", "Apple", 2, "whole", 1.0, "produce"),
    ]
    groups = group_by_category(items)
    assert [category for category, _ in groups] == ["produce", "dairy", "other"]
    assert [item.name for item in groups[0][1]] == ["Kale", "Apple"]
