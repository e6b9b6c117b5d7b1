from flask import Flask, request, jsonify
import logging

from config import get_config
from constants import (
    WEIGHT_UNITS, VOLUME_UNITS, COUNTABLE_UNIT_CHOICES,
    CATEGORY_ORDER, CATEGORY_LABELS,
)
from services import (
    get_conversion_factor, get_available_units, get_unit_type,
    convert_cost_for_unit, get_cost_per_unit_converted, recipe_cost,
    scale_recipe, aggregate, generate_grocery_list, add_item_to_grocery_list,
    grocery_list_total, group_by_category, ingredient_cost,
    format_amount, format_money, format_grocery_qty,
)
from utils import (
    PayloadError, parse_number, parse_servings, parse_unit, parse_ingredient,
    parse_recipe, parse_recipes, parse_meal_plan, parse_grocery_items,
    sanitize_ingredient_name,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.logger.setLevel(app.config['LOG_LEVEL'])


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise PayloadError("request body must be a JSON object")
    return data


def _grocery_payload(items):
    """Serialize grocery list items with totals and aisle groups."""
    total = grocery_list_total(items)
    return {
        'items': [
            dict(item.to_dict(), display_qty=format_grocery_qty(item))
            for item in items
        ],
        'total': round(total, 2),
        'display_total': format_money(total),
        'groups': [
            {
                'category': category,
                'label': CATEGORY_LABELS[category],
                'item_ids': [item.id for item in group],
            }
            for category, group in group_by_category(items)
        ],
    }


@app.errorhandler(PayloadError)
def handle_payload_error(error):
    app.logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({'error': str(error)}), 400


# ============================================
# ROUTES - UNITS
# ============================================

@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/units')
def units():
    return jsonify({
        'weight': list(WEIGHT_UNITS),
        'volume': list(VOLUME_UNITS),
        'countable': list(COUNTABLE_UNIT_CHOICES),
        'categories': list(CATEGORY_ORDER),
    })


@app.route('/api/units/available')
def units_available():
    unit = parse_unit(request.args.get('unit'))
    ingredient = sanitize_ingredient_name(request.args.get('ingredient')) or None
    return jsonify({
        'unit': unit,
        'unit_type': get_unit_type(unit),
        'units': get_available_units(unit, ingredient),
    })


# ============================================
# ROUTES - CONVERSION
# ============================================

@app.route('/api/convert', methods=['POST'])
def convert():
    """Re-express an ingredient amount (and its total cost) in another unit."""
    data = _json_body()
    amount = parse_number(data.get('amount'), 'amount', min_val=0)
    from_unit = parse_unit(data.get('from_unit'), 'from_unit')
    to_unit = parse_unit(data.get('to_unit'), 'to_unit')
    ingredient = sanitize_ingredient_name(data.get('ingredient_name')) or None
    cost = parse_number(data.get('cost') or 0, 'cost', min_val=0)

    factor = get_conversion_factor(from_unit, to_unit, ingredient)
    if factor is None:
        # Keep the original unit and amount
        app.logger.warning("No conversion from %s to %s for %r", from_unit, to_unit, ingredient)
        return jsonify({
            'converted': False,
            'amount': amount,
            'unit': from_unit,
            'display_amount': format_amount(amount),
            'cost': cost,
        })

    new_amount = amount * factor
    return jsonify({
        'converted': True,
        'amount': new_amount,
        'unit': to_unit,
        'display_amount': format_amount(new_amount),
        'cost': convert_cost_for_unit(cost, amount, from_unit, to_unit, ingredient),
        'factor': factor,
    })


@app.route('/api/cost-per-unit', methods=['POST'])
def cost_per_unit():
    data = _json_body()
    price = parse_number(data.get('cost_per_unit'), 'cost_per_unit', min_val=0)
    from_unit = parse_unit(data.get('from_unit'), 'from_unit')
    to_unit = parse_unit(data.get('to_unit'), 'to_unit')
    ingredient = sanitize_ingredient_name(data.get('ingredient_name')) or None

    converted = get_cost_per_unit_converted(price, from_unit, to_unit, ingredient)
    return jsonify({
        'cost_per_unit': converted,
        'unit': to_unit if converted is not None else from_unit,
    })


@app.route('/api/ingredients/cost', methods=['POST'])
def ingredients_cost():
    """Total cost of an ingredient whose price is quoted in another unit."""
    data = _json_body()
    amount = parse_number(data.get('amount'), 'amount', min_val=0)
    unit = parse_unit(data.get('unit'))
    price = parse_number(data.get('cost_per_unit'), 'cost_per_unit', min_val=0)
    base_unit = parse_unit(data['base_unit'], 'base_unit') if data.get('base_unit') else None
    ingredient = sanitize_ingredient_name(data.get('ingredient_name')) or None

    cost = ingredient_cost(amount, unit, price, base_unit, ingredient)
    return jsonify({'cost': cost, 'display_cost': format_money(cost)})


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes/scale', methods=['POST'])
def recipes_scale():
    data = _json_body()
    recipe = parse_recipe(data.get('recipe'))
    servings = parse_servings(
        data.get('servings'),
        min_val=app.config['MIN_SERVINGS'],
        max_val=app.config['MAX_SERVINGS'],
    )
    scaled = scale_recipe(recipe, servings)
    total = recipe_cost(scaled)
    return jsonify({
        'recipe': scaled.to_dict(),
        'total_cost': round(total, 2),
        'display_total_cost': format_money(total),
    })


# ============================================
# ROUTES - GROCERY LIST
# ============================================

@app.route('/api/grocery-list', methods=['POST'])
def grocery_list_generate():
    """Build a grocery list from a recipe list or a whole meal plan."""
    data = _json_body()
    max_recipes = app.config['MAX_RECIPES_PER_REQUEST']

    if 'meal_plan' in data:
        plan = parse_meal_plan(data['meal_plan'], max_recipes)
        recipe_count = len(plan.all_recipes())
        items = generate_grocery_list(plan)
    elif 'recipes' in data:
        recipes = parse_recipes(data['recipes'], max_recipes)
        recipe_count = len(recipes)
        items = aggregate(recipes)
    else:
        raise PayloadError("provide either recipes or meal_plan")

    app.logger.info("Generated grocery list: %d recipes, %d items", recipe_count, len(items))
    return jsonify(_grocery_payload(items))


@app.route('/api/grocery-list/add', methods=['POST'])
def grocery_list_add():
    data = _json_body()
    items = parse_grocery_items(data.get('items') or [])
    item = parse_ingredient(data.get('item'))
    return jsonify(_grocery_payload(add_item_to_grocery_list(items, item)))


if __name__ == '__main__':
    logging.basicConfig(level=app.config['LOG_LEVEL'])
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
