"""
Validation Constants

Category tables and field limits applied to request payloads before they
reach the conversion and aggregation services.
"""

# Grocery aisle categories, in shopping order
CATEGORY_ORDER = (
    'produce', 'meat', 'seafood', 'dairy', 'pantry', 'spices',
    'baking', 'frozen', 'snacks', 'breakfast', 'drinks', 'other',
)

# Bucket for missing or unrecognized categories
DEFAULT_CATEGORY = 'other'

# Display labels for grocery list sections
CATEGORY_LABELS = {
    'produce': 'Produce',
    'meat': 'Meat',
    'seafood': 'Seafood',
    'dairy': 'Dairy',
    'pantry': 'Pantry',
    'spices': 'Spices',
    'baking': 'Baking',
    'frozen': 'Frozen',
    'snacks': 'Snacks',
    'breakfast': 'Breakfast',
    'drinks': 'Drinks',
    'other': 'Other',
}

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'recipe_name': 200,
    'unit': 20,
    'category': 50,
}
