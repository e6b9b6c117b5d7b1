"""
Ingredient Constants

Grams-per-cup densities used to bridge volume and weight units.
"""

from types import MappingProxyType

# Grams per cup for common ingredients (chopped/diced for produce)
GRAMS_PER_CUP = MappingProxyType({
    # Flours & Grains
    'All-Purpose Flour': 125,
    'Bread Crumbs': 108,
    'Panko Bread Crumbs': 60,
    'Rice (White)': 185,
    'Jasmine Rice': 185,
    'Arborio Rice': 200,
    'Quinoa': 170,
    'Couscous': 157,
    'Sugar': 200,
    'Brown Sugar': 220,
    # Dairy
    'Butter': 227,
    'Milk': 245,
    'Heavy Cream': 238,
    'Sour Cream': 230,
    'Greek Yogurt': 245,
    'Yogurt': 245,
    'Cheddar Cheese': 113,
    'Mozzarella Cheese': 113,
    'Parmesan Cheese': 100,
    'Ricotta Cheese': 246,
    'Cottage Cheese': 225,
    # Liquids
    'Olive Oil': 216,
    'Vegetable Oil': 218,
    'Coconut Milk': 226,
    'Chicken Broth': 240,
    'Beef Broth': 240,
    'Vegetable Broth': 240,
    'Soy Sauce': 255,
    'Honey': 340,
    'Maple Syrup': 312,
    # Produce
    'Spinach': 30,
    'Broccoli': 91,
    'Carrot': 128,
    'Onion': 160,
    'Tomato': 180,
    'Bell Pepper': 150,
    'Mushrooms': 70,
    'Celery': 101,
    'Cabbage': 89,
    # Nuts
    'Almonds': 143,
    'Walnuts': 120,
    'Peanuts': 146,
    'Cashews': 137,
})

# Applied when an ingredient has no entry above
DEFAULT_GRAMS_PER_CUP = 150

# Lowercase name -> grams per cup, for case-insensitive lookups
GRAMS_PER_CUP_BY_KEY = MappingProxyType({
    name.lower(): grams for name, grams in GRAMS_PER_CUP.items()
})
