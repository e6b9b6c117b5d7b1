"""
Unit Constants and Conversion Tables

Contains the unit families and the conversion factors used to re-express
ingredient amounts and costs in another unit.
"""

from types import MappingProxyType

# Weight conversions to G
WEIGHT_TO_G = MappingProxyType({
    'g': 1,
    'oz': 28.35,
    'lb': 453.6,
    'kg': 1000,
})

# Volume conversions to ML
VOLUME_TO_ML = MappingProxyType({
    'ml': 1,
    'tsp': 4.93,
    'tbsp': 14.79,
    'cup': 236.59,
    'cups': 236.59,
    'pint': 473.18,
    'can': 400,  # standard can, approximate
})

# Countable units never convert to anything but themselves
COUNTABLE_UNITS = frozenset({
    'whole', 'cloves', 'stalks', 'sprigs', 'slices', 'bunch', 'head', 'packet',
})

# Unit family names
WEIGHT = 'weight'
VOLUME = 'volume'
COUNTABLE = 'countable'
UNKNOWN = 'unknown'

# Volume unit used to bridge weight <-> volume through grams per cup
PIVOT_VOLUME_UNIT = 'cup'

# Dropdown order for each family
WEIGHT_UNITS = ('g', 'oz', 'lb', 'kg')
VOLUME_UNITS = ('ml', 'tsp', 'tbsp', 'cup', 'cups', 'pint', 'can')
COUNTABLE_UNIT_CHOICES = ('whole', 'cloves', 'stalks', 'sprigs', 'slices', 'bunch', 'head', 'packet')

# Extra choices offered when an ingredient has a listed density
DENSITY_VOLUME_CHOICES = ('cup', 'tbsp', 'tsp')
DENSITY_WEIGHT_CHOICES = ('g', 'oz')
