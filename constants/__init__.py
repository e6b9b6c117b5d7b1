"""
Constants Package

Fixed lookup tables shared by the services.
"""

from .units import (
    WEIGHT_TO_G,
    VOLUME_TO_ML,
    COUNTABLE_UNITS,
    WEIGHT,
    VOLUME,
    COUNTABLE,
    UNKNOWN,
    PIVOT_VOLUME_UNIT,
    WEIGHT_UNITS,
    VOLUME_UNITS,
    COUNTABLE_UNIT_CHOICES,
    DENSITY_VOLUME_CHOICES,
    DENSITY_WEIGHT_CHOICES,
)

from .ingredients import (
    GRAMS_PER_CUP,
    GRAMS_PER_CUP_BY_KEY,
    DEFAULT_GRAMS_PER_CUP,
)

from .validation import (
    CATEGORY_ORDER,
    CATEGORY_LABELS,
    DEFAULT_CATEGORY,
    MAX_LENGTHS,
)
