"""
Unit Conversion Service

Functions for classifying units and converting amounts between them.

Every function here signals "no conversion possible" by returning None.
Callers must keep the original amount and unit when they get None back.
"""

from constants import (
    WEIGHT_TO_G, VOLUME_TO_ML, COUNTABLE_UNITS,
    WEIGHT, VOLUME, COUNTABLE, UNKNOWN, PIVOT_VOLUME_UNIT,
    WEIGHT_UNITS, VOLUME_UNITS, COUNTABLE_UNIT_CHOICES,
    DENSITY_VOLUME_CHOICES, DENSITY_WEIGHT_CHOICES,
    GRAMS_PER_CUP, GRAMS_PER_CUP_BY_KEY, DEFAULT_GRAMS_PER_CUP,
)


def get_unit_type(unit):
    """Return the family of a unit: 'weight', 'volume', 'countable' or 'unknown'."""
    if unit in WEIGHT_TO_G:
        return WEIGHT
    if unit in VOLUME_TO_ML:
        return VOLUME
    if unit in COUNTABLE_UNITS:
        return COUNTABLE
    return UNKNOWN


def _density_entry(ingredient_name):
    if not ingredient_name:
        return None
    if ingredient_name in GRAMS_PER_CUP:
        return GRAMS_PER_CUP[ingredient_name]
    return GRAMS_PER_CUP_BY_KEY.get(ingredient_name.strip().lower())


def has_density(ingredient_name):
    """True when the ingredient has its own grams-per-cup entry."""
    return _density_entry(ingredient_name) is not None


def grams_per_cup(ingredient_name):
    """Look up grams per cup for an ingredient, falling back to the default density."""
    density = _density_entry(ingredient_name)
    return density if density is not None else DEFAULT_GRAMS_PER_CUP


def get_conversion_factor(from_unit, to_unit, ingredient_name=None):
    """
    Return the factor that turns an amount in from_unit into to_unit.

    new_amount = old_amount * factor

    Weight and volume convert within their family through grams and
    milliliters. Crossing between volume and weight needs the ingredient
    name: the amount is pivoted through cups and the ingredient density.

    Args:
        from_unit: Unit the amount is in
        to_unit: Unit to express it in
        ingredient_name: Ingredient name for the density lookup (optional)

    Returns:
        Positive float, or None when the units cannot be converted
    """
    # Same unit, no conversion needed
    if from_unit == to_unit:
        return 1

    from_type = get_unit_type(from_unit)
    to_type = get_unit_type(to_unit)

    if from_type == WEIGHT and to_type == WEIGHT:
        return WEIGHT_TO_G[from_unit] / WEIGHT_TO_G[to_unit]

    if from_type == VOLUME and to_type == VOLUME:
        return VOLUME_TO_ML[from_unit] / VOLUME_TO_ML[to_unit]

    if not ingredient_name:
        return None

    ml_per_cup = VOLUME_TO_ML[PIVOT_VOLUME_UNIT]

    # Volume -> cups -> grams -> target weight unit
    if from_type == VOLUME and to_type == WEIGHT:
        cups = VOLUME_TO_ML[from_unit] / ml_per_cup
        grams = cups * grams_per_cup(ingredient_name)
        return grams / WEIGHT_TO_G[to_unit]

    # Weight -> grams -> cups -> target volume unit
    if from_type == WEIGHT and to_type == VOLUME:
        cups = WEIGHT_TO_G[from_unit] / grams_per_cup(ingredient_name)
        ml = cups * ml_per_cup
        return ml / VOLUME_TO_ML[to_unit]

    # Countable units or incompatible types
    return None


def convert_amount(amount, from_unit, to_unit, ingredient_name=None):
    """
    Re-express an amount in another unit.

    Returns (amount, unit). When no conversion exists the original amount
    and unit come back unchanged.
    """
    factor = get_conversion_factor(from_unit, to_unit, ingredient_name)
    if factor is None:
        return amount, from_unit
    return amount * factor, to_unit


def get_available_units(unit, ingredient_name=None):
    """List the units an ingredient amount can be shown in."""
    unit_type = get_unit_type(unit)
    density_known = has_density(ingredient_name)

    if unit_type == WEIGHT:
        if density_known:
            return [*WEIGHT_UNITS, *DENSITY_VOLUME_CHOICES]
        return list(WEIGHT_UNITS)
    if unit_type == VOLUME:
        if density_known:
            return [*VOLUME_UNITS, *DENSITY_WEIGHT_CHOICES]
        return list(VOLUME_UNITS)
    if unit_type == COUNTABLE:
        return list(COUNTABLE_UNIT_CHOICES)
    return [unit]
