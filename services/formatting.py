"""
Display Formatting Service

Functions for showing ingredient amounts and costs to the shopper.
"""

import math


def _round_half_up(value, places):
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def format_amount(amount):
    """
    Round an amount to a precision that shrinks as it grows.

    Whole numbers from 100, one decimal from 10, two decimals from 1,
    three decimals below 1.
    """
    if amount >= 100:
        return int(_round_half_up(amount, 0))
    if amount >= 10:
        return _round_half_up(amount, 1)
    if amount >= 1:
        return _round_half_up(amount, 2)
    return _round_half_up(amount, 3)


def format_money(value):
    return f"${(value or 0):.2f}"


def format_grocery_qty(item):
    """Format an item's quantity for the grocery list, e.g. '1.5 cup'."""
    amount = format_amount(item.amount)
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"{amount} {item.unit}".strip()
