"""
Input Sanitization Module

Cleans free-text fields from request payloads before they are used as
ingredient names, units or categories.
"""

import re

from constants import MAX_LENGTHS


def sanitize_text(text, max_length=200):
    """
    Strip, remove control characters and collapse whitespace.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 200)

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Collapse whitespace (tabs, newlines) to single spaces
    text = re.sub(r'\s+', ' ', text)

    # Remove remaining control characters and null bytes
    text = re.sub(r'[\x00-\x1f\x7f-\x9f]', '', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_ingredient_name(name):
    return sanitize_text(name, MAX_LENGTHS['ingredient_name'])


def sanitize_recipe_name(name):
    return sanitize_text(name, MAX_LENGTHS['recipe_name'])


def sanitize_unit(unit):
    """Units are single tokens like 'cup' or 'cloves'; inner whitespace is dropped."""
    return re.sub(r'\s+', '', sanitize_text(unit, MAX_LENGTHS['unit']))


def sanitize_category(category):
    """Lowercase a category; empty input gives '' and is defaulted by the models."""
    return sanitize_text(category, MAX_LENGTHS['category']).lower()
