"""
Ingredient Formatter.

This module handles scaling of extracted ingredients between serving counts
and formatting them as display lines.
"""
from __future__ import annotations

import logging

from ..models.recipe import Ingredient
from ..unit_converter import format_quantity

_LOGGER = logging.getLogger(__name__)


def scale_ingredients(
    ingredients: list[Ingredient],
    base_servings: int | float | None,
    target_servings: int | float
) -> list[Ingredient]:
    """Scale ingredient quantities based on servings.

    Args:
        ingredients: Extracted ingredients
        base_servings: Number of servings the recipe was written for
        target_servings: Target number of servings to scale to (can be fractional)

    Returns:
        New ingredients with scaled quantities, or the input unchanged when
        either serving count is unusable
    """
    if base_servings is None or base_servings <= 0:
        _LOGGER.warning(
            "Cannot scale recipe: base servings not available or invalid")
        return ingredients

    if target_servings <= 0:
        _LOGGER.warning(
            "Cannot scale recipe: target servings must be positive")
        return ingredients

    scaling_factor = target_servings / base_servings
    _LOGGER.info("Scaling ingredients from %s to %s servings (factor: %.2f)",
                 base_servings, target_servings, scaling_factor)

    scaled_ingredients = []
    for ingredient in ingredients:
        scaled_qty = ingredient.quantity * scaling_factor
        _LOGGER.debug("Scaled %s: %.2f -> %.2f",
                      ingredient.name, ingredient.quantity, scaled_qty)
        scaled_ingredients.append(ingredient.model_copy(update={"quantity": scaled_qty}))

    return scaled_ingredients


def format_ingredients(ingredients: list[Ingredient]) -> list[str]:
    """Format ingredients as display lines such as '두부 200g'."""
    lines = []
    for ingredient in ingredients:
        lines.append(f"{ingredient.name} {format_quantity(ingredient.quantity)}{ingredient.unit}")
    return lines


def format_steps(steps) -> list[str]:
    return [f"{step.order}. {step.description}" for step in steps]
