"""
Recipe Normalizer.

Turns noisy recipe text from video titles, descriptions, pinned comments or
pasted text into a canonical recipe: a dish name, ingredients in the
canonical unit and densely ordered cooking steps.
"""
from __future__ import annotations

from .config import Settings, load_settings
from .models.recipe import ExtractionResult, Ingredient, RawSource, Step
from .services.recipe_service import build_adapter, extract_recipe

__all__ = [
    "ExtractionResult",
    "Ingredient",
    "RawSource",
    "Settings",
    "Step",
    "build_adapter",
    "extract_recipe",
    "load_settings",
]
