"""Models package."""
from .recipe import ExtractionResult, Ingredient, RawSource, Step, StructuredText

__all__ = ["ExtractionResult", "Ingredient", "RawSource", "Step", "StructuredText"]
