"""Extractors package."""
from .structuring_adapter import StructuringAdapter, coerce_json

__all__ = ["StructuringAdapter", "coerce_json"]
