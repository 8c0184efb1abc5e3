"""
Recipe data models for the Recipe Normalizer.

This module defines the Pydantic models passed between the normalization
stages and handed back to the caller as the extraction result.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..const import CANONICAL_UNIT


class RawSource(BaseModel):
    """The text fragments available for one extraction attempt.

    Attributes:
        title: The video title
        description: The video description
        pinned_comment: The pinned comment under the video
        freeform_text: Any text pasted by the user
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    pinned_comment: str | None = None
    freeform_text: str | None = None

    def fragments(self) -> list[str]:
        """Return the non-blank fragments, title and pinned comment first."""
        ordered = [self.title, self.pinned_comment, self.description, self.freeform_text]
        return [fragment for fragment in ordered if fragment and fragment.strip()]

    def combined_text(self) -> str:
        return "\n\n".join(self.fragments())

    def is_empty(self) -> bool:
        return not self.fragments()


class Ingredient(BaseModel):
    """A structured representation of a single ingredient.

    Attributes:
        id: Sequential identifier within one extraction run, e.g. 'ingredient-1'
        name: The ingredient name as written (e.g., '두부', '돼지고기 앞다리살')
        quantity: Positive quantity expressed in the canonical unit
        unit: Always the canonical unit
        cost_per_unit: Price per canonical unit, filled in downstream
        category: Optional category assigned by an external classifier
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Sequential identifier, e.g. 'ingredient-1'")
    name: str = Field(min_length=1, description="The ingredient name, e.g. '두부'")
    quantity: float = Field(gt=0, description="The quantity in canonical units, e.g. 200")
    unit: Literal["g"] = Field(default=CANONICAL_UNIT, description="The canonical unit")
    cost_per_unit: float = Field(default=0.0, serialization_alias="costPerUnit")
    category: str | None = None


class Step(BaseModel):
    """One cooking step."""

    model_config = ConfigDict(frozen=True)

    id: str
    order: int = Field(ge=1)
    description: str = Field(min_length=1)


class StructuredText(BaseModel):
    """Sections returned by the text-generation service.

    Attributes:
        name: Dish name proposed by the model, if any
        ingredients_text: Comma separated ingredient list
        method_text: Numbered cooking method, or the raw answer when it was not JSON
        color: Representative colour of the dish as '#RRGGBB'
    """

    name: str | None = None
    ingredients_text: str = ""
    method_text: str = ""
    color: str | None = None

    def has_content(self) -> bool:
        return bool(self.ingredients_text.strip() or self.method_text.strip())


class ExtractionResult(BaseModel):
    """The canonical recipe handed back to the caller.

    Empty ingredient and step lists are a valid outcome; raw_text then carries
    the normalized input so the recipe can be completed by hand.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    steps: list[Step] = Field(default_factory=list)
    raw_text: str = Field(default="", serialization_alias="rawText")
    color: str | None = None
    method: str = Field(default="empty", description="Route that produced the lists")

    def is_empty(self) -> bool:
        return not self.ingredients and not self.steps
