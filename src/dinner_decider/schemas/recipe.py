"""Recipe suggestion schemas.

These models double as the structured-output schema the language model is
asked to fill in, so field names match the JSON shape in the prompt.
Suggestion content is trusted as returned: missing fields and ``null`` lists
are accepted, and only non-JSON replies or wrongly typed values are rejected.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field


def _null_as_empty(value: object) -> object:
    """Read a JSON ``null`` list as an empty one."""
    return [] if value is None else value


TextList = Annotated[list[str], BeforeValidator(_null_as_empty)]


class RecipeSuggestion(BaseModel):
    """One generated dinner proposal."""

    name: str = Field(default="", description="Dish name")
    steps: TextList = Field(default_factory=list, description="Preparation steps")
    missing_items: TextList = Field(
        default_factory=list,
        description="Items needed that are not in the refrigerator",
    )


class RecipeResponse(BaseModel):
    """All suggestions produced by a single generation request."""

    suggestions: Annotated[
        list[RecipeSuggestion], BeforeValidator(_null_as_empty)
    ] = Field(default_factory=list, description="Dinner proposals")
