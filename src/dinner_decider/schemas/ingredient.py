"""Ingredient schemas.

This module contains the persisted ingredient model and the request bodies
for creating and partially updating ingredients.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated

from pydantic import BeforeValidator, Field

from dinner_decider.schemas.base import APIRequest, APIResponse


def _null_as_empty(value: object) -> object:
    return "" if value is None else value


class Ingredient(APIResponse):
    """A food item tracked in the refrigerator."""

    id: int = Field(..., description="Identifier assigned on creation")
    name: str = Field(..., description="Ingredient name", examples=["carrot"])
    quantity: str = Field(default="", description="Free-text quantity", examples=["2"])
    purchase_date: date | None = Field(
        default=None,
        description="Purchase date (YYYY-MM-DD)",
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")


class NewIngredient(APIResponse):
    """An ingredient that has not been persisted yet (no identifier)."""

    name: str
    quantity: str = ""
    purchase_date: date | None = None
    created_at: datetime
    updated_at: datetime


class CreateIngredientRequest(APIRequest):
    """Request body for ``POST /ingredients``."""

    name: str = Field(..., description="Ingredient name (must not be empty)")
    quantity: Annotated[str, BeforeValidator(_null_as_empty)] = Field(
        default="", description="Free-text quantity; null is read as empty"
    )
    purchase_date: str | None = Field(
        default=None,
        description="Purchase date in YYYY-MM-DD format",
        examples=["2024-01-15"],
    )


class UpdateIngredientRequest(APIRequest):
    """Request body for ``PUT /ingredients/{id}``.

    Each field is tri-state: omitted (or null) leaves the stored value
    unchanged, a value overwrites it, and an empty ``purchase_date`` clears
    the stored date. Use ``provided_fields()`` to read only what was sent.
    """

    name: str | None = Field(default=None, description="New name")
    quantity: str | None = Field(default=None, description="New quantity")
    purchase_date: str | None = Field(
        default=None,
        description="New purchase date (YYYY-MM-DD), or empty string to clear",
    )

    def provided_fields(self) -> dict[str, str]:
        """Return the fields the client actually set to a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
