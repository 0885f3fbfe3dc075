"""Ingredient service.

Owns validation and partial-update merge rules for ingredients and
delegates persistence to an ``IngredientStore``.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from dinner_decider.database.exceptions import DatabaseError
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.ingredient import NewIngredient
from dinner_decider.services.ingredient.exceptions import (
    IngredientServiceError,
    IngredientValidationError,
)


if TYPE_CHECKING:
    from dinner_decider.database.repositories.protocol import IngredientStore
    from dinner_decider.schemas.ingredient import (
        CreateIngredientRequest,
        Ingredient,
        UpdateIngredientRequest,
    )

logger = get_logger(__name__)

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_purchase_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date.

    Raises:
        IngredientValidationError: If the value is not a valid date.
    """
    msg = "invalid purchase_date format, expected YYYY-MM-DD"
    if not _DATE_PATTERN.fullmatch(value):
        raise IngredientValidationError(msg, field="purchase_date")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise IngredientValidationError(msg, field="purchase_date") from e


class IngredientService:
    """Service for ingredient CRUD operations."""

    def __init__(self, repository: IngredientStore) -> None:
        """Initialize the service.

        Args:
            repository: Store that persists ingredient records.
        """
        self.repository = repository

    async def create_ingredient(self, request: CreateIngredientRequest) -> Ingredient:
        """Validate a create request and persist the new ingredient.

        Raises:
            IngredientValidationError: If name is empty or the date is malformed.
            IngredientServiceError: If the store fails.
        """
        if not request.name:
            msg = "name is required"
            raise IngredientValidationError(msg, field="name")

        purchase_date = None
        if request.purchase_date:
            purchase_date = parse_purchase_date(request.purchase_date)

        now = datetime.now(UTC)
        new_ingredient = NewIngredient(
            name=request.name,
            quantity=request.quantity,
            purchase_date=purchase_date,
            created_at=now,
            updated_at=now,
        )

        try:
            created = await self.repository.create(new_ingredient)
        except DatabaseError as e:
            msg = f"failed to create ingredient: {e}"
            raise IngredientServiceError(msg) from e

        logger.info("Ingredient created", ingredient_id=created.id)
        return created

    async def get_all_ingredients(self) -> list[Ingredient]:
        """Return every ingredient, newest first."""
        ingredients = await self.repository.get_all()
        return list(ingredients or [])

    async def get_ingredient_by_id(self, ingredient_id: int) -> Ingredient:
        """Return one ingredient.

        Raises:
            RecordNotFoundError: If no ingredient has this ID.
        """
        return await self.repository.get_by_id(ingredient_id)

    async def update_ingredient(
        self,
        ingredient_id: int,
        request: UpdateIngredientRequest,
    ) -> Ingredient:
        """Merge the provided fields into the stored ingredient.

        Fields absent from the request keep their stored values. An empty
        ``purchase_date`` clears the stored date.

        Raises:
            RecordNotFoundError: If no ingredient has this ID.
            IngredientValidationError: If name is empty or the date is malformed.
        """
        current = await self.repository.get_by_id(ingredient_id)

        changes: dict[str, object] = {}
        for field, value in request.provided_fields().items():
            if field == "name":
                if not value:
                    msg = "name must not be empty"
                    raise IngredientValidationError(msg, field="name")
                changes["name"] = value
            elif field == "quantity":
                changes["quantity"] = value
            elif field == "purchase_date":
                changes["purchase_date"] = parse_purchase_date(value) if value else None

        changes["updated_at"] = datetime.now(UTC)
        updated = current.model_copy(update=changes)

        await self.repository.update(updated)

        logger.info(
            "Ingredient updated",
            ingredient_id=ingredient_id,
            fields=sorted(k for k in changes if k != "updated_at"),
        )
        return updated

    async def delete_ingredient(self, ingredient_id: int) -> None:
        """Delete an ingredient after confirming it exists.

        Raises:
            RecordNotFoundError: If no ingredient has this ID.
        """
        await self.repository.get_by_id(ingredient_id)
        await self.repository.delete(ingredient_id)
        logger.info("Ingredient deleted", ingredient_id=ingredient_id)
