"""Ingredient store protocol definition.

Use-cases depend on this contract rather than on asyncpg, so tests can
substitute an in-memory implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from dinner_decider.schemas.ingredient import Ingredient, NewIngredient


@runtime_checkable
class IngredientStore(Protocol):
    """Persistence contract for ingredient records.

    All methods raise ``DatabaseError`` on I/O failure. Lookups and writes
    against a missing identifier raise ``RecordNotFoundError``.
    """

    async def create(self, ingredient: NewIngredient) -> Ingredient:
        """Insert a record and return it with its assigned identifier."""
        ...

    async def get_all(self) -> list[Ingredient]:
        """Return every record, most recently created first."""
        ...

    async def get_by_id(self, ingredient_id: int) -> Ingredient:
        """Return the record with the given identifier."""
        ...

    async def update(self, ingredient: Ingredient) -> None:
        """Overwrite name, quantity, purchase date and updated timestamp."""
        ...

    async def delete(self, ingredient_id: int) -> None:
        """Remove the record with the given identifier."""
        ...
