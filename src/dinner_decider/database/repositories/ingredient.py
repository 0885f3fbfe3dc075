"""Ingredient repository.

Data access for the ``ingredients`` table. Every operation is a single
parameterised statement, so each write is atomic on its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg

from dinner_decider.database.connection import get_database_pool
from dinner_decider.database.exceptions import DatabaseError, RecordNotFoundError
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.ingredient import Ingredient


if TYPE_CHECKING:
    from asyncpg import Pool, Record

    from dinner_decider.schemas.ingredient import NewIngredient

logger = get_logger(__name__)

RESOURCE = "ingredient"

# Failures that mean "the database could not do it", as opposed to bugs
_STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    TimeoutError,
)

_COLUMNS = "id, name, quantity, purchase_date, created_at, updated_at"


class IngredientRepository:
    """Repository for ingredient records.

    Uses raw asyncpg queries against the ``ingredients`` table.
    """

    def __init__(self, pool: Pool | None = None) -> None:
        """Initialize repository with optional connection pool.

        Args:
            pool: asyncpg connection pool. If None, uses global pool.
        """
        self._pool = pool

    @property
    def pool(self) -> Pool:
        """Get the database connection pool."""
        if self._pool is not None:
            return self._pool
        return get_database_pool()

    async def create(self, ingredient: NewIngredient) -> Ingredient:
        """Insert a new ingredient.

        Args:
            ingredient: Ingredient fields, including both timestamps.

        Returns:
            The stored ingredient with its assigned ID.

        Raises:
            DatabaseError: If the insert fails.
        """
        query = f"""
            INSERT INTO ingredients (name, quantity, purchase_date, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {_COLUMNS}
        """  # noqa: S608

        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(
                    query,
                    ingredient.name,
                    ingredient.quantity,
                    ingredient.purchase_date,
                    ingredient.created_at,
                    ingredient.updated_at,
                )
        except _STORAGE_ERRORS as e:
            logger.error("Failed to create ingredient", error=str(e))
            msg = f"failed to create ingredient: {e}"
            raise DatabaseError(msg) from e

        if row is None:
            msg = "failed to create ingredient: no row returned"
            raise DatabaseError(msg)

        created = self._row_to_ingredient(row)
        logger.debug("Ingredient created", ingredient_id=created.id)
        return created

    async def get_all(self) -> list[Ingredient]:
        """Get every ingredient, most recently created first.

        Returns:
            List of ingredients; empty when the table is empty.

        Raises:
            DatabaseError: If the query fails.
        """
        query = f"""
            SELECT {_COLUMNS}
            FROM ingredients
            ORDER BY created_at DESC, id DESC
        """  # noqa: S608

        try:
            async with self.pool.acquire() as conn:
                rows = await conn.fetch(query)
        except _STORAGE_ERRORS as e:
            logger.error("Failed to list ingredients", error=str(e))
            msg = f"failed to get all ingredients: {e}"
            raise DatabaseError(msg) from e

        return [self._row_to_ingredient(row) for row in rows or []]

    async def get_by_id(self, ingredient_id: int) -> Ingredient:
        """Get a single ingredient.

        Args:
            ingredient_id: The ingredient's database ID.

        Raises:
            RecordNotFoundError: If no ingredient has this ID.
            DatabaseError: If the query fails.
        """
        query = f"""
            SELECT {_COLUMNS}
            FROM ingredients
            WHERE id = $1
        """  # noqa: S608

        try:
            async with self.pool.acquire() as conn:
                row = await conn.fetchrow(query, ingredient_id)
        except _STORAGE_ERRORS as e:
            logger.error(
                "Failed to get ingredient", ingredient_id=ingredient_id, error=str(e)
            )
            msg = f"failed to get ingredient by id: {e}"
            raise DatabaseError(msg) from e

        if row is None:
            raise RecordNotFoundError(RESOURCE, ingredient_id)

        return self._row_to_ingredient(row)

    async def update(self, ingredient: Ingredient) -> None:
        """Overwrite the mutable columns of an existing ingredient.

        Args:
            ingredient: Ingredient carrying the new values and its ID.

        Raises:
            RecordNotFoundError: If no row was updated.
            DatabaseError: If the statement fails.
        """
        query = """
            UPDATE ingredients
            SET name = $1, quantity = $2, purchase_date = $3, updated_at = $4
            WHERE id = $5
        """

        try:
            async with self.pool.acquire() as conn:
                status = await conn.execute(
                    query,
                    ingredient.name,
                    ingredient.quantity,
                    ingredient.purchase_date,
                    ingredient.updated_at,
                    ingredient.id,
                )
        except _STORAGE_ERRORS as e:
            logger.error(
                "Failed to update ingredient", ingredient_id=ingredient.id, error=str(e)
            )
            msg = f"failed to update ingredient: {e}"
            raise DatabaseError(msg) from e

        if _affected_rows(status) == 0:
            raise RecordNotFoundError(RESOURCE, ingredient.id)

    async def delete(self, ingredient_id: int) -> None:
        """Delete an ingredient.

        Args:
            ingredient_id: The ingredient's database ID.

        Raises:
            RecordNotFoundError: If no row was deleted.
            DatabaseError: If the statement fails.
        """
        query = "DELETE FROM ingredients WHERE id = $1"

        try:
            async with self.pool.acquire() as conn:
                status = await conn.execute(query, ingredient_id)
        except _STORAGE_ERRORS as e:
            logger.error(
                "Failed to delete ingredient", ingredient_id=ingredient_id, error=str(e)
            )
            msg = f"failed to delete ingredient: {e}"
            raise DatabaseError(msg) from e

        if _affected_rows(status) == 0:
            raise RecordNotFoundError(RESOURCE, ingredient_id)

    @staticmethod
    def _row_to_ingredient(row: Record) -> Ingredient:
        """Convert database row to Ingredient."""
        return Ingredient(
            id=row["id"],
            name=row["name"],
            quantity=row["quantity"] or "",
            purchase_date=row["purchase_date"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )


def _affected_rows(status: str) -> int:
    """Extract the row count from a command tag such as ``"UPDATE 1"``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0
