"""PostgreSQL database layer.

This module provides:
- Connection pool management
- The ingredient repository
- Health check utilities
"""

from dinner_decider.database.connection import (
    close_database_pool,
    get_database_pool,
    init_database_pool,
    ping_database,
)
from dinner_decider.database.exceptions import DatabaseError, RecordNotFoundError
from dinner_decider.database.repositories.ingredient import IngredientRepository


__all__ = [
    "DatabaseError",
    "IngredientRepository",
    "RecordNotFoundError",
    "close_database_pool",
    "get_database_pool",
    "init_database_pool",
    "ping_database",
]
