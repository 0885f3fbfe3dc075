"""Integration test fixtures.

Provides a real PostgreSQL database via testcontainers and an
``ingredients`` table created fresh for every test.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from testcontainers.postgres import PostgresContainer

from dinner_decider.core.config import Settings
from dinner_decider.core.config.settings import DatabaseSettings
from dinner_decider.database.connection import (
    close_database_pool,
    get_database_pool,
    init_database_pool,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from asyncpg import Pool


pytestmark = pytest.mark.integration

INGREDIENTS_DDL = """
    CREATE TABLE ingredients (
        id BIGSERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        quantity VARCHAR(100),
        purchase_date DATE NULL,
        created_at TIMESTAMPTZ NOT NULL,
        updated_at TIMESTAMPTZ NOT NULL
    )
"""


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer]:
    """Start a PostgreSQL container for the test session."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_settings(postgres_container: PostgresContainer) -> Settings:
    """Settings pointing at the container."""
    return Settings(
        APP_ENV="test",
        DATABASE_PASSWORD=postgres_container.password,
        database=DatabaseSettings(
            host=postgres_container.get_container_host_ip(),
            port=int(postgres_container.get_exposed_port(5432)),
            name=postgres_container.dbname,
            user=postgres_container.username,
            min_pool_size=1,
            max_pool_size=2,
        ),
    )


@pytest.fixture
async def db_pool(database_settings: Settings) -> AsyncGenerator[Pool]:
    """Open the global pool and recreate the ingredients table."""
    await init_database_pool(database_settings)
    pool = get_database_pool()
    async with pool.acquire() as conn:
        await conn.execute("DROP TABLE IF EXISTS ingredients")
        await conn.execute(INGREDIENTS_DDL)
    try:
        yield pool
    finally:
        await close_database_pool()
