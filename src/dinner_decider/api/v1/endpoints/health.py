"""Health check endpoints.

Provides liveness and dependency probes for orchestrators and load balancers.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

import asyncpg
from asyncpg import Pool  # noqa: TC002
from fastapi import APIRouter, Depends, status
from fastapi.responses import ORJSONResponse

from dinner_decider.api.dependencies import (
    get_app_settings,
    get_db_pool,
    get_recipe_generator,
)
from dinner_decider.core.config import Settings  # noqa: TC001
from dinner_decider.database.connection import ping_database
from dinner_decider.llm.exceptions import LLMError
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.health import (
    DependencyHealthResponse,
    HealthResponse,
    HealthStatus,
)
from dinner_decider.services.recipe.generator import (
    RecipeGeneratorProtocol,  # noqa: TC001
)


logger = get_logger(__name__)

router = APIRouter(tags=["Health"])

AppSettings = Annotated[Settings, Depends(get_app_settings)]


def _dependency_response(
    status_code: int,
    health_status: HealthStatus,
    message: str | None = None,
) -> ORJSONResponse:
    body = DependencyHealthResponse(status=health_status, message=message)
    return ORJSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(settings: AppSettings) -> HealthResponse:
    """Check if the service is alive.

    Does not touch the database or the generation backend.
    """
    return HealthResponse(
        status=HealthStatus.OK,
        version=settings.app.version,
        environment=settings.APP_ENV,
    )


@router.get(
    "/health/db",
    response_model=DependencyHealthResponse,
    response_model_exclude_none=True,
    summary="Database probe",
    responses={503: {"model": DependencyHealthResponse}},
)
async def database_health_check(
    settings: AppSettings,
    pool: Annotated[Pool | None, Depends(get_db_pool)],
) -> ORJSONResponse:
    """Ping the database with a bounded timeout."""
    if pool is None:
        return _dependency_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            HealthStatus.ERROR,
            "Database connection failed: pool not initialized",
        )

    try:
        await ping_database(settings.database.health_check_timeout, pool=pool)
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError) as e:
        logger.warning("Database health check failed", error=str(e))
        return _dependency_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            HealthStatus.ERROR,
            f"Database connection failed: {str(e) or type(e).__name__}",
        )

    return _dependency_response(status.HTTP_200_OK, HealthStatus.OK)


@router.get(
    "/health/ollama",
    response_model=DependencyHealthResponse,
    response_model_exclude_none=True,
    summary="Generation backend probe",
    responses={503: {"model": DependencyHealthResponse}},
)
async def ollama_health_check(
    settings: AppSettings,
    generator: Annotated[RecipeGeneratorProtocol, Depends(get_recipe_generator)],
) -> ORJSONResponse:
    """Run a suggestion request with no ingredients, bounded by a timeout."""
    try:
        async with asyncio.timeout(settings.ollama.health_check_timeout):
            await generator.generate([])
    except (LLMError, TimeoutError) as e:
        logger.warning("Ollama health check failed", error=str(e))
        return _dependency_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            HealthStatus.ERROR,
            f"Ollama API connection failed: {str(e) or type(e).__name__}",
        )

    return _dependency_response(status.HTTP_200_OK, HealthStatus.OK)
