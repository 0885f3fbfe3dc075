"""API router aggregating all endpoint routers.

Routes are mounted under the configured ``api.v1_prefix`` (empty by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from dinner_decider.api.v1.endpoints import health, ingredients, recipes


router = APIRouter()

# Include health endpoints
router.include_router(health.router)

# Include ingredient endpoints
router.include_router(ingredients.router)

# Include recipe endpoints
router.include_router(recipes.router)
