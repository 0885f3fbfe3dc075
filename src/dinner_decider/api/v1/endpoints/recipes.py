"""Recipe endpoints.

Provides:
- POST /recipes/suggestion for dinner ideas built from the stored ingredients
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from dinner_decider.api.dependencies import get_recipe_service
from dinner_decider.core.exceptions import (
    ErrorResponse,
    InternalErrorException,
    ServiceUnavailableException,
)
from dinner_decider.llm.exceptions import LLMErrorKind
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.recipe import RecipeResponse
from dinner_decider.services.recipe.exceptions import (
    RecipeGenerationError,
    RecipeServiceError,
)
from dinner_decider.services.recipe.service import RecipeService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Recipes"])

UNAVAILABLE_MESSAGE = "Recipe suggestion service is currently unavailable"

# Failures where the generation backend could not serve the request at all
_UNAVAILABLE_KINDS = frozenset({LLMErrorKind.TRANSPORT, LLMErrorKind.UPSTREAM_STATUS})


@router.post(
    "/recipes/suggestion",
    response_model=RecipeResponse,
    summary="Suggest dinner recipes",
    description=(
        "Asks the language model for three dinner ideas using the ingredients "
        "currently in the refrigerator."
    ),
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {
            "model": ErrorResponse,
            "description": "Recipe generation backend unavailable",
        },
    },
)
async def get_recipe_suggestion(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> RecipeResponse:
    """Suggest dinners from the stored ingredients."""
    try:
        return await service.get_recipe_suggestion()
    except RecipeGenerationError as e:
        if e.kind in _UNAVAILABLE_KINDS:
            raise ServiceUnavailableException(UNAVAILABLE_MESSAGE) from e
        raise InternalErrorException(str(e)) from e
    except RecipeServiceError as e:
        logger.error("Recipe suggestion failed", error=str(e))
        raise InternalErrorException(str(e)) from e
