"""Ingredient endpoints.

Provides:
- POST /ingredients for adding an ingredient to the refrigerator
- GET /ingredients for listing every ingredient, newest first
- GET /ingredients/{ingredient_id} for a single ingredient
- PUT /ingredients/{ingredient_id} for partial updates
- DELETE /ingredients/{ingredient_id} for removal
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from dinner_decider.api.dependencies import get_ingredient_service
from dinner_decider.core.exceptions import (
    ErrorResponse,
    InternalErrorException,
    NotFoundException,
    ValidationException,
)
from dinner_decider.database.exceptions import DatabaseError, RecordNotFoundError
from dinner_decider.observability.logging import get_logger
from dinner_decider.schemas.ingredient import (
    CreateIngredientRequest,
    Ingredient,
    UpdateIngredientRequest,
)
from dinner_decider.services.ingredient.exceptions import (
    IngredientServiceError,
    IngredientValidationError,
)
from dinner_decider.services.ingredient.service import IngredientService  # noqa: TC001


logger = get_logger(__name__)

router = APIRouter(tags=["Ingredients"])

RESOURCE_NAME = "Ingredient"

# BIGINT range of the ingredients.id column
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1

IngredientId = Annotated[
    int, Path(description="Ingredient ID", ge=_ID_MIN, le=_ID_MAX)
]
Service = Annotated[IngredientService, Depends(get_ingredient_service)]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid ID or request body"},
    404: {"model": ErrorResponse, "description": "Ingredient not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def _translate(error: Exception, ingredient_id: int | None = None) -> Exception:
    """Map a service-layer failure onto its HTTP exception."""
    if isinstance(error, IngredientValidationError):
        return ValidationException(str(error))
    if isinstance(error, RecordNotFoundError):
        return NotFoundException(RESOURCE_NAME, ingredient_id)
    return InternalErrorException(str(error))


@router.post(
    "/ingredients",
    response_model=Ingredient,
    status_code=status.HTTP_201_CREATED,
    summary="Add an ingredient",
    responses={400: _ERROR_RESPONSES[400], 500: _ERROR_RESPONSES[500]},
)
async def create_ingredient(
    request_body: CreateIngredientRequest,
    service: Service,
) -> Ingredient:
    """Add an ingredient to the refrigerator."""
    try:
        return await service.create_ingredient(request_body)
    except (IngredientServiceError, DatabaseError) as e:
        raise _translate(e) from e


@router.get(
    "/ingredients",
    response_model=list[Ingredient],
    summary="List ingredients",
    responses={500: _ERROR_RESPONSES[500]},
)
async def list_ingredients(service: Service) -> list[Ingredient]:
    """List every ingredient, most recently created first."""
    try:
        return await service.get_all_ingredients()
    except DatabaseError as e:
        raise _translate(e) from e


@router.get(
    "/ingredients/{ingredient_id}",
    response_model=Ingredient,
    summary="Get an ingredient",
    responses=_ERROR_RESPONSES,
)
async def get_ingredient(ingredient_id: IngredientId, service: Service) -> Ingredient:
    """Get a single ingredient by ID."""
    try:
        return await service.get_ingredient_by_id(ingredient_id)
    except DatabaseError as e:
        raise _translate(e, ingredient_id) from e


@router.put(
    "/ingredients/{ingredient_id}",
    response_model=Ingredient,
    summary="Update an ingredient",
    responses=_ERROR_RESPONSES,
)
async def update_ingredient(
    ingredient_id: IngredientId,
    request_body: UpdateIngredientRequest,
    service: Service,
) -> Ingredient:
    """Update the fields present in the request body.

    Omitted fields keep their stored values. An empty ``purchase_date``
    clears the stored date.
    """
    try:
        return await service.update_ingredient(ingredient_id, request_body)
    except (IngredientServiceError, DatabaseError) as e:
        raise _translate(e, ingredient_id) from e


@router.delete(
    "/ingredients/{ingredient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an ingredient",
    responses=_ERROR_RESPONSES,
)
async def delete_ingredient(ingredient_id: IngredientId, service: Service) -> Response:
    """Delete an ingredient."""
    try:
        await service.delete_ingredient(ingredient_id)
    except DatabaseError as e:
        raise _translate(e, ingredient_id) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
