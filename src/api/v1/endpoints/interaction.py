from fastapi import APIRouter, Depends, Response

from core.di import get_interaction_service
from core.exception.exceptions import UnauthorizedException
from core.schemas import ToggleResponse
from domains.interaction.exceptions import InvalidScoreException, RatingConflictException, ToggleConflictException
from domains.interaction.schemas import RateRequest, RateResponse
from domains.interaction.service import InteractionService
from domains.recipe.exceptions import RecipeNotFoundException
from util.docs import create_error_response

router = APIRouter()


@router.post(
    "/{recipe_id}/like",
    status_code=200,
    summary="좋아요 토글",
    response_model=ToggleResponse,
    responses=create_error_response(
        UnauthorizedException,
        RecipeNotFoundException,
        ToggleConflictException,
    ),
)
async def toggle_like(
    recipe_id: int,
    service: InteractionService = Depends(get_interaction_service),
):
    return await service.toggle_like(recipe_id)


@router.post(
    "/{recipe_id}/favorite",
    status_code=200,
    summary="즐겨찾기 토글",
    response_model=ToggleResponse,
    responses=create_error_response(
        UnauthorizedException,
        RecipeNotFoundException,
        ToggleConflictException,
    ),
)
async def toggle_favorite(
    recipe_id: int,
    service: InteractionService = Depends(get_interaction_service),
):
    return await service.toggle_favorite(recipe_id)


@router.post(
    "/{recipe_id}/rate",
    status_code=201,
    summary="평점 등록/수정 (등록 201, 수정 200)",
    response_model=RateResponse,
    responses=create_error_response(InvalidScoreException, RecipeNotFoundException, RatingConflictException),
)
async def rate_recipe(
    recipe_id: int,
    request: RateRequest,
    response: Response,
    service: InteractionService = Depends(get_interaction_service),
):
    result = await service.rate_recipe(recipe_id, request)
    if result.action == "updated":
        response.status_code = 200
    return result
