from fastapi import APIRouter, Depends, Query

from core.di import (
    get_current_identity,
    get_recipe_service,
    get_viewer_key,
    require_admin,
)
from core.exception.exceptions import AdminRequiredException, UnauthorizedException
from core.identity import Identity
from core.schemas import BaseResponse, CreatedId, DataResponse
from domains.recipe.exceptions import (
    InvalidPaginationException,
    InvalidStatusException,
    MissingRecipeFieldException,
    RecipeNotFoundException,
    RecipePermissionException,
)
from domains.recipe.models import Difficulty
from domains.recipe.query import RecipeListFilter
from domains.recipe.schemas import (
    RecipeDetail,
    RecipeListResponse,
    RecipeRequest,
    StatusUpdateRequest,
)
from domains.recipe.service import RecipeService
from util.docs import create_error_response

router = APIRouter()


@router.get(
    "",
    status_code=200,
    summary="공개 레시피 목록 조회 (필터 / 검색 / 페이지네이션)",
    response_model=RecipeListResponse,
    responses=create_error_response(InvalidPaginationException),
)
async def list_recipes(
    categoria: int | None = Query(None, description="카테고리 id"),
    dificultad: Difficulty | None = Query(None, description="난이도"),
    tiempo_max: int | None = Query(None, description="최대 준비 시간(분)"),
    popularidad: bool = Query(False, description="좋아요 순 정렬"),
    busqueda: str | None = Query(None, description="제목/설명 검색어"),
    page: int = 1,
    limit: int = 20,
    service: RecipeService = Depends(get_recipe_service),
):
    filters = RecipeListFilter(
        difficulty=dificultad,
        max_prep_time=tiempo_max,
        category_id=categoria,
        search=busqueda,
        popular=popularidad,
    )
    return await service.list_recipes(filters, page=page, limit=limit)


@router.get(
    "/{recipe_id}",
    status_code=200,
    summary="레시피 상세 조회 (조회수 집계)",
    response_model=DataResponse[RecipeDetail],
    responses=create_error_response(RecipeNotFoundException),
)
async def get_recipe(
    recipe_id: int,
    viewer_key: str = Depends(get_viewer_key),
    service: RecipeService = Depends(get_recipe_service),
):
    detail = await service.get_recipe(recipe_id, viewer_key)
    return DataResponse[RecipeDetail](data=detail)


@router.post(
    "",
    status_code=201,
    summary="레시피 등록 (검토 대기 상태로 생성)",
    response_model=DataResponse[CreatedId],
    responses=create_error_response(MissingRecipeFieldException, UnauthorizedException),
)
async def create_recipe(
    request: RecipeRequest,
    identity: Identity = Depends(get_current_identity),
    service: RecipeService = Depends(get_recipe_service),
):
    recipe_id = await service.create_recipe(identity, request)
    return DataResponse[CreatedId](message="레시피가 등록되었습니다. 검토 후 공개됩니다.", data=CreatedId(id=recipe_id))


@router.put(
    "/{recipe_id}",
    status_code=200,
    summary="레시피 수정 (단계/재료/카테고리 전체 교체)",
    response_model=BaseResponse,
    responses=create_error_response(
        MissingRecipeFieldException,
        RecipePermissionException,
        RecipeNotFoundException,
    ),
)
async def update_recipe(
    recipe_id: int,
    request: RecipeRequest,
    identity: Identity = Depends(get_current_identity),
    service: RecipeService = Depends(get_recipe_service),
):
    await service.update_recipe(identity, recipe_id, request)
    return BaseResponse(message="레시피가 수정되었습니다. 다시 검토 대기 상태입니다.")


@router.delete(
    "/{recipe_id}",
    status_code=200,
    summary="레시피 삭제 (소프트 삭제)",
    response_model=BaseResponse,
    responses=create_error_response(RecipePermissionException, RecipeNotFoundException),
)
async def delete_recipe(
    recipe_id: int,
    identity: Identity = Depends(get_current_identity),
    service: RecipeService = Depends(get_recipe_service),
):
    await service.delete_recipe(identity, recipe_id)
    return BaseResponse(message="레시피가 삭제되었습니다.")


@router.put(
    "/{recipe_id}/restore",
    status_code=200,
    summary="삭제된 레시피 복구",
    response_model=BaseResponse,
    responses=create_error_response(RecipePermissionException, RecipeNotFoundException),
)
async def restore_recipe(
    recipe_id: int,
    identity: Identity = Depends(get_current_identity),
    service: RecipeService = Depends(get_recipe_service),
):
    await service.restore_recipe(identity, recipe_id)
    return BaseResponse(message="레시피가 복구되었습니다.")


@router.put(
    "/{recipe_id}/status",
    status_code=200,
    summary="레시피 검토 결과 반영 (관리자)",
    response_model=BaseResponse,
    responses=create_error_response(
        InvalidStatusException,
        AdminRequiredException,
        RecipeNotFoundException,
    ),
)
async def update_recipe_status(
    recipe_id: int,
    request: StatusUpdateRequest,
    admin: Identity = Depends(require_admin),
    service: RecipeService = Depends(get_recipe_service),
):
    new_status = await service.update_status(admin, recipe_id, request)
    return BaseResponse(message=f"레시피 상태가 {new_status.value}(으)로 변경되었습니다.")
