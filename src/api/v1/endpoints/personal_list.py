from fastapi import APIRouter, Depends

from core.di import get_list_service
from core.schemas import BaseResponse, CreatedId, DataResponse, ToggleResponse
from domains.interaction.exceptions import ToggleConflictException
from domains.personal_list.exceptions import ListNotFoundException, ListPermissionException
from domains.personal_list.schemas import CreateListRequest, ListResponse
from domains.personal_list.service import PersonalListService
from domains.recipe.exceptions import RecipeNotFoundException
from util.docs import create_error_response

router = APIRouter()


@router.post("", status_code=201, summary="개인 리스트 생성", response_model=DataResponse[CreatedId])
async def create_list(
    request: CreateListRequest,
    service: PersonalListService = Depends(get_list_service),
):
    list_id = await service.create_list(request)
    return DataResponse[CreatedId](message="리스트가 생성되었습니다.", data=CreatedId(id=list_id))


@router.get(
    "",
    status_code=200,
    summary="내 리스트 조회 (최신순)",
    response_model=DataResponse[list[ListResponse]],
)
async def get_lists(service: PersonalListService = Depends(get_list_service)):
    lists = await service.get_lists()
    return DataResponse[list[ListResponse]](data=lists)


@router.delete(
    "/{list_id}",
    status_code=200,
    summary="리스트 삭제 (담긴 레시피 연결 포함)",
    response_model=BaseResponse,
    responses=create_error_response(ListNotFoundException, ListPermissionException),
)
async def delete_list(
    list_id: int,
    service: PersonalListService = Depends(get_list_service),
):
    await service.delete_list(list_id)
    return BaseResponse(message="리스트가 삭제되었습니다.")


@router.post(
    "/{list_id}/recipes/{recipe_id}",
    status_code=200,
    summary="리스트에 레시피 담기/빼기 (토글)",
    response_model=ToggleResponse,
    responses=create_error_response(
        ListPermissionException,
        RecipeNotFoundException,
        ToggleConflictException,
    ),
)
async def toggle_list_recipe(
    list_id: int,
    recipe_id: int,
    service: PersonalListService = Depends(get_list_service),
):
    return await service.toggle_recipe(list_id, recipe_id)
