from fastapi import APIRouter, Depends

from core.di import get_comment_service, get_current_identity, require_admin
from core.exception.exceptions import AdminRequiredException, UnauthorizedException
from core.identity import Identity
from core.schemas import BaseResponse, CreatedId, DataResponse
from domains.comment.exceptions import (
    CommentNotFoundException,
    CommentPermissionException,
    InvalidParentCommentException,
)
from domains.comment.schemas import CommentResponse, PostCommentRequest, ReportCommentRequest
from domains.comment.service import CommentService
from domains.recipe.exceptions import RecipeNotFoundException
from util.docs import create_error_response

# /recipes/{recipe_id}/comments
recipe_router = APIRouter()
# /comments/{comment_id}
router = APIRouter()


@recipe_router.post(
    "/{recipe_id}/comments",
    status_code=201,
    summary="댓글 작성 (대댓글은 id_comentario_padre 지정)",
    response_model=DataResponse[CreatedId],
    responses=create_error_response(
        UnauthorizedException,
        RecipeNotFoundException,
        InvalidParentCommentException,
    ),
)
async def post_comment(
    recipe_id: int,
    request: PostCommentRequest,
    identity: Identity = Depends(get_current_identity),
    service: CommentService = Depends(get_comment_service),
):
    comment_id = await service.post_comment(identity, recipe_id, request)
    return DataResponse[CreatedId](message="댓글이 등록되었습니다.", data=CreatedId(id=comment_id))


@recipe_router.get(
    "/{recipe_id}/comments",
    status_code=200,
    summary="레시피 댓글 목록 (작성 순)",
    response_model=DataResponse[list[CommentResponse]],
)
async def list_comments(
    recipe_id: int,
    service: CommentService = Depends(get_comment_service),
):
    comments = await service.list_comments(recipe_id)
    return DataResponse[list[CommentResponse]](data=comments)


@router.delete(
    "/{comment_id}",
    status_code=200,
    summary="댓글 삭제 (작성자 또는 관리자)",
    response_model=BaseResponse,
    responses=create_error_response(CommentNotFoundException, CommentPermissionException),
)
async def delete_comment(
    comment_id: int,
    identity: Identity = Depends(get_current_identity),
    service: CommentService = Depends(get_comment_service),
):
    await service.delete_comment(identity, comment_id)
    return BaseResponse(message="댓글이 삭제되었습니다.")


@router.post(
    "/{comment_id}/report",
    status_code=200,
    summary="댓글 신고",
    response_model=BaseResponse,
    responses=create_error_response(CommentNotFoundException),
)
async def report_comment(
    comment_id: int,
    request: ReportCommentRequest | None = None,
    identity: Identity = Depends(get_current_identity),
    service: CommentService = Depends(get_comment_service),
):
    await service.report_comment(identity, comment_id, request)
    return BaseResponse(message="신고가 접수되었습니다.")


@router.put(
    "/{comment_id}/restore",
    status_code=200,
    summary="댓글 복구 (관리자)",
    response_model=BaseResponse,
    responses=create_error_response(AdminRequiredException, CommentNotFoundException),
)
async def restore_comment(
    comment_id: int,
    admin: Identity = Depends(require_admin),
    service: CommentService = Depends(get_comment_service),
):
    await service.restore_comment(admin, comment_id)
    return BaseResponse(message="댓글이 복구되었습니다.")
