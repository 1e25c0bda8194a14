import logging

from core.identity import Identity, can_moderate_comment
from domains.comment.exceptions import (
    CommentNotFoundException,
    CommentPermissionException,
    InvalidParentCommentException,
)
from domains.comment.models import Comment, CommentStatus, DEFAULT_REPORT_REASON
from domains.comment.repository import CommentRepository
from domains.comment.schemas import CommentResponse, PostCommentRequest, ReportCommentRequest
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, comment_repo: CommentRepository, recipe_repo: RecipeRepository):
        self.comment_repo = comment_repo
        self.recipe_repo = recipe_repo

    async def post_comment(self, identity: Identity, recipe_id: int, request: PostCommentRequest) -> int:
        if not await self.recipe_repo.exists_active_recipe(recipe_id):
            raise RecipeNotFoundException()

        if request.parent_id is not None:
            parent = await self.comment_repo.get_comment(request.parent_id)
            if parent is None or parent.recipe_id != recipe_id:
                raise InvalidParentCommentException()

        comment = Comment(
            recipe_id=recipe_id,
            user_id=identity.user_id,
            parent_id=request.parent_id,
            text=request.text,
            status=CommentStatus.VISIBLE.value,
        )
        saved = await self.comment_repo.save_comment(comment)
        return saved.id

    async def list_comments(self, recipe_id: int) -> list[CommentResponse]:
        rows = await self.comment_repo.get_visible_comments(recipe_id)
        return [CommentResponse(**row) for row in rows]

    async def delete_comment(self, identity: Identity, comment_id: int) -> None:
        comment = await self._get_comment(comment_id)

        if not can_moderate_comment(identity, comment.user_id):
            logger.warning("user %s denied deleting comment %s", identity.user_id, comment_id)
            raise CommentPermissionException()

        # 본문은 남겨 두고 상태만 바꿈
        await self.comment_repo.set_status(comment_id, CommentStatus.DELETED)
        logger.info("comment %s soft-deleted by %s", comment_id, identity.user_id)

    async def report_comment(
        self, identity: Identity, comment_id: int, request: ReportCommentRequest | None = None
    ) -> None:
        await self._get_comment(comment_id)

        reason = (request.reason if request else None) or DEFAULT_REPORT_REASON
        await self.comment_repo.report_comment(comment_id, identity.user_id, reason)
        logger.info("comment %s reported by %s", comment_id, identity.user_id)

    async def restore_comment(self, identity: Identity, comment_id: int) -> None:
        await self._get_comment(comment_id)

        await self.comment_repo.set_status(comment_id, CommentStatus.VISIBLE, reset_reports=True)
        logger.info("comment %s restored by admin %s", comment_id, identity.user_id)

    async def _get_comment(self, comment_id: int) -> Comment:
        comment = await self.comment_repo.get_comment(comment_id)
        if comment is None:
            raise CommentNotFoundException()
        return comment
