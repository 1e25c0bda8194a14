import logging
import uuid

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import transaction
from core.exception.exceptions import DatabaseException
from domains.comment.models import Comment, CommentReport, CommentStatus
from domains.user.models import User

logger = logging.getLogger(__name__)


class CommentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_comment(self, comment: Comment) -> Comment:
        try:
            self.session.add(comment)
            await self.session.commit()
            await self.session.refresh(comment)
            return comment
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("댓글 저장 실패: %s", e)
            raise DatabaseException(detail="댓글 저장 실패")

    async def get_comment(self, comment_id: int) -> Comment | None:
        return await self.session.get(Comment, comment_id)

    async def get_visible_comments(self, recipe_id: int):
        stmt = (
            select(
                Comment.id,
                Comment.parent_id,
                Comment.text,
                Comment.created_at,
                Comment.user_id,
                User.name.label("author_name"),
                User.surname.label("author_surname"),
            )
            .join(User, User.id == Comment.user_id)
            .where(
                Comment.recipe_id == recipe_id,
                Comment.status == CommentStatus.VISIBLE.value,
            )
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        result = await self.session.execute(stmt)
        return result.mappings().all()

    async def set_status(self, comment_id: int, status: CommentStatus, reset_reports: bool = False) -> None:
        values = {"status": status.value}
        if reset_reports:
            values["active_reports"] = 0

        async with transaction(self.session, "댓글 상태 변경 실패"):
            await self.session.execute(
                update(Comment)
                .where(Comment.id == comment_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )

    async def report_comment(self, comment_id: int, user_id: uuid.UUID, reason: str) -> None:
        """신고 기록 추가와 신고 수 증가를 한 트랜잭션으로 처리"""
        async with transaction(self.session, "댓글 신고 실패"):
            self.session.add(CommentReport(comment_id=comment_id, user_id=user_id, reason=reason))
            await self.session.execute(
                update(Comment)
                .where(Comment.id == comment_id)
                .values(
                    active_reports=Comment.active_reports + 1,
                    status=CommentStatus.REPORTED.value,
                )
                .execution_options(synchronize_session=False)
            )
