from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.types import Uuid
from sqlalchemy.sql import func

from core.database import Base, BigIntPK


class CommentStatus(str, Enum):
    VISIBLE = "Visible"
    DELETED = "Eliminado"
    REPORTED = "Reportado"


DEFAULT_REPORT_REASON = "Reporte sin especificar"


class Comment(Base):
    __tablename__ = "comments"

    id = Column(BigIntPK, primary_key=True, index=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # 대댓글이면 부모 댓글 id
    parent_id = Column(ForeignKey("comments.id", ondelete="SET NULL"))
    text = Column(Text, nullable=False)
    status = Column(String(10), nullable=False, default=CommentStatus.VISIBLE.value)
    active_reports = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CommentReport(Base):
    __tablename__ = "comment_reports"

    id = Column(BigIntPK, primary_key=True, index=True)
    comment_id = Column(ForeignKey("comments.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    reason = Column(String(255), nullable=False, default=DEFAULT_REPORT_REASON)
    reported_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
