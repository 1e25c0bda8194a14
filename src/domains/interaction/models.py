from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, CheckConstraint
from sqlalchemy.types import Uuid
from sqlalchemy.sql import func

from core.database import Base, BigIntPK


class Like(Base):
    __tablename__ = "likes"

    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Favorite(Base):
    __tablename__ = "favorites"

    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class Rating(Base):
    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("recipe_id", "user_id", name="uq_rating_recipe_user"),
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_rating_score"),
    )

    id = Column(BigIntPK, primary_key=True, index=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    score = Column(Integer, nullable=False)
    rated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
