from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.types import Uuid
from sqlalchemy.sql import func

from core.database import Base, BigIntPK


class PersonalList(Base):
    __tablename__ = "personal_lists"

    id = Column(BigIntPK, primary_key=True, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class ListRecipe(Base):
    __tablename__ = "list_recipes"

    list_id = Column(ForeignKey("personal_lists.id", ondelete="CASCADE"), primary_key=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    added_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
