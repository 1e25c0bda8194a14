from enum import Enum

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Float,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.types import Uuid
from sqlalchemy.sql import func

from core.database import Base, BigIntPK


class PublicationStatus(str, Enum):
    DRAFT = "Borrador"
    IN_REVIEW = "En_Revision"
    PUBLISHED = "Publicada"
    REJECTED = "Rechazada"
    DELETED = "Eliminada"


class Difficulty(str, Enum):
    EASY = "Fácil"
    MEDIUM = "Media"
    HARD = "Difícil"


class AuthorRole(str, Enum):
    PRINCIPAL = "Principal"
    COLLABORATOR = "Colaborador"


class Recipe(Base):
    __tablename__ = "recipes"

    id = Column(BigIntPK, primary_key=True, index=True)
    title = Column(String(150), nullable=False)
    description = Column(Text)
    servings = Column(Integer, nullable=False)
    difficulty = Column(String(10), nullable=False)
    prep_time = Column(Integer)
    status = Column(String(15), nullable=False, default=PublicationStatus.IN_REVIEW.value)
    is_deleted = Column(Boolean, nullable=False, default=False)
    like_count = Column(Integer, nullable=False, default=0)
    save_count = Column(Integer, nullable=False, default=0)
    view_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    published_at = Column(DateTime(timezone=True))


class RecipeAuthor(Base):
    __tablename__ = "recipe_authors"

    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    author_role = Column(String(15), nullable=False, default=AuthorRole.PRINCIPAL.value)
    can_edit = Column(Boolean, nullable=False, default=False)


class Step(Base):
    __tablename__ = "steps"
    __table_args__ = (UniqueConstraint("recipe_id", "step_number", name="uq_step_recipe_number"),)

    id = Column(BigIntPK, primary_key=True, index=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    step_number = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)
    duration = Column(Integer)
    image_url = Column(String(255))


class IngredientBase(Base):
    """
    정규화된 재료 이름. 처음 참조될 때 생성된다.
    name 에는 unique 제약이 없으므로 동시 생성 시 중복 행이 생길 수 있음.
    """

    __tablename__ = "ingredient_bases"

    id = Column(BigIntPK, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)


class Unit(Base):
    __tablename__ = "units"

    id = Column(Integer, primary_key=True)
    name = Column(String(30), nullable=False, unique=True)


class RecipeIngredient(Base):
    __tablename__ = "recipe_ingredients"

    id = Column(BigIntPK, primary_key=True, index=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    ingredient_base_id = Column(ForeignKey("ingredient_bases.id"), nullable=False)
    unit_id = Column(ForeignKey("units.id"))
    quantity = Column(Float)
    notes = Column(String(255))


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False, unique=True)


class RecipeCategory(Base):
    __tablename__ = "recipe_categories"

    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), primary_key=True)
    category_id = Column(ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True)


class Review(Base):
    """관리자 검토 이력 (추가만 됨)"""

    __tablename__ = "reviews"

    id = Column(BigIntPK, primary_key=True, index=True)
    recipe_id = Column(ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True)
    admin_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)
    result = Column(String(15), nullable=False)
    notes = Column(Text, nullable=False, default="")
    reviewed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
