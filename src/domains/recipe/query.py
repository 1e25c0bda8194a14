"""
레시피 목록 조회 쿼리 조립.

count 쿼리와 페이지 조회 쿼리는 항상 같은 join/조건 집합에서 만들어진다.
"""
from dataclasses import dataclass

from sqlalchemy import Select, and_, func, select

from domains.recipe.models import (
    AuthorRole,
    Difficulty,
    PublicationStatus,
    Recipe,
    RecipeAuthor,
    RecipeCategory,
)
from domains.user.models import User


@dataclass(frozen=True)
class RecipeListFilter:
    difficulty: Difficulty | None = None
    max_prep_time: int | None = None
    category_id: int | None = None
    search: str | None = None
    popular: bool = False


def _apply_filters(stmt: Select, filters: RecipeListFilter) -> Select:
    stmt = stmt.join(
        RecipeAuthor,
        and_(
            RecipeAuthor.recipe_id == Recipe.id,
            RecipeAuthor.author_role == AuthorRole.PRINCIPAL.value,
        ),
    ).join(User, User.id == RecipeAuthor.user_id)

    conditions = [
        Recipe.status == PublicationStatus.PUBLISHED.value,
        Recipe.is_deleted.is_(False),
    ]

    if filters.difficulty is not None:
        conditions.append(Recipe.difficulty == filters.difficulty.value)

    if filters.max_prep_time is not None:
        conditions.append(Recipe.prep_time <= filters.max_prep_time)

    if filters.category_id is not None:
        stmt = stmt.join(RecipeCategory, RecipeCategory.recipe_id == Recipe.id)
        conditions.append(RecipeCategory.category_id == filters.category_id)

    if filters.search:
        conditions.append(
            Recipe.title.icontains(filters.search, autoescape=True)
            | Recipe.description.icontains(filters.search, autoescape=True)
        )

    return stmt.where(*conditions)


def build_count_query(filters: RecipeListFilter) -> Select:
    return _apply_filters(select(func.count(Recipe.id)).select_from(Recipe), filters)


def build_page_query(filters: RecipeListFilter, page: int, limit: int) -> Select:
    stmt = select(
        Recipe.id,
        Recipe.title,
        Recipe.difficulty,
        Recipe.servings,
        Recipe.prep_time,
        Recipe.like_count,
        Recipe.published_at,
        User.name.label("author_name"),
        User.surname.label("author_surname"),
    ).select_from(Recipe)
    stmt = _apply_filters(stmt, filters)

    if filters.popular:
        stmt = stmt.order_by(Recipe.like_count.desc(), Recipe.id.desc())
    else:
        stmt = stmt.order_by(Recipe.published_at.desc(), Recipe.id.desc())

    return stmt.limit(limit).offset((page - 1) * limit)
