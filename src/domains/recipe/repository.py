import logging
import uuid

from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import transaction
from core.exception.exceptions import DatabaseException
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.models import (
    AuthorRole,
    IngredientBase,
    PublicationStatus,
    Recipe,
    RecipeAuthor,
    RecipeCategory,
    RecipeIngredient,
    Review,
    Step,
    Unit,
)
from domains.recipe.query import RecipeListFilter, build_count_query, build_page_query
from domains.recipe.schemas import IngredientRequest, RecipeRequest, StepRequest

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    # --- 목록 ---
    async def count_recipes(self, filters: RecipeListFilter) -> int:
        try:
            result = await self.session.execute(build_count_query(filters))
            return result.scalar_one()
        except SQLAlchemyError as e:
            logger.error("레시피 개수 조회 실패: %s", e)
            raise DatabaseException(detail="레시피 목록 조회 실패")

    async def list_recipes(self, filters: RecipeListFilter, page: int, limit: int):
        try:
            result = await self.session.execute(build_page_query(filters, page, limit))
            return result.mappings().all()
        except SQLAlchemyError as e:
            logger.error("레시피 목록 조회 실패: %s", e)
            raise DatabaseException(detail="레시피 목록 조회 실패")

    # --- 단건 ---
    async def get_published_recipe(self, recipe_id: int) -> Recipe | None:
        stmt = select(Recipe).where(
            Recipe.id == recipe_id,
            Recipe.status == PublicationStatus.PUBLISHED.value,
            Recipe.is_deleted.is_(False),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_active_recipe(self, recipe_id: int) -> bool:
        stmt = select(Recipe.id).where(Recipe.id == recipe_id, Recipe.is_deleted.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_steps(self, recipe_id: int) -> list[Step]:
        stmt = select(Step).where(Step.recipe_id == recipe_id).order_by(Step.step_number.asc())
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_ingredients(self, recipe_id: int):
        stmt = (
            select(
                IngredientBase.name.label("name"),
                Unit.name.label("unit"),
                RecipeIngredient.quantity,
                RecipeIngredient.notes,
            )
            .select_from(RecipeIngredient)
            .join(IngredientBase, IngredientBase.id == RecipeIngredient.ingredient_base_id)
            .outerjoin(Unit, Unit.id == RecipeIngredient.unit_id)
            .where(RecipeIngredient.recipe_id == recipe_id)
            .order_by(RecipeIngredient.id.asc())
        )
        result = await self.session.execute(stmt)
        return result.mappings().all()

    async def get_category_ids(self, recipe_id: int) -> list[int]:
        stmt = (
            select(RecipeCategory.category_id)
            .where(RecipeCategory.recipe_id == recipe_id)
            .order_by(RecipeCategory.category_id.asc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_author(self, recipe_id: int, user_id: uuid.UUID) -> RecipeAuthor | None:
        stmt = select(RecipeAuthor).where(
            RecipeAuthor.recipe_id == recipe_id, RecipeAuthor.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def increment_view_count(self, recipe_id: int) -> None:
        try:
            stmt = (
                update(Recipe)
                .where(Recipe.id == recipe_id)
                .values(view_count=Recipe.view_count + 1)
                .execution_options(synchronize_session=False)
            )
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("조회수 증가 실패: %s", e)
            raise DatabaseException(detail="조회수 증가 실패")

    # --- 생성 / 수정 ---
    async def create_recipe(self, author_id: uuid.UUID, request: RecipeRequest) -> int:
        async with transaction(self.session, "레시피 저장 실패"):
            recipe = Recipe(
                title=request.title,
                description=request.description,
                servings=request.servings,
                difficulty=request.difficulty.value,
                prep_time=request.prep_time,
                status=PublicationStatus.IN_REVIEW.value,
            )
            self.session.add(recipe)
            await self.session.flush()

            self.session.add(
                RecipeAuthor(
                    recipe_id=recipe.id,
                    user_id=author_id,
                    author_role=AuthorRole.PRINCIPAL.value,
                    can_edit=True,
                )
            )
            await self._insert_children(recipe.id, request)

        return recipe.id

    async def replace_recipe(self, recipe_id: int, request: RecipeRequest) -> None:
        """메타데이터 덮어쓰기 + 단계/재료/카테고리 전체 교체"""
        async with transaction(self.session, "레시피 수정 실패"):
            stmt = (
                update(Recipe)
                .where(Recipe.id == recipe_id, Recipe.is_deleted.is_(False))
                .values(
                    title=request.title,
                    description=request.description,
                    servings=request.servings,
                    difficulty=request.difficulty.value,
                    prep_time=request.prep_time,
                    status=PublicationStatus.IN_REVIEW.value,
                )
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            if result.rowcount == 0:
                raise RecipeNotFoundException()

            await self.session.execute(delete(Step).where(Step.recipe_id == recipe_id))
            await self.session.execute(
                delete(RecipeIngredient).where(RecipeIngredient.recipe_id == recipe_id)
            )
            await self.session.execute(
                delete(RecipeCategory).where(RecipeCategory.recipe_id == recipe_id)
            )
            await self._insert_children(recipe_id, request)

    async def _insert_children(self, recipe_id: int, request: RecipeRequest) -> None:
        self.session.add_all([self._to_step(recipe_id, step) for step in request.steps])
        self.session.add_all(
            [RecipeCategory(recipe_id=recipe_id, category_id=category_id) for category_id in request.categories]
        )

        for ingredient in request.ingredients:
            base_id = await self._resolve_ingredient_base(ingredient.name)
            self.session.add(self._to_recipe_ingredient(recipe_id, base_id, ingredient))

        await self.session.flush()

    async def _resolve_ingredient_base(self, name: str) -> int:
        stmt = (
            select(IngredientBase.id)
            .where(IngredientBase.name == name)
            .order_by(IngredientBase.id.asc())
            .limit(1)
        )
        base_id = (await self.session.execute(stmt)).scalar_one_or_none()
        if base_id is not None:
            return base_id

        base = IngredientBase(name=name)
        self.session.add(base)
        await self.session.flush()
        return base.id

    @staticmethod
    def _to_step(recipe_id: int, step: StepRequest) -> Step:
        return Step(
            recipe_id=recipe_id,
            step_number=step.step_number,
            description=step.description,
            duration=step.duration,
            image_url=step.image_url,
        )

    @staticmethod
    def _to_recipe_ingredient(recipe_id: int, base_id: int, ingredient: IngredientRequest) -> RecipeIngredient:
        return RecipeIngredient(
            recipe_id=recipe_id,
            ingredient_base_id=base_id,
            unit_id=ingredient.unit_id,
            quantity=ingredient.quantity,
            notes=ingredient.notes,
        )

    # --- 상태 전이 ---
    async def update_status(
        self, recipe_id: int, new_status: PublicationStatus, admin_id: uuid.UUID, notes: str
    ) -> None:
        async with transaction(self.session, "레시피 검토 처리 실패"):
            values = {"status": new_status.value}
            if new_status is PublicationStatus.PUBLISHED:
                values["published_at"] = func.now()

            stmt = (
                update(Recipe)
                .where(Recipe.id == recipe_id, Recipe.is_deleted.is_(False))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            if result.rowcount == 0:
                raise RecipeNotFoundException(detail="검토할 레시피를 찾을 수 없습니다.")

            self.session.add(
                Review(recipe_id=recipe_id, admin_id=admin_id, result=new_status.value, notes=notes)
            )

    async def soft_delete_recipe(self, recipe_id: int) -> bool:
        return await self._set_deleted(
            recipe_id, deleted=True, status=PublicationStatus.DELETED, detail="레시피 삭제 실패"
        )

    async def restore_recipe(self, recipe_id: int) -> bool:
        return await self._set_deleted(
            recipe_id, deleted=False, status=PublicationStatus.DRAFT, detail="레시피 복구 실패"
        )

    async def _set_deleted(
        self, recipe_id: int, deleted: bool, status: PublicationStatus, detail: str
    ) -> bool:
        try:
            stmt = (
                update(Recipe)
                .where(Recipe.id == recipe_id, Recipe.is_deleted.is_(not deleted))
                .values(is_deleted=deleted, status=status.value)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            await self.session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("%s: %s", detail, e)
            raise DatabaseException(detail=detail)
