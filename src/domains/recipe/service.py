import logging
import math

from redis.asyncio import Redis

from core.config import settings
from core.identity import Identity, can_manage_recipe, is_admin
from domains.recipe.exceptions import (
    InvalidPaginationException,
    InvalidStatusException,
    MissingRecipeFieldException,
    RecipeNotFoundException,
    RecipePermissionException,
)
from domains.recipe.models import AuthorRole, PublicationStatus
from domains.recipe.query import RecipeListFilter
from domains.recipe.repository import RecipeRepository
from domains.recipe.schemas import (
    Pagination,
    RecipeDetail,
    RecipeIngredientResponse,
    RecipeListResponse,
    RecipeRequest,
    RecipeSummary,
    StatusUpdateRequest,
    StepResponse,
)

logger = logging.getLogger(__name__)

REVIEW_STATUSES = (PublicationStatus.PUBLISHED, PublicationStatus.REJECTED)


class RecipeService:
    def __init__(
        self,
        recipe_repo: RecipeRepository,
        redis: Redis,
        view_cooldown_hours: int = settings.VIEW_COOLDOWN_HOURS,
    ):
        self.recipe_repo = recipe_repo
        self.redis = redis
        self.view_cooldown_seconds = view_cooldown_hours * 60 * 60

    async def list_recipes(self, filters: RecipeListFilter, page: int, limit: int) -> RecipeListResponse:
        if page < 1 or limit < 1:
            raise InvalidPaginationException()

        total = await self.recipe_repo.count_recipes(filters)
        rows = await self.recipe_repo.list_recipes(filters, page, limit)

        return RecipeListResponse(
            data=[RecipeSummary.model_validate(dict(row)) for row in rows],
            pagination=Pagination(
                total=total,
                total_pages=math.ceil(total / limit),
                page=page,
                limit=limit,
            ),
        )

    async def get_recipe(self, recipe_id: int, viewer_key: str) -> RecipeDetail:
        recipe = await self.recipe_repo.get_published_recipe(recipe_id)
        if not recipe:
            raise RecipeNotFoundException(detail="레시피가 없거나 아직 공개되지 않았습니다.")

        view_count = recipe.view_count
        if await self._register_view(recipe_id, viewer_key):
            try:
                await self.recipe_repo.increment_view_count(recipe_id)
            except Exception:
                # 집계에 실패한 조회는 쿨다운 표식도 되돌림
                await self.redis.delete(self._view_key(recipe_id, viewer_key))
                raise
            view_count += 1

        steps = await self.recipe_repo.get_steps(recipe_id)
        ingredients = await self.recipe_repo.get_ingredients(recipe_id)
        categories = await self.recipe_repo.get_category_ids(recipe_id)

        return RecipeDetail(
            id=recipe.id,
            title=recipe.title,
            description=recipe.description,
            servings=recipe.servings,
            difficulty=recipe.difficulty,
            prep_time=recipe.prep_time,
            status=recipe.status,
            like_count=recipe.like_count,
            save_count=recipe.save_count,
            view_count=view_count,
            created_at=recipe.created_at,
            published_at=recipe.published_at,
            steps=[StepResponse.model_validate(step) for step in steps],
            ingredients=[RecipeIngredientResponse(**row) for row in ingredients],
            categories=categories,
        )

    @staticmethod
    def _view_key(recipe_id: int, viewer_key: str) -> str:
        return f"VIEW:{recipe_id}:{viewer_key}"

    async def _register_view(self, recipe_id: int, viewer_key: str) -> bool:
        # 쿨다운 동안 같은 조회자 키가 남아 있으면 집계하지 않음
        created = await self.redis.set(
            name=self._view_key(recipe_id, viewer_key),
            value="1",
            ex=self.view_cooldown_seconds,
            nx=True,
        )
        return bool(created)

    async def create_recipe(self, identity: Identity, request: RecipeRequest) -> int:
        self._validate_payload(request)

        recipe_id = await self.recipe_repo.create_recipe(identity.user_id, request)
        logger.info("recipe %s created by %s (En_Revision)", recipe_id, identity.user_id)
        return recipe_id

    async def update_recipe(self, identity: Identity, recipe_id: int, request: RecipeRequest) -> None:
        self._validate_payload(request)

        author = await self.recipe_repo.get_author(recipe_id, identity.user_id)
        if not author:
            logger.warning("user %s is not an author of recipe %s", identity.user_id, recipe_id)
            raise RecipePermissionException(detail="이 레시피의 작성자가 아닙니다.")

        if author.author_role != AuthorRole.PRINCIPAL.value and not author.can_edit:
            logger.warning("user %s has no edit permission on recipe %s", identity.user_id, recipe_id)
            raise RecipePermissionException(detail="이 레시피를 수정할 권한이 없습니다.")

        await self.recipe_repo.replace_recipe(recipe_id, request)
        logger.info("recipe %s replaced by %s and sent back to review", recipe_id, identity.user_id)

    async def update_status(self, identity: Identity, recipe_id: int, request: StatusUpdateRequest) -> PublicationStatus:
        try:
            new_status = PublicationStatus(request.new_status)
        except ValueError:
            raise InvalidStatusException()

        if new_status not in REVIEW_STATUSES:
            raise InvalidStatusException()

        await self.recipe_repo.update_status(
            recipe_id=recipe_id,
            new_status=new_status,
            admin_id=identity.user_id,
            notes=request.reviewer_notes or "",
        )
        logger.info("recipe %s reviewed by %s: %s", recipe_id, identity.user_id, new_status.value)
        return new_status

    async def delete_recipe(self, identity: Identity, recipe_id: int) -> None:
        await self._check_manage_permission(identity, recipe_id)

        if not await self.recipe_repo.soft_delete_recipe(recipe_id):
            raise RecipeNotFoundException()

    async def restore_recipe(self, identity: Identity, recipe_id: int) -> None:
        await self._check_manage_permission(identity, recipe_id)

        if not await self.recipe_repo.restore_recipe(recipe_id):
            raise RecipeNotFoundException(detail="레시피가 없거나 이미 활성 상태입니다.")

    async def _check_manage_permission(self, identity: Identity, recipe_id: int) -> None:
        is_principal = False
        if not is_admin(identity):
            author = await self.recipe_repo.get_author(recipe_id, identity.user_id)
            is_principal = author is not None and author.author_role == AuthorRole.PRINCIPAL.value

        if not can_manage_recipe(identity, is_principal_author=is_principal):
            logger.warning("user %s denied managing recipe %s", identity.user_id, recipe_id)
            raise RecipePermissionException(
                detail="대표 작성자 또는 관리자만 레시피를 삭제/복구할 수 있습니다."
            )

    @staticmethod
    def _validate_payload(request: RecipeRequest) -> None:
        if (
            not request.title
            or not request.servings
            or request.difficulty is None
            or not request.steps
            or not request.ingredients
        ):
            raise MissingRecipeFieldException()
