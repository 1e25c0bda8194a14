from core.identity import Identity
from core.schemas import ToggleResponse
from domains.interaction.exceptions import InvalidScoreException
from domains.interaction.repository import InteractionRepository
from domains.interaction.schemas import RateRequest, RateResponse
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository

LIKE_MESSAGES = {"added": "좋아요를 눌렀습니다.", "removed": "좋아요를 취소했습니다."}
FAVORITE_MESSAGES = {"added": "즐겨찾기에 추가했습니다.", "removed": "즐겨찾기에서 삭제했습니다."}
RATE_MESSAGES = {"created": "평점이 등록되었습니다.", "updated": "평점이 수정되었습니다."}


class InteractionService:
    def __init__(
        self,
        identity: Identity,
        interaction_repo: InteractionRepository,
        recipe_repo: RecipeRepository,
    ):
        self.identity = identity
        self.interaction_repo = interaction_repo
        self.recipe_repo = recipe_repo

    async def toggle_like(self, recipe_id: int) -> ToggleResponse:
        await self._ensure_recipe(recipe_id)
        action = await self.interaction_repo.toggle_like(recipe_id, self.identity.user_id)
        return ToggleResponse(action=action, message=LIKE_MESSAGES[action])

    async def toggle_favorite(self, recipe_id: int) -> ToggleResponse:
        await self._ensure_recipe(recipe_id)
        action = await self.interaction_repo.toggle_favorite(recipe_id, self.identity.user_id)
        return ToggleResponse(action=action, message=FAVORITE_MESSAGES[action])

    async def rate_recipe(self, recipe_id: int, request: RateRequest) -> RateResponse:
        if not 1 <= request.score <= 5:
            raise InvalidScoreException()

        await self._ensure_recipe(recipe_id)
        action = await self.interaction_repo.upsert_rating(
            recipe_id, self.identity.user_id, request.score
        )
        return RateResponse(action=action, message=RATE_MESSAGES[action])

    async def _ensure_recipe(self, recipe_id: int) -> None:
        if not await self.recipe_repo.exists_active_recipe(recipe_id):
            raise RecipeNotFoundException()
