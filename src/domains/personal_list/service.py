import logging

from core.identity import Identity
from core.schemas import ToggleResponse
from domains.personal_list.exceptions import ListNotFoundException, ListPermissionException
from domains.personal_list.models import PersonalList
from domains.personal_list.repository import PersonalListRepository
from domains.personal_list.schemas import CreateListRequest, ListResponse
from domains.recipe.exceptions import RecipeNotFoundException
from domains.recipe.repository import RecipeRepository

logger = logging.getLogger(__name__)


class PersonalListService:
    def __init__(
        self,
        identity: Identity,
        list_repo: PersonalListRepository,
        recipe_repo: RecipeRepository,
    ):
        self.identity = identity
        self.list_repo = list_repo
        self.recipe_repo = recipe_repo

    async def create_list(self, request: CreateListRequest) -> int:
        new_list = PersonalList(
            user_id=self.identity.user_id,
            name=request.name,
            description=request.description,
        )
        saved_list = await self.list_repo.create_list(new_list)
        return saved_list.id

    async def get_lists(self) -> list[ListResponse]:
        lists = await self.list_repo.get_lists(self.identity.user_id)
        return [ListResponse.model_validate(item) for item in lists]

    async def delete_list(self, list_id: int) -> None:
        target = await self.list_repo.get_list(list_id)

        if target is None:
            raise ListNotFoundException()
        if target.user_id != self.identity.user_id:
            logger.warning("list %s delete denied for user %s", list_id, self.identity.user_id)
            raise ListPermissionException()

        await self.list_repo.delete_list(list_id)

    async def toggle_recipe(self, list_id: int, recipe_id: int) -> ToggleResponse:
        target = await self.list_repo.get_list(list_id)

        # 없는 리스트도 남의 리스트와 같이 403
        if target is None or target.user_id != self.identity.user_id:
            logger.warning("list %s toggle denied for user %s", list_id, self.identity.user_id)
            raise ListPermissionException(detail="리스트가 없거나 권한이 없습니다.")

        if not await self.recipe_repo.exists_active_recipe(recipe_id):
            raise RecipeNotFoundException()

        action = await self.list_repo.toggle_recipe(list_id, recipe_id)
        message = "리스트에 추가했습니다." if action == "added" else "리스트에서 제거했습니다."
        return ToggleResponse(action=action, message=message)
