import uuid

import pytest
from unittest.mock import AsyncMock

from core.identity import Identity, Role
from domains.personal_list.exceptions import ListNotFoundException, ListPermissionException
from domains.personal_list.models import PersonalList
from domains.personal_list.service import PersonalListService
from domains.recipe.exceptions import RecipeNotFoundException

OWNER = Identity(user_id=uuid.uuid4(), role=Role.READER)


@pytest.mark.asyncio
class TestPersonalListService:
    @pytest.fixture
    def list_repo(self):
        return AsyncMock()

    @pytest.fixture
    def recipe_repo(self):
        repo = AsyncMock()
        repo.exists_active_recipe.return_value = True
        return repo

    @pytest.fixture
    def service(self, list_repo, recipe_repo):
        return PersonalListService(OWNER, list_repo, recipe_repo)

    async def test_delete_checks_owner_before_transaction(self, service, list_repo):
        list_repo.get_list.return_value = PersonalList(id=1, user_id=uuid.uuid4(), name="x")

        with pytest.raises(ListPermissionException):
            await service.delete_list(1)
        list_repo.delete_list.assert_not_called()

    async def test_delete_missing_list(self, service, list_repo):
        list_repo.get_list.return_value = None

        with pytest.raises(ListNotFoundException):
            await service.delete_list(1)

    async def test_toggle_missing_recipe(self, service, list_repo, recipe_repo):
        list_repo.get_list.return_value = PersonalList(id=1, user_id=OWNER.user_id, name="x")
        recipe_repo.exists_active_recipe.return_value = False

        with pytest.raises(RecipeNotFoundException):
            await service.toggle_recipe(1, 2)
        list_repo.toggle_recipe.assert_not_called()

    async def test_toggle_recipe(self, service, list_repo):
        list_repo.get_list.return_value = PersonalList(id=1, user_id=OWNER.user_id, name="x")
        list_repo.toggle_recipe.return_value = "added"

        result = await service.toggle_recipe(1, 2)

        assert result.action == "added"
        list_repo.toggle_recipe.assert_called_once_with(1, 2)
