import uuid

import pytest
from unittest.mock import AsyncMock

from core.identity import Identity, Role
from domains.interaction.exceptions import InvalidScoreException
from domains.interaction.schemas import RateRequest
from domains.interaction.service import InteractionService
from domains.recipe.exceptions import RecipeNotFoundException

CALLER = Identity(user_id=uuid.uuid4(), role=Role.READER)


@pytest.mark.asyncio
class TestInteractionService:
    @pytest.fixture
    def interaction_repo(self):
        return AsyncMock()

    @pytest.fixture
    def recipe_repo(self):
        repo = AsyncMock()
        repo.exists_active_recipe.return_value = True
        return repo

    @pytest.fixture
    def service(self, interaction_repo, recipe_repo):
        return InteractionService(CALLER, interaction_repo, recipe_repo)

    async def test_toggle_like(self, service, interaction_repo):
        interaction_repo.toggle_like.return_value = "removed"

        result = await service.toggle_like(3)

        assert result.action == "removed"
        interaction_repo.toggle_like.assert_called_once_with(3, CALLER.user_id)

    async def test_toggle_favorite_on_deleted_recipe(self, service, interaction_repo, recipe_repo):
        recipe_repo.exists_active_recipe.return_value = False

        with pytest.raises(RecipeNotFoundException):
            await service.toggle_favorite(3)
        interaction_repo.toggle_favorite.assert_not_called()

    @pytest.mark.parametrize("score", [0, 6, -1])
    async def test_rate_out_of_range(self, service, interaction_repo, score):
        with pytest.raises(InvalidScoreException):
            await service.rate_recipe(3, RateRequest(puntuacion=score))
        interaction_repo.upsert_rating.assert_not_called()

    async def test_rate_updated(self, service, interaction_repo):
        interaction_repo.upsert_rating.return_value = "updated"

        result = await service.rate_recipe(3, RateRequest(puntuacion=4))

        assert result.action == "updated"
        interaction_repo.upsert_rating.assert_called_once_with(3, CALLER.user_id, 4)
