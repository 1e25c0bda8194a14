import uuid
from typing import Literal

from sqlalchemy import select, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import transaction
from domains.interaction.exceptions import RatingConflictException
from domains.interaction.models import Favorite, Like, Rating
from domains.interaction.toggle import ToggleAction, ToggleTarget, toggle_link
from domains.recipe.models import Recipe

LIKE_TARGET = ToggleTarget(
    link_model=Like,
    counter=Recipe.like_count,
    counter_key="recipe_id",
    detail="좋아요 처리 실패",
)

FAVORITE_TARGET = ToggleTarget(
    link_model=Favorite,
    counter=Recipe.save_count,
    counter_key="recipe_id",
    detail="즐겨찾기 처리 실패",
)


class InteractionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def toggle_like(self, recipe_id: int, user_id: uuid.UUID) -> ToggleAction:
        return await toggle_link(self.session, LIKE_TARGET, recipe_id=recipe_id, user_id=user_id)

    async def toggle_favorite(self, recipe_id: int, user_id: uuid.UUID) -> ToggleAction:
        return await toggle_link(self.session, FAVORITE_TARGET, recipe_id=recipe_id, user_id=user_id)

    async def upsert_rating(
        self, recipe_id: int, user_id: uuid.UUID, score: int
    ) -> Literal["created", "updated"]:
        """(레시피, 사용자)당 평점은 하나. 있으면 갱신, 없으면 생성"""
        async with transaction(self.session, "평점 저장 실패", conflict=RatingConflictException()):
            stmt = (
                select(Rating.id)
                .where(Rating.recipe_id == recipe_id, Rating.user_id == user_id)
                .with_for_update()
            )
            rating_id = (await self.session.execute(stmt)).scalar_one_or_none()

            if rating_id is not None:
                await self.session.execute(
                    update(Rating)
                    .where(Rating.id == rating_id)
                    .values(score=score, rated_at=func.now())
                    .execution_options(synchronize_session=False)
                )
                action = "updated"
            else:
                self.session.add(Rating(recipe_id=recipe_id, user_id=user_id, score=score))
                action = "created"

        return action
