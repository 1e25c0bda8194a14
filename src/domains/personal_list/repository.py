import logging
import uuid

from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import transaction
from core.exception.exceptions import DatabaseException
from domains.interaction.toggle import ToggleAction, ToggleTarget, toggle_link
from domains.personal_list.models import ListRecipe, PersonalList

logger = logging.getLogger(__name__)

# 리스트 담기는 카운터 없이 연결 행만 토글
LIST_RECIPE_TARGET = ToggleTarget(link_model=ListRecipe, detail="리스트 담기 처리 실패")


class PersonalListRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_list(self, new_list: PersonalList) -> PersonalList:
        try:
            self.session.add(new_list)
            await self.session.commit()
            await self.session.refresh(new_list)
            return new_list
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("리스트 생성 실패: %s", e)
            raise DatabaseException(detail="리스트 생성 실패")

    async def get_lists(self, user_id: uuid.UUID) -> list[PersonalList]:
        stmt = (
            select(PersonalList)
            .where(PersonalList.user_id == user_id)
            .order_by(PersonalList.id.desc())
        )
        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def get_list(self, list_id: int) -> PersonalList | None:
        return await self.session.get(PersonalList, list_id)

    async def delete_list(self, list_id: int) -> None:
        """담긴 레시피 연결과 리스트를 한 트랜잭션에서 삭제"""
        async with transaction(self.session, "리스트 삭제 실패"):
            await self.session.execute(delete(ListRecipe).where(ListRecipe.list_id == list_id))
            await self.session.execute(
                delete(PersonalList)
                .where(PersonalList.id == list_id)
                .execution_options(synchronize_session=False)
            )

    async def toggle_recipe(self, list_id: int, recipe_id: int) -> ToggleAction:
        return await toggle_link(self.session, LIST_RECIPE_TARGET, list_id=list_id, recipe_id=recipe_id)
