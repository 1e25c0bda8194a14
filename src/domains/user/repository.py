import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio.session import AsyncSession

from core.exception.exceptions import DatabaseException, UnexpectedException
from domains.user.exceptions import DuplicateEmailException
from domains.user.models import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_user(self, user: User) -> User:
        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
            return user
        except IntegrityError:
            # 동시 가입으로 중복 체크를 통과한 경우
            await self.session.rollback()
            raise DuplicateEmailException()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("유저 저장 실패: %s", e)
            raise DatabaseException(detail="유저 저장 실패")

    async def _get_one(self, *where_conditions) -> User | None:
        try:
            stmt = select(User).where(*where_conditions)
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("DB 조회 오류: %s", e)
            raise DatabaseException(detail="DB 조회 오류")
        except Exception as e:
            logger.exception("예기치 못한 에러")
            raise UnexpectedException(detail="예기치 못한 에러") from e

    async def get_user_by_email(self, email: str) -> User | None:
        return await self._get_one(User.email == email)

    async def get_user_by_id(self, user_id) -> User | None:
        return await self._get_one(User.id == user_id)
