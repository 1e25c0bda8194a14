import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import redis.asyncio as redis
from fastapi import Request
from sqlalchemy import BigInteger, Integer
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from core.exception.exceptions import DatabaseException

logger = logging.getLogger(__name__)

# SQLite 는 INTEGER PRIMARY KEY 만 자동 증가함
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


class Base(DeclarativeBase):
    pass


class Database:
    """
    엔진(커넥션 풀)과 세션 팩토리를 묶은 핸들.
    앱 lifespan 에서 생성/해제하고 app.state 를 통해 주입한다.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
            autocommit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        # 어떤 경로로 빠져나가도 커넥션은 풀로 반환됨
        async with self.session_factory() as session:
            yield session

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


async def get_redis(request: Request) -> AsyncIterator[redis.Redis]:
    client = redis.Redis(connection_pool=request.app.state.redis_pool)
    try:
        yield client
    finally:
        await client.aclose()


@asynccontextmanager
async def transaction(
    session: AsyncSession, detail: str, conflict: Exception | None = None
) -> AsyncIterator[AsyncSession]:
    """
    여러 쿼리를 하나의 트랜잭션으로 묶는다.
    정상 종료 시 commit, 어떤 예외든 rollback 후 다시 던진다.
    conflict 가 주어지면 unique 제약 위반을 해당 예외로 바꾼다.
    """
    try:
        yield session
        await session.commit()
    except IntegrityError as e:
        await session.rollback()
        if conflict is not None:
            raise conflict from e
        logger.error("%s: %s", detail, e)
        raise DatabaseException(detail=detail) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error("%s: %s", detail, e)
        raise DatabaseException(detail=detail) from e
    except Exception:
        await session.rollback()
        raise
