import os

# Settings() 는 import 시점에 검증되므로 앱 import 전에 채워 둠
os.environ.setdefault("DB_USER", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from main import app
from core import security
from core.database import Base, get_db, get_redis
from core.identity import Role
from domains.recipe.models import Difficulty, PublicationStatus
from domains.recipe.repository import RecipeRepository
from domains.recipe.schemas import IngredientRequest, RecipeRequest, StepRequest
from domains.user.models import User

# 1. 테스트용 DB URL (SQLite In-Memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeRedis:
    """조회수 쿨다운에 쓰는 SET NX EX 만 흉내내는 메모리 저장소 (TTL 은 무시)"""

    def __init__(self):
        self.store = {}

    async def set(self, name, value, ex=None, nx=False):
        if nx and name in self.store:
            return None
        self.store[name] = value
        return True

    async def get(self, name):
        return self.store.get(name)

    async def delete(self, *names):
        return sum(1 for name in names if self.store.pop(name, None) is not None)

    async def aclose(self):
        pass


@pytest_asyncio.fixture
async def db_engine():
    # In-Memory SQLite는 연결 공유를 위해 StaticPool 필수
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """데이터 준비 / 검증용 세션"""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest_asyncio.fixture
async def client(session_factory, fake_redis):
    # 요청마다 새 세션 (운영의 get_db 와 동일한 수명)
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    async def _get_test_redis():
        yield fake_redis

    app.dependency_overrides[get_db] = _get_test_db
    app.dependency_overrides[get_redis] = _get_test_redis

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


# --- 사용자 / 토큰 ---
async def create_user(session: AsyncSession, email: str, role: Role, name: str = "테스트") -> User:
    user = User(
        name=name,
        surname="사용자",
        email=email,
        password=security.hash_password("password123!"),
        role=role.value,
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


def auth_header(user: User) -> dict:
    return {"Authorization": f"Bearer {security.create_jwt(user.id, Role(user.role))}"}


@pytest_asyncio.fixture
async def author(db_session):
    return await create_user(db_session, "author@chefsphere.com", Role.AUTHOR, name="작성자")


@pytest_asyncio.fixture
async def reader(db_session):
    return await create_user(db_session, "reader@chefsphere.com", Role.READER, name="독자")


@pytest_asyncio.fixture
async def admin(db_session):
    return await create_user(db_session, "admin@chefsphere.com", Role.ADMIN, name="관리자")


@pytest.fixture
def author_headers(author):
    return auth_header(author)


@pytest.fixture
def reader_headers(reader):
    return auth_header(reader)


@pytest.fixture
def admin_headers(admin):
    return auth_header(admin)


# --- 레시피 ---
def make_recipe_request(title: str = "김치찌개", steps: int = 2, ingredients: tuple = ("김치",)) -> RecipeRequest:
    return RecipeRequest(
        title=title,
        description="얼큰한 찌개",
        servings=2,
        difficulty=Difficulty.EASY,
        prep_time=30,
        steps=[StepRequest(step_number=i, description=f"{i}단계") for i in range(1, steps + 1)],
        ingredients=[IngredientRequest(name=name, quantity=1) for name in ingredients],
        categories=[],
    )


@pytest_asyncio.fixture
async def published_recipe(db_session, author, admin) -> int:
    """작성자가 등록하고 관리자가 공개한 레시피 id"""
    repo = RecipeRepository(db_session)
    recipe_id = await repo.create_recipe(author.id, make_recipe_request())
    await repo.update_status(recipe_id, PublicationStatus.PUBLISHED, admin.id, "")
    return recipe_id


@pytest.fixture
def recipe_request():
    """레시피 요청 생성 함수 (인자로 제목/단계 수/재료 조절)"""
    return make_recipe_request


@pytest.fixture
def user_factory(db_session):
    async def _create(email: str, role: Role = Role.READER, name: str = "테스트") -> User:
        return await create_user(db_session, email, role, name=name)

    return _create
