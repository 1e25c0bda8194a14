from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_db, get_redis
from core.exception.exceptions import AdminRequiredException
from core.identity import Identity, is_admin
from core.security import decode_jwt, get_access_token, get_optional_access_token
from domains.comment.repository import CommentRepository
from domains.comment.service import CommentService
from domains.interaction.repository import InteractionRepository
from domains.interaction.service import InteractionService
from domains.personal_list.repository import PersonalListRepository
from domains.personal_list.service import PersonalListService
from domains.recipe.repository import RecipeRepository
from domains.recipe.service import RecipeService
from domains.user.repository import UserRepository
from domains.user.service import UserService


# --- 인증 ---
async def get_current_identity(
    req: Request,
    access_token: str = Depends(get_access_token),
) -> Identity:
    identity = decode_jwt(access_token)
    req.state.identity = identity
    return identity


async def get_optional_identity(
    req: Request,
    access_token: str | None = Depends(get_optional_access_token),
) -> Identity | None:
    # 헤더가 없으면 익명, 있는데 잘못된 토큰이면 401
    if access_token is None:
        return None
    identity = decode_jwt(access_token)
    req.state.identity = identity
    return identity


async def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if not is_admin(identity):
        raise AdminRequiredException()
    return identity


async def get_viewer_key(
    req: Request,
    identity: Identity | None = Depends(get_optional_identity),
) -> str:
    if identity is not None:
        return identity.viewer_key
    host = req.client.host if req.client else "unknown"
    return f"IP:{host}"


# --- 유저 관련 DI ---
def get_user_repo(session: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(session)


def get_user_service(user_repo: UserRepository = Depends(get_user_repo)) -> UserService:
    return UserService(user_repo)


# --- 레시피 관련 DI ---
def get_recipe_repo(session: AsyncSession = Depends(get_db)) -> RecipeRepository:
    return RecipeRepository(session)


def get_recipe_service(
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
    redis: Redis = Depends(get_redis),
) -> RecipeService:
    return RecipeService(recipe_repo=recipe_repo, redis=redis)


# --- 좋아요 / 즐겨찾기 / 평점 ---
def get_interaction_repo(session: AsyncSession = Depends(get_db)) -> InteractionRepository:
    return InteractionRepository(session)


def get_interaction_service(
    identity: Identity = Depends(get_current_identity),
    interaction_repo: InteractionRepository = Depends(get_interaction_repo),
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
) -> InteractionService:
    return InteractionService(
        identity=identity, interaction_repo=interaction_repo, recipe_repo=recipe_repo
    )


# --- 개인 리스트 ---
def get_list_repo(session: AsyncSession = Depends(get_db)) -> PersonalListRepository:
    return PersonalListRepository(session)


def get_list_service(
    identity: Identity = Depends(get_current_identity),
    list_repo: PersonalListRepository = Depends(get_list_repo),
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
) -> PersonalListService:
    return PersonalListService(identity=identity, list_repo=list_repo, recipe_repo=recipe_repo)


# --- 댓글 ---
def get_comment_repo(session: AsyncSession = Depends(get_db)) -> CommentRepository:
    return CommentRepository(session)


def get_comment_service(
    comment_repo: CommentRepository = Depends(get_comment_repo),
    recipe_repo: RecipeRepository = Depends(get_recipe_repo),
) -> CommentService:
    return CommentService(comment_repo=comment_repo, recipe_repo=recipe_repo)
