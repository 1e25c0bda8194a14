import logging

from core import security
from core.identity import Identity, Role

from domains.user.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    UserNotFoundException,
)
from domains.user.repository import UserRepository
from domains.user.schemas import SignUpRequest, LogInRequest, LogInResponse, InfoResponse
from domains.user.models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def sign_up(self, request: SignUpRequest) -> User:
        if await self.user_repo.get_user_by_email(request.email):
            raise DuplicateEmailException()

        user = User(
            name=request.name,
            surname=request.surname,
            email=request.email,
            password=security.hash_password(request.password),
            role=Role.READER.value,
        )
        saved_user = await self.user_repo.save_user(user)
        logger.info("registered user %s", saved_user.id)
        return saved_user

    async def log_in(self, request: LogInRequest) -> LogInResponse:
        user = await self.user_repo.get_user_by_email(email=request.email)

        if not user or not security.verify_password(request.password, user.password):
            raise InvalidCredentialsException()

        role = Role(user.role)
        access_token = security.create_jwt(user_id=user.id, role=role)

        return LogInResponse(token=access_token, role=role)

    async def get_user_info(self, identity: Identity) -> InfoResponse:
        user = await self.user_repo.get_user_by_id(identity.user_id)

        if not user:
            raise UserNotFoundException()

        return InfoResponse.model_validate(user)
