import uuid

from datetime import datetime, timedelta, timezone
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from passlib.context import CryptContext
from jose import jwt, JWTError

from core.config import settings
from core.exception.exceptions import TokenExpiredException, UnauthorizedException
from core.identity import Identity, Role

JWT_ALGORITHM = "HS256"
JWT_SECRET_KEY = settings.JWT_SECRET_KEY.get_secret_value()

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")
security_scheme = HTTPBearer(auto_error=False)


# --- 비밀번호 관련 ---
def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# --- JWT 토큰 관련 ---
def create_jwt(user_id: uuid.UUID | str, role: Role) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": role.value,
        "iat": now,
        "exp": now + timedelta(days=settings.JWT_EXPIRE_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_jwt(access_token: str) -> Identity:
    try:
        payload = jwt.decode(access_token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError:
        raise TokenExpiredException()

    user_id = payload.get("sub")
    role = payload.get("role")
    if user_id is None or role is None:
        raise TokenExpiredException()

    try:
        return Identity(user_id=uuid.UUID(user_id), role=Role(role))
    except ValueError:
        raise TokenExpiredException()


# --- 토큰 ---
def get_access_token(
    auth_header: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> str:
    if auth_header is None:
        raise UnauthorizedException()
    return auth_header.credentials


def get_optional_access_token(
    auth_header: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> str | None:
    if auth_header is None:
        return None
    return auth_header.credentials
