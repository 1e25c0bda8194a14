# src/core/exception/exceptions.py
from pydantic import BaseModel, Field
from typing import Any


class BaseCustomException(Exception):
    def __init__(self, status_code: int, code: str, detail: str):
        self.status_code = status_code
        self.code = code
        self.detail = detail
        super().__init__(detail)


class InvalidArgumentException(BaseCustomException):
    def __init__(self, detail: str = "입력값이 올바르지 않습니다.", code: str = "INVALID_ARGUMENT"):
        super().__init__(status_code=400, code=code, detail=detail)


class UnauthorizedException(BaseCustomException):
    def __init__(self, detail: str = "인증 토큰이 필요합니다."):
        super().__init__(status_code=401, code="UNAUTHORIZED", detail=detail)


class TokenExpiredException(BaseCustomException):
    def __init__(self, detail: str = "토큰이 유효하지 않거나 만료되었습니다."):
        super().__init__(status_code=401, code="TOKEN_EXPIRED", detail=detail)


class ForbiddenException(BaseCustomException):
    def __init__(self, detail: str = "접근 권한이 없습니다.", code: str = "FORBIDDEN"):
        super().__init__(status_code=403, code=code, detail=detail)


class AdminRequiredException(ForbiddenException):
    def __init__(self, detail: str = "관리자 권한이 필요합니다."):
        super().__init__(detail=detail, code="ADMIN_REQUIRED")


class NotFoundException(BaseCustomException):
    def __init__(self, detail: str = "데이터가 없습니다.", code: str = "NOT_FOUND"):
        super().__init__(status_code=404, code=code, detail=detail)


class ConflictException(BaseCustomException):
    def __init__(self, detail: str = "이미 존재하는 데이터입니다.", code: str = "CONFLICT"):
        super().__init__(status_code=409, code=code, detail=detail)


class DatabaseException(BaseCustomException):
    def __init__(self, detail: str = "데이터베이스 에러"):
        super().__init__(status_code=500, code="DB_ERROR", detail=detail)


class UnexpectedException(BaseCustomException):
    def __init__(self, detail: str = "서버 내부 오류"):
        super().__init__(status_code=500, code="SERVER_ERROR", detail=detail)


class GlobalErrorResponse(BaseModel):
    success: bool = Field(False, examples=[False])
    status_code: int = Field(..., examples=[400])
    code: str = Field(..., examples=["ERROR_CODE_STRING"])
    detail: str = Field(..., examples=["에러에 대한 상세 메시지입니다."])
    errors: list[Any] | None = Field(None, description="유효성 검사 에러 시 상세 내용")
