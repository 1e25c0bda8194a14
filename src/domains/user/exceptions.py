from core.exception.exceptions import BaseCustomException, ConflictException, NotFoundException


class DuplicateEmailException(ConflictException):
    def __init__(self, detail: str = "이미 가입된 이메일입니다."):
        super().__init__(detail=detail, code="EMAIL_CONFLICT")


class InvalidCredentialsException(BaseCustomException):
    def __init__(self, detail: str = "이메일 또는 비밀번호가 올바르지 않습니다."):
        super().__init__(status_code=401, detail=detail, code="INVALID_CREDENTIALS")


class UserNotFoundException(NotFoundException):
    def __init__(self, detail: str = "사용자를 찾을 수 없습니다."):
        super().__init__(detail=detail, code="USER_NOT_FOUND")
