from core.exception.exceptions import ForbiddenException, NotFoundException


class ListNotFoundException(NotFoundException):
    def __init__(self, detail: str = "리스트를 찾을 수 없습니다."):
        super().__init__(detail=detail, code="LIST_NOT_FOUND")


class ListPermissionException(ForbiddenException):
    def __init__(self, detail: str = "이 리스트에 대한 권한이 없습니다."):
        super().__init__(detail=detail, code="LIST_FORBIDDEN")
