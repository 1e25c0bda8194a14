from core.exception.exceptions import ConflictException, InvalidArgumentException


class ToggleConflictException(ConflictException):
    def __init__(self, detail: str = "동시에 같은 요청이 처리되었습니다. 다시 시도해주세요."):
        super().__init__(detail=detail, code="TOGGLE_CONFLICT")


class RatingConflictException(ConflictException):
    def __init__(self, detail: str = "같은 레시피에 대한 평점이 동시에 저장되었습니다. 다시 시도해주세요."):
        super().__init__(detail=detail, code="RATING_CONFLICT")


class InvalidScoreException(InvalidArgumentException):
    def __init__(self, detail: str = "평점은 1에서 5 사이의 정수여야 합니다."):
        super().__init__(detail=detail, code="INVALID_SCORE")
