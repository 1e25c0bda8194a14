from core.exception.exceptions import ForbiddenException, InvalidArgumentException, NotFoundException


class RecipeNotFoundException(NotFoundException):
    def __init__(self, detail: str = "레시피를 찾을 수 없습니다."):
        super().__init__(detail=detail, code="RECIPE_NOT_FOUND")


class RecipePermissionException(ForbiddenException):
    def __init__(self, detail: str = "이 레시피에 대한 권한이 없습니다."):
        super().__init__(detail=detail, code="RECIPE_FORBIDDEN")


class InvalidPaginationException(InvalidArgumentException):
    def __init__(self, detail: str = "페이지 파라미터(page, limit)가 올바르지 않습니다."):
        super().__init__(detail=detail, code="INVALID_PAGINATION")


class InvalidStatusException(InvalidArgumentException):
    def __init__(self, detail: str = "상태는 Publicada 또는 Rechazada 여야 합니다."):
        super().__init__(detail=detail, code="INVALID_STATUS")


class MissingRecipeFieldException(InvalidArgumentException):
    def __init__(
        self,
        detail: str = "필수 항목(titulo, porciones, dificultad, pasos, ingredientes)이 누락되었습니다.",
    ):
        super().__init__(detail=detail, code="MISSING_RECIPE_FIELD")
