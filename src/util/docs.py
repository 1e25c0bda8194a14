from typing import Type

from core.exception.exceptions import BaseCustomException, GlobalErrorResponse


# Exception 클래스들을 받아서 Swagger responses 명세를 자동으로 생성해주는 함수
def create_error_response(*exception_classes: Type[BaseCustomException]):
    responses = {}

    for exc_class in exception_classes:
        # 기본 인자로 만들어 status_code / code / detail 추출
        exc = exc_class()
        status_code = exc.status_code

        if status_code not in responses:
            responses[status_code] = {
                "model": GlobalErrorResponse,
                "content": {"application/json": {"examples": {}}},
            }

        # 같은 상태 코드를 쓰는 예외는 examples 드롭다운에 나란히 표시
        responses[status_code]["content"]["application/json"]["examples"][exc_class.__name__] = {
            "summary": exc.detail,
            "value": {
                "success": False,
                "status_code": status_code,
                "code": exc.code,
                "detail": exc.detail,
            },
        }

    return responses
