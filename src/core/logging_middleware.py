import json
import logging
import random
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

# 구조화 로그 전용 로거. root 로 전파하지 않아 중복 출력되지 않음
structured_logger = logging.getLogger("api.structured_log")
structured_logger.propagate = False

if not structured_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    structured_logger.addHandler(handler)
    structured_logger.setLevel(logging.INFO)


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """
    요청 1건당 JSON 한 줄을 남긴다.
    - 5xx 는 항상 기록
    - 느린 요청(> SLOW_THRESHOLD_MS)은 항상 기록
    - 나머지는 sample_rate 비율로 기록
    """

    SLOW_THRESHOLD_MS = 500

    def __init__(self, app, sample_rate: float = 1.0):
        super().__init__(app)
        self.sample_rate = sample_rate

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = None
        error_details = None
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            error_details = str(e)
            raise
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000

            should_log = (
                status_code >= 500
                or duration_ms > self.SLOW_THRESHOLD_MS
                or random.random() < self.sample_rate
            )

            if should_log:
                identity = getattr(request.state, "identity", None)

                log_payload = {
                    "timestamp": time.time(),
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                    "query_params": dict(request.query_params),
                    "error": error_details,
                    "user_id": str(identity.user_id) if identity else None,
                    "role": identity.role.value if identity else None,
                }
                structured_logger.info(json.dumps(log_payload))

        return response
