"""
Per-request log correlation.
"""

import time
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from edumorph.infra.config.logging_config import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"

log = get_logger("http")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the log context and reports each request's outcome.

    A caller-supplied ``X-Request-ID`` is reused, otherwise one is generated; it
    is echoed on the response either way. Streaming responses are reported when
    their headers are sent, not when the body finishes.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_context(
            request_id=request_id, method=request.method, path=request.url.path
        )
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            log.exception("request.error", duration_ms=self._elapsed_ms(started))
            raise
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            log.info(
                "request.done",
                status_code=response.status_code,
                duration_ms=self._elapsed_ms(started),
            )
            return response
        finally:
            clear_context()

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 1)
