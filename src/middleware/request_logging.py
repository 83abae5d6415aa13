from __future__ import annotations

import logging
import time
from typing import Dict, Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "x-authorization", "cookie", "set-cookie"})
REDACTED = "[REDACTED]"


def redact_headers(headers: Iterable[tuple]) -> Dict[str, str]:
    redacted = {}
    for key, value in headers:
        name = key.lower()
        redacted[name] = REDACTED if name in SENSITIVE_HEADERS else value
    return redacted


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request with method, path, status and duration.

    Request headers are logged at DEBUG level with credentials redacted.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Headers: {redact_headers(request.headers.items())}")

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                f"{request.method} {request.url.path} failed after {elapsed_ms:.1f}ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response
