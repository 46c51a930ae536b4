"""
Request context middleware: request id tagging, client address resolution
and the per-request access log line
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.handlers import general_exception_handler

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an id and logs it once the response is ready.

    The id is taken from the incoming X-Request-ID header when present and
    echoed back on the response, including the 500 written for an
    unhandled exception.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        client_ip = self._client_ip(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = await general_exception_handler(request, exc)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} from {client_ip} "
            f"- {response.status_code} in {elapsed_ms:.2f}ms"
        )
        return response

    @staticmethod
    def _client_ip(request: Request) -> str:
        """
        Resolve the client address

        Args:
            request: Incoming request

        Returns:
            True-Client-IP, else X-Real-IP, else the first X-Forwarded-For
            hop, else the socket peer
        """
        for header in ("True-Client-IP", "X-Real-IP"):
            value = request.headers.get(header)
            if value and value.strip():
                return value.strip()

        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        if request.client:
            return request.client.host
        return "unknown"
