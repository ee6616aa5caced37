"""
Request-ID middleware

1. Read an existing request-id from the X-Request-ID header (cross-service calls)
2. Otherwise generate a new uuid
3. Store it in the contextvar used by the logger
4. Echo it back in the X-Request-ID response header
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from typing import Callable

from libur_api.core.request import set_request_id, generate_request_id
from loguru import logger


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a request-id to every request and response"""

    # Response header name
    RESPONSE_HEADER = "x-request-id"

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> ASGIApp:
        """
        Handle a request and inject the request-id

        Args:
            request: FastAPI/Starlette request
            call_next: next middleware or route handler

        Returns:
            The response, with an X-Request-ID header
        """
        # 1. Reuse the request-id sent by the caller
        request_id = request.headers.get(self.RESPONSE_HEADER, "")
        # 2. Otherwise generate a new one
        if not request_id:
            request_id = generate_request_id()

        # 3. Store it in the contextvar for the logger and services
        set_request_id(request_id)

        # 4. Log the request start
        logger.info(
            f"Request started: {request.method} {request.url.path}",
        )

        # 5. Call the next handler
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request failed with exception: {e}")
            raise

        # 6. Echo the request-id in the response
        response.headers[self.RESPONSE_HEADER] = request_id

        # 7. Log the request end
        logger.info(
            f"Request completed: {request.method} {request.url.path} - {response.status_code}",
        )

        return response
