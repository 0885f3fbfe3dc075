"""Request ID middleware for request tracing.

Reuses a caller-supplied ``X-Request-ID`` when it looks like an opaque token
and otherwise mints a UUID4. The ID is stored on ``request.state`` (error
bodies echo it), bound to the logging context and returned on the response.
"""

from __future__ import annotations

import re
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from dinner_decider.observability.logging import bind_context, clear_context


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

# Letters, digits, dot, dash, underscore; keeps log lines single-line
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._-]{1,128}")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request and response with a request ID."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    def resolve_request_id(self, request: Request) -> str:
        """Return the incoming ID if acceptable, otherwise a fresh UUID."""
        incoming = request.headers.get(self.header_name, "")
        if _ACCEPTED_ID.fullmatch(incoming):
            return incoming
        return str(uuid.uuid4())

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        clear_context()

        request_id = self.resolve_request_id(request)
        request.state.request_id = request_id
        bind_context(request_id=request_id)

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
