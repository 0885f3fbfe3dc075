"""Request timing middleware.

Stamps every response with ``X-Process-Time`` and warns when a request runs
longer than its path's threshold. Recipe generation waits on the model, so
its path gets a much larger budget than ingredient CRUD.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from dinner_decider.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping

    from starlette.requests import Request
    from starlette.responses import Response

logger = get_logger(__name__)

DEFAULT_SLOW_THRESHOLD = 1.0  # seconds


class TimingMiddleware(BaseHTTPMiddleware):
    """Measure request duration and flag slow requests.

    Args:
        app: The wrapped ASGI application.
        header_name: Response header carrying the duration in milliseconds.
        slow_threshold: Seconds after which a request is logged as slow.
        path_thresholds: Per-path overrides of ``slow_threshold``.
    """

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "X-Process-Time",
        slow_threshold: float = DEFAULT_SLOW_THRESHOLD,
        path_thresholds: Mapping[str, float] | None = None,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name
        self.slow_threshold = slow_threshold
        self.path_thresholds = dict(path_thresholds or {})

    def threshold_for(self, path: str) -> float:
        """Return the slow-request threshold that applies to ``path``."""
        return self.path_thresholds.get(path, self.slow_threshold)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        elapsed_ms = round(elapsed * 1000, 2)
        response.headers[self.header_name] = f"{elapsed_ms}ms"

        threshold = self.threshold_for(request.url.path)
        if elapsed > threshold:
            logger.warning(
                "Request exceeded time budget",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
                threshold_s=threshold,
            )

        return response
