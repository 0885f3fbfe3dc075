"""Custom middleware components."""

from dinner_decider.core.middleware.logging import LoggingMiddleware
from dinner_decider.core.middleware.request_id import RequestIDMiddleware
from dinner_decider.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "TimingMiddleware",
]
