"""Prometheus metrics instrumentation.

Exposes HTTP request count, latency and in-flight gauges for the API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_fastapi_instrumentator import Instrumentator, metrics

from dinner_decider.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from dinner_decider.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "dinner_decider"


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator | None:
    """Instrument the application and mount the metrics endpoint.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        The configured Instrumentator, or None when metrics are disabled.
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return None

    prefix = settings.api.v1_prefix
    metrics_endpoint = f"{prefix}/metrics"

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/health/db",
            f"{prefix}/health/ollama",
            metrics_endpoint,
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )

    instrumentator.instrument(app)
    instrumentator.expose(
        app,
        endpoint=metrics_endpoint,
        include_in_schema=False,
    )

    logger.info("Prometheus metrics configured", endpoint=metrics_endpoint)
    return instrumentator


__all__ = ["setup_metrics"]
