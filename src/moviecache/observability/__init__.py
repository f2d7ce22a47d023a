"""Observability module for movie-cache.

Provides metrics and structured logging:
- Prometheus metrics for cache hits, misses and invalidations
- JSON or console logs carrying the cache fields and the request id
"""

from moviecache.observability.logging import (
    configure_logging,
    request_id_var,
)
from moviecache.observability.metrics import (
    MetricsMiddleware,
    get_metrics,
    metrics_registry,
)

__all__ = [
    # Logging
    "configure_logging",
    "request_id_var",
    # Metrics
    "metrics_registry",
    "get_metrics",
    "MetricsMiddleware",
]
