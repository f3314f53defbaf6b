"""Prometheus metrics for done_client."""

from prometheus_client import Counter, Histogram

done_requests_total = Counter(
    "done_client_requests_total",
    "Total requests made to the Done service",
    ["operation", "method", "status"],
)

done_request_duration_seconds = Histogram(
    "done_client_request_duration_seconds",
    "Done service request duration in seconds",
    ["operation", "method"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)
