"""Metrics for endpoint delivery."""

from prometheus_client import Counter, Histogram, start_http_server

# Delivery metrics
ENDPOINT_POSTS = Counter(
    "webhook_proxy_endpoint_posts_total",
    "Number of events posted to the local endpoint",
    ["outcome"],
)

ENDPOINT_POST_DURATION = Histogram(
    "webhook_proxy_endpoint_post_duration_seconds",
    "Round trip time of requests to the local endpoint",
)

# Response metrics
ENDPOINT_RESPONSES = Counter(
    "webhook_proxy_endpoint_responses_total",
    "Responses received from the local endpoint by status class",
    ["status_class"],
)


def status_class(status_code: int) -> str:
    """Return the class of an HTTP status code, e.g. ``"5xx"``."""
    return f"{status_code // 100}xx"


def start_metrics_server(port: int) -> None:
    """Start the Prometheus metrics HTTP server.

    Args:
        port: Port number to listen on
    """
    start_http_server(port)
