from fastapi import Response
from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST

REDIRECTS_TOTAL = Counter(
    "scheme_redirects_total",
    "Requests answered with a scheme redirect",
    ["status", "scheme"],
)


def record_redirect(status: int, scheme: str) -> None:
    """Count one redirect by status code and target scheme."""
    REDIRECTS_TOTAL.labels(str(status), scheme).inc()


def metrics():
    """Expose collected Prometheus metrics as an HTTP response.

    Returns:
        Response: Metrics in Prometheus text format.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
