"""FastAPI application entry point.

This module creates the ``FastAPI`` application instance, configures logging
and wires the scheme redirect middleware using the policy described by
``config.settings``.
"""

from fastapi import FastAPI
from redirect_scheme.utils import setup_logger
from redirect_scheme.metrics import metrics
from redirect_scheme.middleware import RedirectSchemeMiddleware

# Initialize application and configure logging
app = FastAPI()
setup_logger()

app.add_middleware(RedirectSchemeMiddleware)

@app.get("/")
async def health_check() -> dict:
    """Health check endpoint used by monitoring systems.

    Returns:
        dict: Service status message.
    """
    return {"status": "running", "message": "Redirect server ready"}


@app.get("/metrics")
async def metrics_endpoint():
    """Expose Prometheus metrics, including the redirect counter.

    Returns:
        Any: Text metrics in Prometheus format.
    """
    return metrics()
