"""
Starlette/FastAPI middleware enforcing a canonical URL scheme.

Each request is turned into a ``RequestView`` and handed to ``decide``. A
``Redirect`` decision short-circuits the pipeline with an empty-bodied
response carrying a ``Location`` header; ``PassThrough`` forwards the request
unchanged.

Replacements are blunt literal substitutions over the whole target URL, not
just the host. Choose match strings precisely (``":8080"`` rather than
``"8080"``) so they do not also rewrite the path or query.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from .engine import Redirect, RequestView, decide
from .metrics import record_redirect
from .scheme import RedirectSchemePolicy

logger = logging.getLogger("redirect_logger")


def forwarded_proto(headers: Headers) -> Optional[str]:
    """Scheme reported by a reverse proxy, if any.

    The RFC 7239 ``Forwarded`` header wins over ``X-Forwarded-Proto``.
    Only the first (client-most) element of ``Forwarded`` is considered.
    """
    forwarded = headers.get("forwarded")
    if forwarded:
        first = forwarded.split(",")[0]
        for pair in first.split(";"):
            key, _, value = pair.partition("=")
            if key.strip().lower() == "proto" and value:
                return value.strip().strip('"')
    return headers.get("x-forwarded-proto")


def raw_url(request: Request) -> str:
    """Request URL as the client sent it, percent-escapes untouched.

    ``request.url`` is rebuilt from the decoded path, which would turn an
    escaped ``%3F`` into a real query separator.
    """
    scope = request.scope
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return str(request.url)
    path = raw_path.decode("latin-1").split("?", 1)[0]
    root_path = scope.get("root_path", "")
    if root_path and not path.startswith(root_path):
        path = root_path + path
    host = request.headers.get("host") or request.url.netloc
    url = f"{request.url.scheme}://{host}{path}"
    query = scope.get("query_string", b"")
    if query:
        url += "?" + query.decode("latin-1")
    return url


def request_view(request: Request) -> RequestView:
    return RequestView(
        method=request.method,
        url=raw_url(request),
        is_secure=request.url.scheme in ("https", "wss"),
        forwarded_proto=forwarded_proto(request.headers),
    )


class RedirectSchemeMiddleware(BaseHTTPMiddleware):
    """Redirect requests whose scheme differs from the policy's."""

    def __init__(self, app, policy: Optional[RedirectSchemePolicy] = None):
        super().__init__(app)
        if policy is None:
            from config.settings import build_policy

            policy = build_policy()
        self.policy = policy
        logger.info(
            "Scheme redirect configured",
            extra={
                "enabled": policy.enabled,
                "desired_scheme": policy.desired_scheme.value,
                "status": int(policy.status),
                "replacements": len(policy.replacements),
                "ignore_paths": list(policy.ignore_paths),
            },
        )

    async def dispatch(self, request: Request, call_next):
        decision = decide(self.policy, request_view(request))
        if not isinstance(decision, Redirect):
            return await call_next(request)

        logger.info(
            f"Redirecting {request.method} {request.url.path}",
            extra={"status": int(decision.status)},
        )
        logger.debug(f"Redirect target {decision.target_url}")
        record_redirect(int(decision.status), self.policy.desired_scheme.value)
        return RedirectResponse(decision.target_url, status_code=int(decision.status))


def add_redirect_scheme(app: FastAPI, policy: Optional[RedirectSchemePolicy] = None) -> FastAPI:
    """Register ``RedirectSchemeMiddleware`` on ``app`` and return it."""
    app.add_middleware(RedirectSchemeMiddleware, policy=policy)
    return app
