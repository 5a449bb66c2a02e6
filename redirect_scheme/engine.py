"""
Per-request redirect decision.

``decide`` is a pure function of the policy and a read-only view of the
request: it performs no I/O, does not log and never raises. Emitting the
actual response is left to the host (see ``redirect_scheme.middleware``).
"""

import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from .scheme import RedirectSchemePolicy, RedirectStatus, Scheme


class RequestView(BaseModel):
    """The parts of an inbound request the decision depends on."""

    model_config = ConfigDict(frozen=True)

    method: str
    url: str
    is_secure: bool = False
    forwarded_proto: Optional[str] = None

    @property
    def path(self) -> str:
        return url_path(self.url)

    @property
    def observed_scheme(self) -> Scheme:
        return effective_scheme(self, trust_forwarded_proto=True)


class PassThrough(BaseModel):
    model_config = ConfigDict(frozen=True)


class Redirect(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_url: str
    status: RedirectStatus


RedirectDecision = Union[PassThrough, Redirect]

PASS_THROUGH = PassThrough()

_AUTHORITY = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://[^/?#]*")


def url_path(url: str) -> str:
    """Path part of ``url``. Malformed authorities are skipped, not rejected."""
    path = _AUTHORITY.sub("", url, count=1)
    return re.split(r"[?#]", path, maxsplit=1)[0]


def effective_scheme(request: RequestView, trust_forwarded_proto: bool = True) -> Scheme:
    """Scheme the client actually used, looking through a trusted proxy."""
    if request.is_secure:
        return Scheme.HTTPS
    if trust_forwarded_proto and request.forwarded_proto:
        # Proxies may append their own value: "https, http"
        first = request.forwarded_proto.split(",")[0].strip().lower()
        if first == Scheme.HTTPS.value:
            return Scheme.HTTPS
    return Scheme.HTTP


def apply_replacements(url: str, replacements) -> str:
    """Apply ``(match, replacement)`` pairs one after another.

    Matching is literal and case-sensitive over the whole string, so a match
    like ``"8080"`` can also hit the path or query. Prefer ``":8080"``.
    """
    for match, replacement in replacements:
        url = url.replace(match, replacement)
    return url


def build_target_url(url: str, policy: RedirectSchemePolicy) -> str:
    """Swap the scheme prefix for the desired one, then apply replacements.

    A URL with no recognised prefix keeps its text and still goes through
    the replacements.
    """
    for scheme in (Scheme.HTTP, Scheme.HTTPS):
        if url.startswith(scheme.prefix):
            url = policy.desired_scheme.prefix + url[len(scheme.prefix):]
            break
    return apply_replacements(url, policy.replacements)


def is_ignored(path: str, policy: RedirectSchemePolicy) -> bool:
    return any(path.startswith(prefix) for prefix in policy.ignore_paths)


def decide(policy: RedirectSchemePolicy, request: RequestView) -> RedirectDecision:
    """Return ``PASS_THROUGH`` or a ``Redirect`` for one request."""
    if not policy.enabled:
        return PASS_THROUGH

    if policy.ignore_paths and is_ignored(request.path, policy):
        return PASS_THROUGH

    scheme = effective_scheme(request, trust_forwarded_proto=policy.trust_forwarded_proto)
    if scheme == policy.desired_scheme:
        return PASS_THROUGH

    return Redirect(
        target_url=build_target_url(request.url, policy),
        status=policy.status,
    )
