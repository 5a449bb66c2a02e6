"""
Immutable redirect policy shared by every request the server answers.

A ``RedirectSchemePolicy`` is built once at startup (usually through
``RedirectSchemeBuilder``) and never mutated afterwards, so concurrent
requests can read it without locking.
"""

from enum import Enum, IntEnum
from typing import Sequence, Tuple

from pydantic import BaseModel, ConfigDict


class Scheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"

    @property
    def prefix(self) -> str:
        return f"{self.value}://"


class RedirectStatus(IntEnum):
    """Status codes used for the redirect response."""

    PERMANENT = 301  # Moved Permanently
    TEMPORARY = 307  # Temporary Redirect, keeps method and body


class RedirectSchemePolicy(BaseModel):
    """
    Desired redirect behaviour.

    Fields:
        enabled (bool): Master switch. Disabled policies always pass through.
        desired_scheme (Scheme): Scheme every request should end up on.
        permanent (bool): 301 when True, 307 when False.
        replacements (tuple): Ordered ``(match, replacement)`` pairs applied
            literally, one after another, to the rebuilt URL.
        ignore_paths (tuple): Path prefixes that are never redirected.
        trust_forwarded_proto (bool): Honour proxy forwarded-scheme headers.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    desired_scheme: Scheme = Scheme.HTTPS
    permanent: bool = True
    replacements: Tuple[Tuple[str, str], ...] = ()
    ignore_paths: Tuple[str, ...] = ()
    trust_forwarded_proto: bool = True

    @classmethod
    def simple(cls, https_to_http: bool = False) -> "RedirectSchemePolicy":
        """Policy with default settings in the given direction."""
        return cls(desired_scheme=Scheme.HTTP if https_to_http else Scheme.HTTPS)

    @classmethod
    def with_replacements(
        cls, https_to_http: bool, replacements: Sequence[Tuple[str, str]]
    ) -> "RedirectSchemePolicy":
        """Policy that also rewrites literal fragments of the target URL.

        Useful off the default ports, e.g. ``[(":8080", ":8443")]``.
        """
        return cls(
            desired_scheme=Scheme.HTTP if https_to_http else Scheme.HTTPS,
            replacements=tuple((str(a), str(b)) for a, b in replacements),
        )

    @property
    def status(self) -> RedirectStatus:
        return RedirectStatus.PERMANENT if self.permanent else RedirectStatus.TEMPORARY
