"""Fluent builder for ``RedirectSchemePolicy``."""

from typing import Iterable, List, Tuple

from .scheme import RedirectSchemePolicy, Scheme


class RedirectSchemeBuilder:
    """
    Collect overrides on top of the defaults and freeze them with ``build()``.

    Defaults: enabled, HTTP -> HTTPS, permanent (301), no replacements.

    Example::

        policy = (
            RedirectSchemeBuilder()
            .https_to_http()
            .temporary()
            .replacements([(":8443", ":8080")])
            .build()
        )
    """

    def __init__(self):
        self._enabled = True
        self._https_to_http = False
        self._permanent = True
        self._replacements: List[Tuple[str, str]] = []
        self._ignore_paths: List[str] = []
        self._trust_forwarded_proto = True

    def enable(self, value: bool = True) -> "RedirectSchemeBuilder":
        self._enabled = value
        return self

    def http_to_https(self, value: bool = True) -> "RedirectSchemeBuilder":
        """Redirect plain HTTP to HTTPS; ``False`` flips the direction."""
        self._https_to_http = not value
        return self

    def https_to_http(self, value: bool = True) -> "RedirectSchemeBuilder":
        """Redirect HTTPS to plain HTTP; ``False`` flips the direction."""
        self._https_to_http = value
        return self

    def permanent(self, value: bool = True) -> "RedirectSchemeBuilder":
        """Answer with 301 Moved Permanently, or 307 when ``value`` is False."""
        self._permanent = value
        return self

    def temporary(self) -> "RedirectSchemeBuilder":
        """Answer with 307 Temporary Redirect."""
        return self.permanent(False)

    def replacements(self, value: Iterable[Tuple[str, str]]) -> "RedirectSchemeBuilder":
        """Replace the whole list of ``(match, replacement)`` pairs.

        Pairs are applied in order, so the output of one can be matched by
        the next.
        """
        self._replacements = [(str(a), str(b)) for a, b in value]
        return self

    def ignore_path(self, path: str) -> "RedirectSchemeBuilder":
        """Never redirect requests whose path starts with ``path``."""
        self._ignore_paths.append(str(path))
        return self

    def trust_forwarded_proto(self, value: bool = True) -> "RedirectSchemeBuilder":
        """Honour ``Forwarded``/``X-Forwarded-Proto`` set by a reverse proxy."""
        self._trust_forwarded_proto = value
        return self

    def build(self) -> RedirectSchemePolicy:
        return RedirectSchemePolicy(
            enabled=self._enabled,
            desired_scheme=Scheme.HTTP if self._https_to_http else Scheme.HTTPS,
            permanent=self._permanent,
            replacements=tuple(self._replacements),
            ignore_paths=tuple(self._ignore_paths),
            trust_forwarded_proto=self._trust_forwarded_proto,
        )
