"""Redirect requests between ``http`` and ``https`` with optional URL replacements."""

from .builder import RedirectSchemeBuilder
from .engine import PASS_THROUGH, PassThrough, Redirect, RequestView, decide
from .middleware import RedirectSchemeMiddleware, add_redirect_scheme
from .scheme import RedirectSchemePolicy, RedirectStatus, Scheme

__all__ = [
    "PASS_THROUGH",
    "PassThrough",
    "Redirect",
    "RedirectSchemeBuilder",
    "RedirectSchemeMiddleware",
    "RedirectSchemePolicy",
    "RedirectStatus",
    "RequestView",
    "Scheme",
    "add_redirect_scheme",
    "decide",
]
