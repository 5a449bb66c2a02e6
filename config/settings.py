"""
Redirect configuration loaded from .env using Pydantic v2 settings model.
"""

from typing import List, Literal, Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables or .env file.

    Fields:
        LOG_LEVEL (str): Logging verbosity (DEBUG, INFO, etc.).
        REDIRECT_ENABLED (bool): Master switch for scheme redirects.
        REDIRECT_TO (str): Scheme requests should end up on, "http" or "https".
        REDIRECT_PERMANENT (bool): Answer 301 when True, 307 when False.
        REDIRECT_REPLACEMENTS (list): JSON list of ``[match, replacement]``
            pairs applied in order to the redirect target,
            e.g. ``[[":8080", ":8443"]]``.
        REDIRECT_IGNORE_PATHS (list): JSON list of path prefixes that are
            never redirected, e.g. ``["/.well-known/acme-challenge/"]``.
        TRUST_FORWARDED_PROTO (bool): Honour ``Forwarded`` and
            ``X-Forwarded-Proto`` headers. Disable when not behind a proxy.
    """
    LOG_LEVEL: str = "INFO"
    REDIRECT_ENABLED: bool = True
    REDIRECT_TO: Literal["http", "https"] = "https"
    REDIRECT_PERMANENT: bool = True
    REDIRECT_REPLACEMENTS: List[Tuple[str, str]] = []
    REDIRECT_IGNORE_PATHS: List[str] = []
    TRUST_FORWARDED_PROTO: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def build_policy(source: Optional[Settings] = None):
    """Translate settings into an immutable ``RedirectSchemePolicy``."""
    from redirect_scheme.builder import RedirectSchemeBuilder

    source = source or settings
    builder = (
        RedirectSchemeBuilder()
        .enable(source.REDIRECT_ENABLED)
        .https_to_http(source.REDIRECT_TO == "http")
        .permanent(source.REDIRECT_PERMANENT)
        .replacements(source.REDIRECT_REPLACEMENTS)
        .trust_forwarded_proto(source.TRUST_FORWARDED_PROTO)
    )
    for path in source.REDIRECT_IGNORE_PATHS:
        builder.ignore_path(path)
    return builder.build()


# Global settings instance
settings = Settings()
