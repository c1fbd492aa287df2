"""Client configuration: bot credential, API host and transport timeout.

Values can be given explicitly or loaded from the environment via
``python-dotenv`` (``BOT_TOKEN``, ``BOT_API_HOST``, ``BOT_API_TIMEOUT``).
A :class:`ClientConfig` is immutable once built and safe to share between
concurrent calls.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tgbind.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "api.telegram.org"


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> float | None:
    """Parse ``BOT_API_TIMEOUT``; empty means "use the transport default"."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"BOT_API_TIMEOUT must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"BOT_API_TIMEOUT must be positive, got {raw!r}")
    return value


def _mask(token: str) -> str:
    """Hide all but the bot id part of a token (``123:***``)."""
    bot_id, _, secret = token.partition(":")
    return f"{bot_id}:***" if secret else "***"


# ── Public model ─────────────────────────────────────────────────────────────


class ClientConfig(BaseModel):
    """Immutable client settings.

    Attributes:
        token: Bot credential issued by BotFather, embedded in the URL path.
        api_host: Bot API host; override for a self-hosted Bot API server.
            HTTPS is assumed; prefix ``http://`` for a plain HTTP server.
        timeout: Per-request timeout in seconds handed to ``requests``;
            ``None`` keeps the ``requests`` default (no timeout).
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, repr=False)
    api_host: str = Field(default=DEFAULT_API_HOST, min_length=1)
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("token")
    @classmethod
    def _token_has_no_whitespace(cls, value: str) -> str:
        if value != value.strip() or any(ch.isspace() for ch in value):
            raise ValueError("token must not contain whitespace")
        return value

    @field_validator("api_host")
    @classmethod
    def _normalise_host(cls, value: str) -> str:
        host = value.strip().removeprefix("https://").rstrip("/")
        scheme, sep, rest = host.partition("://")
        if sep and scheme != "http":
            raise ValueError(f"api_host scheme must be http or https, got {scheme!r}")
        if not (rest if sep else host):
            raise ValueError("api_host must name a host")
        return host

    @property
    def origin(self) -> str:
        """``https://<host>``, or the host as given when it carries ``http://``."""
        return self.api_host if self.api_host.startswith("http://") else f"https://{self.api_host}"

    @property
    def base_url(self) -> str:
        """Root of every method URL, ``<origin>/bot<token>``."""
        return f"{self.origin}/bot{self.token}"

    @property
    def file_base_url(self) -> str:
        """File CDN root, ``<origin>/file/bot<token>``."""
        return f"{self.origin}/file/bot{self.token}"

    def __repr__(self) -> str:
        return f"ClientConfig(token={_mask(self.token)!r}, api_host={self.api_host!r}, timeout={self.timeout!r})"

    __str__ = __repr__

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "ClientConfig":
        """Build a config from the process environment.

        ``env_file`` (or a ``.env`` in the working directory) is loaded first
        without overriding variables already set.

        Raises:
            ConfigurationError: ``BOT_TOKEN`` is missing or a value is invalid.
        """
        load_dotenv(env_file)
        token = os.environ.get("BOT_TOKEN")
        if not token:
            raise ConfigurationError("BOT_TOKEN is not set")
        host = os.environ.get("BOT_API_HOST") or DEFAULT_API_HOST
        timeout = _parse_timeout(os.environ.get("BOT_API_TIMEOUT"))
        try:
            config = cls(token=token, api_host=host, timeout=timeout)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid client configuration: {exc}") from exc
        logger.info("Config loaded from environment", extra={"api_host": config.api_host, "timeout": config.timeout})
        return config
