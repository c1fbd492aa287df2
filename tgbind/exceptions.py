"""Exception hierarchy for the tgbind Bot API client.

Operations return failures as values (see :mod:`tgbind.envelope`); these
exceptions are raised only by ``Result.unwrap()``, by webhook payload
parsing and by configuration loading.
"""

from typing import Any, Dict, Optional


class APIException(Exception):
    """Base exception for every failure surfaced by tgbind.

    Attributes:
        error_code: Remote ``error_code`` when the Bot API reported one.
        response_body: Parsed response body as a dict, when available.
    """

    def __init__(
        self,
        error_code: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ) -> None:
        """Initialise with the remote error code and optional body."""
        self.error_code = error_code
        self.response_body = response_body or {}
        if message is None:
            description = self.response_body.get("description", "Unknown error")
            message = f"API error {error_code}: {description}"
        super().__init__(message)


class BotAPIError(APIException):
    """The Bot API answered with ``ok: false``."""

    def __init__(
        self,
        method: str,
        error_code: int,
        description: str,
        retry_after: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.method = method
        self.description = description
        self.retry_after = retry_after
        super().__init__(
            error_code,
            response_body or {"ok": False, "error_code": error_code, "description": description},
            message=f"{method or 'request'} failed with {error_code}: {description}",
        )


class TransportFailure(APIException):
    """The HTTP exchange itself failed (connection, TLS, timeout)."""

    def __init__(self, method: str, error: BaseException) -> None:
        self.method = method
        self.error = error
        super().__init__(message=f"{method or 'request'} transport error: {error}")


class DecodeFailure(APIException):
    """The response body was not a valid Bot API envelope."""

    def __init__(self, method: str, reason: str, raw: str) -> None:
        self.method = method
        self.reason = reason
        self.raw = raw
        super().__init__(message=f"{method or 'payload'} could not be decoded: {reason}")


class ConfigurationError(APIException):
    """Client configuration is missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message=message)
