"""Response envelope and the generic decoder shared by every operation.

The Bot API wraps every answer in the same envelope::

    {"ok": true, "result": <T>}
    {"ok": false, "error_code": 429, "description": "...", "parameters": {"retry_after": 5}}

:func:`decode_response` turns a raw body into one of four values; callers
branch on the variant instead of catching exceptions::

    result = await client.send_message(chat_id=42, text="hi")
    if isinstance(result, Ok):
        message = result.value
    elif isinstance(result, ApiError) and result.retry_after:
        ...
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, ClassVar, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from tgbind.exceptions import BotAPIError, DecodeFailure, TransportFailure
from tgbind.models import ResponseParameters

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call; ``value`` is the decoded ``result``."""

    value: T
    method: str = ""

    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class ApiError:
    """The Bot API answered ``ok: false``.

    These are routine outcomes (chat not found, not enough rights, flood
    control) and are returned rather than raised.
    """

    method: str
    error_code: int
    description: str
    parameters: Optional[ResponseParameters] = None

    ok: ClassVar[bool] = False

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating the request (flood control)."""
        return self.parameters.retry_after if self.parameters else None

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """New id of a group that was migrated to a supergroup."""
        return self.parameters.migrate_to_chat_id if self.parameters else None

    def unwrap(self) -> Any:
        raise BotAPIError(self.method, self.error_code, self.description, retry_after=self.retry_after)


@dataclass(frozen=True)
class TransportError:
    """The HTTP exchange failed before a response body was obtained."""

    method: str
    error: BaseException = field(compare=False)

    ok: ClassVar[bool] = False

    def unwrap(self) -> Any:
        raise TransportFailure(self.method, self.error) from self.error


@dataclass(frozen=True)
class DecodeError:
    """The body was not JSON, not an envelope, or ``result`` had the wrong shape.

    ``raw`` holds the offending payload verbatim for diagnosis.
    """

    method: str
    reason: str
    raw: str

    ok: ClassVar[bool] = False

    def unwrap(self) -> Any:
        raise DecodeFailure(self.method, self.reason, self.raw)


Result = Union[Ok[T], ApiError, TransportError, DecodeError]


class _FailureEnvelope(BaseModel):
    """Shape of an ``ok: false`` body; extra keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    error_code: int
    description: str
    parameters: Optional[ResponseParameters] = None


@lru_cache(maxsize=None)
def _cached_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _adapter(result_type: Any) -> TypeAdapter:
    # Annotated discriminated unions are unhashable; callers pass a prebuilt adapter for those.
    if isinstance(result_type, TypeAdapter):
        return result_type
    return _cached_adapter(result_type)


def _as_text(raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def decode_response(raw: Union[str, bytes], result_type: Any, method: str = "") -> Result[Any]:
    """Decode a raw Bot API body into a :data:`Result`.

    Never raises: every malformed input becomes a :class:`DecodeError`, and
    only a well-formed envelope with ``"ok": false`` becomes an
    :class:`ApiError`.
    """
    try:
        body = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        return DecodeError(method, f"invalid JSON: {exc}", _as_text(raw))

    if not isinstance(body, dict):
        return DecodeError(method, "envelope is not a JSON object", _as_text(raw))

    ok = body.get("ok")
    if not isinstance(ok, bool):
        return DecodeError(method, "envelope has no boolean 'ok' field", _as_text(raw))

    if not ok:
        try:
            failure = _FailureEnvelope.model_validate(body)
        except ValidationError as exc:
            return DecodeError(method, f"malformed error envelope: {exc.errors(include_url=False)}", _as_text(raw))
        return ApiError(method, failure.error_code, failure.description, failure.parameters)

    if "result" not in body:
        return DecodeError(method, "successful envelope has no 'result'", _as_text(raw))

    try:
        value = _adapter(result_type).validate_python(body["result"])
    except ValidationError as exc:
        return DecodeError(method, f"result does not match {_type_name(result_type)}: {exc.errors(include_url=False)}", _as_text(raw))
    return Ok(value, method)


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)
