"""Helpers for bots that receive updates through a webhook.

tgbind ships no HTTP server; the embedding web framework owns routing and
hands the request body and headers to these functions::

    if not verify_secret_token(request.headers, SECRET):
        return 403
    update = parse_update(request.body)
    if update.message:
        return SendMessage(chat_id=update.message.chat.id, text="pong").to_webhook_reply()
"""

from __future__ import annotations

import hmac
import json
import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError

from tgbind.exceptions import DecodeFailure
from tgbind.models import Update

logger = logging.getLogger(__name__)

SECRET_TOKEN_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def parse_update(raw: Union[str, bytes, Mapping[str, Any]]) -> Update:
    """Decode an incoming webhook body into an :class:`Update`.

    Unknown fields are ignored.

    Raises:
        DecodeFailure: The body is not JSON or not a valid update.
    """
    if isinstance(raw, Mapping):
        payload: Any = raw
        text = None
    else:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
        try:
            payload = json.loads(text)
        except (ValueError, RecursionError) as exc:
            logger.warning("Webhook body is not JSON", extra={"error": str(exc)})
            raise DecodeFailure("update", f"invalid JSON: {exc}", text) from exc

    try:
        return Update.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Webhook body is not an update", extra={"error_count": exc.error_count()})
        raise DecodeFailure("update", f"not an Update: {exc.errors(include_url=False)}", text if text is not None else json.dumps(payload, default=str)) from exc


def verify_secret_token(headers: Mapping[str, str], expected: str) -> bool:
    """Check the ``X-Telegram-Bot-Api-Secret-Token`` header in constant time.

    Header names are matched case-insensitively.  A missing header never
    matches.
    """
    received = None
    for name, value in headers.items():
        if name.lower() == SECRET_TOKEN_HEADER.lower():
            received = value
            break
    if received is None:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
