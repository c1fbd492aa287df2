"""tgbind -- typed async client binding for the Telegram Bot API.

Pydantic models for the Bot API objects, one request value per method, an
async :class:`TelegramClient` and the response envelope it decodes to.

Usage::

    from tgbind import TelegramClient, ChatMessage, Ok
    from tgbind.models import InlineKeyboardMarkup, InlineKeyboardButton

    async with TelegramClient.from_env() as client:
        result = await client.send_message(chat_id=42, text="hello")
        if isinstance(result, Ok):
            await client.edit_message_text(ChatMessage(chat_id=42, message_id=result.value.message_id), "hi")
"""

from tgbind.client import TelegramClient
from tgbind.config import ClientConfig
from tgbind.envelope import ApiError, DecodeError, Ok, Result, TransportError, decode_response
from tgbind.exceptions import APIException, BotAPIError, ConfigurationError, DecodeFailure, TransportFailure
from tgbind.fields import UNSET, Maybe, present
from tgbind.methods import BotRequest, ChatMessage, InlineMessage, MessageTarget, encode_request, target_fields
from tgbind.models import ParseMode
from tgbind.transport import Transport
from tgbind.webhook import parse_update, verify_secret_token

__all__ = [
    "TelegramClient",
    "ClientConfig",
    "Transport",
    "Result",
    "Ok",
    "ApiError",
    "TransportError",
    "DecodeError",
    "decode_response",
    "APIException",
    "BotAPIError",
    "TransportFailure",
    "DecodeFailure",
    "ConfigurationError",
    "UNSET",
    "Maybe",
    "present",
    "BotRequest",
    "ChatMessage",
    "InlineMessage",
    "MessageTarget",
    "encode_request",
    "target_fields",
    "ParseMode",
    "parse_update",
    "verify_secret_token",
]
