"""Tests for the response envelope decoder."""

import json
import sys
import os
from typing import List, Union

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.envelope import ApiError, DecodeError, Ok, TransportError, decode_response
from tgbind.exceptions import BotAPIError, DecodeFailure, TransportFailure
from tgbind.models import ChatMember, Message, MenuButton, MenuButtonWebApp, Update
from pydantic import TypeAdapter


MESSAGE = {
    "message_id": 7,
    "date": 1700000000,
    "chat": {"id": -1001234567890, "type": "supergroup", "title": "Ops"},
    "from": {"id": 42, "is_bot": False, "first_name": "Ada"},
    "text": "hi",
}


def _envelope(**body) -> str:
    return json.dumps(body)


# ── Success envelopes ────────────────────────────────────────────────────────


class TestSuccess:
    """``ok: true`` envelopes decode into Ok."""

    def test_message_round_trip(self) -> None:
        result = decode_response(_envelope(ok=True, result=MESSAGE), Message, "sendMessage")
        assert isinstance(result, Ok)
        assert result.ok is True
        assert result.method == "sendMessage"
        assert isinstance(result.value, Message)
        assert result.value.to_dict() == MESSAGE

    def test_bool_result(self) -> None:
        assert decode_response('{"ok":true,"result":true}', bool) == Ok(True)

    def test_int_result(self) -> None:
        assert decode_response('{"ok":true,"result":42}', int).unwrap() == 42

    def test_str_result(self) -> None:
        link = "https://t.me/+AbCdEf"
        assert decode_response(_envelope(ok=True, result=link), str).unwrap() == link

    def test_list_result(self) -> None:
        raw = _envelope(ok=True, result=[{"update_id": 1}, {"update_id": 2, "message": MESSAGE}])
        updates = decode_response(raw, List[Update]).unwrap()
        assert [u.update_id for u in updates] == [1, 2]
        assert updates[1].message.from_user.first_name == "Ada"

    def test_bytes_input(self) -> None:
        raw = _envelope(ok=True, result=MESSAGE).encode("utf-8")
        assert isinstance(decode_response(raw, Message), Ok)

    def test_prebuilt_adapter(self) -> None:
        raw = _envelope(ok=True, result={"type": "web_app", "text": "Open", "web_app": {"url": "https://example.com"}})
        value = decode_response(raw, TypeAdapter(MenuButton)).unwrap()
        assert isinstance(value, MenuButtonWebApp)
        assert value.web_app.url == "https://example.com"

    def test_unknown_fields_ignored(self) -> None:
        result_body = dict(MESSAGE, brand_new_field={"nested": True})
        raw = _envelope(ok=True, result=result_body, server_time=123)
        result = decode_response(raw, Message)
        assert isinstance(result, Ok)
        assert "brand_new_field" not in result.value.to_dict()

    def test_flat_chat_member(self) -> None:
        member = {"status": "administrator", "user": {"id": 1, "is_bot": False, "first_name": "A"}, "can_be_edited": False, "can_manage_chat": True}
        value = decode_response(_envelope(ok=True, result=member), ChatMember).unwrap()
        assert value.status == "administrator"
        assert value.can_manage_chat is True
        assert value.until_date is None


# ── Polymorphic results ──────────────────────────────────────────────────────


class TestPolymorphicResult:
    """Edit operations return a Message or ``true``."""

    def test_message_variant(self) -> None:
        value = decode_response(_envelope(ok=True, result=MESSAGE), Union[Message, bool]).unwrap()
        assert isinstance(value, Message)
        assert value.message_id == 7

    def test_bool_variant(self) -> None:
        value = decode_response('{"ok":true,"result":true}', Union[Message, bool]).unwrap()
        assert value is True

    def test_neither_variant(self) -> None:
        result = decode_response('{"ok":true,"result":"edited"}', Union[Message, bool])
        assert isinstance(result, DecodeError)


# ── API errors ───────────────────────────────────────────────────────────────


class TestApiError:
    """``ok: false`` envelopes decode into ApiError values."""

    def test_flood_control(self) -> None:
        raw = '{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":5}}'
        result = decode_response(raw, Message, "sendMessage")
        assert isinstance(result, ApiError)
        assert result.ok is False
        assert result.error_code == 429
        assert result.description == "Too Many Requests"
        assert result.retry_after == 5
        assert result.migrate_to_chat_id is None

    def test_without_parameters(self) -> None:
        result = decode_response('{"ok":false,"error_code":400,"description":"Bad Request: chat not found"}', bool)
        assert isinstance(result, ApiError)
        assert result.parameters is None
        assert result.retry_after is None

    def test_migrated_group(self) -> None:
        raw = _envelope(ok=False, error_code=400, description="Bad Request: group chat was upgraded to a supergroup chat", parameters={"migrate_to_chat_id": -1009876543210})
        result = decode_response(raw, Message)
        assert result.migrate_to_chat_id == -1009876543210

    def test_unknown_parameter_keys_ignored(self) -> None:
        raw = _envelope(ok=False, error_code=429, description="Too Many Requests", parameters={"retry_after": 3, "flood_scope": "chat"})
        assert decode_response(raw, bool).retry_after == 3

    def test_unwrap_raises(self) -> None:
        raw = '{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":5}}'
        with pytest.raises(BotAPIError) as exc_info:
            decode_response(raw, Message, "sendMessage").unwrap()
        assert exc_info.value.error_code == 429
        assert exc_info.value.retry_after == 5
        assert exc_info.value.method == "sendMessage"
        assert "Too Many Requests" in str(exc_info.value)


# ── Malformed input ──────────────────────────────────────────────────────────


class TestMalformed:
    """Malformed bodies become DecodeError, never ApiError, never an exception."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "<html>502 Bad Gateway</html>",
            '{"ok": true, "result": ',
            "[]",
            "null",
            '{"result": true}',
            '{"ok": "true", "result": true}',
            '{"ok": 1, "result": true}',
            '{"ok": false}',
            '{"ok": false, "error_code": 400}',
            '{"ok": false, "description": "Bad Request"}',
            '{"ok": true}',
            '{"ok": true, "result": {"message_id": "seven"}}',
        ],
    )
    def test_decode_error(self, raw: str) -> None:
        result = decode_response(raw, Message, "sendMessage")
        assert isinstance(result, DecodeError)
        assert not isinstance(result, ApiError)
        assert result.raw == raw
        assert result.method == "sendMessage"

    def test_unwrap_raises_decode_failure(self) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            decode_response("not json", bool, "getMe").unwrap()
        assert exc_info.value.raw == "not json"

    def test_invalid_utf8_bytes(self) -> None:
        result = decode_response(b"\xff\xfe garbage", bool)
        assert isinstance(result, DecodeError)


# ── Transport errors ─────────────────────────────────────────────────────────


class TestTransportError:
    """TransportError wraps the underlying requests exception."""

    def test_unwrap_raises_transport_failure(self) -> None:
        error = requests.ConnectionError("connection refused")
        with pytest.raises(TransportFailure) as exc_info:
            TransportError("getMe", error).unwrap()
        assert exc_info.value.error is error
        assert exc_info.value.__cause__ is error


# ── Pathological input ───────────────────────────────────────────────────────


class TestDeeplyNested:
    """Bodies nested past the interpreter's recursion limit stay values."""

    def test_nested_result_is_decode_error(self) -> None:
        raw = '{"ok":true,"result":' + "[" * 200000 + "]" * 200000 + "}"
        result = decode_response(raw, bool, "getMe")
        assert isinstance(result, DecodeError)
        assert result.method == "getMe"
        assert result.raw == raw

    def test_prebuilt_adapter_mismatch(self) -> None:
        result = decode_response('{"ok":true,"result":{"type":"bogus"}}', TypeAdapter(MenuButton), "getChatMenuButton")
        assert isinstance(result, DecodeError)
        assert result.reason.startswith("result does not match")
