"""Tests for webhook helpers."""

import json
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.exceptions import DecodeFailure
from tgbind.methods import SendMessage
from tgbind.webhook import SECRET_TOKEN_HEADER, parse_update, verify_secret_token

UPDATE = {
    "update_id": 555,
    "message": {
        "message_id": 3,
        "date": 1700000000,
        "chat": {"id": 42, "type": "private"},
        "from": {"id": 42, "is_bot": False, "first_name": "Ada"},
        "text": "ping",
    },
}


class TestParseUpdate:
    @pytest.mark.parametrize("raw", [json.dumps(UPDATE), json.dumps(UPDATE).encode("utf-8"), UPDATE])
    def test_accepted_inputs(self, raw) -> None:
        update = parse_update(raw)
        assert update.update_id == 555
        assert update.message.text == "ping"

    def test_unknown_update_kind(self) -> None:
        update = parse_update({"update_id": 1, "message_reaction": {"chat": {}}})
        assert update.update_id == 1
        assert update.message is None

    def test_not_json(self) -> None:
        with pytest.raises(DecodeFailure) as exc_info:
            parse_update("update_id=1")
        assert exc_info.value.method == "update"
        assert exc_info.value.raw == "update_id=1"

    def test_not_an_update(self) -> None:
        with pytest.raises(DecodeFailure):
            parse_update('{"message": {}}')

    def test_deeply_nested_body(self) -> None:
        with pytest.raises(DecodeFailure):
            parse_update('{"update_id":1,"message":' + "[" * 200000 + "]" * 200000 + "}")

    def test_reply_in_webhook_response(self) -> None:
        update = parse_update(UPDATE)
        reply = SendMessage(chat_id=update.message.chat.id, text="pong").to_webhook_reply()
        assert reply == {"method": "sendMessage", "chat_id": 42, "text": "pong"}


class TestVerifySecretToken:
    def test_match(self) -> None:
        assert verify_secret_token({SECRET_TOKEN_HEADER: "s3cret"}, "s3cret") is True

    def test_case_insensitive_header(self) -> None:
        assert verify_secret_token({"x-telegram-bot-api-secret-token": "s3cret"}, "s3cret") is True

    def test_mismatch(self) -> None:
        assert verify_secret_token({SECRET_TOKEN_HEADER: "guess"}, "s3cret") is False

    def test_missing_header(self) -> None:
        assert verify_secret_token({"Content-Type": "application/json"}, "s3cret") is False
