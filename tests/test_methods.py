"""Tests for request values, presence tracking and the request encoder."""

import json
import re
import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind import methods
from tgbind.client import TelegramClient
from tgbind.methods import (
    AnswerShippingQuery,
    BotRequest,
    ChatMessage,
    CreateNewStickerSet,
    AddStickerToSet,
    DeleteWebhook,
    EditMessageText,
    GetGameHighScores,
    GetMe,
    GetUpdates,
    InlineMessage,
    SendMediaGroup,
    SendMessage,
    SendPoll,
    SetGameScore,
    SetMyCommands,
    SetWebhook,
    encode_request,
    target_fields,
)
from tgbind.models import (
    BotCommand,
    BotCommandScopeChat,
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    InputMediaPhoto,
    InputMediaVideo,
    ParseMode,
    ReplyKeyboardRemove,
)


def _all_requests() -> list:
    found, stack = [], [BotRequest]
    while stack:
        cls = stack.pop()
        for sub in cls.__subclasses__():
            stack.append(sub)
            if sub.__api_method__:
                found.append(sub)
    return found


# ── Presence tracking ────────────────────────────────────────────────────────


class TestPresence:
    """Only explicitly set fields are encoded."""

    def test_only_set_fields(self) -> None:
        request = SendMessage(chat_id="123", text="hi")
        assert encode_request(request) == {"chat_id": "123", "text": "hi"}
        assert "parse_mode" not in encode_request(request)

    def test_compact_json_body(self) -> None:
        assert SendMessage(chat_id="123", text="hi").to_json() == '{"chat_id":"123","text":"hi"}'

    def test_numeric_string_chat_id_kept(self) -> None:
        assert encode_request(SendMessage(chat_id="123", text="x"))["chat_id"] == "123"
        assert encode_request(SendMessage(chat_id=123, text="x"))["chat_id"] == 123

    def test_explicit_none_is_null(self) -> None:
        request = SendMessage(chat_id=1, text="x", parse_mode=None)
        assert encode_request(request) == {"chat_id": 1, "text": "x", "parse_mode": None}
        assert json.loads(request.to_json())["parse_mode"] is None

    def test_explicit_false_is_sent(self) -> None:
        assert encode_request(DeleteWebhook(drop_pending_updates=False)) == {"drop_pending_updates": False}

    def test_empty_list_is_sent(self) -> None:
        # allowed_updates=[] means "all update types", unlike an omitted field.
        assert encode_request(SetWebhook(url="https://example.com/hook", allowed_updates=[])) == {
            "url": "https://example.com/hook",
            "allowed_updates": [],
        }

    def test_key_set_equals_fields_set(self) -> None:
        request = GetUpdates(offset=10, timeout=30)
        assert set(encode_request(request)) == request.model_fields_set == {"offset", "timeout"}

    def test_enum_encoded_as_value(self) -> None:
        assert encode_request(SendMessage(chat_id=1, text="x", parse_mode=ParseMode.MARKDOWN_V2))["parse_mode"] == "MarkdownV2"
        assert encode_request(SendMessage(chat_id=1, text="x", parse_mode="HTML"))["parse_mode"] == "HTML"

    def test_nested_models_follow_presence(self) -> None:
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="Yes", callback_data="y")]])
        body = encode_request(SendMessage(chat_id=1, text="Sure?", reply_markup=markup))
        assert body["reply_markup"] == {"inline_keyboard": [[{"text": "Yes", "callback_data": "y"}]]}

    def test_type_tags_always_emitted(self) -> None:
        request = SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media="AgAD1"), InputMediaVideo(media="BAAD2", caption="clip")])
        assert encode_request(request)["media"] == [
            {"type": "photo", "media": "AgAD1"},
            {"type": "video", "media": "BAAD2", "caption": "clip"},
        ]

    def test_scope_from_model_and_dict(self) -> None:
        commands = [BotCommand(command="start", description="Start the bot")]
        from_model = SetMyCommands(commands=commands, scope=BotCommandScopeChat(chat_id=-100))
        from_dict = SetMyCommands(commands=commands, scope={"type": "all_private_chats"})
        assert encode_request(from_model)["scope"] == {"type": "chat", "chat_id": -100}
        assert encode_request(from_dict)["scope"] == {"type": "all_private_chats"}

    def test_literal_true_markups(self) -> None:
        assert encode_request(SendMessage(chat_id=1, text="x", reply_markup=ReplyKeyboardRemove()))["reply_markup"] == {"remove_keyboard": True}
        assert encode_request(SendMessage(chat_id=1, text="x", reply_markup=ForceReply(selective=True)))["reply_markup"] == {"force_reply": True, "selective": True}

    def test_non_ascii_text(self) -> None:
        assert SendMessage(chat_id=1, text="привет 👋").to_json() == '{"chat_id":1,"text":"привет 👋"}'


# ── Request value behaviour ──────────────────────────────────────────────────


class TestBotRequest:
    """Frozen, strict request values."""

    def test_has_body(self) -> None:
        assert GetMe().has_body is False
        assert DeleteWebhook().has_body is False
        assert DeleteWebhook(drop_pending_updates=True).has_body is True

    def test_webhook_reply_carries_method(self) -> None:
        reply = SendMessage(chat_id=1, text="pong").to_webhook_reply()
        assert reply == {"method": "sendMessage", "chat_id": 1, "text": "pong"}

    def test_frozen(self) -> None:
        request = SendMessage(chat_id=1, text="x")
        with pytest.raises(ValidationError):
            request.text = "y"

    def test_unknown_parameter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SendMessage(chat_id=1, text="x", parse_mod="HTML")

    def test_missing_required_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SendMessage(chat_id=1)

    @pytest.mark.parametrize("text", ["", "x" * 4097])
    def test_text_length(self, text: str) -> None:
        with pytest.raises(ValidationError):
            SendMessage(chat_id=1, text=text)

    def test_numeric_bounds(self) -> None:
        with pytest.raises(ValidationError):
            GetUpdates(limit=101)
        with pytest.raises(ValidationError):
            SetWebhook(url="https://example.com", max_connections=0)

    def test_list_size(self) -> None:
        with pytest.raises(ValidationError):
            SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media="only-one")])

    def test_every_operation_has_one_request(self) -> None:
        requests_ = _all_requests()
        names = [cls.__api_method__ for cls in requests_]
        assert len(names) == len(set(names)) == 88

    def test_every_operation_has_client_method(self) -> None:
        for cls in _all_requests():
            snake = re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__api_method__).lower()
            assert callable(getattr(TelegramClient, snake, None)), snake

    def test_every_request_exported_by_name(self) -> None:
        for cls in _all_requests():
            assert getattr(methods, cls.__name__) is cls


# ── Message targets ──────────────────────────────────────────────────────────


class TestMessageTarget:
    """chat_id + message_id XOR inline_message_id."""

    def test_target_fields(self) -> None:
        assert target_fields(ChatMessage(chat_id="@news", message_id=5)) == {"chat_id": "@news", "message_id": 5}
        assert target_fields(InlineMessage(inline_message_id="AAA")) == {"inline_message_id": "AAA"}

    def test_target_fields_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            target_fields({"chat_id": 1, "message_id": 2})

    def test_empty_inline_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InlineMessage(inline_message_id="")

    def test_valid_targets(self) -> None:
        assert encode_request(EditMessageText(chat_id=1, message_id=2, text="x")) == {"chat_id": 1, "message_id": 2, "text": "x"}
        assert encode_request(EditMessageText(inline_message_id="AAA", text="x")) == {"inline_message_id": "AAA", "text": "x"}

    @pytest.mark.parametrize(
        "fields",
        [
            {},
            {"chat_id": 1},
            {"message_id": 2},
            {"chat_id": 1, "message_id": 2, "inline_message_id": "AAA"},
            {"chat_id": 1, "inline_message_id": "AAA"},
        ],
    )
    def test_invalid_targets(self, fields: dict) -> None:
        with pytest.raises(ValidationError):
            EditMessageText(text="x", **fields)

    def test_game_requests_use_integer_chat_id(self) -> None:
        assert encode_request(SetGameScore(chat_id=10, message_id=3, user_id=7, score=100))["chat_id"] == 10
        with pytest.raises(ValidationError):
            GetGameHighScores(chat_id="@games", message_id=3, user_id=7)


# ── Other exclusive groups ───────────────────────────────────────────────────


class TestExclusiveGroups:
    """Sticker file choice, quiz answers and shipping answers."""

    def test_exactly_one_sticker_file(self) -> None:
        base = {"user_id": 1, "name": "pack_by_bot", "title": "Pack", "emojis": "😀"}
        assert encode_request(CreateNewStickerSet(webm_sticker="CAAD", **base))["webm_sticker"] == "CAAD"
        with pytest.raises(ValidationError):
            CreateNewStickerSet(**base)
        with pytest.raises(ValidationError):
            CreateNewStickerSet(png_sticker="A", tgs_sticker="B", **base)
        with pytest.raises(ValidationError):
            AddStickerToSet(user_id=1, name="pack_by_bot", emojis="😀", png_sticker="A", webm_sticker="C")

    def test_quiz_correct_option(self) -> None:
        base = {"chat_id": 1, "question": "2+2?", "options": ["3", "4"]}
        assert encode_request(SendPoll(type="quiz", correct_option_id=1, **base))["correct_option_id"] == 1
        with pytest.raises(ValidationError):
            SendPoll(correct_option_id=1, **base)
        with pytest.raises(ValidationError):
            SendPoll(type="regular", correct_option_id=1, **base)
        with pytest.raises(ValidationError):
            SendPoll(type="quiz", correct_option_id=2, **base)

    def test_poll_option_count(self) -> None:
        with pytest.raises(ValidationError):
            SendPoll(chat_id=1, question="?", options=["only"])

    def test_shipping_answer(self) -> None:
        assert encode_request(AnswerShippingQuery(shipping_query_id="q", ok=False, error_message="No delivery")) == {
            "shipping_query_id": "q",
            "ok": False,
            "error_message": "No delivery",
        }
        with pytest.raises(ValidationError):
            AnswerShippingQuery(shipping_query_id="q", ok=True)
