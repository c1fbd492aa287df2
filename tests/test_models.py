"""Tests for the Bot API Pydantic models."""

import sys
import os

import pytest
from pydantic import TypeAdapter, ValidationError

# Ensure the project root is importable.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbind.models import (
    BotCommand,
    CallbackQuery,
    Chat,
    ChatMember,
    ChatPermissions,
    InlineKeyboardButton,
    InlineQueryResultCachedPhoto,
    InlineQueryResultPhoto,
    InputMediaDocument,
    InputTextMessageContent,
    MaskPosition,
    MenuButton,
    MenuButtonCommands,
    MenuButtonDefault,
    Message,
    ParseMode,
    PassportElementError,
    PassportElementErrorFiles,
    ReplyKeyboardMarkup,
    KeyboardButton,
    ResponseParameters,
    Update,
    User,
    WebhookInfo,
)
from tgbind.methods import AnswerInlineQuery, encode_request


# ── User / Chat ──────────────────────────────────────────────────────────────


class TestUserModel:
    """Validate the User schema."""

    def test_minimal_user(self) -> None:
        u = User(id=42, is_bot=False, first_name="Ada")
        assert u.id == 42
        assert u.is_bot is False
        assert u.last_name is None
        assert u.to_dict() == {"id": 42, "is_bot": False, "first_name": "Ada"}

    def test_large_ids_stay_exact(self) -> None:
        big = 2**53 + 1
        assert User(id=big, is_bot=False, first_name="X").id == big
        assert Chat(id=-1009007199254740993, type="channel").id == -1009007199254740993

    def test_missing_required_raises(self) -> None:
        with pytest.raises(ValidationError):
            User(id=1, first_name="NoFlag")


# ── Message ──────────────────────────────────────────────────────────────────


class TestMessageModel:
    """``from`` is exposed as ``from_user``."""

    RAW = {
        "message_id": 10,
        "date": 0,
        "chat": {"id": 5, "type": "private", "first_name": "Ada"},
        "from": {"id": 5, "is_bot": False, "first_name": "Ada"},
        "text": "/start",
        "entities": [{"type": "bot_command", "offset": 0, "length": 6}],
    }

    def test_alias_on_decode(self) -> None:
        msg = Message.model_validate(self.RAW)
        assert msg.from_user.id == 5
        assert msg.entities[0].type == "bot_command"

    def test_alias_on_encode(self) -> None:
        assert Message.model_validate(self.RAW).to_dict() == self.RAW

    def test_populate_by_name(self) -> None:
        msg = Message(message_id=1, date=0, chat=Chat(id=1, type="private"), from_user=User(id=1, is_bot=True, first_name="Bot"))
        assert msg.to_dict()["from"]["is_bot"] is True

    def test_unknown_fields_ignored(self) -> None:
        msg = Message.model_validate(dict(self.RAW, story={"id": 1}, is_topic_message=True))
        assert not hasattr(msg, "story")

    def test_nested_reply(self) -> None:
        raw = dict(self.RAW, reply_to_message=dict(self.RAW, message_id=9))
        assert Message.model_validate(raw).reply_to_message.message_id == 9


# ── Update ───────────────────────────────────────────────────────────────────


class TestUpdateModel:
    def test_callback_query_update(self) -> None:
        raw = {
            "update_id": 100,
            "callback_query": {
                "id": "cb1",
                "from": {"id": 7, "is_bot": False, "first_name": "Bo"},
                "chat_instance": "ci",
                "data": "approve",
            },
        }
        update = Update.model_validate(raw)
        assert isinstance(update.callback_query, CallbackQuery)
        assert update.callback_query.from_user.id == 7
        assert update.message is None

    def test_chat_member_update(self) -> None:
        member = {"status": "member", "user": {"id": 7, "is_bot": False, "first_name": "Bo"}}
        raw = {
            "update_id": 101,
            "chat_member": {
                "chat": {"id": -100, "type": "supergroup"},
                "from": {"id": 1, "is_bot": False, "first_name": "Admin"},
                "date": 0,
                "old_chat_member": dict(member, status="left"),
                "new_chat_member": member,
            },
        }
        update = Update.model_validate(raw)
        assert update.chat_member.old_chat_member.status == "left"
        assert isinstance(update.chat_member.new_chat_member, ChatMember)


# ── Type tags and unions ─────────────────────────────────────────────────────


class TestTaggedModels:
    """Literal type tags are emitted even when left at their default."""

    def test_input_media_tag(self) -> None:
        assert InputMediaDocument(media="BQAD").to_dict() == {"type": "document", "media": "BQAD"}

    def test_menu_button_discriminator(self) -> None:
        adapter = TypeAdapter(MenuButton)
        assert isinstance(adapter.validate_python({"type": "commands"}), MenuButtonCommands)
        assert isinstance(adapter.validate_python({"type": "default"}), MenuButtonDefault)
        with pytest.raises(ValidationError):
            adapter.validate_python({"type": "unknown"})

    def test_passport_error_discriminator(self) -> None:
        err = TypeAdapter(PassportElementError).validate_python({"source": "files", "type": "utility_bill", "file_hashes": ["a", "b"], "message": "Blurry"})
        assert isinstance(err, PassportElementErrorFiles)
        assert err.to_dict()["source"] == "files"

    def test_cached_and_plain_results_keep_their_class(self) -> None:
        content = InputTextMessageContent(message_text="hello")
        results = [
            InlineQueryResultPhoto(id="1", photo_url="https://example.com/p.jpg", thumb_url="https://example.com/t.jpg"),
            InlineQueryResultCachedPhoto(id="2", photo_file_id="AgAD", input_message_content=content),
        ]
        request = AnswerInlineQuery(inline_query_id="q", results=results)
        assert [type(r) for r in request.results] == [InlineQueryResultPhoto, InlineQueryResultCachedPhoto]
        body = encode_request(request)
        assert body["results"][1] == {"type": "photo", "id": "2", "photo_file_id": "AgAD", "input_message_content": {"message_text": "hello"}}


# ── Constraints ──────────────────────────────────────────────────────────────


class TestConstraints:
    def test_callback_data_length(self) -> None:
        with pytest.raises(ValidationError):
            InlineKeyboardButton(text="x", callback_data="d" * 65)

    def test_bot_command_length(self) -> None:
        with pytest.raises(ValidationError):
            BotCommand(command="", description="empty")

    def test_mask_point(self) -> None:
        assert MaskPosition(point="eyes", x_shift=0, y_shift=0, scale=1.0).point == "eyes"
        with pytest.raises(ValidationError):
            MaskPosition(point="nose", x_shift=0, y_shift=0, scale=1.0)

    def test_reply_keyboard(self) -> None:
        kb = ReplyKeyboardMarkup(keyboard=[[KeyboardButton(text="Yes"), KeyboardButton(text="No")]], one_time_keyboard=True)
        assert kb.to_dict() == {"keyboard": [[{"text": "Yes"}, {"text": "No"}]], "one_time_keyboard": True}


# ── Misc ─────────────────────────────────────────────────────────────────────


class TestMisc:
    def test_parse_mode_values(self) -> None:
        assert [m.value for m in ParseMode] == ["Markdown", "MarkdownV2", "HTML"]

    def test_response_parameters(self) -> None:
        params = ResponseParameters.model_validate({"retry_after": 5, "future": 1})
        assert params.retry_after == 5
        assert params.migrate_to_chat_id is None

    def test_chat_permissions_partial(self) -> None:
        assert ChatPermissions(can_send_messages=False).to_dict() == {"can_send_messages": False}

    def test_webhook_info(self) -> None:
        info = WebhookInfo.model_validate({"url": "", "has_custom_certificate": False, "pending_update_count": 0})
        assert info.url == ""
        assert info.last_error_date is None
