"""Request values for every Bot API method, and the request encoder.

Each operation is a frozen :class:`BotRequest` subclass.  Its fields carry
the remote parameter names verbatim; ``__api_method__`` names the endpoint
and ``__returns__`` the type the ``result`` of the envelope decodes to.

Presence tracking relies on pydantic's own ``model_fields_set``: a field the
caller never passed is omitted from the body, a field passed as ``None`` is
sent as ``null``::

    >>> SendMessage(chat_id="123", text="hi").to_json()
    '{"chat_id":"123","text":"hi"}'

Documented constraints (lengths, bounds, mutually exclusive parameter
groups) are checked at construction and raise ``pydantic.ValidationError``
before any request is made.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, TypeAdapter, model_validator

from tgbind.models import (
    AlbumMedia,
    BotCommand,
    BotCommandScope,
    Chat,
    ChatAdministratorRights,
    ChatId,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    GameHighScore,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputFile,
    InputMedia,
    LabeledPrice,
    MaskPosition,
    MenuButton,
    Message,
    MessageEntity,
    MessageId,
    ParseMode,
    PassportElementError,
    Poll,
    ReplyMarkup,
    SentWebAppMessage,
    ShippingOption,
    StickerSet,
    TelegramModel,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)

Caption = Annotated[str, Field(max_length=1024)]
MessageText = Annotated[str, Field(min_length=1, max_length=4096)]
PollOptionText = Annotated[str, Field(min_length=1, max_length=100)]


class BotRequest(TelegramModel):
    """Base of every request value."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    __api_method__: ClassVar[str] = ""
    __returns__: ClassVar[Any] = bool
    __result_adapter__: ClassVar[TypeAdapter] = TypeAdapter(bool)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__result_adapter__ = TypeAdapter(cls.__returns__)

    @property
    def has_body(self) -> bool:
        """False when no field was set; such requests are sent as GET."""
        return bool(self.model_fields_set)

    def to_json(self) -> str:
        """Compact UTF-8 JSON body holding only the fields that were set."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)

    def to_webhook_reply(self) -> Dict[str, Any]:
        """Body a webhook handler can return to perform this call in its HTTP reply."""
        return {"method": self.__api_method__, **encode_request(self)}


def encode_request(request: BotRequest) -> Dict[str, Any]:
    """Encode *request* into a JSON-ready dict of its explicitly set fields."""
    return request.model_dump(mode="json", by_alias=True, exclude_unset=True)


# ── Message targets ──────────────────────────────────────────────────────────


class ChatMessage(TelegramModel):
    """A message addressed by chat and message id."""

    model_config = ConfigDict(frozen=True)

    chat_id: ChatId
    message_id: int


class InlineMessage(TelegramModel):
    """A message sent via the bot in inline mode."""

    model_config = ConfigDict(frozen=True)

    inline_message_id: str = Field(min_length=1)


MessageTarget = Union[ChatMessage, InlineMessage]


def target_fields(target: MessageTarget) -> Dict[str, Any]:
    """Request fields that address *target*."""
    if isinstance(target, ChatMessage):
        return {"chat_id": target.chat_id, "message_id": target.message_id}
    if isinstance(target, InlineMessage):
        return {"inline_message_id": target.inline_message_id}
    raise TypeError(f"expected ChatMessage or InlineMessage, got {type(target).__name__}")


class _TargetedRequest(BotRequest):
    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_target(self) -> "_TargetedRequest":
        by_chat = (self.chat_id is not None, self.message_id is not None)
        by_inline = self.inline_message_id is not None
        if by_inline and not any(by_chat):
            return self
        if all(by_chat) and not by_inline:
            return self
        raise ValueError("either chat_id and message_id, or inline_message_id, must be specified")


class _StickerFileRequest(BotRequest):
    png_sticker: Optional[InputFile] = None
    tgs_sticker: Optional[InputFile] = None
    webm_sticker: Optional[InputFile] = None

    @model_validator(mode="after")
    def _check_sticker_file(self) -> "_StickerFileRequest":
        given = [name for name in ("png_sticker", "tgs_sticker", "webm_sticker") if getattr(self, name) is not None]
        if len(given) != 1:
            raise ValueError("exactly one of png_sticker, tgs_sticker or webm_sticker must be used")
        return self


# ── Getting updates ──────────────────────────────────────────────────────────


class GetUpdates(BotRequest):
    __api_method__ = "getUpdates"
    __returns__ = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = Field(None, ge=1, le=100)
    timeout: Optional[int] = Field(None, ge=0)
    allowed_updates: Optional[List[str]] = None


class SetWebhook(BotRequest):
    __api_method__ = "setWebhook"

    url: str
    ip_address: Optional[str] = None
    max_connections: Optional[int] = Field(None, ge=1, le=100)
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None
    secret_token: Optional[str] = Field(None, min_length=1, max_length=256, pattern=r"^[A-Za-z0-9_-]+$")


class DeleteWebhook(BotRequest):
    __api_method__ = "deleteWebhook"

    drop_pending_updates: Optional[bool] = None


class GetWebhookInfo(BotRequest):
    __api_method__ = "getWebhookInfo"
    __returns__ = WebhookInfo


# ── Bot ──────────────────────────────────────────────────────────────────────


class GetMe(BotRequest):
    __api_method__ = "getMe"
    __returns__ = User


class LogOut(BotRequest):
    __api_method__ = "logOut"


class Close(BotRequest):
    __api_method__ = "close"


# ── Messages ─────────────────────────────────────────────────────────────────


class SendMessage(BotRequest):
    __api_method__ = "sendMessage"
    __returns__ = Message

    chat_id: ChatId
    text: MessageText
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class ForwardMessage(BotRequest):
    __api_method__ = "forwardMessage"
    __returns__ = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None


class CopyMessage(BotRequest):
    __api_method__ = "copyMessage"
    __returns__ = MessageId

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPhoto(BotRequest):
    __api_method__ = "sendPhoto"
    __returns__ = Message

    chat_id: ChatId
    photo: InputFile
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAudio(BotRequest):
    __api_method__ = "sendAudio"
    __returns__ = Message

    chat_id: ChatId
    audio: InputFile
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[InputFile] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendDocument(BotRequest):
    __api_method__ = "sendDocument"
    __returns__ = Message

    chat_id: ChatId
    document: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideo(BotRequest):
    __api_method__ = "sendVideo"
    __returns__ = Message

    chat_id: ChatId
    video: InputFile
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFile] = None
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    supports_streaming: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendAnimation(BotRequest):
    __api_method__ = "sendAnimation"
    __returns__ = Message

    chat_id: ChatId
    animation: InputFile
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFile] = None
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVoice(BotRequest):
    __api_method__ = "sendVoice"
    __returns__ = Message

    chat_id: ChatId
    voice: InputFile
    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendVideoNote(BotRequest):
    __api_method__ = "sendVideoNote"
    __returns__ = Message

    chat_id: ChatId
    video_note: InputFile
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[InputFile] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendMediaGroup(BotRequest):
    __api_method__ = "sendMediaGroup"
    __returns__ = List[Message]

    chat_id: ChatId
    media: List[AlbumMedia] = Field(min_length=2, max_length=10)
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class SendLocation(BotRequest):
    __api_method__ = "sendLocation"
    __returns__ = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    live_period: Optional[int] = Field(None, ge=60, le=86400)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class EditMessageLiveLocation(_TargetedRequest):
    __api_method__ = "editMessageLiveLocation"
    __returns__ = Union[Message, bool]

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)
    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopMessageLiveLocation(_TargetedRequest):
    __api_method__ = "stopMessageLiveLocation"
    __returns__ = Union[Message, bool]

    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendVenue(BotRequest):
    __api_method__ = "sendVenue"
    __returns__ = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendContact(BotRequest):
    __api_method__ = "sendContact"
    __returns__ = Message

    chat_id: ChatId
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = Field(None, max_length=2048)
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendPoll(BotRequest):
    __api_method__ = "sendPoll"
    __returns__ = Message

    chat_id: ChatId
    question: str = Field(min_length=1, max_length=300)
    options: List[PollOptionText] = Field(min_length=2, max_length=10)
    is_anonymous: Optional[bool] = None
    type: Optional[Literal["quiz", "regular"]] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = Field(None, ge=0)
    explanation: Optional[str] = Field(None, max_length=200)
    explanation_parse_mode: Optional[ParseMode] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = Field(None, ge=5, le=600)
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None

    @model_validator(mode="after")
    def _check_quiz(self) -> "SendPoll":
        if self.correct_option_id is None:
            return self
        if self.type != "quiz":
            raise ValueError("correct_option_id is only allowed for polls in quiz mode")
        if self.correct_option_id >= len(self.options):
            raise ValueError("correct_option_id is out of range of options")
        return self


class SendDice(BotRequest):
    __api_method__ = "sendDice"
    __returns__ = Message

    chat_id: ChatId
    emoji: Optional[str] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendChatAction(BotRequest):
    __api_method__ = "sendChatAction"

    chat_id: ChatId
    action: str


class GetUserProfilePhotos(BotRequest):
    __api_method__ = "getUserProfilePhotos"
    __returns__ = UserProfilePhotos

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = Field(None, ge=1, le=100)


class GetFile(BotRequest):
    __api_method__ = "getFile"
    __returns__ = File

    file_id: str


# ── Chat administration ──────────────────────────────────────────────────────


class BanChatMember(BotRequest):
    __api_method__ = "banChatMember"

    chat_id: ChatId
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMember(BotRequest):
    __api_method__ = "unbanChatMember"

    chat_id: ChatId
    user_id: int
    only_if_banned: Optional[bool] = None


class RestrictChatMember(BotRequest):
    __api_method__ = "restrictChatMember"

    chat_id: ChatId
    user_id: int
    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMember(BotRequest):
    __api_method__ = "promoteChatMember"

    chat_id: ChatId
    user_id: int
    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class SetChatAdministratorCustomTitle(BotRequest):
    __api_method__ = "setChatAdministratorCustomTitle"

    chat_id: ChatId
    user_id: int
    custom_title: str = Field(max_length=16)


class BanChatSenderChat(BotRequest):
    __api_method__ = "banChatSenderChat"

    chat_id: ChatId
    sender_chat_id: int


class UnbanChatSenderChat(BotRequest):
    __api_method__ = "unbanChatSenderChat"

    chat_id: ChatId
    sender_chat_id: int


class SetChatPermissions(BotRequest):
    __api_method__ = "setChatPermissions"

    chat_id: ChatId
    permissions: ChatPermissions


class ExportChatInviteLink(BotRequest):
    __api_method__ = "exportChatInviteLink"
    __returns__ = str

    chat_id: ChatId


class CreateChatInviteLink(BotRequest):
    __api_method__ = "createChatInviteLink"
    __returns__ = ChatInviteLink

    chat_id: ChatId
    name: Optional[str] = Field(None, max_length=32)
    expire_date: Optional[int] = None
    member_limit: Optional[int] = Field(None, ge=1, le=99999)
    creates_join_request: Optional[bool] = None


class EditChatInviteLink(BotRequest):
    __api_method__ = "editChatInviteLink"
    __returns__ = ChatInviteLink

    chat_id: ChatId
    invite_link: str
    name: Optional[str] = Field(None, max_length=32)
    expire_date: Optional[int] = None
    member_limit: Optional[int] = Field(None, ge=1, le=99999)
    creates_join_request: Optional[bool] = None


class RevokeChatInviteLink(BotRequest):
    __api_method__ = "revokeChatInviteLink"
    __returns__ = ChatInviteLink

    chat_id: ChatId
    invite_link: str


class ApproveChatJoinRequest(BotRequest):
    __api_method__ = "approveChatJoinRequest"

    chat_id: ChatId
    user_id: int


class DeclineChatJoinRequest(BotRequest):
    __api_method__ = "declineChatJoinRequest"

    chat_id: ChatId
    user_id: int


class SetChatPhoto(BotRequest):
    __api_method__ = "setChatPhoto"

    chat_id: ChatId
    photo: InputFile


class DeleteChatPhoto(BotRequest):
    __api_method__ = "deleteChatPhoto"

    chat_id: ChatId


class SetChatTitle(BotRequest):
    __api_method__ = "setChatTitle"

    chat_id: ChatId
    title: str = Field(min_length=1, max_length=128)


class SetChatDescription(BotRequest):
    __api_method__ = "setChatDescription"

    chat_id: ChatId
    description: Optional[str] = Field(None, max_length=255)


class PinChatMessage(BotRequest):
    __api_method__ = "pinChatMessage"

    chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessage(BotRequest):
    __api_method__ = "unpinChatMessage"

    chat_id: ChatId
    message_id: Optional[int] = None


class UnpinAllChatMessages(BotRequest):
    __api_method__ = "unpinAllChatMessages"

    chat_id: ChatId


class LeaveChat(BotRequest):
    __api_method__ = "leaveChat"

    chat_id: ChatId


class GetChat(BotRequest):
    __api_method__ = "getChat"
    __returns__ = Chat

    chat_id: ChatId


class GetChatAdministrators(BotRequest):
    __api_method__ = "getChatAdministrators"
    __returns__ = List[ChatMember]

    chat_id: ChatId


class GetChatMemberCount(BotRequest):
    __api_method__ = "getChatMemberCount"
    __returns__ = int

    chat_id: ChatId


class GetChatMember(BotRequest):
    __api_method__ = "getChatMember"
    __returns__ = ChatMember

    chat_id: ChatId
    user_id: int


class SetChatStickerSet(BotRequest):
    __api_method__ = "setChatStickerSet"

    chat_id: ChatId
    sticker_set_name: str


class DeleteChatStickerSet(BotRequest):
    __api_method__ = "deleteChatStickerSet"

    chat_id: ChatId


# ── Bot settings ─────────────────────────────────────────────────────────────


class AnswerCallbackQuery(BotRequest):
    __api_method__ = "answerCallbackQuery"

    callback_query_id: str
    text: Optional[str] = Field(None, max_length=200)
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = Field(None, ge=0)


class SetMyCommands(BotRequest):
    __api_method__ = "setMyCommands"

    commands: List[BotCommand] = Field(max_length=100)
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class DeleteMyCommands(BotRequest):
    __api_method__ = "deleteMyCommands"

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class GetMyCommands(BotRequest):
    __api_method__ = "getMyCommands"
    __returns__ = List[BotCommand]

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None


class SetChatMenuButton(BotRequest):
    __api_method__ = "setChatMenuButton"

    chat_id: Optional[int] = None
    menu_button: Optional[MenuButton] = None


class GetChatMenuButton(BotRequest):
    __api_method__ = "getChatMenuButton"
    __returns__ = MenuButton

    chat_id: Optional[int] = None


class SetMyDefaultAdministratorRights(BotRequest):
    __api_method__ = "setMyDefaultAdministratorRights"

    rights: Optional[ChatAdministratorRights] = None
    for_channels: Optional[bool] = None


class GetMyDefaultAdministratorRights(BotRequest):
    __api_method__ = "getMyDefaultAdministratorRights"
    __returns__ = ChatAdministratorRights

    for_channels: Optional[bool] = None


# ── Updating messages ────────────────────────────────────────────────────────


class EditMessageText(_TargetedRequest):
    __api_method__ = "editMessageText"
    __returns__ = Union[Message, bool]

    text: MessageText
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaption(_TargetedRequest):
    __api_method__ = "editMessageCaption"
    __returns__ = Union[Message, bool]

    caption: Optional[Caption] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMedia(_TargetedRequest):
    __api_method__ = "editMessageMedia"
    __returns__ = Union[Message, bool]

    media: InputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(_TargetedRequest):
    __api_method__ = "editMessageReplyMarkup"
    __returns__ = Union[Message, bool]

    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopPoll(BotRequest):
    __api_method__ = "stopPoll"
    __returns__ = Poll

    chat_id: ChatId
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(BotRequest):
    __api_method__ = "deleteMessage"

    chat_id: ChatId
    message_id: int


# ── Stickers ─────────────────────────────────────────────────────────────────


class SendSticker(BotRequest):
    __api_method__ = "sendSticker"
    __returns__ = Message

    chat_id: ChatId
    sticker: InputFile
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class GetStickerSet(BotRequest):
    __api_method__ = "getStickerSet"
    __returns__ = StickerSet

    name: str


class UploadStickerFile(BotRequest):
    __api_method__ = "uploadStickerFile"
    __returns__ = File

    user_id: int
    png_sticker: InputFile


class CreateNewStickerSet(_StickerFileRequest):
    __api_method__ = "createNewStickerSet"

    user_id: int
    name: str = Field(min_length=1, max_length=64)
    title: str = Field(min_length=1, max_length=64)
    emojis: str
    contains_masks: Optional[bool] = None
    mask_position: Optional[MaskPosition] = None


class AddStickerToSet(_StickerFileRequest):
    __api_method__ = "addStickerToSet"

    user_id: int
    name: str
    emojis: str
    mask_position: Optional[MaskPosition] = None


class SetStickerPositionInSet(BotRequest):
    __api_method__ = "setStickerPositionInSet"

    sticker: str
    position: int = Field(ge=0)


class DeleteStickerFromSet(BotRequest):
    __api_method__ = "deleteStickerFromSet"

    sticker: str


class SetStickerSetThumb(BotRequest):
    __api_method__ = "setStickerSetThumb"

    name: str
    user_id: int
    thumb: Optional[InputFile] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class AnswerInlineQuery(BotRequest):
    __api_method__ = "answerInlineQuery"

    inline_query_id: str
    results: List[InlineQueryResult] = Field(max_length=50)
    cache_time: Optional[int] = Field(None, ge=0)
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = Field(None, max_length=64)
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = Field(None, min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$")


class AnswerWebAppQuery(BotRequest):
    __api_method__ = "answerWebAppQuery"
    __returns__ = SentWebAppMessage

    web_app_query_id: str
    result: InlineQueryResult


# ── Payments ─────────────────────────────────────────────────────────────────


class SendInvoice(BotRequest):
    __api_method__ = "sendInvoice"
    __returns__ = Message

    chat_id: ChatId
    title: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1, max_length=255)
    payload: str = Field(min_length=1, max_length=128)
    provider_token: str
    currency: str
    prices: List[LabeledPrice] = Field(min_length=1)
    max_tip_amount: Optional[int] = Field(None, ge=0)
    suggested_tip_amounts: Optional[List[int]] = Field(None, max_length=4)
    start_parameter: Optional[str] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class CreateInvoiceLink(BotRequest):
    __api_method__ = "createInvoiceLink"
    __returns__ = str

    title: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1, max_length=255)
    payload: str = Field(min_length=1, max_length=128)
    provider_token: str
    currency: str
    prices: List[LabeledPrice] = Field(min_length=1)
    max_tip_amount: Optional[int] = Field(None, ge=0)
    suggested_tip_amounts: Optional[List[int]] = Field(None, max_length=4)
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


class AnswerShippingQuery(BotRequest):
    __api_method__ = "answerShippingQuery"

    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "AnswerShippingQuery":
        if self.ok and self.shipping_options is None:
            raise ValueError("shipping_options is required when ok is True")
        if not self.ok and self.error_message is None:
            raise ValueError("error_message is required when ok is False")
        return self


class AnswerPreCheckoutQuery(BotRequest):
    __api_method__ = "answerPreCheckoutQuery"

    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "AnswerPreCheckoutQuery":
        if not self.ok and self.error_message is None:
            raise ValueError("error_message is required when ok is False")
        return self


# ── Telegram Passport ────────────────────────────────────────────────────────


class SetPassportDataErrors(BotRequest):
    __api_method__ = "setPassportDataErrors"

    user_id: int
    errors: List[PassportElementError]


# ── Games ────────────────────────────────────────────────────────────────────


class SendGame(BotRequest):
    __api_method__ = "sendGame"
    __returns__ = Message

    chat_id: int
    game_short_name: str
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SetGameScore(_TargetedRequest):
    __api_method__ = "setGameScore"
    __returns__ = Union[Message, bool]

    chat_id: Optional[int] = None
    user_id: int
    score: int = Field(ge=0)
    force: Optional[bool] = None
    disable_edit_message: Optional[bool] = None


class GetGameHighScores(_TargetedRequest):
    __api_method__ = "getGameHighScores"
    __returns__ = List[GameHighScore]

    chat_id: Optional[int] = None
    user_id: int
