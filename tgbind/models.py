"""Pydantic data models for the Telegram Bot API (6.0 object set).

Every class corresponds to an object of the Bot API reference.  The same
models serve as decode targets for responses and as building blocks of
request values (:mod:`tgbind.methods`):

* unknown fields are ignored, so a server that grew new fields still decodes;
* fields are populated by name or by wire alias (``from`` ↔ ``from_user``);
* only fields that were actually set are encoded (``exclude_unset``), except
  fixed type tags (``type``/``source`` literals), which are always emitted.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, FrozenSet, List, Literal, Optional, Union, get_origin

from pydantic import BaseModel, ConfigDict, Field


class TelegramModel(BaseModel):
    """Common base of every Bot API object."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    __tag_fields__: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__tag_fields__ = frozenset(
            name
            for name, info in cls.model_fields.items()
            if get_origin(info.annotation) is Literal and not info.is_required()
        )

    def model_post_init(self, context: Any, /) -> None:
        # Type tags count as set even when left at their default.
        if self.__tag_fields__:
            self.__pydantic_fields_set__.update(self.__tag_fields__)

    def to_dict(self) -> dict:
        """Wire representation: aliases applied, unset fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ParseMode(str, Enum):
    """Formatting options for message text and captions."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


# ``@channelusername`` or a numeric id; ids can exceed 32 bits.
ChatId = Union[int, str]
# file_id of a file already on the Telegram servers, or an HTTP URL.
InputFile = str


# ── Updates ──────────────────────────────────────────────────────────────────


class Update(TelegramModel):
    """An incoming update. At most one of the optional fields is present."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None
    chat_join_request: Optional[ChatJoinRequest] = None


class WebhookInfo(TelegramModel):
    """Current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Core objects ─────────────────────────────────────────────────────────────


class User(TelegramModel):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(TelegramModel):
    """A chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_protected_content: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class Message(TelegramModel):
    """A message."""

    message_id: int
    date: int
    chat: Chat
    from_user: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    video_chat_scheduled: Optional[VideoChatScheduled] = None
    video_chat_started: Optional[VideoChatStarted] = None
    video_chat_ended: Optional[VideoChatEnded] = None
    video_chat_participants_invited: Optional[VideoChatParticipantsInvited] = None
    web_app_data: Optional[WebAppData] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class MessageId(TelegramModel):
    """A unique message identifier."""

    message_id: int


class MessageEntity(TelegramModel):
    """One special entity in a text message: hashtag, username, URL, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


# ── Media ────────────────────────────────────────────────────────────────────


class PhotoSize(TelegramModel):
    """One size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramModel):
    """An animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramModel):
    """An audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramModel):
    """A general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramModel):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramModel):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramModel):
    """A phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramModel):
    """An animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramModel):
    text: str
    voter_count: int


class PollAnswer(TelegramModel):
    """An answer of a user in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramModel):
    """Information about a poll."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramModel):
    """A point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramModel):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class WebAppData(TelegramModel):
    """Data sent from a Web App to the bot."""

    data: str
    button_text: str


class ProximityAlertTriggered(TelegramModel):
    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramModel):
    message_auto_delete_time: int


class VideoChatScheduled(TelegramModel):
    start_date: int


class VideoChatStarted(TelegramModel):
    """Placeholder service message; currently holds no information."""


class VideoChatEnded(TelegramModel):
    duration: int


class VideoChatParticipantsInvited(TelegramModel):
    users: Optional[List[User]] = None


class UserProfilePhotos(TelegramModel):
    """A user's profile pictures."""

    total_count: int
    photos: List[List[PhotoSize]]


class File(TelegramModel):
    """A file ready to be downloaded from ``https://<host>/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class WebAppInfo(TelegramModel):
    """Describes a Web App."""

    url: str


class KeyboardButtonPollType(TelegramModel):
    type: Optional[str] = None


class KeyboardButton(TelegramModel):
    """One button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None
    web_app: Optional[WebAppInfo] = None


class ReplyKeyboardMarkup(TelegramModel):
    """A custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = Field(None, min_length=1, max_length=64)
    selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramModel):
    """Asks clients to remove the custom keyboard."""

    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class LoginUrl(TelegramModel):
    """A parameter of the inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackGame(TelegramModel):
    """A placeholder, currently holds no information."""


class InlineKeyboardButton(TelegramModel):
    """One button of an inline keyboard. Exactly one of the optional fields must be used."""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = Field(None, min_length=1, max_length=64)
    web_app: Optional[WebAppInfo] = None
    login_url: Optional[LoginUrl] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class InlineKeyboardMarkup(TelegramModel):
    """An inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List[InlineKeyboardButton]]


class ForceReply(TelegramModel):
    """Shows a reply interface to the user."""

    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = Field(None, min_length=1, max_length=64)
    selective: Optional[bool] = None


ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply]


class CallbackQuery(TelegramModel):
    """An incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_user: User = Field(alias="from")
    chat_instance: str
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    data: Optional[str] = None
    game_short_name: Optional[str] = None


# ── Chats and members ────────────────────────────────────────────────────────


class ChatPhoto(TelegramModel):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatInviteLink(TelegramModel):
    """An invite link for a chat."""

    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class ChatAdministratorRights(TelegramModel):
    """Rights of an administrator in a chat."""

    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_video_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatMember(TelegramModel):
    """Information about one member of a chat.

    The Bot API defines one object per ``status`` (creator, administrator,
    member, restricted, left, kicked); they are flattened here, with every
    status-specific field optional.
    """

    status: str
    user: User
    is_anonymous: Optional[bool] = None
    custom_title: Optional[str] = None
    until_date: Optional[int] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None


class ChatMemberUpdated(TelegramModel):
    """Changes in the status of a chat member."""

    chat: Chat
    from_user: User = Field(alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatJoinRequest(TelegramModel):
    """A join request sent to a chat."""

    chat: Chat
    from_user: User = Field(alias="from")
    date: int
    bio: Optional[str] = None
    invite_link: Optional[ChatInviteLink] = None


class ChatPermissions(TelegramModel):
    """Actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatLocation(TelegramModel):
    location: Location
    address: str


# ── Bot commands and menu button ─────────────────────────────────────────────


class BotCommand(TelegramModel):
    """A bot command."""

    command: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1, max_length=256)


class BotCommandScopeDefault(TelegramModel):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramModel):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramModel):
    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramModel):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramModel):
    type: Literal["chat"] = "chat"
    chat_id: ChatId


class BotCommandScopeChatAdministrators(TelegramModel):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: ChatId


class BotCommandScopeChatMember(TelegramModel):
    type: Literal["chat_member"] = "chat_member"
    chat_id: ChatId
    user_id: int


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Field(discriminator="type"),
]


class MenuButtonCommands(TelegramModel):
    """Menu button which opens the bot's list of commands."""

    type: Literal["commands"] = "commands"


class MenuButtonWebApp(TelegramModel):
    """Menu button which launches a Web App."""

    type: Literal["web_app"] = "web_app"
    text: str
    web_app: WebAppInfo


class MenuButtonDefault(TelegramModel):
    """No specific value for the menu button was set."""

    type: Literal["default"] = "default"


MenuButton = Annotated[
    Union[MenuButtonCommands, MenuButtonWebApp, MenuButtonDefault],
    Field(discriminator="type"),
]


class ResponseParameters(TelegramModel):
    """Why a request was unsuccessful and how it may be retried."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputMediaPhoto(TelegramModel):
    type: Literal["photo"] = "photo"
    media: InputFile
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaVideo(TelegramModel):
    type: Literal["video"] = "video"
    media: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(TelegramModel):
    type: Literal["animation"] = "animation"
    media: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(TelegramModel):
    type: Literal["audio"] = "audio"
    media: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(TelegramModel):
    type: Literal["document"] = "document"
    media: InputFile
    thumb: Optional[InputFile] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument],
    Field(discriminator="type"),
]
# sendMediaGroup accepts no animations.
AlbumMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAudio, InputMediaDocument],
    Field(discriminator="type"),
]


# ── Stickers ─────────────────────────────────────────────────────────────────


class MaskPosition(TelegramModel):
    """The position on faces where a mask should be placed by default."""

    point: Literal["forehead", "eyes", "mouth", "chin"]
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    is_video: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramModel):
    name: str
    title: str
    is_animated: bool
    is_video: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramModel):
    """An incoming inline query."""

    id: str
    from_user: User = Field(alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None


class InputTextMessageContent(TelegramModel):
    message_text: str = Field(min_length=1, max_length=4096)
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramModel):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    live_period: Optional[int] = Field(None, ge=60, le=86400)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)


class InputVenueMessageContent(TelegramModel):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramModel):
    title: str = Field(min_length=1, max_length=32)
    description: str = Field(min_length=1, max_length=255)
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
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


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
    InputInvoiceMessageContent,
]


class InlineQueryResultArticle(TelegramModel):
    type: Literal["article"] = "article"
    id: str = Field(min_length=1, max_length=64)
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional[InlineKeyboardMarkup] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(TelegramModel):
    type: Literal["photo"] = "photo"
    id: str = Field(min_length=1, max_length=64)
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(TelegramModel):
    type: Literal["gif"] = "gif"
    id: str = Field(min_length=1, max_length=64)
    gif_url: str
    thumb_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultMpeg4Gif(TelegramModel):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str = Field(min_length=1, max_length=64)
    mpeg4_url: str
    thumb_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(TelegramModel):
    type: Literal["video"] = "video"
    id: str = Field(min_length=1, max_length=64)
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(TelegramModel):
    type: Literal["audio"] = "audio"
    id: str = Field(min_length=1, max_length=64)
    audio_url: str
    title: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVoice(TelegramModel):
    type: Literal["voice"] = "voice"
    id: str = Field(min_length=1, max_length=64)
    voice_url: str
    title: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(TelegramModel):
    type: Literal["document"] = "document"
    id: str = Field(min_length=1, max_length=64)
    title: str
    document_url: str
    mime_type: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(TelegramModel):
    type: Literal["location"] = "location"
    id: str = Field(min_length=1, max_length=64)
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = Field(None, ge=0, le=1500)
    live_period: Optional[int] = Field(None, ge=60, le=86400)
    heading: Optional[int] = Field(None, ge=1, le=360)
    proximity_alert_radius: Optional[int] = Field(None, ge=1, le=100000)
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(TelegramModel):
    type: Literal["venue"] = "venue"
    id: str = Field(min_length=1, max_length=64)
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(TelegramModel):
    type: Literal["contact"] = "contact"
    id: str = Field(min_length=1, max_length=64)
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(TelegramModel):
    type: Literal["game"] = "game"
    id: str = Field(min_length=1, max_length=64)
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class InlineQueryResultCachedPhoto(TelegramModel):
    type: Literal["photo"] = "photo"
    id: str = Field(min_length=1, max_length=64)
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedGif(TelegramModel):
    type: Literal["gif"] = "gif"
    id: str = Field(min_length=1, max_length=64)
    gif_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedMpeg4Gif(TelegramModel):
    type: Literal["mpeg4_gif"] = "mpeg4_gif"
    id: str = Field(min_length=1, max_length=64)
    mpeg4_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedSticker(TelegramModel):
    type: Literal["sticker"] = "sticker"
    id: str = Field(min_length=1, max_length=64)
    sticker_file_id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedDocument(TelegramModel):
    type: Literal["document"] = "document"
    id: str = Field(min_length=1, max_length=64)
    title: str
    document_file_id: str
    description: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVideo(TelegramModel):
    type: Literal["video"] = "video"
    id: str = Field(min_length=1, max_length=64)
    video_file_id: str
    title: str
    description: Optional[str] = None
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVoice(TelegramModel):
    type: Literal["voice"] = "voice"
    id: str = Field(min_length=1, max_length=64)
    voice_file_id: str
    title: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedAudio(TelegramModel):
    type: Literal["audio"] = "audio"
    id: str = Field(min_length=1, max_length=64)
    audio_file_id: str
    caption: Optional[str] = Field(None, max_length=1024)
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


# Cached and non-cached results share type tags, so this union is resolved
# by model class rather than by a discriminator.
InlineQueryResult = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultVideo,
    InlineQueryResultAudio,
    InlineQueryResultVoice,
    InlineQueryResultDocument,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultCachedAudio,
]


class ChosenInlineResult(TelegramModel):
    """An inline query result chosen by a user and sent to their chat partner."""

    result_id: str
    from_user: User = Field(alias="from")
    query: str
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None


class SentWebAppMessage(TelegramModel):
    """Information about an inline message sent by a Web App on behalf of a user."""

    inline_message_id: Optional[str] = None


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramModel):
    """A portion of the price for goods or services, in the smallest currency units."""

    label: str
    amount: int


class Invoice(TelegramModel):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramModel):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramModel):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramModel):
    """One shipping option."""

    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramModel):
    currency: str
    total_amount: int
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


class ShippingQuery(TelegramModel):
    id: str
    from_user: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramModel):
    id: str
    from_user: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportFile(TelegramModel):
    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramModel):
    type: str
    hash: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None


class EncryptedCredentials(TelegramModel):
    data: str
    hash: str
    secret: str


class PassportData(TelegramModel):
    """Telegram Passport data shared with the bot by the user."""

    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportElementErrorDataField(TelegramModel):
    source: Literal["data"] = "data"
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(TelegramModel):
    source: Literal["front_side"] = "front_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(TelegramModel):
    source: Literal["reverse_side"] = "reverse_side"
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(TelegramModel):
    source: Literal["selfie"] = "selfie"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(TelegramModel):
    source: Literal["file"] = "file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(TelegramModel):
    source: Literal["files"] = "files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(TelegramModel):
    source: Literal["translation_file"] = "translation_file"
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(TelegramModel):
    source: Literal["translation_files"] = "translation_files"
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(TelegramModel):
    source: Literal["unspecified"] = "unspecified"
    type: str
    element_hash: str
    message: str


PassportElementError = Annotated[
    Union[
        PassportElementErrorDataField,
        PassportElementErrorFrontSide,
        PassportElementErrorReverseSide,
        PassportElementErrorSelfie,
        PassportElementErrorFile,
        PassportElementErrorFiles,
        PassportElementErrorTranslationFile,
        PassportElementErrorTranslationFiles,
        PassportElementErrorUnspecified,
    ],
    Field(discriminator="source"),
]


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramModel):
    """A game. Use BotFather to create and edit games."""

    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class GameHighScore(TelegramModel):
    """One row of the high scores table for a game."""

    position: int
    user: User
    score: int


for _model in list(globals().values()):
    if isinstance(_model, type) and issubclass(_model, TelegramModel) and _model is not TelegramModel:
        _model.model_rebuild()
del _model
