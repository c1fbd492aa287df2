"""TelegramClient -- typed facade over every Telegram Bot API method.

Each public coroutine corresponds to one Bot API endpoint: it packs its
arguments into the matching :mod:`tgbind.methods` request value, sends it
through the :class:`~tgbind.transport.Transport` and decodes the response
envelope into a :data:`~tgbind.envelope.Result`.

Optional parameters default to :data:`~tgbind.fields.UNSET` and are left
out of the request body; passing ``None`` explicitly sends ``null``.

Remote failures are returned, not raised::

    client = TelegramClient.from_env()
    result = await client.send_message(chat_id="@channel", text="hi")
    if isinstance(result, ApiError) and result.retry_after:
        ...
    message = result.unwrap()  # raises BotAPIError / TransportFailure / DecodeFailure
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Union

import requests
from pydantic import ValidationError

from tgbind.config import DEFAULT_API_HOST, ClientConfig
from tgbind.envelope import ApiError, DecodeError, Ok, Result, TransportError, decode_response
from tgbind.exceptions import ConfigurationError
from tgbind.fields import UNSET, Maybe, present
from tgbind.methods import (
    AddStickerToSet,
    AnswerCallbackQuery,
    AnswerInlineQuery,
    AnswerPreCheckoutQuery,
    AnswerShippingQuery,
    AnswerWebAppQuery,
    ApproveChatJoinRequest,
    BanChatMember,
    BanChatSenderChat,
    BotRequest,
    Close,
    CopyMessage,
    CreateChatInviteLink,
    CreateInvoiceLink,
    CreateNewStickerSet,
    DeclineChatJoinRequest,
    DeleteChatPhoto,
    DeleteChatStickerSet,
    DeleteMessage,
    DeleteMyCommands,
    DeleteStickerFromSet,
    DeleteWebhook,
    EditChatInviteLink,
    EditMessageCaption,
    EditMessageLiveLocation,
    EditMessageMedia,
    EditMessageReplyMarkup,
    EditMessageText,
    ExportChatInviteLink,
    ForwardMessage,
    GetChat,
    GetChatAdministrators,
    GetChatMember,
    GetChatMemberCount,
    GetChatMenuButton,
    GetFile,
    GetGameHighScores,
    GetMe,
    GetMyCommands,
    GetMyDefaultAdministratorRights,
    GetStickerSet,
    GetUpdates,
    GetUserProfilePhotos,
    GetWebhookInfo,
    LeaveChat,
    LogOut,
    MessageTarget,
    PinChatMessage,
    PromoteChatMember,
    RestrictChatMember,
    RevokeChatInviteLink,
    SendAnimation,
    SendAudio,
    SendChatAction,
    SendContact,
    SendDice,
    SendDocument,
    SendGame,
    SendInvoice,
    SendLocation,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendPoll,
    SendSticker,
    SendVenue,
    SendVideo,
    SendVideoNote,
    SendVoice,
    SetChatAdministratorCustomTitle,
    SetChatDescription,
    SetChatMenuButton,
    SetChatPermissions,
    SetChatPhoto,
    SetChatStickerSet,
    SetChatTitle,
    SetGameScore,
    SetMyCommands,
    SetMyDefaultAdministratorRights,
    SetPassportDataErrors,
    SetStickerPositionInSet,
    SetStickerSetThumb,
    SetWebhook,
    StopMessageLiveLocation,
    StopPoll,
    UnbanChatMember,
    UnbanChatSenderChat,
    UnpinAllChatMessages,
    UnpinChatMessage,
    UploadStickerFile,
    target_fields,
)
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
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from tgbind.transport import Transport

logger = logging.getLogger(__name__)


class TelegramClient:
    """Client for the Telegram Bot API.

    The client holds only immutable configuration and the transport, so one
    instance can serve any number of concurrent calls.
    """

    def __init__(self, token: str, transport: Optional[Transport] = None, *, api_host: str = DEFAULT_API_HOST, timeout: Optional[float] = None) -> None:
        """Create a client for the bot identified by *token*.

        Args:
            token: Bot credential issued by BotFather.
            transport: HTTP transport; a default :class:`Transport` with
                *timeout* is created when omitted.
            api_host: Bot API host, for self-hosted Bot API servers; prefix
                ``http://`` for a server without TLS.
            timeout: Request timeout in seconds for the default transport.

        Raises:
            ConfigurationError: If *token* or *api_host* is invalid.
        """
        try:
            config = ClientConfig(token=token, api_host=api_host, timeout=timeout)
        except ValidationError as exc:
            raise ConfigurationError(f"invalid client configuration: {exc.errors(include_url=False, include_input=False)}") from None
        self._config = config
        self._transport = transport if transport is not None else Transport(timeout=config.timeout)

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[Transport] = None) -> "TelegramClient":
        return cls(config.token, transport, api_host=config.api_host, timeout=config.timeout)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, transport: Optional[Transport] = None) -> "TelegramClient":
        """Build a client from ``BOT_TOKEN`` / ``BOT_API_HOST`` / ``BOT_API_TIMEOUT``."""
        return cls.from_config(ClientConfig.from_env(env_file), transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def __repr__(self) -> str:
        return f"TelegramClient({self._config!r})"

    async def __aenter__(self) -> "TelegramClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close_session()

    def close_session(self) -> None:
        """Release the connections held by the transport."""
        self._transport.close()

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _scrub(self, text: str) -> str:
        """Remove the token from *text* (``requests`` errors quote the URL)."""
        return text.replace(self._config.token, "<token>")

    async def execute(self, request: BotRequest) -> Result[Any]:
        """Send *request* and decode the response envelope.

        A request with no field set goes out as GET, anything else as a
        JSON POST.  Never raises for remote or I/O failures; those come back
        as :class:`ApiError`, :class:`TransportError` or :class:`DecodeError`.
        """
        method = request.__api_method__
        url = f"{self._config.base_url}/{method}"
        http_method = "POST" if request.has_body else "GET"
        logger.debug("Calling Bot API", extra={"api_endpoint": method, "http_method": http_method})
        try:
            raw = await self._transport.request(http_method, url, request.to_json() if request.has_body else None)
        except requests.RequestException as exc:
            logger.error("Bot API transport error", extra={"api_endpoint": method, "http_method": http_method, "error": self._scrub(str(exc))})
            return TransportError(method, exc)

        result = decode_response(raw, request.__result_adapter__, method)
        if isinstance(result, ApiError):
            logger.warning(
                "Bot API error",
                extra={"api_endpoint": method, "error_code": result.error_code, "description": result.description, "retry_after": result.retry_after},
            )
        elif isinstance(result, DecodeError):
            logger.error("Bot API response could not be decoded", extra={"api_endpoint": method, "reason": result.reason})
        return result

    # ------------------------------------------------------------------
    #  Files
    # ------------------------------------------------------------------

    def file_url(self, file_path: str) -> str:
        """Download URL of a file; *file_path* comes from :meth:`get_file`."""
        return f"{self._config.file_base_url}/{file_path.lstrip('/')}"

    async def download_file(self, file_path: str) -> Result[bytes]:
        """Download raw bytes from the Telegram file CDN.

        Args:
            file_path: The ``file_path`` field of a :class:`~tgbind.models.File`.
        """
        try:
            content = await self._transport.download(self.file_url(file_path))
        except requests.RequestException as exc:
            logger.error("File download failed", extra={"api_endpoint": "file", "file_path": file_path, "error": self._scrub(str(exc))})
            return TransportError("file", exc)
        logger.debug("File downloaded", extra={"api_endpoint": "file", "file_path": file_path, "size": len(content)})
        return Ok(content, "file")

    # ------------------------------------------------------------------
    #  Getting updates
    # ------------------------------------------------------------------

    async def get_updates(self, offset: Maybe[int] = UNSET, limit: Maybe[int] = UNSET, timeout: Maybe[int] = UNSET, allowed_updates: Maybe[List[str]] = UNSET) -> Result[List[Update]]:
        """Receive incoming updates using long polling. Returns an Array of Update objects."""
        return await self.execute(GetUpdates(**present(offset=offset, limit=limit, timeout=timeout, allowed_updates=allowed_updates)))

    async def set_webhook(self, url: str, ip_address: Maybe[str] = UNSET, max_connections: Maybe[int] = UNSET, allowed_updates: Maybe[List[str]] = UNSET, drop_pending_updates: Maybe[bool] = UNSET, secret_token: Maybe[str] = UNSET) -> Result[bool]:
        """Specify a URL and receive incoming updates via an outgoing webhook."""
        return await self.execute(SetWebhook(**present(url=url, ip_address=ip_address, max_connections=max_connections, allowed_updates=allowed_updates, drop_pending_updates=drop_pending_updates, secret_token=secret_token)))

    async def delete_webhook(self, drop_pending_updates: Maybe[bool] = UNSET) -> Result[bool]:
        """Remove webhook integration if you decide to switch back to getUpdates."""
        return await self.execute(DeleteWebhook(**present(drop_pending_updates=drop_pending_updates)))

    async def get_webhook_info(self) -> Result[WebhookInfo]:
        """Get current webhook status."""
        return await self.execute(GetWebhookInfo())

    # ------------------------------------------------------------------
    #  Bot
    # ------------------------------------------------------------------

    async def get_me(self) -> Result[User]:
        """Test the bot's auth token. Returns basic information about the bot."""
        return await self.execute(GetMe())

    async def log_out(self) -> Result[bool]:
        """Log out from the cloud Bot API server before launching the bot locally."""
        return await self.execute(LogOut())

    async def close(self) -> Result[bool]:
        """Close the bot instance before moving it from one local server to another.

        This is the Bot API ``close`` method; see :meth:`close_session` for
        releasing local connections.
        """
        return await self.execute(Close())

    # ------------------------------------------------------------------
    #  Messages
    # ------------------------------------------------------------------

    async def send_message(self, chat_id: ChatId, text: str, parse_mode: Maybe[ParseMode] = UNSET, entities: Maybe[List[MessageEntity]] = UNSET, disable_web_page_preview: Maybe[bool] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a text message. On success, the sent Message is returned."""
        return await self.execute(SendMessage(**present(chat_id=chat_id, text=text, parse_mode=parse_mode, entities=entities, disable_web_page_preview=disable_web_page_preview, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def forward_message(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET) -> Result[Message]:
        """Forward a message of any kind. On success, the sent Message is returned."""
        return await self.execute(ForwardMessage(**present(chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id, disable_notification=disable_notification, protect_content=protect_content)))

    async def copy_message(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[MessageId]:
        """Copy a message without a link to the original. Returns the MessageId of the sent message."""
        return await self.execute(CopyMessage(**present(chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_photo(self, chat_id: ChatId, photo: InputFile, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a photo by file_id or HTTP URL."""
        return await self.execute(SendPhoto(**present(chat_id=chat_id, photo=photo, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_audio(self, chat_id: ChatId, audio: InputFile, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, duration: Maybe[int] = UNSET, performer: Maybe[str] = UNSET, title: Maybe[str] = UNSET, thumb: Maybe[InputFile] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send an audio file to be displayed in the music player."""
        return await self.execute(SendAudio(**present(chat_id=chat_id, audio=audio, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, duration=duration, performer=performer, title=title, thumb=thumb, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_document(self, chat_id: ChatId, document: InputFile, thumb: Maybe[InputFile] = UNSET, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, disable_content_type_detection: Maybe[bool] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a general file."""
        return await self.execute(SendDocument(**present(chat_id=chat_id, document=document, thumb=thumb, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, disable_content_type_detection=disable_content_type_detection, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_video(self, chat_id: ChatId, video: InputFile, duration: Maybe[int] = UNSET, width: Maybe[int] = UNSET, height: Maybe[int] = UNSET, thumb: Maybe[InputFile] = UNSET, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, supports_streaming: Maybe[bool] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a video file (MPEG4)."""
        return await self.execute(SendVideo(**present(chat_id=chat_id, video=video, duration=duration, width=width, height=height, thumb=thumb, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, supports_streaming=supports_streaming, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_animation(self, chat_id: ChatId, animation: InputFile, duration: Maybe[int] = UNSET, width: Maybe[int] = UNSET, height: Maybe[int] = UNSET, thumb: Maybe[InputFile] = UNSET, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send an animation file (GIF or H.264/MPEG-4 AVC video without sound)."""
        return await self.execute(SendAnimation(**present(chat_id=chat_id, animation=animation, duration=duration, width=width, height=height, thumb=thumb, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_voice(self, chat_id: ChatId, voice: InputFile, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, duration: Maybe[int] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send an audio file to be displayed as a playable voice message."""
        return await self.execute(SendVoice(**present(chat_id=chat_id, voice=voice, caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, duration=duration, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_video_note(self, chat_id: ChatId, video_note: InputFile, duration: Maybe[int] = UNSET, length: Maybe[int] = UNSET, thumb: Maybe[InputFile] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a rounded square MPEG4 video message."""
        return await self.execute(SendVideoNote(**present(chat_id=chat_id, video_note=video_note, duration=duration, length=length, thumb=thumb, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_media_group(self, chat_id: ChatId, media: List[AlbumMedia], disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET) -> Result[List[Message]]:
        """Send a group of 2-10 photos, videos, documents or audios as an album."""
        return await self.execute(SendMediaGroup(**present(chat_id=chat_id, media=media, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply)))

    async def send_location(self, chat_id: ChatId, latitude: float, longitude: float, horizontal_accuracy: Maybe[float] = UNSET, live_period: Maybe[int] = UNSET, heading: Maybe[int] = UNSET, proximity_alert_radius: Maybe[int] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a point on the map."""
        return await self.execute(SendLocation(**present(chat_id=chat_id, latitude=latitude, longitude=longitude, horizontal_accuracy=horizontal_accuracy, live_period=live_period, heading=heading, proximity_alert_radius=proximity_alert_radius, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def edit_message_live_location(self, target: MessageTarget, latitude: float, longitude: float, horizontal_accuracy: Maybe[float] = UNSET, heading: Maybe[int] = UNSET, proximity_alert_radius: Maybe[int] = UNSET, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Edit a live location message.

        Returns the edited Message, or ``True`` when *target* is an inline message.
        """
        return await self.execute(EditMessageLiveLocation(**target_fields(target), **present(latitude=latitude, longitude=longitude, horizontal_accuracy=horizontal_accuracy, heading=heading, proximity_alert_radius=proximity_alert_radius, reply_markup=reply_markup)))

    async def stop_message_live_location(self, target: MessageTarget, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Stop updating a live location message before live_period expires."""
        return await self.execute(StopMessageLiveLocation(**target_fields(target), **present(reply_markup=reply_markup)))

    async def send_venue(self, chat_id: ChatId, latitude: float, longitude: float, title: str, address: str, foursquare_id: Maybe[str] = UNSET, foursquare_type: Maybe[str] = UNSET, google_place_id: Maybe[str] = UNSET, google_place_type: Maybe[str] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send information about a venue."""
        return await self.execute(SendVenue(**present(chat_id=chat_id, latitude=latitude, longitude=longitude, title=title, address=address, foursquare_id=foursquare_id, foursquare_type=foursquare_type, google_place_id=google_place_id, google_place_type=google_place_type, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_contact(self, chat_id: ChatId, phone_number: str, first_name: str, last_name: Maybe[str] = UNSET, vcard: Maybe[str] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a phone contact."""
        return await self.execute(SendContact(**present(chat_id=chat_id, phone_number=phone_number, first_name=first_name, last_name=last_name, vcard=vcard, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_poll(self, chat_id: ChatId, question: str, options: List[str], is_anonymous: Maybe[bool] = UNSET, type: Maybe[str] = UNSET, allows_multiple_answers: Maybe[bool] = UNSET, correct_option_id: Maybe[int] = UNSET, explanation: Maybe[str] = UNSET, explanation_parse_mode: Maybe[ParseMode] = UNSET, explanation_entities: Maybe[List[MessageEntity]] = UNSET, open_period: Maybe[int] = UNSET, close_date: Maybe[int] = UNSET, is_closed: Maybe[bool] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send a native poll. ``correct_option_id`` requires ``type="quiz"``."""
        return await self.execute(SendPoll(**present(chat_id=chat_id, question=question, options=options, is_anonymous=is_anonymous, type=type, allows_multiple_answers=allows_multiple_answers, correct_option_id=correct_option_id, explanation=explanation, explanation_parse_mode=explanation_parse_mode, explanation_entities=explanation_entities, open_period=open_period, close_date=close_date, is_closed=is_closed, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_dice(self, chat_id: ChatId, emoji: Maybe[str] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send an animated emoji that will display a random value."""
        return await self.execute(SendDice(**present(chat_id=chat_id, emoji=emoji, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def send_chat_action(self, chat_id: ChatId, action: str) -> Result[bool]:
        """Tell the user that something is happening on the bot's side (``typing``, ``upload_photo``, ...)."""
        return await self.execute(SendChatAction(chat_id=chat_id, action=action))

    async def get_user_profile_photos(self, user_id: int, offset: Maybe[int] = UNSET, limit: Maybe[int] = UNSET) -> Result[UserProfilePhotos]:
        """Get a list of profile pictures for a user."""
        return await self.execute(GetUserProfilePhotos(**present(user_id=user_id, offset=offset, limit=limit)))

    async def get_file(self, file_id: str) -> Result[File]:
        """Get basic info about a file and prepare it for downloading (see :meth:`download_file`)."""
        return await self.execute(GetFile(file_id=file_id))

    # ------------------------------------------------------------------
    #  Chat administration
    # ------------------------------------------------------------------

    async def ban_chat_member(self, chat_id: ChatId, user_id: int, until_date: Maybe[int] = UNSET, revoke_messages: Maybe[bool] = UNSET) -> Result[bool]:
        """Ban a user in a group, a supergroup or a channel."""
        return await self.execute(BanChatMember(**present(chat_id=chat_id, user_id=user_id, until_date=until_date, revoke_messages=revoke_messages)))

    async def unban_chat_member(self, chat_id: ChatId, user_id: int, only_if_banned: Maybe[bool] = UNSET) -> Result[bool]:
        """Unban a previously banned user in a supergroup or channel."""
        return await self.execute(UnbanChatMember(**present(chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned)))

    async def restrict_chat_member(self, chat_id: ChatId, user_id: int, permissions: ChatPermissions, until_date: Maybe[int] = UNSET) -> Result[bool]:
        """Restrict a user in a supergroup."""
        return await self.execute(RestrictChatMember(**present(chat_id=chat_id, user_id=user_id, permissions=permissions, until_date=until_date)))

    async def promote_chat_member(self, chat_id: ChatId, user_id: int, is_anonymous: Maybe[bool] = UNSET, can_manage_chat: Maybe[bool] = UNSET, can_post_messages: Maybe[bool] = UNSET, can_edit_messages: Maybe[bool] = UNSET, can_delete_messages: Maybe[bool] = UNSET, can_manage_video_chats: Maybe[bool] = UNSET, can_restrict_members: Maybe[bool] = UNSET, can_promote_members: Maybe[bool] = UNSET, can_change_info: Maybe[bool] = UNSET, can_invite_users: Maybe[bool] = UNSET, can_pin_messages: Maybe[bool] = UNSET) -> Result[bool]:
        """Promote or demote a user in a supergroup or a channel."""
        return await self.execute(PromoteChatMember(**present(chat_id=chat_id, user_id=user_id, is_anonymous=is_anonymous, can_manage_chat=can_manage_chat, can_post_messages=can_post_messages, can_edit_messages=can_edit_messages, can_delete_messages=can_delete_messages, can_manage_video_chats=can_manage_video_chats, can_restrict_members=can_restrict_members, can_promote_members=can_promote_members, can_change_info=can_change_info, can_invite_users=can_invite_users, can_pin_messages=can_pin_messages)))

    async def set_chat_administrator_custom_title(self, chat_id: ChatId, user_id: int, custom_title: str) -> Result[bool]:
        """Set a custom title for an administrator in a supergroup promoted by the bot."""
        return await self.execute(SetChatAdministratorCustomTitle(chat_id=chat_id, user_id=user_id, custom_title=custom_title))

    async def ban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int) -> Result[bool]:
        """Ban a channel chat in a supergroup or a channel."""
        return await self.execute(BanChatSenderChat(chat_id=chat_id, sender_chat_id=sender_chat_id))

    async def unban_chat_sender_chat(self, chat_id: ChatId, sender_chat_id: int) -> Result[bool]:
        """Unban a previously banned channel chat in a supergroup or channel."""
        return await self.execute(UnbanChatSenderChat(chat_id=chat_id, sender_chat_id=sender_chat_id))

    async def set_chat_permissions(self, chat_id: ChatId, permissions: ChatPermissions) -> Result[bool]:
        """Set default chat permissions for all members."""
        return await self.execute(SetChatPermissions(chat_id=chat_id, permissions=permissions))

    async def export_chat_invite_link(self, chat_id: ChatId) -> Result[str]:
        """Generate a new primary invite link for a chat. Returns the new link as a string."""
        return await self.execute(ExportChatInviteLink(chat_id=chat_id))

    async def create_chat_invite_link(self, chat_id: ChatId, name: Maybe[str] = UNSET, expire_date: Maybe[int] = UNSET, member_limit: Maybe[int] = UNSET, creates_join_request: Maybe[bool] = UNSET) -> Result[ChatInviteLink]:
        """Create an additional invite link for a chat."""
        return await self.execute(CreateChatInviteLink(**present(chat_id=chat_id, name=name, expire_date=expire_date, member_limit=member_limit, creates_join_request=creates_join_request)))

    async def edit_chat_invite_link(self, chat_id: ChatId, invite_link: str, name: Maybe[str] = UNSET, expire_date: Maybe[int] = UNSET, member_limit: Maybe[int] = UNSET, creates_join_request: Maybe[bool] = UNSET) -> Result[ChatInviteLink]:
        """Edit a non-primary invite link created by the bot."""
        return await self.execute(EditChatInviteLink(**present(chat_id=chat_id, invite_link=invite_link, name=name, expire_date=expire_date, member_limit=member_limit, creates_join_request=creates_join_request)))

    async def revoke_chat_invite_link(self, chat_id: ChatId, invite_link: str) -> Result[ChatInviteLink]:
        """Revoke an invite link created by the bot."""
        return await self.execute(RevokeChatInviteLink(chat_id=chat_id, invite_link=invite_link))

    async def approve_chat_join_request(self, chat_id: ChatId, user_id: int) -> Result[bool]:
        return await self.execute(ApproveChatJoinRequest(chat_id=chat_id, user_id=user_id))

    async def decline_chat_join_request(self, chat_id: ChatId, user_id: int) -> Result[bool]:
        return await self.execute(DeclineChatJoinRequest(chat_id=chat_id, user_id=user_id))

    async def set_chat_photo(self, chat_id: ChatId, photo: InputFile) -> Result[bool]:
        """Set a new profile photo for the chat."""
        return await self.execute(SetChatPhoto(chat_id=chat_id, photo=photo))

    async def delete_chat_photo(self, chat_id: ChatId) -> Result[bool]:
        return await self.execute(DeleteChatPhoto(chat_id=chat_id))

    async def set_chat_title(self, chat_id: ChatId, title: str) -> Result[bool]:
        """Change the title of a chat (1-128 characters)."""
        return await self.execute(SetChatTitle(chat_id=chat_id, title=title))

    async def set_chat_description(self, chat_id: ChatId, description: Maybe[str] = UNSET) -> Result[bool]:
        """Change the description of a group, a supergroup or a channel; omit *description* to clear it."""
        return await self.execute(SetChatDescription(**present(chat_id=chat_id, description=description)))

    async def pin_chat_message(self, chat_id: ChatId, message_id: int, disable_notification: Maybe[bool] = UNSET) -> Result[bool]:
        """Add a message to the list of pinned messages in a chat."""
        return await self.execute(PinChatMessage(**present(chat_id=chat_id, message_id=message_id, disable_notification=disable_notification)))

    async def unpin_chat_message(self, chat_id: ChatId, message_id: Maybe[int] = UNSET) -> Result[bool]:
        """Remove a message from the pinned list; the most recent pin when *message_id* is omitted."""
        return await self.execute(UnpinChatMessage(**present(chat_id=chat_id, message_id=message_id)))

    async def unpin_all_chat_messages(self, chat_id: ChatId) -> Result[bool]:
        return await self.execute(UnpinAllChatMessages(chat_id=chat_id))

    async def leave_chat(self, chat_id: ChatId) -> Result[bool]:
        """Leave a group, supergroup or channel."""
        return await self.execute(LeaveChat(chat_id=chat_id))

    async def get_chat(self, chat_id: ChatId) -> Result[Chat]:
        """Get up to date information about the chat."""
        return await self.execute(GetChat(chat_id=chat_id))

    async def get_chat_administrators(self, chat_id: ChatId) -> Result[List[ChatMember]]:
        """Get a list of administrators in a chat, other bots excluded."""
        return await self.execute(GetChatAdministrators(chat_id=chat_id))

    async def get_chat_member_count(self, chat_id: ChatId) -> Result[int]:
        return await self.execute(GetChatMemberCount(chat_id=chat_id))

    async def get_chat_member(self, chat_id: ChatId, user_id: int) -> Result[ChatMember]:
        """Get information about a member of a chat."""
        return await self.execute(GetChatMember(chat_id=chat_id, user_id=user_id))

    async def set_chat_sticker_set(self, chat_id: ChatId, sticker_set_name: str) -> Result[bool]:
        """Set a new group sticker set for a supergroup."""
        return await self.execute(SetChatStickerSet(chat_id=chat_id, sticker_set_name=sticker_set_name))

    async def delete_chat_sticker_set(self, chat_id: ChatId) -> Result[bool]:
        return await self.execute(DeleteChatStickerSet(chat_id=chat_id))

    # ------------------------------------------------------------------
    #  Bot settings
    # ------------------------------------------------------------------

    async def answer_callback_query(self, callback_query_id: str, text: Maybe[str] = UNSET, show_alert: Maybe[bool] = UNSET, url: Maybe[str] = UNSET, cache_time: Maybe[int] = UNSET) -> Result[bool]:
        """Send an answer to a callback query sent from an inline keyboard."""
        return await self.execute(AnswerCallbackQuery(**present(callback_query_id=callback_query_id, text=text, show_alert=show_alert, url=url, cache_time=cache_time)))

    async def set_my_commands(self, commands: List[BotCommand], scope: Maybe[BotCommandScope] = UNSET, language_code: Maybe[str] = UNSET) -> Result[bool]:
        """Change the list of the bot's commands for the given scope and user language."""
        return await self.execute(SetMyCommands(**present(commands=commands, scope=scope, language_code=language_code)))

    async def delete_my_commands(self, scope: Maybe[BotCommandScope] = UNSET, language_code: Maybe[str] = UNSET) -> Result[bool]:
        """Delete the list of the bot's commands for the given scope and user language."""
        return await self.execute(DeleteMyCommands(**present(scope=scope, language_code=language_code)))

    async def get_my_commands(self, scope: Maybe[BotCommandScope] = UNSET, language_code: Maybe[str] = UNSET) -> Result[List[BotCommand]]:
        """Get the current list of the bot's commands for the given scope and user language."""
        return await self.execute(GetMyCommands(**present(scope=scope, language_code=language_code)))

    async def set_chat_menu_button(self, chat_id: Maybe[int] = UNSET, menu_button: Maybe[MenuButton] = UNSET) -> Result[bool]:
        """Change the bot's menu button in a private chat, or the default menu button."""
        return await self.execute(SetChatMenuButton(**present(chat_id=chat_id, menu_button=menu_button)))

    async def get_chat_menu_button(self, chat_id: Maybe[int] = UNSET) -> Result[MenuButton]:
        """Get the current value of the bot's menu button in a private chat, or the default menu button."""
        return await self.execute(GetChatMenuButton(**present(chat_id=chat_id)))

    async def set_my_default_administrator_rights(self, rights: Maybe[ChatAdministratorRights] = UNSET, for_channels: Maybe[bool] = UNSET) -> Result[bool]:
        """Change the default administrator rights requested by the bot when it's added as an administrator."""
        return await self.execute(SetMyDefaultAdministratorRights(**present(rights=rights, for_channels=for_channels)))

    async def get_my_default_administrator_rights(self, for_channels: Maybe[bool] = UNSET) -> Result[ChatAdministratorRights]:
        """Get the current default administrator rights of the bot."""
        return await self.execute(GetMyDefaultAdministratorRights(**present(for_channels=for_channels)))

    # ------------------------------------------------------------------
    #  Updating messages
    # ------------------------------------------------------------------

    async def edit_message_text(self, target: MessageTarget, text: str, parse_mode: Maybe[ParseMode] = UNSET, entities: Maybe[List[MessageEntity]] = UNSET, disable_web_page_preview: Maybe[bool] = UNSET, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Edit text and game messages.

        Returns the edited Message, or ``True`` when *target* is an inline message.
        """
        return await self.execute(EditMessageText(**target_fields(target), **present(text=text, parse_mode=parse_mode, entities=entities, disable_web_page_preview=disable_web_page_preview, reply_markup=reply_markup)))

    async def edit_message_caption(self, target: MessageTarget, caption: Maybe[str] = UNSET, parse_mode: Maybe[ParseMode] = UNSET, caption_entities: Maybe[List[MessageEntity]] = UNSET, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Edit captions of messages."""
        return await self.execute(EditMessageCaption(**target_fields(target), **present(caption=caption, parse_mode=parse_mode, caption_entities=caption_entities, reply_markup=reply_markup)))

    async def edit_message_media(self, target: MessageTarget, media: InputMedia, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Edit animation, audio, document, photo, or video messages."""
        return await self.execute(EditMessageMedia(**target_fields(target), **present(media=media, reply_markup=reply_markup)))

    async def edit_message_reply_markup(self, target: MessageTarget, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Union[Message, bool]]:
        """Edit only the reply markup of messages."""
        return await self.execute(EditMessageReplyMarkup(**target_fields(target), **present(reply_markup=reply_markup)))

    async def stop_poll(self, chat_id: ChatId, message_id: int, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Poll]:
        """Stop a poll which was sent by the bot. Returns the stopped Poll."""
        return await self.execute(StopPoll(**present(chat_id=chat_id, message_id=message_id, reply_markup=reply_markup)))

    async def delete_message(self, chat_id: ChatId, message_id: int) -> Result[bool]:
        """Delete a message, including service messages, sent less than 48 hours ago."""
        return await self.execute(DeleteMessage(chat_id=chat_id, message_id=message_id))

    # ------------------------------------------------------------------
    #  Stickers
    # ------------------------------------------------------------------

    async def send_sticker(self, chat_id: ChatId, sticker: InputFile, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[ReplyMarkup] = UNSET) -> Result[Message]:
        """Send static .WEBP, animated .TGS, or video .WEBM stickers."""
        return await self.execute(SendSticker(**present(chat_id=chat_id, sticker=sticker, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def get_sticker_set(self, name: str) -> Result[StickerSet]:
        return await self.execute(GetStickerSet(name=name))

    async def upload_sticker_file(self, user_id: int, png_sticker: InputFile) -> Result[File]:
        """Upload a .PNG file for later use in sticker set methods."""
        return await self.execute(UploadStickerFile(user_id=user_id, png_sticker=png_sticker))

    async def create_new_sticker_set(self, user_id: int, name: str, title: str, emojis: str, png_sticker: Maybe[InputFile] = UNSET, tgs_sticker: Maybe[InputFile] = UNSET, webm_sticker: Maybe[InputFile] = UNSET, contains_masks: Maybe[bool] = UNSET, mask_position: Maybe[MaskPosition] = UNSET) -> Result[bool]:
        """Create a new sticker set owned by a user.

        Exactly one of *png_sticker*, *tgs_sticker* or *webm_sticker* must be given.
        """
        return await self.execute(CreateNewStickerSet(**present(user_id=user_id, name=name, title=title, png_sticker=png_sticker, tgs_sticker=tgs_sticker, webm_sticker=webm_sticker, emojis=emojis, contains_masks=contains_masks, mask_position=mask_position)))

    async def add_sticker_to_set(self, user_id: int, name: str, emojis: str, png_sticker: Maybe[InputFile] = UNSET, tgs_sticker: Maybe[InputFile] = UNSET, webm_sticker: Maybe[InputFile] = UNSET, mask_position: Maybe[MaskPosition] = UNSET) -> Result[bool]:
        """Add a new sticker to a set created by the bot.

        Exactly one of *png_sticker*, *tgs_sticker* or *webm_sticker* must be given.
        """
        return await self.execute(AddStickerToSet(**present(user_id=user_id, name=name, png_sticker=png_sticker, tgs_sticker=tgs_sticker, webm_sticker=webm_sticker, emojis=emojis, mask_position=mask_position)))

    async def set_sticker_position_in_set(self, sticker: str, position: int) -> Result[bool]:
        """Move a sticker in a set created by the bot to a specific position."""
        return await self.execute(SetStickerPositionInSet(sticker=sticker, position=position))

    async def delete_sticker_from_set(self, sticker: str) -> Result[bool]:
        return await self.execute(DeleteStickerFromSet(sticker=sticker))

    async def set_sticker_set_thumb(self, name: str, user_id: int, thumb: Maybe[InputFile] = UNSET) -> Result[bool]:
        """Set the thumbnail of a sticker set."""
        return await self.execute(SetStickerSetThumb(**present(name=name, user_id=user_id, thumb=thumb)))

    # ------------------------------------------------------------------
    #  Inline mode
    # ------------------------------------------------------------------

    async def answer_inline_query(self, inline_query_id: str, results: List[InlineQueryResult], cache_time: Maybe[int] = UNSET, is_personal: Maybe[bool] = UNSET, next_offset: Maybe[str] = UNSET, switch_pm_text: Maybe[str] = UNSET, switch_pm_parameter: Maybe[str] = UNSET) -> Result[bool]:
        """Send answers to an inline query. No more than 50 results per query are allowed."""
        return await self.execute(AnswerInlineQuery(**present(inline_query_id=inline_query_id, results=results, cache_time=cache_time, is_personal=is_personal, next_offset=next_offset, switch_pm_text=switch_pm_text, switch_pm_parameter=switch_pm_parameter)))

    async def answer_web_app_query(self, web_app_query_id: str, result: InlineQueryResult) -> Result[SentWebAppMessage]:
        """Set the result of an interaction with a Web App."""
        return await self.execute(AnswerWebAppQuery(web_app_query_id=web_app_query_id, result=result))

    # ------------------------------------------------------------------
    #  Payments
    # ------------------------------------------------------------------

    async def send_invoice(self, chat_id: ChatId, title: str, description: str, payload: str, provider_token: str, currency: str, prices: List[LabeledPrice], max_tip_amount: Maybe[int] = UNSET, suggested_tip_amounts: Maybe[List[int]] = UNSET, start_parameter: Maybe[str] = UNSET, provider_data: Maybe[str] = UNSET, photo_url: Maybe[str] = UNSET, photo_size: Maybe[int] = UNSET, photo_width: Maybe[int] = UNSET, photo_height: Maybe[int] = UNSET, need_name: Maybe[bool] = UNSET, need_phone_number: Maybe[bool] = UNSET, need_email: Maybe[bool] = UNSET, need_shipping_address: Maybe[bool] = UNSET, send_phone_number_to_provider: Maybe[bool] = UNSET, send_email_to_provider: Maybe[bool] = UNSET, is_flexible: Maybe[bool] = UNSET, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Message]:
        """Send an invoice."""
        return await self.execute(SendInvoice(**present(chat_id=chat_id, title=title, description=description, payload=payload, provider_token=provider_token, currency=currency, prices=prices, max_tip_amount=max_tip_amount, suggested_tip_amounts=suggested_tip_amounts, start_parameter=start_parameter, provider_data=provider_data, photo_url=photo_url, photo_size=photo_size, photo_width=photo_width, photo_height=photo_height, need_name=need_name, need_phone_number=need_phone_number, need_email=need_email, need_shipping_address=need_shipping_address, send_phone_number_to_provider=send_phone_number_to_provider, send_email_to_provider=send_email_to_provider, is_flexible=is_flexible, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def create_invoice_link(self, title: str, description: str, payload: str, provider_token: str, currency: str, prices: List[LabeledPrice], max_tip_amount: Maybe[int] = UNSET, suggested_tip_amounts: Maybe[List[int]] = UNSET, provider_data: Maybe[str] = UNSET, photo_url: Maybe[str] = UNSET, photo_size: Maybe[int] = UNSET, photo_width: Maybe[int] = UNSET, photo_height: Maybe[int] = UNSET, need_name: Maybe[bool] = UNSET, need_phone_number: Maybe[bool] = UNSET, need_email: Maybe[bool] = UNSET, need_shipping_address: Maybe[bool] = UNSET, send_phone_number_to_provider: Maybe[bool] = UNSET, send_email_to_provider: Maybe[bool] = UNSET, is_flexible: Maybe[bool] = UNSET) -> Result[str]:
        """Create a link for an invoice. Returns the created invoice link as a string."""
        return await self.execute(CreateInvoiceLink(**present(title=title, description=description, payload=payload, provider_token=provider_token, currency=currency, prices=prices, max_tip_amount=max_tip_amount, suggested_tip_amounts=suggested_tip_amounts, provider_data=provider_data, photo_url=photo_url, photo_size=photo_size, photo_width=photo_width, photo_height=photo_height, need_name=need_name, need_phone_number=need_phone_number, need_email=need_email, need_shipping_address=need_shipping_address, send_phone_number_to_provider=send_phone_number_to_provider, send_email_to_provider=send_email_to_provider, is_flexible=is_flexible)))

    async def answer_shipping_query(self, shipping_query_id: str, ok: bool, shipping_options: Maybe[List[ShippingOption]] = UNSET, error_message: Maybe[str] = UNSET) -> Result[bool]:
        """Reply to a shipping query sent for an invoice with a flexible price."""
        return await self.execute(AnswerShippingQuery(**present(shipping_query_id=shipping_query_id, ok=ok, shipping_options=shipping_options, error_message=error_message)))

    async def answer_pre_checkout_query(self, pre_checkout_query_id: str, ok: bool, error_message: Maybe[str] = UNSET) -> Result[bool]:
        """Respond to a pre-checkout query within 10 seconds."""
        return await self.execute(AnswerPreCheckoutQuery(**present(pre_checkout_query_id=pre_checkout_query_id, ok=ok, error_message=error_message)))

    # ------------------------------------------------------------------
    #  Telegram Passport
    # ------------------------------------------------------------------

    async def set_passport_data_errors(self, user_id: int, errors: List[PassportElementError]) -> Result[bool]:
        """Inform a user that some of the Telegram Passport elements they provided contain errors."""
        return await self.execute(SetPassportDataErrors(user_id=user_id, errors=errors))

    # ------------------------------------------------------------------
    #  Games
    # ------------------------------------------------------------------

    async def send_game(self, chat_id: int, game_short_name: str, disable_notification: Maybe[bool] = UNSET, protect_content: Maybe[bool] = UNSET, reply_to_message_id: Maybe[int] = UNSET, allow_sending_without_reply: Maybe[bool] = UNSET, reply_markup: Maybe[InlineKeyboardMarkup] = UNSET) -> Result[Message]:
        """Send a game."""
        return await self.execute(SendGame(**present(chat_id=chat_id, game_short_name=game_short_name, disable_notification=disable_notification, protect_content=protect_content, reply_to_message_id=reply_to_message_id, allow_sending_without_reply=allow_sending_without_reply, reply_markup=reply_markup)))

    async def set_game_score(self, target: MessageTarget, user_id: int, score: int, force: Maybe[bool] = UNSET, disable_edit_message: Maybe[bool] = UNSET) -> Result[Union[Message, bool]]:
        """Set the score of the specified user in a game message.

        Returns the edited Message, or ``True`` when *target* is an inline message.
        """
        return await self.execute(SetGameScore(**target_fields(target), **present(user_id=user_id, score=score, force=force, disable_edit_message=disable_edit_message)))

    async def get_game_high_scores(self, target: MessageTarget, user_id: int) -> Result[List[GameHighScore]]:
        """Get data for high score tables of a game message."""
        return await self.execute(GetGameHighScores(**target_fields(target), user_id=user_id))
