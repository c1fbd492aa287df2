"""TgBindLogger: singleton JSON logger with console and optional rotating file output.

Library modules log through ``logging.getLogger(__name__)``; they are all
children of the ``tgbind`` logger.  Nothing is configured at import time:
an embedding application that wants the JSON output calls
:meth:`TgBindLogger.get_logger` once at startup.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "tgbind"


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    Standard fields (timestamp, level, logger, message, module, func_name)
    are always present.  Any *extra* key-value pairs passed via the ``extra``
    parameter of a logging call are merged into the JSON object, so calls
    can attach context such as ``api_endpoint``, ``http_method`` or
    ``error_code``.

    Example::

        logger.warning(
            "Bot API error",
            extra={"api_endpoint": "sendMessage", "error_code": 429, "retry_after": 5},
        )

    Produces::

        {"timestamp": "...", "level": "WARNING", ..., "api_endpoint": "sendMessage", "error_code": 429, ...}
    """

    # Keys that belong to the standard LogRecord; everything else is extra.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        """Serialize *record* to a JSON string."""
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class TgBindLogger:
    """Singleton owner of the ``tgbind`` logger handlers.

    Usage::

        from tgbind.logger import TgBindLogger

        logger = TgBindLogger.get_logger(log_file="logs/tgbind.log")
        logger.info("Client ready")
    """

    _instance: Optional["TgBindLogger"] = None
    _logger: Optional[logging.Logger] = None

    # Rotation settings
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO, log_file: Optional[str] = None) -> "TgBindLogger":
        """Ensure only one instance is ever created."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_file)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_file: Optional[str]) -> None:
        """Attach the JSON handlers to the ``tgbind`` logger."""
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(level)

        # Avoid duplicate handlers if the module is reloaded.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
        """Return the shared ``tgbind`` :class:`logging.Logger`.

        Creates the singleton on first call; subsequent calls return the
        same logger regardless of the arguments.
        """
        instance = TgBindLogger(level, log_file)
        assert instance._logger is not None  # guaranteed by __new__
        return instance._logger

    def cleanup(self) -> None:
        """Flush, close and detach all handlers."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton and its handlers (used by tests)."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None
        logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)
