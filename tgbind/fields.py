"""Presence tracking for optional request parameters.

The Bot API treats an omitted field differently from a field sent as
``null``/``false`` (e.g. ``allowed_updates`` on :meth:`setWebhook`: omitted
keeps the previous setting).  Facade methods therefore default their
optional parameters to :data:`UNSET` rather than ``None``::

    present(chat_id=1, parse_mode=UNSET, entities=None)
    # -> {"chat_id": 1, "entities": None}
"""

from __future__ import annotations

from typing import Any, Dict, TypeVar, Union

T = TypeVar("T")


class UnsetType:
    """Type of the :data:`UNSET` sentinel."""

    _instance: "UnsetType | None" = None

    def __new__(cls) -> "UnsetType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = UnsetType()

# absent / explicit null / explicit value
Maybe = Union[T, None, UnsetType]


def present(**fields: Any) -> Dict[str, Any]:
    """Return *fields* without the entries the caller left :data:`UNSET`."""
    return {name: value for name, value in fields.items() if value is not UNSET}
