"""Channel key lookup used when chains are built from plain strings."""

from __future__ import annotations

from ..types import WriteFn
from .base import Notifier
from .decorators import (
    ChannelNotifier,
    EmailNotifier,
    FacebookNotifier,
    SlackNotifier,
    SMSNotifier,
    WhatsAppNotifier,
)

CHANNEL_DECORATORS: dict[str, type[ChannelNotifier]] = {
    "email": EmailNotifier,
    "sms": SMSNotifier,
    "facebook": FacebookNotifier,
    "slack": SlackNotifier,
    "whatsapp": WhatsAppNotifier,
}

DEFAULT_CHANNEL_ORDER: tuple[str, ...] = ("email", "sms", "facebook", "slack", "whatsapp")


def wrap(notifier: Notifier, channel_key: str, *, write: WriteFn | None = None) -> ChannelNotifier:
    """Wrap `notifier` with the decorator registered under `channel_key`.

    When `write` is omitted the new layer writes wherever `notifier` writes.
    """
    decorator_cls = CHANNEL_DECORATORS.get(_normalize_key(channel_key))
    if decorator_cls is None:
        supported = ", ".join(CHANNEL_DECORATORS)
        raise ValueError(f"Unknown channel: {channel_key!r} (supported: {supported})")
    return decorator_cls(notifier, write=write)


def _normalize_key(value: object) -> str:
    return str(value).strip().lower() if value is not None else ""
