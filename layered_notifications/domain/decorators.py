"""Channel decorators layered around a notifier.

Mental model refresher:
- A decorator owns exactly one inner notifier and is itself a notifier, so
  decorators nest.
- `send` always delegates inward first and only then runs this layer's own
  action. For a chain wrapped Email -> SMS -> Slack the output is therefore
  base, email, sms, slack.
- The channel name lives on the class, not on the instance.
"""

from __future__ import annotations

from ..types import WriteFn
from .base import Notifier, emit_line, ensure_message

CHANNEL_TEMPLATE = "Enviando notificación por {channel}: {message}"


class NotifierDecorator:
    """Decorator that forwards to its inner notifier and adds nothing."""

    channel = ""

    def __init__(self, inner: Notifier, *, write: WriteFn | None = None) -> None:
        if inner is None:
            raise ValueError("inner notifier is required")
        if not callable(getattr(inner, "send", None)):
            raise ValueError(f"inner notifier must define send(), got {type(inner).__name__}")
        self._inner = inner
        # Without an explicit writer, a layer shares the writer of the chain it wraps.
        self._write = write if write is not None else getattr(inner, "write", None)

    @property
    def inner(self) -> Notifier:
        return self._inner

    @property
    def write(self) -> WriteFn | None:
        return self._write

    @property
    def label(self) -> str:
        return self.channel or type(self).__name__

    def send(self, message: str) -> None:
        text = ensure_message(message)
        self._inner.send(text)
        self.notify(text)

    def notify(self, message: str) -> None:
        """Run this layer's own action after the inner chain has finished."""
        return None


class ChannelNotifier(NotifierDecorator):
    """Decorator that writes one line naming its channel."""

    def notify(self, message: str) -> None:
        emit_line(self._write, CHANNEL_TEMPLATE.format(channel=self.channel, message=message))


class EmailNotifier(ChannelNotifier):
    channel = "CORREO"


class SMSNotifier(ChannelNotifier):
    channel = "SMS"


class FacebookNotifier(ChannelNotifier):
    channel = "FACEBOOK"


class SlackNotifier(ChannelNotifier):
    channel = "SLACK"


class WhatsAppNotifier(ChannelNotifier):
    channel = "WHATSAPP"
