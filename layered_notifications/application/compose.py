"""Composition root for notifier chains.

Mental model refresher:
- Application layer decides which layers exist and in what order.
- In this project it:
  1) builds the base notifier
  2) wraps it once per requested channel, first channel innermost
  3) sends the message through the outermost layer
"""

from __future__ import annotations

from typing import Iterable

from ..domain.base import BaseNotifier, Notifier, emit_line
from ..domain.registry import DEFAULT_CHANNEL_ORDER, wrap
from ..types import AlertResult, ChainDescription, WriteFn

SECURITY_ALERT_MESSAGE = "¡Alerta de seguridad!"


def build_notifier_chain(
    channels: Iterable[str] = DEFAULT_CHANNEL_ORDER,
    *,
    write: WriteFn | None = None,
) -> Notifier:
    """Wrap a fresh `BaseNotifier` with each channel, in the given order."""
    notifier: Notifier = BaseNotifier(write=write)
    for channel_key in channels:
        notifier = wrap(notifier, channel_key, write=write)
    return notifier


def describe_chain(notifier: Notifier) -> ChainDescription:
    """Return layer labels innermost first, without sending anything."""
    labels: list[str] = []
    layer: object | None = notifier
    while layer is not None:
        labels.append(str(getattr(layer, "label", type(layer).__name__)))
        layer = getattr(layer, "inner", None)
    labels.reverse()
    return labels


def send_security_alert(
    *,
    write: WriteFn | None = None,
    message: str = SECURITY_ALERT_MESSAGE,
) -> AlertResult:
    """Send one message through the default five-channel chain."""
    written: list[str] = []

    def counting_write(line: str) -> None:
        written.append(line)
        emit_line(write, line)

    notifier = build_notifier_chain(write=counting_write)
    notifier.send(message)

    return {
        "message": message,
        "layers": describe_chain(notifier),
        "lines_written": len(written),
    }
