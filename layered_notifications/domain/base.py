"""Notifier contract and the base notifier every chain ends at.

Mental model refresher:
- A notifier is anything with `send(message)`.
- `BaseNotifier` is the leaf: it performs the standard notification and wraps
  nothing.
- Output goes through an injected `write` callable; when none is given the
  line is printed to the console.
"""

from __future__ import annotations

from typing import Protocol

from ..types import WriteFn

STANDARD_TEMPLATE = "Notificación estándar: {message}"


class Notifier(Protocol):
    def send(self, message: str) -> None:
        ...


class BaseNotifier:
    """Leaf notifier that writes the standard notification line."""

    label = "BASE"

    def __init__(self, *, write: WriteFn | None = None) -> None:
        self._write = write

    @property
    def write(self) -> WriteFn | None:
        return self._write

    def send(self, message: str) -> None:
        text = ensure_message(message)
        emit_line(self._write, STANDARD_TEMPLATE.format(message=text))


def ensure_message(message: object) -> str:
    if not isinstance(message, str):
        raise ValueError(f"message must be a string, got {type(message).__name__}")
    return message


def emit_line(write: WriteFn | None, line: str) -> None:
    if write is None:
        print(line)
    else:
        write(line)
