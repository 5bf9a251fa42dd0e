"""Shared type aliases for the layered notification package."""

from __future__ import annotations

from typing import Any, Callable

WriteFn = Callable[[str], None]
ChainDescription = list[str]
AlertResult = dict[str, Any]
