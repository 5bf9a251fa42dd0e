"""Adapter layer: where notifier output lines end up."""

from .writers import LineCollector, write_line_to_console

__all__ = [
    "LineCollector",
    "write_line_to_console",
]
