"""Output writer adapters.

Mental model refresher:
- This is outbound adapter code.
- Every notifier layer writes through an injected `write(line)` callable;
  the domain does not know whether lines reach the console or a list.
"""

from __future__ import annotations


def write_line_to_console(line: str) -> None:
    print(line)


class LineCollector:
    """Writer that keeps every line in memory, in the order written."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()
