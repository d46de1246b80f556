"""Horizontal splitting of the screen into panels, plus ANSI-aware text helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from wcwidth import wcwidth

_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"          # CSI sequences
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC sequences
    r"|\x1b[@-Z\\-_]"                   # two-byte escapes
)


@dataclass
class PanelConfig:
    """A panel's target width percentage and minimum width in columns."""

    pct: int
    min_width: int


@dataclass
class PanelLayout:
    """Computes panel widths from percentages and minimums and joins panels."""

    configs: list[PanelConfig] = field(default_factory=list)
    width: int = 0
    height: int = 0

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def split_widths(self) -> list[int]:
        """Return one width per panel, summing to the layout width.

        When too narrow, panels shrink right to left, each no further than
        half its minimum (and never below 5 columns).
        """
        n = len(self.configs)
        if n == 0 or self.width <= 0:
            return [0] * n

        widths = [max(self.width * c.pct // 100, c.min_width) for c in self.configs]

        excess = sum(widths) - self.width
        for i in reversed(range(n)):
            if excess <= 0:
                break
            floor = max(self.configs[i].min_width // 2, 5)
            shrink = min(widths[i] - floor, excess)
            if shrink > 0:
                widths[i] -= shrink
                excess -= shrink

        diff = self.width - sum(widths)
        if diff:
            largest = max(range(n), key=widths.__getitem__)
            widths[largest] += diff
        return widths

    def render(self, panels: list[str]) -> str:
        """Pad rendered panels to the layout height and join them side by side."""
        return join_horizontal([pad_height(p, self.height) for p in panels])


def pad_height(s: str, height: int) -> str:
    """Cut or pad s with empty lines so it has exactly height lines."""
    if height <= 0:
        return ""
    lines = s.split("\n")[:height]
    lines.extend([""] * (height - len(lines)))
    return "\n".join(lines)


def strip_ansi(s: str) -> str:
    """Remove ANSI escape sequences and surrounding whitespace."""
    return _ANSI_RE.sub("", s).strip()


def visible_width(s: str) -> int:
    """Return the number of terminal cells s occupies, ignoring escapes."""
    return sum(max(wcwidth(ch), 0) for ch in _ANSI_RE.sub("", s))


def join_horizontal(blocks: list[str]) -> str:
    """Join multi-line blocks side by side, aligned to the top."""
    if not blocks:
        return ""
    split = [block.split("\n") for block in blocks]
    height = max(len(lines) for lines in split)
    columns = []
    for lines in split:
        width = max(visible_width(line) for line in lines)
        padded = [line + " " * (width - visible_width(line)) for line in lines]
        padded.extend([" " * width] * (height - len(padded)))
        columns.append(padded)
    return "\n".join("".join(row) for row in zip(*columns))