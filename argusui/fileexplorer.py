"""Sidebar listing the files changed in a worktree."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from wcwidth import wcwidth

from argusui.panellayout import visible_width

_RESET = "\x1b[0m"
_CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")

_SECTION = "1;38;5;141"
_DIMMED = "38;5;241"
_NORMAL = "38;5;252"
_SELECTED = "1;38;5;87"
_IN_REVIEW = "38;5;214"
_COMPLETE = "38;5;114"
_ERROR = "38;5;203"

_BORDER_FOCUSED = "38;5;87"
_BORDER_BLURRED = "38;5;238"


def _styled(text: str, sgr: str) -> str:
    return f"\x1b[{sgr}m{text}{_RESET}"


def _truncate(line: str, width: int) -> str:
    """Cut line to width cells, keeping escape sequences intact."""
    out: list[str] = []
    used = 0
    pos = 0
    while pos < len(line):
        match = _CSI_RE.match(line, pos)
        if match:
            out.append(match.group())
            pos = match.end()
            continue
        ch = line[pos]
        cells = max(wcwidth(ch), 0)
        if used + cells > width:
            out.append(_RESET)
            break
        out.append(ch)
        used += cells
        pos += 1
    return "".join(out)


def _bordered_panel(width: int, height: int, focused: bool, content: str) -> str:
    """Draw content inside a rounded border filling width x height cells."""
    sgr = _BORDER_FOCUSED if focused else _BORDER_BLURRED
    inner_w = max(width - 2, 0)
    inner_h = max(height - 2, 1)
    lines = content.split("\n")[:inner_h]
    lines.extend([""] * (inner_h - len(lines)))
    side = _styled("│", sgr)
    body = []
    for line in lines:
        cut = _truncate(line, inner_w)
        body.append(side + cut + " " * (inner_w - visible_width(cut)) + side)
    top = _styled("╭" + "─" * inner_w + "╮", sgr)
    bottom = _styled("╰" + "─" * inner_w + "╯", sgr)
    return "\n".join([top, *body, bottom])


@dataclass(frozen=True)
class ChangedFile:
    """A file reported by git, with its short status such as "M" or "??"."""

    status: str
    path: str


@dataclass
class _ScrollState:
    cursor: int = 0
    offset: int = 0

    def clamp_cursor(self, count: int) -> None:
        if count <= 0:
            self.cursor = 0
            self.offset = 0
            return
        self.cursor = min(max(self.cursor, 0), count - 1)
        self.offset = min(self.offset, self.cursor)

    def up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
        self.offset = min(self.offset, self.cursor)

    def down(self, count: int, visible: int) -> None:
        if self.cursor < count - 1:
            self.cursor += 1
        if self.cursor >= self.offset + visible:
            self.offset = self.cursor - visible + 1


@dataclass
class FileExplorer:
    """A scrollable list of changed files with a selection cursor."""

    width: int = 0
    height: int = 0
    files: list[ChangedFile] = field(default_factory=list)
    _scroll: _ScrollState = field(default_factory=_ScrollState, repr=False)

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def set_files(self, files: list[ChangedFile] | None) -> None:
        self.files = list(files or [])
        self._scroll.clamp_cursor(len(self.files))

    def cursor_up(self) -> None:
        self._scroll.up()

    def cursor_down(self) -> None:
        self._scroll.down(len(self.files), self._visible_rows())

    def selected_file(self) -> ChangedFile | None:
        """Return the file under the cursor, or None when there is none."""
        cursor = self._scroll.cursor
        if 0 <= cursor < len(self.files):
            return self.files[cursor]
        return None

    def file_count(self) -> int:
        return len(self.files)

    def _visible_rows(self) -> int:
        # Border and header take three rows.
        return max(self.height - 3, 1)

    def view(self, focused: bool) -> str:
        inner_w = max(self.width - 4, 10)
        header = _styled("  FILES", _SECTION)
        if not self.files:
            content = header + "\n" + _styled("  No changes", _DIMMED)
            return _bordered_panel(self.width, self.height, focused, content)
        header += _styled(f" ({len(self.files)})", _DIMMED)

        rows = [header]
        offset = self._scroll.offset
        cursor = self._scroll.cursor
        shown = self.files[offset:offset + self._visible_rows()]
        for index, changed in enumerate(shown, start=offset):
            selected = focused and index == cursor
            indicator = _styled(self.status_icon(changed.status), self._status_style(changed.status))
            name = changed.path
            max_name = inner_w - 6
            if len(name) > max_name and max_name > 3:
                name = "…" + name[len(name) - max_name + 1:]
            name_style = _SELECTED if selected else _NORMAL
            marker = _styled(" ▸", _SELECTED) if selected else "  "
            rows.append(f"{marker} {indicator} {_styled(name, name_style)}")
        return _bordered_panel(self.width, self.height, focused, "\n".join(rows) + "\n")

    def status_icon(self, status: str) -> str:
        """Return the one-character icon for a git status."""
        icons = {"M": "M", "MM": "M", "A": "A", "D": "D", "??": "?", "R": "R"}
        return icons.get(status, status)

    def _status_style(self, status: str) -> str:
        if status in ("M", "MM"):
            return _IN_REVIEW
        if status in ("A", "??"):
            return _COMPLETE
        if status == "D":
            return _ERROR
        return _NORMAL


def _lines(output: str) -> list[str]:
    return output.rstrip("\n").split("\n")


def parse_git_status(output: str) -> list[ChangedFile]:
    """Parse `git status --short` output."""
    if not output:
        return []
    files = []
    for line in _lines(output):
        if len(line) < 4:
            continue
        path = line[3:].strip()
        if path:
            files.append(ChangedFile(line[:2].strip(), path))
    return files


def parse_git_diff_name_status(output: str) -> list[ChangedFile]:
    """Parse `git diff --name-status` output."""
    if not output:
        return []
    files = []
    for line in _lines(output):
        status, sep, path = line.partition("\t")
        if not sep:
            continue
        path = path.strip()
        if path:
            files.append(ChangedFile(status.strip(), path))
    return files