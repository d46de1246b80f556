"""Panel showing a worktree's git status and diff statistics."""

from __future__ import annotations

import time
from dataclasses import dataclass

from argusui.fileexplorer import (
    _COMPLETE,
    _DIMMED,
    _ERROR,
    _IN_REVIEW,
    _NORMAL,
    _SECTION,
    _bordered_panel,
    _styled,
)

GIT_REFRESH_INTERVAL = 3.0
"""Seconds between automatic git status refreshes."""


@dataclass
class GitStatusRefreshMsg:
    """Result of a background git status check for one task."""

    task_id: str = ""
    status: str = ""
    diff: str = ""
    branch_diff: str = ""
    branch_files: str = ""


@dataclass
class GitStatus:
    """Cached git status for the current task, rendered as a bordered panel."""

    width: int = 0
    height: int = 0
    task_id: str = ""
    status_text: str = ""
    diff_text: str = ""
    branch_diff_text: str = ""
    loaded: bool = False
    last_refresh: float | None = None
    focused: bool = False

    def set_size(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def update(self, msg: GitStatusRefreshMsg) -> None:
        """Store the result if it belongs to the tracked task."""
        if msg.task_id != self.task_id:
            return
        self.status_text = msg.status
        self.diff_text = msg.diff
        self.branch_diff_text = msg.branch_diff
        self.loaded = True
        self.last_refresh = time.monotonic()

    def set_task(self, task_id: str) -> None:
        """Track a task, dropping cached data when it changes."""
        if task_id == self.task_id:
            return
        self.task_id = task_id
        self.status_text = ""
        self.diff_text = ""
        self.branch_diff_text = ""
        self.loaded = False
        self.last_refresh = None

    def needs_refresh(self) -> bool:
        if not self.task_id:
            return False
        if self.last_refresh is None:
            return True
        return time.monotonic() - self.last_refresh > GIT_REFRESH_INTERVAL

    def set_focused(self, focused: bool) -> None:
        self.focused = focused

    def _panel(self, content: str) -> str:
        return _bordered_panel(self.width, self.height, self.focused, content)

    def view(self) -> str:
        inner_w = max(self.width - 4, 10)
        inner_h = max(self.height - 2, 1)

        if not self.task_id:
            return self._panel(_styled(" No worktree", _DIMMED))
        if not self.loaded:
            return self._panel(_styled(" Loading...", _DIMMED))
        if not (self.status_text or self.diff_text or self.branch_diff_text):
            return self._panel(_styled(" Clean — no changes", _DIMMED))

        sections = []
        if self.status_text:
            lines = self.truncate_lines(self.status_text, inner_w, inner_h - 2)
            sections.append(_styled("  FILES", _SECTION) + "\n" + self._colorize_status(lines))
        if self.diff_text:
            lines = self.truncate_lines(self.diff_text, inner_w, inner_h - 2)
            sections.append(_styled("  DIFF", _SECTION) + "\n" + self._colorize_diff(lines))
        if self.branch_diff_text:
            lines = self.truncate_lines(self.branch_diff_text, inner_w, inner_h - 2)
            sections.append(_styled("  BRANCH", _SECTION) + "\n" + self._colorize_diff(lines))

        content_lines = "\n".join(sections).split("\n")[:inner_h]
        return self._panel("\n".join(content_lines))

    def truncate_lines(self, text: str, max_width: int, max_lines: int) -> str:
        """Keep at most max_lines lines, each cut to max_width with an ellipsis."""
        lines = text.rstrip("\n").split("\n")[: max(max_lines, 0)]
        return "\n".join(
            line[: max_width - 1] + "…" if len(line) > max_width else line for line in lines
        )

    def _colorize_status(self, text: str) -> str:
        out = []
        for line in text.split("\n"):
            trimmed = line.strip()
            if trimmed.startswith(("M ", "MM")):
                sgr = _IN_REVIEW
            elif trimmed.startswith(("A ", "??")):
                sgr = _COMPLETE
            elif trimmed.startswith("D "):
                sgr = _ERROR
            else:
                sgr = _NORMAL
            out.append(_styled("  " + trimmed, sgr))
        return "\n".join(out)

    def _colorize_diff(self, text: str) -> str:
        return "\n".join(_styled("  " + line, _DIMMED) for line in text.split("\n"))