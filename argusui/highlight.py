"""Syntax highlighting of source lines for terminal display."""

from __future__ import annotations

import os

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound


def lexer_for_file(filename: str) -> Lexer | None:
    """Return a lexer for the file name, or None when none is known."""
    try:
        return get_lexer_for_filename(filename)
    except ClassNotFound:
        pass
    ext = os.path.splitext(filename)[1]
    if not ext:
        return None
    try:
        return get_lexer_by_name(ext.lstrip("."))
    except ClassNotFound:
        return None


def highlight_lines(lines: list[str], filename: str) -> list[str]:
    """Highlight each line by the file's language; unknown files come back unchanged."""
    if not lines:
        return list(lines)
    lexer = lexer_for_file(filename)
    if lexer is None:
        return list(lines)
    formatter = Terminal256Formatter(style="monokai")

    result = []
    for line in lines:
        try:
            result.append(highlight(line, lexer, formatter).rstrip("\n"))
        except Exception:  # a lexer failure should never lose the line
            result.append(line)
    return result