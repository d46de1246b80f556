"""Parsing of unified diffs and pairing of lines for side-by-side display."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import groupby, takewhile, zip_longest
from operator import attrgetter

_NO_NEWLINE_MARKER = "\\ No newline at end of file"
_HUNK_SEPARATOR = "───"
_INT_RE = re.compile(r"[+-]?\d+")


class DiffLineType(IntEnum):
    """Category of a line in a unified diff."""

    CONTEXT = 0
    ADDED = 1
    REMOVED = 2


@dataclass
class DiffLine:
    """A single line of a parsed diff, without its +/- prefix."""

    kind: DiffLineType
    content: str = ""
    old_num: int = 0
    new_num: int = 0


@dataclass
class DiffHunk:
    """A group of contiguous changes introduced by an @@ header."""

    old_start: int = 0
    old_count: int = 0
    new_start: int = 0
    new_count: int = 0
    header: str = ""
    lines: list[DiffLine] = field(default_factory=list)


@dataclass
class ParsedDiff:
    """The result of parsing a unified diff."""

    old_file: str = ""
    new_file: str = ""
    hunks: list[DiffHunk] = field(default_factory=list)


@dataclass
class SideBySideLine:
    """One row of a side-by-side diff view; a number of 0 means blank."""

    left_num: int = 0
    left_text: str = ""
    left_type: DiffLineType = DiffLineType.CONTEXT
    right_num: int = 0
    right_text: str = ""
    right_type: DiffLineType = DiffLineType.CONTEXT


def _atoi(s: str) -> int:
    """Parse a decimal integer, yielding 0 when the text is not one."""
    return int(s) if _INT_RE.fullmatch(s) else 0


def parse_unified_diff(raw: str) -> ParsedDiff:
    """Parse raw unified diff output into files, hunks and lines."""
    pd = ParsedDiff()
    hunk: DiffHunk | None = None
    old_num = new_num = 0

    for line in raw.split("\n"):
        if line.startswith("--- "):
            pd.old_file = line[4:].removeprefix("a/")
            continue
        if line.startswith("+++ "):
            pd.new_file = line[4:].removeprefix("b/")
            continue
        if line.startswith("@@"):
            hunk = parse_hunk_header(line)
            pd.hunks.append(hunk)
            old_num, new_num = hunk.old_start, hunk.new_start
            continue
        if hunk is None:
            # Metadata before the first hunk (diff --git, index, ...).
            continue

        if line.startswith("-"):
            hunk.lines.append(DiffLine(DiffLineType.REMOVED, line[1:], old_num=old_num))
            old_num += 1
        elif line.startswith("+"):
            hunk.lines.append(DiffLine(DiffLineType.ADDED, line[1:], new_num=new_num))
            new_num += 1
        elif line.startswith(" "):
            hunk.lines.append(DiffLine(DiffLineType.CONTEXT, line[1:], old_num, new_num))
            old_num += 1
            new_num += 1
        elif line == _NO_NEWLINE_MARKER:
            continue
        elif line == "" and old_num > 0:
            # An empty context line whose leading space was lost.
            hunk.lines.append(DiffLine(DiffLineType.CONTEXT, "", old_num, new_num))
            old_num += 1
            new_num += 1

    return pd


def parse_hunk_header(line: str) -> DiffHunk:
    """Parse an "@@ -old,count +new,count @@ context" header."""
    hunk = DiffHunk(old_start=1, old_count=1, new_start=1, new_count=1, header=line)
    if not line.startswith("@@"):
        return hunk
    end = line.find("@@", 2)
    if end < 0:
        return hunk
    for part in line[2:end].split():
        if part.startswith("-"):
            hunk.old_start, hunk.old_count = parse_range(part[1:])
        elif part.startswith("+"):
            hunk.new_start, hunk.new_count = parse_range(part[1:])
    return hunk


def parse_range(s: str) -> tuple[int, int]:
    """Parse "start,count" or "start"; count defaults to 1, start 0 becomes 1."""
    if "," in s:
        start_text, count_text = s.split(",", 1)
        start, count = _atoi(start_text), _atoi(count_text)
    else:
        start, count = _atoi(s), 1
    return (start or 1), count


def _pair_rows(removed: list[DiffLine], added: list[DiffLine]) -> list[SideBySideLine]:
    rows = []
    for old, new in zip_longest(removed, added):
        row = SideBySideLine()
        if old is not None:
            row.left_num = old.old_num
            row.left_text = old.content
            row.left_type = DiffLineType.REMOVED
        if new is not None:
            row.right_num = new.new_num
            row.right_text = new.content
            row.right_type = DiffLineType.ADDED
        rows.append(row)
    return rows


def build_side_by_side(pd: ParsedDiff) -> list[SideBySideLine]:
    """Convert parsed hunks into rows, pairing removed runs with following added runs."""
    rows: list[SideBySideLine] = []

    for index, hunk in enumerate(pd.hunks):
        if index > 0:
            rows.append(SideBySideLine(left_text=_HUNK_SEPARATOR, right_text=_HUNK_SEPARATOR))
        rows.append(SideBySideLine(left_text=hunk.header, right_text=hunk.header))

        removed: list[DiffLine] = []
        for kind, group in groupby(hunk.lines, key=attrgetter("kind")):
            run = list(group)
            if kind == DiffLineType.REMOVED:
                removed = run
                continue
            if kind == DiffLineType.ADDED:
                rows.extend(_pair_rows(removed, run))
                removed = []
                continue
            if removed:
                rows.extend(_pair_rows(removed, []))
                removed = []
            rows.extend(
                SideBySideLine(
                    left_num=dl.old_num,
                    left_text=dl.content,
                    right_num=dl.new_num,
                    right_text=dl.content,
                )
                for dl in run
            )
        if removed:
            rows.extend(_pair_rows(removed, []))

    return rows


def collect_run(lines: list[DiffLine], i: int, line_type: DiffLineType) -> list[DiffLine]:
    """Return the consecutive lines of the given type starting at index i."""
    return list(takewhile(lambda dl: dl.kind == line_type, lines[i:]))


def format_line_num(n: int, width: int) -> str:
    """Right-align a line number in width columns; blank for 0, keep the tail on overflow."""
    if n == 0:
        return " " * width
    s = str(n)
    if len(s) > width:
        return s[len(s) - width:]
    return s.rjust(width)