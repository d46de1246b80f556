"""The start-screen banner with gradient colours and fading accents."""

from __future__ import annotations

from argusui.panellayout import visible_width

BANNER_LINES = (
    " █████  ██████   ██████  ██    ██ ███████",
    "██   ██ ██   ██ ██       ██    ██ ██     ",
    "███████ ██████  ██   ███ ██    ██ ███████",
    "██   ██ ██   ██ ██    ██ ██    ██      ██",
    "██   ██ ██   ██  ██████   ██████  ███████",
)

BANNER_GRADIENT = ("87", "81", "141", "177", "212")

BANNER_WIDTH = 41

ACCENT_CYAN = "87"
ACCENT_PINK = "212"
DIM_COLOR = "241"


def _styled(text: str, color: str, bold: bool = False) -> str:
    codes = ("1;" if bold else "") + f"38;5;{color}"
    return f"\x1b[{codes}m{text}\x1b[0m"


def _place_center(width: int, block: str) -> str:
    """Center each line of block within width columns."""
    lines = block.split("\n")
    out = []
    for line in lines:
        short = width - visible_width(line)
        if short <= 0:
            out.append(line)
            continue
        left = short // 2
        out.append(" " * left + line + " " * (short - left))
    return "\n".join(out)


def _join_vertical_center(*blocks: str) -> str:
    lines = [line for block in blocks for line in block.split("\n")]
    width = max(visible_width(line) for line in lines)
    return _place_center(width, "\n".join(lines))


def render_banner(width: int) -> str:
    """Render the banner, or a compact title when width is too small."""
    if width < BANNER_WIDTH + 4:
        title = _styled("ARGUS", "87", bold=True)
        sub = _styled("CODE ORCHESTRATOR", DIM_COLOR)
        return _place_center(width, _join_vertical_center(title, sub))

    parts = [render_fading_accent(width, ACCENT_CYAN, ACCENT_PINK), "\n\n"]
    for line, color in zip(BANNER_LINES, BANNER_GRADIENT):
        parts.append(_place_center(width, _styled(line, color, bold=True)))
        parts.append("\n")
    parts.append(render_gradient_underline(width, BANNER_WIDTH))
    parts.append("\n\n")
    parts.append(_place_center(width, _styled("C O D E   O R C H E S T R A T O R", DIM_COLOR)))
    parts.append("\n\n")
    parts.append(render_fading_accent(width, ACCENT_CYAN, ACCENT_PINK))
    return "".join(parts)


def render_fading_accent(width: int, left: str, right: str) -> str:
    """Draw dashes fading towards a central hexagon, left and right coloured apart."""
    side_len = max((width - BANNER_WIDTH) // 2 - 2, 3)
    left_styled = _styled(fade_dashes(side_len, False), left)
    right_styled = _styled(fade_dashes(side_len, True), right)
    hexagon = _styled("⬡", left)
    return _place_center(width, f"{left_styled} {hexagon} {right_styled}")


def _dash_at(pos: int, third: int) -> str:
    if pos < third:
        return "-" if pos % 3 == 2 else " "
    if pos < 2 * third:
        return "-" if pos % 2 == 1 else " "
    return "-"


def fade_dashes(length: int, reverse: bool) -> str:
    """Dashes going from sparse to solid; reversed when reverse is true."""
    if length <= 0:
        return ""
    third = max(length // 3, 1)
    positions = range(length - 1, -1, -1) if reverse else range(length)
    return "".join(_dash_at(pos, third) for pos in positions)


def render_gradient_underline(width: int, line_len: int) -> str:
    """A centered underline of line_len cells split across the gradient colours."""
    if line_len <= 0:
        return ""
    count = len(BANNER_GRADIENT)
    seg_len = max(line_len // count, 1)
    parts = []
    for index, color in enumerate(BANNER_GRADIENT):
        n = line_len - seg_len * (count - 1) if index == count - 1 else seg_len
        if n > 0:
            parts.append(_styled("─" * n, color))
    return _place_center(width, "".join(parts))