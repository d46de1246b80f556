import pytest

from argusui.banner import (
    ACCENT_CYAN,
    ACCENT_PINK,
    BANNER_WIDTH,
    fade_dashes,
    render_banner,
    render_fading_accent,
    render_gradient_underline,
)
from argusui.panellayout import strip_ansi, visible_width


def test_wide_width():
    result = render_banner(100)
    assert "██" in result
    assert "O R C H E S T R A T O R" in result
    assert "⬡" in result
    assert "─" in result


def test_wide_lines_fill_width():
    result = render_banner(100)
    assert all(visible_width(line) == 100 for line in result.split("\n") if line)


def test_narrow_width():
    result = render_banner(30)
    assert "ARGUS" in result
    assert "CODE ORCHESTRATOR" in result
    assert "██" not in result


def test_exact_boundary():
    assert "CODE ORCHESTRATOR" in render_banner(BANNER_WIDTH + 3)
    assert "O R C H E S T R A T O R" in render_banner(BANNER_WIDTH + 4)


def test_zero_width():
    result = render_banner(0)
    assert "ARGUS" in result


@pytest.mark.parametrize(
    "length, reverse",
    [(0, False), (1, False), (10, False), (10, True), (30, False)],
)
def test_fade_dashes_length(length, reverse):
    assert len(fade_dashes(length, reverse)) == length


def test_fade_dashes_reverse_mirrors():
    assert fade_dashes(10, True) == fade_dashes(10, False)[::-1]


def test_fade_dashes_dense_towards_center():
    forward = fade_dashes(30, False)
    assert set(forward) <= {"-", " "}
    assert forward.endswith("-" * 10)
    assert forward[:10].count("-") < forward[10:20].count("-")


def test_gradient_underline():
    result = render_gradient_underline(80, 41)
    assert strip_ansi(result).count("─") == 41
    assert visible_width(result) == 80


def test_gradient_underline_zero_len():
    assert render_gradient_underline(80, 0) == ""


def test_fading_accent():
    result = render_fading_accent(80, ACCENT_CYAN, ACCENT_PINK)
    assert "⬡" in result
    assert visible_width(result) == 80