from argusui.help import HelpView
from argusui.keys import default_key_map
from argusui.panellayout import strip_ansi


def test_contains_keybindings():
    view = HelpView(default_key_map()).view()
    assert "Keybindings" in view
    assert "new task" in view
    assert "quit" in view
    assert "attach" in view
    assert "Press any key to close" in view


def test_every_full_help_binding_is_listed():
    km = default_key_map()
    plain = "\n".join(strip_ansi(line) for line in HelpView(km).view().split("\n"))
    for group in km.full_help():
        for binding in group:
            assert f"{binding.help_key}  {binding.help_desc}" in plain


def test_starts_with_title_and_ends_with_hint():
    lines = HelpView().view().split("\n")
    assert strip_ansi(lines[0]) == "Keybindings"
    assert strip_ansi(lines[-1]) == "Press any key to close"