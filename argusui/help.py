"""Full keybinding help overlay."""

from __future__ import annotations

from dataclasses import dataclass, field

from argusui.keys import KeyMap, default_key_map

_RESET = "\x1b[0m"


def _styled(text: str, sgr: str) -> str:
    return f"\x1b[{sgr}m{text}{_RESET}"


@dataclass
class HelpView:
    """Renders every keybinding, grouped, with a closing hint."""

    keys: KeyMap = field(default_factory=default_key_map)

    def view(self) -> str:
        parts = [_styled("Keybindings", "1;38;5;87"), "\n\n"]
        for group in self.keys.full_help():
            for binding in group:
                key = _styled(binding.help_key, "1;38;5;87")
                desc = _styled(binding.help_desc, "38;5;252")
                parts.append(f"  {key}  {desc}\n")
            parts.append("\n")
        parts.append(_styled("  Press any key to close", "38;5;241"))
        return "".join(parts)