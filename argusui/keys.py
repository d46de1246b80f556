"""Application keybindings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyBinding:
    """Keys that trigger an action, and how the action is shown in help."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str


@dataclass(frozen=True)
class KeyMap:
    """All keybindings of the application."""

    new: KeyBinding
    attach: KeyBinding
    status_fwd: KeyBinding
    status_rev: KeyBinding
    delete: KeyBinding
    destroy: KeyBinding
    quit: KeyBinding
    help: KeyBinding
    filter: KeyBinding
    prompt: KeyBinding
    worktree: KeyBinding
    prune: KeyBinding
    up: KeyBinding
    down: KeyBinding
    tab_left: KeyBinding
    tab_right: KeyBinding
    confirm: KeyBinding
    cancel: KeyBinding

    def short_help(self) -> list[KeyBinding]:
        """Bindings shown in the mini help line."""
        return [self.new, self.attach, self.status_fwd, self.delete, self.quit, self.help]

    def full_help(self) -> list[list[KeyBinding]]:
        """Grouped bindings for the full help view."""
        return [
            [self.new, self.attach, self.delete, self.destroy],
            [self.status_fwd, self.status_rev, self.prompt],
            [self.up, self.down, self.filter],
            [self.worktree, self.prune, self.help, self.quit],
        ]


def default_key_map() -> KeyMap:
    """Return the default keybindings."""
    return KeyMap(
        new=KeyBinding(("n",), "n", "new task"),
        attach=KeyBinding(("enter",), "↵", "attach"),
        status_fwd=KeyBinding(("s",), "s", "advance status"),
        status_rev=KeyBinding(("S",), "S", "revert status"),
        delete=KeyBinding(("d",), "d", "delete"),
        destroy=KeyBinding(("ctrl+d",), "^d", "destroy (kill+cleanup+delete)"),
        quit=KeyBinding(("q", "ctrl+c"), "q", "quit"),
        help=KeyBinding(("?",), "?", "help"),
        filter=KeyBinding(("/",), "/", "filter"),
        prompt=KeyBinding(("p",), "p", "view prompt"),
        worktree=KeyBinding(("w",), "w", "worktree info"),
        prune=KeyBinding(("ctrl+r",), "^r", "prune completed"),
        up=KeyBinding(("up", "k"), "↑/k", "up"),
        down=KeyBinding(("down", "j"), "↓/j", "down"),
        tab_left=KeyBinding(("left",), "←", "prev tab"),
        tab_right=KeyBinding(("right",), "→", "next tab"),
        confirm=KeyBinding(("enter",), "↵", "confirm"),
        cancel=KeyBinding(("esc",), "esc", "cancel"),
    )