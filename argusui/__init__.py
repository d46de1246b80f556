"""Terminal UI parts for watching coding agents in git worktrees: diffs, layout, keys, git panels."""

__version__ = "0.1.0"