"""Git commands run in a task's worktree."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass

from argusui.gitstatus import GitStatusRefreshMsg

_GIT_TIMEOUT = 5.0


@dataclass
class FileDiffMsg:
    """Result of fetching one file's diff."""

    task_id: str = ""
    file_path: str = ""
    diff: str = ""


def run_git(directory: str, *args: str) -> str:
    """Run git in directory and return its standard output.

    Raises subprocess.CalledProcessError (carrying the output) on a non-zero
    exit, subprocess.TimeoutExpired after five seconds, and OSError when git
    cannot be started.
    """
    env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
    completed = subprocess.run(
        ["git", "--no-pager", *args],
        cwd=directory,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        timeout=_GIT_TIMEOUT,
        check=True,
        text=True,
        errors="replace",
    )
    return completed.stdout


def _try_git(directory: str, *args: str) -> str | None:
    try:
        return run_git(directory, *args)
    except (subprocess.SubprocessError, OSError):
        return None


def find_merge_base(worktree: str) -> str:
    """Merge-base of HEAD with its upstream, else master, else main; "" if none."""
    for ref in ("HEAD@{upstream}", "master", "main"):
        out = _try_git(worktree, "merge-base", "HEAD", ref)
        if out and out.strip():
            return out.strip()
    return ""


def fetch_git_status(task_id: str, worktree: str) -> GitStatusRefreshMsg:
    """Collect status, diff stats and branch changes for a worktree."""
    msg = GitStatusRefreshMsg(task_id=task_id)
    if not worktree:
        return msg

    out = _try_git(worktree, "status", "--short")
    if out is not None:
        msg.status = out.rstrip("\n")
    out = _try_git(worktree, "diff", "HEAD", "--stat")
    if out is not None:
        msg.diff = out.rstrip("\n")

    base = find_merge_base(worktree)
    if base:
        out = _try_git(worktree, "diff", "--stat", f"{base}..HEAD")
        if out is not None:
            msg.branch_diff = out.rstrip("\n")
        out = _try_git(worktree, "diff", "--name-status", f"{base}..HEAD")
        if out is not None:
            msg.branch_files = out.rstrip("\n")
    return msg


def fetch_file_diff(task_id: str, worktree: str, file_path: str) -> FileDiffMsg:
    """Fetch the raw unified diff of one file.

    Uncommitted changes come first, then committed branch changes; an
    untracked file is shown as wholly added.
    """
    msg = FileDiffMsg(task_id=task_id, file_path=file_path)
    if not worktree or not file_path:
        return msg

    out = _try_git(worktree, "diff", "HEAD", "--", file_path)
    if out:
        msg.diff = out
        return msg

    base = find_merge_base(worktree)
    if base:
        out = _try_git(worktree, "diff", f"{base}..HEAD", "--", file_path)
        if out is not None:
            msg.diff = out

    if not msg.diff:
        try:
            msg.diff = run_git(worktree, "diff", "--no-index", "/dev/null", file_path)
        except subprocess.CalledProcessError as exc:
            # --no-index exits non-zero whenever the files differ.
            if exc.output:
                msg.diff = exc.output
        except (subprocess.SubprocessError, OSError):
            pass
    return msg