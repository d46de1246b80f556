# argusui

Building blocks for a terminal interface that watches coding agents at work in
git worktrees. Every piece renders plain strings with ANSI colour codes; the
package does not drive a terminal itself, so its parts can be used from any
text-mode front end.

## What is inside

- `argusui.diffparse` parses unified diff text into files, hunks and lines
  (`parse_unified_diff`, `parse_hunk_header`, `parse_range`, and the
  dataclasses `ParsedDiff`, `DiffHunk`, `DiffLine`, `DiffLineType`).
  `build_side_by_side` turns a parsed diff into `SideBySideLine` rows, pairing
  runs of removed lines with the added lines that follow them.
  `format_line_num` right-aligns a line number for a gutter, leaving it blank
  for 0 and keeping the last digits when it is too wide.
- `argusui.panellayout` splits a width between panels by percentage and
  minimum width (`PanelConfig`, `PanelLayout`). When space is short, panels
  shrink from right to left, never below half their minimum or 5 columns, and
  the widths always add up to the layout width. `PanelLayout.render` pads
  panels to the layout height and joins them side by side. The ANSI-aware
  helpers `pad_height`, `strip_ansi`, `visible_width` and `join_horizontal` are
  available on their own.
- `argusui.highlight` colours lines of code for a 256-colour terminal, picking
  the language from the file name (`highlight_lines`, `lexer_for_file`).
  Unknown files come back unchanged.
- `argusui.keybytes` holds key events (`KeyType`, `KeyMsg`);
  `key_msg_to_bytes` turns one into the raw bytes a pseudo-terminal expects,
  Alt-prefixed where needed.
- `argusui.filter` provides `super_to_alt_filter`, which turns the raw
  Cmd+arrow sequences `ESC [ 1 ; 9 A..D` into Alt+arrow `KeyMsg` events and
  passes anything else through.
- `argusui.keys` holds the default key bindings (`default_key_map`,
  `KeyMap`, `KeyBinding`), with `short_help` and `full_help` groupings;
  `argusui.help` renders them as an overlay (`HelpView`).
- `argusui.banner` draws the gradient title banner (`render_banner`), falling
  back to a compact title on narrow widths.
- `argusui.fileexplorer` parses `git status --short` and
  `git diff --name-status` output into `ChangedFile` entries
  (`parse_git_status`, `parse_git_diff_name_status`) and provides a bordered,
  scrollable changed-files panel with a cursor (`FileExplorer`).
- `argusui.gitstatus` provides a bordered panel showing a worktree's status,
  diff stats and branch diff stats (`GitStatus`, fed by
  `GitStatusRefreshMsg`); `needs_refresh` reports when more than three seconds
  have passed since the last update.
- `argusui.gitcmd` runs `git` in a worktree (`run_git`, `find_merge_base`) to
  collect a `GitStatusRefreshMsg` (`fetch_git_status`) or one file's raw diff
  (`fetch_file_diff`, returning a `FileDiffMsg`). It needs `git` on the
  `PATH`; each call times out after five seconds. `run_git` raises
  `subprocess.CalledProcessError` on a non-zero exit, while the fetch functions
  leave fields empty when a command fails.

## What it does not do

The package supplies parts, not an application. It has no command to run, no
event loop or screen that reads keys and redraws, no view of an agent's
terminal output, no task list or forms for creating tasks and projects, and
no storage of tasks or settings. It does not start or stop agents; the only
program it runs is `git`.

## Install

```
pip install .
```

## Example

```python
from argusui.diffparse import parse_unified_diff, build_side_by_side

diff = """--- a/file.go
+++ b/file.go
@@ -1,3 +1,3 @@
 line1
-old2
+new2
 line3"""

parsed = parse_unified_diff(diff)
for row in build_side_by_side(parsed):
    print(f"{row.left_text:<20} | {row.right_text}")
```

```python
from argusui.panellayout import PanelConfig, PanelLayout

layout = PanelLayout([PanelConfig(20, 20), PanelConfig(60, 60), PanelConfig(20, 20)])
layout.set_size(120, 40)
print(layout.split_widths())  # widths that always add up to 120
```

```python
from argusui.keybytes import KeyMsg, KeyType, key_msg_to_bytes

key_msg_to_bytes(KeyMsg(KeyType.LEFT, alt=True))  # b"\x1b[1;3D"
```

## Running the tests

```
pip install .[test]
pytest
```