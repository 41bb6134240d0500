# planck

Building blocks for running AI coding agents in terminal tabs next to a
folder of markdown plans: session records and a scrollback ring buffer, tab
title handling, Claude CLI hook settings for spotting permission prompts,
and command-line helpers for running inside a persistent tmux session.

Requires Python 3.11 or later. There are no runtime dependencies.

## Sessions and scrollback (`planck.session`)

`Session` is a dataclass describing an agent session. Its `status`, `mode`
and `type` take the string enums `Status` (`running`, `paused`,
`completed`, `failed`, `canceled`), `Mode` (`foreground`, `background`) and
`SessionType` (`planning`, `implementation`, `execution`).

`ScrollbackBuffer` is a thread-safe ring buffer for lines that scroll off
the top of a terminal screen. A capacity of zero or less falls back to 1000.

```python
from planck.session import ScrollbackBuffer

buf = ScrollbackBuffer(3)
buf.push(["one", "two", "three", "four"])
print(len(buf))          # 3
print(buf.line(0))       # "two" (0 is the oldest line)
print(buf.line(7))       # "" (out of range)
print(buf.lines(1, 5))   # ["three", "four"]
```

## Tab titles (`planck.tabtitle`)

- `sanitize_tab_title(raw)` removes control, zero-width and other
  non-printable characters as well as dingbat and braille spinner glyphs,
  trims whitespace, and returns `""` when fewer than three characters are
  left.
- `is_generic_osc_title(osc_title, base_label)` is true when one of the two,
  trimmed and lower-cased, contains the other.
- `truncate_title(title)` shortens titles longer than 30 characters,
  ending them with `...`.
- `compute_tab_label(custom_title, base_label, instance_num, same_kind_count)`
  prefers the custom title, otherwise gives the base label, numbered when
  more than one tab of that agent kind is open.
- `InputTitleTracker.feed(data)` follows raw keystroke bytes (backspace,
  Ctrl+C, Escape, Ctrl+U and Ctrl+W are honoured) and returns a title derived
  from a line submitted with Enter, with leading slashes stripped; the line
  typed so far is in `.buffer`.

```python
from planck.tabtitle import InputTitleTracker, compute_tab_label, sanitize_tab_title

print(sanitize_tab_title("\u2733 Claude Code"))   # "Claude Code"
print(compute_tab_label("", "Claude", 2, 2))      # "Claude #2"

tracker = InputTitleTracker()
print(tracker.feed(b"/plan fix auth\r"))          # "plan fix auth"
```

## Permission-prompt hooks (`planck.hooks`)

- `hook_settings_json(state_file)` returns a `--settings` JSON value whose
  Notification hook, on a permission prompt, writes `needs_input` to
  `state_file`.
- `read_hook_state(state_file)` returns the trimmed contents of that file,
  or `""` when there is none; `clear_hook_state(state_file)` removes it.
- `build_launch_args(command, planning_args, state_file)` keeps only
  `--dangerously-skip-permissions` and `--full-auto` from the planning
  arguments and, for the `claude` command when neither is present, adds
  `--settings` with the hook JSON.
- `same_keys(a, b)` compares two key lists without regard to order.

```python
from planck.hooks import build_launch_args

print(build_launch_args("codex", ["--full-auto"], "/tmp/state"))  # ["--full-auto"]
print(build_launch_args("claude", ["-p"], "/tmp/state")[0])       # "--settings"
```

## Command-line helpers (`planck.cli`)

- `find_subcommand(args)` scans a full argument vector (program name first),
  skipping flags and the values of `-f`, `-folder` and `--folder`, and
  returns `(subcommand, rest)` for `update`, `version` or `attach`, or
  `None`.
- `run_attach(args)` takes `--folder` (default: the current directory),
  then rejoins the tmux session named `planck-<hash>` for that folder or
  creates one running planck there. It exits with status 1 when tmux is
  missing or a tmux command fails.
- `quote_shell_arg(s)` single-quotes a string holding shell special
  characters; `sha256_short(s)` gives the hex of the first four bytes of its
  SHA-256 digest; `get_config_dir()` returns `~/.config/planck`;
  `print_help()` prints the usage and key binding text.

```python
from planck.cli import find_subcommand

print(find_subcommand(["planck", "--folder", "/tmp", "update", "--check"]))
# ('update', ['--check'])
```

## What this package does not do

It installs no command. It does not read or write project configuration
files, start or drive agent processes itself (beyond the tmux commands in
`run_attach`), parse agent output, send notifications, store sessions, or
draw a terminal interface. It supplies the pieces listed above for a program
that does.