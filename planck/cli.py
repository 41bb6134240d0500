"""Command-line entry helpers: subcommand detection, help and ``attach``."""

from __future__ import annotations

import argparse
import hashlib
import os
import shutil
import subprocess
import sys

KNOWN_SUBCOMMANDS = frozenset({"update", "version", "attach"})

# Top-level flags that consume the following argument as their value.
_VALUED_FLAGS = frozenset({"-folder", "--folder", "-f"})

# Characters that force an argument to be single-quoted for the shell.
_SHELL_SPECIAL = frozenset(" \t\n'\"\\$`!#&|;(){}[]<>?*~")

HELP_TEXT = """planck - Folder-based markdown editor with multi-agent support

Usage:
  planck [options]
  planck attach [--folder PATH]
  planck update [--check]
  planck version [--check]

Options:
  -f, --folder PATH  Folder containing markdown files (default: current directory)
  -h, --help         Show this help message
  -v, --version      Show version information

Commands:
  attach             Run planck inside a persistent tmux session (survives SSH disconnects)
  attach --folder    Specify working directory for the attached session
  update             Download and install the latest version
  update --check     Check for updates without installing
  version            Show version information
  version --check    Show version and check for updates

Keybindings (Global):
  Shift+Tab    Next tab
  Alt+1-9      Jump to tab by number (all modes)
  1-9          Jump to tab by number (normal mode)
  a            Create new agent tab
  x / Ctrl+X   Close current agent tab
  s            Settings
  ?            Toggle help
  q            Quit

Keybindings (Planning Tab):
  ↑/↓, j/k    Navigate files
  Enter        Open file in editor
  e            Enter edit mode
  n            New file
  d            Delete file/folder
  c            Toggle completion
  m            Move/rename file or folder
  r            Refresh file list
  h/l          Collapse/expand folders

Keybindings (Agent Tab - Input Mode):
  Ctrl+\\       Exit to normal mode
  Tab          Sent to agent (autocomplete)
  Ctrl+X       Close tab
  Scroll       Browse output history

Keybindings (Agent Tab - Normal Mode):
  i / Enter    Enter input mode
  j/k          Scroll up/down
  g/G          Jump to top/bottom
  x            Close tab
  a            New agent tab"""


def find_subcommand(args: list[str]) -> tuple[str, list[str]] | None:
    """Find a subcommand in a full argument vector (``args[0]`` is the program).

    Flags and their values are skipped. Returns the subcommand and the
    arguments after it, or None when the first positional argument is not a
    known subcommand or there is none.
    """
    remaining = iter(enumerate(args[1:], start=1))
    for i, arg in remaining:
        if arg.startswith("-"):
            if arg in _VALUED_FLAGS:
                next(remaining, None)
            continue
        if arg in KNOWN_SUBCOMMANDS:
            return arg, list(args[i + 1 :])
        break
    return None


def quote_shell_arg(s: str) -> str:
    """Single-quote ``s`` for a POSIX shell when it holds special characters."""
    if not any(ch in _SHELL_SPECIAL for ch in s):
        return s
    return "'" + s.replace("'", "'\"'\"'") + "'"


def sha256_short(s: str) -> str:
    """Hex of the first four bytes of the SHA-256 digest of ``s``."""
    return hashlib.sha256(s.encode("utf-8")).digest()[:4].hex()


def get_config_dir() -> str:
    """The user configuration directory, ``~/.config/planck``."""
    home = os.path.expanduser("~")
    if not home or home == "~":
        return ".planck"
    return os.path.join(home, ".config", "planck")


def print_help() -> None:
    """Print usage and key bindings to standard output."""
    print(HELP_TEXT)


def _fail(message: str) -> None:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def _planck_executable() -> str:
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and os.path.isfile(argv0):
        return os.path.abspath(argv0)
    return "planck"


def _run_tmux(command: list[str]) -> int:
    try:
        return subprocess.run(command).returncode
    except OSError as exc:
        raise RuntimeError(str(exc)) from exc


def run_attach(args: list[str]) -> None:
    """Attach to, or start, a persistent tmux session running planck."""
    parser = argparse.ArgumentParser(prog="attach")
    parser.add_argument(
        "-folder",
        "--folder",
        default="",
        help="Working directory (default: current directory)",
    )
    options = parser.parse_args(args)

    if shutil.which("tmux") is None:
        _fail(
            "Error: tmux is required for 'planck attach' but was not found in PATH.\n"
            "Install tmux: brew install tmux (macOS) or apt install tmux (Linux)"
        )

    if options.folder:
        folder = os.path.abspath(options.folder)
    else:
        try:
            folder = os.getcwd()
        except OSError as exc:
            _fail(f"Error: cannot determine current directory: {exc}")

    tmux_session = f"planck-{sha256_short(folder)}"

    try:
        exists = subprocess.run(
            ["tmux", "has-session", "-t", tmux_session],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        ).returncode == 0
    except OSError:
        exists = False

    if exists:
        print(f"Reattaching to existing planck session for {folder}")
        try:
            code = _run_tmux(["tmux", "attach-session", "-t", tmux_session])
        except RuntimeError as exc:
            _fail(f"Error attaching to tmux session: {exc}")
        if code != 0:
            _fail(f"Error attaching to tmux session: exit status {code}")
        return

    planck_cmd = f"{_planck_executable()} --folder {quote_shell_arg(folder)}"

    print(f"Starting planck in persistent tmux session for {folder}")
    print(f"Session name: {tmux_session}")
    print("Detach with Ctrl+B d, reattach with: planck attach")

    try:
        code = _run_tmux(
            ["tmux", "new-session", "-s", tmux_session, "-c", folder, planck_cmd]
        )
    except RuntimeError as exc:
        _fail(f"Error creating tmux session: {exc}")
    if code != 0:
        _fail(f"Error creating tmux session: exit status {code}")