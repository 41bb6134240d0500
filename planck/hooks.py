"""Claude Code hook wiring used to detect permission prompts, and key-set comparison."""

from __future__ import annotations

import json
import os
from typing import Iterable, Sequence

NEEDS_INPUT = "needs_input"
CLAUDE_COMMAND = "claude"

# Planning arguments that are safe to pass to an interactive session.
_INTERACTIVE_SAFE_ARGS = frozenset({"--dangerously-skip-permissions", "--full-auto"})


def hook_settings_json(state_file: str) -> str:
    """Return a ``--settings`` JSON value whose hook writes "needs_input" to ``state_file``.

    The hook fires on Claude Code's permission-prompt notification.
    """
    command = f"echo {NEEDS_INPUT} > {state_file}"
    settings = {
        "hooks": {
            "Notification": [
                {
                    "matcher": "permission_prompt",
                    "hooks": [{"type": "command", "command": command}],
                }
            ]
        }
    }
    return json.dumps(settings, separators=(",", ":"), ensure_ascii=False)


def read_hook_state(state_file: str) -> str:
    """Return the trimmed contents of the hook state file, or "" if there is none."""
    if not state_file:
        return ""
    try:
        with open(state_file, encoding="utf-8", errors="replace") as fh:
            return fh.read().strip()
    except OSError:
        return ""


def clear_hook_state(state_file: str) -> None:
    """Remove the hook state file if it exists."""
    if not state_file:
        return
    try:
        os.remove(state_file)
    except OSError:
        pass


def build_launch_args(
    command: str, planning_args: Iterable[str], state_file: str
) -> list[str]:
    """Arguments for launching an interactive agent session.

    Only the interactive-safe planning arguments are kept. For the Claude
    command without skipped permissions, hook settings that write to
    ``state_file`` are added so permission prompts can be detected.
    """
    args = [arg for arg in planning_args if arg in _INTERACTIVE_SAFE_ARGS]
    skips_permissions = bool(args)
    if command == CLAUDE_COMMAND and not skips_permissions:
        args += ["--settings", hook_settings_json(state_file)]
    return args


def same_keys(a: Sequence[str], b: Sequence[str]) -> bool:
    """Whether two key lists have the same length and every key of ``b`` is in ``a``."""
    if len(a) != len(b):
        return False
    present = set(a)
    return all(key in present for key in b)