"""Session records and the scrollback ring buffer used by terminal sessions."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from itertools import islice
from typing import Iterable

DEFAULT_SCROLLBACK_CAPACITY = 1000


class Status(StrEnum):
    """Lifecycle state of a session."""

    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"


class Mode(StrEnum):
    """Whether a session runs in the foreground or the background."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


class SessionType(StrEnum):
    """What kind of work a session performs."""

    PLANNING = "planning"
    IMPLEMENTATION = "implementation"
    EXECUTION = "execution"


@dataclass
class Session:
    """An active agent session as seen by the application."""

    id: str = ""
    task_id: str = ""
    plan_id: str = ""
    type: SessionType | None = None
    mode: Mode | None = None
    status: Status | None = None
    backend: str = ""
    agent_session_id: str = ""
    backend_handle: str = ""
    started_at: datetime | None = None
    ended_at: datetime | None = None
    output: str = ""


class ScrollbackBuffer:
    """Thread-safe ring buffer of lines that scrolled off the top of a screen."""

    def __init__(self, capacity: int = DEFAULT_SCROLLBACK_CAPACITY) -> None:
        if capacity <= 0:
            capacity = DEFAULT_SCROLLBACK_CAPACITY
        self._lock = threading.Lock()
        self._lines: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Maximum number of lines kept."""
        return self._lines.maxlen or DEFAULT_SCROLLBACK_CAPACITY

    def push(self, lines: Iterable[str]) -> None:
        """Append lines, dropping the oldest once the buffer is full."""
        with self._lock:
            self._lines.extend(lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    def line(self, i: int) -> str:
        """Return line ``i`` (0 is the oldest), or "" when out of range."""
        with self._lock:
            if 0 <= i < len(self._lines):
                return self._lines[i]
            return ""

    def lines(self, offset: int, count: int) -> list[str]:
        """Return up to ``count`` lines starting at ``offset`` (oldest first)."""
        with self._lock:
            offset = max(offset, 0)
            if offset >= len(self._lines):
                return []
            return list(islice(self._lines, offset, offset + max(count, 0)))