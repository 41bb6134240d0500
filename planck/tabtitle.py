"""Tab titles for agent tabs: cleaning OSC titles and deriving titles from typed input."""

from __future__ import annotations

import unicodedata

MAX_TAB_TITLE_LEN = 30
MIN_TAB_TITLE_LEN = 3

# Dingbats (U+2700-U+27BF) and braille patterns (U+2800-U+28FF) leak into
# window titles as spinner frames; they are dropped entirely.
_SPINNER_RANGE = range(0x2700, 0x2900)

# Unicode categories counted as printable: letters, marks, numbers,
# punctuation and symbols. Of the separators only the ASCII space is kept.
_PRINTABLE_CATEGORY_PREFIXES = ("L", "M", "N", "P", "S")

_ENTER = frozenset({0x0D, 0x0A})
_BACKSPACE = 0x7F
_DISCARD = frozenset({0x03, 0x1B, 0x15})  # Ctrl+C, Escape, Ctrl+U
_DELETE_WORD = 0x17  # Ctrl+W


def _is_printable(ch: str) -> bool:
    if ch == " ":
        return True
    return unicodedata.category(ch).startswith(_PRINTABLE_CATEGORY_PREFIXES)


def sanitize_tab_title(raw: str) -> str:
    """Clean a title, returning "" when what is left is too short to be useful.

    Control, format (zero-width) and non-printable characters are removed,
    as are dingbat and braille spinner glyphs; surrounding whitespace is
    trimmed.
    """
    if not raw:
        return ""
    kept = "".join(
        ch for ch in raw if ord(ch) not in _SPINNER_RANGE and _is_printable(ch)
    )
    title = kept.strip()
    if len(title) < MIN_TAB_TITLE_LEN:
        return ""
    return title


def is_generic_osc_title(osc_title: str, base_label: str) -> bool:
    """Whether an OSC title is just the program's name relative to ``base_label``.

    True when either, lower-cased and trimmed, contains the other.
    """
    osc = osc_title.strip().lower()
    base = base_label.strip().lower()
    if not osc or not base:
        return False
    return base in osc or osc in base


def truncate_title(title: str) -> str:
    """Shorten a title longer than the tab limit, ending it with "..."."""
    if len(title) > MAX_TAB_TITLE_LEN:
        return title[: MAX_TAB_TITLE_LEN - 1] + "..."
    return title


def compute_tab_label(
    custom_title: str, base_label: str, instance_num: int, same_kind_count: int
) -> str:
    """The label shown for an agent tab.

    A custom title wins; otherwise the base label, numbered when more than
    one tab of the same agent kind is open.
    """
    if custom_title:
        return truncate_title(custom_title)
    if same_kind_count > 1:
        return f"{base_label} #{instance_num}"
    return base_label


class InputTitleTracker:
    """Follows keystrokes sent to an agent and derives a title from each submitted line."""

    def __init__(self) -> None:
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        """The line typed so far."""
        return "".join(self._buffer)

    def feed(self, data: bytes) -> str | None:
        """Process raw input bytes; return the title from the last submitted line, if any."""
        title: str | None = None
        for byte in data:
            if byte in _ENTER:
                if self._buffer:
                    derived = self._submit()
                    if derived:
                        title = derived
            elif byte == _BACKSPACE:
                if self._buffer:
                    self._buffer.pop()
            elif byte in _DISCARD:
                self._buffer.clear()
            elif byte == _DELETE_WORD:
                self._delete_word()
            elif 0x20 <= byte < 0x7F:
                self._buffer.append(chr(byte))
        return title

    def _submit(self) -> str:
        line = "".join(self._buffer).strip().lstrip("/")
        self._buffer.clear()
        title = sanitize_tab_title(line)
        return truncate_title(title) if title else ""

    def _delete_word(self) -> None:
        while self._buffer and self._buffer[-1] == " ":
            self._buffer.pop()
        while self._buffer and self._buffer[-1] != " ":
            self._buffer.pop()