"""Text menus and the single-line input editor used by the battle screens."""

from __future__ import annotations

import re
import string
from typing import Iterable, List, Optional, Sequence, Tuple

from hetapuz.defines import clamp
from hetapuz.tools import line_to_domain_len

ITEM_MAX = 50
ROW_HEIGHT = 16
HEADER_ROWS = 3

BOX_PLAIN = "□"
BOX_SELECTED = "■"
BOX_HOVER = "◇"
BOX_HOVER_SELECTED = "◆"

CURSOR_BLINK_FRAMES = 20

INPUT_CHARS = frozenset(string.ascii_uppercase + string.digits + ".")

_ATOI = re.compile(r"\s*([+-]?\d+)")


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _atoi(text: str) -> int:
    """Leading integer of text, or 0 when there is none."""
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


class Menu:
    """A titled list of items with a current selection.

    The last item is the cancel ("back") entry.
    """

    def __init__(self, title: str, items: Iterable[str], compact: bool = False):
        if not title:
            raise ValueError("menu needs a title")
        items = tuple(items)
        if not items:
            raise ValueError("menu needs at least one item")
        if len(items) > ITEM_MAX:
            raise ValueError(f"too many menu items: {len(items)} > {ITEM_MAX}")
        self.title = title
        self.items: Tuple[str, ...] = items
        self.compact = bool(compact)
        self._current = 0

    @property
    def current(self) -> int:
        """Index of the selected item."""
        return self._current

    @current.setter
    def current(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"menu index out of range: {index}")
        self._current = index

    @property
    def cancel_index(self) -> int:
        """Index of the last item, the one cancelling the menu."""
        return len(self.items) - 1

    def hover_index(self, mouse_y: int) -> Optional[int]:
        """Item under the mouse at height mouse_y, or None."""
        index = _trunc_div(mouse_y, ROW_HEIGHT) - HEADER_ROWS
        if not self.compact:
            index = _trunc_div(index, 2)
        if 0 <= index < len(self.items):
            return index
        return None

    def render(self, hover: Optional[int] = None) -> List[str]:
        """Screen rows of the menu, with the given item shown as hovered."""
        rows = ["", f"　**** {self.title} ****", ""]
        for index, item in enumerate(self.items):
            selected = index == self._current
            if index == hover:
                box = BOX_HOVER_SELECTED if selected else BOX_HOVER
            else:
                box = BOX_SELECTED if selected else BOX_PLAIN
            rows.append(f"　{box}　{item}")
            if not self.compact:
                rows.append("")
        return rows

    def move(self, delta: int) -> int:
        """Move the selection by delta, stopping at either end."""
        self._current = clamp(self._current + delta, 0, self.cancel_index)
        return self._current

    def cancel(self) -> bool:
        """Jump to the cancel item; True when it was already selected."""
        if self._current == self.cancel_index:
            return True
        self._current = self.cancel_index
        return False

    def select_random(self, rng) -> int:
        """Select an item at random using rng.rndbnd."""
        self._current = rng.rndbnd(0, self.cancel_index)
        return self._current


class LineEditor:
    """Editing state of a short line typed key by key."""

    def __init__(self, initial: str, lenmax: int, default: str):
        if lenmax < 0:
            raise ValueError("lenmax must not be negative")
        self.lenmax = lenmax
        self.default = default
        self.text = "" if initial == default else initial

    def type_char(self, char: str) -> bool:
        """Append a key's character; False when the line is already full."""
        if len(char) != 1 or char not in INPUT_CHARS:
            raise ValueError(f"character cannot be typed: {char!r}")
        if len(self.text) >= self.lenmax:
            return False
        self.text += char
        return True

    def paste(self, text: Optional[str]) -> None:
        """Replace the line with pasted text, sanitised and truncated."""
        if text:
            self.text = line_to_domain_len(text, self.lenmax)

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self.text = self.text[:-1]

    def clear(self) -> None:
        """Empty the line."""
        self.text = ""

    def render(self, frame: int) -> str:
        """The input row with a blinking cursor for the given frame."""
        cursor = "_" if (frame // CURSOR_BLINK_FRAMES) & 1 else " "
        return f"　> {self.text}{cursor}"

    def result(self) -> str:
        """The entered line, or the default when nothing was entered."""
        return self.text or self.default


def parse_value(text: str, minval: int, maxval: int, default: int) -> int:
    """Leading integer of text, or default when it lies outside [minval, maxval]."""
    value = _atoi(text)
    if value < minval or maxval < value:
        return default
    return value


def parse_ip(text: str, default: Sequence[int]) -> Tuple[int, int, int, int]:
    """Parse a dotted IPv4 address leniently.

    Empty parts are skipped, each part is clamped to 0..255 and missing
    parts are 0; an all-zero result yields default.
    """
    parts = [part for part in text.split(".") if part][:4]
    octets = [clamp(_atoi(part), 0, 255) for part in parts]
    octets.extend([0] * (4 - len(octets)))
    if not any(octets):
        return tuple(default)  # type: ignore[return-value]
    return tuple(octets)  # type: ignore[return-value]