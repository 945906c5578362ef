"""General helpers: seeded random numbers, text screen, line reading and formatting."""

from __future__ import annotations

import random
import time
from typing import List, MutableSequence, Optional, TextIO

from hetapuz.defines import BORDER_OF_NUMERIC

LINE_LENMAX = 1024
MYLINE_MAX = 40
LINE_HEIGHT = 16

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_FALLBACK_CTIME = "Sun Jan 00 00:00:00 0000"


class GameRandom:
    """Deterministic random source shared by both sides of a networked match."""

    WARMUP = 1_000_000

    def __init__(self, seed):
        self._rng = random.Random()
        self.reseed(seed)

    def reseed(self, seed) -> None:
        """Restart the sequence from seed, discarding the first draws."""
        self._rng.seed(seed)
        draw = self._rng.getrandbits
        for _ in range(self.WARMUP):
            draw(30)

    def get(self, maxval: int) -> int:
        """Return an integer in [0, maxval]."""
        if maxval < 0 or BORDER_OF_NUMERIC < maxval:
            raise ValueError(f"maxval out of range: {maxval}")
        return self._rng.randint(0, maxval)

    def krnd(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self.get(BORDER_OF_NUMERIC - 1) * (1.0 / BORDER_OF_NUMERIC)

    def rnd(self) -> float:
        """Return a float in [0.0, 1.0]."""
        return self.get(BORDER_OF_NUMERIC) * (1.0 / BORDER_OF_NUMERIC)

    def rndpm(self) -> float:
        """Return a float in [-1.0, 1.0]."""
        return self.rnd() * 2.0 - 1.0

    def rndbnd(self, minval: int, maxval: int) -> int:
        """Return an integer in [minval, maxval]."""
        return minval + self.get(maxval - minval)

    def rndp1m1(self) -> int:
        """Return -1 or 1."""
        return -1 if self.rnd() < 0.5 else 1

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle items in place; the sequence must not be empty."""
        if len(items) < 1:
            raise ValueError("cannot shuffle an empty sequence")
        last = len(items) - 1
        for i in range(last):
            j = self.rndbnd(i, last)
            if i < j:
                items[i], items[j] = items[j], items[i]


class TextScreen:
    """A fixed number of text rows filled top to bottom."""

    def __init__(self):
        self._rows: List[Optional[str]] = [None] * MYLINE_MAX

    def cls(self) -> None:
        """Clear every row."""
        self._rows = [None] * MYLINE_MAX

    def print(self, line: str) -> None:
        """Put line in the first free row; dropped when the screen is full."""
        for index, row in enumerate(self._rows):
            if row is None:
                self._rows[index] = line
                return

    def lines(self) -> List[str]:
        """The rows printed so far, top to bottom."""
        return [row for row in self._rows if row is not None]


def read_line(stream: TextIO) -> str:
    """Read one line ending in LF or CRLF; a lone CR is an error.

    At most LINE_LENMAX characters are returned; an empty string is
    returned at end of stream.
    """
    chars: List[str] = []
    while len(chars) < LINE_LENMAX:
        ch = stream.read(1)
        if not ch:
            break
        if ch == "\r":
            if stream.read(1) != "\n":
                raise ValueError("CR not followed by LF")
            break
        if ch == "\n":
            break
        chars.append(ch)
    return "".join(chars)


def j_stamp(timestamp) -> str:
    """Format a timestamp as 'YYYY/MM/DD hh:mm:ss' from the local ctime string."""
    try:
        stamp = time.ctime(timestamp)
    except (OverflowError, ValueError, OSError):
        stamp = _FALLBACK_CTIME
    try:
        month = _MONTHS.index(stamp[4:7]) + 1
    except ValueError:
        raise ValueError(f"unexpected time string: {stamp!r}") from None
    return f"{stamp[20:24]}/{month:02d}/{stamp[8:19]}"


def zen_int(value: int) -> str:
    """Render an integer with full-width digits and a full-width minus."""
    out = []
    for ch in str(int(value)):
        if ch == "-":
            out.append("−")
        else:
            out.append(chr(ord("０") + ord(ch) - ord("0")))
    return "".join(out)


def _is_domain_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == ".")


def line_to_domain(line: str) -> str:
    """Replace every character other than ASCII letters, digits and '.' with '-'."""
    return "".join(ch if _is_domain_char(ch) else "-" for ch in line)


def line_to_domain_len(line: str, lenmax: int) -> str:
    """Truncate line to lenmax characters, then apply line_to_domain."""
    return line_to_domain(line[:lenmax])


def log_write(path, line: str, value: int) -> None:
    """Append 'line: value' to the log file; failures are ignored."""
    try:
        with open(path, "a", encoding="utf-8") as fp:
            fp.write(f"{line}: {value}\n")
    except OSError:
        pass