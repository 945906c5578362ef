"""Shared constants, enumerations and small numeric helpers of the game."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Iterator, Tuple

PI = math.pi

BORDER_OF_NUMERIC = 1_000_000_000
JAMA_OOSUGI_NUM = 15
JAMA_MAX_ONCE = 20
HISS_SCORE = 5000  # score needed to trigger a special move

IMAX = BORDER_OF_NUMERIC
BLOCK_COLOR_NUM = 6

CORRECT_PAIR_MAX = 26

SC_EXTRA_OFF = "off"


class PuzzPlayer(IntEnum):
    """The four puzzle player slots."""

    P1_1 = 0
    P1_2 = 1
    P2_1 = 2
    P2_2 = 3


class PuzzPair(IntEnum):
    """The two sides of a match."""

    P1 = 0
    P2 = 1


class HetaChara(IntEnum):
    """Playable characters; NONE marks an empty slot."""

    NONE = 0
    I = 1
    E = 2
    S = 3
    C = 4
    G = 5
    R = 6
    J = 7
    P = 8
    F = 9
    A = 10
    U = 11


class HetaBasho(IntEnum):
    """Battle stages."""

    SUNFLOWER = 0
    FLOWER = 1
    SEA = 2
    LAKE = 3
    DESERT = 4
    FOREST = 5
    JINJA = 6
    NIGHT = 7


class Ending(IntEnum):
    """Story endings."""

    GI = 0
    GJ = 1
    GP = 2
    IJ = 3
    IP = 4
    PJ = 5


def clamp(value, minval, maxval):
    """Limit value to the range [minval, maxval]; minval wins if they cross."""
    value = min(value, maxval)
    return max(value, minval)


def nearize(value, target, scale):
    """Move value towards target, keeping the fraction `scale` of the distance."""
    return (value - target) * scale + target


def adjustize(value, target, margin):
    """Snap value onto target when it lies closer than margin."""
    offset = value - target
    if abs(offset) < margin:
        offset = 0.0
    return offset + target


def nearize_adj(value, target, scale, margin):
    """Approach target and snap onto it once close enough."""
    return adjustize(nearize(value, target, scale), target, margin)


def frame_loop(count: int) -> Iterator[Tuple[int, float]]:
    """Yield (frame index, progress) for frames 0..count inclusive."""
    for index in range(count + 1):
        yield index, index / count


def near_than(x1, y1, x2, y2, distance) -> bool:
    """True when the two points are strictly closer than distance."""
    return (x1 - x2) ** 2 + (y1 - y2) ** 2 < distance ** 2


def is_inside(x, y, x1, y1, x2, y2) -> bool:
    """True when (x, y) lies in the closed rectangle (x1, y1)-(x2, y2)."""
    return x1 <= x <= x2 and y1 <= y <= y2


def count_down(value):
    """Step value one unit towards zero."""
    if value < 0:
        return value + 1
    if value > 0:
        return value - 1
    return value


def inc_denom(value, denom):
    """Add 1/denom to value (a negative denom subtracts)."""
    return value + 1.0 / denom