"""Fibonacci indentation ladder — logical depth <-> physical width.

The ladder assigns a column count to every logical depth::

    depth   0  1  2  3  4   5   6   7
    width   0  2  4  6  10  16  26  42

Depth ``d >= 1`` maps to ``F(d + 1) * multiplier`` where ``F`` is the
standard Fibonacci sequence. Starting at ``F(2)`` skips the repeated ``1``
so the ladder is strictly increasing.

The inverse is a *floor match*: an arbitrary width resolves to the depth of
the largest rung that does not exceed it, so misaligned indentation snaps
down rather than to the nearest rung.

Usage::

    from fibtab.ladder import depth_to_width, width_to_depth, next_width

    depth_to_width(4)                      # 10
    width_to_depth(7)                      # 3
    next_width(7, Direction.INDENT)        # 10
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from fibtab.model import Direction

DEFAULT_MULTIPLIER = 2


def sequence_value(n: int) -> int:
    """Return the *n*-th Fibonacci number (0, 1, 1, 2, 3, 5, 8, ...)."""
    if n < 0:
        raise ValueError(f"sequence index must be >= 0, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


@dataclass(frozen=True, slots=True)
class Ladder:
    """The width assigned to each logical depth, scaled by *multiplier*."""

    multiplier: int = DEFAULT_MULTIPLIER

    def __post_init__(self) -> None:
        if self.multiplier < 1:
            raise ValueError(f"ladder multiplier must be >= 1, got {self.multiplier}")

    def width(self, depth: int) -> int:
        """Physical width (space count) for a logical *depth*."""
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        if depth == 0:
            return 0
        return sequence_value(depth + 1) * self.multiplier

    def depth(self, width: int) -> int:
        """Deepest depth whose width does not exceed *width* (floor match).

        Walks the ladder upward until the next rung would overshoot, so
        there is no upper bound on the depth that can be recovered.
        """
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        depth = 0
        # nxt is F(depth + 2), the Fibonacci factor of the next rung.
        cur, nxt = 1, 1
        while nxt * self.multiplier <= width:
            depth += 1
            cur, nxt = nxt, cur + nxt
        return depth

    def next_width(self, width: int, direction: Direction) -> int:
        """Width a line of *width* moves to when reindented in *direction*."""
        new_depth = max(0, self.depth(width) + direction.delta)
        return self.width(new_depth)

    def rungs(self, max_depth: int) -> Iterator[tuple[int, int]]:
        """Yield ``(depth, width)`` for depths ``0..max_depth`` inclusive."""
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        yield 0, 0
        cur, nxt = 1, 1
        for depth in range(1, max_depth + 1):
            yield depth, nxt * self.multiplier
            cur, nxt = nxt, cur + nxt

    def is_rung(self, width: int) -> bool:
        """True when *width* sits exactly on the ladder."""
        return self.width(self.depth(width)) == width


DEFAULT_LADDER = Ladder()


def depth_to_width(depth: int) -> int:
    return DEFAULT_LADDER.width(depth)


def width_to_depth(width: int) -> int:
    return DEFAULT_LADDER.depth(width)


def next_width(width: int, direction: Direction | bool) -> int:
    """Compute the new width for *width* moved one step in *direction*.

    A bare bool follows the editor convention: True for Tab (indent),
    False for Shift+Tab (outdent).
    """
    if isinstance(direction, bool):
        direction = Direction.from_flag(direction)
    return DEFAULT_LADDER.next_width(width, direction)
