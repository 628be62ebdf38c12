"""Line edits and per-file outcomes produced by a reindent."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from . import Direction


@dataclass(frozen=True, slots=True)
class Selection:
    """Inclusive, 0-based line range, as an editor reports a selection."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 0 or self.end_line < 0:
            raise ValueError(
                f"selection lines must be >= 0, got {self.start_line}..{self.end_line}"
            )

    def lines(self) -> Iterator[int]:
        lo, hi = sorted((self.start_line, self.end_line))
        return iter(range(lo, hi + 1))


@dataclass(frozen=True, slots=True)
class LineEdit:
    """Replacement of one line's leading whitespace.

    ``index`` is 0-based; ``to_dict`` reports the 1-based ``line`` number.
    """

    index: int
    old_indent: str
    new_indent: str
    old_depth: int
    new_depth: int

    @property
    def old_width(self) -> int:
        return len(self.old_indent)

    @property
    def new_width(self) -> int:
        return len(self.new_indent)

    def describe(self) -> str:
        return (
            f"line {self.index + 1}: width {self.old_width} -> {self.new_width}"
            f" (depth {self.old_depth} -> {self.new_depth})"
        )

    def to_dict(self) -> dict:
        return {
            "line": self.index + 1,
            "old_width": self.old_width,
            "new_width": self.new_width,
            "old_depth": self.old_depth,
            "new_depth": self.new_depth,
        }


@dataclass
class ReindentResult:
    """Result of reindenting one file (or stdin)."""

    path: Path
    direction: Direction
    edits: list[LineEdit] = field(default_factory=list)
    written: bool = False
    backup_path: Path | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    @property
    def changed(self) -> bool:
        return bool(self.edits)

    def to_dict(self) -> dict:
        d: dict = {
            "path": self.path.as_posix(),
            "direction": self.direction.value,
            "lines_changed": len(self.edits),
            "written": self.written,
            "edits": [e.to_dict() for e in self.edits],
            "errors": list(self.errors),
        }
        if self.backup_path is not None:
            d["backup_path"] = self.backup_path.as_posix()
        return d
