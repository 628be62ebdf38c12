"""Enums shared across the ladder, transform and surface layers."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Which way a reindent moves each affected line along the ladder."""

    INDENT = "indent"
    OUTDENT = "outdent"
    NORMALIZE = "normalize"

    @property
    def delta(self) -> int:
        """Change in logical depth applied to every affected line."""
        if self is Direction.INDENT:
            return 1
        if self is Direction.OUTDENT:
            return -1
        return 0

    @classmethod
    def from_flag(cls, is_tab: bool) -> "Direction":
        """Map an editor Tab (True) / Shift+Tab (False) keypress."""
        return cls.INDENT if is_tab else cls.OUTDENT
