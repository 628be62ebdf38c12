"""Line transform — plan and apply ladder reindents over a document.

Each affected line is handled independently:

1. measure its leading whitespace (spaces and tabs, counted in characters)
2. floor-match that width to a logical depth
3. move the depth by the direction's delta, never below 0
4. replace the whole leading run with the new depth's width in spaces

Usage::

    from fibtab.transform import reindent_text
    from fibtab.model import Direction

    text, edits = reindent_text("  x = 1\\n", Direction.INDENT)
    # text == "    x = 1\\n"
"""

from __future__ import annotations

import io
import logging
import re
from typing import Iterable, Sequence

from fibtab.ladder import DEFAULT_LADDER, Ladder
from fibtab.model import Direction
from fibtab.model.edit import LineEdit, Selection

_logger = logging.getLogger(__name__)

_LEADING_WS = re.compile(r"[ \t]*")


def leading_whitespace(line: str) -> str:
    """Return the run of spaces/tabs at the start of *line*."""
    return _LEADING_WS.match(line).group(0)


def split_lines(text: str) -> list[str]:
    """Split *text* on \\n, \\r\\n and \\r only, keeping the terminators.

    Form feeds, vertical tabs and Unicode line separators stay inside
    the line they appear in, so indices match editor line numbers.
    """
    return io.StringIO(text, newline="").readlines()


def _is_blank(line: str) -> bool:
    return not line.strip()


def selected_lines(
    line_count: int,
    selections: Iterable[Selection] | None = None,
) -> list[int]:
    """Sorted, de-duplicated line indices covered by *selections*.

    ``None`` selects the whole document. Indices past the end are dropped.
    """
    if selections is None:
        return list(range(line_count))
    covered: set[int] = set()
    for sel in selections:
        covered.update(i for i in sel.lines() if i < line_count)
    return sorted(covered)


def plan_edits(
    lines: Sequence[str],
    direction: Direction,
    selections: Iterable[Selection] | None = None,
    *,
    ladder: Ladder = DEFAULT_LADDER,
    skip_blank_lines: bool = False,
) -> list[LineEdit]:
    """Plan the whitespace replacement for every selected line.

    Lines whose indentation would come out unchanged produce no edit.
    """
    edits: list[LineEdit] = []
    for index in selected_lines(len(lines), selections):
        line = lines[index]
        if skip_blank_lines and _is_blank(line):
            continue

        old_indent = leading_whitespace(line)
        old_depth = ladder.depth(len(old_indent))
        new_depth = max(0, old_depth + direction.delta)
        new_indent = " " * ladder.width(new_depth)

        if new_indent == old_indent:
            continue

        edit = LineEdit(
            index=index,
            old_indent=old_indent,
            new_indent=new_indent,
            old_depth=old_depth,
            new_depth=new_depth,
        )
        _logger.debug("%s %s", direction.value, edit.describe())
        edits.append(edit)
    return edits


def apply_edits(lines: Sequence[str], edits: Iterable[LineEdit]) -> list[str]:
    """Return a copy of *lines* with *edits* applied.

    Raises ``ValueError`` if a line no longer starts with the indentation
    the edit was planned against.
    """
    out = list(lines)
    for edit in edits:
        line = out[edit.index]
        if leading_whitespace(line) != edit.old_indent:
            raise ValueError(
                f"line {edit.index + 1} changed since the edit was planned"
            )
        out[edit.index] = edit.new_indent + line[len(edit.old_indent):]
    return out


def reindent_text(
    text: str,
    direction: Direction,
    selections: Iterable[Selection] | None = None,
    *,
    ladder: Ladder = DEFAULT_LADDER,
    skip_blank_lines: bool = False,
) -> tuple[str, list[LineEdit]]:
    """Reindent *text* one ladder step in *direction*.

    Line terminators are preserved as-is. Returns the new text and the
    edits that produced it.
    """
    lines = split_lines(text)
    edits = plan_edits(
        lines,
        direction,
        selections,
        ladder=ladder,
        skip_blank_lines=skip_blank_lines,
    )
    if not edits:
        return text, []
    return "".join(apply_edits(lines, edits)), edits
