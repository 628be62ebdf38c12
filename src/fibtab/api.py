"""
fibtab.api
==========

Programmatic entrypoints for reindenting files.

Goals:
  - No argparse / CLI dependencies
  - One unreadable file never aborts a batch; failures land on
    ``ReindentResult.errors``
  - JSON-friendly reports that match ``reindent_report.schema.json``

Usage::

    from fibtab.api import reindent_file, reindent_paths, check_paths
    from fibtab.model import Direction

    result = reindent_file(Path("app.py"), Direction.INDENT)
    results = reindent_paths([Path("src")], Direction.NORMALIZE, dry_run=True)
    report = build_report(results, command="normalize", dry_run=True)
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Iterable, Optional

from fibtab.contracts.load import validate_instance
from fibtab.core.config import ReindentConfig
from fibtab.core.discover import discover_files
from fibtab.model import Direction
from fibtab.model.edit import ReindentResult, Selection
from fibtab.transform import reindent_text

_logger = logging.getLogger(__name__)

REPORT_SCHEMA = "reindent_report.schema.json"
REPORT_SCHEMA_VERSION = "reindent_report_v1"


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF / CR terminators intact through the rewrite.
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def backup_path_for(path: Path) -> Path:
    return path.with_suffix(path.suffix + ".bak")


# ── single file ─────────────────────────────────────────────────────


def reindent_file(
    path: Path,
    direction: Direction,
    *,
    selections: Optional[Iterable[Selection]] = None,
    config: Optional[ReindentConfig] = None,
    dry_run: bool = False,
) -> ReindentResult:
    """Reindent *path* one ladder step in *direction*.

    The file is only rewritten when at least one line changes and
    *dry_run* is False. A ``.bak`` copy is made first when
    ``config.create_backups`` is set.
    """
    cfg = config or ReindentConfig()
    result = ReindentResult(path=path, direction=direction)

    try:
        text = _read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        result.errors.append(f"Error reading file: {e}")
        _logger.warning("Skipping %s: %s", path, e)
        return result

    new_text, edits = reindent_text(
        text,
        direction,
        selections,
        ladder=cfg.ladder,
        skip_blank_lines=cfg.skip_blank_lines,
    )
    result.edits = edits

    if not edits or dry_run:
        return result

    if cfg.create_backups:
        backup = backup_path_for(path)
        try:
            shutil.copy2(path, backup)
            result.backup_path = backup
        except OSError as e:
            result.errors.append(f"Error creating backup: {e}")
            _logger.warning("Not rewriting %s: backup failed: %s", path, e)
            return result

    try:
        _write_text(path, new_text)
    except OSError as e:
        result.errors.append(f"Error writing file: {e}")
        _logger.warning("Failed to write %s: %s", path, e)
        return result

    result.written = True
    _logger.info("%s %s: %d line(s)", direction.value, path, len(edits))
    return result


# ── many paths ──────────────────────────────────────────────────────


def reindent_paths(
    paths: Iterable[Path],
    direction: Direction,
    *,
    selections: Optional[Iterable[Selection]] = None,
    config: Optional[ReindentConfig] = None,
    dry_run: bool = False,
) -> list[ReindentResult]:
    """Reindent every file under *paths* (files and/or directories).

    Raises
    ------
    FileNotFoundError
        If any of *paths* does not exist.
    """
    cfg = config or ReindentConfig()
    files = discover_files(
        paths,
        include_exts=cfg.include_exts,
        exclude=cfg.exclude_dirs,
    )
    # Selections may be a one-shot iterator; every file needs its own pass.
    sel = list(selections) if selections is not None else None
    return [
        reindent_file(f, direction, selections=sel, config=cfg, dry_run=dry_run)
        for f in files
    ]


def check_paths(
    paths: Iterable[Path],
    *,
    config: Optional[ReindentConfig] = None,
) -> list[ReindentResult]:
    """Report lines whose indentation is off the ladder, without writing.

    Every returned edit is a line that ``normalize`` would change.
    """
    return reindent_paths(
        paths,
        Direction.NORMALIZE,
        config=config,
        dry_run=True,
    )


# ── reporting ───────────────────────────────────────────────────────


def build_report(
    results: Iterable[ReindentResult],
    *,
    command: str,
    dry_run: bool,
    multiplier: int,
) -> dict[str, Any]:
    """Assemble and validate the JSON report for a batch of results."""
    from fibtab import __version__

    results = list(results)
    report: dict[str, Any] = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "tool_version": __version__,
        "command": command,
        "dry_run": dry_run,
        "multiplier": multiplier,
        "files": [r.to_dict() for r in results],
        "summary": {
            "files_total": len(results),
            "files_changed": sum(1 for r in results if r.changed),
            "lines_changed": sum(len(r.edits) for r in results),
            "files_failed": sum(1 for r in results if not r.success),
        },
    }
    validate_instance(report, REPORT_SCHEMA)
    return report
