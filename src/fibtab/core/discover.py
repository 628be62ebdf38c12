"""File discovery — expand CLI paths into the files to reindent."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

_logger = logging.getLogger(__name__)

# Default exclusion prefixes (relative to the walked root).
_DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "dist",
        "build",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
    }
)

_DEFAULT_IGNORE_FILES = frozenset({".DS_Store"})


def iter_tree(
    root: Path,
    *,
    include_exts: Iterable[str] = (".py",),
    exclude: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield files under *root* whose suffix is in *include_exts*.

    Directories named in *exclude* (merged with built-in defaults) are
    skipped at any depth. Symlinks are not followed.
    """
    exts = frozenset(e.lower() for e in include_exts)
    skip = _DEFAULT_EXCLUDES | frozenset(exclude)
    for p in root.rglob("*"):
        try:
            if p.is_symlink() or not p.is_file():
                continue
            if p.name in _DEFAULT_IGNORE_FILES:
                continue
            if p.suffix.lower() not in exts:
                continue
            if any(part in skip for part in p.relative_to(root).parts[:-1]):
                continue
        except OSError:
            continue
        yield p


def discover_files(
    paths: Iterable[Path],
    *,
    include_exts: Iterable[str] = (".py",),
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Expand *paths* into a sorted, de-duplicated list of files.

    Explicit file paths are always kept regardless of extension; directories
    are walked with :func:`iter_tree`. Missing paths raise
    ``FileNotFoundError``.
    """
    include_exts = tuple(include_exts)
    exclude = tuple(exclude)
    results: set[Path] = set()
    for path in paths:
        if path.is_file():
            results.add(path)
        elif path.is_dir():
            found = list(iter_tree(path, include_exts=include_exts, exclude=exclude))
            _logger.debug("Discovered %d file(s) under %s", len(found), path)
            results.update(found)
        else:
            raise FileNotFoundError(f"path does not exist: {path}")
    return sorted(results)
