"""Shared utilities for fibtab."""

from fibtab.utils.exit_codes import ExitCode
from fibtab.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
