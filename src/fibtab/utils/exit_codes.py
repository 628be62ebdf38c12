"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — reindent applied, or check found every line on the ladder
  1   Violation — check found lines whose indentation is off the ladder
  2   Error — usage error, missing file, bad config, read/write failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
