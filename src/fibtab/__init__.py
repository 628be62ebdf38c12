"""fibtab — Fibonacci indentation ladder for indent / outdent."""

__all__ = [
    "__version__",
    "Direction",
    "Ladder",
    "DEFAULT_LADDER",
    "sequence_value",
    "depth_to_width",
    "width_to_depth",
    "next_width",
    "reindent_text",
    "reindent_file",
    "reindent_paths",
    "check_paths",
]
__version__ = "0.1.0"

from fibtab.model import Direction  # noqa: E402, F401
from fibtab.ladder import (  # noqa: E402, F401
    DEFAULT_LADDER,
    Ladder,
    depth_to_width,
    next_width,
    sequence_value,
    width_to_depth,
)
from fibtab.transform import reindent_text  # noqa: E402, F401

# Programmatic file entrypoints.
from fibtab.api import (  # noqa: E402, F401
    check_paths,
    reindent_file,
    reindent_paths,
)
