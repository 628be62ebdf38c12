"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, ladder, reindent

__all__ = ["health", "ladder", "reindent"]
