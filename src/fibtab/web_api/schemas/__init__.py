"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .reindent import (
    EditModel,
    LadderResponse,
    ReindentRequest,
    ReindentResponse,
    RungModel,
    SelectionModel,
    WidthRequest,
    WidthResponse,
)

__all__ = [
    "EditModel",
    "LadderResponse",
    "ReindentRequest",
    "ReindentResponse",
    "RungModel",
    "SelectionModel",
    "WidthRequest",
    "WidthResponse",
]
