"""
Reindent Schemas
================
Request and response models for ladder and reindent endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from fibtab.ladder import DEFAULT_MULTIPLIER
from fibtab.model import Direction


class SelectionModel(BaseModel):
    """Inclusive 0-based line range"""

    start_line: int = Field(..., ge=0)
    end_line: int = Field(..., ge=0)


class RungModel(BaseModel):
    depth: int
    width: int


class LadderResponse(BaseModel):
    multiplier: int
    rungs: List[RungModel]


class WidthRequest(BaseModel):
    """Request to move one indentation width a rung up or down"""

    width: int = Field(..., ge=0, description="Existing leading whitespace width")
    direction: Direction = Field(default=Direction.INDENT)
    multiplier: int = Field(default=DEFAULT_MULTIPLIER, ge=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"width": 7, "direction": "indent", "multiplier": 2}
        }
    )


class WidthResponse(BaseModel):
    direction: Direction
    old_width: int
    old_depth: int
    new_depth: int
    new_width: int


class ReindentRequest(BaseModel):
    """Request to reindent a document"""

    text: str = Field(..., description="Document text")
    direction: Direction = Field(default=Direction.INDENT)
    selections: Optional[List[SelectionModel]] = Field(
        default=None,
        description="Line ranges to affect; omit for the whole document",
    )
    multiplier: int = Field(default=DEFAULT_MULTIPLIER, ge=1)
    skip_blank_lines: bool = Field(default=False)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "def f():\n  return 1\n",
                "direction": "indent",
                "selections": [{"start_line": 1, "end_line": 1}],
            }
        }
    )


class EditModel(BaseModel):
    line: int = Field(..., description="1-based line number")
    old_width: int
    new_width: int
    old_depth: int
    new_depth: int


class ReindentResponse(BaseModel):
    text: str
    changed: bool
    edits: List[EditModel] = Field(default_factory=list)
