"""
Reindent Router
===============
Apply a ladder reindent to submitted text.
"""
from fastapi import APIRouter, HTTPException

from fibtab.ladder import Ladder
from fibtab.model.edit import Selection
from fibtab.transform import reindent_text
from fibtab.web_api.config import settings
from fibtab.web_api.schemas.reindent import (
    EditModel,
    ReindentRequest,
    ReindentResponse,
)

router = APIRouter()


@router.post("/", response_model=ReindentResponse)
async def reindent(request: ReindentRequest):
    """
    Reindent a document one ladder step.

    - **text**: the document
    - **direction**: indent, outdent or normalize
    - **selections**: optional 0-based inclusive line ranges
    """
    if len(request.text) > settings.MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"text exceeds {settings.MAX_TEXT_CHARS} characters",
        )

    selections = None
    if request.selections is not None:
        selections = [
            Selection(start_line=s.start_line, end_line=s.end_line)
            for s in request.selections
        ]

    try:
        text, edits = reindent_text(
            request.text,
            request.direction,
            selections,
            ladder=Ladder(multiplier=request.multiplier),
            skip_blank_lines=request.skip_blank_lines,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReindentResponse(
        text=text,
        changed=bool(edits),
        edits=[EditModel(**e.to_dict()) for e in edits],
    )
