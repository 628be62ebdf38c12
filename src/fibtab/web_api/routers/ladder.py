"""
Ladder Router
=============
Read-only lookups on the indentation ladder.
"""
from fastapi import APIRouter, HTTPException, Query

from fibtab.ladder import DEFAULT_MULTIPLIER, Ladder
from fibtab.web_api.config import settings
from fibtab.web_api.schemas.reindent import (
    LadderResponse,
    RungModel,
    WidthRequest,
    WidthResponse,
)

router = APIRouter()


@router.get("/ladder", response_model=LadderResponse)
async def get_ladder(
    depth: int = Query(default=10, ge=0),
    multiplier: int = Query(default=DEFAULT_MULTIPLIER, ge=1),
):
    """
    List the ladder rungs from depth 0 up to **depth**.
    """
    if depth > settings.MAX_LADDER_DEPTH:
        raise HTTPException(
            status_code=400,
            detail=f"depth must be <= {settings.MAX_LADDER_DEPTH}",
        )
    ladder = Ladder(multiplier=multiplier)
    return LadderResponse(
        multiplier=multiplier,
        rungs=[RungModel(depth=d, width=w) for d, w in ladder.rungs(depth)],
    )


@router.post("/width", response_model=WidthResponse)
async def compute_width(request: WidthRequest):
    """
    Compute the width an existing indentation moves to.

    - **width**: current leading whitespace width
    - **direction**: indent, outdent or normalize
    """
    ladder = Ladder(multiplier=request.multiplier)
    old_depth = ladder.depth(request.width)
    new_width = ladder.next_width(request.width, request.direction)
    return WidthResponse(
        direction=request.direction,
        old_width=request.width,
        old_depth=old_depth,
        new_depth=ladder.depth(new_width),
        new_width=new_width,
    )
