"""Stall routes — browse, search and view the merged catalog."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Annotated, Any

from fastapi import APIRouter, HTTPException, Query, Request, status

from expo_stalls.catalog.query import CategoryFilter, filter_stalls

if TYPE_CHECKING:
    from expo_stalls.models.stall import StallRecord

router = APIRouter(prefix="/api/stalls", tags=["stalls"])
logger = logging.getLogger(__name__)

UNAVAILABLE_DETAIL = "Could not load stalls. Please refresh."


def stall_to_dict(stall: StallRecord) -> dict[str, Any]:
    """Serialize a stall with its wire (camelCase) field names and derived flags."""
    data = stall.model_dump(mode="json", by_alias=True)
    data["offersSamples"] = stall.offers_samples
    data["hasImage"] = stall.has_image
    data["credits"] = stall.credits
    return data


@router.get("")
async def list_stalls(
    request: Request,
    q: Annotated[str, Query(max_length=200)] = "",
    category: CategoryFilter = CategoryFilter.ALL,
) -> dict[str, Any]:
    """Return stalls matching the search text and dietary category."""
    started_at = time.monotonic()
    session = request.app.state.session
    stalls = await session.stalls()
    if stalls is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=UNAVAILABLE_DETAIL)

    matches = filter_stalls(stalls, q, category)
    logger.debug(
        "Stall search — q=%r category=%s showing=%d total=%d duration_ms=%.1f",
        q,
        category,
        len(matches),
        len(stalls),
        (time.monotonic() - started_at) * 1000,
    )
    return {
        "stalls": [stall_to_dict(stall) for stall in matches],
        "showing": len(matches),
        "total": len(stalls),
    }


@router.get("/{stall_id}")
async def stall_detail(request: Request, stall_id: int) -> dict[str, Any]:
    """Return one stall from the merged catalog."""
    session = request.app.state.session
    stalls = await session.stalls()
    if stalls is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=UNAVAILABLE_DETAIL)

    stall = await session.get_stall(stall_id)
    if stall is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Stall not found")
    return stall_to_dict(stall)
