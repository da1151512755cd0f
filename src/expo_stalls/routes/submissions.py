"""Submission routes — stall feedback, expo feedback and stall corrections."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from expo_stalls.models.stall import StallRecord
from expo_stalls.models.submission import ExpoFeedback, StallEdit, StallFeedback
from expo_stalls.routes.stalls import UNAVAILABLE_DETAIL
from expo_stalls.submissions.client import SubmissionOutcome

router = APIRouter(prefix="/api", tags=["submissions"])


class StallFeedbackBody(BaseModel):
    rating: int = Field(ge=1, le=5)
    enjoyed: str = ""
    suggestions: str = ""


class StallEditBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    dish: str = ""
    short_description: str = Field(default="", alias="shortDescription")
    full_description: str = Field(default="", alias="fullDescription")
    ingredients: str = ""


def _outcome_response(outcome: SubmissionOutcome) -> JSONResponse:
    status_code = status.HTTP_202_ACCEPTED if outcome.accepted else status.HTTP_502_BAD_GATEWAY
    return JSONResponse(
        {"outcome": outcome.value, "accepted": outcome.accepted},
        status_code=status_code,
    )


async def _require_stall(request: Request, stall_id: int) -> StallRecord:
    session = request.app.state.session
    if await session.stalls() is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=UNAVAILABLE_DETAIL)
    stall = await session.get_stall(stall_id)
    if stall is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Stall not found")
    return stall


@router.post("/stalls/{stall_id}/feedback")
async def submit_stall_feedback(request: Request, stall_id: int, body: StallFeedbackBody) -> JSONResponse:
    """Rate a stall."""
    stall = await _require_stall(request, stall_id)
    feedback = StallFeedback(
        stall_id=stall.id,
        stall_name=stall.name,
        rating=body.rating,
        enjoyed=body.enjoyed,
        suggestions=body.suggestions,
    )
    outcome = await request.app.state.session.submit_stall_feedback(feedback)
    return _outcome_response(outcome)


@router.post("/stalls/{stall_id}/edits")
async def submit_stall_edit(request: Request, stall_id: int, body: StallEditBody) -> JSONResponse:
    """Correct a stall's details. Accepted edits show up on the next read."""
    await _require_stall(request, stall_id)
    edit = StallEdit(stall_id=stall_id, **body.model_dump())
    outcome = await request.app.state.session.submit_stall_edit(edit)
    return _outcome_response(outcome)


@router.post("/feedback")
async def submit_expo_feedback(request: Request, body: ExpoFeedback) -> JSONResponse:
    """Rate the expo as a whole."""
    outcome = await request.app.state.session.submit_expo_feedback(body)
    return _outcome_response(outcome)
