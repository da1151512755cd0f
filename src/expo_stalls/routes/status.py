"""Health route — liveness and session state."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["status"])


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    session = request.app.state.session
    return {
        "ok": True,
        "demo_mode": session.demo_mode,
        "catalog_cached": session.cache.is_populated,
    }
