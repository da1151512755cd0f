"""Stall session — the single entry point the API uses for reads and writes."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from expo_stalls.catalog.query import CategoryFilter, filter_stalls, find_stall

if TYPE_CHECKING:
    from collections.abc import Callable

    from expo_stalls.catalog.cache import SessionCache
    from expo_stalls.models.stall import StallRecord
    from expo_stalls.models.submission import ExpoFeedback, StallEdit, StallFeedback
    from expo_stalls.submissions.client import SubmissionClient, SubmissionOutcome

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StallSession:
    """Owns the merged-collection cache and the submission client.

    An accepted correction invalidates the cache so the next read re-fetches
    the edit log and re-merges. Feedback never touches the cache.
    """

    def __init__(
        self,
        cache: SessionCache,
        submissions: SubmissionClient,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._cache = cache
        self._submissions = submissions
        self._clock = clock

    @property
    def cache(self) -> SessionCache:
        return self._cache

    @property
    def demo_mode(self) -> bool:
        return self._submissions.demo_mode

    async def stalls(self) -> list[StallRecord] | None:
        """Return the merged collection, or None when the catalog is unavailable."""
        return await self._cache.get()

    async def search(
        self,
        query: str = "",
        category: CategoryFilter | str = CategoryFilter.ALL,
    ) -> list[StallRecord] | None:
        """Filter the merged collection. Returns None when the catalog is unavailable."""
        stalls = await self._cache.get()
        if stalls is None:
            return None
        return filter_stalls(stalls, query, category)

    async def get_stall(self, stall_id: int) -> StallRecord | None:
        """Look up one stall in the merged collection."""
        stalls = await self._cache.get()
        if stalls is None:
            return None
        return find_stall(stalls, stall_id)

    async def submit_stall_feedback(self, feedback: StallFeedback) -> SubmissionOutcome:
        outcome = await self._submissions.submit(feedback.log_name, feedback.to_values(self._clock()))
        logger.info("Stall feedback submitted — stall=%d outcome=%s", feedback.stall_id, outcome)
        return outcome

    async def submit_expo_feedback(self, feedback: ExpoFeedback) -> SubmissionOutcome:
        outcome = await self._submissions.submit(feedback.log_name, feedback.to_values(self._clock()))
        logger.info("Expo feedback submitted — outcome=%s", outcome)
        return outcome

    async def submit_stall_edit(self, edit: StallEdit) -> SubmissionOutcome:
        """Append a correction and, if accepted, drop the cached collection."""
        outcome = await self._submissions.submit(edit.log_name, edit.to_values(self._clock()))
        logger.info("Stall edit submitted — stall=%d outcome=%s", edit.stall_id, outcome)
        if outcome.accepted:
            self._cache.invalidate()
        return outcome
