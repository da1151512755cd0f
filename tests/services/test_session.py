"""Tests for StallSession reads, submissions and cache invalidation."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from expo_stalls.catalog.cache import SessionCache
from expo_stalls.models.submission import ExpoFeedback, LogName, StallEdit, StallFeedback
from expo_stalls.services.session import StallSession
from expo_stalls.submissions.client import SubmissionOutcome

NOW = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
STAMP = "2026-03-01T09:30:00.000Z"


@pytest.fixture
def loader(make_stall):
    mock = AsyncMock()
    mock.load_collection.return_value = [
        make_stall(1, name="Curry House", dietary="non-veg"),
        make_stall(2, name="Bakery", dietary="veg"),
    ]
    return mock


@pytest.fixture
def submissions():
    mock = MagicMock()
    mock.demo_mode = False
    mock.submit = AsyncMock(return_value=SubmissionOutcome.UNCONFIRMED)
    return mock


@pytest.fixture
def session(loader, submissions) -> StallSession:
    return StallSession(SessionCache(loader), submissions, clock=lambda: NOW)


async def test_search_filters_merged_collection(session) -> None:
    """Verify search applies query and category to the cached collection."""
    assert [s.id for s in await session.search("cur", "all")] == [1]
    assert [s.id for s in await session.search("", "veg")] == [2]


async def test_reads_share_one_load(session, loader) -> None:
    """Verify repeated reads hit the cache."""
    await session.stalls()
    await session.search("b")
    await session.get_stall(2)

    assert loader.load_collection.await_count == 1


async def test_get_stall_returns_none_for_unknown_id(session) -> None:
    """Verify an unknown id is reported as missing."""
    assert (await session.get_stall(2)).name == "Bakery"
    assert await session.get_stall(99) is None


async def test_reads_are_none_when_unavailable(session, loader) -> None:
    """Verify an unavailable catalog surfaces as None on every read."""
    loader.load_collection.return_value = None

    assert await session.stalls() is None
    assert await session.search("cur") is None
    assert await session.get_stall(1) is None


async def test_stall_feedback_is_sent_with_timestamp(session, submissions) -> None:
    """Verify feedback rows are stamped with the session clock."""
    feedback = StallFeedback(stall_id=1, stall_name="Curry House", rating=5, enjoyed="All of it")

    outcome = await session.submit_stall_feedback(feedback)

    assert outcome is SubmissionOutcome.UNCONFIRMED
    submissions.submit.assert_awaited_once_with(
        LogName.STALL_FEEDBACK, [STAMP, 1, "Curry House", "5", "All of it", ""]
    )


async def test_feedback_never_invalidates_cache(session) -> None:
    """Verify neither kind of feedback drops the cached collection."""
    await session.stalls()

    await session.submit_stall_feedback(StallFeedback(stall_id=1, stall_name="Curry House", rating=3))
    await session.submit_expo_feedback(ExpoFeedback(rating=4))

    assert session.cache.is_populated is True


async def test_accepted_edit_invalidates_cache(session, submissions, loader) -> None:
    """Verify the next read after an accepted correction reloads."""
    await session.stalls()

    outcome = await session.submit_stall_edit(StallEdit(stall_id=1, name="Curry Palace"))
    assert outcome.accepted is True
    assert session.cache.is_populated is False

    await session.stalls()
    assert loader.load_collection.await_count == 2
    submissions.submit.assert_awaited_once_with(
        LogName.STALL_EDITS, [STAMP, 1, "Curry Palace", "", "", "", ""]
    )


async def test_demo_edit_invalidates_cache(session, submissions) -> None:
    """Verify a demo-mode delivery is treated like any accepted edit."""
    submissions.submit.return_value = SubmissionOutcome.DELIVERED
    await session.stalls()

    await session.submit_stall_edit(StallEdit(stall_id=2, dish="Scones"))

    assert session.cache.is_populated is False


async def test_failed_edit_keeps_cache(session, submissions) -> None:
    """Verify a dispatch failure leaves the cached collection in place."""
    submissions.submit.return_value = SubmissionOutcome.DISPATCH_FAILED
    await session.stalls()

    outcome = await session.submit_stall_edit(StallEdit(stall_id=1, name="Curry Palace"))

    assert outcome.accepted is False
    assert session.cache.is_populated is True


def test_demo_mode_follows_submission_client(session, submissions) -> None:
    """Verify demo mode is reported from the submission client."""
    assert session.demo_mode is False
    submissions.demo_mode = True
    assert session.demo_mode is True
