"""Fixtures for calling route handlers directly."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def session():
    mock = MagicMock()
    mock.demo_mode = True
    mock.stalls = AsyncMock(return_value=[])
    mock.search = AsyncMock(return_value=[])
    mock.get_stall = AsyncMock(return_value=None)
    mock.submit_stall_feedback = AsyncMock()
    mock.submit_stall_edit = AsyncMock()
    mock.submit_expo_feedback = AsyncMock()
    return mock


@pytest.fixture
def request_(session):
    request = MagicMock()
    request.app.state.session = session
    return request
