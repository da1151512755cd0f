"""Shared fixtures for the expo stalls test suite."""

from __future__ import annotations

from typing import Any

import pytest

from expo_stalls.config import CatalogConfig, SheetsConfig
from expo_stalls.models.stall import StallRecord

SCRIPT_URL = "https://script.example.com/macros/s/abc/exec"
CATALOG_URL = "https://expo.example.com/stalls.json"


def stall_payload(stall_id: int = 1, **overrides: Any) -> dict[str, Any]:
    """A catalog entry in wire (camelCase) form."""
    payload: dict[str, Any] = {
        "id": stall_id,
        "name": f"Stall {stall_id}",
        "topic": "Geometry",
        "dish": "Toast",
        "shortDescription": "Short text",
        "fullDescription": "Full text",
        "ingredients": "Bread",
        "dietary": "veg",
        "presenter": "Asha",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    return stall_payload


@pytest.fixture
def make_stall():
    def _make(stall_id: int = 1, **overrides: Any) -> StallRecord:
        return StallRecord.model_validate(stall_payload(stall_id, **overrides))

    return _make


@pytest.fixture
def sheets_config() -> SheetsConfig:
    return SheetsConfig(script_url=SCRIPT_URL, read_timeout=1.0, submit_timeout=1.0, demo_delay=0.0)


@pytest.fixture
def demo_sheets_config() -> SheetsConfig:
    return SheetsConfig(script_url="", read_timeout=1.0, submit_timeout=1.0, demo_delay=0.0)


@pytest.fixture
def catalog_config() -> CatalogConfig:
    return CatalogConfig(url=CATALOG_URL, path="")
