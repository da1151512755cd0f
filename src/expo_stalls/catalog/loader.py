"""Catalog + edit-log loader — fetches both sources concurrently and merges them."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from expo_stalls.catalog.merge import merge_edits
from expo_stalls.models.edit import EditRecord
from expo_stalls.models.stall import StallRecord

if TYPE_CHECKING:
    from expo_stalls.config import CatalogConfig, SheetsConfig

logger = logging.getLogger(__name__)

_CATALOG_ADAPTER = TypeAdapter(list[StallRecord])


def parse_catalog(payload: Any) -> list[StallRecord] | None:
    """Validate a decoded catalog document. Returns None if any record is invalid."""
    try:
        return _CATALOG_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        logger.error("Catalog rejected — %d validation error(s): %s", exc.error_count(), exc)
        return None


def parse_edit_log(payload: Any) -> list[EditRecord]:
    """Turn edit-log rows into records, skipping rows that cannot be applied."""
    if not isinstance(payload, list):
        logger.warning("Edit log is not a JSON array (got %s) — ignoring it", type(payload).__name__)
        return []

    edits: list[EditRecord] = []
    for position, row in enumerate(payload):
        if not isinstance(row, dict):
            logger.debug("Skipping edit row %d — not an object", position)
            continue
        try:
            edits.append(EditRecord.model_validate(row))
        except ValidationError:
            logger.debug("Skipping edit row %d — no usable stall id", position)
    return edits


class CatalogLoader:
    """Loads the static catalog and overlays the external edit log.

    The catalog is required; the edit log is best effort and degrades to
    "no corrections" on any failure.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        catalog: CatalogConfig,
        sheets: SheetsConfig,
    ) -> None:
        self._client = client
        self._catalog = catalog
        self._sheets = sheets

    async def load_collection(self) -> list[StallRecord] | None:
        """Fetch catalog and edits concurrently and return the merged collection.

        Returns None when the catalog is unavailable.
        """
        stalls, edits = await asyncio.gather(self.fetch_catalog(), self.fetch_edits())
        if stalls is None:
            return None
        merged = merge_edits(stalls, edits)
        logger.info("Catalog loaded — stalls=%d edits=%d", len(merged), len(edits))
        return merged

    async def fetch_catalog(self) -> list[StallRecord] | None:
        """Read the catalog from its URL, or from the local file when no URL is set."""
        if self._catalog.url:
            payload = await self._fetch_catalog_url(self._catalog.url)
        else:
            payload = await self._read_catalog_file(Path(self._catalog.path))
        if payload is None:
            return None
        if not isinstance(payload, list):
            logger.error("Catalog is not a JSON array (got %s)", type(payload).__name__)
            return None
        return parse_catalog(payload)

    async def fetch_edits(self) -> list[EditRecord]:
        """Fetch the edit log. Never raises; any failure yields an empty log."""
        if not self._sheets.is_configured:
            return []

        try:
            response = await self._client.get(
                self._sheets.script_url,
                follow_redirects=True,
                timeout=self._sheets.read_timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Could not fetch stall edits — %s: %s", type(exc).__name__, exc)
            return []
        except ValueError:
            # Covers JSONDecodeError and UnicodeDecodeError.
            logger.warning("Stall edits response is not valid UTF-8 JSON — ignoring it")
            return []

        return parse_edit_log(payload)

    async def _fetch_catalog_url(self, url: str) -> Any:
        try:
            response = await self._client.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Failed to load stalls from %s — %s: %s", url, type(exc).__name__, exc)
        except ValueError:
            logger.error("Failed to load stalls from %s — response is not valid UTF-8 JSON", url)
        return None

    async def _read_catalog_file(self, path: Path) -> Any:
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
            return json.loads(text)
        except OSError as exc:
            logger.error("Failed to read stalls from %s — %s", path, exc)
        except ValueError:
            logger.error("Failed to read stalls from %s — file is not valid UTF-8 JSON", path)
        return None
