"""Single-slot cache for the merged stall collection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from expo_stalls.models.stall import StallRecord

logger = logging.getLogger(__name__)


class CollectionLoader(Protocol):
    async def load_collection(self) -> list[StallRecord] | None: ...


class SessionCache:
    """Holds the merged collection until a correction is submitted.

    There is no expiry and no locking: two concurrent misses may both load and
    both fill the slot, which is harmless because loads are idempotent.
    """

    def __init__(self, loader: CollectionLoader) -> None:
        self._loader = loader
        self._stalls: list[StallRecord] | None = None

    @property
    def is_populated(self) -> bool:
        return self._stalls is not None

    async def get(self) -> list[StallRecord] | None:
        """Return the cached collection, loading it on a miss.

        Returns None when the catalog is unavailable; failures are not cached.
        """
        if self._stalls is not None:
            return self._stalls

        stalls = await self._loader.load_collection()
        if stalls is not None:
            self._stalls = stalls
        return stalls

    def invalidate(self) -> None:
        """Drop the cached collection so the next ``get`` reloads and re-merges."""
        if self._stalls is not None:
            logger.info("Stall cache invalidated")
        self._stalls = None
