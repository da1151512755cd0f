"""Overlay edit-log corrections onto the static catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from expo_stalls.models.edit import EditRecord
    from expo_stalls.models.stall import StallRecord

logger = logging.getLogger(__name__)


def latest_edits(edits: Iterable[EditRecord]) -> dict[int, EditRecord]:
    """Map each stall id to the last edit for it in log order.

    A later row replaces an earlier one for the same id wholesale; fields the
    earlier row set are not carried over.
    """
    latest: dict[int, EditRecord] = {}
    for edit in edits:
        latest[edit.stall_id] = edit
    return latest


def merge_edits(catalog: Sequence[StallRecord], edits: Iterable[EditRecord]) -> list[StallRecord]:
    """Return the catalog with each stall's latest correction applied.

    Only non-empty override fields replace catalog values. Catalog order is kept,
    no stall is added or dropped, and edits for unknown ids are ignored.
    """
    latest = latest_edits(edits)
    if not latest:
        return list(catalog)

    merged: list[StallRecord] = []
    applied = 0
    for stall in catalog:
        edit = latest.get(stall.id)
        overrides = edit.overrides() if edit else {}
        if overrides:
            stall = stall.model_copy(update=overrides)
            applied += 1
        merged.append(stall)

    logger.debug("Edits merged — edited_ids=%d applied=%d", len(latest), applied)
    return merged
