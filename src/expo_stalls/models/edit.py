"""Edit record model — one correction row read back from the edit log."""

from __future__ import annotations

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from expo_stalls.models.stall import EDITABLE_FIELDS


def _parse_stall_id(value: Any) -> int | None:
    """Parse a stall id the way the sheet hands it over (number or numeric text).

    Leading digits win, so ``"12 "`` and ``"12abc"`` both give 12. Returns None
    when nothing numeric is found.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else None


class EditRecord(BaseModel):
    """A correction to a single stall.

    Override fields are None when the row leaves them blank; a blank override
    never replaces a catalog value.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    stall_id: int = Field(validation_alias=AliasChoices("stallId", "stall_id", "Stall ID"))
    timestamp: str | None = Field(default=None, validation_alias=AliasChoices("timestamp", "Timestamp"))
    name: str | None = None
    dish: str | None = None
    short_description: str | None = Field(
        default=None, validation_alias=AliasChoices("shortDescription", "short_description")
    )
    full_description: str | None = Field(
        default=None, validation_alias=AliasChoices("fullDescription", "full_description")
    )
    ingredients: str | None = None

    @field_validator("stall_id", mode="before")
    @classmethod
    def _coerce_stall_id(cls, value: Any) -> int:
        stall_id = _parse_stall_id(value)
        if not stall_id:
            raise ValueError(f"unusable stall id: {value!r}")
        return stall_id

    @field_validator(
        "timestamp", "name", "dish", "short_description", "full_description", "ingredients", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        # Sheet cells come back as numbers, booleans or empty strings; falsy cells are blank.
        if isinstance(value, float) and math.isnan(value):
            return None
        if not value and not isinstance(value, str):
            return None
        text = str(value).strip()
        return text or None

    def overrides(self) -> dict[str, str]:
        """Return the non-empty override fields keyed by StallRecord field name."""
        return {
            field: value
            for field in EDITABLE_FIELDS
            if (value := getattr(self, field))
        }
