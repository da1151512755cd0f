"""Write-only rows appended to the external logs — feedback and corrections."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

Scalar = str | int | float | bool


class LogName(StrEnum):
    """Target log (sheet tab) for a submission."""

    STALL_FEEDBACK = "Stall Feedback"
    EXPO_FEEDBACK = "Expo Feedback"
    STALL_EDITS = "Stall Edits"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _Submission(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    log_name: ClassVar[LogName]

    def to_values(self, submitted_at: datetime) -> list[Scalar]:
        raise NotImplementedError


class StallFeedback(_Submission):
    """A visitor's rating of one stall."""

    log_name: ClassVar[LogName] = LogName.STALL_FEEDBACK
    stall_id: int = Field(gt=0)
    stall_name: str
    rating: int = Field(ge=1, le=5)
    enjoyed: str = ""
    suggestions: str = ""

    def to_values(self, submitted_at: datetime) -> list[Scalar]:
        return [
            format_timestamp(submitted_at),
            self.stall_id,
            self.stall_name,
            str(self.rating),
            self.enjoyed,
            self.suggestions,
        ]


class ExpoFeedback(_Submission):
    """A visitor's rating of the expo as a whole."""

    log_name: ClassVar[LogName] = LogName.EXPO_FEEDBACK
    rating: int = Field(ge=1, le=5)
    favorite_part: str = Field(default="", alias="favoritePart")
    improvements: str = ""
    attend_again: str = Field(default="", alias="attendAgain")

    def to_values(self, submitted_at: datetime) -> list[Scalar]:
        return [
            format_timestamp(submitted_at),
            str(self.rating),
            self.favorite_part,
            self.improvements,
            self.attend_again,
        ]


class StallEdit(_Submission):
    """A correction to a stall's editable fields.

    Blank fields are sent as empty cells and read back as "no override".
    """

    log_name: ClassVar[LogName] = LogName.STALL_EDITS
    stall_id: int = Field(gt=0)
    name: str = ""
    dish: str = ""
    short_description: str = Field(default="", alias="shortDescription")
    full_description: str = Field(default="", alias="fullDescription")
    ingredients: str = ""

    def to_values(self, submitted_at: datetime) -> list[Scalar]:
        return [
            format_timestamp(submitted_at),
            self.stall_id,
            self.name,
            self.dish,
            self.short_description,
            self.full_description,
            self.ingredients,
        ]
