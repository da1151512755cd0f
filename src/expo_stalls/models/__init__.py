"""Data models for catalog records, edit-log rows and submissions."""

from expo_stalls.models.edit import EditRecord
from expo_stalls.models.stall import EDITABLE_FIELDS, Dietary, StallRecord, TeamMember
from expo_stalls.models.submission import ExpoFeedback, LogName, StallEdit, StallFeedback

__all__ = [
    "EDITABLE_FIELDS",
    "Dietary",
    "EditRecord",
    "ExpoFeedback",
    "LogName",
    "StallEdit",
    "StallFeedback",
    "StallRecord",
    "TeamMember",
]
