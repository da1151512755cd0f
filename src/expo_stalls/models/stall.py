"""Stall record model — one exhibit in the static catalog."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Image values containing this marker are stand-ins, not real pictures.
IMAGE_PLACEHOLDER_MARKER = "placeholder"

EDITABLE_FIELDS = ("name", "dish", "short_description", "full_description", "ingredients")


class Dietary(StrEnum):
    VEG = "veg"
    EGG = "egg"
    NON_VEG = "non-veg"


class TeamMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    role: str = ""


class StallRecord(BaseModel):
    """A stall as published in the catalog, possibly overlaid with corrections.

    Records are frozen; corrections produce copies via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: int = Field(gt=0)
    name: str
    topic: str
    dish: str | None = None
    short_description: str = Field(alias="shortDescription")
    full_description: str = Field(default="", alias="fullDescription")
    ingredients: str | None = None
    dietary: Dietary
    sample_available: bool | Literal["likely", "maybe"] = Field(default=False, alias="sampleAvailable")
    image: str | None = None
    presenter: str | None = None
    team: list[TeamMember] = Field(default_factory=list)
    concepts: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _require_presenter_or_team(self) -> StallRecord:
        if not self.presenter and not self.team:
            raise ValueError(f"stall {self.id} has neither a presenter nor a team")
        return self

    @property
    def offers_samples(self) -> bool:
        return self.sample_available is True or self.sample_available == "likely"

    @property
    def has_image(self) -> bool:
        return bool(self.image) and IMAGE_PLACEHOLDER_MARKER not in self.image

    @property
    def credits(self) -> str:
        """Presenter name, or the team's names in listed order."""
        if self.presenter:
            return self.presenter
        return ", ".join(member.name for member in self.team)
