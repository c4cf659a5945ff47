"""Lighting mode catalog entry."""

from pydantic import BaseModel, ConfigDict, Field


class Mode(BaseModel):
    """A selectable lighting mode: display name paired with its protocol code."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Display name")
    mode_bit: int = Field(ge=0, le=255, description="Mode code sent to the firmware")
