"""MoodRecord data model."""

from datetime import date as date_type
from pydantic import BaseModel, Field


class MoodRecord(BaseModel):
    """Represents the mood rating for a single calendar day."""

    day: date_type = Field(..., description="Calendar day of the rating")
    rating: int = Field(..., description="Mood rating on the configured scale")

    model_config = {"frozen": True}
