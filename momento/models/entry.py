"""JournalEntry data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class JournalEntry(BaseModel):
    """Represents one photo captured into the journal."""

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    timestamp: datetime = Field(..., description="Capture timestamp")
    image_ref: str = Field(
        ..., min_length=1, description="Opaque reference to the stored image"
    )

    model_config = {"frozen": True}
