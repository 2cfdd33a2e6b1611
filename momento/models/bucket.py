"""MonthBucket data model."""

from pydantic import BaseModel, Field

from momento.models.entry import JournalEntry


class MonthBucket(BaseModel):
    """Journal entries that share a calendar month."""

    label: str = Field(..., description="Display label, e.g. 'January 2025'")
    year: int = Field(..., description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Calendar month")
    entries: tuple[JournalEntry, ...] = Field(
        default=(), description="Entries in original relative order"
    )

    model_config = {"frozen": True}
