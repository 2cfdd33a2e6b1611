"""Quote data model."""

from pydantic import BaseModel, Field


class Quote(BaseModel):
    """An inspirational quote shown on the home screen."""

    text: str = Field(..., min_length=1, description="Quote text")
    author: str = Field(default="Unknown", description="Attributed author")

    model_config = {"frozen": True}
