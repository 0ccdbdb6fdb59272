"""
Storage data models for the dollar quote application.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class QuoteRecord(BaseModel):
    """A persisted bid together with the moment it was stored."""

    model_config = ConfigDict(frozen=True)

    created_at: Annotated[datetime, Field(description="Insertion timestamp")]
    bid: Annotated[str, Field(min_length=1, description="Bid exactly as quoted")]

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        """Serialize datetime to ISO format."""
        return value.isoformat()
