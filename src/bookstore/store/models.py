"""
Book record model held by the store
"""

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """A single book in the collection."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
