"""
Base entity classes.
"""

from pydantic import BaseModel, ConfigDict


class BaseEntity(BaseModel):
    """
    Base for all persistent entities.

    Entities are immutable: an edit produces a new instance, so a reader
    never sees half of an update.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # Ignore unknown fields from older data files
    )
