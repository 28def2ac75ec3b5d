# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable model for derived values that are never mutated after creation."""

    model_config = ConfigDict(frozen=True)
