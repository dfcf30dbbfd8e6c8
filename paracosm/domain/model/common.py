"""Shared base for Paracosm entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Changes go through ``model_copy(update=...)``, which is how the
    repositories and the score store produce updated records.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Value objects such as Username
    )
