"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    RootValueObject uses Pydantic's RootModel, which means:
    - The model wraps a single value (accessed via .root)
    - model_dump() automatically returns the primitive value, not a dict
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
