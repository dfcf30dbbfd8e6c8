"""Question entity."""

from datetime import datetime

from pydantic import Field

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import QuestionId, UserId, WorldId


class Question(DomainModel):
    """A question asked about a world.

    ``upvotes`` is the denormalized vote score (ups minus downs) and
    may go negative.
    """

    id: QuestionId
    world_id: WorldId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    upvotes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
