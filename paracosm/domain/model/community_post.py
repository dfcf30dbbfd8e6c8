"""Community post entity.

Community posts are the discussions comments hang off.
"""

from datetime import datetime

from pydantic import Field

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import CommunityPostId, UserId, WorldId


class CommunityPost(DomainModel):
    """A post on a world's community board.

    ``upvotes`` is the denormalized vote score (ups minus downs) and
    may go negative.
    """

    id: CommunityPostId
    world_id: WorldId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(default="", max_length=20000)
    upvotes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
