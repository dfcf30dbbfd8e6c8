"""World aggregate root.

A world is a fictional universe container. Its creator governs every
discussion held inside it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import UserId, WorldId


class World(DomainModel):
    """World aggregate root.

    Only the fields the discussion core needs are modelled here:
    the creator (governing authority) and the fork lineage.
    """

    id: WorldId
    title: str = Field(min_length=1, max_length=200)
    creator_id: UserId
    forked_from_id: Optional[WorldId] = None
    created_at: datetime = Field(default_factory=datetime.now)
