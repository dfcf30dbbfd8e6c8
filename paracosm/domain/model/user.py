"""User entity.

Users own worlds, join them as inhabitants and take part in discussions.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from paracosm.domain.model.common import DomainModel
from paracosm.domain.value import UserId
from paracosm.domain.value.types import Username


class User(DomainModel):
    """User profile as seen by the discussion core."""

    id: UserId
    username: Username
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
