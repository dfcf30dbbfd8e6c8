"""Strongly typed identifiers for Paracosm domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
WorldId = NewType("WorldId", UUID)
QuestionId = NewType("QuestionId", UUID)
CommunityPostId = NewType("CommunityPostId", UUID)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
