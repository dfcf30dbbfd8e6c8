"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import CommentNode, build_comment_tree
from .jwt_service import JWTService
from .user_service import UserService
from .vote_service import VoteService
from .world_service import WorldService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "Service",
    "UserService",
    "VoteService",
    "WorldService",
    "build_comment_tree",
]
