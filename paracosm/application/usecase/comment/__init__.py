"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment_thread import (
    CommentThreadItem,
    GetCommentThreadRequest,
    GetCommentThreadResponse,
    GetCommentThreadUseCase,
)

__all__ = [
    "CommentThreadItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentThreadRequest",
    "GetCommentThreadResponse",
    "GetCommentThreadUseCase",
]
