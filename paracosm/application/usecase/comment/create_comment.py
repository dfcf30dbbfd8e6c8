"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from paracosm.application.usecase.base import BaseUseCase
from paracosm.domain.error import NotFoundError, ValidationError
from paracosm.domain.service import CommentService, UserService, WorldService
from paracosm.domain.value import CommentId, CommunityPostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    author_id: str
    author_username: str
    text: str
    parent_id: str | None
    upvotes: int
    created_at: datetime


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            world_service: World service for checking the post exists
            user_service: User service for the author's username
        """
        self.comment_service = comment_service
        self.world_service = world_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Reject blank text before touching the store
        2. Verify the post exists
        3. Look up the author's username (through the profile cache)
        4. Create the comment (service validates the parent)

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            ValidationError: If text is blank or the parent is invalid
            NotFoundError: If the post or author does not exist
        """
        if not request.text.strip():
            raise ValidationError("Comment text must not be empty")

        post_id = CommunityPostId(UUID(request.post_id))
        post = await self.world_service.get_community_post_by_id(post_id)
        if not post:
            raise NotFoundError("Community post", request.post_id)

        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_user_by_id(author_id)
        if not author:
            raise NotFoundError("User", request.author_id)

        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            author_username=author.username,
            text=request.text,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_username=str(comment.author_username),
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            upvotes=comment.upvotes,
            created_at=comment.created_at,
        )
