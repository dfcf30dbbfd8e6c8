"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from paracosm.application.usecase.base import BaseUseCase
from paracosm.domain.error import NotAuthorizedError, NotFoundError
from paracosm.domain.service import CommentService, VoteService, WorldService
from paracosm.domain.value import CommentId, CommunityPostId, TargetKind, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    removed_comment_ids: list[str]
    removed_votes: int


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for deleting a comment together with its replies.

    The comment author and the creator of the world the post belongs to
    may delete; anyone else is refused.
    """

    def __init__(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        vote_service: VoteService,
    ) -> None:
        self.comment_service = comment_service
        self.world_service = world_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist on this post
            NotAuthorizedError: If the user is neither author nor world creator
        """
        comment_id = CommentId(UUID(request.comment_id))
        post_id = CommunityPostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if not comment or comment.post_id != post_id:
            raise NotFoundError("Comment", request.comment_id)

        if comment.author_id != user_id:
            post = await self.world_service.get_community_post_by_id(post_id)
            governor = (
                await self.world_service.get_governing_user_id(post) if post else None
            )
            if governor != user_id:
                logfire.warn(
                    "Comment deletion refused",
                    comment_id=request.comment_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError(
                    action="delete",
                    resource="comment",
                    resource_id=request.comment_id,
                    user_id=request.user_id,
                )

        removed = await self.comment_service.delete_comment(comment_id)
        removed_votes = await self.vote_service.clear_votes(
            TargetKind.COMMUNITY_COMMENT, removed
        )

        return DeleteCommentResponse(
            removed_comment_ids=[str(cid) for cid in removed],
            removed_votes=removed_votes,
        )
