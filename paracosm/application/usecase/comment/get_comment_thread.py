"""Get comment thread use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from paracosm.application.usecase.base import BaseUseCase
from paracosm.config import CommentSettings
from paracosm.domain.error import NotFoundError
from paracosm.domain.service import (
    CommentNode,
    CommentService,
    JWTService,
    VoteService,
    WorldService,
)
from paracosm.domain.service.comment_tree import can_reply, indent_level
from paracosm.domain.value import CommunityPostId, TargetKind, UserId, VoteState


class CommentThreadItem(BaseModel):
    """One comment of a thread, with its replies nested beneath it."""

    comment_id: str
    post_id: str
    author_id: str
    author_username: str
    text: str
    parent_id: str | None
    upvotes: int
    created_at: datetime
    depth: int
    indent_level: int
    can_reply: bool
    user_vote: VoteState
    replies: list["CommentThreadItem"]


class GetCommentThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str  # UUID string
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetCommentThreadResponse(BaseModel):
    """Get comment thread response."""

    post_id: str
    comments: list[CommentThreadItem]
    total: int


class GetCommentThreadUseCase(
    BaseUseCase[GetCommentThreadRequest, GetCommentThreadResponse]
):
    """Use case for reading a post's comments as a nested thread."""

    def __init__(
        self,
        comment_service: CommentService,
        world_service: WorldService,
        vote_service: VoteService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment thread use case.

        Args:
            comment_service: Comment domain service
            world_service: World service for checking the post exists
            vote_service: Vote service for the reader's vote states
            jwt_service: JWT service for decoding auth tokens
            comment_settings: Reply depth and indentation limits
        """
        self.comment_service = comment_service
        self.world_service = world_service
        self.vote_service = vote_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetCommentThreadRequest
    ) -> GetCommentThreadResponse:
        """Execute get comment thread flow.

        Args:
            request: Post ID and optional auth token

        Returns:
            Root comments newest first, each with replies oldest first

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = CommunityPostId(UUID(request.post_id))

        post = await self.world_service.get_community_post_by_id(post_id)
        if not post:
            raise NotFoundError("Community post", request.post_id)

        roots = await self.comment_service.get_comment_tree(post_id)
        nodes = [node for root in roots for node in root.walk()]

        # Anonymous readers and bad tokens both see no votes
        user_votes: dict[UUID, VoteState] = {}
        user_id = self.jwt_service.get_user_id_from_token(request.auth_token)
        if user_id and nodes:
            user_votes = await self.vote_service.get_user_vote_states(
                voter_id=UserId(UUID(user_id)),
                target_kind=TargetKind.COMMUNITY_COMMENT,
                target_ids=[node.id for node in nodes],
            )

        logfire.info(
            "Comment thread served",
            post_id=request.post_id,
            total=len(nodes),
            authenticated=user_id is not None,
        )

        return GetCommentThreadResponse(
            post_id=request.post_id,
            comments=[self._to_item(root, user_votes) for root in roots],
            total=len(nodes),
        )

    def _to_item(
        self, node: CommentNode, user_votes: dict[UUID, VoteState]
    ) -> CommentThreadItem:
        comment = node.comment
        return CommentThreadItem(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_username=str(comment.author_username),
            text=comment.text,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            upvotes=comment.upvotes,
            created_at=comment.created_at,
            depth=node.depth,
            indent_level=indent_level(
                node.depth, self.comment_settings.max_indent_level
            ),
            can_reply=can_reply(node.depth, self.comment_settings.max_reply_depth),
            user_vote=user_votes.get(comment.id, VoteState.NO_VOTE),
            replies=[self._to_item(reply, user_votes) for reply in node.replies],
        )
