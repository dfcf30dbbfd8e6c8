"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from paracosm.config import CommentSettings
from paracosm.domain.error import (
    BusinessRuleViolationError,
    ValidationError,
)
from paracosm.domain.model.comment import Comment
from paracosm.domain.repository import CommentRepository
from paracosm.domain.value import CommentId, CommunityPostId, UserId
from paracosm.domain.value.types import Username

from .base import Service
from .comment_tree import CommentNode, build_comment_tree


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment thread limits
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def create_comment(
        self,
        post_id: CommunityPostId,
        author_id: UserId,
        author_username: Username,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            author_username: Author username (denormalized onto the comment)
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank or too long, or the parent
                comment does not exist
            BusinessRuleViolationError: If the parent belongs to another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = text.strip()
            if not text:
                raise ValidationError("Comment text must not be empty")
            if len(text) > self.comment_settings.max_text_length:
                raise ValidationError(
                    f"Comment text must be at most "
                    f"{self.comment_settings.max_text_length} characters"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise ValidationError(f"Parent comment not found: {parent_id}")
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise BusinessRuleViolationError(
                        "Parent comment does not belong to this post"
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                author_username=author_username,
                text=text,
                parent_id=parent_id,
                upvotes=0,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                author_id=str(author_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comments_for_post(self, post_id: CommunityPostId) -> list[Comment]:
        """Get the flat list of comments for a post.

        Args:
            post_id: Post ID

        Returns:
            Comments in no particular order
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_tree(self, post_id: CommunityPostId) -> list[CommentNode]:
        """Get the threaded view of a post's comments.

        Args:
            post_id: Post ID

        Returns:
            Root nodes newest first, replies oldest first
        """
        comments = await self.get_comments_for_post(post_id)
        with logfire.span(
            "comment_service.build_comment_tree",
            post_id=str(post_id),
            count=len(comments),
        ):
            return build_comment_tree(comments)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> list[CommentId]:
        """Hard-delete a comment together with its replies.

        Args:
            comment_id: Comment ID

        Returns:
            IDs of every removed comment
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            removed = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                removed_count=len(removed),
            )
            return removed
