"""Comment tree builder.

Turns the flat comment list of one discussion into a nested reply tree:
roots newest first, replies oldest first at every depth.
"""

from dataclasses import dataclass, field
from typing import Iterable

import logfire

from paracosm.domain.model.comment import Comment
from paracosm.domain.value import CommentId

MAX_REPLY_DEPTH = 5
MAX_INDENT_LEVEL = 3


@dataclass
class CommentNode:
    """A comment together with its direct replies."""

    comment: Comment
    depth: int = 0
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    def walk(self) -> Iterable["CommentNode"]:
        """Yield this node and every descendant, depth first."""
        yield self
        for reply in self.replies:
            yield from reply.walk()


def can_reply(depth: int, max_depth: int = MAX_REPLY_DEPTH) -> bool:
    """Whether the UI should offer a reply action at ``depth``."""
    return depth < max_depth


def indent_level(depth: int, max_indent: int = MAX_INDENT_LEVEL) -> int:
    """Visual indentation level for a comment at ``depth``."""
    return min(depth, max_indent)


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Build a reply tree from a flat, unordered list of comments.

    Policies:
    - A comment whose parent is absent from the input becomes a root.
    - Duplicate ids: the first occurrence wins, later ones are dropped.
    - Parent cycles (including a comment naming itself as parent) are broken
      by promoting the earliest-created member of the cycle to root, so every
      distinct comment appears exactly once.

    The builder imposes no depth limit.

    Args:
        comments: Comments of a single discussion, in any order

    Returns:
        Root nodes, newest first, with replies sorted oldest first
    """
    nodes: dict[CommentId, CommentNode] = {}
    order: dict[CommentId, int] = {}
    for comment in comments:
        if comment.id in nodes:
            logfire.warn("Duplicate comment id dropped", comment_id=str(comment.id))
            continue
        order[comment.id] = len(order)
        nodes[comment.id] = CommentNode(comment=comment)

    parents: dict[CommentId, CommentId | None] = {}
    for comment_id, node in nodes.items():
        parent_id = node.comment.parent_id
        parents[comment_id] = parent_id if parent_id in nodes else None

    _break_cycles(nodes, parents, order)

    roots: list[CommentNode] = []
    for comment_id, node in nodes.items():
        parent_id = parents[comment_id]
        if parent_id is None:
            roots.append(node)
        else:
            nodes[parent_id].replies.append(node)

    roots.sort(key=lambda n: n.comment.created_at, reverse=True)
    for root in roots:
        _sort_replies(root, depth=0)

    return roots


def _break_cycles(
    nodes: dict[CommentId, CommentNode],
    parents: dict[CommentId, CommentId | None],
    order: dict[CommentId, int],
) -> None:
    """Promote one member of every parent cycle to root, in place."""
    done: set[CommentId] = set()

    for start in nodes:
        if start in done:
            continue

        path: list[CommentId] = []
        on_path: dict[CommentId, int] = {}
        current: CommentId | None = start
        while current is not None and current not in done:
            if current in on_path:
                cycle = path[on_path[current] :]
                promoted = min(
                    cycle,
                    key=lambda cid: (nodes[cid].comment.created_at, order[cid]),
                )
                parents[promoted] = None
                logfire.warn(
                    "Comment parent cycle broken",
                    comment_id=str(promoted),
                    cycle_size=len(cycle),
                )
                break
            on_path[current] = len(path)
            path.append(current)
            current = parents[current]

        done.update(path)


def _sort_replies(node: CommentNode, depth: int) -> None:
    """Sort replies oldest first and record depth, recursively."""
    node.depth = depth
    node.replies.sort(key=lambda n: n.comment.created_at)
    for reply in node.replies:
        _sort_replies(reply, depth + 1)
