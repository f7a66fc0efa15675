"""Comment thread reconstruction.

The store returns comments as a flat list where replies reference their
parent by id. This module rebuilds the thread forest in two passes over an
id index, so the input order does not matter: a reply may arrive before or
after its parent.
"""

from dataclasses import dataclass, field
from typing import Iterable

from shiki.domain.model.comment import Comment
from shiki.domain.value import CommentId


@dataclass
class CommentNode:
    """A comment and its direct replies, in input order.

    Runtime-only structure; replies are never persisted.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    def walk(self) -> Iterable["CommentNode"]:
        """Yield this node and every descendant, depth first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.replies))


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Turn a flat comment list into a forest of threads.

    A comment whose parent_id is missing from the input (deleted, rejected or
    still pending) is promoted to a root rather than dropped.

    Args:
        comments: Comments of a single article, already filtered by status

    Returns:
        Root nodes in input order, each with replies linked transitively

    Raises:
        ValueError: If two comments share an id
    """
    nodes: dict[CommentId, CommentNode] = {}
    ordered: list[CommentNode] = []
    for comment in comments:
        if comment.id in nodes:
            raise ValueError(f"Duplicate comment id in thread input: {comment.id}")
        node = CommentNode(comment=comment)
        nodes[comment.id] = node
        ordered.append(node)

    roots: list[CommentNode] = []
    for node in ordered:
        parent_id = node.comment.parent_id
        parent = nodes.get(parent_id) if parent_id is not None else None
        # A self-reference cannot be a real parent link.
        if parent is not None and parent is not node:
            parent.replies.append(node)
        else:
            roots.append(node)
    return roots


def count_nodes(roots: Iterable[CommentNode]) -> int:
    """Total number of comments in a forest."""
    return sum(1 for root in roots for _ in root.walk())
