"""Test configuration and fixtures."""

from discuss.domain.model import Comment, Node
from discuss.domain.value import CommentId


def make_comment(comment_id: str, parent_id: str | None = None, **extra) -> Comment:
    """Helper function to build comment records for tests.

    Args:
        comment_id: Comment ID
        parent_id: Parent comment ID (None for top-level)
        **extra: Additional pass-through fields

    Returns:
        Comment record
    """
    return Comment(
        id=CommentId(comment_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        **extra,
    )


def child_ids(node: Node) -> list[str]:
    """Comment ids of a node's children, in order."""
    return [child.comment.id for child in node.children]


def count_nodes(root: Node) -> int:
    """Count every node in the tree, the root included."""
    return 1 + sum(1 for _ in root.iter_descendants())
