"""Comment tree node.

A post's comments are held as a tree hanging off a synthetic root node.
The root carries no comment; its children are the top-level threads.
"""

from collections.abc import Iterator
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId


class Node:
    """Node in a post's comment tree.

    Ownership flows downwards only: a node is owned by its parent's
    children list, and parent is a plain back-reference to that owner.
    Nodes compare by identity so that swapping a node for a copy is
    visible to consumers that diff by reference.

    no_replies_rendered and collapsed are client-side view state and are
    only ever changed by the rendering layer.
    """

    __slots__ = ("comment", "children", "parent", "no_replies_rendered", "collapsed")

    def __init__(
        self,
        comment: Optional[Comment] = None,
        children: Optional[list["Node"]] = None,
        parent: Optional["Node"] = None,
        no_replies_rendered: int = 0,
        collapsed: bool = False,
    ) -> None:
        self.comment = comment
        self.children: list[Node] = children if children is not None else []
        self.parent = parent
        self.no_replies_rendered = no_replies_rendered
        self.collapsed = collapsed

    def __repr__(self) -> str:
        label = "root" if self.comment is None else repr(self.comment.id)
        return f"Node({label}, children={len(self.children)})"

    @property
    def is_root(self) -> bool:
        return self.comment is None

    @property
    def id(self) -> CommentId | None:
        """Comment id of this node, None for the root."""
        return self.comment.id if self.comment is not None else None

    def append(self, child: "Node") -> "Node":
        """Attach child as the last child of this node."""
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self) -> Iterator["Node"]:
        """Yield every node below this one in depth-first pre-order.

        Walks children lists with an explicit stack, so it terminates for
        any tree regardless of depth.
        """
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def clone(self, parent: Optional["Node"] = None) -> "Node":
        """Return a deep copy of this subtree with new identities.

        Every node below is copied and linked to its copied parent; the
        source subtree and its back-references are left untouched.
        Comment records are shared, they are immutable.
        """
        clone = Node(
            comment=self.comment,
            parent=parent,
            no_replies_rendered=self.no_replies_rendered,
            collapsed=self.collapsed,
        )
        stack = [(self, clone)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                copy = Node(
                    comment=child.comment,
                    no_replies_rendered=child.no_replies_rendered,
                    collapsed=child.collapsed,
                )
                target.append(copy)
                stack.append((child, copy))
        return clone
