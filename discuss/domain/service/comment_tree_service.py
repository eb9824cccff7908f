"""Comment tree domain service."""

from collections.abc import Iterable, Mapping

import logfire

from discuss.domain.model import Comment, Node
from discuss.domain.value import CommentId

from .base import Service


class CommentTreeService(Service):
    """Domain service that builds, searches and extends comment trees.

    Trees are built from flat comment records. A record whose parent cannot
    be resolved is attached under the root instead of being dropped, since
    its parent may still arrive with a later page.
    """

    def build(
        self, comments: Iterable[Comment], existing_root: Node | None = None
    ) -> Node:
        """Build a comment tree, or merge comments into an existing one.

        Algorithm:
        1. Allocate a node per record, keyed by comment id
        2. Walk the records again in input order and append each node to
           its parent: first looked up in the batch, then (when merging)
           anywhere in the existing tree
        3. Records with no resolvable parent are appended to the root

        Siblings keep their input order. The existing tree is not checked
        for duplicates; callers merging a fetched batch must drop records
        already present (see find) beforehand.

        Args:
            comments: Flat comment records, in any order
            existing_root: Root of the tree to merge into (None for a new tree)

        Returns:
            Root of the resulting tree (existing_root itself when merging)
        """
        comments = list(comments)
        with logfire.span(
            "comment_tree_service.build",
            count=len(comments),
            merging=existing_root is not None,
        ):
            if existing_root is None:
                return self._assemble(comments, Node(), {})
            return self._assemble(comments, existing_root, self.index(existing_root))

    def build_preserving_order(self, comments: Iterable[Comment]) -> Node:
        """Build a fresh comment tree that keeps the server's top-level order.

        Top-level records, and orphans whose parent is not in the batch,
        appear under the root in exactly the order they were delivered.

        Args:
            comments: Flat comment records in server order

        Returns:
            Root of the new tree
        """
        comments = list(comments)
        with logfire.span(
            "comment_tree_service.build_preserving_order", count=len(comments)
        ):
            return self._assemble(comments, Node(), {})

    def find(self, root: Node, comment_id: CommentId) -> Node | None:
        """Find the node holding a comment.

        Args:
            root: Node to search from (itself never matches when it is the root)
            comment_id: Comment ID

        Returns:
            Node if found, None otherwise
        """
        stack = [root]
        while stack:
            node = stack.pop()
            if node.comment is not None and node.comment.id == comment_id:
                return node
            stack.extend(node.children)
        return None

    def index(self, root: Node) -> dict[CommentId, Node]:
        """Map every comment id in the tree to its node."""
        return {node.comment.id: node for node in root.iter_descendants()}

    def insert(self, root: Node, comment: Comment) -> Node:
        """Insert a single comment into an existing tree.

        The comment becomes the last child of its parent when the parent is
        anywhere in the tree, otherwise the last child of the root.

        The tree is extended in place. Callers holding a published tree
        renew the target thread first (see renew_threads).

        Args:
            root: Root of the tree
            comment: Comment to insert

        Returns:
            The inserted node
        """
        with logfire.span(
            "comment_tree_service.insert",
            comment_id=comment.id,
            parent_id=comment.parent_id,
        ):
            parent = None
            if not comment.is_top_level:
                parent = self.find(root, comment.parent_id)
                if parent is None:
                    logfire.info(
                        "Parent comment not in tree, inserting as top-level",
                        comment_id=comment.id,
                        parent_id=comment.parent_id,
                    )
            node = (parent or root).append(Node(comment=comment))
            logfire.info(
                "Comment inserted",
                comment_id=comment.id,
                top_level=node.parent is root,
            )
            return node

    def top_level_ancestor(self, node: Node) -> Node:
        """Get the top-level comment whose thread contains node.

        Args:
            node: Any non-root node

        Returns:
            The ancestor directly under the root (node itself if top-level)

        Raises:
            ValueError: If node is a root or is not attached to a root
        """
        if node.parent is None:
            raise ValueError("Node is not attached to a tree")
        seen = {id(node)}
        while node.parent.parent is not None:
            node = node.parent
            if id(node) in seen:
                raise ValueError("Cycle in comment tree")
            seen.add(id(node))
        return node

    def renew_threads(self, root: Node, thread_ids: set[CommentId]) -> Node:
        """Give the root and the named top-level threads new identities.

        The named threads are deep-copied under a new root, so they can be
        extended without touching the tree they came from. Unchanged threads
        are shared and keep their identity (and their back-reference to the
        root they were built under), so consumers comparing by reference
        only re-render the threads that actually changed.

        Args:
            root: Root of the tree
            thread_ids: IDs of top-level comments whose threads changed

        Returns:
            New root node
        """
        new_root = Node(
            no_replies_rendered=root.no_replies_rendered, collapsed=root.collapsed
        )
        new_root.children = [
            child.clone(parent=new_root) if child.id in thread_ids else child
            for child in root.children
        ]
        return new_root

    def _assemble(
        self, comments: list[Comment], root: Node, existing: Mapping[CommentId, Node]
    ) -> Node:
        nodes: dict[CommentId, Node] = {}
        batch: list[Node] = []
        for comment in comments:
            if comment.id in nodes:
                logfire.warn("Duplicate comment in batch skipped", comment_id=comment.id)
                continue
            node = Node(comment=comment)
            nodes[comment.id] = node
            batch.append(node)

        orphans = 0
        for node in batch:
            parent = self._resolve_parent(node, nodes, existing)
            if parent is None:
                if not node.comment.is_top_level:
                    orphans += 1
                parent = root
            parent.append(node)

        if orphans:
            logfire.info("Orphan comments attached to root", count=orphans)
        return root

    def _resolve_parent(
        self, node: Node, *lookups: Mapping[CommentId, Node]
    ) -> Node | None:
        if node.comment.is_top_level:
            return None
        parent_id = node.comment.parent_id
        for lookup in lookups:
            parent = lookup.get(parent_id)
            if parent is None:
                continue
            if self._is_ancestor(node, parent):
                # Self-parented or mutually parented records go top-level
                logfire.warn(
                    "Comment parent chain is cyclic, attaching to root",
                    comment_id=node.comment.id,
                    parent_id=parent_id,
                )
                return None
            return parent
        return None

    @staticmethod
    def _is_ancestor(node: Node, candidate: Node) -> bool:
        """Whether node is candidate itself or one of its ancestors."""
        seen: set[int] = set()
        current: Node | None = candidate
        while current is not None and id(current) not in seen:
            if current is node:
                return True
            seen.add(id(current))
            current = current.parent
        return False
