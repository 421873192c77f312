# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ShareTree - immutable facade over a ShareNode tree and its settings.

The functional engine (lookup, mutation, distribution, normalization)
works on bare ShareNode values and never raises on unknown ids. ShareTree
binds a root to a TreeSettings bundle and wires the engine the way an
interactive caller needs it:

- every write re-spreads the global volume from the root, and normalizes
  it when ``auto_normalize`` is set
- append() enforces the children and depth limits through allow_expand()
- every write returns a new ShareTree; the receiver is left as it was

Example:
    Basic usage::

        tree = ShareTree(settings=TreeSettings(global_qty=10000))
        tree = tree.append(1, 'Sales').append(1, 'Support')
        support = tree.root.children[0]
        tree = tree.set_share(support.id, 70)
        print(tree.to_json())

    Permissive mode::

        tree = ShareTree(settings=settings, raise_on_error=False)
        tree.append(leaf_id)  # returns tree unchanged if the limit is hit
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .config import TreeSettings
from .distribution import distribute_qty, distribute_share
from .exceptions import MaxLevelsExceededError, TooManyChildrenError
from .lookup import find_node, get_parent, get_siblings, leaves, node_level, walk
from .mutation import allow_expand, append_child, create_node, delete_node, update_label
from .node import ShareNode
from .normalization import normalize
from .serialization import encode, to_json

logger = logging.getLogger(__name__)


class ShareTree:
    """A classification tree bound to its settings.

    Attributes:
        root: The root ShareNode.
        settings: The TreeSettings in use.
    """

    __slots__ = ('_root', '_settings', '_raise_on_error')

    def __init__(
        self,
        root: ShareNode | None = None,
        settings: TreeSettings | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """Initialize a ShareTree.

        Args:
            root: Existing tree. If None, a single root node is created
                (id 1, label 'Root') holding settings.global_qty.
            settings: Limits and volumes. Defaults to TreeSettings().
            raise_on_error: If True (default), append() raises when the
                children or depth limit is reached. If False it logs a
                warning and returns the tree unchanged.
        """
        self._settings = settings if settings is not None else TreeSettings()
        if root is None:
            root = ShareNode(1, 'Root', qty=self._settings.global_qty, share=100)
        self._root = root
        self._raise_on_error = raise_on_error

    def _derive(
        self, root: ShareNode, settings: TreeSettings | None = None
    ) -> ShareTree:
        return ShareTree(
            root,
            settings if settings is not None else self._settings,
            raise_on_error=self._raise_on_error,
        )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"ShareTree({self._root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShareTree):
            return NotImplemented
        return self._root == other._root and self._settings == other._settings

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        return sum(1 for _ in walk(self._root))

    def __iter__(self) -> Iterator[ShareNode]:
        """Iterate over all nodes in preorder."""
        return (node for _, node in walk(self._root))

    def __contains__(self, node_id: int) -> bool:
        return find_node(node_id, self._root) is not None

    @property
    def root(self) -> ShareNode:
        return self._root

    @property
    def settings(self) -> TreeSettings:
        return self._settings

    # ==================== Lookup ====================

    def find(self, node_id: int) -> ShareNode | None:
        return find_node(node_id, self._root)

    def parent_of(self, node_id: int) -> ShareNode | None:
        return get_parent(node_id, self._root)

    def siblings_of(self, node_id: int) -> list[ShareNode]:
        return get_siblings(node_id, self._root)

    def level_of(self, node_id: int) -> int | None:
        """Depth of node_id with the root at level 1, None if absent."""
        return node_level(node_id, self._root)

    def walk(self) -> Iterator[tuple[int, ShareNode]]:
        """Yield (level, node) pairs in preorder."""
        return walk(self._root)

    def leaves(self) -> list[ShareNode]:
        return leaves(self._root)

    def can_expand(self, node_id: int) -> bool:
        """True if node_id exists and may receive one more child."""
        node = self.find(node_id)
        if node is None:
            return False
        return allow_expand(self._settings, self.level_of(node_id), node.children)

    # ==================== Writes ====================

    def refresh(self) -> ShareTree:
        """Spread settings.global_qty from the root, then auto-normalize.

        Returns:
            A new ShareTree with recomputed quantities.

        Raises:
            NormalizationError: If auto_normalize is set and the tree
                cannot be normalized within the settings' limits.
        """
        root = distribute_qty(self._settings.global_qty, self._root)
        tree = self._derive(root)
        if self._settings.auto_normalize:
            tree = tree.normalize()
        return tree

    def normalize(self) -> ShareTree:
        """Grow the total until every node reaches settings.min_node_qty.

        The total never goes above settings.max_global_qty.

        Raises:
            NormalizationError: If the minimum is unreachable.
        """
        settings = self._settings
        root = normalize(
            settings.min_node_qty,
            self._root,
            step=settings.normalize_step,
            max_iterations=settings.max_normalize_iterations,
            max_qty=settings.max_global_qty,
        )
        if root is self._root:
            return self
        return self._derive(root)

    def append(self, parent_id: int, label: str | None = None) -> ShareTree:
        """Add a new leaf as the first child of parent_id.

        The new node gets the next free id and shares of parent_id's
        children are re-spread equally. The new node is
        ``result.find(parent_id).children[0]``.

        Args:
            parent_id: Id of the node receiving the child.
            label: Optional label, defaults to 'Node #<id>'.

        Returns:
            A new ShareTree, or self if parent_id is absent or (in
            permissive mode) the node cannot be expanded.

        Raises:
            TooManyChildrenError: parent_id already has max_children.
            MaxLevelsExceededError: parent_id is at max_levels depth.
        """
        parent = self.find(parent_id)
        if parent is None:
            logger.debug("append: parent %s not found", parent_id)
            return self

        level = self.level_of(parent_id)
        if not allow_expand(self._settings, level, parent.children):
            if len(parent.children) >= self._settings.max_children:
                error: Exception = TooManyChildrenError(
                    f"node {parent_id} already has "
                    f"{len(parent.children)} children "
                    f"(max {self._settings.max_children})"
                )
            else:
                error = MaxLevelsExceededError(
                    f"node {parent_id} is at level {level} "
                    f"(max {self._settings.max_levels})"
                )
            if self._raise_on_error:
                raise error
            logger.warning("append refused: %s", error)
            return self

        new_node = create_node(self._root, label)
        return self._derive(append_child(parent_id, new_node, self._root)).refresh()

    def delete(self, node_id: int) -> ShareTree:
        """Remove node_id and its subtree. The root cannot be deleted."""
        root = delete_node(node_id, self._root)
        if root is self._root:
            return self
        return self._derive(root).refresh()

    def relabel(self, node_id: int, label: str) -> ShareTree:
        """Relabel node_id and refresh. Returns self if node_id is absent."""
        root = update_label(node_id, label, self._root)
        if root is self._root:
            return self
        return self._derive(root).refresh()

    def set_share(self, node_id: int, share: int) -> ShareTree:
        """Set node_id's share, split the rest among its siblings, refresh.

        Returns self if node_id is absent, whatever the share.

        Raises:
            InvalidShareError: If node_id is present and share is outside
                0..100.
        """
        root = distribute_share(node_id, share, self._root)
        if root is self._root:
            return self
        return self._derive(root).refresh()

    def set_global_qty(self, qty: int) -> ShareTree:
        """Use qty as the new total volume and refresh.

        Raises:
            pydantic.ValidationError: If qty is negative or above
                settings.max_global_qty.
        """
        values: dict[str, Any] = self._settings.model_dump()
        values['global_qty'] = qty
        settings = type(self._settings)(**values)
        return self._derive(self._root, settings).refresh()

    # ==================== Conversion ====================

    def encode(self) -> dict[str, Any]:
        return encode(self._root)

    def to_json(self, **kwargs: Any) -> str:
        return to_json(self._root, **kwargs)
