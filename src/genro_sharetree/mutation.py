# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural mutation of ShareNode trees.

Every function takes a tree and returns a tree. The input is never
modified: the path from the root to the changed node is rebuilt and
every untouched subtree is shared with the input. When the target id
is not in the tree the input tree itself is returned, so callers can
detect a no-op with ``result is tree``.

After an insertion or a deletion the shares of the affected siblings
are re-spread as an equal integer split (``100 // count``). The total
may fall short of 100 by up to ``count - 1``; that drift is kept.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from .lookup import get_parent, max_id
from .node import ShareNode

logger = logging.getLogger(__name__)


def _update_node(
    node_id: int, tree: ShareNode, func: Callable[[ShareNode], ShareNode]
) -> ShareNode:
    """Apply func to the first node matching node_id (preorder).

    Returns tree unchanged (same object) when node_id is absent.
    """
    if tree.id == node_id:
        return func(tree)
    for index, child in enumerate(tree.children):
        updated = _update_node(node_id, child, func)
        if updated is not child:
            children = tree.children[:index] + (updated,) + tree.children[index + 1:]
            return tree.with_children(children)
    return tree


def respread(node: ShareNode) -> ShareNode:
    """Give every child of node an equal share of 100 (integer division)."""
    if not node.children:
        return node
    share = 100 // len(node.children)
    return node.with_children(child.replace(share=share) for child in node.children)


def create_node(parent: ShareNode, label: str | None = None) -> ShareNode:
    """Create a detached leaf meant to be appended under parent.

    The id is one more than the largest id in parent's subtree, so pass
    the root to get an id that is unique across the whole tree.

    Args:
        parent: Node whose subtree is scanned for ids and whose children
            count drives the initial share guess.
        label: Optional label. Defaults to 'Node #<id>'.

    Returns:
        A new ShareNode with qty 0 and share 100 // (children + 1).
        The share is a first guess: append_child re-spreads it.
    """
    node_id = max_id(parent) + 1
    return ShareNode(
        id=node_id,
        label=label if label is not None else f"Node #{node_id}",
        qty=0,
        share=100 // (len(parent.children) + 1),
    )


def append_child(parent_id: int, new_node: ShareNode, tree: ShareNode) -> ShareNode:
    """Insert new_node as the first child of parent_id and re-spread shares.

    Args:
        parent_id: Id of the node receiving the child.
        new_node: Node to insert, usually from create_node().
        tree: Root of the tree.

    Returns:
        The new tree, or tree itself if parent_id is absent.
    """
    def _prepend(parent: ShareNode) -> ShareNode:
        return respread(parent.with_children((new_node,) + parent.children))

    result = _update_node(parent_id, tree, _prepend)
    if result is tree:
        logger.debug("append_child: parent %s not found, tree unchanged", parent_id)
    return result


def delete_node(node_id: int, tree: ShareNode) -> ShareNode:
    """Remove node_id (and its subtree) and re-spread its siblings' shares.

    The root cannot be deleted: deleting it, or an unknown id, returns
    tree unchanged.
    """
    parent = get_parent(node_id, tree)
    if parent is None:
        logger.debug("delete_node: %s has no parent, tree unchanged", node_id)
        return tree

    def _remove(node: ShareNode) -> ShareNode:
        return respread(
            node.with_children(c for c in node.children if c.id != node_id)
        )

    return _update_node(parent.id, tree, _remove)


def update_label(node_id: int, label: str, tree: ShareNode) -> ShareNode:
    """Relabel node_id. No-op if absent."""
    result = _update_node(node_id, tree, lambda n: n.replace(label=label))
    if result is tree:
        logger.debug("update_label: %s not found, tree unchanged", node_id)
    return result


def update_share(node_id: int, share: int, tree: ShareNode) -> ShareNode:
    """Set the share of node_id as is.

    No validation and no re-spreading of siblings: this is the primitive
    used by distribute_share(). No-op if absent.
    """
    result = _update_node(node_id, tree, lambda n: n.replace(share=share))
    if result is tree:
        logger.debug("update_share: %s not found, tree unchanged", node_id)
    return result


def allow_expand(config: Any, level: int, children: Sequence[ShareNode]) -> bool:
    """Tell whether a node may receive one more child.

    Args:
        config: Object exposing max_children and max_levels (TreeSettings).
        level: Depth of the node being tested. Callers must count levels
            the same way everywhere; ShareTree uses root = 1.
        children: Current children of the node.

    Returns:
        True if below both the children cap and the depth cap.
    """
    return len(children) < config.max_children and level < config.max_levels
