# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Quantity and share distribution."""

from __future__ import annotations

from .exceptions import InvalidShareError
from .lookup import find_node, get_siblings
from .mutation import update_share
from .node import ShareNode


def distribute_qty(qty: int, tree: ShareNode) -> ShareNode:
    """Set tree's qty and spread it down proportionally to shares.

    Each child receives ``qty * child.share // 100`` and passes its own
    qty further down. Call it on the root with the total volume to
    refresh the quantities of a whole tree.

    Example:
        >>> root = ShareNode(1, 'Root', children=[
        ...     ShareNode(2, 'A', share=25), ShareNode(3, 'B', share=75)])
        >>> [c.qty for c in distribute_qty(1000, root).children]
        [250, 750]
    """
    return tree.replace(
        qty=qty,
        children=tuple(
            distribute_qty(qty * child.share // 100, child) for child in tree.children
        ),
    )


def distribute_share(node_id: int, share: int, tree: ShareNode) -> ShareNode:
    """Give node_id a new share and split the rest among its siblings.

    Every sibling receives ``(100 - share) // len(siblings)``, floored at
    1 so that rounding never zeroes a sibling. Siblings are updated first
    and the target last, so the target's own value always wins.

    Args:
        node_id: Node whose share changes.
        share: New share, 0 to 100.
        tree: Root of the tree.

    Returns:
        The new tree. Quantities are not recomputed: follow with
        distribute_qty() to refresh them. An unknown node_id returns
        tree itself, whatever the share.

    Raises:
        InvalidShareError: If node_id is present and share is outside
            0..100.
    """
    if find_node(node_id, tree) is None:
        return tree
    if not 0 <= share <= 100:
        raise InvalidShareError(f"share must be between 0 and 100, got {share}")

    siblings = get_siblings(node_id, tree)
    if siblings:
        sibling_share = (100 - share) // len(siblings) or 1
        for sibling in siblings:
            tree = update_share(sibling.id, sibling_share, tree)
    return update_share(node_id, share, tree)
