# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Normalization - grow the total until no node is underfed.

normalize() repeatedly adds a fixed step to the root qty and spreads the
new total with distribute_qty() until every node in the tree reaches the
minimum quantity. The search is linear, so it is bounded by an iteration
cap and an optional total ceiling; a node with a zero share can never be
lifted and is rejected before looping.
"""

from __future__ import annotations

import logging

from .distribution import distribute_qty
from .exceptions import NormalizationError
from .lookup import walk
from .node import ShareNode

logger = logging.getLogger(__name__)

DEFAULT_STEP = 1000
DEFAULT_MAX_ITERATIONS = 10_000


def is_underfed(min_qty: int, node: ShareNode) -> bool:
    """True if node or any of its descendants has qty below min_qty."""
    if node.qty < min_qty:
        return True
    return any(is_underfed(min_qty, child) for child in node.children)


def _zero_share_nodes(node: ShareNode) -> list[ShareNode]:
    return [n for level, n in walk(node) if level > 1 and n.share <= 0]


def normalize(
    min_qty: int,
    node: ShareNode,
    step: int = DEFAULT_STEP,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    max_qty: int | None = None,
) -> ShareNode:
    """Raise node's qty by step until no node in the subtree is underfed.

    Args:
        min_qty: Minimum qty every node must reach.
        node: Root of the subtree to normalize.
        step: Increment added to node.qty at each iteration.
        max_iterations: Number of increments allowed before giving up.
        max_qty: Optional ceiling the total may not cross.

    Returns:
        The normalized tree, or node itself if nothing is underfed.

    Raises:
        ValueError: If step or max_iterations is not positive.
        NormalizationError: If a zero-share node makes the minimum
            unreachable, or the cap or ceiling is hit first.

    Example:
        >>> tree = distribute_qty(1000, root)
        >>> tree = normalize(300, tree)
        >>> is_underfed(300, tree)
        False
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if max_iterations <= 0:
        raise ValueError(f"max_iterations must be positive, got {max_iterations}")

    if not is_underfed(min_qty, node):
        return node

    if min_qty > 0:
        stuck = _zero_share_nodes(node)
        if stuck:
            ids = ', '.join(str(n.id) for n in stuck)
            raise NormalizationError(
                f"nodes with zero share can never reach {min_qty}: {ids}",
                iterations=0,
                qty=node.qty,
            )

    iterations = 0
    while is_underfed(min_qty, node):
        if iterations >= max_iterations:
            raise NormalizationError(
                f"normalization exceeded {max_iterations} iterations",
                iterations=iterations,
                qty=node.qty,
            )
        qty = node.qty + step
        if max_qty is not None and qty > max_qty:
            raise NormalizationError(
                f"normalization would raise total to {qty}, above {max_qty}",
                iterations=iterations,
                qty=node.qty,
            )
        node = distribute_qty(qty, node)
        iterations += 1
        logger.debug("normalize: step %d, total %d", iterations, qty)

    logger.info(
        "normalize: reached %d after %d iterations (min %d)",
        node.qty, iterations, min_qty,
    )
    return node
