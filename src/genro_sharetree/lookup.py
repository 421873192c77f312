# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Identity and lookup in a ShareNode tree.

Nodes carry no parent reference: parents and siblings are found by
walking down from the root on every query. All searches are preorder
(current node first, then children in order), so when ids are not
unique the earliest node in traversal order wins.

Example:
    >>> tree = ShareNode(1, 'Root', children=[ShareNode(2, 'A'), ShareNode(3, 'B')])
    >>> find_node(3, tree).label
    'B'
    >>> get_parent(3, tree).id
    1
    >>> [n.id for n in get_siblings(3, tree)]
    [2]
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .node import ShareNode


def find_node(node_id: int, tree: ShareNode) -> ShareNode | None:
    """Find the first node with the given id.

    Args:
        node_id: The id to search for.
        tree: Root of the tree to search.

    Returns:
        The matching ShareNode, or None if absent.
    """
    if tree.id == node_id:
        return tree
    for child in tree.children:
        found = find_node(node_id, child)
        if found is not None:
            return found
    return None


def find_nodes(node_ids: Iterable[int], tree: ShareNode) -> list[ShareNode | None]:
    """Find several nodes, one result slot per requested id.

    Args:
        node_ids: Ids to search for. Order and duplicates are preserved.
        tree: Root of the tree to search.

    Returns:
        List aligned with node_ids, None where an id is absent.
    """
    return [find_node(node_id, tree) for node_id in node_ids]


def get_parent(node_id: int, tree: ShareNode) -> ShareNode | None:
    """Find the node whose direct children include node_id.

    Returns None for the root's own id and for unknown ids.
    """
    for child in tree.children:
        if child.id == node_id:
            return tree
    for child in tree.children:
        found = get_parent(node_id, child)
        if found is not None:
            return found
    return None


def get_siblings(node_id: int, tree: ShareNode) -> list[ShareNode]:
    """Return the other children of node_id's parent, in order.

    Returns an empty list when the node is the root or absent.
    """
    parent = get_parent(node_id, tree)
    if parent is None:
        return []
    return [child for child in parent.children if child.id != node_id]


def walk(tree: ShareNode) -> Iterator[tuple[int, ShareNode]]:
    """Yield (level, node) pairs in preorder, the root being level 1.

    Example:
        >>> for level, node in walk(tree):
        ...     print('  ' * level, node.label, node.qty)
    """
    def _walk_gen(node: ShareNode, level: int) -> Iterator[tuple[int, ShareNode]]:
        yield level, node
        for child in node.children:
            yield from _walk_gen(child, level + 1)

    return _walk_gen(tree, 1)


def iter_ids(tree: ShareNode) -> Iterator[int]:
    """Yield every id in the tree in preorder."""
    for _, node in walk(tree):
        yield node.id


def max_id(tree: ShareNode) -> int:
    """Return the largest id found anywhere in the tree, root included."""
    return max(iter_ids(tree))


def leaves(tree: ShareNode) -> list[ShareNode]:
    """Return the leaf nodes in preorder."""
    return [node for _, node in walk(tree) if node.is_leaf]


def node_level(node_id: int, tree: ShareNode) -> int | None:
    """Return the depth of node_id (root = 1), or None if absent."""
    for level, node in walk(tree):
        if node.id == node_id:
            return level
    return None
