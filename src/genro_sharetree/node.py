# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ShareTree node class."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable


@dataclass(frozen=True)
class ShareNode:
    """A node in a classification tree.

    Each node has:
    - id: Integer identifier, unique within the tree
    - label: Display string
    - qty: Absolute quantity assigned to the node
    - share: Percentage (0-100) of the parent's qty allocated to the node
    - children: Ordered tuple of child ShareNode instances

    Nodes are immutable and hold no reference to their parent. Every
    change produces a new node through ``replace()``, so old trees stay
    valid for whoever still holds them.

    Example:
        >>> node = ShareNode(1, 'Root', qty=1000, share=100)
        >>> node.label
        'Root'
        >>> node.replace(label='All tickets').label
        'All tickets'
    """

    id: int
    label: str
    qty: int = 0
    share: int = 100
    children: tuple[ShareNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of children, store a tuple.
        if not isinstance(self.children, tuple):
            object.__setattr__(self, 'children', tuple(self.children))

    def __repr__(self) -> str:
        return (
            f"ShareNode({self.id!r}, {self.label!r}, qty={self.qty}, "
            f"share={self.share}, children={len(self.children)})"
        )

    @property
    def is_branch(self) -> bool:
        """True if this node has children."""
        return bool(self.children)

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def replace(self, **changes: Any) -> ShareNode:
        """Return a copy of this node with the given fields changed.

        Args:
            **changes: Field values to override (id, label, qty, share,
                children).

        Returns:
            A new ShareNode. Untouched children are shared, not copied.
        """
        return dataclasses.replace(self, **changes)

    def with_children(self, children: Iterable[ShareNode]) -> ShareNode:
        """Return a copy of this node with a new children sequence."""
        return dataclasses.replace(self, children=tuple(children))

    def get_prop(self, accessor: str | Callable[[ShareNode], Any]) -> Any:
        """Read a field of this node.

        Args:
            accessor: Field name ('label', 'qty', ...) or a callable
                receiving the node.

        Returns:
            The projected value.

        Raises:
            AttributeError: If accessor names an unknown field.
        """
        if callable(accessor):
            return accessor(self)
        if accessor not in _FIELD_NAMES:
            raise AttributeError(
                f"'{type(self).__name__}' has no field '{accessor}'"
            )
        return getattr(self, accessor)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(ShareNode))


def get_prop(accessor: str | Callable[[ShareNode], Any], node: ShareNode) -> Any:
    """Functional form of ShareNode.get_prop."""
    return node.get_prop(accessor)
