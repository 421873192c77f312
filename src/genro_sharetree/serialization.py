# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serialization of ShareNode trees.

Two shapes are provided:

- encode() / to_json(): the external form handed to renderers. It carries
  only ``label`` and ``children``; ids, quantities and shares are working
  state and stay out of it.
- as_dict() / from_dict(): a complete dump of every field, used to save
  and reload fixtures.
"""

from __future__ import annotations

import json
from typing import Any

from .node import ShareNode


def encode(node: ShareNode) -> dict[str, Any]:
    """Project node to ``{'label': ..., 'children': [...]}`` recursively.

    Example:
        >>> encode(ShareNode(1, 'Root', children=[ShareNode(2, 'A')]))
        {'label': 'Root', 'children': [{'label': 'A', 'children': []}]}
    """
    return {
        'label': node.label,
        'children': [encode(child) for child in node.children],
    }


def to_json(node: ShareNode, **kwargs: Any) -> str:
    """Return encode(node) as a JSON string. kwargs go to json.dumps."""
    return json.dumps(encode(node), **kwargs)


def as_dict(node: ShareNode) -> dict[str, Any]:
    """Dump every field of node and its subtree to plain dicts."""
    return {
        'id': node.id,
        'label': node.label,
        'qty': node.qty,
        'share': node.share,
        'children': [as_dict(child) for child in node.children],
    }


def from_dict(data: dict[str, Any]) -> ShareNode:
    """Rebuild a tree from as_dict() output.

    Args:
        data: Mapping with 'id' and 'label', and optionally 'qty'
            (default 0), 'share' (default 100) and 'children'.

    Returns:
        The rebuilt ShareNode.

    Raises:
        KeyError: If 'id' or 'label' is missing at any level.
    """
    return ShareNode(
        id=data['id'],
        label=data['label'],
        qty=data.get('qty', 0),
        share=data.get('share', 100),
        children=tuple(from_dict(child) for child in data.get('children', ())),
    )
