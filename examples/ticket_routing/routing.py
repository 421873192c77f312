# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Ticket routing - Example classification tree.

A didactic example splitting a daily ticket volume across support teams,
then normalizing it so that every team receives a workable minimum.

Usage:
    python examples/ticket_routing/routing.py
"""

from __future__ import annotations

import logging

from genro_sharetree import ShareTree, TreeSettings


def build_routing(settings: TreeSettings) -> ShareTree:
    """Build Root -> (Billing, Technical -> (Network, Hardware), Sales)."""
    tree = ShareTree(settings=settings)
    tree = tree.append(1, 'Sales').append(1, 'Technical').append(1, 'Billing')
    technical = next(n for n in tree if n.label == 'Technical')
    tree = tree.append(technical.id, 'Hardware').append(technical.id, 'Network')
    tree = tree.set_share(technical.id, 60)
    return tree


def show(tree: ShareTree) -> None:
    for level, node in tree.walk():
        print(f"{'    ' * (level - 1)}{node.label:<12} {node.share:>3}%  {node.qty:>7}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    settings = TreeSettings(global_qty=8000, min_node_qty=1500, max_levels=3)
    tree = build_routing(settings)
    print("Before normalization:")
    show(tree)

    tree = tree.normalize()
    print("\nAfter normalization:")
    show(tree)

    print("\nEncoded for rendering:")
    print(tree.to_json(indent=2))


if __name__ == '__main__':
    main()
