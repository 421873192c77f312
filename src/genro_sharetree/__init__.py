# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ShareTree - Classification trees with percentage shares.

An immutable tree engine where every node carries a share of its
parent's volume and a derived absolute quantity, with structural
mutation, proportional distribution and normalization to a minimum
quantity per node.
"""

import logging

__version__ = "0.1.0"

from .config import TreeSettings
from .distribution import distribute_qty, distribute_share
from .exceptions import (
    InvalidShareError,
    MaxLevelsExceededError,
    NormalizationError,
    ShareTreeError,
    TooManyChildrenError,
)
from .lookup import (
    find_node,
    find_nodes,
    get_parent,
    get_siblings,
    leaves,
    node_level,
    walk,
)
from .mutation import (
    allow_expand,
    append_child,
    create_node,
    delete_node,
    update_label,
    update_share,
)
from .node import ShareNode, get_prop
from .normalization import is_underfed, normalize
from .serialization import as_dict, encode, from_dict, to_json
from .tree import ShareTree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "ShareNode",
    "ShareTree",
    "TreeSettings",
    # Lookup
    "find_node",
    "find_nodes",
    "get_parent",
    "get_siblings",
    "get_prop",
    "walk",
    "leaves",
    "node_level",
    # Mutation
    "create_node",
    "append_child",
    "delete_node",
    "update_label",
    "update_share",
    "allow_expand",
    # Distribution
    "distribute_qty",
    "distribute_share",
    # Normalization
    "is_underfed",
    "normalize",
    # Serialization
    "encode",
    "to_json",
    "as_dict",
    "from_dict",
    # Exceptions
    "ShareTreeError",
    "InvalidShareError",
    "TooManyChildrenError",
    "MaxLevelsExceededError",
    "NormalizationError",
]
