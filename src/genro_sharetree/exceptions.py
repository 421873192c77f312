# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ShareTree exceptions."""

from __future__ import annotations


class ShareTreeError(Exception):
    """Base exception for ShareTree errors."""

    pass


class InvalidShareError(ShareTreeError, ValueError):
    """Raised when a share outside the 0..100 range is distributed."""

    pass


class TooManyChildrenError(ShareTreeError):
    """Raised when a node already holds the maximum number of children."""

    pass


class MaxLevelsExceededError(ShareTreeError):
    """Raised when a node sits too deep in the tree to receive children."""

    pass


class NormalizationError(ShareTreeError):
    """Raised when normalization cannot lift every node to the minimum.

    Attributes:
        iterations: Number of growth steps performed before giving up.
        qty: Total quantity reached when the loop stopped.
    """

    def __init__(self, message: str, iterations: int = 0, qty: int = 0) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.qty = qty
