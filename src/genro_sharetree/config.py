# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration bundle for ShareTree.

Uses pydantic-settings, so every option can come from keyword arguments,
from ``SHARETREE_*`` environment variables or from a ``.env`` file.

Usage:
    from genro_sharetree.config import TreeSettings

    settings = TreeSettings(max_children=4)
    settings = TreeSettings.from_mapping({'globalQty': 50000, 'maxLevels': 2})
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import Field, model_validator
from pydantic.alias_generators import to_snake
from pydantic_settings import BaseSettings, SettingsConfigDict


class TreeSettings(BaseSettings):
    """Limits and volumes consumed by the tree engine.

    Instances are frozen: build a new one with ``model_copy(update=...)``
    to change a value.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHARETREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # === Volumes ===
    # Total volume distributed from the root
    global_qty: int = Field(default=100_000, ge=0)
    # Upper bound for the total when normalization grows it
    max_global_qty: int = Field(default=1_000_000, ge=0)
    # Threshold below which a node is underfed
    min_node_qty: int = Field(default=3_000, ge=0)

    # === Shape limits (see allow_expand) ===
    max_children: int = Field(default=6, gt=0)
    max_levels: int = Field(default=3, gt=0)

    # === Normalization ===
    auto_normalize: bool = False
    normalize_step: int = Field(default=1_000, gt=0)
    max_normalize_iterations: int = Field(default=10_000, gt=0)

    @model_validator(mode="after")
    def check_bounds(self) -> TreeSettings:
        if self.global_qty > self.max_global_qty:
            raise ValueError(
                f"global_qty ({self.global_qty}) exceeds "
                f"max_global_qty ({self.max_global_qty})"
            )
        if self.min_node_qty > self.max_global_qty:
            raise ValueError(
                f"min_node_qty ({self.min_node_qty}) exceeds "
                f"max_global_qty ({self.max_global_qty})"
            )
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TreeSettings:
        """Build settings from a mapping with camelCase or snake_case keys.

        Example:
            >>> TreeSettings.from_mapping({'maxChildren': 3}).max_children
            3
        """
        return cls(**{to_snake(key): value for key, value in data.items()})
