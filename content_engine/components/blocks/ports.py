"""
Blocks component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class IdGeneratorPort(Protocol):
    """Source of block identifiers."""

    def next(self) -> str:
        """
        Return a new identifier.

        Identifiers must be unique for the lifetime of the process. They do
        not need to be unpredictable.
        """
        ...


class RulesPort(Protocol):
    """Port for accessing block rules configuration."""

    def get_block_id_prefix(self) -> str:
        """Get the prefix used for generated block ids."""
        ...
