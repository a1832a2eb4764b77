"""
Validation component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing validation rules configuration."""

    def get_max_blocks_per_page(self) -> int:
        """Get the block count above which a warning is reported."""
        ...

    def get_warn_on_duplicate_ids(self) -> bool:
        """Get whether duplicate block ids are reported."""
        ...
