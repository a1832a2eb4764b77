"""
Render component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing render rules configuration."""

    def get_escape_html(self) -> bool:
        """Get whether interpolated values are HTML-escaped."""
        ...

    def get_fragment_separator(self) -> str:
        """Get the string placed between rendered blocks."""
        ...

    def get_forbidden_protocols(self) -> list[str]:
        """Get URL protocols that are never emitted (e.g. javascript:)."""
        ...
