"""
Content component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from content_engine.components.blocks.ports import IdGeneratorPort
from content_engine.components.render.ports import RulesPort as RenderRulesPort
from content_engine.components.validation.ports import RulesPort as ValidationRulesPort

__all__ = ["IdGeneratorPort", "MediaResolverPort", "RulesPort", "TimePort"]


class TimePort(Protocol):
    """Port for time operations."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class MediaResolverPort(Protocol):
    """Port for resolving media references held in block content."""

    def resolve(self, reference: str) -> bool:
        """Check if a src/url reference points at an existing media asset."""
        ...


class RulesPort(ValidationRulesPort, RenderRulesPort, Protocol):
    """Port for accessing content rules configuration.

    Includes the validation and render getters, since publishing validates
    and previewing renders.
    """

    def get_block_id_prefix(self) -> str:
        """Get the prefix for generated block ids."""
        ...

    def get_slug_pattern(self) -> str:
        """Get the regex a page slug must match."""
        ...

    def get_slug_min_length(self) -> int:
        """Get the minimum slug length."""
        ...

    def get_slug_max_length(self) -> int:
        """Get the maximum slug length."""
        ...

    def get_title_min_length(self) -> int:
        """Get the minimum title length."""
        ...

    def get_title_max_length(self) -> int:
        """Get the maximum title length."""
        ...

    def get_require_valid_content_to_publish(self) -> bool:
        """Get whether block validation errors block publishing."""
        ...

    def get_block_publish_if_missing_media(self) -> bool:
        """Get whether unresolvable media references block publishing."""
        ...
