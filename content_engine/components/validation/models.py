"""
Validation component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ._impl import ValidationFinding


@dataclass(frozen=True)
class ValidateContentInput:
    """Input for validating a block sequence (typed blocks or raw mappings)."""

    blocks: list[Any]


@dataclass(frozen=True)
class ValidateContentOutput:
    """Validation result; success mirrors validity."""

    valid: bool
    findings: list[ValidationFinding] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    success: bool = True
