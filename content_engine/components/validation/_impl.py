"""
ContentValidator - structural checks over an ordered block sequence.

Key behaviors:
- Never raises; every problem in the sequence is reported, not just the first
- Accepts typed ContentBlocks and raw block mappings alike
- Findings are structured (block id, code, message, severity)
- Only error findings make a sequence invalid; warnings are advisory
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from content_engine.domain.blocks import UNKNOWN_BLOCK_ID, BlockView, view_block
from content_engine.domain.entities import BlockKind

Severity = Literal["error", "warning"]

_KNOWN_KINDS = frozenset(kind.value for kind in BlockKind)

# --- Configuration ---


@dataclass(frozen=True)
class ValidatorConfig:
    """Validator configuration from rules."""

    max_blocks: int | None = 200
    warn_on_duplicate_ids: bool = True


DEFAULT_CONFIG = ValidatorConfig()


# --- Findings ---


@dataclass(frozen=True)
class ValidationFinding:
    """One problem found in a block sequence."""

    block_id: str | None
    code: str
    message: str
    severity: Severity = "error"
    field: str | None = None


@dataclass(frozen=True)
class ValidationReport:
    """Result of validating a block sequence."""

    findings: list[ValidationFinding] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(f.severity == "error" for f in self.findings)

    @property
    def errors(self) -> list[str]:
        return [f.message for f in self.findings if f.severity == "error"]

    @property
    def warnings(self) -> list[str]:
        return [f.message for f in self.findings if f.severity == "warning"]


# --- Rules ---


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _check_generic(view: BlockView) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []

    if not view.kind:
        findings.append(
            ValidationFinding(
                block_id=view.id,
                code="missing_type",
                message=f"Block {view.id} is missing type",
                field="kind",
            )
        )
    elif view.kind not in _KNOWN_KINDS:
        findings.append(
            ValidationFinding(
                block_id=view.id,
                code="unknown_type",
                message=f"Block {view.id} has unknown type '{view.kind}'",
                field="kind",
            )
        )

    if not isinstance(view.content, Mapping):
        findings.append(
            ValidationFinding(
                block_id=view.id,
                code="missing_content",
                message=f"Block {view.id} is missing content",
                field="content",
            )
        )

    return findings


def _check_required_string(view: BlockView, key: str) -> list[ValidationFinding]:
    content = view.content if isinstance(view.content, Mapping) else {}
    if not _is_blank(content.get(key)):
        return []
    label = (view.kind or "").capitalize()
    return [
        ValidationFinding(
            block_id=view.id,
            code=f"missing_{key}",
            message=f"{label} block {view.id} is missing {key}",
            field=f"content.{key}",
        )
    ]


# Kind-specific rules. Kinds without an entry have no extra requirements.
KIND_RULES: dict[str, tuple[str, ...]] = {
    BlockKind.IMAGE.value: ("src",),
    BlockKind.VIDEO.value: ("src",),
    BlockKind.EMBED.value: ("url",),
}


def _check_kind(view: BlockView) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []
    for key in KIND_RULES.get(view.kind or "", ()):
        findings.extend(_check_required_string(view, key))
    return findings


def _check_sequence(
    views: list[BlockView],
    config: ValidatorConfig,
) -> list[ValidationFinding]:
    findings: list[ValidationFinding] = []

    if config.warn_on_duplicate_ids:
        counts = Counter(v.id for v in views if v.id != UNKNOWN_BLOCK_ID)
        for block_id, count in counts.items():
            if count > 1:
                findings.append(
                    ValidationFinding(
                        block_id=block_id,
                        code="duplicate_id",
                        message=f"Block {block_id} appears {count} times",
                        severity="warning",
                        field="id",
                    )
                )

    if config.max_blocks is not None and len(views) > config.max_blocks:
        findings.append(
            ValidationFinding(
                block_id=None,
                code="too_many_blocks",
                message=f"Content has {len(views)} blocks (max {config.max_blocks})",
                severity="warning",
            )
        )

    return findings


# --- Validator ---


class ContentValidator:
    """
    Validates block sequences.

    Validation is advisory: callers decide whether findings block an action
    such as publishing.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    def validate(self, blocks: Iterable[Any]) -> ValidationReport:
        views = [view_block(block) for block in blocks]
        findings: list[ValidationFinding] = []

        for view in views:
            findings.extend(_check_generic(view))
            findings.extend(_check_kind(view))

        findings.extend(_check_sequence(views, self._config))
        return ValidationReport(findings=findings)


def validate_content(
    blocks: Iterable[Any],
    config: ValidatorConfig | None = None,
) -> ValidationReport:
    """Validate a block sequence with the given (or default) configuration."""
    return ContentValidator(config).validate(blocks)
