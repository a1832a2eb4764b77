"""
Validation component - pre-publish checks over block sequences.

Invariants:
- I1: Validation never raises
- I2: Every problem is reported; validation does not stop at the first one
- I3: Only error findings make content invalid
"""

from __future__ import annotations

from ._impl import ContentValidator, ValidatorConfig
from .models import ValidateContentInput, ValidateContentOutput
from .ports import RulesPort


def build_validator_config(rules: RulesPort | None) -> ValidatorConfig:
    """Build validator config from rules port."""
    if rules is None:
        return ValidatorConfig()
    return ValidatorConfig(
        max_blocks=rules.get_max_blocks_per_page(),
        warn_on_duplicate_ids=rules.get_warn_on_duplicate_ids(),
    )


# --- Component Entry Points ---


def run_validate(
    inp: ValidateContentInput,
    *,
    rules: RulesPort | None = None,
) -> ValidateContentOutput:
    """
    Validate a block sequence.

    Args:
        inp: Input containing the blocks.
        rules: Optional rules port for limits.

    Returns:
        ValidateContentOutput with every finding.
    """
    validator = ContentValidator(build_validator_config(rules))
    report = validator.validate(inp.blocks)

    return ValidateContentOutput(
        valid=report.valid,
        findings=list(report.findings),
        errors=report.errors,
        warnings=report.warnings,
        success=report.valid,
    )


def run(
    inp: ValidateContentInput,
    *,
    rules: RulesPort | None = None,
) -> ValidateContentOutput:
    """Main entry point for the validation component."""
    if isinstance(inp, ValidateContentInput):
        return run_validate(inp, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
