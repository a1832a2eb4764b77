"""
Validation component - pre-publish checks over block sequences.
"""

from ._impl import (
    DEFAULT_CONFIG,
    KIND_RULES,
    ContentValidator,
    Severity,
    ValidationFinding,
    ValidationReport,
    ValidatorConfig,
    validate_content,
)
from .component import build_validator_config, run, run_validate
from .models import ValidateContentInput, ValidateContentOutput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_validate",
    "build_validator_config",
    # Models
    "ValidateContentInput",
    "ValidateContentOutput",
    # Ports
    "RulesPort",
    # Validator
    "ContentValidator",
    "DEFAULT_CONFIG",
    "KIND_RULES",
    "Severity",
    "ValidationFinding",
    "ValidationReport",
    "ValidatorConfig",
    "validate_content",
]
