import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from content_engine.rules.models import Rules

RULES_ENV_VAR = "CONTENT_ENGINE_RULES"

logger = logging.getLogger(__name__)


def rules_path_from_env(default: Path = Path("rules.yaml")) -> Path:
    """Resolve the rules file location, honouring CONTENT_ENGINE_RULES."""
    return Path(os.environ.get(RULES_ENV_VAR, str(default)))


def _extract_yaml(content: str) -> str:
    # Rules may live inside a markdown ```yaml fence; use the first one found
    lines = content.splitlines()
    yaml_lines = []
    in_block = False
    found_block = False

    for line in lines:
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info(
        "Loaded rules %s for %s (version %s)", path, rules.project.slug, rules.project.rules_version
    )
    return rules
