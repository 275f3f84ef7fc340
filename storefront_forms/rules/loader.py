import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from storefront_forms.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "STOREFRONT_RULES_PATH"


def resolve_rules_path(path: Path | None = None) -> Path:
    """Explicit path wins, then STOREFRONT_RULES_PATH, then ./rules.yaml."""
    if path is not None:
        return path
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def extract_yaml_block(content: str) -> str:
    """Return the first ```yaml fenced block, or the content as-is if there is none."""
    lines = iter(content.splitlines())
    for line in lines:
        if line.strip().startswith("```yaml"):
            break
    else:
        return content

    block = []
    for line in lines:
        if line.strip().startswith("```"):
            break
        block.append(line)
    return "\n".join(block)


def load_rules(path: Path | None = None) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    path = resolve_rules_path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = extract_yaml_block(f.read())

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info(f"Loaded rules version {rules.rules_version} from {path}")
    return rules
