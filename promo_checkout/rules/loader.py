"""
Pricing rules loader.

Reads the price table and ordered promotion list from a YAML file and
validates it before any cart is priced. Invalid rules fail fast.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from promo_checkout.components.promotions import InvalidRuleConfigurationError
from promo_checkout.rules.models import PricingRules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "rules.yaml"

# Environment variable overriding the rules file location
RULES_PATH_ENV = "PRICING_RULES_PATH"


class RulesLoadError(ValueError):
    """Raised when a rules file cannot be parsed or fails validation."""


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def _strip_code_fence(content: str) -> str:
    """Return the body of the first ```yaml block, or the content unchanged."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def resolve_rules_path(path: Path | str | None = None) -> Path:
    """
    Pick the rules file to load.

    Explicit path first, then the PRICING_RULES_PATH environment variable,
    then rules.yaml at the project root.
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def parse_rules(content: str) -> PricingRules:
    """
    Parse and validate rules from YAML text.

    Raises:
        RulesLoadError: On YAML syntax errors, schema violations, invalid
            promotions, or promotions naming unpriced SKUs.
    """
    try:
        data = yaml.safe_load(_strip_code_fence(content))
    except yaml.YAMLError as e:
        raise RulesLoadError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = PricingRules.model_validate(data)
    except ValidationError as e:
        raise RulesLoadError(f"Rules validation failed:\n{e}") from e

    try:
        rules.promotion_rules()
    except InvalidRuleConfigurationError as e:
        raise RulesLoadError(str(e)) from e

    unknown = rules.unknown_skus()
    if unknown:
        raise RulesLoadError(
            f"Promotions reference SKUs without a unit price: {sorted(unknown)}"
        )

    return rules


def load_rules(path: Path | str) -> PricingRules:
    """
    Load and validate a rules file.

    Raises:
        FileNotFoundError: If the file is missing.
        RulesLoadError: If the file is malformed or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    rules = parse_rules(path.read_text())
    logger.info(
        "Loaded pricing rules from %s (%d SKUs, %d promotions)",
        path,
        len(rules.unit_prices),
        len(rules.promotions),
    )
    return rules


def load_default_rules() -> PricingRules:
    """Load rules from the resolved default location."""
    return load_rules(resolve_rules_path())
