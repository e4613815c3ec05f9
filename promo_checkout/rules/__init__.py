"""
Pricing rules - Price table and promotion list configuration.
"""

from .loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    RulesLoadError,
    load_default_rules,
    load_rules,
    parse_rules,
    resolve_rules_path,
)
from .models import BundlePromotionRule, PairPromotionRule, PricingRules, PromotionRule

__all__ = [
    "load_rules",
    "load_default_rules",
    "parse_rules",
    "resolve_rules_path",
    "PricingRules",
    "BundlePromotionRule",
    "PairPromotionRule",
    "PromotionRule",
    "RulesLoadError",
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
]
