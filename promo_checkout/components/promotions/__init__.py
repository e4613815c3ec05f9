"""
Promotions component - Bundle and pair promotion rules.
"""

from .component import (
    apply_promotion,
    consume_promotion,
    describe_promotion,
    match_promotion,
)
from .models import (
    BundlePromotion,
    InvalidRuleConfigurationError,
    PairPromotion,
    Promotion,
    PromotionKind,
    PromotionMatch,
)

__all__ = [
    # Functions
    "apply_promotion",
    "consume_promotion",
    "match_promotion",
    "describe_promotion",
    # Models
    "BundlePromotion",
    "PairPromotion",
    "Promotion",
    "PromotionKind",
    "PromotionMatch",
    # Exceptions
    "InvalidRuleConfigurationError",
]
