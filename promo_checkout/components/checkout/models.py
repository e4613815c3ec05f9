"""
Checkout component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from promo_checkout.components.promotions import Promotion
from promo_checkout.domain.entities import Cart, Price


@dataclass(frozen=True)
class CheckoutInput:
    """Input for checking out a cart under an ordered promotion list."""

    cart: Cart
    promotions: Sequence[Promotion] = ()


@dataclass(frozen=True)
class PromotionCharge:
    """What one promotion consumed and charged during checkout."""

    promotion: Promotion
    label: str
    matches: int
    charge: Price


@dataclass(frozen=True)
class CheckoutOutput:
    """Output from checkout with a per-promotion breakdown."""

    total: Price
    promotion_charges: list[PromotionCharge] = field(default_factory=list)
    remainder: Cart = field(default_factory=Cart)
    remainder_charge: Price = 0

    @property
    def promotion_total(self) -> Price:
        return sum(item.charge for item in self.promotion_charges)
