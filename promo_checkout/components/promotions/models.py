"""
Promotions component models.

Promotion rules form a closed set of two immutable shapes. Each carries a
flat price charged once per match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from promo_checkout.domain.entities import Price, Sku

PromotionKind = Literal["bundle", "pair"]


class InvalidRuleConfigurationError(ValueError):
    """Raised when a promotion rule is constructed with invalid values."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid promotion rule: {'; '.join(errors)}")


def _price_errors(price: Price) -> list[str]:
    if isinstance(price, bool) or not isinstance(price, int):
        return [f"price must be an integer, got {price!r}"]
    if price < 0:
        return [f"price must be non-negative, got {price}"]
    return []


# --- Rule Shapes ---


@dataclass(frozen=True)
class BundlePromotion:
    """
    ``quantity`` units of one SKU for a flat ``price``.

    Example: BundlePromotion(3, "a", 130) charges 130 for every three ``a``.
    """

    quantity: int
    sku: Sku
    price: Price
    kind: PromotionKind = field(default="bundle", init=False)

    def __post_init__(self) -> None:
        errors: list[str] = []
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            errors.append(f"quantity must be an integer, got {self.quantity!r}")
        elif self.quantity < 1:
            errors.append(f"quantity must be at least 1, got {self.quantity}")
        errors.extend(_price_errors(self.price))
        if errors:
            raise InvalidRuleConfigurationError(errors)


@dataclass(frozen=True)
class PairPromotion:
    """
    One unit each of two distinct SKUs for a flat ``price``.

    Matching is by presence, so PairPromotion("c", "d", p) and
    PairPromotion("d", "c", p) price every cart the same.
    """

    first_sku: Sku
    second_sku: Sku
    price: Price
    kind: PromotionKind = field(default="pair", init=False)

    def __post_init__(self) -> None:
        errors: list[str] = []
        if self.first_sku == self.second_sku:
            errors.append(f"pair must name two distinct SKUs, got {self.first_sku!r} twice")
        errors.extend(_price_errors(self.price))
        if errors:
            raise InvalidRuleConfigurationError(errors)


Promotion = BundlePromotion | PairPromotion


# --- Match Result ---


@dataclass(frozen=True)
class PromotionMatch:
    """How often a promotion matches a cart, and what it would consume."""

    promotion: Promotion
    matches: int
    consumed: dict[Sku, int] = field(default_factory=dict)

    @property
    def charge(self) -> Price:
        return self.matches * self.promotion.price
