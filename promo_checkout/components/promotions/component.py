"""
Promotions component - Match and apply promotion rules.

Matching is a multiset count test, never a positional search: a bundle of
``n`` x ``s`` matches ``count(s) // n`` times, a pair of ``s1``/``s2``
matches ``min(count(s1), count(s2))`` times. Applying a rule removes
everything its matches consume and returns their combined price.

Items are fungible, so which physical occurrences get removed is immaterial.
"""

from __future__ import annotations

from promo_checkout.domain.entities import Cart, Price

from .models import BundlePromotion, PairPromotion, Promotion, PromotionMatch


def match_promotion(promotion: Promotion, cart: Cart) -> PromotionMatch:
    """
    Count how often a promotion matches a cart without mutating it.

    Raises:
        TypeError: If ``promotion`` is not a known rule shape.
    """
    if isinstance(promotion, BundlePromotion):
        matches = cart.count(promotion.sku) // promotion.quantity
        consumed = {promotion.sku: matches * promotion.quantity} if matches else {}
        return PromotionMatch(promotion=promotion, matches=matches, consumed=consumed)

    if isinstance(promotion, PairPromotion):
        matches = min(cart.count(promotion.first_sku), cart.count(promotion.second_sku))
        consumed = (
            {promotion.first_sku: matches, promotion.second_sku: matches} if matches else {}
        )
        return PromotionMatch(promotion=promotion, matches=matches, consumed=consumed)

    raise TypeError(f"Unsupported promotion type: {type(promotion).__name__}")


def consume_promotion(promotion: Promotion, cart: Cart) -> PromotionMatch:
    """
    Remove every match of ``promotion`` from ``cart``.

    Mutates the cart. With zero matches the cart is left as it was.

    Returns:
        The PromotionMatch that was consumed.
    """
    match = match_promotion(promotion, cart)
    for sku, n in match.consumed.items():
        cart.remove(sku, n)
    return match


def apply_promotion(promotion: Promotion, cart: Cart) -> Price:
    """
    Consume every match of ``promotion`` from ``cart``.

    Mutates the cart. With zero matches the cart is left as it was and the
    result is 0.

    Returns:
        Total promotional price of everything consumed.
    """
    return consume_promotion(promotion, cart).charge


def describe_promotion(promotion: Promotion) -> str:
    """Short label such as ``"3 x a for 130"`` or ``"c + d for 30"``."""
    if isinstance(promotion, BundlePromotion):
        return f"{promotion.quantity} x {promotion.sku} for {promotion.price}"
    if isinstance(promotion, PairPromotion):
        return f"{promotion.first_sku} + {promotion.second_sku} for {promotion.price}"
    raise TypeError(f"Unsupported promotion type: {type(promotion).__name__}")
