"""
Checkout component - Price a cart under an ordered promotion list.

Every operation works on a private copy of the caller's cart. Promotions run
in the order given, each seeing the cart as reduced by the ones before it;
whatever survives all of them is charged at unit rate.

Matching is greedy and order-dependent. When two promotions compete for the
same SKU the earlier one wins. No attempt is made to find the cheapest
assignment of items to promotions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from promo_checkout.components.pricer import UnitPricerPort, charge
from promo_checkout.components.promotions import (
    BundlePromotion,
    PairPromotion,
    Promotion,
    consume_promotion,
    describe_promotion,
)
from promo_checkout.domain.entities import Cart, Price

from .models import CheckoutInput, CheckoutOutput, PromotionCharge

logger = logging.getLogger(__name__)


def _as_sequence(promotions: Promotion | Sequence[Promotion] | None) -> Sequence[Promotion]:
    if promotions is None:
        return ()
    if isinstance(promotions, (BundlePromotion, PairPromotion)):
        return (promotions,)
    return promotions


# --- Run Function (Atomic Component Pattern) ---


def run(inp: CheckoutInput, *, pricer: UnitPricerPort) -> CheckoutOutput:
    """
    Check out a cart, recording what each promotion charged.

    Args:
        inp: Cart and ordered promotion list.
        pricer: Unit pricer for the remainder.

    Returns:
        CheckoutOutput with the total, the per-promotion breakdown and the
        unconsumed remainder.

    Raises:
        UnknownSkuError: If an unconsumed SKU has no unit price.
    """
    working = inp.cart.copy()
    charges: list[PromotionCharge] = []

    for promotion in inp.promotions:
        match = consume_promotion(promotion, working)

        label = describe_promotion(promotion)
        logger.debug("Promotion %s matched %d time(s) for %d", label, match.matches, match.charge)
        charges.append(
            PromotionCharge(
                promotion=promotion,
                label=label,
                matches=match.matches,
                charge=match.charge,
            )
        )

    remainder_charge = charge(pricer, working)
    total = sum(item.charge for item in charges) + remainder_charge
    logger.debug(
        "Checkout of %d item(s): promotions=%d remainder=%d total=%d",
        len(inp.cart),
        total - remainder_charge,
        remainder_charge,
        total,
    )

    return CheckoutOutput(
        total=total,
        promotion_charges=charges,
        remainder=working,
        remainder_charge=remainder_charge,
    )


def price(
    cart: Cart,
    promotions: Promotion | Sequence[Promotion] | None = None,
    *,
    pricer: UnitPricerPort,
) -> Price:
    """
    Total price of a cart.

    ``promotions`` may be omitted (unit rates only), a single promotion, or an
    ordered sequence of promotions. The caller's cart is never mutated.

    Raises:
        UnknownSkuError: If an unconsumed SKU has no unit price.
    """
    result = run(CheckoutInput(cart=cart, promotions=_as_sequence(promotions)), pricer=pricer)
    return result.total
