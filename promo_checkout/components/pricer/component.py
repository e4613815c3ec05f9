"""
Pricer component - Unit price lookup.

Charges items at their catalogue price. An unknown SKU is a data error and
always raises; it is never priced as zero.
"""

from __future__ import annotations

from promo_checkout.domain.entities import Cart, Price, Sku

from .models import PriceCartInput, PriceCartOutput
from .ports import UnitPricerPort

# --- Pure Functions ---


def unit_price(pricer: UnitPricerPort, sku: Sku) -> Price:
    """
    Price a single SKU.

    Raises:
        UnknownSkuError: If the SKU is not priced.
    """
    return pricer.unit_price(sku)


def charge(pricer: UnitPricerPort, cart: Cart) -> Price:
    """
    Price every item in the cart at unit rate.

    Raises:
        UnknownSkuError: If any SKU in the cart is not priced.
    """
    return pricer.charge(cart)


# --- Run Function (Atomic Component Pattern) ---


def run(inp: PriceCartInput, *, pricer: UnitPricerPort) -> PriceCartOutput:
    """
    Price a cart at unit rates with a per-SKU breakdown.

    Args:
        inp: Input holding the cart to price.
        pricer: Unit pricer port.

    Returns:
        PriceCartOutput with the total and one line total per SKU.
    """
    line_totals = {
        sku: unit_price(pricer, sku) * n for sku, n in sorted(inp.cart.counts().items())
    }
    return PriceCartOutput(total=sum(line_totals.values()), line_totals=line_totals)
