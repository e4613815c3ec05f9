"""
Pricer component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from promo_checkout.domain.entities import Cart, Price, Sku


class UnitPricerPort(Protocol):
    """
    Port for unit-rate pricing.

    Implementations:
    - PriceTable: in-memory SKU -> price mapping
    """

    def unit_price(self, sku: Sku) -> Price:
        """
        Look up the unit price of one SKU.

        Raises:
            UnknownSkuError: If the SKU is not priced.
        """
        ...

    def charge(self, cart: Cart) -> Price:
        """
        Sum the unit price of every item in the cart.

        Raises:
            UnknownSkuError: If any SKU in the cart is not priced.
        """
        ...
