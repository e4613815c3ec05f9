"""
Pricer component models.

Price table plus the input/output models for the component entry point.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from promo_checkout.domain.entities import Cart, Price, Sku

# --- Errors ---


class UnknownSkuError(LookupError):
    """Raised when a SKU has no entry in the price table."""

    def __init__(self, sku: Sku) -> None:
        self.sku = sku
        super().__init__(f"No unit price for SKU {sku!r}")


class InvalidPriceTableError(ValueError):
    """Raised when a price table entry is not a non-negative integer."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Invalid price table: {'; '.join(errors)}")


# --- Price Table ---


@dataclass(frozen=True)
class PriceTable:
    """
    Immutable SKU -> unit price mapping, fixed for the lifetime of a run.

    Satisfies UnitPricerPort.
    """

    prices: Mapping[Sku, Price] = field(default_factory=dict)

    def __post_init__(self) -> None:
        errors: list[str] = []
        for sku, price in self.prices.items():
            # bool is an int subclass but never a price
            if isinstance(price, bool) or not isinstance(price, int):
                errors.append(f"{sku!r}: price must be an integer, got {price!r}")
            elif price < 0:
                errors.append(f"{sku!r}: price must be non-negative, got {price}")
        if errors:
            raise InvalidPriceTableError(errors)
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    def unit_price(self, sku: Sku) -> Price:
        try:
            return self.prices[sku]
        except KeyError:
            raise UnknownSkuError(sku) from None

    def charge(self, cart: Cart) -> Price:
        return sum(self.unit_price(sku) * n for sku, n in cart.counts().items())

    def __contains__(self, sku: object) -> bool:
        return sku in self.prices

    def __iter__(self) -> Iterator[Sku]:
        return iter(self.prices)

    def __len__(self) -> int:
        return len(self.prices)

    __hash__ = None  # type: ignore[assignment]


# --- Entry Point Models ---


@dataclass(frozen=True)
class PriceCartInput:
    """Input for pricing a cart at unit rates."""

    cart: Cart


@dataclass(frozen=True)
class PriceCartOutput:
    """Output from unit-rate pricing."""

    total: Price
    line_totals: dict[Sku, Price] = field(default_factory=dict)
