"""
Core pricing entities.

A cart is a multiset of SKUs. Order of items never affects pricing, so the
cart is stored as a frequency mapping rather than a sequence.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

# --- Scalars ---
Sku = str
Price = int


# --- Cart ---


class Cart:
    """
    Mutable multiset of SKUs awaiting pricing.

    Built from any iterable of SKUs. A plain string is iterated character by
    character, so ``Cart.from_items("aab")`` holds two ``a`` and one ``b``.
    """

    __slots__ = ("_counts",)

    def __init__(self, counts: Mapping[Sku, int] | None = None) -> None:
        self._counts: Counter[Sku] = Counter()
        for sku, n in (counts or {}).items():
            self.add(sku, n)

    @classmethod
    def from_items(cls, items: Iterable[Sku]) -> Cart:
        """
        Build a cart listing one SKU per item.

        Raises:
            TypeError: If ``items`` is a mapping; use ``Cart(counts)`` instead.
        """
        if isinstance(items, Mapping):
            raise TypeError("from_items takes an iterable of SKUs; use Cart(counts) for a mapping")
        cart = cls()
        for sku in items:
            cart.add(sku)
        return cart

    # --- Queries ---

    def count(self, sku: Sku) -> int:
        """Number of occurrences of ``sku`` in the cart."""
        return self._counts[sku]

    def counts(self) -> Mapping[Sku, int]:
        """Read-only snapshot of SKU frequencies (zero counts omitted)."""
        return MappingProxyType(+self._counts)

    def skus(self) -> set[Sku]:
        return {sku for sku, n in self._counts.items() if n > 0}

    def copy(self) -> Cart:
        cart = Cart()
        cart._counts = self._counts.copy()
        return cart

    # --- Mutation ---

    def add(self, sku: Sku, n: int = 1) -> None:
        if n < 0:
            raise ValueError(f"Cannot add a negative quantity ({n}) of {sku!r}")
        if n:
            self._counts[sku] += n

    def remove(self, sku: Sku, n: int = 1) -> None:
        """
        Remove ``n`` occurrences of ``sku``.

        Raises:
            ValueError: If ``n`` is negative or fewer than ``n`` are present.
        """
        if n < 0:
            raise ValueError(f"Cannot remove a negative quantity ({n}) of {sku!r}")
        present = self._counts[sku]
        if present < n:
            raise ValueError(f"Cart holds {present} x {sku!r}, cannot remove {n}")
        if present == n:
            del self._counts[sku]
        else:
            self._counts[sku] = present - n

    # --- Dunder ---

    def __iter__(self) -> Iterator[Sku]:
        return self._counts.elements()

    def __len__(self) -> int:
        return self._counts.total()

    def __contains__(self, sku: object) -> bool:
        return self._counts.get(sku, 0) > 0  # type: ignore[call-overload]

    def __add__(self, other: Cart) -> Cart:
        if not isinstance(other, Cart):
            return NotImplemented
        cart = Cart()
        cart._counts = self._counts + other._counts
        return cart

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cart):
            return NotImplemented
        return +self._counts == +other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{sku!r}: {n}" for sku, n in sorted(self._counts.items()))
        return f"Cart({{{body}}})"
