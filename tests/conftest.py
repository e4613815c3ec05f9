from pathlib import Path

import pytest

from promo_checkout.components.pricer import PriceTable
from promo_checkout.components.promotions import BundlePromotion, PairPromotion, Promotion

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def price_table() -> PriceTable:
    """Catalogue used throughout: a=50, b=30, c=20, d=15."""
    return PriceTable({"a": 50, "b": 30, "c": 20, "d": 15})


@pytest.fixture
def bundle_a() -> BundlePromotion:
    """Three a for 130."""
    return BundlePromotion(quantity=3, sku="a", price=130)


@pytest.fixture
def bundle_b() -> BundlePromotion:
    """Two b for 45."""
    return BundlePromotion(quantity=2, sku="b", price=45)


@pytest.fixture
def pair_cd() -> PairPromotion:
    """One c plus one d for 30."""
    return PairPromotion(first_sku="c", second_sku="d", price=30)


@pytest.fixture
def default_promotions(
    bundle_a: BundlePromotion, bundle_b: BundlePromotion, pair_cd: PairPromotion
) -> list[Promotion]:
    """Default ordered promotion list."""
    return [bundle_a, bundle_b, pair_cd]


@pytest.fixture
def rules_path() -> Path:
    """Path to the shipped rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"
