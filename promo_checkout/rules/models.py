from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from promo_checkout.components.pricer import PriceTable
from promo_checkout.components.promotions import BundlePromotion, PairPromotion, Promotion

# YAML booleans must not coerce to 0 or 1
PriceValue = Annotated[StrictInt, Field(ge=0)]
QuantityValue = Annotated[StrictInt, Field(ge=1)]


class BundlePromotionRule(BaseModel):
    kind: Literal["bundle"]
    quantity: QuantityValue
    sku: str
    price: PriceValue

    model_config = ConfigDict(extra="forbid")

    def to_promotion(self) -> BundlePromotion:
        return BundlePromotion(quantity=self.quantity, sku=self.sku, price=self.price)

    def skus(self) -> set[str]:
        return {self.sku}

class PairPromotionRule(BaseModel):
    kind: Literal["pair"]
    first_sku: str
    second_sku: str
    price: PriceValue

    model_config = ConfigDict(extra="forbid")

    def to_promotion(self) -> PairPromotion:
        return PairPromotion(
            first_sku=self.first_sku, second_sku=self.second_sku, price=self.price
        )

    def skus(self) -> set[str]:
        return {self.first_sku, self.second_sku}

PromotionRule = Annotated[BundlePromotionRule | PairPromotionRule, Field(discriminator="kind")]

class PricingRules(BaseModel):
    schema_version: Literal[1] = 1
    unit_prices: dict[str, PriceValue]
    promotions: list[PromotionRule] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def price_table(self) -> PriceTable:
        return PriceTable(self.unit_prices)

    def promotion_rules(self) -> list[Promotion]:
        """Domain promotions in file order. Order is application order."""
        return [rule.to_promotion() for rule in self.promotions]

    def unknown_skus(self) -> set[str]:
        """SKUs named by a promotion but missing from unit_prices."""
        named: set[str] = set()
        for rule in self.promotions:
            named |= rule.skus()
        return named - set(self.unit_prices)
