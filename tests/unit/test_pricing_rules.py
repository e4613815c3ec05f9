"""
Pricing rules loader tests.

Verifies that rules files are parsed, validated and converted to domain
values, and that invalid rules fail fast.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from promo_checkout.components.promotions import BundlePromotion, PairPromotion
from promo_checkout.rules import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    PricingRules,
    RulesLoadError,
    load_rules,
    parse_rules,
    resolve_rules_path,
)


def write_rules(tmp_path: Path, rules: dict) -> Path:
    """Write a rules dict as YAML and return its path."""
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.safe_dump(rules))
    return path


@pytest.fixture
def rules_dict() -> dict:
    return {
        "schema_version": 1,
        "unit_prices": {"a": 50, "b": 30, "c": 20, "d": 15},
        "promotions": [
            {"kind": "bundle", "quantity": 3, "sku": "a", "price": 130},
            {"kind": "pair", "first_sku": "c", "second_sku": "d", "price": 30},
        ],
    }


class TestRulesLoading:
    """Loading rules files."""

    def test_load_shipped_rules(self, rules_path: Path) -> None:
        """The shipped rules.yaml loads and keeps promotion order."""
        rules = load_rules(rules_path)
        assert rules.unit_prices == {"a": 50, "b": 30, "c": 20, "d": 15}
        assert rules.promotion_rules() == [
            BundlePromotion(quantity=3, sku="a", price=130),
            BundlePromotion(quantity=2, sku="b", price=45),
            PairPromotion(first_sku="c", second_sku="d", price=30),
        ]

    def test_load_nonexistent_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Broken YAML raises RulesLoadError chained to the YAML error."""
        path = tmp_path / "rules.yaml"
        path.write_text("unit_prices: {a: [")
        with pytest.raises(RulesLoadError) as exc_info:
            load_rules(path)
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_fenced_yaml_block(self, rules_dict: dict) -> None:
        """Rules wrapped in a ```yaml fence are accepted."""
        content = "# Pricing\n\n```yaml\n" + yaml.safe_dump(rules_dict) + "```\nnotes\n"
        rules = parse_rules(content)
        assert len(rules.promotions) == 2

    def test_price_table_conversion(self, tmp_path: Path, rules_dict: dict) -> None:
        """unit_prices becomes a working PriceTable."""
        table = load_rules(write_rules(tmp_path, rules_dict)).price_table()
        assert table.unit_price("c") == 20


class TestRulesValidation:
    """Invalid rules are rejected at load time."""

    def test_missing_unit_prices(self, rules_dict: dict) -> None:
        """unit_prices is required."""
        del rules_dict["unit_prices"]
        with pytest.raises(RulesLoadError, match="validation failed"):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_negative_unit_price(self, rules_dict: dict) -> None:
        """Unit prices must be non-negative."""
        rules_dict["unit_prices"]["a"] = -5
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_unknown_kind(self, rules_dict: dict) -> None:
        """Only bundle and pair promotions exist."""
        rules_dict["promotions"].append({"kind": "percent", "sku": "a", "price": 10})
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_zero_quantity_bundle(self, rules_dict: dict) -> None:
        """Bundle quantity must be positive."""
        rules_dict["promotions"][0]["quantity"] = 0
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_pair_with_same_sku(self, rules_dict: dict) -> None:
        """A pair naming one SKU twice is rejected."""
        rules_dict["promotions"][1]["second_sku"] = "c"
        with pytest.raises(RulesLoadError, match="distinct"):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_promotion_with_unpriced_sku(self, rules_dict: dict) -> None:
        """Promotions may only name priced SKUs."""
        rules_dict["promotions"][0]["sku"] = "z"
        with pytest.raises(RulesLoadError, match="without a unit price"):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_unexpected_field(self, rules_dict: dict) -> None:
        """Unknown keys are rejected."""
        rules_dict["promotions"][0]["discount"] = 5
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_wrong_schema_version(self, rules_dict: dict) -> None:
        """Only schema_version 1 is understood."""
        rules_dict["schema_version"] = 2
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_boolean_unit_price(self, rules_dict: dict) -> None:
        """A YAML boolean is not a unit price."""
        rules_dict["unit_prices"]["a"] = True
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    @pytest.mark.parametrize("field", ["quantity", "price"])
    def test_boolean_bundle_values(self, rules_dict: dict, field: str) -> None:
        """Bundle quantity and price reject YAML booleans."""
        rules_dict["promotions"][0][field] = True
        with pytest.raises(RulesLoadError):
            parse_rules(yaml.safe_dump(rules_dict))

    def test_boolean_values_in_flow_yaml(self) -> None:
        """Inline `true` values fail instead of pricing at 1."""
        content = (
            "unit_prices: {a: true}\n"
            "promotions:\n"
            "  - {kind: bundle, quantity: true, sku: a, price: true}\n"
        )
        with pytest.raises(RulesLoadError, match="validation failed"):
            parse_rules(content)

    def test_promotions_optional(self) -> None:
        """A price table alone is a valid rules file."""
        rules = PricingRules.model_validate({"unit_prices": {"a": 1}})
        assert rules.promotion_rules() == []


class TestRulesPathResolution:
    """Choosing which rules file to load."""

    def test_explicit_path_wins(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """An explicit path overrides the environment."""
        monkeypatch.setenv(RULES_PATH_ENV, "/elsewhere.yaml")
        assert resolve_rules_path(tmp_path / "x.yaml") == tmp_path / "x.yaml"

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """PRICING_RULES_PATH is used when no path is given."""
        monkeypatch.setenv(RULES_PATH_ENV, "/etc/pricing.yaml")
        assert resolve_rules_path() == Path("/etc/pricing.yaml")

    def test_project_root_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Falls back to rules.yaml beside pyproject.toml."""
        monkeypatch.delenv(RULES_PATH_ENV, raising=False)
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "pkg" / "sub"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        assert resolve_rules_path() == tmp_path / DEFAULT_RULES_PATH
