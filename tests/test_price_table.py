"""
Tests for ingredient price lookup and regional multipliers
"""

import pytest

from pricing.price_table import DEFAULT_PRICES, IngredientPriceTable


class TestLookup:
    """Substring matching in declaration order"""

    @pytest.fixture
    def table(self):
        return IngredientPriceTable()

    def test_unknown_ingredient_uses_default(self, table):
        assert table.lookup("xylophone") == table.default_price

    def test_substring_match(self, table):
        assert table.lookup("cherry tomato") == table.lookup("tomato")

    def test_first_declared_key_wins(self):
        table = IngredientPriceTable(
            prices=[("potato", 1.0), ("sweet potato", 3.0), ("default", 2.0)]
        )
        # Both keys are contained; the earlier declaration wins
        assert table.lookup("sweet potato") == 1.0

    def test_compound_keys_shadow_broad_keys(self, table):
        assert table.lookup("chicken broth") == 2.50
        assert table.lookup("eggplant") == 2.00
        assert table.lookup("egg") == 0.25

    @pytest.mark.parametrize("ingredient, expected", [
        ("peanut", 4.00),
        ("peanut butter", 3.50),
        ("peach", 0.75),
        ("pear", 0.75),
        ("chickpea", 1.50),
        ("peas", 2.00),
        ("black peppercorn", 3.00),
        ("corn", 1.50),
        ("butternut squash", 2.50),
        ("butter", 4.00),
    ])
    def test_short_keys_do_not_capture_longer_names(self, table, ingredient, expected):
        assert table.lookup(ingredient) == expected

    def test_default_table_has_default_sentinel(self):
        assert ("default", 2.00) in DEFAULT_PRICES
        assert "default" not in IngredientPriceTable().keys


class TestMultipliers:
    """Region multiplier fallbacks"""

    def test_known_country(self):
        table = IngredientPriceTable(multipliers={"IN": 0.35, "default": 1.0})
        assert table.multiplier("IN") == 0.35
        assert table.multiplier("in") == 0.35

    def test_unknown_country_uses_default(self):
        table = IngredientPriceTable(multipliers={"IN": 0.35, "default": 1.0})
        assert table.multiplier("ZZ") == 1.0
        assert table.multiplier("default") == 1.0

    def test_default_multiplier_is_configurable(self):
        table = IngredientPriceTable(multipliers={"GB": 1.1, "default": 0.8})
        assert table.multiplier("FR") == 0.8


class TestValidation:
    """Constructor invariants"""

    def test_requires_default_price(self):
        with pytest.raises(ValueError):
            IngredientPriceTable(prices=[("tomato", 0.5)])

    def test_rejects_duplicate_keys(self):
        with pytest.raises(ValueError):
            IngredientPriceTable(prices=[("tomato", 0.5), ("Tomato", 0.6), ("default", 2.0)])

    def test_rejects_non_positive_multiplier(self):
        with pytest.raises(ValueError):
            IngredientPriceTable(multipliers={"US": 0, "default": 1.0})

    def test_requires_default_multiplier(self):
        with pytest.raises(ValueError):
            IngredientPriceTable(multipliers={"GB": 1.1})
