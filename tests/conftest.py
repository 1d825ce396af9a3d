"""
Shared fixtures for the fridge recipe pipeline tests
"""

import pytest

from models.recipe import DraftRecipe
from pricing.cost_estimator import CostEstimator
from pricing.price_table import IngredientPriceTable
from services.recipe_assembler import RecipeAssembler
from storage.recipe_cache import RecipeCache
from tests.fakes import FakeRegionResolver


@pytest.fixture
def chicken_rice_table():
    return IngredientPriceTable(
        prices=[("chicken", 3.0), ("rice", 1.0), ("default", 2.0)],
        multipliers={"US": 1.0, "default": 1.0}
    )


@pytest.fixture
def chicken_rice_draft():
    return DraftRecipe(
        title="Chicken Rice Bowl",
        ingredients=["chicken", "rice"],
        carbon_impact=1.2,
        water_impact=50,
        calories=450,
        protein=30,
        detailed_ingredients=[]
    )


@pytest.fixture
def region_resolver():
    return FakeRegionResolver()


@pytest.fixture
def build_assembler(chicken_rice_table, region_resolver):
    """Factory: assembler around a given generator with a fresh cache"""
    def _build(generator, capacity=100, price_table=None):
        estimator = CostEstimator(price_table or chicken_rice_table, region_resolver)
        return RecipeAssembler(generator, estimator, RecipeCache(capacity=capacity))
    return _build
