"""
Recipe cost estimation.

Total = sum(base price of each ingredient) * regional multiplier, rounded to
cents. Unknown ingredients and regions fall back to table defaults, so
estimation never fails.
"""

import logging
from typing import Iterable, Optional

from pricing.ingredient_normalizer import normalize
from pricing.price_table import IngredientPriceTable
from services.region_resolver import RegionResolver

logger = logging.getLogger(__name__)


class CostEstimator:
    """Prices ingredient lists for a resolved region"""

    def __init__(self, price_table: IngredientPriceTable, region_resolver: RegionResolver):
        self.price_table = price_table
        self.region_resolver = region_resolver

    async def estimate(
        self,
        ingredients: Iterable[str],
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> float:
        """Resolve the region once, then price every ingredient in it"""
        country_code = await self.region_resolver.resolve(latitude, longitude)
        return self.estimate_for_region(ingredients, country_code)

    def estimate_for_region(self, ingredients: Iterable[str], country_code: str) -> float:
        """Price an ingredient list for an already-resolved country code"""
        multiplier = self.price_table.multiplier(country_code)

        total = 0.0
        for ingredient in ingredients:
            # Display strings like "chicken (200g)" are re-normalized here
            base_price = self.price_table.lookup(normalize(ingredient))
            total += base_price * multiplier

        estimated = round(total, 2)
        logger.debug(f"Estimated ${estimated:.2f} for region {country_code} (x{multiplier})")
        return estimated
