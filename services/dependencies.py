"""
Dependencies for the fridge recipe pipeline
Holds the shared HTTP client, the process-wide recipe cache and the
collaborators built from settings.
"""

from dataclasses import dataclass
from typing import Optional

import httpx

from config.settings import Settings
from pricing.cost_estimator import CostEstimator
from pricing.price_table import IngredientPriceTable
from services.label_detector import GoogleVisionLabelDetector, LabelDetector
from services.recipe_assembler import RecipeAssembler
from services.recipe_generator import RecipeGenerator, build_recipe_generator
from services.region_resolver import RegionResolver
from storage.recipe_cache import RecipeCache


@dataclass
class PipelineDeps:
    """
    Dependency container for one running instance.
    Shares the HTTP client and cache across all requests.
    """

    # HTTP client for geocoding and label detection
    http_client: httpx.AsyncClient

    assembler: RecipeAssembler
    label_detector: LabelDetector
    cache: RecipeCache

    async def aclose(self):
        """Release the shared HTTP client"""
        await self.http_client.aclose()


def create_pipeline_deps(
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
    generator: Optional[RecipeGenerator] = None,
    price_table: Optional[IngredientPriceTable] = None,
) -> PipelineDeps:
    """
    Factory function to create PipelineDeps from settings.
    Call this once when the app starts.
    """
    http_client = http_client or httpx.AsyncClient(timeout=30.0)

    region_resolver = RegionResolver(
        http_client,
        base_url=settings.geocoder_base_url,
        timeout=settings.geocoding_timeout_seconds,
    )
    cost_estimator = CostEstimator(price_table or IngredientPriceTable(), region_resolver)
    cache = RecipeCache(capacity=settings.recipe_cache_capacity)

    assembler = RecipeAssembler(
        generator=generator or build_recipe_generator(settings),
        cost_estimator=cost_estimator,
        cache=cache,
    )

    label_detector = GoogleVisionLabelDetector(
        http_client,
        api_key=settings.google_vision_api_key,
        base_url=settings.vision_base_url,
        timeout=settings.label_detection_timeout_seconds,
        min_score=settings.label_min_score,
        max_labels=settings.max_labels,
    )

    return PipelineDeps(
        http_client=http_client,
        assembler=assembler,
        label_detector=label_detector,
        cache=cache,
    )
