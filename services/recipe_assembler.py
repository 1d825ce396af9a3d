"""
Recipe Assembler

Orchestrates one fridge-recipe request:

1. Normalize the input ingredients and build the cache key
2. Serve cached recipes on a hit (no re-pricing, no generation)
3. On a miss, generate draft recipes while the region resolves in a task
4. Flatten each draft's ingredients and price them for the region
5. Cache the finished set and return it in generator order

Generation failures propagate. Region failures never do (the resolver falls
back to the default region) and a malformed draft only zeroes that recipe.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from exceptions import GenerationFailedError, InvalidInputError, MalformedDraftRecipeError
from models.recipe import DraftRecipe, Recipe
from pricing.cost_estimator import CostEstimator
from pricing.ingredient_normalizer import normalize_list
from services.pipeline_logger import PipelineStageLogger
from services.recipe_generator import RecipeGenerator
from storage.recipe_cache import RecipeCache

logger = logging.getLogger(__name__)


def format_amount(amount: Any) -> str:
    """Render 200.0 as "200" and keep 1.5 or free text as given"""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount).strip()


def flatten_ingredients(draft: DraftRecipe) -> List[str]:
    """
    Turn a draft's raw ingredient list into display strings.

    Strings pass through trimmed; {name, amount, unit} objects become
    "name (amountunit)" or just "name" when amount is missing.
    Raises MalformedDraftRecipeError when the data cannot be read.
    """
    raw = draft.ingredients
    if raw is None:
        raise MalformedDraftRecipeError(draft.title, "ingredients missing")
    if not isinstance(raw, list):
        raise MalformedDraftRecipeError(draft.title, f"ingredients is a {type(raw).__name__}, expected a list")
    if not raw:
        raise MalformedDraftRecipeError(draft.title, "ingredients list is empty")

    flattened = []
    for entry in raw:
        if isinstance(entry, str):
            if entry.strip():
                flattened.append(entry.strip())
            continue

        if isinstance(entry, dict):
            name = entry.get("name") or entry.get("ingredient")
            if not isinstance(name, str) or not name.strip():
                raise MalformedDraftRecipeError(draft.title, f"ingredient object without a name: {entry}")
            amount = entry.get("amount")
            if amount is None or amount == "":
                flattened.append(name.strip())
            else:
                unit = entry.get("unit") or ""
                flattened.append(f"{name.strip()} ({format_amount(amount)}{str(unit).strip()})")
            continue

        raise MalformedDraftRecipeError(draft.title, f"unsupported ingredient entry {entry!r}")

    return flattened


class RecipeAssembler:
    """Turns ingredient lists into priced, cached Recipe records"""

    def __init__(self, generator: RecipeGenerator, cost_estimator: CostEstimator, cache: RecipeCache):
        self.generator = generator
        self.cost_estimator = cost_estimator
        self.cache = cache

    async def assemble(
        self,
        ingredients: List[str],
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> List[Recipe]:
        """
        Produce priced recipes for an ingredient list.

        Raises:
            InvalidInputError: no ingredients left after normalization
            GenerationFailedError: the recipe generator failed or timed out
        """
        # Dedup after unit stripping so "200g rice" and "rice" share one entry
        normalized = list(dict.fromkeys(item for item in normalize_list(ingredients) if item))
        if not normalized:
            raise InvalidInputError()

        cache_key = self.cache.key(normalized)
        stages = PipelineStageLogger(cache_key)

        stages.start_stage("cache_lookup")
        cached = self.cache.get(cache_key)
        stages.complete_stage("cache_lookup", hit=cached is not None)
        if cached is not None:
            stages.log_pipeline_summary(total_recipes=len(cached), cache_hit=True)
            return cached

        # Region lookup never raises, so only generation can fail here.
        # It runs as a task so a failed or cancelled generation also stops it.
        stages.start_stage("generation")
        region_task = asyncio.create_task(
            self.cost_estimator.region_resolver.resolve(latitude, longitude)
        )
        try:
            drafts = await self.generator.generate(normalized)
            country_code = await region_task
        except GenerationFailedError as e:
            stages.add_stage_error("generation", type(e).__name__, str(e))
            stages.complete_stage("generation", status="failed")
            raise
        except Exception as e:
            stages.add_stage_error("generation", type(e).__name__, str(e))
            stages.complete_stage("generation", status="failed")
            raise GenerationFailedError(f"{type(e).__name__}: {str(e)}") from e
        finally:
            if not region_task.done():
                region_task.cancel()
        stages.complete_stage("generation", draft_count=len(drafts), region=country_code)

        stages.start_stage("pricing")
        recipes = [self._price_draft(draft, country_code, stages) for draft in drafts]
        stages.complete_stage("pricing", recipe_count=len(recipes))

        self.cache.put(cache_key, recipes)
        stages.log_pipeline_summary(total_recipes=len(recipes))
        return recipes

    def _price_draft(self, draft: DraftRecipe, country_code: str, stages: PipelineStageLogger) -> Recipe:
        try:
            ingredients = flatten_ingredients(draft)
        except MalformedDraftRecipeError as e:
            logger.warning(str(e))
            stages.add_stage_error("pricing", "MalformedDraftRecipeError", str(e))
            ingredients = []

        estimated_cost = self.cost_estimator.estimate_for_region(ingredients, country_code)

        return Recipe(
            title=draft.title,
            ingredients=ingredients,
            estimated_cost=estimated_cost,
            carbon_impact=draft.carbon_impact,
            water_impact=draft.water_impact,
            calories=draft.calories,
            protein=draft.protein,
            detailed_ingredients=draft.detailed_ingredients,
            created_at=datetime.now(timezone.utc),
        )
