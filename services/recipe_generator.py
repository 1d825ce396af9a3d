"""
Recipe generation service.

Asks an OpenAI chat model for recipes that use the detected ingredients and
returns them as unpriced DraftRecipe records. Pricing happens downstream.
"""

import json
import logging
from typing import List, Optional, Protocol

import openai
from openai import AsyncOpenAI
from pydantic import ValidationError

from config.settings import Settings
from exceptions import GenerationFailedError
from models.recipe import DraftRecipe

logger = logging.getLogger(__name__)


class RecipeGenerator(Protocol):
    """Anything that can turn an ingredient list into draft recipes"""

    async def generate(self, ingredients: List[str]) -> List[DraftRecipe]:
        ...


SYSTEM_PROMPT = (
    "You are a sustainability-minded home cooking assistant. "
    "You only answer with JSON."
)


class OpenAIRecipeGenerator:
    """Generates draft recipes with the OpenAI chat completions API"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        recipe_count: int = 3,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the generator

        Args:
            api_key: OpenAI API key (required unless a client is passed)
            model: Chat model name
            timeout: Request timeout in seconds; a timeout fails the request
            recipe_count: How many recipes to ask for
            client: Pre-built AsyncOpenAI client (tests, shared clients)
        """
        if client is None and api_key:
            # No automatic retries: the app resubmits on failure
            client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        elif client is None:
            logger.warning("OPENAI_API_KEY not configured - recipe generation will fail until it is set")

        self.client = client
        self.model = model
        self.recipe_count = recipe_count

    async def generate(self, ingredients: List[str]) -> List[DraftRecipe]:
        """Request recipes for the ingredient list. Raises GenerationFailedError."""
        if self.client is None:
            raise GenerationFailedError("OPENAI_API_KEY is not configured")

        prompt = self._build_prompt(ingredients)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt}
                ],
                response_format={"type": "json_object"},
                temperature=0.7,
                max_tokens=2000
            )
        except openai.APITimeoutError as e:
            raise GenerationFailedError(f"Recipe service timed out: {str(e)}") from e
        except openai.APIStatusError as e:
            raise GenerationFailedError(f"Recipe service returned HTTP {e.status_code}: {e.message}") from e
        except openai.OpenAIError as e:
            raise GenerationFailedError(f"{type(e).__name__}: {str(e)}") from e

        if not response.choices:
            raise GenerationFailedError("Recipe service returned no choices")

        content = response.choices[0].message.content
        return self.parse_recipes(content)

    def parse_recipes(self, content: Optional[str]) -> List[DraftRecipe]:
        """Parse the model's JSON payload into draft recipes"""
        if not content:
            raise GenerationFailedError("Recipe service returned an empty response")

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as e:
            raise GenerationFailedError(f"Recipe service returned invalid JSON: {str(e)}") from e

        raw_recipes = payload.get("recipes") if isinstance(payload, dict) else None
        if not isinstance(raw_recipes, list):
            raise GenerationFailedError("Recipe service response has no 'recipes' array")

        drafts = []
        for index, item in enumerate(raw_recipes):
            if not isinstance(item, dict):
                logger.warning(f"Skipping recipe #{index}: expected an object, got {type(item).__name__}")
                continue
            drafts.append(self._to_draft(item))

        logger.info(f"Generated {len(drafts)} draft recipes")
        return drafts

    def _to_draft(self, item: dict) -> DraftRecipe:
        try:
            return DraftRecipe.model_validate(item)
        except ValidationError as e:
            # Keep the recipe; the assembler prices it at zero
            logger.warning(f"Draft recipe '{item.get('title')}' failed validation: {e.error_count()} errors")
            return DraftRecipe(title=item.get("title"))

    def _build_prompt(self, ingredients: List[str]) -> str:
        ingredient_text = ", ".join(ingredients)
        return f"""Create {self.recipe_count} recipes that mainly use these ingredients: {ingredient_text}.
Common pantry staples (salt, pepper, oil, water) may be added.

Respond with a JSON object of this exact shape:
{{
  "recipes": [
    {{
      "title": "string",
      "ingredients": [{{"name": "string", "amount": number, "unit": "string"}}],
      "carbon_impact": number (kg CO2e for the whole recipe),
      "water_impact": number (liters of water for the whole recipe),
      "calories": number (per serving),
      "protein": number (grams per serving),
      "detailed_ingredients": [{{"ingredient": "string", "amount": number, "unit": "string"}}]
    }}
  ]
}}"""


def build_recipe_generator(settings: Settings) -> OpenAIRecipeGenerator:
    """Build the production generator from application settings"""
    return OpenAIRecipeGenerator(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout=settings.generation_timeout_seconds,
    )
