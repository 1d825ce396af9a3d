from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_validator

from .base import ImmutableModel


class DetailedIngredient(ImmutableModel):
    """Structured ingredient line as reported by the recipe generator"""
    ingredient: str = Field(..., description="Ingredient name")
    amount: Optional[Union[float, str]] = Field(None, description="Quantity, numeric or free text")
    unit: Optional[str] = Field(None, description="Unit of measure")

    @field_validator("amount", mode="before")
    @classmethod
    def _scalar_amount(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            return None
        return value

    @field_validator("unit", mode="before")
    @classmethod
    def _text_unit(cls, value):
        return value if isinstance(value, str) else None


class DraftRecipe(BaseModel):
    """
    Unpriced recipe returned by the generation service.

    `ingredients` is kept raw on purpose: it may hold strings, objects with
    name/amount/unit, or be missing entirely. The assembler flattens it.
    """
    title: str = Field("Untitled Recipe", description="Recipe title")
    ingredients: Any = Field(None, description="Raw ingredient list from the generator")
    carbon_impact: float = Field(0.0, description="Estimated kg CO2e")
    water_impact: float = Field(0.0, description="Estimated liters of water")
    calories: float = Field(0.0)
    protein: float = Field(0.0)
    detailed_ingredients: List[DetailedIngredient] = Field(default_factory=list)

    model_config = {
        "extra": "ignore",
    }

    @field_validator("title", mode="before")
    @classmethod
    def _default_title(cls, value):
        if not value or not isinstance(value, str):
            return "Untitled Recipe"
        return value.strip()

    @field_validator("carbon_impact", "water_impact", "calories", "protein", mode="before")
    @classmethod
    def _coerce_number(cls, value):
        if value is None or value == "":
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            return 0.0

    @field_validator("detailed_ingredients", mode="before")
    @classmethod
    def _drop_bad_details(cls, value):
        if not isinstance(value, list):
            return []
        return [
            item for item in value
            if isinstance(item, dict) and isinstance(item.get("ingredient"), str) and item["ingredient"].strip()
        ]


class Recipe(ImmutableModel):
    """Priced recipe record returned to the app"""
    title: str = Field(..., description="Recipe title")
    ingredients: Tuple[str, ...] = Field(default_factory=tuple, description="Display-formatted ingredients")
    estimated_cost: float = Field(0.0, description="Estimated total cost in USD")
    carbon_impact: float = Field(0.0, description="Estimated kg CO2e")
    water_impact: float = Field(0.0, description="Estimated liters of water")
    calories: float = Field(0.0)
    protein: float = Field(0.0)
    detailed_ingredients: Tuple[DetailedIngredient, ...] = Field(default_factory=tuple)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {
        "json_schema_extra": {
            "example": {
                "title": "Chicken Rice Bowl",
                "ingredients": ["chicken (200g)", "rice (1cup)"],
                "estimated_cost": 4.0,
                "carbon_impact": 1.2,
                "water_impact": 50,
                "calories": 450,
                "protein": 30,
                "detailed_ingredients": [
                    {"ingredient": "chicken", "amount": 200, "unit": "g"}
                ],
                "created_at": "2025-08-10T12:00:00Z"
            }
        }
    }


class FridgeRecipeRequest(BaseModel):
    """Request body for fridge recipe generation"""
    image_base64: Optional[str] = Field(None, alias="imageBase64")
    ingredients: Optional[List[str]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    model_config = {
        "populate_by_name": True
    }


class FridgeRecipeResponse(BaseModel):
    """Response body for fridge recipe generation"""
    ingredients: List[str] = Field(default_factory=list)
    recipes: List[Recipe] = Field(default_factory=list)
    saved_recipes: List[Recipe] = Field(default_factory=list, alias="savedRecipes")

    model_config = {
        "populate_by_name": True
    }
