from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List
import logging

from exceptions import GenerationFailedError, InvalidInputError, LabelDetectionError
from models.recipe import FridgeRecipeRequest, FridgeRecipeResponse
from pricing.ingredient_normalizer import clean_manual_ingredients
from services.label_detector import LabelDetector
from services.recipe_assembler import RecipeAssembler

logger = logging.getLogger(__name__)

router = APIRouter()


def get_recipe_assembler(request: Request) -> RecipeAssembler:
    """Process-wide assembler created at startup"""
    return request.app.state.deps.assembler


def get_label_detector(request: Request) -> LabelDetector:
    """Process-wide label detector created at startup"""
    return request.app.state.deps.label_detector


def merge_ingredients(detected: List[str], manual: List[str]) -> List[str]:
    """Order-preserving union of detected labels and manual entries"""
    return list(dict.fromkeys(detected + manual))


@router.post("/generate-recipes-from-fridge", response_model=FridgeRecipeResponse)
async def generate_recipes_from_fridge(
    body: FridgeRecipeRequest,
    assembler: RecipeAssembler = Depends(get_recipe_assembler),
    label_detector: LabelDetector = Depends(get_label_detector),
):
    """
    Detect ingredients in a fridge photo and/or take them from the request,
    then return priced recipes.
    """
    if not body.image_base64 and body.ingredients is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Either imageBase64 or ingredients is required"
        )

    detected = []
    if body.image_base64:
        try:
            detected = await label_detector.detect(body.image_base64)
        except LabelDetectionError as e:
            logger.error(f"Label detection failed: {e.detail}")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=str(e)
            )
        detected = [label.strip().lower() for label in detected if label and label.strip()]

    manual = clean_manual_ingredients(body.ingredients or [])
    ingredients = merge_ingredients(detected, manual)

    if not ingredients:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No valid ingredients detected"
        )

    try:
        recipes = await assembler.assemble(ingredients, body.latitude, body.longitude)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except GenerationFailedError as e:
        logger.error(f"Recipe generation failed: {e.detail}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return FridgeRecipeResponse(ingredients=ingredients, recipes=recipes, saved_recipes=[])


@router.get("/health")
async def health(request: Request):
    """Liveness check with recipe cache statistics"""
    return {
        "status": "ok",
        "cache": request.app.state.deps.cache.get_stats()
    }
