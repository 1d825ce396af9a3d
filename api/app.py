"""
Fridge Recipe API - priced recipe suggestions from fridge photos
FastAPI service that detects ingredients, generates recipes and estimates
their regional cost.
"""

from contextlib import asynccontextmanager
import logging

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.fridge_recipes import router as fridge_recipes_router
from config.settings import settings
from services.dependencies import create_pipeline_deps

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Only ships events when a token is configured
logfire.configure(
    token=settings.logfire_token,
    send_to_logfire="if-token-present",
    service_name="fridge-recipe-api",
    console=False
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.deps = create_pipeline_deps(settings)
    logger.info(f"Recipe cache ready (capacity {settings.recipe_cache_capacity})")
    try:
        yield
    finally:
        await app.state.deps.aclose()


# Create FastAPI app
app = FastAPI(
    title="Fridge Recipe API",
    description="Detect fridge ingredients, generate recipes and estimate their regional cost.",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(fridge_recipes_router)
