"""
Entry point for the Fridge Recipe API

Runs the FastAPI app with uvicorn. The recipe cache lives in process memory,
so a single worker keeps one shared cache per instance.
"""

import uvicorn

from config.settings import settings


if __name__ == "__main__":
    uvicorn.run(
        "api.app:app",
        host="0.0.0.0",
        port=settings.port,
        workers=1,
        log_level="debug" if settings.debug else "info"
    )
