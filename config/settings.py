from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Keys
    openai_api_key: Optional[str] = None
    google_vision_api_key: Optional[str] = None
    logfire_token: Optional[str] = None

    # Recipe generation
    openai_model: str = "gpt-4o-mini"
    generation_timeout_seconds: float = 30.0

    # Label detection (Google Cloud Vision)
    vision_base_url: str = "https://vision.googleapis.com/v1"
    label_detection_timeout_seconds: float = 15.0
    label_min_score: float = 0.6
    max_labels: int = 15

    # Reverse geocoding
    geocoder_base_url: str = "https://api.bigdatacloud.net/data/reverse-geocode-client"
    geocoding_timeout_seconds: float = 5.0

    # Recipe cache
    recipe_cache_capacity: int = 100

    # Server Configuration
    port: int = 8000
    debug: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False  # Allow OPENAI_API_KEY or openai_api_key


# Create singleton instance
settings = Settings()
