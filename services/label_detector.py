"""
Fridge photo label detection via Google Cloud Vision.

Sends the base64 image to the Vision REST API with LABEL_DETECTION and keeps
confident, ingredient-like labels. The model itself is treated as a black box.
"""

import logging
from typing import List, Optional, Protocol

import httpx

from exceptions import LabelDetectionError

logger = logging.getLogger(__name__)

# Labels Vision returns for almost any food photo; they are not ingredients
GENERIC_LABELS = {
    "food", "ingredient", "produce", "natural foods", "whole food",
    "recipe", "cuisine", "dish", "meal", "tableware", "plate",
    "refrigerator", "major appliance", "kitchen appliance", "home appliance",
    "shelf", "still life photography", "staple food", "vegetable", "fruit",
    "superfood", "local food", "vegan nutrition", "plant", "tints and shades",
}


class LabelDetector(Protocol):
    """Anything that turns a base64 image into raw food labels"""

    async def detect(self, image_base64: str) -> List[str]:
        ...


class GoogleVisionLabelDetector:
    """Label detector backed by the Cloud Vision images:annotate endpoint"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: str = "https://vision.googleapis.com/v1",
        timeout: float = 15.0,
        min_score: float = 0.6,
        max_labels: int = 15,
    ):
        self.http_client = http_client
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.min_score = min_score
        self.max_labels = max_labels

    async def detect(self, image_base64: str) -> List[str]:
        """Return lowercase ingredient labels, most confident first"""
        if not self.api_key:
            raise LabelDetectionError("GOOGLE_VISION_API_KEY is not configured")

        # Clients sometimes send a full data URL
        if image_base64.startswith("data:") and "," in image_base64:
            image_base64 = image_base64.split(",", 1)[1]

        body = {
            "requests": [
                {
                    "image": {"content": image_base64},
                    "features": [{"type": "LABEL_DETECTION", "maxResults": self.max_labels}]
                }
            ]
        }

        try:
            response = await self.http_client.post(
                f"{self.base_url}/images:annotate",
                params={"key": self.api_key},
                json=body,
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise LabelDetectionError(f"Vision API HTTP {e.response.status_code}: {e.response.text[:100]}") from e
        except httpx.TimeoutException as e:
            raise LabelDetectionError(f"Vision API timed out after {self.timeout}s") from e
        except (httpx.HTTPError, ValueError) as e:
            raise LabelDetectionError(f"{type(e).__name__}: {str(e)}") from e

        if not isinstance(data, dict):
            raise LabelDetectionError("Vision API returned an unexpected payload")

        responses = data.get("responses") or [{}]
        if not isinstance(responses, list) or not isinstance(responses[0], dict):
            raise LabelDetectionError("Vision API returned an unexpected payload")
        first = responses[0]

        if "error" in first:
            error = first["error"]
            message = error.get("message", "unknown error") if isinstance(error, dict) else str(error)
            raise LabelDetectionError(f"Vision API error: {message}")

        annotations = first.get("labelAnnotations") or []
        if not isinstance(annotations, list):
            raise LabelDetectionError("Vision API returned malformed labelAnnotations")
        return self.extract_labels(annotations)

    def extract_labels(self, annotations: List[dict]) -> List[str]:
        """Filter Vision label annotations down to ingredient candidates"""
        labels = []
        for annotation in annotations:
            if not isinstance(annotation, dict):
                continue
            description = str(annotation.get("description") or "").strip().lower()
            score = annotation.get("score")
            if score is None:
                score = 0.0
            if isinstance(score, bool) or not isinstance(score, (int, float)):
                raise LabelDetectionError(f"Vision label score is not a number: {score!r}")
            if not description or score < self.min_score:
                continue
            if description in GENERIC_LABELS or description in labels:
                continue
            labels.append(description)

        logger.info(f"Detected {len(labels)} ingredient labels from {len(annotations)} annotations")
        return labels
