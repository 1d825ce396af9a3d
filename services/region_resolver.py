"""
Region Resolver

Maps coordinates to an ISO country code through a reverse-geocoding API.
Resolution is best-effort: any failure degrades to the "default" region and
is only logged, so callers always get a plain country code back.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_REGION = "default"


class RegionResolver:
    """Reverse-geocodes coordinates to an uppercase country code"""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = "https://api.bigdatacloud.net/data/reverse-geocode-client",
        timeout: float = 5.0,
    ):
        self.http_client = http_client
        self.base_url = base_url
        self.timeout = timeout

    async def resolve(self, latitude: Optional[float] = None, longitude: Optional[float] = None) -> str:
        """
        Resolve coordinates to a country code.

        Returns "default" when either coordinate is missing or the lookup
        fails for any reason. Never raises. Single attempt, no retries.
        """
        if latitude is None or longitude is None:
            return DEFAULT_REGION

        params = {
            "latitude": latitude,
            "longitude": longitude,
            "localityLanguage": "en",
        }

        try:
            response = await self.http_client.get(self.base_url, params=params, timeout=self.timeout)
            if response.status_code != 200:
                logger.warning(f"Reverse geocoding returned HTTP {response.status_code}, using default region")
                return DEFAULT_REGION

            data = response.json()
        except httpx.TimeoutException:
            logger.warning(f"Reverse geocoding timed out after {self.timeout}s, using default region")
            return DEFAULT_REGION
        except Exception as e:
            logger.warning(f"Reverse geocoding failed: {type(e).__name__}: {str(e)}, using default region")
            return DEFAULT_REGION

        country_code = data.get("countryCode") if isinstance(data, dict) else None
        if not isinstance(country_code, str) or not country_code.strip():
            logger.warning("Reverse geocoding response had no countryCode, using default region")
            return DEFAULT_REGION

        return country_code.strip().upper()
