import logging
from typing import Any

import httpx

from weather_cli.config.settings import Settings
from weather_cli.config.utils import require_api_key
from weather_cli.utils.exceptions import (
    APITimeoutError,
    ConfigurationError,
    ExternalAPIError,
    ResponseReadError,
)

logger = logging.getLogger(__name__)


class WeatherClient:
    """
    Async client fetching the raw current-weather document from OpenWeatherMap
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.api_key = require_api_key(settings)
        self.transport = transport
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "WeatherClient":
        """Async context manager entry"""
        self.client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.api_timeout),
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit"""
        if self.client:
            await self.client.aclose()
            self.client = None

    def build_params(self, city: str) -> dict[str, str]:
        return {
            "q": city,
            "appid": self.api_key,
            "lang": self.settings.api_lang,
        }

    async def fetch_raw(self, city: str) -> str:
        """Fetch the response body for a city as text, whatever the status code"""
        if not self.client:
            raise ConfigurationError(
                "Weather client not initialized. Use async context manager"
            )

        logger.debug(f"Requesting current weather for city: {city!r}")
        response = await self._send(city)

        try:
            await response.aread()
            text = response.text
        except httpx.HTTPError as e:
            logger.debug(f"Failed to read response body for {city!r}: {e}")
            raise ResponseReadError(str(e)) from e
        finally:
            await response.aclose()

        logger.debug(
            f"Received status {response.status_code} with {len(text)} characters"
        )
        return text

    async def _send(self, city: str) -> httpx.Response:
        """Send the GET request, leaving the body unread"""
        url = str(self.settings.api_url)
        request = self.client.build_request("GET", url, params=self.build_params(city))

        try:
            return await self.client.send(request, stream=True)
        except httpx.TimeoutException as e:
            logger.debug(f"API request timed out for city: {city!r}")
            raise APITimeoutError(self.settings.api_timeout, str(e) or None) from e
        except httpx.RequestError as e:
            logger.debug(f"Request error for city {city!r}: {e}")
            raise ExternalAPIError(str(e) or type(e).__name__, url) from e
