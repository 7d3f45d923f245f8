import json

import httpx
import pytest

from weather_cli.config.settings import Settings

API_URL = "https://api.openweathermap.org/data/2.5/weather"


@pytest.fixture
def mock_settings():
    """Create settings for testing"""
    return Settings(
        openweathermap_api_key="test-api-key",
        api_url=API_URL,
        default_city="Kyiv",
        report_color="never",
    )


@pytest.fixture
def sample_api_response():
    """Sample current-weather response from OpenWeatherMap"""
    return {
        "coord": {"lon": 30.5167, "lat": 50.4333},
        "main": {"temp": 300.15, "feels_like": 299.0, "humidity": 50, "pressure": 1012},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
        "wind": {"speed": 3.5, "deg": 200},
        "name": "Kyiv",
        "sys": {"country": "UA", "sunrise": 1700000000, "sunset": 1700040000},
        "cod": 200,
    }


@pytest.fixture
def sample_body(sample_api_response):
    return json.dumps(sample_api_response)


@pytest.fixture
def make_transport():
    """Factory for a MockTransport answering every request with a fixed body.

    Requests seen by the transport are appended to the optional list.
    """

    def factory(body: str, status_code: int = 200, requests: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            return httpx.Response(status_code, text=body)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def failing_transport():
    """Factory for a MockTransport that raises the given exception"""

    def factory(exc: Exception):
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        return httpx.MockTransport(handler)

    return factory
