"""
Weather service running the fetch and decode half of the report pipeline.

The service fetches the raw document for a city, optionally echoes it,
decodes it into a WeatherReport and rejects reports that carry no
temperature reading. Every failure surfaces as a WeatherReportError.
"""

import logging
import sys
from typing import TextIO

import httpx
from pydantic import ValidationError

from weather_cli.config.settings import Settings
from weather_cli.models.weather import WeatherReport
from weather_cli.services.weather_client import WeatherClient
from weather_cli.utils.exceptions import ImplausibleDataError, ResponseParseError

logger = logging.getLogger(__name__)


def parse_weather_report(text: str) -> WeatherReport:
    """Decode a response body, substituting defaults for absent fields."""
    try:
        return WeatherReport.model_validate_json(text)
    except ValidationError as e:
        logger.debug(f"Failed to parse weather document: {e}")
        raise ResponseParseError(str(e), text) from e


def ensure_plausible(report: WeatherReport, city: str | None = None) -> WeatherReport:
    """Reject a report whose temperature is exactly zero.

    The API never reports 0 K, so a zero here means the field was absent,
    which happens for an unknown city or a rejected key.
    """
    if report.main.temp == 0.0:
        raise ImplausibleDataError(city)
    return report


class WeatherService:
    """
    Orchestrates one report request:
    1. Fetch the raw document from the weather API
    2. Echo it to stdout when enabled
    3. Decode it into a WeatherReport
    4. Check the decoded temperature
    """

    def __init__(
        self,
        settings: Settings,
        stdout: TextIO | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.stdout = stdout or sys.stdout
        self.transport = transport

    async def fetch_document(self, city: str) -> str:
        async with WeatherClient(self.settings, self.transport) as client:
            return await client.fetch_raw(city)

    def echo(self, text: str) -> None:
        if self.settings.echo_raw_response:
            print(f"Received JSON response: {text}", file=self.stdout)

    async def get_report(self, city: str) -> WeatherReport:
        """Fetch, decode and validate the current weather for a city"""
        logger.info(f"Processing weather request for city: {city!r}")

        text = await self.fetch_document(city)
        self.echo(text)

        report = ensure_plausible(parse_weather_report(text), city)
        logger.info(f"Decoded weather report for {report.name or city!r}")
        return report
