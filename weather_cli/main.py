import argparse
import asyncio
import logging
import sys
from typing import TextIO

import httpx
import structlog
from colorama import just_fix_windows_console

from weather_cli.cli.report import render_report, should_use_color
from weather_cli.config.settings import Settings, settings
from weather_cli.config.utils import get_config_summary, require_api_key, resolve_city
from weather_cli.models.weather import WeatherReport
from weather_cli.services.weather_service import WeatherService
from weather_cli.utils.exceptions import WeatherReportError


def setup_logging(settings_obj: Settings) -> None:
    """Configure structured logging on stderr, leaving stdout to the report."""

    log_level = getattr(logging, settings_obj.log_level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.JSONRenderer()
            if settings_obj.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def build_parser(settings_obj: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="Print the current weather for a city using OpenWeatherMap.",
    )
    parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help=(
            "a single city name; quote names that contain spaces "
            f"(default: {settings_obj.default_city})"
        ),
    )
    return parser


async def run(
    city: str,
    settings_obj: Settings,
    stdout: TextIO,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WeatherReport:
    """Fetch the report for a city and render it to stdout."""
    service = WeatherService(settings_obj, stdout=stdout, transport=transport)
    report = await service.get_report(city)
    render_report(
        report, stdout, use_color=should_use_color(settings_obj.report_color, stdout)
    )
    return report


def main(
    argv: list[str] | None = None,
    settings_obj: Settings | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """
    Run one weather report and return the process exit code.

    Every fatal condition arrives here as a WeatherReportError; its
    diagnostics are written to stderr and the run exits with status 1.
    """
    settings_obj = settings_obj or settings
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    setup_logging(settings_obj)
    logger = structlog.get_logger(__name__)

    args = build_parser(settings_obj).parse_args(argv)
    logger.debug("Loaded configuration", **get_config_summary(settings_obj))

    try:
        require_api_key(settings_obj)
        city = resolve_city(args.city, settings_obj)
        structlog.contextvars.bind_contextvars(city=city)
        asyncio.run(run(city, settings_obj, stdout, transport))
    except WeatherReportError as e:
        logger.debug(
            "Weather report failed",
            error=e.message,
            error_type=type(e).__name__,
            error_code=e.error_code,
            details=e.details,
        )
        for line in e.diagnostics():
            print(line, file=stderr)
        return e.exit_code
    finally:
        structlog.contextvars.clear_contextvars()

    logger.debug("Weather report completed")
    return 0


def cli() -> None:
    just_fix_windows_console()
    sys.exit(main())


if __name__ == "__main__":
    cli()
