import sys
from typing import TextIO

from colorama import Fore, Style

from weather_cli.models.weather import WeatherReport
from weather_cli.utils.conversions import convert_temperature, format_time, weather_emoji


def paint(text: str, color: str, use_color: bool = True) -> str:
    """Wrap text in an ANSI color, or return it untouched."""
    if not use_color:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def format_report(report: WeatherReport, use_color: bool = True) -> list[str]:
    """Build the lines of the terminal report for a decoded weather document."""

    def label(text: str) -> str:
        return paint(text, Fore.GREEN, use_color)

    description = report.primary_description
    temp_c, temp_f = convert_temperature(report.main.temp)
    feels_c, feels_f = convert_temperature(report.main.feels_like)
    globe = paint("🌍", Fore.GREEN, use_color)

    return [
        f"{globe} Weather Report {globe}",
        f"{weather_emoji(description)} {paint(report.name, Fore.BLUE, use_color)}, "
        f"{paint(report.sys.country, Fore.BLUE, use_color)}",
        "",
        f"{paint('📊', Fore.YELLOW, use_color)} Weather Conditions:",
        f"   {label('Status')}: {paint(description, Fore.YELLOW, use_color)}",
        f"   {label('Temperature')}: {temp_c:.1f}°C / {temp_f:.1f}°F",
        f"   {label('Feels like')}: {feels_c:.1f}°C / {feels_f:.1f}°F",
        "",
        f"{paint('🌬️', Fore.CYAN, use_color)} Additional Details:",
        f"   {label('Humidity')}: {report.main.humidity}%",
        f"   {label('Wind speed')}: {report.wind.speed:.1f} m/s",
        f"   {label('Pressure')}: {report.main.pressure} hPa",
        "",
        f"{paint('🌅', Fore.MAGENTA, use_color)} Celestial Events:",
        f"   {label('Sunrise')}: {format_time(report.sys.sunrise)}",
        f"   {label('Sunset')}: {format_time(report.sys.sunset)}",
    ]


def render_report(
    report: WeatherReport, stream: TextIO | None = None, use_color: bool = True
) -> None:
    stream = stream or sys.stdout
    for line in format_report(report, use_color):
        print(line, file=stream)


def should_use_color(mode: str, stream: TextIO | None = None) -> bool:
    """Resolve the configured color mode against the output stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
