from datetime import datetime, timezone

KELVIN_OFFSET = 273.15

# Checked in order, first match wins.
WEATHER_EMOJIS: tuple[tuple[str, str], ...] = (
    ("clear", "☀️"),
    ("cloud", "☁️"),
    ("rain", "🌧️"),
    ("thunderstorm", "⛈️"),
    ("snow", "❄️"),
    ("fog", "🌫️"),
)
FALLBACK_EMOJI = "🌈"

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def convert_temperature(kelvin: float) -> tuple[float, float]:
    """Convert a Kelvin reading to a (celsius, fahrenheit) pair."""
    celsius = kelvin_to_celsius(kelvin)
    return celsius, celsius_to_fahrenheit(celsius)


def weather_emoji(description: str) -> str:
    """Pick the pictogram of the first keyword found in the description."""
    lowered = description.lower()
    for keyword, emoji in WEATHER_EMOJIS:
        if keyword in lowered:
            return emoji
    return FALLBACK_EMOJI


def format_time(timestamp: int) -> str:
    """Render UNIX epoch seconds as a UTC HH:MM string.

    Timestamps a datetime cannot represent render as the epoch, 00:00.
    """
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        moment = EPOCH
    return moment.strftime("%H:%M")
