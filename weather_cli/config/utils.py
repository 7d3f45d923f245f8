from weather_cli.utils.exceptions import ConfigurationError

from .settings import Settings, settings

API_KEY_ENV_VAR = "OPENWEATHERMAP_API_KEY"


def require_api_key(settings_obj: Settings | None = None) -> str:
    """Return the configured API key or raise ConfigurationError."""
    settings_obj = settings_obj or settings

    if not settings_obj.has_api_key:
        raise ConfigurationError(
            "OpenWeatherMap API key not found",
            details={"env_var": API_KEY_ENV_VAR},
        )

    return settings_obj.openweathermap_api_key.strip()


def resolve_city(city: str | None, settings_obj: Settings | None = None) -> str:
    """Pick the requested city, falling back to the configured default.

    An explicitly passed empty string is kept as is.
    """
    settings_obj = settings_obj or settings
    return settings_obj.default_city if city is None else city


def get_config_summary(
    settings_obj: Settings | None = None,
) -> dict[str, str | float | bool | None]:
    """Get a summary of current configuration for logging/debugging."""
    settings_obj = settings_obj or settings
    return {
        "app_name": settings_obj.app_name,
        "version": settings_obj.app_version,
        "api_url": str(settings_obj.api_url),
        "lang": settings_obj.api_lang,
        "timeout": settings_obj.api_timeout,
        "default_city": settings_obj.default_city,
        "echo_raw_response": settings_obj.echo_raw_response,
        "report_color": settings_obj.report_color,
        "log_level": settings_obj.log_level,
        "weather_api_configured": settings_obj.has_api_key,
    }
