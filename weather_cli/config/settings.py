from typing import Literal

from pydantic import AliasChoices, Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WEATHER_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "Weather Report CLI"
    app_version: str = "1.0.0"

    # Read without the prefix, under the name the API docs use.
    openweathermap_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENWEATHERMAP_API_KEY", "openweathermap_api_key"),
        description="OpenWeatherMap API key",
    )
    api_url: HttpUrl = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="Weather API base URL",
    )
    api_lang: str = Field(
        default="en", description="Language of the condition descriptions"
    )
    api_timeout: float | None = Field(
        default=None, description="Request timeout in seconds, unset for none"
    )

    default_city: str = Field(
        default="Kyiv", description="City used when none is given on the command line"
    )
    echo_raw_response: bool = Field(
        default=True, description="Print the raw response body before parsing"
    )
    report_color: Literal["auto", "always", "never"] = Field(
        default="auto", description="Colorize the report: auto follows the TTY"
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("report_color", "log_format", mode="before")
    @classmethod
    def normalize_choice(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.openweathermap_api_key and self.openweathermap_api_key.strip())


settings = Settings()
