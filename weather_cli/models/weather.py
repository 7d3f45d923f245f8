from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_DESCRIPTION = "Unknown"


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class MainIndicators(_Section):
    """Temperature and atmosphere readings"""

    temp: float = Field(0.0, description="Temperature in Kelvin")
    feels_like: float = Field(0.0, description="Feels-like temperature in Kelvin")
    humidity: int = Field(0, ge=0, le=255, description="Humidity percentage")
    pressure: int = Field(0, ge=0, le=65535, description="Atmospheric pressure in hPa")


class ConditionDescriptor(_Section):
    """Free-text weather condition, e.g. 'clear sky'"""

    description: str = Field("", description="Condition description")


class WindInfo(_Section):
    speed: float = Field(0.0, description="Wind speed in m/s")


class LocationMeta(_Section):
    """Country and sun times of the reported location"""

    country: str = Field("", description="ISO country code")
    sunrise: int = Field(0, description="Sunrise as UNIX epoch seconds")
    sunset: int = Field(0, description="Sunset as UNIX epoch seconds")


class WeatherReport(_Section):
    """Current weather document returned by the OpenWeatherMap API"""

    main: MainIndicators = Field(default_factory=MainIndicators)
    weather: list[ConditionDescriptor] = Field(default_factory=list)
    wind: WindInfo = Field(default_factory=WindInfo)
    name: str = Field("", description="Reported location name")
    sys: LocationMeta = Field(default_factory=LocationMeta)

    @property
    def primary_description(self) -> str:
        if not self.weather:
            return UNKNOWN_DESCRIPTION
        return self.weather[0].description
