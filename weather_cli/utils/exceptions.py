from typing import Any


class WeatherReportError(Exception):
    """Base exception for every fatal condition of a report run"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.exit_code = 1
        self.error_code = "WEATHER_REPORT_ERROR"

    def diagnostics(self) -> list[str]:
        """Lines written to stderr before the process exits"""
        return [f"Error: {self.message}"]


class ConfigurationError(WeatherReportError):
    """Exception raised when required configuration is missing"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.error_code = "CONFIGURATION_ERROR"

    def diagnostics(self) -> list[str]:
        lines = [f"Error: {self.message}."]
        env_var = self.details.get("env_var")
        if env_var:
            lines.append(f"Please set the {env_var} environment variable.")
        return lines


class ExternalAPIError(WeatherReportError):
    """Exception raised when the request to the weather API cannot be sent"""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message, {"url": url} if url else None)
        self.error_code = "NETWORK_ERROR"

    def diagnostics(self) -> list[str]:
        return [f"Network error: {self.message}"]


class APITimeoutError(ExternalAPIError):
    """Exception raised when the API request times out"""

    def __init__(self, timeout_seconds: float | None, reason: str | None = None):
        message = reason or "request timed out"
        if timeout_seconds is not None:
            message += f" after {timeout_seconds} seconds"
        super().__init__(message)
        self.timeout_seconds = timeout_seconds
        self.error_code = "API_TIMEOUT"


class ResponseReadError(WeatherReportError):
    """Exception raised when the response body cannot be read as text"""

    def __init__(self, message: str):
        super().__init__(message)
        self.error_code = "RESPONSE_READ_ERROR"

    def diagnostics(self) -> list[str]:
        return [f"Error fetching response text: {self.message}"]


class ResponseParseError(WeatherReportError):
    """Exception raised when the response body is not a weather document"""

    def __init__(self, message: str, response_body: str):
        super().__init__(message)
        self.response_body = response_body
        self.error_code = "RESPONSE_PARSE_ERROR"

    def diagnostics(self) -> list[str]:
        return [
            f"JSON parsing error: {self.message}",
            f"Response details: {self.response_body}",
        ]


class ImplausibleDataError(WeatherReportError):
    """Exception raised when a decoded report carries no temperature reading"""

    def __init__(self, city: str | None = None):
        super().__init__(
            "Unable to retrieve temperature",
            {"city": city} if city is not None else None,
        )
        self.error_code = "IMPLAUSIBLE_DATA"

    def diagnostics(self) -> list[str]:
        return [f"Warning: {self.message}. Check the city and API key."]
