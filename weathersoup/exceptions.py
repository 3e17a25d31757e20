"""Custom exceptions for WeatherSoup."""


class WeatherSoupError(Exception):
    """Base class for all WeatherSoup exceptions."""

    pass


class ConfigError(WeatherSoupError):
    """Raised at startup when required configuration is missing or invalid."""

    def __init__(self, missing: list[str] | None = None, message: str | None = None):
        """Initialize configuration error.

        Args:
            missing: Names of the environment variables that were not set
            message: Explanation for configuration that is present but invalid

        """
        self.missing = missing or []
        super().__init__(message or f'Missing environment variable(s): {", ".join(self.missing)}')


class ServiceError(WeatherSoupError):
    """An error that is reported to HTTP clients.

    Attributes:
        status_code: HTTP status code to respond with
        code: Machine-readable error code, or None to omit it from the body
        message: Client-safe message

    """

    status_code: int = 500
    code: str | None = 'SERVER_ERROR'
    message: str = 'Unexpected server error. Please try again later.'

    def __init__(self, message: str | None = None, detail: str | None = None):
        """Initialize the error.

        Args:
            message: Client-safe message overriding the class default
            detail: Internal detail for logs, never sent to clients

        """
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(detail or self.message)

    def to_dict(self) -> dict[str, str]:
        """Return the JSON body for this error."""
        body = {'error': self.message}
        if self.code:
            body['code'] = self.code
        return body


class InvalidCityError(ServiceError):
    """Raised when the requested city name fails validation."""

    status_code = 400
    code = 'INVALID_CITY'
    message = 'Invalid city name. Use letters, spaces, and hyphens (2-50 chars).'


class DataNotFoundError(ServiceError):
    """Raised when temperature or condition is missing from the page."""

    status_code = 404
    code = 'DATA_NOT_FOUND'
    message = 'Weather data not found for the specified city.'

    def __init__(self, missing_fields: list[str]):
        """Initialize with the required fields that could not be extracted.

        Args:
            missing_fields: Logical field names that were absent or empty

        """
        self.missing_fields = missing_fields
        super().__init__(detail=f'Required field(s) missing: {", ".join(missing_fields)}')


class CityNotFoundError(ServiceError):
    """Raised when the upstream weather site returns 404 for a city."""

    status_code = 404
    code = 'CITY_NOT_FOUND'
    message = 'City not found. Please check the spelling.'


class UpstreamTimeoutError(ServiceError):
    """Raised when the upstream weather site does not answer in time."""

    status_code = 504
    code = 'TIMEOUT'
    message = 'Request timeout. Weather service took too long.'


class UpstreamUnavailableError(ServiceError):
    """Raised for any other upstream fetch failure."""

    status_code = 503
    code = 'SERVICE_UNAVAILABLE'
    message = 'Weather service temporarily unavailable.'


class ParsingError(ServiceError):
    """Raised when the fetched page could not be parsed."""

    status_code = 503
    code = None
    message = 'Unable to parse weather data. The weather service might be temporarily unavailable.'
