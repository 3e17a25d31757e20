"""Models for fetch results, extraction signals and weather records."""

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOT_AVAILABLE: Final = 'N/A'


class AbsentField:
    """Signal that a selector matched no element.

    Distinct from an empty string, which means the element exists but has no text.
    Use the module-level ``ABSENT`` instance.
    """

    _instance: 'AbsentField | None' = None

    def __new__(cls) -> 'AbsentField':
        """Return the shared instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        """Absent fields are falsy."""
        return False

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return 'ABSENT'


ABSENT: Final = AbsentField()


@dataclass
class FetchResult:
    """Result of fetching the upstream weather page.

    Attributes:
        url: URL that was requested
        html: Raw markup returned by the upstream site
        status_code: HTTP status code of the response
        fetch_time: Total time spent on the request in seconds

    """

    url: str
    html: str
    status_code: int = 200
    fetch_time: float = 0.0


class WeatherRecord(BaseModel):
    """Normalized weather data for one city.

    Serializes with the camelCase keys exposed over HTTP
    (``minTemperature``, ``maxTemperature``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str | None = Field(default=None, description='Date as scraped, unparsed')
    temperature: str = Field(min_length=1, description='Display temperature including unit glyph')
    condition: str = Field(min_length=1, description='Free-text condition label')
    min_temperature: str = Field(default=NOT_AVAILABLE, alias='minTemperature')
    max_temperature: str = Field(default=NOT_AVAILABLE, alias='maxTemperature')
    humidity: str = NOT_AVAILABLE
    pressure: float | int | str = NOT_AVAILABLE

    @field_validator('temperature', 'condition')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be blank')
        return value

    def to_json_dict(self) -> dict:
        """Return the record keyed by its public field names."""
        return self.model_dump(by_alias=True)
