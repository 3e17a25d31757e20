"""WeatherSoup - current weather scraped with configurable CSS selectors.

Fetch a weather page, extract with BeautifulSoup, normalize, serve as JSON.
"""

__version__ = '0.1.0'

from weathersoup.config import Settings, load_settings
from weathersoup.core import Document, FieldExtractor, SoupDocument, assemble_record, extract_field
from weathersoup.core.normalization import normalize_pressure, split_humidity_pressure, split_min_max_temperature
from weathersoup.exceptions import (
    CityNotFoundError,
    ConfigError,
    DataNotFoundError,
    InvalidCityError,
    ParsingError,
    ServiceError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    WeatherSoupError,
)
from weathersoup.models import ABSENT, NOT_AVAILABLE, AbsentField, SelectorConfig, WeatherRecord
from weathersoup.service import WeatherService

__all__ = [
    # Pipeline
    'Document',
    'SoupDocument',
    'FieldExtractor',
    'extract_field',
    'assemble_record',
    'normalize_pressure',
    'split_humidity_pressure',
    'split_min_max_temperature',
    'WeatherService',
    # Configuration
    'Settings',
    'load_settings',
    # Models
    'ABSENT',
    'NOT_AVAILABLE',
    'AbsentField',
    'SelectorConfig',
    'WeatherRecord',
    # Errors
    'WeatherSoupError',
    'ConfigError',
    'ServiceError',
    'InvalidCityError',
    'DataNotFoundError',
    'CityNotFoundError',
    'UpstreamTimeoutError',
    'UpstreamUnavailableError',
    'ParsingError',
]
