"""Looks up the weather for a city: validate, fetch, extract."""

import html
import logging
import re

import logfire

from weathersoup.config import Settings
from weathersoup.core import SoupDocument, assemble_record
from weathersoup.core.fetcher import PageFetcher, SimpleFetcher
from weathersoup.exceptions import DataNotFoundError, InvalidCityError, ParsingError
from weathersoup.models import WeatherRecord

CITY_PATTERN = re.compile(r'^[a-zA-Z\s-]{2,50}$')


def sanitize_city(city: str) -> str:
    """Trim the city name and escape any markup in it."""
    return html.escape(city.strip())


class WeatherService:
    """Fetches a city's weather page and turns it into a WeatherRecord.

    Holds no per-request state, so one instance serves concurrent requests.

    Attributes:
        settings: Process-wide settings
        fetcher: Fetcher for the upstream page
        logger: Logger instance

    """

    def __init__(self, settings: Settings, fetcher: PageFetcher | None = None):
        """Initialize the service.

        Args:
            settings: Process-wide settings
            fetcher: Fetcher to use. Defaults to a SimpleFetcher built from settings.

        """
        self.settings = settings
        self.fetcher = fetcher or SimpleFetcher(settings)
        self.logger = logging.getLogger(__name__)

    def validate_city(self, city: str) -> str:
        """Sanitize and validate a city name.

        Raises:
            InvalidCityError: If the name is not 2-50 letters, spaces or hyphens

        """
        cleaned = sanitize_city(city)
        if not cleaned or not CITY_PATTERN.match(cleaned):
            raise InvalidCityError(detail=f'Rejected city name {city!r}')
        return cleaned

    def parse(self, markup: str) -> WeatherRecord:
        """Run the extraction pipeline on raw page markup.

        Args:
            markup: Raw HTML of the weather page

        Returns:
            WeatherRecord for the page

        Raises:
            DataNotFoundError: If temperature or condition is missing
            ParsingError: For any other failure while parsing

        """
        try:
            return assemble_record(SoupDocument.from_html(markup), self.settings.selectors)
        except DataNotFoundError:
            raise
        except Exception as e:
            self.logger.exception('Data parsing error')
            logfire.error('Data parsing error', error=str(e))
            raise ParsingError(detail=str(e)) from e

    def get_weather(self, city: str) -> WeatherRecord:
        """Look up the current weather for a city.

        Args:
            city: City name as given by the client

        Returns:
            WeatherRecord for the city

        """
        city = self.validate_city(city)
        with logfire.span('get_weather', city=city):
            result = self.fetcher.fetch(city)
            try:
                record = self.parse(result.html)
            except DataNotFoundError as e:
                logfire.warn('Weather data not found', city=city, missing=e.missing_fields)
                raise
            logfire.info('Weather extracted', city=city, condition=record.condition)
            return record

    def close(self):
        """Close the underlying fetcher."""
        self.fetcher.close()
