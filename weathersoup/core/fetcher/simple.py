"""HTTP fetcher for the upstream weather page."""

import logging
import time

import logfire
import requests

from weathersoup.config import Settings
from weathersoup.core.fetcher.base import PageFetcher
from weathersoup.exceptions import CityNotFoundError, UpstreamTimeoutError, UpstreamUnavailableError
from weathersoup.models import FetchResult


class SimpleFetcher(PageFetcher):
    """Fetches the weather page with a single GET request.

    Attributes:
        session: Requests session instance if use_session is True
        logger: Logger instance

    """

    def __init__(self, settings: Settings, use_session: bool = True):
        """Initialize the simple fetcher.

        Args:
            settings: Settings holding the URL template, timeout and user agent
            use_session: If True, reuse a requests.Session across fetches

        """
        super().__init__(settings)
        self.session: requests.Session | None = requests.Session() if use_session else None
        self.logger = logging.getLogger(__name__)

    def _get_headers(self) -> dict[str, str]:
        return {
            'User-Agent': self.settings.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
        }

    def fetch(self, city: str) -> FetchResult:
        """Fetch the weather page for a city with one attempt.

        Args:
            city: Validated city name

        Returns:
            FetchResult with the raw markup

        """
        url = self.url_for(city)
        start_time = time.time()
        getter = self.session.get if self.session else requests.get

        with logfire.span('fetch_weather_page', url=url):
            try:
                response = getter(url, headers=self._get_headers(), timeout=self.settings.fetch_timeout)
            except requests.Timeout as e:
                self.logger.warning(f'Timed out fetching {url}')
                raise UpstreamTimeoutError(detail=str(e)) from e
            except requests.RequestException as e:
                self.logger.warning(f'Error fetching {url}: {e}')
                raise UpstreamUnavailableError(detail=str(e)) from e

            if response.status_code == 404:
                raise CityNotFoundError(detail=f'Upstream 404 for {url}')
            if not response.ok:
                raise UpstreamUnavailableError(detail=f'Upstream HTTP {response.status_code} for {url}')

            fetch_time = time.time() - start_time
            self.logger.debug(f'Fetched {url} in {fetch_time:.2f}s ({len(response.text)} chars)')
            return FetchResult(url=url, html=response.text, status_code=response.status_code, fetch_time=fetch_time)

    def close(self):
        """Close the session if it exists."""
        if self.session:
            self.session.close()
