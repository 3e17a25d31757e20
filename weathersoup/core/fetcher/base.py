"""Abstract base class for weather page fetchers."""

from abc import ABC, abstractmethod
from urllib.parse import quote

from weathersoup.config import Settings
from weathersoup.models import FetchResult


class PageFetcher(ABC):
    """Abstract base class for fetchers of the upstream weather page.

    Implement this interface to swap the transport used to retrieve pages.

    Attributes:
        settings: Settings holding the URL template and request options

    """

    def __init__(self, settings: Settings):
        """Initialize the fetcher.

        Args:
            settings: Settings holding the URL template and request options

        """
        self.settings = settings

    def url_for(self, city: str) -> str:
        """Return the upstream URL for a city, percent-encoding the name."""
        return self.settings.build_url(quote(city, safe=''))

    @abstractmethod
    def fetch(self, city: str) -> FetchResult:
        """Fetch the weather page for a city.

        Args:
            city: Validated city name

        Returns:
            FetchResult with the raw markup

        Raises:
            UpstreamTimeoutError: If the upstream site did not answer in time
            CityNotFoundError: If the upstream site returned 404
            UpstreamUnavailableError: For any other failure

        """
        pass

    def close(self):
        """Release any held resources."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
