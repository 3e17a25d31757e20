"""HTTP layer for WeatherSoup."""

from weathersoup.api.app import create_app

__all__ = ['create_app']
