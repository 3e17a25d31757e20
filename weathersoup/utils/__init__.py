"""Utility components for WeatherSoup."""

from weathersoup.utils.logging import setup_logging

__all__ = ['setup_logging']
