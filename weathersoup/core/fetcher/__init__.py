"""Fetchers for the upstream weather page."""

from weathersoup.core.fetcher.base import PageFetcher
from weathersoup.core.fetcher.simple import SimpleFetcher

__all__ = ['PageFetcher', 'SimpleFetcher']
