"""Pydantic models for selectors and results."""

from weathersoup.models.results import ABSENT, NOT_AVAILABLE, AbsentField, FetchResult, WeatherRecord
from weathersoup.models.selectors import SelectorConfig

__all__ = [
    'ABSENT',
    'NOT_AVAILABLE',
    'AbsentField',
    'FetchResult',
    'SelectorConfig',
    'WeatherRecord',
]
