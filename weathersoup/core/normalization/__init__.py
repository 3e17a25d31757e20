"""Numeric normalization of scraped field text."""

from weathersoup.core.normalization.normalizer import (
    HumidityPressure,
    MinMaxTemperature,
    normalize_pressure,
    parse_float,
    split_humidity_pressure,
    split_min_max_temperature,
)

__all__ = [
    'HumidityPressure',
    'MinMaxTemperature',
    'normalize_pressure',
    'parse_float',
    'split_humidity_pressure',
    'split_min_max_temperature',
]
