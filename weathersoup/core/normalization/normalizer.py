"""Normalizes scraped numeric text into canonical values.

Upstream pages report pressure in at least three scales (Pa, dPa-like and hPa)
with no unit label, so the scale is inferred from magnitude alone. Values that
are genuinely hPa but above 1000 (e.g. 1013 hPa) are divided by 10 and come
out wrong; this is a known limitation of the heuristic.
"""

import math
import re
from typing import NamedTuple

from weathersoup.models import NOT_AVAILABLE

# Leading float literal, mirroring how browsers parse numeric prefixes
_FLOAT_PREFIX = re.compile(r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
_TEMPERATURE_TOKEN = re.compile(r'\d+°', re.ASCII)


class HumidityPressure(NamedTuple):
    """Humidity text and raw pressure token split from one blob."""

    humidity: str
    pressure: str


class MinMaxTemperature(NamedTuple):
    """Min and max temperature tokens split from one blob."""

    min: str
    max: str


def split_humidity_pressure(raw_text: str | None) -> HumidityPressure:
    """Split a '...pressure.humidity' blob on periods.

    Args:
        raw_text: Scraped text, or None if the field was absent

    Returns:
        HumidityPressure where humidity is the last segment and pressure the
        second-to-last. Both are 'N/A' if the text has no period.

    """
    if not raw_text:
        return HumidityPressure(NOT_AVAILABLE, NOT_AVAILABLE)

    parts = raw_text.split('.')
    if len(parts) < 2:
        return HumidityPressure(NOT_AVAILABLE, NOT_AVAILABLE)

    return HumidityPressure(parts[-1] or NOT_AVAILABLE, parts[-2] or NOT_AVAILABLE)


def parse_float(raw_token: str) -> float | None:
    """Parse the leading float of a token, or None if it has none."""
    match = _FLOAT_PREFIX.match(raw_token)
    if not match:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def normalize_pressure(raw_token: str) -> float | int | str:
    """Infer the pressure scale from magnitude and normalize it.

    Args:
        raw_token: Raw pressure token, possibly 'N/A'

    Returns:
        value / 100 (2 dp) above 10000, value / 10 (2 dp) above 1000,
        otherwise the value rounded to an int. 'N/A' if unparsable.

    """
    value = parse_float(raw_token)
    if value is None:
        return NOT_AVAILABLE

    if value > 10000:
        return round(value / 100, 2)
    if value > 1000:
        return round(value / 10, 2)
    # Half rounds up, not to even
    return math.floor(value + 0.5)


def split_min_max_temperature(raw_text: str | None) -> MinMaxTemperature:
    """Find the first two temperature tokens (digits followed by '°').

    Args:
        raw_text: Combined min/max text, or None if the field was absent

    Returns:
        MinMaxTemperature with the first match as min and the second as max,
        'N/A' for any that is missing.

    """
    matches = _TEMPERATURE_TOKEN.findall(raw_text or '')
    low = matches[0] if matches else NOT_AVAILABLE
    high = matches[1] if len(matches) > 1 else NOT_AVAILABLE
    return MinMaxTemperature(low, high)
