"""Assembles a weather record from a parsed page.

Single pass and stateless: the same document and config always give the same
record.
"""

import logfire

from weathersoup.core.document import Document
from weathersoup.core.extraction import FieldExtractor
from weathersoup.core.normalization import normalize_pressure, split_humidity_pressure, split_min_max_temperature
from weathersoup.exceptions import DataNotFoundError
from weathersoup.models import ABSENT, AbsentField, SelectorConfig, WeatherRecord

REQUIRED_FIELDS = ('temperature', 'condition')


def _text_or_none(value: str | AbsentField) -> str | None:
    # Absent and empty collapse here, past the extraction layer
    if value is ABSENT or not value:
        return None
    return value


def assemble_record(document: Document, config: SelectorConfig) -> WeatherRecord:
    """Extract, normalize and validate all weather fields.

    Args:
        document: Parsed weather page
        config: Selector for each logical field

    Returns:
        WeatherRecord with optional fields degraded to 'N/A' when missing

    Raises:
        DataNotFoundError: If temperature or condition is absent or empty
        TypeError: If no document was given

    """
    if document is None:
        raise TypeError('assemble_record() requires a parsed document, got None')

    raw = FieldExtractor(config).extract_all(document)

    missing = [name for name in REQUIRED_FIELDS if not _text_or_none(raw[name])]
    if missing:
        raise DataNotFoundError(missing)

    absent_optional = [name for name, value in raw.items() if value is ABSENT]
    if absent_optional:
        logfire.warn('Optional fields not found on page', fields=absent_optional)

    min_max = split_min_max_temperature(_text_or_none(raw['min_max_temperature']))
    humidity, raw_pressure = split_humidity_pressure(_text_or_none(raw['humidity_pressure']))

    return WeatherRecord(
        date=_text_or_none(raw['date']),
        temperature=raw['temperature'],
        condition=raw['condition'],
        min_temperature=min_max.min,
        max_temperature=min_max.max,
        humidity=humidity,
        pressure=normalize_pressure(raw_pressure),
    )
