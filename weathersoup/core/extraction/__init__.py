"""Field extraction from parsed documents."""

from weathersoup.core.extraction.extractor import FieldExtractor, extract_field

__all__ = ['FieldExtractor', 'extract_field']
