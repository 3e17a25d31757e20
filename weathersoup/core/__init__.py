"""Extraction pipeline: document lookup, field extraction, normalization, assembly."""

from weathersoup.core.assembler import assemble_record
from weathersoup.core.document import Document, SoupDocument
from weathersoup.core.extraction import FieldExtractor, extract_field

__all__ = ['Document', 'FieldExtractor', 'SoupDocument', 'assemble_record', 'extract_field']
