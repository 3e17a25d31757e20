"""Extracts raw field text from a document using configured selectors."""

import logging

from weathersoup.core.document import Document
from weathersoup.models import ABSENT, AbsentField, SelectorConfig

logger = logging.getLogger(__name__)


def extract_field(document: Document, selector: str) -> str | AbsentField:
    """Extract the trimmed text of the first element matching a selector.

    Args:
        document: Parsed document to search
        selector: CSS selector (opaque, not validated here)

    Returns:
        Trimmed text content, '' for an element without text, or ABSENT
        if nothing matched.

    """
    element = document.find_first(selector)
    if element is None:
        return ABSENT
    return document.text_of(element)


class FieldExtractor:
    """Extracts every configured field from a document.

    Attributes:
        config: Selector for each logical field

    """

    def __init__(self, config: SelectorConfig):
        """Initialize the extractor.

        Args:
            config: Selector configuration to extract with

        """
        self.config = config

    def extract_all(self, document: Document) -> dict[str, str | AbsentField]:
        """Extract all five logical fields in a fixed order.

        Args:
            document: Parsed document to extract from

        Returns:
            Mapping of field name to raw text or ABSENT

        """
        extracted: dict[str, str | AbsentField] = {}
        for field_name, selector in self.config.as_tuples():
            value = extract_field(document, selector)
            if value is ABSENT:
                logger.debug(f'{field_name}: no element matches {selector!r}')
            extracted[field_name] = value
        return extracted
