"""Selector-based document lookup over parsed HTML."""

from typing import Any, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag


class Document(Protocol):
    """Minimal capability the extraction pipeline needs from a parsed page."""

    def find_first(self, selector: str) -> Any | None:
        """Return the first element matching the selector, or None."""
        ...

    def text_of(self, element: Any) -> str:
        """Return the trimmed text content of an element."""
        ...


class SoupDocument:
    """Document backed by a BeautifulSoup tree.

    Attributes:
        soup: Parsed HTML tree

    """

    def __init__(self, soup: BeautifulSoup):
        """Wrap an already parsed tree.

        Args:
            soup: BeautifulSoup parsed HTML

        """
        self.soup = soup

    @classmethod
    def from_html(cls, html: str, parser: str = 'lxml') -> 'SoupDocument':
        """Parse raw markup into a document.

        Args:
            html: Raw HTML markup
            parser: BeautifulSoup tree builder. Defaults to 'lxml'.

        Returns:
            SoupDocument wrapping the parsed tree

        """
        return cls(BeautifulSoup(html, parser))

    def find_first(self, selector: str) -> Tag | None:
        """Return the first element matching a CSS selector.

        Raises:
            soupsieve.SelectorSyntaxError: If the selector is not valid CSS

        """
        return self.soup.select_one(selector)

    def text_of(self, element: Tag) -> str:
        """Return the element's text with surrounding whitespace removed."""
        return element.get_text().strip()
