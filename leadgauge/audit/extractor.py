"""
Markup Signal Extractor

Wraps fetched HTML in a queryable document so every scoring rule can ask
structural questions (tags, attributes, text) with CSS selectors.

Selection is best-effort: a selector that matches nothing yields an empty
result, never an exception.
"""

import logging
from typing import List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)


class MarkupDocument:
    """Parsed HTML document plus the URL it was fetched from."""

    def __init__(self, soup: BeautifulSoup, url: str):
        self.soup = soup
        self.url = url

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select(self, selector: str) -> List[Tag]:
        """All elements matching a CSS selector, in document order."""
        try:
            return self.soup.select(selector)
        except SelectorSyntaxError as e:
            logger.debug(f"Invalid selector {selector!r}: {e}")
            return []

    def count(self, selector: str) -> int:
        return len(self.select(selector))

    def exists(self, selector: str) -> bool:
        return self.count(selector) > 0

    def first(self, selector: str) -> Optional[Tag]:
        matches = self.select(selector)
        return matches[0] if matches else None

    def attr(self, selector: str, name: str) -> Optional[str]:
        """Attribute value of the first matching element."""
        element = self.first(selector)
        if element is None:
            return None
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def text(self, selector: str) -> str:
        """Concatenated text of every matching element."""
        return "".join(el.get_text() for el in self.select(selector))

    def first_text(self, selector: str) -> str:
        element = self.first(selector)
        return element.get_text() if element is not None else ""

    # -------------------------------------------------------------------------
    # Page-level signals
    # -------------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self.text("title")

    def meta_content(self, name: str) -> Optional[str]:
        return self.attr(f'meta[name="{name}"]', "content")

    def og_content(self, prop: str) -> Optional[str]:
        return self.attr(f'meta[property="og:{prop}"]', "content")

    def body_text(self) -> str:
        body = self.soup.body
        if body is None:
            return self.soup.get_text()
        return body.get_text()

    @property
    def scheme(self) -> str:
        return urlparse(self.url).scheme.lower()

    @property
    def is_https(self) -> bool:
        return self.scheme == "https"


def parse_document(html: str, url: str) -> MarkupDocument:
    """Parse raw HTML into a MarkupDocument."""
    soup = BeautifulSoup(html or "", "lxml")
    return MarkupDocument(soup, url)
