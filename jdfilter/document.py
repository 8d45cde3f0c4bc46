# jdfilter/document.py
"""
Query adapter over a parsed job posting page.

The extractors never touch BeautifulSoup directly; they only use the query
operations exposed here, so any other parser can stand in by providing the
same methods.
"""

import copy
from typing import Iterable, Iterator, List, Optional

from bs4 import BeautifulSoup

# Tags whose string content is code or markup rather than visible text
_NON_TEXT_TAGS = ('script', 'style', 'template')


def _node_text(tag) -> str:
    """Text under a tag with each string separated by a space and whitespace collapsed."""
    return " ".join(tag.get_text(separator=" ", strip=True).split())


class HtmlDocument:
    """Wraps a parsed HTML document and exposes the queries the extractors need."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup
        # Copy with script/style/template removed, used for every visible-text query
        self._visible = copy.copy(soup)
        for elem in self._visible.find_all(list(_NON_TEXT_TAGS)):
            elem.decompose()

    @classmethod
    def from_html(cls, html: str) -> "HtmlDocument":
        return cls(BeautifulSoup(html or "", 'lxml'))

    def select_text(self, selector: str) -> List[str]:
        """Visible text of every element matching the CSS selector, in document order."""
        return [_node_text(elem) for elem in self._visible.select(selector)]

    def first_text(self, selector: str) -> Optional[str]:
        elem = self._visible.select_one(selector)
        return _node_text(elem) if elem else None

    def attribute_of(self, selector: str, name: str) -> Optional[str]:
        """Attribute value of the first element matching the selector."""
        elem = self.soup.select_one(selector)
        if elem is None:
            return None
        value = elem.get(name)
        return " ".join(value) if isinstance(value, list) else value

    def attributes_of(self, selector: str, name: str) -> List[str]:
        values = []
        for elem in self.soup.select(selector):
            value = elem.get(name)
            if value is None:
                continue
            values.append(" ".join(value) if isinstance(value, list) else value)
        return values

    def all_script_text(self) -> str:
        """Bodies of every inline <script>, newline-joined."""
        return "\n".join(script.get_text() for script in self.soup.find_all('script'))

    def body_text(self) -> str:
        """Visible text of the body, one line per text node."""
        root = self._visible.body or self._visible
        return root.get_text(separator="\n", strip=True)

    def text_nodes(self, tags: Iterable[str]) -> Iterator[str]:
        """Yield each matching node's own trimmed text, in document order."""
        for elem in self._visible.find_all(list(tags)):
            yield _node_text(elem)
