# jdfilter/extractors/fields.py
"""Title and company pickers: first non-empty candidate wins."""

from typing import Optional

from jdfilter.document import HtmlDocument
from jdfilter.utils.constants import (
    COMPANY_NAME_SELECTOR,
    META_OG_SITE_NAME,
    META_OG_TITLE,
    UNTITLED_ROLE,
)
from jdfilter.utils.text_utils import pick_first


def extract_title(doc: HtmlDocument) -> str:
    return pick_first([
        doc.first_text('h1'),
        doc.attribute_of(META_OG_TITLE, 'content'),
        doc.first_text('title'),
    ]) or UNTITLED_ROLE


def extract_company(doc: HtmlDocument) -> Optional[str]:
    """Returns None, never an empty string, when no company can be found."""
    return pick_first([
        doc.attribute_of(META_OG_SITE_NAME, 'content'),
        doc.first_text(COMPANY_NAME_SELECTOR),
    ])
