# jdfilter/extractors/tech_stack.py
"""
Tech stack detection against the configured lexicon.

Every label is matched with a whole-word pattern built from its own text,
except for a few labels whose common spellings or decoys need a hand-written
pattern. Those live in MATCH_RULES, keyed by the lower-cased label.
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from jdfilter.document import HtmlDocument
from jdfilter.utils.constants import META_ARTICLE_TAG, META_KEYWORDS
from jdfilter.utils.text_utils import unique_in_order


@dataclass(frozen=True)
class MatchRule:
    """Builds the regex source for a label from its escaped text."""
    name: str
    build: Callable[[str], str]


DEFAULT_RULE = MatchRule("default", lambda escaped: rf"\b{escaped}\b")

_REACT = MatchRule("react", lambda escaped: r"\bReact(?:JS|\.js)?\b")
_NODE = MatchRule("node", lambda escaped: r"\bNode(?:\.js|JS)?\b")
# "JavaScript" outside MIME types and "enable JavaScript" banners, or a bare
# "JS" token that is not part of ".js", "/js", '"js"' or names like NestJS.
_JAVASCRIPT = MatchRule(
    "javascript",
    lambda escaped: (
        r"(?<!text/)(?<!application/)(?<!enable )\bJavaScript\b"
        r"|(?<![\w./'\"-])JS(?![\w./'\"-])"
    ),
)
_TYPESCRIPT = MatchRule("typescript", lambda escaped: r"\bTypeScript\b|(?<!\w)TS(?!\w)")
_AWS = MatchRule("aws", lambda escaped: r"\bAWS\b|\bAmazon Web Services\b")

MATCH_RULES: Dict[str, MatchRule] = {
    "react": _REACT,
    "node": _NODE,
    "node.js": _NODE,
    "javascript": _JAVASCRIPT,
    "typescript": _TYPESCRIPT,
    "aws": _AWS,
}


def rule_for(label: str) -> MatchRule:
    return MATCH_RULES.get(label.strip().lower(), DEFAULT_RULE)


def build_pattern(label: str) -> str:
    normalized = label.strip()
    return rule_for(normalized).build(re.escape(normalized))


def match_tech_stacks(labels: Iterable[str], text: str) -> List[str]:
    """
    Return the lexicon labels present in the text.

    Args:
        labels: Lexicon snapshot, in lexicon order
        text: Aggregated page text (body, descriptions, scripts)

    Returns:
        Matched labels as given in the lexicon, de-duplicated, in lexicon order
    """
    matched: List[str] = []
    if not text:
        return matched

    for label in labels:
        if not isinstance(label, str) or not label.strip():
            continue
        if label in matched:
            continue
        if re.search(build_pattern(label), text, re.IGNORECASE):
            matched.append(label)

    return matched


def collect_structured_keywords(doc: HtmlDocument) -> List[str]:
    """Tags from the keywords meta tag and every article:tag meta tag."""
    keywords: List[str] = []

    meta_keywords = doc.attribute_of(META_KEYWORDS, 'content')
    if meta_keywords:
        keywords.extend(kw.strip() for kw in meta_keywords.split(','))

    keywords.extend(tag.strip() for tag in doc.attributes_of(META_ARTICLE_TAG, 'content'))

    return unique_in_order(kw for kw in keywords if kw)
