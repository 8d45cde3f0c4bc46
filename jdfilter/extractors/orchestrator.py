# jdfilter/extractors/orchestrator.py
"""Composes the field pickers, location classifier and tech matcher into one JobDescriptor."""

from dataclasses import dataclass
from typing import Iterable

from jdfilter.document import HtmlDocument
from jdfilter.extractors.fields import extract_company, extract_title
from jdfilter.extractors.location import classify_location
from jdfilter.extractors.tech_stack import collect_structured_keywords, match_tech_stacks
from jdfilter.models.job import JobDescriptor
from jdfilter.utils.constants import (
    HINT_NODE_TAGS,
    META_DESCRIPTION,
    META_OG_DESCRIPTION,
    META_OG_TITLE,
    NOT_PROVIDED,
)
from jdfilter.utils.text_utils import join_text_sources, unique_in_order


@dataclass(frozen=True)
class TextSources:
    """Raw text pulled from a document once and shared by the classifiers."""
    body_text: str
    script_text: str
    meta_description: str
    og_description: str
    title_variants: str

    @classmethod
    def from_document(cls, doc: HtmlDocument) -> "TextSources":
        return cls(
            body_text=doc.body_text(),
            script_text=doc.all_script_text(),
            meta_description=doc.attribute_of(META_DESCRIPTION, 'content') or "",
            og_description=doc.attribute_of(META_OG_DESCRIPTION, 'content') or "",
            title_variants=join_text_sources(
                doc.first_text('h1'),
                doc.attribute_of(META_OG_TITLE, 'content'),
                doc.first_text('title'),
            ),
        )

    @property
    def location_text(self) -> str:
        return join_text_sources(
            self.body_text,
            self.meta_description,
            self.og_description,
            self.title_variants,
            self.script_text,
        )

    @property
    def tech_stack_text(self) -> str:
        # Headline strings are left out to keep short titles from matching.
        return join_text_sources(
            self.body_text,
            self.meta_description,
            self.og_description,
            self.script_text,
        )


def extract_job_descriptor(
    document: HtmlDocument,
    lexicon_snapshot: Iterable[str],
    source_url: str,
) -> JobDescriptor:
    """
    Extract a JobDescriptor from a parsed document.

    Pure and deterministic: the same document, lexicon snapshot and URL
    always produce an equal descriptor.

    Args:
        document: Parsed job posting page
        lexicon_snapshot: Tech labels to look for, in lexicon order
        source_url: URL the document came from

    Returns:
        A new JobDescriptor
    """
    sources = TextSources.from_document(document)

    location = classify_location(
        sources.location_text,
        document.text_nodes(HINT_NODE_TAGS),
    )

    tech_stacks = unique_in_order(
        collect_structured_keywords(document)
        + match_tech_stacks(lexicon_snapshot, sources.tech_stack_text)
    )

    return JobDescriptor(
        title=extract_title(document),
        company=extract_company(document),
        location=location,
        tech_stacks=tech_stacks or [NOT_PROVIDED],
        source_url=source_url,
    )
