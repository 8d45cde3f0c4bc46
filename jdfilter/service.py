# jdfilter/service.py
import asyncio
import logging

from jdfilter.document import HtmlDocument
from jdfilter.errors import InvalidUrlError
from jdfilter.extractors.orchestrator import extract_job_descriptor
from jdfilter.fetch import BasePageFetcher, normalize_url
from jdfilter.lexicon.tech_lexicon import TechLexicon
from jdfilter.models.job import JobDescriptor


class JobExtractionService:
    """Fetches a job page and runs the extractors against the current lexicon."""

    def __init__(self, fetcher: BasePageFetcher, lexicon: TechLexicon):
        self.fetcher = fetcher
        self.lexicon = lexicon
        self.logger = logging.getLogger("JobExtractionService")

    def extract_html(self, html: str, source_url: str) -> JobDescriptor:
        document = HtmlDocument.from_html(html)
        descriptor = extract_job_descriptor(document, self.lexicon.snapshot(), source_url)
        self.logger.info(
            f"Extracted job: {descriptor.title} ({descriptor.company or 'unknown company'}) "
            f"with {len(descriptor.tech_stacks)} tech stacks"
        )
        return descriptor

    async def extract_url(self, raw_url: str) -> JobDescriptor:
        """
        Fetch and extract a job posting.

        Raises:
            InvalidUrlError: if the URL is missing or not http(s)
            FetchError: if the page could not be retrieved
        """
        url = normalize_url(raw_url)
        if url is None:
            raise InvalidUrlError(f"Not a valid http(s) URL: {raw_url!r}")

        html = await self.fetcher.fetch(url)
        # Parsing is CPU-bound; keep it off the event loop
        return await asyncio.to_thread(self.extract_html, html, url)
