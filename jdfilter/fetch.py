# jdfilter/fetch.py
"""
Page retrieval for job posting URLs.

HttpPageFetcher performs a plain GET; BrowserPageFetcher renders the page in
headless Chromium for postings that only exist after client-side rendering.
"""

import logging
from typing import Optional
from urllib.parse import urlparse, urlunparse

import httpx
from playwright.async_api import async_playwright

from jdfilter.errors import FetchError

ACCEPT_HTML = "text/html,application/xhtml+xml,application/xml;q=0.9"


def normalize_url(raw_url: Optional[str]) -> Optional[str]:
    """Return the trimmed URL if it is an absolute http(s) URL, else None."""
    if not raw_url or not raw_url.strip():
        return None

    try:
        parsed = urlparse(raw_url.strip())
        hostname = parsed.hostname
    except ValueError:
        return None
    if parsed.scheme.lower() not in ("http", "https") or not hostname:
        return None

    path = parsed.path or "/"
    return urlunparse((parsed.scheme.lower(), parsed.netloc.lower(), path,
                       parsed.params, parsed.query, parsed.fragment))


class BasePageFetcher:
    name = "base"

    def __init__(self, user_agent: str, timeout: float = 30.0):
        self.user_agent = user_agent
        self.timeout = timeout
        self.logger = logging.getLogger(f"Fetcher-{self.name}")

    async def fetch(self, url: str) -> str:
        """Return the page's HTML. Raises FetchError on failure."""
        raise NotImplementedError("Subclasses must implement fetch()")


class HttpPageFetcher(BasePageFetcher):
    name = "http"

    async def fetch(self, url: str) -> str:
        headers = {"User-Agent": self.user_agent, "Accept": ACCEPT_HTML}
        self.logger.info(f"Fetching: {url}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                response = await client.get(url, headers=headers)
        except httpx.HTTPError as e:
            raise FetchError(url, f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise FetchError(
                url,
                f"Remote source responded with {response.status_code} while fetching {url}",
                status_code=response.status_code,
            )
        return response.text


class BrowserPageFetcher(BasePageFetcher):
    name = "browser"

    async def fetch(self, url: str) -> str:
        self.logger.info(f"Rendering: {url}")
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    context = await browser.new_context(user_agent=self.user_agent)
                    page = await context.new_page()
                    response = await page.goto(
                        url, wait_until="domcontentloaded", timeout=self.timeout * 1000
                    )
                    if response is not None and response.status >= 400:
                        raise FetchError(
                            url,
                            f"Remote source responded with {response.status} while fetching {url}",
                            status_code=response.status,
                        )
                    return await page.content()
                finally:
                    await browser.close()
        except FetchError:
            raise
        except Exception as e:
            raise FetchError(url, f"Rendering {url} failed: {e}") from e


FETCHERS = {
    'http': HttpPageFetcher,
    'browser': BrowserPageFetcher,
}


def build_fetcher(settings) -> BasePageFetcher:
    fetcher_class = FETCHERS.get(settings.fetch_mode.lower())
    if fetcher_class is None:
        raise ValueError(f"Unknown fetch mode: {settings.fetch_mode!r}")
    return fetcher_class(settings.user_agent, timeout=settings.request_timeout)
