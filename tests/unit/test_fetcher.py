# tests/unit/test_fetcher.py
import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from jdfilter.config import ExtractorSettings
from jdfilter.errors import FetchError
from jdfilter.fetch import (
    BrowserPageFetcher,
    HttpPageFetcher,
    build_fetcher,
    normalize_url,
)


@pytest.mark.parametrize("raw,expected", [
    ("https://example.com/jobs/1", "https://example.com/jobs/1"),
    ("  https://Example.COM/jobs/1?gh_jid=42  ", "https://example.com/jobs/1?gh_jid=42"),
    ("http://example.com", "http://example.com/"),
    ("HTTPS://example.com/a", "https://example.com/a"),
])
def test_normalize_url_accepts_http_urls(raw, expected):
    assert normalize_url(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "example.com/jobs", "ftp://example.com/file",
                                 "javascript:alert(1)", "https://", "http://[::1"])
def test_normalize_url_rejects_invalid(raw):
    assert normalize_url(raw) is None


def _mock_async_client(response=None, error=None):
    client = MagicMock()
    client.get = AsyncMock(return_value=response, side_effect=error)
    client_cm = MagicMock()
    client_cm.__aenter__ = AsyncMock(return_value=client)
    client_cm.__aexit__ = AsyncMock(return_value=False)
    return client_cm, client


@pytest.mark.asyncio
async def test_http_fetcher_returns_html_and_sends_headers():
    response = MagicMock(status_code=200, text="<html>ok</html>")
    client_cm, client = _mock_async_client(response=response)

    with patch("jdfilter.fetch.httpx.AsyncClient", return_value=client_cm):
        fetcher = HttpPageFetcher("JD-Filter/1.0", timeout=5)
        html = await fetcher.fetch("https://example.com/jobs/1")

    assert html == "<html>ok</html>"
    _, kwargs = client.get.call_args
    assert kwargs["headers"]["User-Agent"] == "JD-Filter/1.0"
    assert "text/html" in kwargs["headers"]["Accept"]


@pytest.mark.asyncio
async def test_http_fetcher_raises_on_error_status():
    response = MagicMock(status_code=404, text="missing")
    client_cm, _ = _mock_async_client(response=response)

    with patch("jdfilter.fetch.httpx.AsyncClient", return_value=client_cm):
        with pytest.raises(FetchError) as exc_info:
            await HttpPageFetcher("JD-Filter/1.0").fetch("https://example.com/gone")

    assert exc_info.value.status_code == 404
    assert "404" in str(exc_info.value)


@pytest.mark.asyncio
async def test_http_fetcher_wraps_transport_errors():
    client_cm, _ = _mock_async_client(error=httpx.ConnectError("connection refused"))

    with patch("jdfilter.fetch.httpx.AsyncClient", return_value=client_cm):
        with pytest.raises(FetchError):
            await HttpPageFetcher("JD-Filter/1.0").fetch("https://example.com/jobs/1")


def _mock_playwright(status=200, content="<html>rendered</html>"):
    mock_page = AsyncMock()
    mock_page.goto.return_value = MagicMock(status=status)
    mock_page.content.return_value = content
    mock_context = AsyncMock()
    mock_context.new_page.return_value = mock_page
    mock_browser = AsyncMock()
    mock_browser.new_context.return_value = mock_context
    mock_p = AsyncMock()
    mock_p.chromium.launch.return_value = mock_browser
    return mock_p, mock_browser


@pytest.mark.asyncio
async def test_browser_fetcher_returns_rendered_content():
    mock_p, mock_browser = _mock_playwright()

    with patch("jdfilter.fetch.async_playwright") as mock_pw:
        mock_pw.return_value.__aenter__.return_value = mock_p
        mock_pw.return_value.__aexit__ = AsyncMock(return_value=False)
        html = await BrowserPageFetcher("JD-Filter/1.0").fetch("https://example.com/jobs/1")

    assert html == "<html>rendered</html>"
    mock_browser.new_context.assert_awaited_once_with(user_agent="JD-Filter/1.0")
    mock_browser.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_browser_fetcher_raises_on_error_status():
    mock_p, mock_browser = _mock_playwright(status=503)

    with patch("jdfilter.fetch.async_playwright") as mock_pw:
        mock_pw.return_value.__aenter__.return_value = mock_p
        mock_pw.return_value.__aexit__ = AsyncMock(return_value=False)
        with pytest.raises(FetchError) as exc_info:
            await BrowserPageFetcher("JD-Filter/1.0").fetch("https://example.com/jobs/1")

    assert exc_info.value.status_code == 503
    mock_browser.close.assert_awaited_once()


@pytest.mark.parametrize("mode,fetcher_class", [
    ("http", HttpPageFetcher),
    ("browser", BrowserPageFetcher),
])
def test_build_fetcher(mode, fetcher_class):
    fetcher = build_fetcher(ExtractorSettings(fetch_mode=mode, request_timeout=12))
    assert isinstance(fetcher, fetcher_class)
    assert fetcher.timeout == 12


def test_build_fetcher_unknown_mode():
    with pytest.raises(ValueError, match="Unknown fetch mode"):
        build_fetcher(ExtractorSettings(fetch_mode="carrier-pigeon"))
