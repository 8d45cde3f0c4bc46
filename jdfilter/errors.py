"""Exceptions raised by the peripheral layers around the extraction core."""


class JDFilterError(Exception):
    """Base exception for the package."""


class InvalidUrlError(JDFilterError):
    """The target URL is missing or is not an http(s) URL."""


class FetchError(JDFilterError):
    """The job page could not be retrieved."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class InvalidLexiconError(JDFilterError):
    """A lexicon payload is empty after cleaning."""


class LexiconStoreError(JDFilterError):
    """The lexicon could not be read from or written to its store."""
