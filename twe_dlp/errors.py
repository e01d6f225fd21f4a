"""Exceptions raised by the resolver, scraper and pipeline."""

from __future__ import annotations


class TweDlpError(Exception):
    """Base class for errors that abort a channel download."""


class InvalidInput(TweDlpError):
    """The channel identifier was empty."""


class TransportError(TweDlpError):
    """A request could not be sent or its response could not be read."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


class HTTPStatusError(TweDlpError):
    """The channel page answered with a non-success status."""

    def __init__(self, url: str, status_code: int, reason: str = "") -> None:
        status = f"{status_code} {reason}".strip()
        super().__init__(f"request to {url} failed with status {status}")
        self.url = url
        self.status_code = status_code
        self.reason = reason


class ParseError(TweDlpError):
    """The channel page could not be parsed as HTML."""


class ResolutionFailed(TweDlpError):
    """No numeric channel ID could be found for a channel name."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"could not resolve channel name {identifier!r} to an ID")
        self.identifier = identifier


class OutputError(TweDlpError):
    """The channel output folder could not be created."""
