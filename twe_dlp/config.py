"""Configuration objects and constants for the emote downloader."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import requests

DEFAULT_BASE_URL = "https://twitchemotes.com"
DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) twe-dlp/1.0"
DEFAULT_TIMEOUT = 30.0
DEFAULT_SIZES: Tuple[str, ...] = ("1.0", "2.0", "3.0")
EMOTE_CDN_MARKER = "static-cdn.jtvnw.net/emoticons/v2/"
SEARCH_SOURCE = "twe-dlp"


@dataclass
class DownloadConfig:
    """Settings shared by the resolver, scraper and downloader."""

    output_root: Path = Path(".")
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    sizes: Tuple[str, ...] = DEFAULT_SIZES
    cdn_marker: str = EMOTE_CDN_MARKER
    search_source: str = SEARCH_SOURCE

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search/channel"

    def channel_url(self, channel_id: str) -> str:
        return f"{self.base_url}/channels/{channel_id}"


def create_session(config: DownloadConfig) -> requests.Session:
    """Return a session whose default headers carry the configured user agent."""
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    return session
