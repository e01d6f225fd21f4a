"""Data models passed between the scraper and the downloader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class EmoteRecord:
    """One emote discovered on a channel page."""

    emote_id: str
    base_url: str
    format_type: str
    emote_code: str


@dataclass
class ChannelPage:
    """Scrape result for a single channel page."""

    channel_id: str
    display_name: str
    emotes: Dict[str, EmoteRecord] = field(default_factory=dict)
