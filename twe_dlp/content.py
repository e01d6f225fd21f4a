"""Channel page fetching and emote metadata extraction."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .config import DownloadConfig
from .errors import HTTPStatusError, ParseError, TransportError
from .models import ChannelPage, EmoteRecord

logger = logging.getLogger("twe_dlp")

HTML_TAG_PATTERN = re.compile(r"<.*?>")


def fetch_document(
    url: str,
    config: DownloadConfig,
    session: requests.Session,
) -> BeautifulSoup:
    """Download ``url`` and parse it into a BeautifulSoup document."""
    logger.debug("Fetching %s", url)
    try:
        with session.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        ) as response:
            if response.status_code != requests.codes.ok:
                raise HTTPStatusError(url, response.status_code, response.reason or "")
            html = response.content
    except requests.RequestException as exc:
        raise TransportError(url, exc) from exc

    try:
        return BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"could not parse {url}: {exc}") from exc


def extract_display_name(soup: BeautifulSoup) -> str:
    """Return the channel name shown in the first card header, or ``""``."""
    header = soup.select_one("div.card-header")
    if header is None:
        return ""

    anchor = header.find("a")
    if anchor is not None:
        text = anchor.get_text().strip()
        if text:
            return text

    heading = header.select_one("h1, h2, h3")
    if heading is not None:
        text = heading.get_text().strip()
        if text:
            return text
    return ""


def _absolute_source(src: str, base_url: str) -> Optional[str]:
    if src.startswith(("http://", "https://")):
        return src
    try:
        return urljoin(base_url, src)
    except ValueError:
        return None


def _emote_code(img: Tag, emote_id: str) -> str:
    regex = img.get("data-regex")
    if regex and regex.strip():
        return regex

    tooltip = img.get("data-tooltip")
    if tooltip and tooltip.strip():
        code = HTML_TAG_PATTERN.sub("", tooltip).strip()
        if code:
            return code

    # An <img> at the top level has the whole document as its parent.
    if img.parent is not None:
        parent_text = img.parent.get_text().strip()
        if parent_text:
            return parent_text
    return emote_id


def parse_emote_source(src: str, config: DownloadConfig) -> Optional[EmoteRecord]:
    """Split a CDN image URL into an emote record without a code.

    The identifier and format are positional: the second and third segments
    after ``emoticons``. Returns None for URLs of any other shape.
    """
    if not src or config.cdn_marker not in src:
        return None
    absolute = _absolute_source(src, config.base_url)
    if absolute is None:
        return None

    parts = absolute.split("/")
    try:
        index = parts.index("emoticons")
    except ValueError:
        return None
    if index + 3 >= len(parts):
        return None

    emote_id = parts[index + 2]
    return EmoteRecord(
        emote_id=emote_id,
        base_url="/".join(parts[: index + 4]),
        format_type=parts[index + 3],
        emote_code=emote_id,
    )


def collect_emote_metadata(
    soup: BeautifulSoup,
    config: DownloadConfig,
) -> Dict[str, EmoteRecord]:
    """Map emote identifiers to records for every CDN image in the document.

    Images are visited in document order and the first image seen for an
    identifier wins.
    """
    emotes: Dict[str, EmoteRecord] = {}
    for img in soup.find_all("img"):
        record = parse_emote_source(img.get("src") or "", config)
        if record is None:
            continue
        if record.emote_id in emotes:
            logger.debug("Ignoring duplicate emote %s", record.emote_id)
            continue
        emotes[record.emote_id] = replace(
            record, emote_code=_emote_code(img, record.emote_id)
        )
    return emotes


def scrape_channel_page(
    channel_id: str,
    config: DownloadConfig,
    session: requests.Session,
) -> ChannelPage:
    """Fetch a channel page and extract its display name and emotes."""
    soup = fetch_document(config.channel_url(channel_id), config, session)
    return ChannelPage(
        channel_id=channel_id,
        display_name=extract_display_name(soup),
        emotes=collect_emote_metadata(soup, config),
    )
