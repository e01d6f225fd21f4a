"""Resolve channel names to numeric twitchemotes channel IDs."""

from __future__ import annotations

import logging
import re
from typing import Optional

import requests

from .config import DownloadConfig
from .errors import InvalidInput, ResolutionFailed, TransportError

logger = logging.getLogger("twe_dlp")

CHANNEL_URL_PATTERN = re.compile(r"/channels/(\d+)")


def is_channel_id(identifier: str) -> bool:
    """Return True when ``identifier`` is made only of ASCII digits."""
    return bool(identifier) and all("0" <= char <= "9" for char in identifier)


def find_channel_id(text: str) -> Optional[str]:
    match = CHANNEL_URL_PATTERN.search(text)
    if match:
        return match.group(1)
    return None


def resolve_channel_id(
    identifier: str,
    config: DownloadConfig,
    session: requests.Session,
) -> str:
    """Turn a channel name or numeric ID into a numeric channel ID.

    Numeric identifiers are returned unchanged without touching the network.
    Names are submitted to the catalog search form; the ID is taken from the
    redirect target first and from the response body second.
    """
    if not identifier:
        raise InvalidInput("empty channel identifier")
    if is_channel_id(identifier):
        return identifier

    url = config.search_url
    form = {"query": identifier, "source": config.search_source}
    headers = {
        "Content-Type": "application/x-www-form-urlencoded",
        "User-Agent": config.user_agent,
    }
    logger.debug("Searching for channel %r at %s", identifier, url)
    try:
        with session.post(
            url, data=form, headers=headers, timeout=config.timeout
        ) as response:
            channel_id = find_channel_id(response.url or "")
            if channel_id:
                logger.debug("Resolved %r from redirect %s", identifier, response.url)
                return channel_id
            channel_id = find_channel_id(response.text)
    except requests.RequestException as exc:
        raise TransportError(url, exc) from exc

    if channel_id:
        logger.debug("Resolved %r from response body", identifier)
        return channel_id
    raise ResolutionFailed(identifier)
