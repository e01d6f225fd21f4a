"""High-level orchestration: scrape a channel page and download its emotes."""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from .config import DownloadConfig
from .content import scrape_channel_page
from .errors import OutputError
from .images import download_all
from .models import ChannelPage
from .sinks import LogSink, log_line
from .utils import UNKNOWN_NAME, make_safe_name

logger = logging.getLogger("twe_dlp")


def channel_folder_name(page: ChannelPage) -> str:
    """Folder name for a channel, falling back to its ID."""
    name = make_safe_name(page.display_name)
    if name == UNKNOWN_NAME:
        name = make_safe_name(page.channel_id)
    return name


def build_output_dir(config: DownloadConfig, page: ChannelPage) -> Path:
    """Create the channel folder under the configured output root."""
    output_dir = Path(config.output_root) / channel_folder_name(page)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"cannot create output directory {output_dir}: {exc}") from exc
    logger.debug("Writing channel %s to %s", page.channel_id, output_dir)
    return output_dir


def download_channel_emotes(
    channel_id: str,
    config: DownloadConfig,
    session: requests.Session,
    sink: LogSink = log_line,
) -> Path:
    """Scrape one channel page and download all of its emotes.

    Returns the channel folder. Page and folder failures raise; per-image
    failures are only reported to ``sink``.
    """
    page = scrape_channel_page(channel_id, config, session)
    output_dir = build_output_dir(config, page)

    sink(f"Channel ID: {channel_id}")
    if page.display_name:
        sink(f"Channel Name: {page.display_name}")
    sink(f"Output Folder: {output_dir}")
    sink("Collecting emote metadata...")
    sink(f"Found {len(page.emotes)} emotes")

    if page.emotes:
        download_all(page.emotes, output_dir, config, session, sink)
    return output_dir
