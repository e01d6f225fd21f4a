"""Emote image downloading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import requests

from .config import DownloadConfig
from .models import EmoteRecord
from .sinks import LogSink
from .utils import make_safe_name

logger = logging.getLogger("twe_dlp")

CHUNK_SIZE = 64 * 1024


def determine_file_extension(content_type: Optional[str]) -> str:
    """Pick a file extension from a Content-Type header value."""
    content_type = (content_type or "").lower()
    if "gif" in content_type:
        return "gif"
    if "jpeg" in content_type or "jpg" in content_type:
        return "jpg"
    if "png" in content_type:
        return "png"
    return "img"


def asset_url(record: EmoteRecord, size: str) -> str:
    # The size is not checked against the record's format type.
    return f"{record.base_url}/light/{size}"


def _download_size(
    record: EmoteRecord,
    size: str,
    safe_code: str,
    emote_dir: Path,
    config: DownloadConfig,
    session: requests.Session,
    sink: LogSink,
) -> None:
    url = asset_url(record, size)
    try:
        response = session.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
            stream=True,
        )
    except requests.RequestException as exc:
        sink(f"[skip] {url} ({exc})")
        return

    with response:
        if response.status_code != requests.codes.ok:
            sink(f"[skip] {url} (status {response.status_code} {response.reason})")
            return

        extension = determine_file_extension(response.headers.get("Content-Type"))
        filename = f"{safe_code}_{size}.{extension}"
        destination = emote_dir / filename
        try:
            handle = destination.open("wb")
        except OSError as exc:
            sink(f"[skip] {destination} (cannot create file: {exc})")
            return

        try:
            with handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    handle.write(chunk)
        except (requests.RequestException, OSError) as exc:
            sink(f"[skip] {destination} (copy error: {exc})")
            return

    logger.debug("Saved %s", destination)
    sink(f"[ok] {filename}")


def download_emote_images(
    record: EmoteRecord,
    output_root: Path,
    config: DownloadConfig,
    session: requests.Session,
    sink: LogSink,
) -> None:
    """Download every configured size of one emote into its own folder.

    Failures are reported to ``sink`` and only affect the size being fetched;
    a folder that cannot be created skips the whole emote.
    """
    safe_code = make_safe_name(record.emote_code)
    emote_dir = Path(output_root) / safe_code
    try:
        emote_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        sink(f"[error] cannot create folder {emote_dir}: {exc}")
        return

    for size in config.sizes:
        _download_size(record, size, safe_code, emote_dir, config, session, sink)


def download_all(
    records: Dict[str, EmoteRecord],
    output_root: Path,
    config: DownloadConfig,
    session: requests.Session,
    sink: LogSink,
) -> None:
    """Download every record sequentially, in collection order."""
    for emote_id, record in records.items():
        sink(f"Downloading sizes for emote: {record.emote_code} ({emote_id})")
        download_emote_images(record, output_root, config, session, sink)
