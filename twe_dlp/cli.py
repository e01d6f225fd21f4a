"""Command-line entry point for the emote downloader."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, DownloadConfig, create_session
from .errors import TweDlpError
from .pipeline import download_channel_emotes
from .resolver import resolve_channel_id
from .sinks import log_line

logger = logging.getLogger("twe_dlp.cli")

PROMPT = "Channel name or ID: "


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="twe-dlp",
        description="Download every emote of a channel listed on twitchemotes.com.",
    )
    parser.add_argument(
        "channel",
        nargs="?",
        help="Channel name or numeric ID (prompted for when omitted)",
    )
    parser.add_argument(
        "--output",
        default=".",
        type=Path,
        help="Directory in which the channel folder is created",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header sent with every request",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def read_identifier(prompt: str = PROMPT) -> str:
    """Ask for a channel on stdin; EOF counts as no answer."""
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    identifier: Optional[str] = args.channel
    if identifier is None:
        identifier = read_identifier()
    identifier = identifier.strip()
    if not identifier:
        print("No channel identifier provided.", file=sys.stderr)
        return 1

    config = DownloadConfig(
        output_root=args.output,
        user_agent=args.user_agent,
        timeout=args.timeout,
    )

    overall_start = time.perf_counter()
    with create_session(config) as session:
        try:
            channel_id = resolve_channel_id(identifier, config, session)
        except TweDlpError as exc:
            print(f"Error resolving channel: {exc}", file=sys.stderr)
            return 1

        try:
            download_channel_emotes(channel_id, config, session, log_line)
        except TweDlpError as exc:
            print(f"Error downloading emotes: {exc}", file=sys.stderr)
            return 1

    log_line("Download completed.")
    logger.debug("Finished in %.2fs", time.perf_counter() - overall_start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
