"""Progress sinks receiving the human-readable download log."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List

logger = logging.getLogger("twe_dlp")

LogSink = Callable[[str], None]

DEFAULT_BUFFER_LINES = 200


def log_line(line: str) -> None:
    """Forward a progress line to the ``twe_dlp`` logger."""
    if line.startswith("[skip]"):
        logger.warning("%s", line)
    elif line.startswith(("[error]", "Error:")):
        logger.error("%s", line)
    else:
        logger.info("%s", line)


class LogBuffer:
    """Collecting sink that keeps the most recent lines."""

    def __init__(self, max_lines: int = DEFAULT_BUFFER_LINES) -> None:
        self._lines: Deque[str] = deque(maxlen=max_lines)

    def __call__(self, line: str) -> None:
        if not line:
            return
        self._lines.append(line)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)
