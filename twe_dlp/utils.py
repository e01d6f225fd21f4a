"""Utility helpers for filesystem-safe naming."""

from __future__ import annotations

import re

SAFE_NAME_PATTERN = re.compile(r"[^A-Za-z0-9_]+")
UNKNOWN_NAME = "unknown"


def make_safe_name(value: str) -> str:
    """Collapse every run of characters outside ``[A-Za-z0-9_]`` into ``_``.

    Names with no allowed character at all become ``"unknown"``.
    """
    value = value.strip()
    if not SAFE_NAME_PATTERN.sub("", value):
        return UNKNOWN_NAME
    return SAFE_NAME_PATTERN.sub("_", value)
