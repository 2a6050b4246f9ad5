"""Shared text helpers for human-facing panels."""

from __future__ import annotations

import re

DESCRIPTION_LIMIT = 150
WHITESPACE_RE = re.compile(r"\s+")


def truncate_description(text: str | None, limit: int = DESCRIPTION_LIMIT) -> tuple[str, bool]:
    """Return (display_text, truncated)."""
    if not text:
        return "", False
    if len(text) <= limit:
        return text, False
    return text[:limit], True


def collapse_whitespace(text: str | None) -> str:
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", text).strip()


def result_summary(filtered: int, total: int, noun: str = "results") -> str:
    if filtered == total:
        return f"Showing all {total} {noun}"
    return f"Showing {filtered} of {total} {noun}"


def founded_label(year: object) -> str:
    if isinstance(year, bool) or not isinstance(year, int):
        return "Founded n/a"
    return f"Founded {year}"


def cell_text(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) or "-"
    return str(value)
