"""Shared helpers for document generation: dates and filenames."""

from __future__ import annotations

import re
from datetime import date

INDONESIAN_MONTHS = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def format_indonesian_date(day: date | None = None) -> str:
    """Format *day* (default: today) the Indonesian way, e.g. ``18 Oktober 2026``."""
    day = day or date.today()
    return f"{day.day} {INDONESIAN_MONTHS[day.month - 1]} {day.year}"


def sanitize_filename(name: str, fallback: str) -> str:
    """Reduce *name* to a lowercase ASCII slug usable in a filename.

    Every run of characters outside ``[a-z0-9]`` becomes a single ``-`` and
    leading/trailing dashes are dropped.  Returns *fallback* when nothing
    survives.
    """
    slug = _NON_ALNUM.sub("-", name.strip().lower()).strip("-")
    return slug or fallback
