"""Free-text date range parsing.

Ranges such as ``"Jan 2020 - Mar 2022"``, ``"2019-2021"`` or ``"2020 - Present"`` are
split on a hyphen or the word ``to``; each side is located with a date-token regex and
resolved with :mod:`dateparser`.
"""
import logging
import re
from typing import Optional, Tuple

import dateparser

from .data_models import DateRange
from .text import clamp01

logger = logging.getLogger(__name__)

MONTHS = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)
MONTH_RE = re.compile(rf"\b(?:{MONTHS})\b", re.IGNORECASE)
YEAR_RE = re.compile(r"\b\d{4}\b")
CURRENT_RE = re.compile(r"\b(?:present|current)\b", re.IGNORECASE)

DASHES_RE = re.compile(r"[\u2010-\u2015\u2212]")
ISO_DATE_RE = re.compile(r"\b(\d{4})-(\d{1,2})-(\d{1,2})\b")
RANGE_SPLIT_RE = re.compile(r"\bto\b|-", re.IGNORECASE)

DATE_TOKEN = (
    r"\d{4}/\d{1,2}/\d{1,2}"
    rf"|(?:{MONTHS})\.?(?:\s+\d{{1,2}},)?\s*(?:\d{{4}}|'\d{{2}})"
    r"|\d{1,2}/\d{4}"
    r"|\b\d{4}\b"
)
DATE_TOKEN_RE = re.compile(rf"\b(?:{DATE_TOKEN})", re.IGNORECASE)
DATE_SPAN_RE = re.compile(
    rf"\b(?:{DATE_TOKEN})(?:\s*(?:-|\bto\b)\s*(?:\b(?:{DATE_TOKEN})|present|current))?",
    re.IGNORECASE,
)
ISO_SLASHED_RE = re.compile(r"^\d{4}/\d{1,2}/\d{1,2}$")

DATEPARSER_SETTINGS = {
    "PREFER_DAY_OF_MONTH": "first",
    "PREFER_MONTH_OF_YEAR": "first",
    "RETURN_AS_TIMEZONE_AWARE": False,
}


def looks_like_date_line(line: str) -> bool:
    """Cheap test for a line that plausibly carries a date (month name, year, present/current)."""
    if not line:
        return False
    return bool(MONTH_RE.search(line) or YEAR_RE.search(line) or CURRENT_RE.search(line))


def _prepare(text: str) -> str:
    # Same-length substitutions so that match offsets still index the caller's string
    text = DASHES_RE.sub("-", text)
    return ISO_DATE_RE.sub(lambda m: "/".join(m.groups()), text)


def parse_date(segment: str) -> Tuple[Optional[str], Optional[str]]:
    """Resolve the first date inside ``segment``.

    Returns the day-level ISO date and the substring it was read from, or
    ``(None, None)`` when nothing resolves.
    """
    match = DATE_TOKEN_RE.search(segment or "")
    if not match:
        return None, None
    token = match.group(0)
    settings = dict(DATEPARSER_SETTINGS)
    if ISO_SLASHED_RE.match(token):
        settings["DATE_ORDER"] = "YMD"
    try:
        parsed = dateparser.parse(token.replace("'", "20"), languages=["en"], settings=settings)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Date token {token!r} rejected: {e}")
        return None, None
    if parsed is None:
        return None, None
    return parsed.date().isoformat(), token


def parse_date_range(text: str) -> DateRange:
    """Parse a free-text range into a :class:`DateRange`. Never raises."""
    parts = [p.strip() for p in RANGE_SPLIT_RE.split(_prepare(text or ""))]
    parts = [p for p in parts if p]

    start = end = None
    is_current = False

    # The first segment that carries a date opens the range; the next one closes it
    start_idx = next((i for i, p in enumerate(parts) if DATE_TOKEN_RE.search(p)), 0)
    if parts:
        start, _ = parse_date(parts[start_idx])
    if len(parts) > start_idx + 1:
        closing = parts[start_idx + 1]
        if CURRENT_RE.search(closing):
            is_current = True
        else:
            end, _ = parse_date(closing)

    confidence = clamp01((0.5 if start else 0.0) + (0.5 if end or is_current else 0.0))
    return DateRange(start=start, end=end, is_current=is_current, confidence=confidence)


def find_date_span(line: str) -> Optional[Tuple[int, int]]:
    """Character offsets of the first date or date range expression in ``line``."""
    match = DATE_SPAN_RE.search(_prepare(line or ""))
    if not match:
        return None
    return match.start(), match.end()
