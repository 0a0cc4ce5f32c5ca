"""Text normalization helpers shared by every pipeline stage."""
import hashlib
import re
from typing import Iterable, List

NBSP_RE = re.compile(r"[\u00a0\u202f]")
CONTROL_SPACE_RE = re.compile(r"[\t\v\f]+")
ZERO_WIDTH_RE = re.compile(r"[\u200b\u200c\u200d\u2060\ufeff]")
MULTISPACES_RE = re.compile(r" {2,}")
TRAILING_WS_RE = re.compile(r"[^\S\n]+\n")
NEWLINES_RE = re.compile(r"\n{3,}")
LINE_SPLIT_RE = re.compile(r"\r?\n")
BULLET_RE = re.compile(r"^[-\u2013\u2014\u2022\u00b7\u25e6*]\s{0,2}")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace variants so that downstream regexes see plain spaces and newlines.

    Non-breaking spaces become regular spaces, tab/vertical-tab/form-feed runs collapse
    to a single space, zero-width characters are dropped, trailing whitespace before a
    newline is removed and three or more consecutive newlines collapse to exactly two.
    """
    if not text:
        return ""
    text = NBSP_RE.sub(" ", text)
    text = CONTROL_SPACE_RE.sub(" ", text)
    text = ZERO_WIDTH_RE.sub("", text)
    text = MULTISPACES_RE.sub(" ", text)
    text = TRAILING_WS_RE.sub("\n", text)
    text = NEWLINES_RE.sub("\n\n", text)
    return text.strip()


def to_lines(text: str) -> List[str]:
    """Split normalized text into trimmed lines, keeping blank lines as empty strings."""
    if not text:
        return []
    return [line.strip() for line in LINE_SPLIT_RE.split(text)]


def bulletize(lines: Iterable[str]) -> List[str]:
    """Strip a leading bullet glyph from each line."""
    return [BULLET_RE.sub("", line).strip() for line in lines]


def uniq(items: Iterable[str]) -> List[str]:
    """Trim and deduplicate while keeping first-seen order."""
    seen = {}
    for item in items:
        seen.setdefault(item.strip(), None)
    return list(seen)


def sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))
