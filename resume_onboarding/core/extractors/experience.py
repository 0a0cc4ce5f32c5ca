import re
from typing import List, Optional, Sequence, Tuple

from ..data_models import Block, ExperienceItem
from ..dates import find_date_span, parse_date_range
from ..scored_value import ScoredValue
from ..text import bulletize

# "Title | City, ST" or "Title - City, Country"
SEPARATOR_RE = re.compile(r"\s*[|\u00b7\u2022]\s*|\s+[-\u2013\u2014]\s+")
LOCATION_RE = re.compile(r"^(?P<head>.*?),\s*(?P<region>[A-Za-z][A-Za-z .]*)$")
CITY_WORD_RE = re.compile(r"^[A-Z][A-Za-z.'-]*$")
CITY_CONNECTORS = {"de", "da", "del", "do", "la", "le", "upon"}
MAX_CITY_WORDS = 3
EDGE_PUNCT = " ,;|-@\u2013\u2014\u00b7"

TITLE_KEYWORDS = {
    "engineer", "developer", "dev", "manager", "intern", "internship", "analyst",
    "scientist", "designer", "consultant", "lead", "architect", "specialist",
    "director", "administrator", "associate", "officer", "assistant", "coordinator",
    "researcher", "technician", "president", "head", "programmer", "tester",
    "fellow", "trainee", "founder", "executive", "representative", "owner",
}


def _split_city(words: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split the words before the comma into (title words, city words)."""
    limit = len(words) if len(words) == 1 else min(MAX_CITY_WORDS, len(words) - 1)
    cut = len(words)
    taken = 0
    for i in range(len(words) - 1, -1, -1):
        lowered = words[i].lower()
        if taken >= limit or lowered in TITLE_KEYWORDS:
            break
        if lowered in CITY_CONNECTORS and taken:
            cut = i
            continue
        if not CITY_WORD_RE.match(words[i]):
            break
        cut = i
        taken += 1
    while cut < len(words) and words[cut].lower() in CITY_CONNECTORS:
        cut += 1
    return list(words[:cut]), list(words[cut:])


def split_title_location(line: str) -> Tuple[str, Optional[str]]:
    """Separate a trailing "City, Region" from a title line."""
    line = line.strip()
    parts = SEPARATOR_RE.split(line)
    if len(parts) >= 2 and LOCATION_RE.match(parts[-1]):
        title = " ".join(p for p in parts[:-1] if p).strip(EDGE_PUNCT)
        return title, parts[-1].strip()

    match = LOCATION_RE.match(line)
    if not match:
        return line, None
    head_words = match.group("head").split()
    if not head_words:
        return line, None
    title_words, city_words = _split_city(head_words)
    if not city_words:
        return line, None
    location = f"{' '.join(city_words)}, {match.group('region').strip()}"
    return " ".join(title_words).strip(EDGE_PUNCT), location


def remove_date_text(line: str) -> str:
    span = find_date_span(line)
    if span is None:
        return line.strip()
    start, end = span
    return f"{line[:start]} {line[end:]}".strip(EDGE_PUNCT).strip()


def extract_experience(blocks: Sequence[Block], confidence_scale: float = 1.0) -> List[ExperienceItem]:
    """Read one job per block: employer and dates, then title and location, then bullets.

    ``confidence_scale`` multiplies every field confidence, for blocks read outside an
    experience section.
    """
    items = []
    for block in blocks:
        if len(block.lines) < 2:
            continue

        line1, line2 = block.lines[0], block.lines[1]
        dates = parse_date_range(line1)
        company_raw = remove_date_text(line1) if dates.start else line1.strip()
        title_raw, location_raw = split_title_location(line2)

        bullets = [b for b in bulletize(block.lines[2:]) if len(b) > 2]

        items.append(ExperienceItem(
            title_raw=title_raw,
            company_raw=company_raw,
            location_raw=location_raw,
            title=ScoredValue.of(title_raw or None, 0.9 * confidence_scale),
            company=ScoredValue.of(company_raw or None, 0.9 * confidence_scale),
            location=ScoredValue.of(location_raw, 0.6 * confidence_scale),
            dates=dates,
            bullets=ScoredValue.of(bullets, 0.85 * confidence_scale if bullets else 0.0),
        ))
    return items
