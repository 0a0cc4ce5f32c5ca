"""Contact details read from the whole document (header matter is rarely under a heading)."""
import logging
import re
from typing import Optional

import phonenumbers

from config.settings import settings
from ..data_models import ContactInfo
from ..scored_value import ScoredValue
from ..text import uniq

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE)
URL_RE = re.compile(
    r"\bhttps?://[\w-]+(?:\.[\w-]+)+(?:/[\w\-._~:/?#\[\]@!$&'()*+,;=%]*)?"
    r"|(?<![@.])\b(?:[\w-]+\.)+(?:com|org)\b(?:/[\w\-._~:/?#\[\]@!$&'()*+,;=%]*)?",
    re.IGNORECASE,
)
URL_TRAILING_RE = re.compile(r"[.,;:!?)\]]+$")
PHONE_FALLBACK_RE = re.compile(
    r"(?<!\d)(?:\+\d{1,3}[\s.-]?)?(?:\(?\d{3}\)?[\s.-]?)?\d{3}[\s.-]?\d{4}(?!\d)"
)
NAME_WORD_RE = re.compile(r"\b[A-Za-z]{2,}\b")
EMAIL_LOCAL_NOISE_RE = re.compile(r"[\d_]+")
EMAIL_LOCAL_SPLIT_RE = re.compile(r"[._\- ]+")
BOILERPLATE_RE = re.compile(r"\b(?:RESUME|CURRICULUM VITAE|CV)\b", re.IGNORECASE)
NAME_DISALLOWED_RE = re.compile(r"[^A-Za-z ,.'-]")
SPACES_RE = re.compile(r"\s{2,}")
NAME_EDGE_PUNCT = " ,.'-"
LOCATION_RE = re.compile(r"\b[A-Z][a-zA-Z]+,\s*(?:[A-Z]{2}|[A-Z][a-zA-Z]+)\b")

EMAIL_CONFIDENCE = 0.99
LINKS_CONFIDENCE = 0.95
PHONE_CONFIDENCE = 0.95
PHONE_FALLBACK_CONFIDENCE = 0.7
NAME_CONFIDENCE = 0.85
NAME_FROM_EMAIL_CONFIDENCE = 0.6
LOCATION_CONFIDENCE = 0.75


def extract_email(text: str) -> ScoredValue:
    """Extract the first email address"""
    match = EMAIL_RE.search(text or "")
    if match:
        return ScoredValue.of(match.group(0), EMAIL_CONFIDENCE)
    return ScoredValue.empty()


def extract_links(text: str) -> ScoredValue:
    """Extract URL-like tokens, normalized to an https:// prefix"""
    found = []
    for match in URL_RE.finditer(text or ""):
        link = URL_TRAILING_RE.sub("", match.group(0))
        if not link.lower().startswith("http"):
            link = f"https://{link}"
        found.append(link)
    links = uniq(found)
    return ScoredValue.of(links, LINKS_CONFIDENCE if links else 0.0)


def extract_phone(text: str, region: Optional[str] = None) -> ScoredValue:
    """Extract a phone number, preferring libphonenumber's matcher over a digit-grouping regex"""
    text = text or ""
    region = region if region is not None else settings.DEFAULT_PHONE_REGION
    for match in phonenumbers.PhoneNumberMatcher(text, region):
        formatted = phonenumbers.format_number(match.number, phonenumbers.PhoneNumberFormat.E164)
        return ScoredValue.of(formatted, PHONE_CONFIDENCE)

    raw = PHONE_FALLBACK_RE.search(text)
    if raw:
        logger.debug(f"Phone matched by fallback pattern: {raw.group(0)!r}")
        return ScoredValue.of(raw.group(0), PHONE_FALLBACK_CONFIDENCE)
    return ScoredValue.empty()


def _name_from_email(email: str) -> Optional[str]:
    local = EMAIL_LOCAL_NOISE_RE.sub(" ", email.split("@")[0])
    parts = [p[0].upper() + p[1:] for p in EMAIL_LOCAL_SPLIT_RE.split(local) if p]
    if len(parts) >= 2:
        return " ".join(parts[:2])
    return None


def extract_name(text: str, email_hint: Optional[str] = None,
                 scan_lines: int = None, max_chars: int = None) -> ScoredValue:
    """Pick the first plausible name line near the top, else guess from the email local part"""
    scan_lines = scan_lines or settings.NAME_SCAN_LINES
    max_chars = max_chars or settings.NAME_MAX_CHARS

    top = [line.strip() for line in (text or "").split("\n") if line.strip()][:scan_lines]
    for line in top:
        if NAME_WORD_RE.search(line) and not EMAIL_RE.search(line) and len(line) <= max_chars:
            return ScoredValue.of(line, NAME_CONFIDENCE)

    if email_hint:
        guess = _name_from_email(email_hint)
        if guess:
            return ScoredValue.of(guess, NAME_FROM_EMAIL_CONFIDENCE)
    return ScoredValue.empty()


def refine_name(candidate: ScoredValue) -> ScoredValue:
    """Strip resume boilerplate and stray characters from a name candidate"""
    if not candidate.value:
        return candidate
    original = SPACES_RE.sub(" ", candidate.value).strip()
    cleaned = BOILERPLATE_RE.sub("", candidate.value)
    cleaned = NAME_DISALLOWED_RE.sub(" ", cleaned)
    cleaned = SPACES_RE.sub(" ", cleaned).strip(NAME_EDGE_PUNCT)
    if not cleaned:
        return candidate
    if cleaned == original:
        return candidate.replace(value=cleaned)
    return candidate.replace(value=cleaned, confidence=min(1.0, candidate.confidence + 0.05))


def extract_location(text: str, scan_lines: int = None) -> ScoredValue:
    """Find a "City, ST" or "City, Country" token near the top of the document"""
    scan_lines = scan_lines or settings.LOCATION_SCAN_LINES
    for line in (text or "").split("\n")[:scan_lines]:
        match = LOCATION_RE.search(line)
        if match:
            return ScoredValue.of(match.group(0), LOCATION_CONFIDENCE)
    return ScoredValue.empty()


def extract_contact(text: str, region: Optional[str] = None) -> ContactInfo:
    email = extract_email(text)
    return ContactInfo(
        name=refine_name(extract_name(text, email.value)),
        email=email,
        phone=extract_phone(text, region),
        links=extract_links(text),
        location=extract_location(text),
    )
