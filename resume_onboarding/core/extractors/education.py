import re
from typing import List, Sequence

from ..data_models import EducationItem
from ..dates import MONTH_RE, find_date_span, looks_like_date_line, parse_date_range
from ..scored_value import ScoredValue

# Abbreviations are case-sensitive so that words like "be" or "ms" are not read as degrees.
# Stops at a comma, newline or open paren so that "(GPA: 3.9)" is not swallowed
DEGREE_RE = re.compile(
    r"\b(?:B\.?Sc\.?|B\.?Eng\.?|B\.?Tech\.?|B\.?E\.?|B\.S\.?|B\.A\.?|M\.?Sc\.?|M\.?Eng\.?|"
    r"M\.?Tech\.?|M\.?S\.?|MBA|Ph\.?D\.?|(?i:associate|bachelor|master|doctor))\b[^\n,(]*"
)
MAJOR_RE = re.compile(r"\b(?:major(?:ing)?\s+in|in)\s+([A-Za-z &]+)", re.IGNORECASE)
GPA_RE = re.compile(
    r"\bGPA\s*[:=]?\s*([0-4]\.[0-9]{1,2})(?:\s*/\s*[0-4]\.[0-9]{1,2})?",
    re.IGNORECASE,
)
EDGE_PUNCT = " ,;|-@\u2013\u2014\u00b7"


def _institution(date_line: str) -> str:
    span = find_date_span(date_line)
    if span is not None:
        head = date_line[:span[0]]
    else:
        head = MONTH_RE.split(date_line, maxsplit=1)[0]
    return head.strip(EDGE_PUNCT).strip()


def extract_education(lines: Sequence[str]) -> List[EducationItem]:
    """Read education entries, each starting at a date line and running to the next one."""
    starts = [i for i, line in enumerate(lines) if looks_like_date_line(line)]

    items = []
    for n, start in enumerate(starts):
        end = starts[n + 1] if n + 1 < len(starts) else len(lines)
        item_lines = [line for line in lines[start:end] if line.strip()]
        if not item_lines:
            continue

        date_line = item_lines[0]
        item_text = "\n".join(item_lines)

        institution = _institution(date_line)
        degree_match = DEGREE_RE.search(item_text)
        degree = degree_match.group(0).strip() if degree_match else ""
        major_match = MAJOR_RE.search(item_text)
        major = major_match.group(1).strip() if major_match else ""
        gpa_match = GPA_RE.search(item_text)
        gpa = gpa_match.group(1) if gpa_match else ""

        items.append(EducationItem(
            institution_raw=institution,
            degree_raw=degree,
            institution=ScoredValue.of(institution or None, 0.9),
            degree=ScoredValue.of(degree or None, 0.85),
            major=ScoredValue.of(major or None, 0.8),
            gpa=ScoredValue.of(gpa or None, 0.9),
            dates=parse_date_range(date_line),
        ))
    return items
