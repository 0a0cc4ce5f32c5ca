import re
from typing import List, Sequence

from ..data_models import Block, ProjectItem
from ..dates import parse_date_range
from ..scored_value import ScoredValue
from ..text import bulletize, uniq

PROJECT_HEADER_PATTERNS = [
    # "Name (Jan 2023 - Mar 2023)" or "Name [2022]"
    re.compile(r"^(?P<name>[^(\[]+?)\s*[(\[](?P<dates>[^\])]+)[)\]]\s*$"),
    # "Name - short description"
    re.compile(r"^(?P<name>[^(\[]+?)(?:\s*[\u2013\u2014]\s*|\s+-\s+)(?P<description>.+)$"),
]

PROJECT_LINK_RE = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+(?:/tree/[A-Za-z0-9_.-]+)?"
    r"|(?<![@\w.])(?:https?://)?(?:www\.)?(?:[A-Za-z0-9-]+\.)+"
    r"(?:com|org|net|io|dev|app|ai|co|me)\b(?:/[A-Za-z0-9_.~%-]+)*/?"
    r"(?:\?[A-Za-z0-9_.-]+=[A-Za-z0-9_.-]+(?:&[A-Za-z0-9_.-]+=[A-Za-z0-9_.-]+)*)?",
    re.IGNORECASE,
)
LINK_TRAILING_RE = re.compile(r"[.,;:]+$")


def _links(lines: Sequence[str]) -> List[str]:
    found = []
    for line in lines:
        for match in PROJECT_LINK_RE.finditer(line):
            found.append(LINK_TRAILING_RE.sub("", match.group(0)))
    return uniq(found)


def extract_projects(blocks: Sequence[Block]) -> List[ProjectItem]:
    items = []
    for block in blocks:
        header = bulletize(block.lines[:1])[0]
        title = header
        description = None
        dates_raw = ""
        for pattern in PROJECT_HEADER_PATTERNS:
            match = pattern.match(header)
            if match:
                groups = match.groupdict()
                title = groups["name"].strip()
                description = (groups.get("description") or "").strip() or None
                dates_raw = (groups.get("dates") or "").strip()
                break

        links = _links(block.lines)
        bullets = [b for b in bulletize(block.lines[1:]) if len(b) > 2]

        items.append(ProjectItem(
            title_raw=title or None,
            description_raw=description,
            title=ScoredValue.of(title or None, 0.9),
            dates=parse_date_range(dates_raw),
            bullets=ScoredValue.of(bullets, 0.85 if bullets else 0.0),
            links=ScoredValue.of(links, 0.9 if links else 0.0),
        ))
    return items
