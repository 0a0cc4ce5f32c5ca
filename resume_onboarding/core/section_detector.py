import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from config.settings import settings
from .data import SECTION_ALIASES
from .data_models import SectionSpan

logger = logging.getLogger(__name__)

NON_LETTER_RE = re.compile(r"[^A-Za-z ]")
NON_MATCH_RE = re.compile(r"[^A-Za-z &]")
SPACES_RE = re.compile(r"\s+")


class SimilarityScorer(ABC):
    """Approximate string matcher used to classify heading candidates."""

    @abstractmethod
    def best_match(self, query: str, choices: Sequence[str]) -> Optional[Tuple[str, float]]:
        """Return the best choice for ``query`` with a score normalized to [0, 1]."""


class LevenshteinScorer(SimilarityScorer):
    """Normalized Levenshtein similarity, 1 - distance / max(len)."""

    def best_match(self, query: str, choices: Sequence[str]) -> Optional[Tuple[str, float]]:
        if not query or not choices:
            return None
        match = process.extractOne(
            query, choices, scorer=Levenshtein.normalized_similarity, processor=None
        )
        if match is None:
            return None
        choice, score, _ = match
        return choice, max(0.0, min(1.0, float(score)))


class TokenOverlapScorer(SimilarityScorer):
    """Jaccard overlap of whitespace tokens."""

    def best_match(self, query: str, choices: Sequence[str]) -> Optional[Tuple[str, float]]:
        tokens = set(query.split())
        if not tokens or not choices:
            return None
        best = None
        for choice in choices:
            other = set(choice.split())
            score = len(tokens & other) / len(tokens | other) if other else 0.0
            if best is None or score > best[1]:
                best = (choice, score)
        return best


class SectionDetector:
    """Finds heading lines and turns them into ordered, non-overlapping section spans."""

    def __init__(self,
                 aliases: Optional[Mapping[str, Iterable[str]]] = None,
                 scorer: Optional[SimilarityScorer] = None,
                 threshold: float = None,
                 max_heading_chars: int = None,
                 max_heading_words: int = None):
        aliases = aliases if aliases is not None else SECTION_ALIASES
        self.alias_to_section: Dict[str, str] = {
            alias.lower(): section
            for section, names in aliases.items()
            for alias in names
        }
        self.choices = list(self.alias_to_section)
        self.scorer = scorer or LevenshteinScorer()
        self.threshold = threshold if threshold is not None else settings.SECTION_MATCH_THRESHOLD
        self.max_heading_chars = max_heading_chars or settings.HEADING_MAX_CHARS
        self.max_heading_words = max_heading_words or settings.HEADING_MAX_WORDS

    def _candidate(self, line: str) -> Optional[str]:
        """Return the match key for a heading-like line, or None for body text."""
        clean_for_test = NON_LETTER_RE.sub("", line).strip()
        if not clean_for_test or len(clean_for_test) > self.max_heading_chars:
            return None

        is_all_caps = clean_for_test == clean_for_test.upper()
        is_short = len(clean_for_test.split()) <= self.max_heading_words
        if not (is_all_caps or is_short):
            return None

        clean_for_match = SPACES_RE.sub(" ", NON_MATCH_RE.sub("", line)).strip().lower()
        return clean_for_match or None

    def classify(self, text: str) -> Optional[Tuple[str, float]]:
        """Map a cleaned heading to its canonical section name and score."""
        match = self.scorer.best_match(text, self.choices)
        if match is None:
            return None
        alias, score = match
        section = self.alias_to_section.get(alias)
        if section is None or score < self.threshold:
            return None
        return section, score

    def detect(self, lines: Sequence[str]) -> List[SectionSpan]:
        found = []
        for idx, line in enumerate(lines):
            key = self._candidate(line)
            if key is None:
                continue
            classified = self.classify(key)
            if classified is None:
                continue
            section, score = classified
            logger.debug(f"Line {idx} {line!r} classified as {section} ({score:.2f})")
            found.append((idx, section, score))

        found.sort(key=lambda item: item[0])
        spans = []
        for i, (idx, section, score) in enumerate(found):
            end = found[i + 1][0] if i + 1 < len(found) else len(lines)
            spans.append(SectionSpan(name=section, start_line=idx, end_line=end, match_score=score))
        return spans


def detect_sections(lines: Sequence[str], detector: Optional[SectionDetector] = None) -> List[SectionSpan]:
    return (detector or SectionDetector()).detect(lines)
