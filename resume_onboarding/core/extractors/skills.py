import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Tuple

from ..data import DEFAULT_SKILL_TAXONOMY
from ..data_models import SkillsResult
from ..scored_value import ScoredValue

SKILLS_CONFIDENCE = 0.9


class SkillsExtractor:
    """Matches a skill taxonomy against free text.

    The taxonomy (category -> canonical skill names) is frozen at construction and its
    patterns compiled once, so one extractor can be shared across documents.
    """

    def __init__(self, taxonomy: Optional[Mapping[str, Sequence[str]]] = None):
        source = taxonomy if taxonomy is not None else DEFAULT_SKILL_TAXONOMY
        self.taxonomy: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {category: tuple(skills) for category, skills in source.items()}
        )
        self._patterns: Dict[str, Pattern] = {}
        for skills in self.taxonomy.values():
            for skill in skills:
                if skill not in self._patterns:
                    self._patterns[skill] = re.compile(
                        rf"(?<![A-Za-z0-9]){re.escape(skill.lower())}(?![A-Za-z0-9])",
                        re.IGNORECASE,
                    )

    def find(self, text: str) -> List[str]:
        lowered = (text or "").lower()
        return sorted(skill for skill, pattern in self._patterns.items() if pattern.search(lowered))

    def extract(self, text: str) -> SkillsResult:
        raw = self.find(text)
        found = set(raw)
        categorized = {}
        for category, skills in self.taxonomy.items():
            matched = sorted(s for s in skills if s in found)
            if matched:
                categorized[category] = matched

        return SkillsResult(
            raw=ScoredValue.of(raw, SKILLS_CONFIDENCE if raw else 0.0),
            categorized=ScoredValue.of(categorized, SKILLS_CONFIDENCE if categorized else 0.0),
        )


def extract_skills(text: str, taxonomy: Optional[Mapping[str, Sequence[str]]] = None) -> SkillsResult:
    return SkillsExtractor(taxonomy).extract(text)
