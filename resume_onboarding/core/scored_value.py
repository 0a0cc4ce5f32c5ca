from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

RULE = "rule"


class ScoredValue(BaseModel):
    """Extracted value paired with a confidence score and the strategy that produced it.

    Instances are frozen. Extractors that refine a value build a new one with
    :meth:`replace` instead of mutating it.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[Any] = None
    confidence: float = 0.0
    provenance: str = RULE

    @model_validator(mode="after")
    def _check_confidence(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")
        if self.value is None and self.confidence != 0.0:
            raise ValueError("confidence must be 0 when value is None")
        return self

    @classmethod
    def of(cls, value: Any, confidence: float, provenance: str = RULE) -> "ScoredValue":
        """Build a scored value, clamping the confidence and dropping it for missing values."""
        if value is None:
            return cls(value=None, confidence=0.0, provenance=provenance)
        return cls(value=value, confidence=max(0.0, min(1.0, confidence)), provenance=provenance)

    @classmethod
    def empty(cls, provenance: str = RULE) -> "ScoredValue":
        return cls(value=None, confidence=0.0, provenance=provenance)

    def replace(self, **changes: Any) -> "ScoredValue":
        data = {"value": self.value, "confidence": self.confidence, "provenance": self.provenance}
        data.update(changes)
        return ScoredValue.of(data["value"], data["confidence"], data["provenance"])

    def to_dict(self) -> Dict[str, Any]:
        """Convert the ScoredValue to a dictionary."""
        return {
            "value": self.value,
            "confidence": self.confidence,
            "provenance": self.provenance,
        }

    def __str__(self) -> str:
        if self.value is None:
            return ""
        return f"{self.value} (confidence: {self.confidence:.2f}, provenance: {self.provenance})"

    def __bool__(self) -> bool:
        """Return True if the value is not None."""
        return self.value is not None
