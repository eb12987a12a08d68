# Path: core/models/domain.py
# Purpose: Define domain models shared across scanning, filtering, and configuration.
# Layer: core/models.
# Details: Lightweight frozen dataclasses for predicates, a pydantic model for loaded metadata records.

from __future__ import annotations

import math
import operator
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

ImagePath = Path


class NodeType(str, Enum):
    """Kind of filesystem entry a listing run emits."""

    IMAGE = "image"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Dimensions:
    """Pixel size of an image as reported by the dimension probe."""

    width: int
    height: int


@dataclass(frozen=True)
class Range:
    """Inclusive bound pair; a missing bound leaves that side unconstrained."""

    min: Optional[int] = None
    max: Optional[int] = None

    def __post_init__(self) -> None:
        for bound in (self.min, self.max):
            if bound is not None and bound < 0:
                raise ValueError(f"Range bounds must be non-negative, got {bound}")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Range minimum {self.min} exceeds maximum {self.max}")

    def contains(self, value: int) -> bool:
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    @classmethod
    def parse(cls, text: str) -> "Range":
        """Parse ``MIN..MAX``, ``MIN..``, ``..MAX`` or an exact ``N``."""

        raw = text.strip()
        if ".." not in raw:
            value = _parse_bound(raw, text)
            if value is None:
                raise ValueError(f"Invalid range: {text!r}")
            return cls(min=value, max=value)
        low, _, high = raw.partition("..")
        return cls(min=_parse_bound(low, text), max=_parse_bound(high, text))

    def to_dict(self) -> Dict[str, Optional[int]]:
        return {"min": self.min, "max": self.max}

    def __str__(self) -> str:
        low = "" if self.min is None else str(self.min)
        high = "" if self.max is None else str(self.max)
        return f"{low}..{high}"


def _parse_bound(raw: str, original: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    if not raw.isdigit():
        raise ValueError(f"Invalid range bound {raw!r} in {original!r}")
    return int(raw)


class ComparisonOperator(str, Enum):
    """Comparison applied between a record's score and a filter threshold."""

    LT = "<"
    LE = "<="
    EQ = "="
    NE = "!="
    GE = ">="
    GT = ">"

    @property
    def compare(self) -> Callable[[Any, Any], bool]:
        return _OPERATOR_FUNCS[self]


_OPERATOR_FUNCS: Dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.LT: operator.lt,
    ComparisonOperator.LE: operator.le,
    ComparisonOperator.EQ: operator.eq,
    ComparisonOperator.NE: operator.ne,
    ComparisonOperator.GE: operator.ge,
    ComparisonOperator.GT: operator.gt,
}

# Two-character operators first so ">=" is not read as ">".
_FILTER_PATTERN = re.compile(
    r"^\s*(?:score\s*)?(?P<op><=|>=|==|!=|<|>|=)\s*(?P<threshold>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ScoreFilter:
    """Predicate comparing a metadata score against a numeric threshold."""

    operator: ComparisonOperator
    threshold: float

    @classmethod
    def parse(cls, text: str) -> "ScoreFilter":
        """Parse expressions such as ``score >= 5.0``, ``>=5`` or ``score=7``."""

        match = _FILTER_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid score filter: {text!r}")
        symbol = match.group("op")
        if symbol == "==":
            symbol = "="
        return cls(operator=ComparisonOperator(symbol), threshold=float(match.group("threshold")))

    def __str__(self) -> str:
        return f"score {self.operator.value} {self.threshold:g}"


class ImageMeta(BaseModel):
    """Metadata record for a single image, loaded from an external file."""

    model_config = ConfigDict(extra="allow", frozen=True)

    path: Path
    score: Optional[float] = None

    @field_validator("score", mode="before")
    @classmethod
    def coerce_score(cls, value: Any) -> Optional[float]:
        """Store scores that cannot be compared numerically as None."""

        if value is None or isinstance(value, bool):
            return None
        try:
            score = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
        if math.isnan(score) or math.isinf(score):
            return None
        return score
