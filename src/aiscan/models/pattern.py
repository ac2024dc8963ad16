from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

PATTERN_FLAGS = re.IGNORECASE | re.MULTILINE | re.UNICODE | re.DOTALL


@dataclass(frozen=True)
class PatternClass:
    """All compiled patterns sharing one weight class."""

    weight: int
    patterns: tuple[re.Pattern, ...]

    @property
    def sources(self) -> list[str]:
        return [p.pattern for p in self.patterns]


@dataclass(frozen=True)
class PatternCatalog:
    """
    Compiled weight-class catalog, built once and shared read-only by every scan.
    Classes are kept in ascending weight order.
    """

    classes: tuple[PatternClass, ...] = ()

    def __post_init__(self) -> None:
        weights = [c.weight for c in self.classes]
        if len(weights) != len(set(weights)):
            raise ValueError(f"Duplicate weight classes in catalog: {weights}")

    def __iter__(self) -> Iterator[PatternClass]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)

    def weights(self) -> list[int]:
        return [c.weight for c in self.classes]

    def get(self, weight: int) -> PatternClass | None:
        for pattern_class in self.classes:
            if pattern_class.weight == weight:
                return pattern_class
        return None

    @property
    def pattern_count(self) -> int:
        return sum(len(c.patterns) for c in self.classes)
