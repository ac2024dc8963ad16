from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Window:
    start: int
    chunk_size: int
    content: str

    @property
    def end(self) -> int:
        return self.start + len(self.content)


@dataclass
class ScanResult:
    """Per-request accumulators produced by a single scan pass."""

    match_map: dict[int, int] = field(default_factory=dict)
    alpha: float = 0.0
    window_count: int = 0


@dataclass(frozen=True)
class LinguisticResult:
    token_count: int = 0
    type_count: int = 0
    lexical_diversity: float = 0.0
    lexical_signal: float = 0.0
    burstiness: float = 0.0
    burstiness_signal: float = 0.0
    score: float = 0.0


@dataclass
class ClassificationResult:
    score: float
    label: str
    match_map: dict[int, int]
    alpha: float
    pattern_score: float
    raw_score: float
    clamped: bool
    corpus_length: int
    word_count: int
    window_count: int
    scale: float
    chunk_size: int
    linguistic: LinguisticResult | None = None
    linguistic_mode: str = "off"
    url: str | None = None
    file_path: str | None = None
    title: str | None = None
    scanned_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def linguistic_score(self) -> float:
        return self.linguistic.score if self.linguistic else 0.0

    @property
    def source(self) -> str:
        return self.url or self.file_path or "stdin"

    def as_dict(self) -> dict:
        return {
            "url": self.url,
            "file_path": self.file_path,
            "title": self.title,
            "score": self.score,
            "label": self.label,
            "clamped": self.clamped,
            # -inf after an exp overflow, NaN on 0 * inf; neither is valid JSON
            "raw_score": self.raw_score if math.isfinite(self.raw_score) else None,
            "pattern_score": self.pattern_score,
            "alpha": self.alpha,
            "linguistic_score": self.linguistic_score,
            "linguistic_mode": self.linguistic_mode,
            "match_map": {str(k): v for k, v in sorted(self.match_map.items())},
            "corpus_length": self.corpus_length,
            "word_count": self.word_count,
            "window_count": self.window_count,
            "scale": self.scale,
            "chunk_size": self.chunk_size,
            "scanned_at": self.scanned_at.isoformat(),
            "linguistic": (
                {
                    "token_count": self.linguistic.token_count,
                    "type_count": self.linguistic.type_count,
                    "lexical_diversity": self.linguistic.lexical_diversity,
                    "burstiness": self.linguistic.burstiness,
                }
                if self.linguistic
                else None
            ),
        }
