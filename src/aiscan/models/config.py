from __future__ import annotations

from dataclasses import dataclass, field, replace

from aiscan.errors import InvalidInputError

LINGUISTIC_MODES = ("off", "additive", "multiplicative")

DEFAULT_SCALE_PROFILES: dict[str, float] = {
    "short": 1.75,
    "article": 2.25,
}


@dataclass(frozen=True)
class EngineConfig:
    chunk_size: int = 1024
    scale: float = 1.75
    w_lex: float = 0.7
    w_burst: float = 0.7
    # Experimental: how the linguistic signal folds into the pattern score
    linguistic_mode: str = "off"
    # Caller-side size bound, 0 = unbounded
    max_corpus_chars: int = 0

    def validate(self) -> None:
        if self.chunk_size < 1:
            raise InvalidInputError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.scale <= 0:
            raise InvalidInputError(f"scale must be > 0, got {self.scale}")
        if self.linguistic_mode not in LINGUISTIC_MODES:
            raise InvalidInputError(
                f"Unknown linguistic_mode '{self.linguistic_mode}'. "
                f"Must be one of {', '.join(LINGUISTIC_MODES)}"
            )
        if self.max_corpus_chars < 0:
            raise InvalidInputError(
                f"max_corpus_chars must be >= 0, got {self.max_corpus_chars}"
            )

    def with_overrides(self, **overrides) -> EngineConfig:
        """Return a copy with every non-None override applied, then validated."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        config = replace(self, **changes)
        config.validate()
        return config

    def as_dict(self) -> dict:
        return {
            "chunk_size": self.chunk_size,
            "scale": self.scale,
            "w_lex": self.w_lex,
            "w_burst": self.w_burst,
            "linguistic_mode": self.linguistic_mode,
            "max_corpus_chars": self.max_corpus_chars,
        }


@dataclass(frozen=True)
class LabelThresholds:
    likely_ai: float = 0.5
    likely_human: float = 0.2

    def validate(self) -> None:
        if not 0.0 <= self.likely_human <= self.likely_ai <= 1.0:
            raise InvalidInputError(
                "Label thresholds must satisfy 0 <= likely_human <= likely_ai <= 1, "
                f"got likely_human={self.likely_human}, likely_ai={self.likely_ai}"
            )


@dataclass
class AppConfig:
    patterns_dir: str
    engine: EngineConfig = field(default_factory=EngineConfig)
    labels: LabelThresholds = field(default_factory=LabelThresholds)
    scale_profiles: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_SCALE_PROFILES)
    )
    allowlist: list[str] = field(default_factory=list)
