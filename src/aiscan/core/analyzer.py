from __future__ import annotations

import logging

from aiscan.core.chunker import chunk
from aiscan.core.linguistic import analyze_linguistics
from aiscan.core.normalizer import clamp_score, normalize, normalize_extended
from aiscan.core.scanner import scan
from aiscan.core.scorer import label_for, pattern_score
from aiscan.errors import InvalidInputError
from aiscan.models.config import EngineConfig, LabelThresholds
from aiscan.models.pattern import PatternCatalog
from aiscan.models.result import ClassificationResult

logger = logging.getLogger(__name__)


class Analyzer:
    def __init__(
        self,
        catalog: PatternCatalog,
        config: EngineConfig | None = None,
        labels: LabelThresholds | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or EngineConfig()
        self.labels = labels or LabelThresholds()
        self.config.validate()

    def run(
        self,
        text: str,
        config: EngineConfig | None = None,
        url: str | None = None,
        file_path: str | None = None,
        title: str | None = None,
    ) -> ClassificationResult:
        """Chunk, scan, score and normalize one corpus."""
        config = config or self.config
        config.validate()

        corpus_length = len(text)
        if corpus_length == 0:
            raise InvalidInputError("Cannot classify an empty corpus")
        if config.max_corpus_chars and corpus_length > config.max_corpus_chars:
            raise InvalidInputError(
                f"Corpus of {corpus_length} chars exceeds max_corpus_chars={config.max_corpus_chars}"
            )

        windows = chunk(text, config.chunk_size)
        scanned = scan(windows, self.catalog)
        p_score = pattern_score(scanned.match_map)

        linguistic = None
        if config.linguistic_mode == "off":
            raw = normalize(corpus_length, p_score, scanned.alpha, config.scale)
        else:
            linguistic = analyze_linguistics(text, config.w_lex, config.w_burst)
            raw = normalize_extended(
                corpus_length,
                p_score,
                scanned.alpha,
                config.scale,
                linguistic.score,
                mode=config.linguistic_mode,
            )

        score, clamped = clamp_score(raw)
        logger.debug(
            "Classified %d chars: pattern_score=%.2f alpha=%.4f raw=%r score=%.4f",
            corpus_length, p_score, scanned.alpha, raw, score,
        )

        return ClassificationResult(
            score=score,
            label=label_for(score, self.labels),
            match_map=dict(sorted(scanned.match_map.items())),
            alpha=scanned.alpha,
            pattern_score=p_score,
            raw_score=raw,
            clamped=clamped,
            corpus_length=corpus_length,
            word_count=len(text.split()),
            window_count=scanned.window_count,
            scale=config.scale,
            chunk_size=config.chunk_size,
            linguistic=linguistic,
            linguistic_mode=config.linguistic_mode,
            url=url,
            file_path=file_path,
            title=title,
        )
