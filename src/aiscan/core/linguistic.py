from __future__ import annotations

import statistics
from collections import Counter

from aiscan.models.result import LinguisticResult

_STRIP_CHARS = ".,!?;:\"'()[]{}"


def tokenize(text: str) -> list[str]:
    """Whitespace tokens, lowercased, with surrounding punctuation removed."""
    tokens = (w.lower().strip(_STRIP_CHARS) for w in text.split())
    return [t for t in tokens if t]


def lexical_diversity(tokens: list[str]) -> float:
    """Type-token ratio: distinct words / total words."""
    if not tokens:
        return 0.0
    return len(set(tokens)) / len(tokens)


def burstiness(tokens: list[str]) -> float:
    """
    Coefficient of variation of per-word frequency counts.
    Natural prose follows a skewed, Zipf-like distribution and scores high;
    flat distributions score near 0.
    """
    if not tokens:
        return 0.0
    counts = list(Counter(tokens).values())
    mean = statistics.mean(counts)
    if len(counts) < 2 or mean == 0:
        return 0.0
    return statistics.pstdev(counts) / mean


def analyze_linguistics(text: str, w_lex: float = 0.7, w_burst: float = 0.7) -> LinguisticResult:
    """
    Compute both linguistic signals over the whole corpus.

    Both signals are inverted so that higher means more generated-looking:
    low type-token ratio (repetition) and low burstiness (flat word usage)
    each push their signal towards 1.
    """
    tokens = tokenize(text)
    if not tokens:
        return LinguisticResult()

    ttr = lexical_diversity(tokens)
    cv = burstiness(tokens)
    lexical_signal = 1.0 - ttr
    burstiness_signal = max(0.0, 1.0 - cv)

    return LinguisticResult(
        token_count=len(tokens),
        type_count=len(set(tokens)),
        lexical_diversity=ttr,
        lexical_signal=lexical_signal,
        burstiness=cv,
        burstiness_signal=burstiness_signal,
        score=w_lex * lexical_signal + w_burst * burstiness_signal,
    )


def linguistic_score(text: str, w_lex: float = 0.7, w_burst: float = 0.7) -> float:
    return analyze_linguistics(text, w_lex, w_burst).score
