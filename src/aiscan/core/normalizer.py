from __future__ import annotations

import logging
import math

from aiscan.errors import InvalidInputError

logger = logging.getLogger(__name__)

# Largest float strictly below 1.0; the score range is [0, 1)
SCORE_CEILING = math.nextafter(1.0, 0.0)


def normalize(corpus_length: int, pattern_score: float, alpha: float, scale: float) -> float:
    """
    Exponential-saturation confidence:

        1 - exp(-(|alpha| ** scale * pattern_score) / corpus_length)

    Monotonic in pattern_score and |alpha|. Returns the raw formula value,
    which can fall below 0 when a negative pattern_score meets a large alpha;
    pass it through clamp_score before reporting it.
    """
    if corpus_length <= 0:
        raise InvalidInputError(f"corpus_length must be > 0, got {corpus_length}")
    if scale <= 0:
        raise InvalidInputError(f"scale must be > 0, got {scale}")

    try:
        scaled_alpha = abs(alpha) ** scale
    except OverflowError:
        scaled_alpha = math.inf

    exponent = -(scaled_alpha * pattern_score) / corpus_length
    try:
        return 1.0 - math.exp(exponent)
    except OverflowError:
        # exp of a huge positive exponent: the result heads to -inf
        return -math.inf


def normalize_extended(
    corpus_length: int,
    pattern_score: float,
    alpha: float,
    scale: float,
    linguistic_score: float,
    mode: str = "additive",
) -> float:
    """
    Experimental three-signal form. The linguistic score is folded into the
    pattern score before the same saturation curve is applied:

        additive:       pattern_score + linguistic_score
        multiplicative: pattern_score * (1 + linguistic_score)
        off:            pattern_score (identical to normalize)
    """
    if mode == "off":
        combined = pattern_score
    elif mode == "additive":
        combined = pattern_score + linguistic_score
    elif mode == "multiplicative":
        combined = pattern_score * (1.0 + linguistic_score)
    else:
        raise InvalidInputError(f"Unknown linguistic mode '{mode}'")
    return normalize(corpus_length, combined, alpha, scale)


def clamp_score(value: float) -> tuple[float, bool]:
    """
    Force a formula output into [0, 1).
    Returns (score, clamped); values below 0 (or NaN) become exactly 0.0,
    values at or above 1 become SCORE_CEILING.
    """
    if math.isnan(value) or value < 0.0:
        logger.warning("Score %r below range, clamped to 0.0", value)
        return 0.0, True
    if value >= 1.0:
        logger.warning("Score %r at or above 1.0, clamped to %r", value, SCORE_CEILING)
        return SCORE_CEILING, True
    return value, False
