from __future__ import annotations

import logging
import math
from typing import Iterable

from aiscan.models.pattern import PatternCatalog
from aiscan.models.result import ScanResult, Window

logger = logging.getLogger(__name__)


def count_matches(pattern, text: str) -> int:
    """Number of non-overlapping matches of `pattern` in `text`."""
    return sum(1 for _ in pattern.finditer(text))


def scan(windows: Iterable[Window], catalog: PatternCatalog) -> ScanResult:
    """
    Match every window against every catalog pattern.

    match_map sums raw match counts per weight class. alpha adds
    log1p(count) * weight once per (window, pattern) pair with a hit, so the
    same number of matches scores differently when concentrated in a few
    windows than when spread across many. Windows are accumulated in order
    so alpha is reproducible bit for bit.
    """
    result = ScanResult()

    for window in windows:
        result.window_count += 1
        for pattern_class in catalog:
            weight = pattern_class.weight
            for pattern in pattern_class.patterns:
                matches = count_matches(pattern, window.content)
                if matches > 0:
                    result.alpha += math.log1p(matches) * weight
                    result.match_map[weight] = result.match_map.get(weight, 0) + matches

    logger.debug(
        "Scanned %d windows: match_map=%s alpha=%.4f",
        result.window_count,
        result.match_map,
        result.alpha,
    )
    return result
