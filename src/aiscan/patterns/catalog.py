from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from aiscan.errors import ConfigError
from aiscan.models.pattern import PATTERN_FLAGS, PatternCatalog, PatternClass

logger = logging.getLogger(__name__)


def compile_catalog(config: Mapping[int | str, Sequence[str]]) -> PatternCatalog:
    """
    Compile a weight class -> pattern list mapping into a PatternCatalog.

    Every pattern is compiled up front, so a bad regex fails here at startup
    and never at scan time.
    """
    if not isinstance(config, Mapping):
        raise ConfigError("Pattern configuration must be a mapping of weight class -> patterns")

    compiled: dict[int, PatternClass] = {}
    for key, sources in config.items():
        weight = _parse_weight(key)
        if weight in compiled:
            raise ConfigError(f"Duplicate weight class {weight} (key {key!r})")
        compiled[weight] = PatternClass(
            weight=weight,
            patterns=tuple(_compile_pattern(weight, src) for src in _pattern_list(key, sources)),
        )

    catalog = PatternCatalog(classes=tuple(compiled[w] for w in sorted(compiled)))
    logger.debug(
        "Compiled %d patterns across %d weight classes", catalog.pattern_count, len(catalog)
    )
    return catalog


def _parse_weight(key: object) -> int:
    # bool is an int subclass; YAML turns bare yes/no keys into booleans
    if isinstance(key, bool):
        raise ConfigError(f"Weight class must be an integer, got {key!r}")
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        try:
            return int(key.strip())
        except ValueError:
            pass
    raise ConfigError(f"Weight class must be an integer, got {key!r}")


def _pattern_list(key: object, sources: object) -> list[str]:
    if sources is None:
        return []
    if isinstance(sources, str) or not isinstance(sources, Sequence):
        raise ConfigError(f"Weight class {key!r}: expected a list of patterns")
    for src in sources:
        if not isinstance(src, str):
            raise ConfigError(f"Weight class {key!r}: pattern {src!r} is not a string")
    return list(sources)


def _compile_pattern(weight: int, source: str) -> re.Pattern:
    try:
        return re.compile(source, PATTERN_FLAGS)
    except re.error as e:
        raise ConfigError(f"Weight class {weight}: invalid pattern {source!r}: {e}") from e
