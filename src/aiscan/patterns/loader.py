from __future__ import annotations

from pathlib import Path

import yaml

from aiscan.errors import ConfigError, InvalidInputError
from aiscan.models.config import (
    DEFAULT_SCALE_PROFILES,
    AppConfig,
    EngineConfig,
    LabelThresholds,
)

PATTERNS_FILE = "patterns.yaml"
ENGINE_FILE = "_engine.yaml"


def load_pattern_config(patterns_dir: Path) -> dict:
    """
    Load patterns.yaml: a mapping of weight class -> list of regex strings.
    Keys are returned as loaded; compile_catalog validates and coerces them.
    """
    patterns_file = patterns_dir / PATTERNS_FILE
    if not patterns_file.exists():
        raise ConfigError(f"Pattern file not found: {patterns_file}")
    try:
        return _load_yaml(patterns_file)
    except ConfigError as e:
        raise ConfigError(f"{patterns_file}: {e}") from e


def load_app_config(patterns_dir: Path) -> AppConfig:
    """Load _engine.yaml and return AppConfig. Missing file means all defaults."""
    engine_file = patterns_dir / ENGINE_FILE
    if not engine_file.exists():
        return AppConfig(patterns_dir=str(patterns_dir))

    try:
        data = _load_yaml(engine_file)
        engine_data = data.get("engine") or {}
        labels_data = data.get("labels") or {}

        engine = EngineConfig(
            chunk_size=int(engine_data.get("chunk_size", 1024)),
            scale=float(engine_data.get("scale", 1.75)),
            w_lex=float(engine_data.get("w_lex", 0.7)),
            w_burst=float(engine_data.get("w_burst", 0.7)),
            linguistic_mode=str(engine_data.get("linguistic_mode", "off")),
            max_corpus_chars=int(engine_data.get("max_corpus_chars", 0)),
        )
        engine.validate()

        labels = LabelThresholds(
            likely_ai=float(labels_data.get("likely_ai", 0.5)),
            likely_human=float(labels_data.get("likely_human", 0.2)),
        )
        labels.validate()

        profiles = dict(DEFAULT_SCALE_PROFILES)
        for name, value in (engine_data.get("scale_profiles") or {}).items():
            profiles[str(name)] = float(value)
        bad = [name for name, value in profiles.items() if value <= 0]
        if bad:
            raise ConfigError(f"Scale profiles must be > 0: {', '.join(bad)}")

        allowlist = [str(entry) for entry in (data.get("allowlist") or [])]
    except (TypeError, ValueError, AttributeError, InvalidInputError) as e:
        raise ConfigError(f"{engine_file}: invalid value: {e}") from e
    except ConfigError as e:
        raise ConfigError(f"{engine_file}: {e}") from e

    return AppConfig(
        patterns_dir=str(patterns_dir),
        engine=engine,
        labels=labels,
        scale_profiles=profiles,
        allowlist=allowlist,
    )


def _load_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ConfigError("YAML file must contain a mapping at the top level")
        return data
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parse error: {e}") from e
