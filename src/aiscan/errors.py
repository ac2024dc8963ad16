from __future__ import annotations


class AiscanError(Exception):
    pass


class ConfigError(AiscanError):
    """Malformed pattern or engine configuration. Raised at startup only."""


class InvalidInputError(AiscanError):
    """A classification request the engine refuses to score."""
