from __future__ import annotations

import json

from aiscan.models.result import ClassificationResult


def to_json(result: ClassificationResult, indent: int = 2) -> str:
    return json.dumps(result.as_dict(), indent=indent, allow_nan=False)


def to_json_list(results: list[ClassificationResult], indent: int = 2) -> str:
    return json.dumps([r.as_dict() for r in results], indent=indent, allow_nan=False)
