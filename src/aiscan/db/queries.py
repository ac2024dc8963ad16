from __future__ import annotations

import json
import sqlite3

from aiscan.core.allowlist import domain_of
from aiscan.models.result import ClassificationResult

LOCAL_DOMAIN = "local"


def result_domain(result: ClassificationResult) -> str:
    """Key a result by the domain it came from; files and stdin share LOCAL_DOMAIN."""
    if result.url:
        return domain_of(result.url) or LOCAL_DOMAIN
    return LOCAL_DOMAIN


def store_result(conn: sqlite3.Connection, result: ClassificationResult) -> int:
    """Persist a ClassificationResult keyed by its domain. Returns the row id."""
    cursor = conn.execute(
        """
        INSERT INTO results
            (domain, url, file_path, title, score, label, clamped, raw_score,
             pattern_score, alpha, linguistic_score, word_count, corpus_length,
             result_json, scanned_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (
            result_domain(result),
            result.url,
            result.file_path,
            result.title,
            result.score,
            result.label,
            int(result.clamped),
            # NaN raw scores are stored as NULL
            result.raw_score if result.raw_score == result.raw_score else None,
            result.pattern_score,
            result.alpha,
            result.linguistic_score,
            result.word_count,
            result.corpus_length,
            json.dumps(result.as_dict(), default=str),
            result.scanned_at.isoformat(),
        ),
    )
    result_id = cursor.lastrowid

    conn.executemany(
        "INSERT INTO match_counts (result_id, weight, count) VALUES (?, ?, ?)",
        [(result_id, weight, count) for weight, count in result.match_map.items()],
    )
    conn.commit()
    return result_id


def get_latest(conn: sqlite3.Connection, domain: str) -> dict | None:
    """Most recent stored result for a domain, or None."""
    rows = get_domain_history(conn, domain, limit=1)
    return rows[0] if rows else None


def get_domain_history(conn: sqlite3.Connection, domain: str, limit: int = 20) -> list[dict]:
    """Stored results for a domain, newest first, each with its match map."""
    rows = conn.execute(
        """
        SELECT id, domain, url, file_path, title, score, label, clamped,
               pattern_score, alpha, linguistic_score, word_count, scanned_at
        FROM results
        WHERE domain = ?
        ORDER BY scanned_at DESC, id DESC
        LIMIT ?
        """,
        (domain, limit),
    ).fetchall()

    history = []
    for row in rows:
        entry = dict(row)
        entry["clamped"] = bool(entry["clamped"])
        counts = conn.execute(
            "SELECT weight, count FROM match_counts WHERE result_id = ? ORDER BY weight",
            (row["id"],),
        ).fetchall()
        entry["match_map"] = {c["weight"]: c["count"] for c in counts}
        history.append(entry)
    return history
