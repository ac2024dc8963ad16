from __future__ import annotations

import sqlite3
from pathlib import Path

SCHEMA = """
CREATE TABLE IF NOT EXISTS results (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    domain            TEXT NOT NULL,
    url               TEXT,
    file_path         TEXT,
    title             TEXT,
    score             REAL NOT NULL,
    label             TEXT,
    clamped           INTEGER NOT NULL DEFAULT 0,
    raw_score         REAL,
    pattern_score     REAL,
    alpha             REAL,
    linguistic_score  REAL,
    word_count        INTEGER,
    corpus_length     INTEGER,
    result_json       TEXT,
    scanned_at        TEXT
);

CREATE TABLE IF NOT EXISTS match_counts (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    result_id   INTEGER NOT NULL REFERENCES results(id) ON DELETE CASCADE,
    weight      INTEGER NOT NULL,
    count       INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_results_domain ON results(domain, scanned_at DESC);
CREATE INDEX IF NOT EXISTS idx_match_counts_result ON match_counts(result_id);
"""


def get_connection(db_path: str | Path = "aiscan.db") -> sqlite3.Connection:
    """Open (or create) the SQLite database and ensure schema exists."""
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    conn.executescript(SCHEMA)
    conn.commit()
    return conn
