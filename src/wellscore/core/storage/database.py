"""SQLite store for saved wellness assessments.

Owns the single connection and brings the schema up to date on open.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"

# ---------------------------------------------------------------------------
# Schema migrations, applied in order. Never edit a shipped step; append.
# ---------------------------------------------------------------------------

_MIGRATIONS: list[str] = [
    # v1: assessments table
    """
    CREATE TABLE IF NOT EXISTS wellness_assessments (
        id                TEXT PRIMARY KEY,
        title             TEXT NOT NULL,
        timestamp         TEXT NOT NULL,

        -- Raw metric record as submitted, Fernet-encrypted JSON
        metrics_enc       TEXT,

        -- Computed output, stored in the clear for listing and history
        metabolic         REAL NOT NULL,
        vo2_max           REAL NOT NULL,
        grip_strength     REAL NOT NULL,
        body_composition  REAL NOT NULL,
        total             REAL NOT NULL,
        grade             TEXT NOT NULL,
        grade_meaning     TEXT NOT NULL,

        weights_json      TEXT,
        created_at        TEXT NOT NULL DEFAULT (datetime('now')),
        updated_at        TEXT NOT NULL DEFAULT (datetime('now'))
    );

    CREATE INDEX IF NOT EXISTS idx_assessments_ts    ON wellness_assessments(timestamp);
    CREATE INDEX IF NOT EXISTS idx_assessments_grade ON wellness_assessments(grade);
    """,
]

SCHEMA_VERSION = len(_MIGRATIONS)

_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);
"""


class DatabaseError(Exception):
    """Raised when the store is used before it is opened."""


class AssessmentDatabase:
    """Connection holder for the assessment store.

    ``db_path`` may be a filesystem path (``~`` is expanded, parent
    directories are created) or ``":memory:"`` for tests.

    Usage::

        with AssessmentDatabase("~/.wellscore/assessments.db") as db:
            db.connection.execute("SELECT COUNT(*) FROM wellness_assessments")
    """

    def __init__(self, db_path: str = MEMORY_PATH) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection.

        Raises:
            DatabaseError: If :meth:`initialize` has not been called.
        """
        if self._conn is None:
            raise DatabaseError("Database not initialized. Call initialize() first.")
        return self._conn

    def initialize(self) -> None:
        """Open the connection and apply pending migrations. Idempotent."""
        if self._conn is not None:
            return

        target = self._db_path
        if target != MEMORY_PATH:
            db_file = Path(target).expanduser()
            db_file.parent.mkdir(parents=True, exist_ok=True)
            target = str(db_file)

        # Tools may be dispatched off the thread that opened the store.
        self._conn = sqlite3.connect(target, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")

        self._migrate()
        logger.info("Assessment database initialized: %s", self._db_path)

    def _migrate(self) -> None:
        conn = self.connection
        conn.executescript(_VERSION_TABLE)
        current = self.get_schema_version()
        for version in range(current + 1, SCHEMA_VERSION + 1):
            conn.executescript(_MIGRATIONS[version - 1])
            conn.execute("INSERT INTO schema_version (version) VALUES (?)", (version,))
            conn.commit()
            logger.info("Applied schema migration v%d", version)

    def get_schema_version(self) -> int:
        """Highest applied migration, 0 for a fresh file."""
        (version,) = self.connection.execute(
            "SELECT MAX(version) FROM schema_version"
        ).fetchone()
        return version or 0

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Assessment database closed")

    def __enter__(self) -> AssessmentDatabase:
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
