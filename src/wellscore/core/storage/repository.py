"""Assessment repository: CRUD operations for saved wellness assessments.

The repository mediates between :class:`StoredAssessment` and SQLite, using
:class:`FieldEncryptor` for the raw metric record.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from wellscore.core.storage.database import AssessmentDatabase
from wellscore.core.storage.encryption import FieldEncryptor
from wellscore.core.storage.models import StoredAssessment

logger = logging.getLogger(__name__)

SCORE_COLUMNS = frozenset(
    {"metabolic", "vo2_max", "grip_strength", "body_composition", "total"}
)


class RepositoryError(Exception):
    """Raised when repository operations fail."""


class AssessmentRepository:
    """CRUD repository for saved assessments.

    Usage::

        db = AssessmentDatabase(":memory:")
        db.initialize()
        repo = AssessmentRepository(db, FieldEncryptor(key))

        assessment_id = repo.save_assessment(assessment)
        history = repo.get_score_history("total", limit=12)
    """

    def __init__(self, database: AssessmentDatabase, encryptor: FieldEncryptor) -> None:
        self._db = database
        self._enc = encryptor

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    @staticmethod
    def _now_iso() -> str:
        return datetime.now(timezone.utc).isoformat()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save_assessment(self, assessment: StoredAssessment) -> str:
        """Persist an assessment and return its ID.

        An empty ``assessment.id`` gets a fresh UUID; an empty timestamp gets
        the current UTC time.
        """
        aid = assessment.id or self._new_id()
        now = self._now_iso()

        self._db.connection.execute(
            """INSERT INTO wellness_assessments (
                id, title, timestamp, metrics_enc,
                metabolic, vo2_max, grip_strength, body_composition, total,
                grade, grade_meaning, weights_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                aid,
                assessment.title,
                assessment.timestamp or now,
                self._enc.encrypt(assessment.metrics),
                assessment.metabolic,
                assessment.vo2_max,
                assessment.grip_strength,
                assessment.body_composition,
                assessment.total,
                assessment.grade,
                assessment.grade_meaning,
                json.dumps(assessment.weights, separators=(",", ":")),
                assessment.created_at or now,
                now,
            ),
        )
        self._db.connection.commit()
        logger.info("Saved assessment %s (grade=%s)", aid, assessment.grade)
        return aid

    def update_title(self, assessment_id: str, title: str) -> bool:
        """Rename an assessment. Returns False if it does not exist."""
        cursor = self._db.connection.execute(
            "UPDATE wellness_assessments SET title = ?, updated_at = ? WHERE id = ?",
            (title, self._now_iso(), assessment_id),
        )
        self._db.connection.commit()
        return cursor.rowcount > 0

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_assessment(self, assessment_id: str) -> StoredAssessment | None:
        row = self._db.connection.execute(
            "SELECT * FROM wellness_assessments WHERE id = ?", (assessment_id,)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_assessment(row)

    def list_assessments(
        self,
        *,
        since: str | None = None,
        limit: int = 50,
    ) -> list[StoredAssessment]:
        """Saved assessments, newest first.

        Args:
            since: Optional ISO 8601 lower bound (inclusive).
            limit: Maximum results.
        """
        query = "SELECT * FROM wellness_assessments"
        params: list[Any] = []
        if since:
            query += " WHERE timestamp >= ?"
            params.append(since)
        query += " ORDER BY timestamp DESC LIMIT ?"
        params.append(limit)

        rows = self._db.connection.execute(query, params).fetchall()
        return [self._row_to_assessment(row) for row in rows]

    def get_score_history(
        self,
        column: str,
        *,
        limit: int = 30,
    ) -> list[tuple[str, float]]:
        """Time series of one score column as ``(timestamp, value)``, newest first.

        Raises:
            RepositoryError: If ``column`` is not a score column.
        """
        if column not in SCORE_COLUMNS:
            raise RepositoryError(
                f"Invalid score column: {column!r}. Valid: {sorted(SCORE_COLUMNS)}"
            )
        # Column name is safe: validated against SCORE_COLUMNS above.
        rows = self._db.connection.execute(
            f"SELECT timestamp, {column} FROM wellness_assessments "
            "ORDER BY timestamp DESC LIMIT ?",
            (limit,),
        ).fetchall()
        return [(row[0], row[1]) for row in rows]

    def count_assessments(self) -> int:
        row = self._db.connection.execute(
            "SELECT COUNT(*) FROM wellness_assessments"
        ).fetchone()
        return row[0]

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_assessment(self, assessment_id: str) -> bool:
        """Delete one assessment. Returns False if it did not exist."""
        cursor = self._db.connection.execute(
            "DELETE FROM wellness_assessments WHERE id = ?", (assessment_id,)
        )
        self._db.connection.commit()
        if cursor.rowcount:
            logger.info("Deleted assessment %s", assessment_id)
        return cursor.rowcount > 0

    def delete_all(self) -> int:
        """Delete every saved assessment and return how many were removed."""
        count = self.count_assessments()
        self._db.connection.execute("DELETE FROM wellness_assessments")
        self._db.connection.commit()
        logger.warning("Deleted ALL assessments: %d removed", count)
        return count

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _row_to_assessment(self, row: Any) -> StoredAssessment:
        weights: dict[str, float] = {}
        if row["weights_json"]:
            try:
                weights = json.loads(row["weights_json"])
            except (json.JSONDecodeError, TypeError):
                logger.warning("Unreadable weights for assessment %s", row["id"])

        return StoredAssessment(
            id=row["id"],
            title=row["title"],
            timestamp=row["timestamp"],
            metrics=self._enc.decrypt(row["metrics_enc"] or ""),
            metabolic=row["metabolic"],
            vo2_max=row["vo2_max"],
            grip_strength=row["grip_strength"],
            body_composition=row["body_composition"],
            total=row["total"],
            grade=row["grade"],
            grade_meaning=row["grade_meaning"],
            weights=weights,
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
