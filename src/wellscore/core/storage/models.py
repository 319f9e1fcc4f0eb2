"""Data models for the assessment store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StoredAssessment:
    """A saved wellness assessment.

    ``metrics`` holds the raw record exactly as submitted (encrypted at rest).
    Scores are the unrounded engine output; round at display time.
    """

    id: str
    title: str
    timestamp: str  # ISO 8601
    metrics: dict[str, Any] | None

    metabolic: float
    vo2_max: float
    grip_strength: float
    body_composition: float
    total: float
    grade: str
    grade_meaning: str

    weights: dict[str, float] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    def score_values(self) -> dict[str, float]:
        return {
            "metabolic": self.metabolic,
            "vo2_max": self.vo2_max,
            "grip_strength": self.grip_strength,
            "body_composition": self.body_composition,
            "total": self.total,
        }

    def summary(self) -> dict[str, Any]:
        """PHI-free listing view: everything except the raw metrics."""
        return {
            "id": self.id,
            "title": self.title,
            "timestamp": self.timestamp,
            "scores": {k: round(v, 2) for k, v in self.score_values().items()},
            "grade": self.grade,
            "grade_meaning": self.grade_meaning,
        }
