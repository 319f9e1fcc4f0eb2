"""MCP tools for saving and reviewing wellness assessments.

Raw metric input is encrypted at rest; listings return scores and grades only.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

from fastmcp import Context, FastMCP

from wellscore.core.storage.models import StoredAssessment
from wellscore.core.storage.repository import (
    SCORE_COLUMNS,
    AssessmentRepository,
    RepositoryError,
)
from wellscore.domains.wellness.domain_logic.grading import grade_from_score
from wellscore.domains.wellness.domain_logic.metric_models import CategoryWeights
from wellscore.domains.wellness.domain_logic.score_calculator import calculate_scores

logger = logging.getLogger(__name__)


def default_title(now: datetime | None = None) -> str:
    """``"Assessment YYYY-MM-DD"`` for the given (default: current UTC) time."""
    now = now or datetime.now(timezone.utc)
    return f"Assessment {now.strftime('%Y-%m-%d')}"


def build_assessment(
    metrics: dict[str, Any],
    weights: CategoryWeights,
    title: str = "",
) -> StoredAssessment:
    """Score ``metrics`` and wrap the result for storage (ID assigned on save)."""
    scores = calculate_scores(metrics, weights)
    grade = grade_from_score(scores.total)
    return StoredAssessment(
        id="",
        title=title or default_title(),
        timestamp=datetime.now(timezone.utc).isoformat(),
        metrics=dict(metrics),
        metabolic=scores.metabolic,
        vo2_max=scores.vo2_max,
        grip_strength=scores.grip_strength,
        body_composition=scores.body_composition,
        total=scores.total,
        grade=grade.grade,
        grade_meaning=grade.meaning,
        weights=weights.as_dict(),
    )


def register_assessment_tools(
    mcp: FastMCP,
    repository: AssessmentRepository,
    weights: CategoryWeights,
) -> None:
    """Register assessment storage tools on the MCP server."""

    @mcp.tool
    async def save_assessment(
        ctx: Context,
        metrics: dict[str, Any],
        title: str = "",
    ) -> str:
        """Score a metric record and save it to your assessment history.

        Args:
            metrics: Same record accepted by calculate_wellness_score.
            title: Optional title. Defaults to 'Assessment <today>'.
        """
        assessment = build_assessment(metrics, weights, title)
        aid = repository.save_assessment(assessment)
        assessment.id = aid
        return json.dumps({"status": "saved", "assessment": assessment.summary()})

    @mcp.tool
    async def list_assessments(ctx: Context, limit: int = 10, since: str = "") -> str:
        """List saved assessments, newest first (scores and grades only).

        Args:
            limit: Maximum number of assessments to return.
            since: Optional ISO 8601 date or timestamp; only assessments at or
                after it are listed.
        """
        assessments = repository.list_assessments(since=since or None, limit=limit)
        return json.dumps({
            "status": "ok",
            "count": len(assessments),
            "assessments": [a.summary() for a in assessments],
        }, indent=2)

    @mcp.tool
    async def rename_assessment(ctx: Context, assessment_id: str, title: str) -> str:
        """Change the title of a saved assessment.

        Args:
            assessment_id: The UUID returned by save_assessment.
            title: New title (must not be blank).
        """
        if not title.strip():
            return json.dumps({"status": "error", "message": "title must not be blank."})
        if not repository.update_title(assessment_id, title.strip()):
            return json.dumps({
                "status": "not_found",
                "assessment_id": assessment_id,
                "message": "No assessment found with that ID.",
            })
        return json.dumps({
            "status": "renamed",
            "assessment_id": assessment_id,
            "title": title.strip(),
        })

    @mcp.tool
    async def assessment_score_history(
        ctx: Context,
        score: str = "total",
        limit: int = 30,
    ) -> str:
        """Time series of one score across saved assessments, newest first.

        Args:
            score: One of metabolic, vo2_max, grip_strength, body_composition, total.
            limit: Maximum number of points.
        """
        try:
            history = repository.get_score_history(score, limit=limit)
        except RepositoryError as exc:
            return json.dumps({
                "status": "error",
                "message": str(exc),
                "valid": sorted(SCORE_COLUMNS),
            })
        return json.dumps({
            "status": "ok",
            "score": score,
            "count": len(history),
            "history": [
                {"timestamp": ts, "value": round(value, 2)} for ts, value in history
            ],
        })

    @mcp.tool
    async def get_assessment(ctx: Context, assessment_id: str) -> str:
        """Retrieve one saved assessment, including the metrics entered.

        Args:
            assessment_id: The UUID returned by save_assessment.
        """
        assessment = repository.get_assessment(assessment_id)
        if assessment is None:
            return json.dumps({
                "status": "not_found",
                "assessment_id": assessment_id,
                "message": "No assessment found with that ID.",
            })
        return json.dumps({
            "status": "ok",
            "assessment": {**assessment.summary(), "metrics": assessment.metrics},
        })

    @mcp.tool
    async def delete_assessment(ctx: Context, assessment_id: str) -> str:
        """Permanently delete a saved assessment.

        Args:
            assessment_id: The UUID of the assessment to delete.
        """
        if repository.delete_assessment(assessment_id):
            return json.dumps({"status": "deleted", "assessment_id": assessment_id})
        return json.dumps({
            "status": "not_found",
            "assessment_id": assessment_id,
            "message": "No assessment found with that ID.",
        })

    @mcp.tool
    async def delete_all_assessments(ctx: Context, confirm: str = "") -> str:
        """Permanently delete ALL saved assessments. Cannot be undone.

        Args:
            confirm: Must be exactly 'DELETE_ALL' to proceed.
        """
        if confirm != "DELETE_ALL":
            return json.dumps({
                "status": "cancelled",
                "message": (
                    "To delete every saved assessment, call this tool with "
                    "confirm='DELETE_ALL'. This action cannot be undone."
                ),
            })
        count = repository.delete_all()
        return json.dumps({"status": "all_deleted", "assessments_deleted": count})
