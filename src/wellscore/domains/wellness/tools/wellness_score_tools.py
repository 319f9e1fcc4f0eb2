"""MCP tools over the wellness scoring engine.

Scoring is deterministic and local; no health data leaves the process.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastmcp import Context, FastMCP

from wellscore.domains.wellness.domain_logic.grading import grade_from_score
from wellscore.domains.wellness.domain_logic.metric_models import (
    CategoryWeights,
    parse_metric_input,
)
from wellscore.domains.wellness.domain_logic.scenarios import (
    get_scenario,
    list_scenarios,
)
from wellscore.domains.wellness.domain_logic.score_calculator import calculate_scores

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "Results are for informational purposes only and should not replace "
    "professional medical advice."
)


def build_score_payload(metrics: dict[str, Any], weights: CategoryWeights) -> dict[str, Any]:
    """Score a raw metric record and shape the JSON-ready result."""
    parsed = parse_metric_input(metrics)
    scores = calculate_scores(parsed, weights)
    grade = grade_from_score(scores.total)
    return {
        "status": "ok",
        "scores": scores.as_dict(),
        "grade": grade.as_dict(),
        "breakdown": scores.details,
        "weights": weights.as_dict(),
        "supplied_metrics": parsed.supplied_metrics(),
        "disclaimer": DISCLAIMER,
    }


def register_wellness_score_tools(mcp: FastMCP, weights: CategoryWeights) -> None:
    """Register scoring tools on the MCP server."""

    @mcp.tool
    async def calculate_wellness_score(
        ctx: Context,
        metrics: dict[str, Any],
    ) -> str:
        """Compute the composite wellness score and letter grade.

        Args:
            metrics: Flat record of form values. Keys: age, sex ('male'/'female'),
                a1c, ldl, hdl, totalCholesterol, triglycerides, lpa, apoB,
                systolic, diastolic, waistHeightRatio, vo2Max, gripStrength,
                bodyFat, smm. Omit or leave blank anything you don't have.
        """
        payload = build_score_payload(metrics, weights)
        logger.info(
            "Wellness score computed: total=%s grade=%s (%d metrics)",
            payload["scores"]["total"],
            payload["grade"]["grade"],
            len(payload["supplied_metrics"]),
        )
        return json.dumps(payload)

    @mcp.tool
    async def grade_for_score(ctx: Context, total: float) -> str:
        """Map a 0-100 total score to its letter grade.

        Args:
            total: Total wellness score.
        """
        return json.dumps({"status": "ok", "total": total, **grade_from_score(total).as_dict()})

    @mcp.tool
    async def list_wellness_scenarios(ctx: Context) -> str:
        """List the built-in example metric records."""
        scenarios = list_scenarios()
        return json.dumps({"status": "ok", "count": len(scenarios), "scenarios": scenarios})

    @mcp.tool
    async def score_wellness_scenario(ctx: Context, name: str) -> str:
        """Score one of the built-in example records.

        Args:
            name: Scenario name from list_wellness_scenarios (e.g. 'athleticMale').
        """
        try:
            metrics = get_scenario(name)
        except KeyError:
            return json.dumps({
                "status": "error",
                "message": f"Unknown scenario: {name!r}",
                "valid": [s["name"] for s in list_scenarios()],
            })
        payload = build_score_payload(metrics, weights)
        payload["scenario"] = name
        payload["metrics"] = metrics
        return json.dumps(payload)
