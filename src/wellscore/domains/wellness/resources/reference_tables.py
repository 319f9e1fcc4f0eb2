"""MCP resources exposing the scoring reference data."""

from __future__ import annotations

import json
from dataclasses import asdict

from fastmcp import FastMCP

from wellscore.domains.wellness.domain_logic import thresholds as ref
from wellscore.domains.wellness.domain_logic.grading import FAILING_GRADE, GRADE_BANDS
from wellscore.domains.wellness.domain_logic.metric_models import CategoryWeights


def _banded(table: dict) -> dict:
    return {
        sex.value: [{"age_band": band.label, **asdict(row)} for band, row in rows]
        for sex, rows in table.items()
    }


def reference_thresholds() -> dict:
    """All threshold tables as plain JSON-ready data."""
    return {
        "metabolic": {
            "a1c": asdict(ref.A1C),
            "ldl": asdict(ref.LDL),
            "triglycerides": asdict(ref.TRIGLYCERIDES),
            "total_cholesterol": asdict(ref.TOTAL_CHOLESTEROL),
            "ldl_total_ratio": asdict(ref.LDL_TOTAL_RATIO),
            "hdl_total_ratio": asdict(ref.HDL_TOTAL_RATIO),
            "lpa": asdict(ref.LPA),
            "apo_b": asdict(ref.APO_B),
            "systolic": asdict(ref.SYSTOLIC),
            "diastolic": asdict(ref.DIASTOLIC),
            "waist_height_ratio": asdict(ref.WAIST_HEIGHT_RATIO),
        },
        "vo2_max": _banded(ref.VO2_MAX),
        "grip_strength": _banded(ref.GRIP_STRENGTH),
        "body_fat": _banded(ref.BODY_FAT),
        "skeletal_muscle_mass": _banded(ref.SKELETAL_MUSCLE_MASS),
    }


def register_reference_resources(mcp: FastMCP, weights: CategoryWeights) -> None:
    """Register read-only reference resources on the MCP server."""

    @mcp.resource("wellness://reference/weights")
    def category_weights_resource() -> str:
        """Category weights used for the total score."""
        return json.dumps(weights.as_dict(), indent=2)

    @mcp.resource("wellness://reference/thresholds")
    def thresholds_resource() -> str:
        """Reference thresholds for every scored metric."""
        return json.dumps(reference_thresholds(), indent=2)

    @mcp.resource("wellness://reference/grades")
    def grades_resource() -> str:
        """Total-score bands and their letter grades."""
        bands = [{"min_total": minimum, **grade.as_dict()} for minimum, grade in GRADE_BANDS]
        bands.append({"min_total": None, **FAILING_GRADE.as_dict()})
        return json.dumps(bands, indent=2)
