"""Wellness score aggregation: raw metrics -> category scores -> weighted total.

This is the main entry point of the scoring engine. It is a pure function of
its inputs: no I/O, no shared state, safe to call from any number of callers.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from wellscore.domains.wellness.domain_logic.metric_models import (
    DEFAULT_WEIGHTS,
    SCORE_MAX,
    SCORE_MIN,
    CategoryWeights,
    MetricInput,
    Scores,
    parse_metric_input,
)
from wellscore.domains.wellness.domain_logic.normalizers import (
    score_body_composition,
    score_grip_strength,
    score_metabolic,
    score_vo2_max,
)

logger = logging.getLogger(__name__)


def _clamp(value: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    """Clamp a value to [lo, hi]."""
    return max(lo, min(hi, value))


def weighted_total(category_scores: list[float], weights: CategoryWeights) -> float:
    """Convex combination of category scores (CATEGORY_NAMES order), clamped."""
    return _clamp(sum(s * w for s, w in zip(category_scores, weights.as_list())))


def calculate_scores(
    metrics: MetricInput | Mapping[str, Any] | None,
    weights: CategoryWeights = DEFAULT_WEIGHTS,
) -> Scores:
    """Compute per-category scores and the weighted total.

    ``metrics`` may be a parsed :class:`MetricInput` or a raw form record of
    string values. Each category is clamped to [0, 100] before weighting; a
    category with nothing supplied scores 0 and still carries its weight.
    Nothing is rounded here; use :meth:`Scores.as_dict` at the output boundary.
    """
    parsed = parse_metric_input(metrics)

    metabolic, metabolic_details = score_metabolic(parsed)
    vo2_max, vo2_details = score_vo2_max(parsed)
    grip, grip_details = score_grip_strength(parsed)
    body_comp, body_comp_details = score_body_composition(parsed)

    categories = [_clamp(metabolic), _clamp(vo2_max), _clamp(grip), _clamp(body_comp)]
    total = weighted_total(categories, weights)

    logger.debug(
        "Scored %d supplied metrics: categories=%s total=%.2f",
        len(parsed.supplied_metrics()),
        [round(c, 2) for c in categories],
        total,
    )

    return Scores(
        metabolic=categories[0],
        vo2_max=categories[1],
        grip_strength=categories[2],
        body_composition=categories[3],
        total=total,
        details={
            "metabolic": metabolic_details,
            "vo2_max": vo2_details,
            "grip_strength": grip_details,
            "body_composition": body_comp_details,
        },
    )
