"""Per-category normalizers: parsed metrics -> 0-100 category scores.

Each function takes a :class:`MetricInput` and returns:
    (score: float, details: dict)

A category with no usable metrics scores 0. Scores are not rounded here.
"""

from __future__ import annotations

from wellscore.domains.wellness.domain_logic import thresholds as ref
from wellscore.domains.wellness.domain_logic.interpolation import (
    linear_score,
    metric_score,
    tiered_score_for,
)
from wellscore.domains.wellness.domain_logic.metric_models import MetricInput
from wellscore.domains.wellness.domain_logic.thresholds import BodyFatThresholds

# Width (in percentage points) of the scoring window below the optimal body-fat
# range. Values further below stay at the window floor of 50.
BODY_FAT_UNDERFAT_WINDOW = 5.0


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


# ---------------------------------------------------------------------------
# Metabolic health
# ---------------------------------------------------------------------------

def score_metabolic(metrics: MetricInput) -> tuple[float, dict]:
    """Unweighted mean of every supplied metabolic marker.

    Markers:
        A1c, Lp(a), ApoB, waist/height ratio   three-breakpoint scale
        LDL, triglycerides, total cholesterol  tiered scale
        LDL/Total, HDL/Total ratios            tiered, only when both operands exist
        Blood pressure                         mean of systolic and diastolic
                                               scores, only when both exist

    HDL on its own does not contribute; it only feeds the HDL/Total ratio.
    """
    m = metrics
    sub_scores: dict[str, float] = {}
    details: dict = {}

    if m.a1c is not None:
        sub_scores["a1c"] = metric_score(m.a1c, ref.A1C)
    if m.ldl is not None:
        sub_scores["ldl"] = tiered_score_for(m.ldl, ref.LDL)
    if m.triglycerides is not None:
        sub_scores["triglycerides"] = tiered_score_for(m.triglycerides, ref.TRIGLYCERIDES)
    if m.total_cholesterol is not None:
        sub_scores["total_cholesterol"] = tiered_score_for(
            m.total_cholesterol, ref.TOTAL_CHOLESTEROL
        )

    # Ratios need a non-zero denominator.
    if m.total_cholesterol:
        if m.ldl is not None:
            ratio = m.ldl / m.total_cholesterol
            details["ldl_total_ratio"] = round(ratio, 4)
            sub_scores["ldl_total_ratio"] = tiered_score_for(ratio, ref.LDL_TOTAL_RATIO)
        if m.hdl is not None:
            ratio = m.hdl / m.total_cholesterol
            details["hdl_total_ratio"] = round(ratio, 4)
            sub_scores["hdl_total_ratio"] = tiered_score_for(
                ratio, ref.HDL_TOTAL_RATIO, lower_is_better=False
            )

    if m.lpa is not None:
        sub_scores["lpa"] = metric_score(m.lpa, ref.LPA)
    if m.apo_b is not None:
        sub_scores["apo_b"] = metric_score(m.apo_b, ref.APO_B)

    if m.systolic is not None and m.diastolic is not None:
        systolic = metric_score(m.systolic, ref.SYSTOLIC)
        diastolic = metric_score(m.diastolic, ref.DIASTOLIC)
        details["systolic_score"] = round(systolic, 4)
        details["diastolic_score"] = round(diastolic, 4)
        sub_scores["blood_pressure"] = (systolic + diastolic) / 2

    if m.waist_height_ratio is not None:
        sub_scores["waist_height_ratio"] = metric_score(
            m.waist_height_ratio, ref.WAIST_HEIGHT_RATIO
        )

    if not sub_scores:
        return 0.0, {"fallback": "no_metabolic_metrics"}

    details["metric_scores"] = {k: round(v, 4) for k, v in sub_scores.items()}
    details["metrics_used"] = len(sub_scores)
    return _mean(list(sub_scores.values())), details


# ---------------------------------------------------------------------------
# VO2max & grip strength
# ---------------------------------------------------------------------------

def score_vo2_max(metrics: MetricInput) -> tuple[float, dict]:
    """VO2max against the age/sex band's excellent/good/poor row (higher is better)."""
    if metrics.vo2_max is None or not metrics.has_demographics:
        return 0.0, {"fallback": "missing_vo2_max_age_or_sex"}

    band, row = ref.vo2_max_thresholds(metrics.age, metrics.sex)
    score = metric_score(metrics.vo2_max, row, lower_is_better=False)
    return score, {
        "vo2_max": metrics.vo2_max,
        "age_band": band.label if band else None,
        "thresholds": {"excellent": row.excellent, "good": row.good, "poor": row.poor},
    }


def score_grip_strength(metrics: MetricInput) -> tuple[float, dict]:
    """Grip strength (kg) against the age/sex band's row (higher is better)."""
    if metrics.grip_strength is None or not metrics.has_demographics:
        return 0.0, {"fallback": "missing_grip_strength_age_or_sex"}

    band, row = ref.grip_strength_thresholds(metrics.age, metrics.sex)
    score = metric_score(metrics.grip_strength, row, lower_is_better=False)
    return score, {
        "grip_strength_kg": metrics.grip_strength,
        "age_band": band.label if band else None,
        "thresholds": {"excellent": row.excellent, "good": row.good, "poor": row.poor},
    }


# ---------------------------------------------------------------------------
# Body composition
# ---------------------------------------------------------------------------

def body_fat_score(body_fat: float, row: BodyFatThresholds) -> float:
    """Score a body-fat % against one band row.

    Zones:
        optimal range                 -> 100
        good range                    -> 89..70
        below optimal                 -> 50..100 over [optimal_low - 5, optimal_low]
        good_high .. poor_threshold   -> 70..50
        anything else                 -> 50..0 over [poor, poor * 1.2]

    A value in the gap between optimal_high and good_low matches none of the
    named ranges and takes the last zone, so it scores 50.
    """
    if row.optimal_low <= body_fat <= row.optimal_high:
        return 100.0
    if row.good_low <= body_fat <= row.good_high:
        return linear_score(body_fat, row.good_low, row.good_high, 89, 70)
    if body_fat < row.optimal_low:
        floor = max(0.0, row.optimal_low - BODY_FAT_UNDERFAT_WINDOW)
        return linear_score(body_fat, floor, row.optimal_low, 50, 100)
    if row.good_high < body_fat <= row.poor_threshold:
        return linear_score(body_fat, row.good_high, row.poor_threshold, 70, 50)
    return linear_score(body_fat, row.poor_threshold, row.poor_threshold * 1.2, 50, 0)


def score_body_fat(metrics: MetricInput) -> tuple[float, dict] | None:
    """Body-fat sub-score, or None when the value, age or sex is missing."""
    if metrics.body_fat_percent is None or not metrics.has_demographics:
        return None
    band, row = ref.body_fat_thresholds(metrics.age, metrics.sex)
    return body_fat_score(metrics.body_fat_percent, row), {
        "body_fat_percent": metrics.body_fat_percent,
        "age_band": band.label if band else None,
    }


def score_skeletal_muscle_mass(metrics: MetricInput) -> tuple[float, dict] | None:
    """Skeletal-muscle-mass sub-score (tiered, higher is better), or None if unusable."""
    if metrics.skeletal_muscle_mass_percent is None or not metrics.has_demographics:
        return None
    band, row = ref.skeletal_muscle_mass_thresholds(metrics.age, metrics.sex)
    score = tiered_score_for(
        metrics.skeletal_muscle_mass_percent, row, lower_is_better=False
    )
    return score, {
        "skeletal_muscle_mass_percent": metrics.skeletal_muscle_mass_percent,
        "age_band": band.label if band else None,
    }


def score_body_composition(metrics: MetricInput) -> tuple[float, dict]:
    """Unweighted mean of the body-fat and muscle-mass sub-scores that are available."""
    sub_scores: dict[str, float] = {}
    details: dict = {}

    body_fat = score_body_fat(metrics)
    if body_fat is not None:
        sub_scores["body_fat"], details["body_fat"] = body_fat

    smm = score_skeletal_muscle_mass(metrics)
    if smm is not None:
        sub_scores["skeletal_muscle_mass"], details["skeletal_muscle_mass"] = smm

    if not sub_scores:
        return 0.0, {"fallback": "no_body_composition_metrics"}

    details["metric_scores"] = {k: round(v, 4) for k, v in sub_scores.items()}
    return _mean(list(sub_scores.values())), details
