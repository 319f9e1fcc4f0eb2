"""Tests for the wellness score aggregation."""

from __future__ import annotations

import random

import pytest

from wellscore.domains.wellness.domain_logic.grading import grade_from_score
from wellscore.domains.wellness.domain_logic.metric_models import (
    DEFAULT_WEIGHTS,
    CategoryWeights,
    MetricInput,
    Sex,
)
from wellscore.domains.wellness.domain_logic.score_calculator import (
    calculate_scores,
    weighted_total,
)


class TestWeightedTotal:
    def test_convex_combination(self):
        assert weighted_total([100, 100, 100, 100], DEFAULT_WEIGHTS) == pytest.approx(100)
        assert weighted_total([100, 0, 0, 0], DEFAULT_WEIGHTS) == pytest.approx(40)
        assert weighted_total([0, 0, 0, 100], DEFAULT_WEIGHTS) == pytest.approx(24)

    def test_clamped(self):
        assert weighted_total([150, 150, 150, 150], DEFAULT_WEIGHTS) == 100
        assert weighted_total([-10, 0, 0, 0], DEFAULT_WEIGHTS) == 0


class TestCalculateScores:
    def test_empty_record_scores_zero(self):
        scores = calculate_scores({})
        assert scores.as_dict() == {
            "metabolic": 0,
            "vo2Max": 0,
            "gripStrength": 0,
            "bodyComposition": 0,
            "total": 0,
        }
        assert grade_from_score(scores.total).grade == "F"

    def test_none_record(self):
        assert calculate_scores(None).total == 0

    def test_blank_demographics_only(self):
        scores = calculate_scores({"age": "", "sex": ""})
        assert scores.as_layer_values() == [0, 0, 0, 0]
        assert scores.total == 0

    def test_lowering_ldl_never_lowers_total(self, healthy_young_male):
        totals = [
            calculate_scores(dict(healthy_young_male, ldl=str(ldl))).total
            for ldl in range(300, 0, -5)
        ]
        assert all(a <= b for a, b in zip(totals, totals[1:]))

    def test_healthy_young_male(self, healthy_young_male):
        scores = calculate_scores(healthy_young_male)
        assert scores.metabolic >= 90
        assert scores.vo2_max == 100
        assert scores.grip_strength == 100
        assert scores.body_composition == pytest.approx(86.3333, abs=1e-3)
        assert scores.total == pytest.approx(93.08, abs=0.01)
        assert grade_from_score(scores.total).grade in ("A+", "A")

    def test_missing_fitness_data(self, healthy_young_male):
        record = dict(healthy_young_male)
        del record["vo2Max"]
        del record["gripStrength"]
        scores = calculate_scores(record)
        assert scores.vo2_max == 0
        assert scores.grip_strength == 0
        assert scores.details["vo2_max"]["fallback"] == "missing_vo2_max_age_or_sex"

    def test_missing_demographics_zeroes_banded_categories(self, healthy_young_male):
        record = dict(healthy_young_male, sex="")
        scores = calculate_scores(record)
        assert scores.vo2_max == 0
        assert scores.grip_strength == 0
        assert scores.body_composition == 0
        assert scores.metabolic > 0

    def test_accepts_parsed_input(self):
        scores = calculate_scores(MetricInput(age=30, sex=Sex.MALE, vo2_max=47))
        assert scores.vo2_max == 100
        assert scores.total == pytest.approx(24)

    def test_details_keyed_by_category(self, healthy_young_male):
        details = calculate_scores(healthy_young_male).details
        assert set(details) == {"metabolic", "vo2_max", "grip_strength", "body_composition"}
        assert details["vo2_max"]["age_band"] == "20-29"

    def test_age_below_every_band(self):
        """Known quirk: ages under 18/20 score fitness against all-zero rows."""
        scores = calculate_scores({
            "age": "15", "sex": "male",
            "vo2Max": "5", "gripStrength": "5", "bodyFat": "12", "smm": "20",
        })
        assert scores.vo2_max == 100
        assert scores.grip_strength == 100
        # body fat 0, muscle mass 95
        assert scores.body_composition == pytest.approx(47.5)
        assert scores.total == pytest.approx(24 + 12 + 0.24 * 47.5)

    def test_very_old_age_uses_top_band(self, healthy_young_male):
        record = dict(healthy_young_male, age="200")
        details = calculate_scores(record).details
        assert details["vo2_max"]["age_band"] == "60+"
        assert details["body_composition"]["skeletal_muscle_mass"]["age_band"] == "71+"

    def test_injected_weights(self, healthy_young_male):
        metabolic_only = CategoryWeights(1.0, 0.0, 0.0, 0.0)
        scores = calculate_scores(healthy_young_male, metabolic_only)
        assert scores.total == pytest.approx(scores.metabolic)

    def test_deterministic(self, healthy_young_male):
        assert calculate_scores(healthy_young_male) == calculate_scores(healthy_young_male)


def _random_record(rng: random.Random) -> dict[str, str]:
    def maybe(lo: float, hi: float) -> str:
        if rng.random() < 0.2:
            return rng.choice(["", "n/a", "  "])
        return f"{rng.uniform(lo, hi):.2f}"

    return {
        "age": str(rng.randint(0, 120)),
        "sex": rng.choice(["male", "female", "", "Female"]),
        "a1c": maybe(3, 14),
        "ldl": maybe(0, 300),
        "hdl": maybe(0, 120),
        "totalCholesterol": maybe(0, 400),
        "triglycerides": maybe(0, 900),
        "lpa": maybe(0, 400),
        "apoB": maybe(0, 250),
        "systolic": maybe(80, 220),
        "diastolic": maybe(40, 130),
        "waistHeightRatio": maybe(0.3, 1.0),
        "vo2Max": maybe(0, 80),
        "gripStrength": maybe(0, 80),
        "bodyFat": maybe(0, 60),
        "smm": maybe(0, 60),
    }


class TestRandomizedRecords:
    def test_scores_stay_in_range_and_grade_matches(self):
        rng = random.Random(20240611)
        for _ in range(500):
            record = _random_record(rng)
            scores = calculate_scores(record)
            for value in scores.as_layer_values() + [scores.total]:
                assert 0 <= value <= 100
            for value in scores.as_dict().values():
                assert 0 <= value <= 100
            assert calculate_scores(record) == scores
            grade = grade_from_score(scores.total)
            if scores.total >= 90:
                assert grade.grade == "A+"
            elif scores.total < 50:
                assert grade.grade == "F"
