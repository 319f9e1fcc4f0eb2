"""Tests for the per-category normalizers."""

from __future__ import annotations

import pytest

from wellscore.domains.wellness.domain_logic.metric_models import (
    MetricInput,
    Sex,
    parse_metric_input,
)
from wellscore.domains.wellness.domain_logic.normalizers import (
    body_fat_score,
    score_body_composition,
    score_body_fat,
    score_grip_strength,
    score_metabolic,
    score_skeletal_muscle_mass,
    score_vo2_max,
)
from wellscore.domains.wellness.domain_logic import thresholds as ref
from wellscore.domains.wellness.domain_logic.thresholds import BodyFatThresholds

YOUNG_MALE_BODY_FAT = BodyFatThresholds(8, 10.5, 10.6, 14.8, 20)


# ===========================================================================
# Metabolic
# ===========================================================================

class TestScoreMetabolic:
    def test_no_metrics_scores_zero(self):
        score, details = score_metabolic(MetricInput())
        assert score == 0.0
        assert details == {"fallback": "no_metabolic_metrics"}

    def test_single_marker_is_the_score(self):
        score, details = score_metabolic(MetricInput(a1c=5.0))
        assert score == 100.0
        assert details["metrics_used"] == 1

    def test_healthy_young_male_panel(self, healthy_young_male):
        score, details = score_metabolic(parse_metric_input(healthy_young_male))
        used = details["metric_scores"]
        assert set(used) == {
            "a1c", "ldl", "total_cholesterol", "ldl_total_ratio", "hdl_total_ratio",
        }
        assert used["a1c"] == 100
        assert used["total_cholesterol"] == 95
        assert used["hdl_total_ratio"] == 95
        assert details["ldl_total_ratio"] == pytest.approx(0.4706, abs=1e-4)
        assert score == pytest.approx(90.89, abs=0.01)
        assert score >= 90

    def test_hdl_alone_contributes_nothing(self):
        score, details = score_metabolic(MetricInput(hdl=60))
        assert score == 0.0
        assert "fallback" in details

    def test_ratios_skipped_when_total_cholesterol_is_zero(self):
        score, details = score_metabolic(MetricInput(total_cholesterol=0, ldl=100, hdl=50))
        assert "ldl_total_ratio" not in details["metric_scores"]
        assert "hdl_total_ratio" not in details["metric_scores"]
        # total cholesterol 0 -> 95, LDL 100 -> 84.5
        assert score == pytest.approx((95 + 84.5) / 2)

    def test_blood_pressure_needs_both_readings(self):
        _, details = score_metabolic(MetricInput(systolic=120, a1c=5.0))
        assert "blood_pressure" not in details["metric_scores"]

        _, details = score_metabolic(MetricInput(diastolic=80, a1c=5.0))
        assert "blood_pressure" not in details["metric_scores"]

    def test_blood_pressure_is_mean_of_both(self):
        score, details = score_metabolic(MetricInput(systolic=120, diastolic=90))
        assert details["systolic_score"] == 100
        assert details["diastolic_score"] == 50
        assert score == pytest.approx(75)

    def test_every_marker_counts_once(self):
        m = MetricInput(
            a1c=5.0, ldl=60, hdl=60, total_cholesterol=170, triglycerides=90,
            lpa=30, apo_b=70, systolic=110, diastolic=70, waist_height_ratio=0.45,
        )
        score, details = score_metabolic(m)
        # a1c, ldl, trig, total, 2 ratios, lpa, apo_b, bp, whr
        assert details["metrics_used"] == 10
        assert 0 <= score <= 100

    def test_lab_out_of_range_high_floors(self):
        score, _ = score_metabolic(MetricInput(a1c=14.0, lpa=500, apo_b=300))
        assert score == 0.0


# ===========================================================================
# VO2max & grip strength
# ===========================================================================

class TestScoreVO2Max:
    def test_excellent(self):
        score, details = score_vo2_max(MetricInput(age=25, sex=Sex.MALE, vo2_max=55))
        assert score == 100.0
        assert details["age_band"] == "20-29"
        assert details["thresholds"] == {"excellent": 51, "good": 40, "poor": 35}

    def test_interpolates_within_band(self):
        score, _ = score_vo2_max(MetricInput(age=25, sex=Sex.MALE, vo2_max=45.5))
        assert score == pytest.approx(85)

    def test_female_uses_female_table(self):
        score, _ = score_vo2_max(MetricInput(age=35, sex=Sex.FEMALE, vo2_max=28))
        assert score == pytest.approx(70)

    @pytest.mark.parametrize("metrics", [
        MetricInput(age=25, sex=Sex.MALE),
        MetricInput(sex=Sex.MALE, vo2_max=50),
        MetricInput(age=25, vo2_max=50),
    ])
    def test_missing_inputs_score_zero(self, metrics):
        score, details = score_vo2_max(metrics)
        assert score == 0.0
        assert details["fallback"] == "missing_vo2_max_age_or_sex"

    def test_age_below_every_band(self):
        """Known quirk: all-zero thresholds give full marks for any non-negative value."""
        score, details = score_vo2_max(MetricInput(age=15, sex=Sex.MALE, vo2_max=5))
        assert score == 100.0
        assert details["age_band"] is None


class TestScoreGripStrength:
    def test_good_threshold(self):
        score, details = score_grip_strength(
            MetricInput(age=45, sex=Sex.FEMALE, grip_strength=18)
        )
        assert score == pytest.approx(70)
        assert details["age_band"] == "40-49"

    def test_very_weak_grip_floors(self):
        score, _ = score_grip_strength(MetricInput(age=65, sex=Sex.MALE, grip_strength=10))
        assert score == 0.0

    def test_missing_grip(self):
        score, details = score_grip_strength(MetricInput(age=45, sex=Sex.FEMALE))
        assert score == 0.0
        assert "fallback" in details


# ===========================================================================
# Body fat
# ===========================================================================

class TestBodyFatScore:
    @pytest.mark.parametrize("body_fat, expected", [
        (8, 100),        # optimal low edge
        (9, 100),
        (10.5, 100),     # optimal high edge
        (10.55, 50),     # gap between optimal and good falls to the last zone
        (10.6, 89),      # good low
        (12.7, 79.5),
        (14.8, 70),      # good high
        (17.4, 60),
        (20, 50),        # poor threshold
        (22, 25),
        (24, 0),         # poor * 1.2
        (30, 0),
    ])
    def test_zones_above_optimal_low(self, body_fat, expected):
        assert body_fat_score(body_fat, YOUNG_MALE_BODY_FAT) == pytest.approx(expected)

    @pytest.mark.parametrize("body_fat, expected", [
        (7.9, 99),
        (5.5, 75),
        (3, 50),         # bottom of the 5-point window
        (2, 50),
        (0, 50),
    ])
    def test_underfat_window(self, body_fat, expected):
        assert body_fat_score(body_fat, YOUNG_MALE_BODY_FAT) == pytest.approx(expected)

    def test_underfat_window_floor_at_zero(self):
        row = BodyFatThresholds(3, 6, 6.1, 9, 12)
        assert body_fat_score(1.5, row) == pytest.approx(75)

    def test_continuous_at_good_high_and_poor(self):
        eps = 1e-9
        row = YOUNG_MALE_BODY_FAT
        for bp in (row.good_high, row.poor_threshold):
            assert abs(body_fat_score(bp - eps, row) - body_fat_score(bp + eps, row)) < 1e-4

    def test_gap_between_optimal_and_good_scores_50_in_every_band(self):
        for sex, rows in ref.BODY_FAT.items():
            for band, row in rows:
                midpoint = (row.optimal_high + row.good_low) / 2
                score, _ = score_body_fat(
                    MetricInput(age=band.low, sex=sex, body_fat_percent=midpoint)
                )
                assert score == 50, f"{sex.value} {band.label}"

    def test_never_increases_above_optimal(self):
        values = [10.6 + i / 10 for i in range(0, 200)]
        scores = [body_fat_score(v, YOUNG_MALE_BODY_FAT) for v in values]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_needs_demographics(self):
        assert score_body_fat(MetricInput(body_fat_percent=15)) is None
        assert score_body_fat(MetricInput(age=30, sex=Sex.FEMALE)) is None

    def test_uses_band(self):
        score, details = score_body_fat(
            MetricInput(age=72, sex=Sex.FEMALE, body_fat_percent=20)
        )
        assert score == 100.0
        assert details["age_band"] == "70+"

    def test_age_below_every_band(self):
        """Known quirk: all-zero thresholds put any positive body fat past 1.2 x 0."""
        score, _ = score_body_fat(MetricInput(age=16, sex=Sex.MALE, body_fat_percent=12))
        assert score == 0.0


# ===========================================================================
# Skeletal muscle mass & body composition
# ===========================================================================

class TestSkeletalMuscleMass:
    def test_between_good_and_optimal(self):
        score, details = score_skeletal_muscle_mass(
            MetricInput(age=25, sex=Sex.MALE, skeletal_muscle_mass_percent=41)
        )
        assert score == pytest.approx(90)
        assert details["age_band"] == "18-30"

    def test_caps_at_95(self):
        score, _ = score_skeletal_muscle_mass(
            MetricInput(age=80, sex=Sex.FEMALE, skeletal_muscle_mass_percent=40)
        )
        assert score == 95.0

    def test_low_muscle_mass(self):
        score, _ = score_skeletal_muscle_mass(
            MetricInput(age=40, sex=Sex.MALE, skeletal_muscle_mass_percent=15)
        )
        assert score == 30.0

    def test_needs_demographics(self):
        assert score_skeletal_muscle_mass(MetricInput(skeletal_muscle_mass_percent=35)) is None


class TestBodyComposition:
    def test_mean_of_both(self, healthy_young_male):
        score, details = score_body_composition(parse_metric_input(healthy_young_male))
        assert details["metric_scores"]["skeletal_muscle_mass"] == pytest.approx(90)
        assert details["metric_scores"]["body_fat"] == pytest.approx(82.6667, abs=1e-4)
        assert score == pytest.approx((90 + 82.66667) / 2, abs=1e-4)

    def test_single_sub_score(self):
        score, details = score_body_composition(
            MetricInput(age=25, sex=Sex.MALE, body_fat_percent=9)
        )
        assert score == 100.0
        assert set(details["metric_scores"]) == {"body_fat"}

    def test_nothing_usable(self):
        score, details = score_body_composition(MetricInput(body_fat_percent=20))
        assert score == 0.0
        assert details == {"fallback": "no_body_composition_metrics"}
