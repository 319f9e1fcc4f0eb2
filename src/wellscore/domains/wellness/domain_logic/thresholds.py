"""Static reference thresholds for wellness scoring.

Cut-offs follow ADA (A1c), ACC/AHA and ESC/EAS (lipids, blood pressure),
Cooper Institute (VO2max), NHANES (grip strength, body fat) and EWGSOP
(skeletal muscle mass) reference data. Values are fixed; do not
tune them here.

Age/sex-banded tables are tuples of ``(AgeBand, row)`` per sex, searched in
order. An age that matches no band resolves to an all-zero row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from wellscore.domains.wellness.domain_logic.interpolation import (
    MetricThresholds,
    TieredThresholds,
)
from wellscore.domains.wellness.domain_logic.metric_models import Sex

logger = logging.getLogger(__name__)

_Row = TypeVar("_Row")


@dataclass(frozen=True)
class AgeBand:
    """Inclusive age range; ``high=None`` means open-ended."""

    low: int
    high: int | None = None

    def contains(self, age: int) -> bool:
        if age < self.low:
            return False
        return self.high is None or age <= self.high

    @property
    def label(self) -> str:
        return f"{self.low}+" if self.high is None else f"{self.low}-{self.high}"


@dataclass(frozen=True)
class BodyFatThresholds:
    """Body-fat % bands: optimal range, good range, and the poor cut-off."""

    optimal_low: float
    optimal_high: float
    good_low: float
    good_high: float
    poor_threshold: float


# ---------------------------------------------------------------------------
# Metabolic panel (not age/sex dependent)
# ---------------------------------------------------------------------------

A1C = MetricThresholds(excellent=5.7, good=6.4, poor=7.0)
LPA = MetricThresholds(excellent=50, good=100, poor=150)
APO_B = MetricThresholds(excellent=80, good=100, poor=120)
SYSTOLIC = MetricThresholds(excellent=120, good=129, poor=140)
DIASTOLIC = MetricThresholds(excellent=80, good=84, poor=90)
WAIST_HEIGHT_RATIO = MetricThresholds(excellent=0.5, good=0.6, poor=0.7)

LDL = TieredThresholds(optimal=70, good=99, average=129, poor=159)
TRIGLYCERIDES = TieredThresholds(optimal=100, good=149, average=199, poor=499)
TOTAL_CHOLESTEROL = TieredThresholds(optimal=180, good=199, average=239, poor=279)
LDL_TOTAL_RATIO = TieredThresholds(optimal=0.30, good=0.39, average=0.49, poor=0.59)
# Higher is better.
HDL_TOTAL_RATIO = TieredThresholds(optimal=0.25, good=0.24, average=0.19, poor=0.15)


# ---------------------------------------------------------------------------
# VO2max (mL/kg/min), higher is better
# ---------------------------------------------------------------------------

VO2_MAX: dict[Sex, tuple[tuple[AgeBand, MetricThresholds], ...]] = {
    Sex.MALE: (
        (AgeBand(20, 29), MetricThresholds(excellent=51, good=40, poor=35)),
        (AgeBand(30, 39), MetricThresholds(excellent=47, good=37, poor=32)),
        (AgeBand(40, 49), MetricThresholds(excellent=42, good=32, poor=28)),
        (AgeBand(50, 59), MetricThresholds(excellent=37, good=27, poor=25)),
        (AgeBand(60), MetricThresholds(excellent=30, good=22, poor=20)),
    ),
    Sex.FEMALE: (
        (AgeBand(20, 29), MetricThresholds(excellent=41, good=30, poor=27)),
        (AgeBand(30, 39), MetricThresholds(excellent=37, good=28, poor=24)),
        (AgeBand(40, 49), MetricThresholds(excellent=33, good=25, poor=21)),
        (AgeBand(50, 59), MetricThresholds(excellent=29, good=22, poor=18)),
        (AgeBand(60), MetricThresholds(excellent=25, good=18, poor=15)),
    ),
}


# ---------------------------------------------------------------------------
# Grip strength (kg), higher is better
# ---------------------------------------------------------------------------

GRIP_STRENGTH: dict[Sex, tuple[tuple[AgeBand, MetricThresholds], ...]] = {
    Sex.MALE: (
        (AgeBand(20, 29), MetricThresholds(excellent=45, good=35, poor=30)),
        (AgeBand(30, 39), MetricThresholds(excellent=43, good=34, poor=29)),
        (AgeBand(40, 49), MetricThresholds(excellent=41, good=32, poor=27)),
        (AgeBand(50, 59), MetricThresholds(excellent=39, good=30, poor=25)),
        (AgeBand(60), MetricThresholds(excellent=35, good=27, poor=22)),
    ),
    Sex.FEMALE: (
        (AgeBand(20, 29), MetricThresholds(excellent=30, good=20, poor=15)),
        (AgeBand(30, 39), MetricThresholds(excellent=29, good=19, poor=14)),
        (AgeBand(40, 49), MetricThresholds(excellent=28, good=18, poor=13)),
        (AgeBand(50, 59), MetricThresholds(excellent=26, good=17, poor=12)),
        (AgeBand(60), MetricThresholds(excellent=24, good=15, poor=10)),
    ),
}


# ---------------------------------------------------------------------------
# Body fat %
# ---------------------------------------------------------------------------

BODY_FAT: dict[Sex, tuple[tuple[AgeBand, BodyFatThresholds], ...]] = {
    Sex.MALE: (
        (AgeBand(20, 29), BodyFatThresholds(8, 10.5, 10.6, 14.8, 20)),
        (AgeBand(30, 39), BodyFatThresholds(8, 14.5, 14.6, 18.2, 22)),
        (AgeBand(40, 49), BodyFatThresholds(8, 17.4, 17.5, 20.6, 25)),
        (AgeBand(50, 59), BodyFatThresholds(8, 19.1, 19.2, 22.1, 27)),
        (AgeBand(60, 69), BodyFatThresholds(8, 19.7, 19.8, 23.4, 28)),
        (AgeBand(70), BodyFatThresholds(8, 20.2, 20.3, 24.5, 30)),
    ),
    Sex.FEMALE: (
        (AgeBand(20, 29), BodyFatThresholds(14, 16.5, 16.6, 19.4, 25)),
        (AgeBand(30, 39), BodyFatThresholds(14, 17.4, 17.5, 20.8, 27)),
        (AgeBand(40, 49), BodyFatThresholds(14, 19.8, 19.9, 23.8, 30)),
        (AgeBand(50, 59), BodyFatThresholds(14, 22.5, 22.6, 27, 32)),
        (AgeBand(60, 69), BodyFatThresholds(14, 23.2, 23.3, 27.9, 33)),
        (AgeBand(70), BodyFatThresholds(14, 24.5, 24.6, 29, 35)),
    ),
}


# ---------------------------------------------------------------------------
# Skeletal muscle mass %, higher is better
# ---------------------------------------------------------------------------

SKELETAL_MUSCLE_MASS: dict[Sex, tuple[tuple[AgeBand, TieredThresholds], ...]] = {
    Sex.MALE: (
        (AgeBand(18, 30), TieredThresholds(optimal=42, good=40, average=36, poor=32)),
        (AgeBand(31, 50), TieredThresholds(optimal=40, good=38, average=34, poor=30)),
        (AgeBand(51, 70), TieredThresholds(optimal=38, good=36, average=32, poor=29)),
        (AgeBand(71), TieredThresholds(optimal=35, good=33, average=29, poor=26)),
    ),
    Sex.FEMALE: (
        (AgeBand(18, 30), TieredThresholds(optimal=31, good=29, average=26, poor=24)),
        (AgeBand(31, 50), TieredThresholds(optimal=29, good=27, average=25, poor=23)),
        (AgeBand(51, 70), TieredThresholds(optimal=27, good=25, average=23, poor=21)),
        (AgeBand(71), TieredThresholds(optimal=25, good=23, average=21, poor=19)),
    ),
}


# Returned when an age falls outside every band (e.g. under 18/20, negative).
# Higher-is-better metrics then score any non-negative value as top marks.
ZERO_METRIC = MetricThresholds(excellent=0, good=0, poor=0)
ZERO_TIERED = TieredThresholds(optimal=0, good=0, average=0, poor=0)
ZERO_BODY_FAT = BodyFatThresholds(0, 0, 0, 0, 0)


def _lookup(
    table: dict[Sex, tuple[tuple[AgeBand, _Row], ...]],
    age: int,
    sex: Sex,
    fallback: _Row,
) -> tuple[AgeBand | None, _Row]:
    for band, row in table.get(sex, ()):
        if band.contains(age):
            return band, row
    logger.debug("Age %d has no %s band; using zero thresholds", age, sex.value)
    return None, fallback


def vo2_max_thresholds(age: int, sex: Sex) -> tuple[AgeBand | None, MetricThresholds]:
    return _lookup(VO2_MAX, age, sex, ZERO_METRIC)


def grip_strength_thresholds(age: int, sex: Sex) -> tuple[AgeBand | None, MetricThresholds]:
    return _lookup(GRIP_STRENGTH, age, sex, ZERO_METRIC)


def body_fat_thresholds(age: int, sex: Sex) -> tuple[AgeBand | None, BodyFatThresholds]:
    return _lookup(BODY_FAT, age, sex, ZERO_BODY_FAT)


def skeletal_muscle_mass_thresholds(
    age: int, sex: Sex
) -> tuple[AgeBand | None, TieredThresholds]:
    return _lookup(SKELETAL_MUSCLE_MASS, age, sex, ZERO_TIERED)
