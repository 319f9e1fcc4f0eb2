"""Wellness metric input, score and grade models.

Raw input arrives as a flat record of optional strings (it originates from
form fields). It is parsed exactly once, by :func:`parse_metric_input`, into a
:class:`MetricInput` whose fields are ``float | None``; the normalizers never
see strings.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------

CATEGORY_NAMES = [
    "metabolic",
    "vo2_max",
    "grip_strength",
    "body_composition",
]

# Wire (camelCase) names used by form/API callers, in CATEGORY_NAMES order.
CATEGORY_WIRE_NAMES = {
    "metabolic": "metabolic",
    "vo2_max": "vo2Max",
    "grip_strength": "gripStrength",
    "body_composition": "bodyComposition",
}

SCORE_MIN = 0.0
SCORE_MAX = 100.0

_WEIGHT_TOLERANCE = 1e-6


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNSET = ""


# Form key -> MetricInput field. Both the camelCase form keys and
# snake_case names are accepted.
_FIELD_ALIASES: dict[str, str] = {
    "a1c": "a1c",
    "ldl": "ldl",
    "hdl": "hdl",
    "totalCholesterol": "total_cholesterol",
    "total_cholesterol": "total_cholesterol",
    "triglycerides": "triglycerides",
    "lpa": "lpa",
    "apoB": "apo_b",
    "apo_b": "apo_b",
    "systolic": "systolic",
    "diastolic": "diastolic",
    "waistHeightRatio": "waist_height_ratio",
    "waist_height_ratio": "waist_height_ratio",
    "vo2Max": "vo2_max",
    "vo2_max": "vo2_max",
    "gripStrength": "grip_strength",
    "grip_strength": "grip_strength",
    "bodyFat": "body_fat_percent",
    "bodyFatPercent": "body_fat_percent",
    "body_fat_percent": "body_fat_percent",
    "smm": "skeletal_muscle_mass_percent",
    "skeletalMuscleMassPercent": "skeletal_muscle_mass_percent",
    "skeletal_muscle_mass_percent": "skeletal_muscle_mass_percent",
}


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MetricInput:
    """A parsed health-metrics record. ``None`` means "not supplied"."""

    age: int | None = None
    sex: Sex = Sex.UNSET

    # Metabolic panel
    a1c: float | None = None                  # %
    ldl: float | None = None                  # mg/dL
    hdl: float | None = None                  # mg/dL
    total_cholesterol: float | None = None    # mg/dL
    triglycerides: float | None = None        # mg/dL
    lpa: float | None = None                  # nmol/L
    apo_b: float | None = None                # mg/dL
    systolic: float | None = None             # mmHg
    diastolic: float | None = None            # mmHg
    waist_height_ratio: float | None = None

    # Fitness
    vo2_max: float | None = None              # mL/kg/min
    grip_strength: float | None = None        # kg

    # Body composition
    body_fat_percent: float | None = None
    skeletal_muscle_mass_percent: float | None = None

    @property
    def has_demographics(self) -> bool:
        """Whether both age and sex are known (needed for banded metrics)."""
        return self.age is not None and self.sex is not Sex.UNSET

    def supplied_metrics(self) -> list[str]:
        """Names of the metric fields that carry a value."""
        return [
            f.name
            for f in fields(self)
            if f.name not in ("age", "sex") and getattr(self, f.name) is not None
        ]


def parse_number(raw: Any) -> float | None:
    """Parse a form value to float; empty, non-numeric, NaN or inf -> None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def parse_age(raw: Any) -> int | None:
    """Parse an age, truncating toward zero (``"25.7"`` -> 25)."""
    value = parse_number(raw)
    if value is None:
        return None
    return math.trunc(value)


def parse_sex(raw: Any) -> Sex:
    if isinstance(raw, Sex):
        return raw
    if not isinstance(raw, str):
        return Sex.UNSET
    normalized = raw.strip().lower()
    if normalized == "male":
        return Sex.MALE
    if normalized == "female":
        return Sex.FEMALE
    return Sex.UNSET


def parse_metric_input(raw: Mapping[str, Any] | MetricInput | None) -> MetricInput:
    """Build a :class:`MetricInput` from a raw form record.

    Unknown keys are ignored. Values that do not parse as finite numbers are
    treated as not supplied.
    """
    if isinstance(raw, MetricInput):
        return raw
    if not raw:
        return MetricInput()

    values: dict[str, Any] = {
        "age": parse_age(raw.get("age")),
        "sex": parse_sex(raw.get("sex")),
    }
    for key, value in raw.items():
        field_name = _FIELD_ALIASES.get(key)
        if field_name is None:
            continue
        parsed = parse_number(value)
        if parsed is None:
            if value not in (None, ""):
                logger.debug("Ignoring unparseable value for %s", key)
            continue
        values[field_name] = parsed

    return MetricInput(**values)


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CategoryWeights:
    """Proportion of the total score contributed by each category.

    Weights must be non-negative and sum to 1.0, so the total is a convex
    combination of the category scores.
    """

    metabolic: float = 0.40
    vo2_max: float = 0.24
    grip_strength: float = 0.12
    body_composition: float = 0.24

    def __post_init__(self) -> None:
        values = self.as_list()
        if any(w < 0 for w in values):
            raise ValueError(f"Category weights must be non-negative: {values}")
        total = sum(values)
        if abs(total - 1.0) > _WEIGHT_TOLERANCE:
            raise ValueError(f"Category weights must sum to 1.0, got {total:.6f}")

    def as_list(self) -> list[float]:
        """Return weights in CATEGORY_NAMES order."""
        return [self.metabolic, self.vo2_max, self.grip_strength, self.body_composition]

    def as_dict(self) -> dict[str, float]:
        return dict(zip(CATEGORY_NAMES, self.as_list()))


DEFAULT_WEIGHTS = CategoryWeights()


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

def round_half_up(value: float) -> int:
    """Round halves up (2.5 -> 3), unlike the built-in banker's ``round``."""
    return int(math.floor(value + 0.5))


@dataclass
class Scores:
    """Per-category scores and the weighted total, unrounded, in [0, 100]."""

    metabolic: float
    vo2_max: float
    grip_strength: float
    body_composition: float
    total: float
    details: dict = field(default_factory=dict)

    def as_layer_values(self) -> list[float]:
        """Return category scores in CATEGORY_NAMES order."""
        return [self.metabolic, self.vo2_max, self.grip_strength, self.body_composition]

    def rounded(self) -> dict[str, int]:
        """Integer scores keyed by snake_case category name plus ``total``."""
        out = {
            name: round_half_up(value)
            for name, value in zip(CATEGORY_NAMES, self.as_layer_values())
        }
        out["total"] = round_half_up(self.total)
        return out

    def as_dict(self) -> dict[str, int]:
        """Wire shape: ``{metabolic, vo2Max, gripStrength, bodyComposition, total}``."""
        rounded = self.rounded()
        out = {CATEGORY_WIRE_NAMES[name]: rounded[name] for name in CATEGORY_NAMES}
        out["total"] = rounded["total"]
        return out


@dataclass(frozen=True)
class Grade:
    """Letter grade for a total score, with a short meaning and a colour hint."""

    grade: str
    meaning: str
    color: str

    def as_dict(self) -> dict[str, str]:
        return asdict(self)
