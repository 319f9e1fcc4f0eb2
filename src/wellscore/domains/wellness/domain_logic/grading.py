"""Total score -> letter grade."""

from __future__ import annotations

from wellscore.domains.wellness.domain_logic.metric_models import Grade

# (minimum total, grade), checked top-down. Anything below the last band is F.
GRADE_BANDS: list[tuple[float, Grade]] = [
    (90, Grade("A+", "Optimal – Best outcome range", "text-green-600")),
    (80, Grade("A", "Excellent – Minimal improvement needed", "text-green-500")),
    (70, Grade("B", "Good – Room for improvement", "text-yellow-500")),
    (60, Grade("C", "Moderate risk – Action needed", "text-orange-500")),
    (50, Grade("D", "High risk – Significant change needed", "text-red-500")),
]

FAILING_GRADE = Grade("F", "Critical risk – Immediate support recommended", "text-red-600")


def grade_from_score(total: float) -> Grade:
    """Look up the grade band for a total score.

    Out-of-range totals still resolve (negative -> F, above 100 -> A+).
    A NaN total matches no band and is graded F.
    """
    for minimum, grade in GRADE_BANDS:
        if total >= minimum:
            return grade
    return FAILING_GRADE
