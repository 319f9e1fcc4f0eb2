"""Sliding-scale interpolation primitives.

Every wellness metric is scored by linear interpolation between reference
thresholds, so a value just past a breakpoint lands next to the neighbouring
tier instead of dropping a whole band.

Two threshold shapes are supported:

    tiered_score:  four breakpoints (optimal/good/average/poor), 95 max
    metric_score:  three breakpoints (excellent/good/poor), 100 max

All functions are pure and deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricThresholds:
    """Three-breakpoint reference row used by :func:`metric_score`."""

    excellent: float
    good: float
    poor: float


@dataclass(frozen=True)
class TieredThresholds:
    """Four-breakpoint reference row used by :func:`tiered_score`."""

    optimal: float
    good: float
    average: float
    poor: float


def linear_score(
    value: float,
    low: float,
    high: float,
    low_score: float,
    high_score: float,
) -> float:
    """Map ``value`` onto ``[low_score, high_score]`` proportionally to ``[low, high]``.

    Values at or below ``low`` return ``low_score``; at or above ``high``
    return ``high_score``. The bounds are checked before the division, so a
    degenerate range (``low == high``) never divides by zero.
    """
    if value <= low:
        return low_score
    if value >= high:
        return high_score
    return (value - low) / (high - low) * (high_score - low_score) + low_score


def tiered_score(
    value: float,
    optimal: float,
    good: float,
    average: float,
    poor: float,
    lower_is_better: bool = True,
) -> float:
    """Score a value through the five-zone optimal/good/average/poor/beyond ladder.

    Zones (lower_is_better=True):
        value <= optimal          -> 95
        optimal < value <= good   -> 95..85
        good < value <= average   -> 85..70
        average < value <= poor   -> 70..55
        value > poor              -> 55..30 over [poor, poor * 1.5]

    With ``lower_is_better=False`` the comparisons are mirrored and the
    "beyond" zone runs 30..55 over ``[poor * 0.5, poor]``.
    """
    if lower_is_better:
        if value <= optimal:
            return 95.0
        if value <= good:
            return linear_score(value, optimal, good, 95, 85)
        if value <= average:
            return linear_score(value, good, average, 85, 70)
        if value <= poor:
            return linear_score(value, average, poor, 70, 55)
        return linear_score(value, poor, poor * 1.5, 55, 30)

    if value >= optimal:
        return 95.0
    if value >= good:
        return linear_score(value, good, optimal, 85, 95)
    if value >= average:
        return linear_score(value, average, good, 70, 85)
    if value >= poor:
        return linear_score(value, poor, average, 55, 70)
    return linear_score(value, poor * 0.5, poor, 30, 55)


def tiered_score_for(
    value: float, thresholds: TieredThresholds, lower_is_better: bool = True
) -> float:
    """:func:`tiered_score` taking a :class:`TieredThresholds` row."""
    return tiered_score(
        value,
        thresholds.optimal,
        thresholds.good,
        thresholds.average,
        thresholds.poor,
        lower_is_better,
    )


def metric_score(
    value: float,
    thresholds: MetricThresholds,
    lower_is_better: bool = True,
) -> float:
    """Score a value against an excellent/good/poor row.

    Zones (lower_is_better=True):
        value <= excellent          -> 100
        excellent < value <= good   -> 100..70
        good < value <= poor        -> 70..50
        value > poor                -> 50..0 over [poor, poor * 1.5]

    Mirrored for ``lower_is_better=False``, with the last zone running
    0..50 over ``[poor * 0.5, poor]``.
    """
    excellent, good, poor = thresholds.excellent, thresholds.good, thresholds.poor

    if lower_is_better:
        if value <= excellent:
            return 100.0
        if value <= good:
            return linear_score(value, excellent, good, 100, 70)
        if value <= poor:
            return linear_score(value, good, poor, 70, 50)
        return linear_score(value, poor, poor * 1.5, 50, 0)

    if value >= excellent:
        return 100.0
    if value >= good:
        return linear_score(value, good, excellent, 70, 100)
    if value >= poor:
        return linear_score(value, poor, good, 50, 70)
    return linear_score(value, poor * 0.5, poor, 0, 50)
