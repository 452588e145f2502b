"""Daily activity metrics: steps → burned energy, water intake progress."""

from __future__ import annotations

from core.errors import InvalidArgument
from core.ledger import is_finite_number

KM_PER_STEP = 0.0008
KCAL_PER_KM = 55
DEFAULT_WATER_GOAL_ML = 2000


def _non_negative(value: object, field: str) -> float:
    if not is_finite_number(value):
        raise InvalidArgument(f"{field} must be a number", details={"field": field})
    if value < 0:
        raise InvalidArgument(f"{field} must not be negative", details={"field": field})
    return value


def steps_to_burn(steps: float) -> dict[str, float]:
    """Walking distance and energy for a step count (≈0.8 m/step, 55 kcal/km)."""
    steps = _non_negative(steps, "steps")
    distance = round(steps * KM_PER_STEP, 2)
    return {
        "steps": steps,
        "distance_km": distance,
        "calories_burned": round(distance * KCAL_PER_KM, 2),
    }


def hydration_progress(total_ml: float, goal_ml: float = DEFAULT_WATER_GOAL_ML) -> float:
    """Percent of the daily water goal reached, capped at 100."""
    total_ml = _non_negative(total_ml, "total_ml")
    if not is_finite_number(goal_ml):
        raise InvalidArgument("goal_ml must be a number", details={"field": "goal_ml"})
    if goal_ml <= 0:
        return 0.0
    return min(total_ml / goal_ml * 100, 100.0)
