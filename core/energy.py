"""
core/energy.py
────────────────────────────────────────────────────────────────────────
Daily energy needs from a profile snapshot:

1. BMR  (Harris–Benedict variant, flat weight-only formula for "other")
2. TDEE (activity multiplier, rounded to whole kcal)
3. Target calories for the three goal branches
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum

from core.errors import InvalidArgument

Logger = logging.getLogger(__name__)

LOSE_WEIGHT_FLOOR = 1200
LOSE_WEIGHT_DEFICIT = 500
GAIN_MUSCLE_SURPLUS = 300


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"


class ActivityLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class Goal(str, Enum):
    lose_weight = "lose_weight"
    maintain = "maintain"
    gain_muscle = "gain_muscle"


_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.low: 1.2,
    ActivityLevel.moderate: 1.55,
    ActivityLevel.high: 1.725,
}


# ──────────────────────────────────────────────────────────────────────
#  Value objects
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Profile:
    gender: str            # "male" | "female" | anything else → "other"
    age: float             # years
    height_cm: float
    weight_kg: float
    activity_level: str    # "low" | "moderate" | "high"
    goal: str = "maintain"


@dataclass(frozen=True)
class EnergyNeeds:
    bmr: float
    tdee: int
    target_calories: int

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


# ──────────────────────────────────────────────────────────────────────
#  Parsing helpers
# ──────────────────────────────────────────────────────────────────────
def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _norm(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower() if value is not None else ""


def parse_gender(value: object) -> Gender:
    try:
        return Gender(_norm(value))
    except ValueError:
        return Gender.other


def parse_activity(value: object) -> ActivityLevel:
    try:
        return ActivityLevel(_norm(value))
    except ValueError:
        raise InvalidArgument(
            f"Unknown activity level: {value!r}",
            details={"field": "activity_level", "allowed": [a.value for a in ActivityLevel]},
        ) from None


def parse_goal(value: object) -> Goal:
    try:
        return Goal(_norm(value))
    except ValueError:
        return Goal.maintain


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class EnergyCalculator:
    """Source-of-truth for BMR, TDEE and the daily calorie target."""

    def bmr(self, gender: object, weight_kg: float, height_cm: float, age: float) -> float:
        g = parse_gender(gender)
        if g is Gender.male:
            return 88.36 + 13.4 * weight_kg + 4.8 * height_cm - 5.7 * age
        if g is Gender.female:
            return 447.6 + 9.2 * weight_kg + 3.1 * height_cm - 4.3 * age
        # height and age are not part of the fallback formula
        return 370 + 21.6 * weight_kg

    def tdee(self, bmr: float, activity_level: object) -> int:
        return round_half_up(bmr * _MULTIPLIERS[parse_activity(activity_level)])

    def target_calories(self, tdee: float, goal: object) -> int:
        g = parse_goal(goal)
        if g is Goal.lose_weight:
            return max(LOSE_WEIGHT_FLOOR, round_half_up(tdee - LOSE_WEIGHT_DEFICIT))
        if g is Goal.gain_muscle:
            return round_half_up(tdee + GAIN_MUSCLE_SURPLUS)
        return round_half_up(tdee)

    def estimate(
        self,
        gender: object,
        weight_kg: float,
        height_cm: float,
        age: float,
        activity_level: object,
        goal: object = Goal.maintain,
    ) -> EnergyNeeds:
        # activity is checked first so a bad value fails before any arithmetic
        parse_activity(activity_level)
        bmr_val = self.bmr(gender, weight_kg, height_cm, age)
        tdee_val = self.tdee(bmr_val, activity_level)
        target = self.target_calories(tdee_val, goal)
        Logger.debug("estimate bmr=%.2f tdee=%d target=%d", bmr_val, tdee_val, target)
        return EnergyNeeds(bmr=bmr_val, tdee=tdee_val, target_calories=target)

    def estimate_for(self, profile: Profile) -> EnergyNeeds:
        return self.estimate(
            profile.gender,
            profile.weight_kg,
            profile.height_cm,
            profile.age,
            profile.activity_level,
            profile.goal,
        )


_default = EnergyCalculator()

bmr = _default.bmr
tdee = _default.tdee
target_calories = _default.target_calories
estimate = _default.estimate
estimate_for = _default.estimate_for
