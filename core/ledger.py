"""
core/ledger.py
────────────────────────────────────────────────────────────────────────
Fold a day's logged meals and the burned-calories figure into totals.

The same function backs both the HTTP endpoint and the in-process
fallback used by `services.calories_client`, so its output must depend
on nothing but its arguments.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Mapping, Sequence

from core.errors import ValidationError

_LOG = logging.getLogger(__name__)

MACROS = ("protein", "carbs", "fats")


def is_finite_number(value: Any) -> bool:
    """True for real numbers a float can hold; bools, NaN, inf and huge ints are not."""
    # bool is an Integral; a JSON true is not a calorie count
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{where} must be a number", details={"field": where, "value": repr(value)})
    if not is_finite_number(value):
        raise ValidationError(f"{where} must be finite", details={"field": where})
    return value


def _meal_totals(meal: Any, idx: int) -> dict[str, float]:
    if not isinstance(meal, Mapping):
        raise ValidationError(f"meals[{idx}] must be an object")
    if not isinstance(meal.get("type"), str):
        raise ValidationError(f"meals[{idx}].type must be a string")
    if meal.get("time") is not None and not isinstance(meal["time"], str):
        raise ValidationError(f"meals[{idx}].time must be a string")
    items = meal.get("items")
    if not isinstance(items, list):
        raise ValidationError(f"meals[{idx}].items must be an array")

    totals = {"calories": 0, **{m: 0 for m in MACROS}}
    for j, item in enumerate(items):
        where = f"meals[{idx}].items[{j}]"
        if not isinstance(item, Mapping):
            raise ValidationError(f"{where} must be an object")
        if "calories" not in item:
            raise ValidationError(f"{where}.calories is required")
        totals["calories"] += max(0, _number(item["calories"], f"{where}.calories"))
        for m in MACROS:
            raw = item.get(m)
            if raw is None:
                continue
            totals[m] += max(0, _number(raw, f"{where}.{m}"))
    return totals


def aggregate(meals: Sequence[Mapping[str, Any]] | None, calories_burned: Any = 0) -> dict[str, Any]:
    """
    Return ``{meals, total_calories, calories_burned, balance}``.

    Every meal comes back as a fresh dict with its original keys plus a
    ``totals`` mapping (calories, protein, carbs, fats). Negative item
    values count as zero. Input objects are never mutated.

    Raises ``ValidationError`` on malformed input instead of producing
    a silent zero.
    """
    if meals is None:
        meals = []
    if not isinstance(meals, (list, tuple)):
        raise ValidationError("meals must be an array")
    burned = 0 if calories_burned is None else _number(calories_burned, "calories_burned")

    detailed: list[dict[str, Any]] = []
    for idx, meal in enumerate(meals):
        totals = _meal_totals(meal, idx)
        out = dict(meal)
        out["items"] = [dict(item) for item in meal["items"]]
        out["totals"] = totals
        detailed.append(out)

    total = sum(m["totals"]["calories"] for m in detailed)
    _LOG.debug("aggregated %d meals: total=%s burned=%s", len(detailed), total, burned)
    return {
        "total_calories": total,
        "calories_burned": burned,
        "balance": total - burned,
        "meals": detailed,
    }
