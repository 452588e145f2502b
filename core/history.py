# core/history.py
"""
Summarise stored daily calorie rows (``date``, ``total_calories``,
``calories_burned``) into per-day balances and period averages.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from core.errors import ValidationError

_LOG = logging.getLogger(__name__)

COLUMNS = ["total_calories", "calories_burned"]


def _empty() -> Dict[str, Any]:
    return {
        "days": [],
        "average_intake": 0.0,
        "average_burned": 0.0,
        "average_balance": 0.0,
    }


def _frame(rows: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise ValidationError(f"rows[{i}] must be an object")
        if not row.get("date"):
            raise ValidationError(f"rows[{i}].date is required")

    df = pd.DataFrame([dict(r) for r in rows])
    for col in COLUMNS:
        if col not in df.columns:
            df[col] = 0

    try:
        df["date"] = pd.to_datetime(df["date"]).dt.date
    except (ValueError, TypeError) as exc:
        raise ValidationError(f"unparseable date: {exc}") from exc

    for col in COLUMNS:
        # bools would silently coerce to 0/1
        if df[col].map(lambda v: isinstance(v, bool)).any():
            raise ValidationError(f"{col} must be numeric")
        num = pd.to_numeric(df[col], errors="coerce")
        if (num.isna() & df[col].notna()).any():
            raise ValidationError(f"{col} must be numeric")
        df[col] = num.fillna(0)
    return df


def summarize_history(rows: Sequence[Mapping[str, Any]] | None) -> Dict[str, Any]:
    """Per-day totals newest first, plus mean intake/burned/balance."""
    if not rows:
        return _empty()

    df = _frame(rows)
    daily = df.groupby("date")[COLUMNS].sum().sort_index(ascending=False)
    daily["balance"] = daily["total_calories"] - daily["calories_burned"]

    days: List[Dict[str, Any]] = [
        {
            "date": d.isoformat(),
            "total_calories": float(r["total_calories"]),
            "calories_burned": float(r["calories_burned"]),
            "balance": float(r["balance"]),
        }
        for d, r in daily.iterrows()
    ]
    avg = daily.mean()
    _LOG.debug("history summary over %d days", len(days))
    return {
        "days": days,
        "average_intake": round(float(avg["total_calories"]), 1),
        "average_burned": round(float(avg["calories_burned"]), 1),
        "average_balance": round(float(avg["balance"]), 1),
    }
