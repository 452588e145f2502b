from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MealTotals(BaseModel):
    calories: float
    protein: float
    carbs: float
    fats: float


class MealWithTotals(BaseModel):
    type: str
    time: str | None = None
    items: list[dict]
    totals: MealTotals

    # meals echo back whatever extra keys the caller stored on them
    model_config = ConfigDict(extra="allow")


class CaloriesBreakdown(BaseModel):
    total_calories: float
    calories_burned: float
    balance: float
    meals: list[MealWithTotals]


class HistoryDay(BaseModel):
    date: str
    total_calories: float
    calories_burned: float
    balance: float


class HistorySummary(BaseModel):
    days: list[HistoryDay]
    average_intake: float
    average_burned: float
    average_balance: float
