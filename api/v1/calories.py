# api/v1/calories.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, status

from core.errors import ValidationError
from core.history import summarize_history
from core.ledger import aggregate
from api.v1.schemas import CaloriesBreakdown, HistorySummary

router = APIRouter()


@router.post(
    "/calculate",
    # documented only; the ledger dict is returned unchanged
    responses={200: {"model": CaloriesBreakdown}},
    status_code=status.HTTP_200_OK,
    summary="Per-meal and daily calorie totals plus energy balance",
)
def calculate(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """
    Body: ``{"meals": [...], "calories_burned": 0}``.

    Replaying the same body always yields the same breakdown.
    """
    return aggregate(payload.get("meals"), payload.get("calories_burned"))


@router.post(
    "/history",
    response_model=HistorySummary,
    status_code=status.HTTP_200_OK,
    summary="Daily balances and averages over stored calorie rows",
)
def history(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    rows = payload.get("rows", [])
    if not isinstance(rows, list):
        raise ValidationError("rows must be an array")
    return summarize_history(rows)
