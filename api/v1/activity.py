# api/v1/activity.py
from __future__ import annotations

from fastapi import APIRouter, status

from core.activity import hydration_progress, steps_to_burn
from api.v1.schemas import StepsIn, StepsOut, WaterIn, WaterOut

router = APIRouter()


@router.post("/steps", response_model=StepsOut, status_code=status.HTTP_200_OK)
def steps(body: StepsIn) -> StepsOut:
    return StepsOut(**steps_to_burn(body.steps))


@router.post("/water", response_model=WaterOut, status_code=status.HTTP_200_OK)
def water(body: WaterIn) -> WaterOut:
    pct = hydration_progress(body.total_ml, body.goal_ml)
    return WaterOut(total_ml=body.total_ml, goal_ml=body.goal_ml, progress_pct=round(pct, 1))
