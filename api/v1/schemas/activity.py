from __future__ import annotations

from pydantic import BaseModel


class StepsIn(BaseModel):
    steps: float


class StepsOut(BaseModel):
    steps: float
    distance_km: float
    calories_burned: float


class WaterIn(BaseModel):
    total_ml: float
    goal_ml: float = 2000


class WaterOut(BaseModel):
    total_ml: float
    goal_ml: float
    progress_pct: float
