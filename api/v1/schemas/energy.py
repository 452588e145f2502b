from __future__ import annotations

from pydantic import BaseModel, Field


class ProfileIn(BaseModel):
    # plain strings: unknown gender/goal fall back, unknown activity is a 400
    gender: str = Field(..., examples=["male", "female", "other"])
    age: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)
    weight_kg: float = Field(..., gt=0)
    activity_level: str = Field(..., examples=["low", "moderate", "high"])
    goal: str = Field("maintain", examples=["lose_weight", "maintain", "gain_muscle"])


class EnergyNeedsOut(BaseModel):
    bmr: float
    tdee: int
    target_calories: int
