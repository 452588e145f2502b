# api/v1/energy.py
from __future__ import annotations

from fastapi import APIRouter, status

from core.energy import EnergyCalculator
from api.v1.schemas import EnergyNeedsOut, ProfileIn

router = APIRouter()
_calc = EnergyCalculator()


@router.post("/estimate", response_model=EnergyNeedsOut, status_code=status.HTTP_200_OK)
def estimate(body: ProfileIn) -> EnergyNeedsOut:
    needs = _calc.estimate(
        body.gender,
        body.weight_kg,
        body.height_cm,
        body.age,
        body.activity_level,
        body.goal,
    )
    return EnergyNeedsOut(**needs.as_dict())
