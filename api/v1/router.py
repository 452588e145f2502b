# api/v1/router.py
from fastapi import APIRouter

from . import activity, calories, energy

api_router = APIRouter()

api_router.include_router(calories.router, prefix="/calories", tags=["Calories"])
api_router.include_router(energy.router, prefix="/energy", tags=["Energy"])
api_router.include_router(activity.router, prefix="/activity", tags=["Activity"])
