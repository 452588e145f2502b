"""Re-export individual schema modules for easy imports."""

from .activity import StepsIn, StepsOut, WaterIn, WaterOut
from .calories import CaloriesBreakdown, HistorySummary, MealWithTotals
from .energy import EnergyNeedsOut, ProfileIn

__all__ = [
    "StepsIn",
    "StepsOut",
    "WaterIn",
    "WaterOut",
    "CaloriesBreakdown",
    "HistorySummary",
    "MealWithTotals",
    "EnergyNeedsOut",
    "ProfileIn",
]
