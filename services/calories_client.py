"""
services/calories_client.py
────────────────────────────────────────────────────────────────────────
Orchestration for the daily calorie breakdown:

1. remote aggregation endpoint (authoritative) when configured
2. in-process `core.ledger.aggregate` when the remote call fails
3. zero-total breakdown when the meal data itself is malformed
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from config import settings
from core.errors import ValidationError
from core.ledger import aggregate, is_finite_number

_LOG = logging.getLogger(__name__)

_REQUIRED = ("total_calories", "calories_burned", "balance", "meals")


def _zero_total(calories_burned: Any) -> dict[str, Any]:
    burned = calories_burned if is_finite_number(calories_burned) else 0
    return {
        "total_calories": 0,
        "calories_burned": burned,
        "balance": -burned,
        "meals": [],
    }


class CaloriesClient:
    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url if url is not None else settings.calories_function_url
        self.timeout = timeout or settings.calories_timeout_s
        self._transport = transport

    async def _remote(self, body: dict[str, Any]) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as http:
            r = await http.post(self.url, json=body)  # type: ignore[arg-type]
        r.raise_for_status()
        data = r.json()
        if not isinstance(data, dict) or any(k not in data for k in _REQUIRED):
            raise ValueError(f"unexpected reply shape: {str(data)[:200]}")
        return data

    async def calculate_totals(
        self,
        meals: Sequence[Mapping[str, Any]],
        calories_burned: Any = 0,
    ) -> tuple[dict[str, Any], str]:
        """
        Return ``(breakdown, source)`` where source is ``remote``,
        ``local`` or ``fallback``.
        """
        body = {"meals": list(meals or []), "calories_burned": calories_burned}

        if self.url:
            try:
                return await self._remote(body), "remote"
            except (httpx.HTTPError, ValueError) as exc:
                _LOG.warning("Remote calorie calculation failed: %s; computing locally", exc)

        try:
            return aggregate(meals, calories_burned), "local"
        except ValidationError as exc:
            _LOG.warning("Meal data rejected (%s); using zero totals", exc)
            return _zero_total(calories_burned), "fallback"
