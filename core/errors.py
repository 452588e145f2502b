"""Errors raised by the energy and meal-ledger computations."""

from __future__ import annotations

from typing import Any, Mapping


class EnergyError(Exception):
    """Base class for caller contract violations.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (offending field, value)
        http_status: suggested HTTP status code for handlers
    """

    http_status = 400

    def __init__(self, message: str, details: Mapping[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class InvalidArgument(EnergyError, ValueError):
    """An enum-like argument (activity level, steps...) is out of range."""


class ValidationError(EnergyError, ValueError):
    """Meal or history data is structurally malformed."""
