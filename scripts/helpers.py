import re
import json
from typing import Any

_FENCE = re.compile(r"```(?:json)?\s*([\[{][\s\S]*?[\]}])\s*```")


def extract_clean_json(raw: str | dict | list) -> Any:
    """Parse JSON that may arrive wrapped in a ```json fence (exported notes, chat pastes)."""
    if isinstance(raw, (dict, list)):
        return raw
    match = _FENCE.search(raw)
    text = match.group(1) if match else raw.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Input is not valid JSON: {exc}") from exc


def meals_from_payload(data: Any) -> tuple[list, Any]:
    """Accept either a bare meal list or ``{"meals": [...], "calories_burned": n}``."""
    if isinstance(data, list):
        return data, None
    if isinstance(data, dict):
        return data.get("meals", []), data.get("calories_burned")
    raise ValueError("Expected a JSON array of meals or an object with 'meals'")
