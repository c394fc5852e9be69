from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError


def require_payload(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_month(value: Any) -> str:
    """Accept one of the month labels, or an empty string to clear the selection."""
    if value is None or value == "":
        return ""
    if not isinstance(value, str) or value not in MONTHS:
        raise ValidationError(f"Unknown month: {value!r}")
    return value


def require_string(data: Mapping[str, Any], field_name: str) -> str:
    value = data.get(field_name)
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError(f"{field_name} must be a string")
    return str(value)
