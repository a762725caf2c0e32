from __future__ import annotations

from typing import Any, Dict, Optional

from flask import request

from ..core.exceptions import ValidationError


def json_body() -> Dict[str, Any]:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def int_arg(name: str) -> Optional[int]:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer") from None


def require(payload: Dict[str, Any], *names: str) -> Any:
    """First present key among ``names`` (alternate spellings of one field)."""
    for name in names:
        if payload.get(name) is not None:
            return payload[name]
    raise ValidationError(f"{names[0]} is required")


def require_int(payload: Dict[str, Any], *names: str) -> int:
    value = require(payload, *names)
    if isinstance(value, bool):
        raise ValidationError(f"{names[0]} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{names[0]} must be an integer") from None
