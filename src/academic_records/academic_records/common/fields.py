"""Translation boundary between payload spellings and the canonical schema.

Payloads reach the stores in several spellings: camelCase from operator forms
(``gradeLevel``), snake_case from the backing service (``grade_level``) and
its capitalised system fields (``Id``, ``Name``). Everything is mapped onto
the snake_case dataclass attributes here, and nowhere else.
"""
from __future__ import annotations

import dataclasses
import logging
import re
import typing
from datetime import date
from enum import Enum
from typing import Any, Mapping

from ..core.exceptions import ValidationError
from .datetime_utils import to_day

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def to_camel(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _unwrap_optional(tp):
    if typing.get_origin(tp) is typing.Union:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def _coerce(tp, value: Any) -> Any:
    # Best effort only: values that do not fit are kept as given.
    if value is None:
        return None
    tp = _unwrap_optional(tp)

    if tp is date:
        try:
            return to_day(value)
        except ValidationError:
            return value

    if isinstance(tp, type) and issubclass(tp, Enum):
        try:
            return tp(value)
        except ValueError:
            return value

    if tp in (int, float) and isinstance(value, str):
        text = value.strip()
        try:
            return tp(text)
        except ValueError:
            try:
                return tp(float(text))
            except ValueError:
                return value

    if tp is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)

    return value


def canonicalize(model_cls, payload: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a payload onto ``model_cls`` attribute names and types.

    Unknown keys are dropped. The caller's mapping is never mutated.
    """
    hints = typing.get_type_hints(model_cls)
    names = {f.name for f in dataclasses.fields(model_cls)}

    out: dict[str, Any] = {}
    for key, value in payload.items():
        name = to_snake(str(key))
        if name not in names:
            logger.debug("Dropping unknown %s field %r", model_cls.__name__, key)
            continue
        out[name] = _coerce(hints[name], value)
    return out


def to_dict(record, *, style: str = "camel") -> dict[str, Any]:
    """Serialise a record for the presentation layer."""
    out: dict[str, Any] = {}
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, date):
            value = value.isoformat()
        key = to_camel(f.name) if style == "camel" else f.name
        out[key] = value
    return out
