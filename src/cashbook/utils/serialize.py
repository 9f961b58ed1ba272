"""Conversion of report views into JSON-ready structures."""

import dataclasses
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def to_plain(value: Any) -> Any:
    """Convert dataclasses, enums, decimals and dates into plain values.

    Decimals become strings so no precision is lost; dates become ISO strings.
    Properties a dataclass lists in its ``derived`` class attribute are
    emitted alongside its fields.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [f.name for f in dataclasses.fields(value)]
        names.extend(getattr(value, "derived", ()))
        return {name: to_plain(getattr(value, name)) for name in names}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(to_plain(k)): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    return value


def to_json(value: Any) -> str:
    """Serialize a report view to an indented JSON string."""
    return json.dumps(to_plain(value), indent=2, ensure_ascii=False)
