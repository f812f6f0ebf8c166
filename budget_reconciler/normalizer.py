from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Tuple

_NUMERIC_PREFIX = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def field_value(record: Any, name: str, default: Any = None) -> Any:
    """
    Read a field from either a mapping (API payload, DB row) or an object
    exposing it as an attribute (pydantic model, dataclass).
    """
    if record is None:
        return default
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def normalize_amount(raw: Any) -> float:
    """
    Coerce a loosely typed amount into a finite float.

    Returns 0.0 for anything that cannot be read as a finite number. The sign
    is kept as given.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float, Decimal)):
        try:
            value = float(raw)
        except (OverflowError, InvalidOperation, ValueError):
            return 0.0
    elif isinstance(raw, str):
        value = _parse_amount_string(raw)
    else:
        return 0.0

    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def _parse_amount_string(raw: str) -> float:
    text = raw.strip()
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        pass

    # "12.50 INR" style values keep their leading number
    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return 0.0
    return float(match.group(0))


def normalize_date(raw: Any) -> Optional[Tuple[int, int]]:
    """
    Return the (year, month) of a date-like value, or None when it is not a
    valid calendar date.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, datetime):
        return raw.year, raw.month
    if isinstance(raw, date):
        return raw.year, raw.month
    if isinstance(raw, (int, float)):
        return _from_epoch_millis(raw)
    if isinstance(raw, str):
        return _from_string(raw.strip())
    return None


def _from_epoch_millis(value: float) -> Optional[Tuple[int, int]]:
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    try:
        moment = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.year, moment.month


def _from_string(text: str) -> Optional[Tuple[int, int]]:
    if not text:
        return None

    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        parsed = datetime.fromisoformat(candidate)
        return parsed.year, parsed.month
    except ValueError:
        pass

    for fmt in ("%Y-%m", "%Y/%m/%d", "%Y/%m"):
        try:
            parsed = datetime.strptime(text, fmt)
            return parsed.year, parsed.month
        except ValueError:
            continue
    return None
