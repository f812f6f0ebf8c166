from __future__ import annotations

from typing import Any, Optional

from .normalizer import field_value, normalize_date


def key_of(category: str, year: int, month: int) -> str:
    """Composite lookup key for one category in one calendar month."""
    return f"{category}|{year:04d}-{month:02d}"


def period_label(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def key_for_record(record: Any, date_field: str) -> Optional[str]:
    """
    Build the period key of an expense (date_field="expense_date") or a budget
    (date_field="month_year"). Returns None when the date cannot be parsed.

    Categories are compared exactly as written; a missing category is "".
    """
    period = normalize_date(field_value(record, date_field))
    if period is None:
        return None
    category = field_value(record, "category")
    if category is None:
        category = ""
    year, month = period
    return key_of(str(category), year, month)
