from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable

from .normalizer import field_value, normalize_amount
from .period import key_for_record

logger = logging.getLogger(__name__)


@dataclass
class PeriodAggregate:
    """Total spend and number of expenses for one category/month slice."""

    spent: float = 0.0
    count: int = 0


def aggregate(expenses: Iterable[Any]) -> Dict[str, PeriodAggregate]:
    """
    Group expenses by period key and sum their amounts in one pass.

    Expenses whose date cannot be parsed do not count toward any slice.
    """
    totals: Dict[str, PeriodAggregate] = defaultdict(PeriodAggregate)
    dropped = 0
    for expense in expenses:
        key = key_for_record(expense, "expense_date")
        if key is None:
            dropped += 1
            continue

        bucket = totals[key]
        bucket.spent += normalize_amount(field_value(expense, "amount"))
        bucket.count += 1

    if dropped:
        logger.debug(f"Skipped {dropped} expense(s) without a valid expense_date")
    return dict(totals)
