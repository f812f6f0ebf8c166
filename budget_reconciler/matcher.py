from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from .aggregator import PeriodAggregate
from .normalizer import field_value, normalize_date
from .period import key_for_record


def match(budget: Any, aggregates: Mapping[str, PeriodAggregate]) -> PeriodAggregate:
    """
    Look up the spend recorded for a budget's category and month.

    A budget whose month_year cannot be parsed matches nothing. Budgets sharing
    a category/month all see the full spend of that slice; it is not split
    between them.
    """
    key = key_for_record(budget, "month_year")
    if key is None:
        return PeriodAggregate()
    found = aggregates.get(key)
    if found is None:
        return PeriodAggregate()
    return PeriodAggregate(spent=found.spent, count=found.count)


def index_budgets(budgets: Iterable[Any]) -> Dict[str, Any]:
    """Map each period key to the id of the first budget (in input order) covering it."""
    index: Dict[str, Any] = {}
    for budget in budgets:
        key = key_for_record(budget, "month_year")
        if key is None or key in index:
            continue
        index[key] = field_value(budget, "id")
    return index


def overlapping_periods(budgets: Iterable[Any]) -> List[str]:
    """Period keys covered by more than one budget, in first-seen order."""
    seen: Dict[str, int] = {}
    for budget in budgets:
        key = key_for_record(budget, "month_year")
        if key is not None:
            seen[key] = seen.get(key, 0) + 1
    return [key for key, count in seen.items() if count > 1]


def budgets_for_month(budgets: Iterable[Any], year: int, month: int) -> List[Any]:
    return [
        budget
        for budget in budgets
        if normalize_date(field_value(budget, "month_year")) == (year, month)
    ]
