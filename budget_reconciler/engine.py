from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .aggregator import aggregate
from .classifier import DEFAULT_THRESHOLDS, Status, StatusThresholds, classify, status_label
from .matcher import index_budgets, match, overlapping_periods
from .normalizer import field_value, normalize_amount, normalize_date
from .period import key_for_record, period_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetStatus:
    """Spend-vs-limit figures for one budget, derived fresh on every call."""

    budget_id: Any
    category: str
    period: Optional[str]
    budgeted: float
    spent: float
    remaining: float
    percentage: float
    progress: float
    status: Status
    expense_count: int = 0

    @property
    def label(self) -> str:
        return status_label(self.status, self.percentage)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["label"] = self.label
        return data


@dataclass
class Reconciliation:
    by_budget: Dict[Any, BudgetStatus] = field(default_factory=dict)
    by_expense: Dict[Any, Optional[BudgetStatus]] = field(default_factory=dict)
    overlapping_periods: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "by_budget": {str(bid): st.to_dict() for bid, st in self.by_budget.items()},
            "by_expense": {
                str(eid): (st.to_dict() if st is not None else None)
                for eid, st in self.by_expense.items()
            },
            "overlapping_periods": list(self.overlapping_periods),
        }


class ReconciliationEngine:
    """
    Matches expenses to the budget covering their category and month and
    reports how much of each budget is used.

    Shared by the HTTP routes and any in-process caller so every view applies
    the same thresholds. Records may be dicts or attribute objects; malformed
    fields degrade to zero amounts or unmatched records instead of raising.
    """

    def __init__(self, thresholds: Optional[StatusThresholds] = None) -> None:
        self._thresholds = thresholds or DEFAULT_THRESHOLDS

    @property
    def thresholds(self) -> StatusThresholds:
        return self._thresholds

    def reconcile(self, expenses: Iterable[Any], budgets: Iterable[Any]) -> Reconciliation:
        expenses = list(expenses)
        budgets = self._usable_budgets(budgets)

        aggregates = aggregate(expenses)
        result = Reconciliation()

        for budget in budgets:
            result.by_budget[field_value(budget, "id")] = self._budget_status(budget, aggregates)

        overlaps = overlapping_periods(budgets)
        if overlaps:
            logger.warning(f"Multiple budgets cover the same category/month: {overlaps}")
        result.overlapping_periods = overlaps

        first_budget_for = index_budgets(budgets)
        for expense in expenses:
            expense_id = field_value(expense, "id")
            if expense_id is None:
                continue
            key = key_for_record(expense, "expense_date")
            budget_id = first_budget_for.get(key) if key is not None else None
            result.by_expense[expense_id] = (
                result.by_budget[budget_id] if budget_id is not None else None
            )

        return result

    def _budget_status(self, budget: Any, aggregates) -> BudgetStatus:
        budgeted = normalize_amount(field_value(budget, "amount"))
        slice_ = match(budget, aggregates)
        outcome = classify(slice_.spent, budgeted, self._thresholds)

        period = normalize_date(field_value(budget, "month_year"))
        category = field_value(budget, "category")
        return BudgetStatus(
            budget_id=field_value(budget, "id"),
            category="" if category is None else str(category),
            period=period_label(*period) if period else None,
            budgeted=budgeted,
            spent=slice_.spent,
            remaining=outcome.remaining,
            percentage=outcome.percentage,
            progress=outcome.progress,
            status=outcome.status,
            expense_count=slice_.count,
        )

    @staticmethod
    def _usable_budgets(budgets: Iterable[Any]) -> List[Any]:
        usable: List[Any] = []
        seen_ids = set()
        for budget in budgets:
            budget_id = field_value(budget, "id")
            if budget_id is None:
                logger.warning("Ignoring budget without an id")
                continue
            if budget_id in seen_ids:
                logger.warning(f"Ignoring repeated budget id {budget_id!r}")
                continue
            seen_ids.add(budget_id)
            usable.append(budget)
        return usable


def reconcile(
    expenses: Iterable[Any],
    budgets: Iterable[Any],
    thresholds: Optional[StatusThresholds] = None,
) -> Reconciliation:
    return ReconciliationEngine(thresholds).reconcile(expenses, budgets)
