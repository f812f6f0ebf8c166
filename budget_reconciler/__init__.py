"""
budget_reconciler
~~~~~~~~~~~~~~~~~

Budget reconciliation library for the personal expense tracker. Matches
expenses to the monthly per-category budget that covers them and reports
spent, remaining, percentage used and a status for every budget and expense.
Pure computation with no I/O, reusable by the FastAPI routes, background jobs
or serverless functions so every view applies the same thresholds.
"""

from .aggregator import PeriodAggregate, aggregate
from .classifier import (
    DEFAULT_THRESHOLDS,
    Classification,
    Status,
    StatusThresholds,
    classify,
    status_label,
)
from .engine import BudgetStatus, Reconciliation, ReconciliationEngine, reconcile
from .matcher import budgets_for_month, index_budgets, match, overlapping_periods
from .normalizer import field_value, normalize_amount, normalize_date
from .period import key_for_record, key_of, period_label
from .summary import BudgetSummary, summarize

__all__ = [
    "BudgetStatus",
    "BudgetSummary",
    "Classification",
    "DEFAULT_THRESHOLDS",
    "PeriodAggregate",
    "Reconciliation",
    "ReconciliationEngine",
    "Status",
    "StatusThresholds",
    "aggregate",
    "budgets_for_month",
    "classify",
    "field_value",
    "index_budgets",
    "key_for_record",
    "key_of",
    "match",
    "normalize_amount",
    "normalize_date",
    "overlapping_periods",
    "period_label",
    "reconcile",
    "status_label",
    "summarize",
]
