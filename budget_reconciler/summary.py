from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable

from .classifier import Status


@dataclass
class BudgetSummary:
    """Totals across a set of budget statuses, used for the dashboard header cards."""

    budget_count: int = 0
    total_budgeted: float = 0.0
    total_spent: float = 0.0
    total_remaining: float = 0.0
    average_budget: float = 0.0
    average_progress: float = 0.0
    on_track_count: int = 0
    status_counts: Dict[str, int] = field(
        default_factory=lambda: {status.value: 0 for status in Status}
    )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize(statuses: Iterable[Any]) -> BudgetSummary:
    """
    Roll budget statuses up into overall figures.

    `average_progress` is total spend as a percentage of the total budgeted
    amount, not a mean of the per-budget percentages.
    """
    summary = BudgetSummary()
    for item in statuses:
        summary.budget_count += 1
        summary.total_budgeted += item.budgeted
        summary.total_spent += item.spent
        summary.status_counts[Status(item.status).value] += 1

    summary.total_remaining = summary.total_budgeted - summary.total_spent
    summary.on_track_count = summary.status_counts[Status.ON_TRACK.value]
    if summary.budget_count:
        summary.average_budget = summary.total_budgeted / summary.budget_count
    if summary.total_budgeted > 0:
        summary.average_progress = summary.total_spent * 100.0 / summary.total_budgeted
    return summary
