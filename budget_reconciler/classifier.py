from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class Status(str, Enum):
    UNDER_BUDGET = "under_budget"
    ON_TRACK = "on_track"
    WARNING = "warning"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class StatusThresholds:
    """
    Percent-used boundaries shared by every view that shows a budget status.

    A budget is exceeded at or above `exceeded`, in warning at or above
    `warning`, and under budget at or below `under_budget`.
    """

    warning: float = 80.0
    exceeded: float = 100.0
    under_budget: float = 30.0

    def __post_init__(self) -> None:
        if not 0 <= self.under_budget < self.warning <= self.exceeded:
            raise ValueError(
                "Thresholds must satisfy 0 <= under_budget < warning <= exceeded, "
                f"got under_budget={self.under_budget}, warning={self.warning}, "
                f"exceeded={self.exceeded}"
            )

    def to_dict(self) -> Dict[str, float]:
        return {
            "warning": self.warning,
            "exceeded": self.exceeded,
            "under_budget": self.under_budget,
        }


DEFAULT_THRESHOLDS = StatusThresholds()


@dataclass(frozen=True)
class Classification:
    percentage: float
    progress: float
    remaining: float
    status: Status


def classify(
    spent: float,
    budgeted: float,
    thresholds: StatusThresholds = DEFAULT_THRESHOLDS,
) -> Classification:
    """
    Compare spend against a budget.

    `percentage` is the raw share used and drives the status, so overspending
    past 100% is still visible. `progress` is the same value clamped to
    0..100 for progress bars. A budget of zero or less is always on track at 0%.
    """
    remaining = budgeted - spent
    if not math.isfinite(budgeted) or budgeted <= 0:
        return Classification(percentage=0.0, progress=0.0, remaining=remaining, status=Status.ON_TRACK)

    percentage = spent * 100.0 / budgeted
    progress = min(max(percentage, 0.0), 100.0)

    if percentage >= thresholds.exceeded:
        status = Status.EXCEEDED
    elif percentage >= thresholds.warning:
        status = Status.WARNING
    elif percentage <= thresholds.under_budget:
        status = Status.UNDER_BUDGET
    else:
        status = Status.ON_TRACK

    return Classification(percentage=percentage, progress=progress, remaining=remaining, status=status)


def status_label(status: Any, percentage: float) -> str:
    """Short badge text shown next to an expense row."""
    status = Status(status)
    if status is Status.EXCEEDED:
        return "Budget Exceeded"
    if status is Status.WARNING:
        return f"{percentage:.0f}% Used"
    return "On Track"
