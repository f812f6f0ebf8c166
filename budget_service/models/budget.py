from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional, Union

from budget_service.models.expense import ExpenseRecord


class BudgetRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    category: Optional[str] = None
    amount: Any = None
    month_year: Any = None  # first day of the month, e.g. "2024-12-01"


class ReconcileRequest(BaseModel):
    expenses: List[ExpenseRecord] = Field(default_factory=list)
    budgets: List[BudgetRecord] = Field(default_factory=list)


class BudgetStatusPublic(BaseModel):
    budget_id: Union[int, str]
    category: str
    period: Optional[str] = None
    budgeted: float
    spent: float
    remaining: float
    percentage: float
    progress: float
    status: str
    label: str
    expense_count: int


class ReconcileResponse(BaseModel):
    by_budget: Dict[str, BudgetStatusPublic]
    by_expense: Dict[str, Optional[BudgetStatusPublic]]
    overlapping_periods: List[str]


class BudgetStatsResponse(BaseModel):
    budget_count: int
    total_budgeted: float
    total_spent: float
    total_remaining: float
    average_budget: float
    average_progress: float
    on_track_count: int
    status_counts: Dict[str, int]
    statuses: List[BudgetStatusPublic]


class ThresholdsPublic(BaseModel):
    warning: float
    exceeded: float
    under_budget: float
