"""
Budgets Router
Budget-vs-actual reconciliation for an already fetched snapshot of expenses and budgets
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query

from budget_reconciler import ReconciliationEngine, budgets_for_month, summarize
from budget_service.core.config import settings
from budget_service.models.budget import (
    BudgetStatsResponse,
    ReconcileRequest,
    ReconcileResponse,
    ThresholdsPublic,
)

router = APIRouter()
logger = logging.getLogger(__name__)
reconciliation_engine = ReconciliationEngine(settings.status_thresholds())


def _snapshot(request: ReconcileRequest, month: Optional[str]) -> Dict[str, List[Dict[str, Any]]]:
    expenses = [expense.model_dump() for expense in request.expenses]
    budgets = [budget.model_dump() for budget in request.budgets]

    if month:
        try:
            parsed = datetime.strptime(month, "%Y-%m")
        except ValueError:
            raise HTTPException(status_code=400, detail="month must follow YYYY-MM format, e.g. 2024-12")
        budgets = budgets_for_month(budgets, parsed.year, parsed.month)

    return {"expenses": expenses, "budgets": budgets}


@router.get("/thresholds", response_model=ThresholdsPublic)
def get_status_thresholds() -> Dict:
    """
    Percent-used boundaries applied to every budget status.
    """
    return reconciliation_engine.thresholds.to_dict()


@router.post("/reconcile", response_model=ReconcileResponse)
def reconcile_budgets(
    request: ReconcileRequest,
    month: Optional[str] = Query(default=None, description="Only reconcile budgets for this month (YYYY-MM)"),
) -> Dict:
    """
    Match expenses to budgets and return a status per budget and per expense.
    """
    snapshot = _snapshot(request, month)
    try:
        logger.info(
            f"Reconciling {len(snapshot['expenses'])} expenses against {len(snapshot['budgets'])} budgets"
        )
        result = reconciliation_engine.reconcile(snapshot["expenses"], snapshot["budgets"])
        return result.to_dict()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error reconciling budgets: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.post("/stats", response_model=BudgetStatsResponse)
def budget_stats(
    request: ReconcileRequest,
    month: Optional[str] = Query(default=None, description="Only include budgets for this month (YYYY-MM)"),
) -> Dict:
    """
    Overall budgeted, spent and remaining totals plus a count per status.
    """
    snapshot = _snapshot(request, month)
    try:
        result = reconciliation_engine.reconcile(snapshot["expenses"], snapshot["budgets"])
        statuses = list(result.by_budget.values())
        summary = summarize(statuses)
        logger.info(
            f"Budget stats: {summary.budget_count} budgets, total_spent={summary.total_spent}"
        )
        return {
            **summary.to_dict(),
            "statuses": [status.to_dict() for status in statuses],
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error computing budget stats: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
