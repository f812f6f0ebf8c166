from pydantic import BaseModel, ConfigDict
from typing import Any, Optional, Union


class ExpenseRecord(BaseModel):
    """
    An expense as the front end already holds it.

    Fields are loosely typed on purpose: amounts arrive as numbers or strings
    and dates as ISO strings, so coercion is left to the reconciler.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    category: Optional[str] = None
    amount: Any = None
    expense_date: Any = None
