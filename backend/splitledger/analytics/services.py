"""Spending breakdowns for the dashboard."""
from collections import OrderedDict
from decimal import Decimal
from typing import Dict, Iterable

from splitledger.expenses.models import Expense


def category_totals(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    """Total spent per category, largest first."""
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category_id] = totals.get(expense.category_id, Decimal(0)) + expense.amount
    return OrderedDict(sorted(totals.items(), key=lambda kv: (-kv[1], kv[0])))
