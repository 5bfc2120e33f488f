"""Expense split logic."""
from fractions import Fraction
from typing import Dict

from splitledger.expenses.models import Expense


def split_equal(expense: Expense) -> Dict[str, Fraction]:
    """Each split member's exact share of the expense.

    Raises InvalidRecord for an empty split or a non-positive amount.
    """
    share = expense.share
    return {member: share for member in expense.split_among}
