from splitledger.expenses.models import Expense, DEFAULT_CATEGORY, parse_date
from splitledger.expenses.services import split_equal

__all__ = ["Expense", "DEFAULT_CATEGORY", "parse_date", "split_equal"]
