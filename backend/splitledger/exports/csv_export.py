"""CSV export of raw expense records."""
import csv
import io
from datetime import date
from typing import Iterable, Mapping, Optional

from splitledger.utils.money import round_currency
from splitledger.expenses.models import Expense

CSV_HEADERS = [
    "Date",
    "Description",
    "Amount",
    "Category",
    "Paid By",
    "Split Between",
    "Amount Per Person",
]

UNKNOWN = "Unknown"


def export_expenses_csv(
    expenses: Iterable[Expense],
    category_names: Optional[Mapping[str, str]] = None,
    user_names: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Render expenses as CSV text.

    Amount Per Person is the equal share ``amount / len(split_among)``,
    rounded to cents. Ids missing from the name maps render as "Unknown".
    """
    category_names = category_names or {}
    user_names = user_names or {}

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for expense in expenses:
        split_names = "; ".join(
            user_names.get(member, UNKNOWN) for member in sorted(expense.split_among)
        )
        writer.writerow([
            expense.date.isoformat() if expense.date else "",
            expense.description,
            f"{round_currency(expense.amount):.2f}",
            category_names.get(expense.category_id, UNKNOWN),
            user_names.get(expense.payer_id, UNKNOWN),
            split_names,
            f"{round_currency(expense.share):.2f}",
        ])

    return buf.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"splitledger-expenses-{today.isoformat()}.csv"
