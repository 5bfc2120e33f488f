"""CSV export of expenses."""
import csv
import io
from datetime import date

from splitledger.exports import CSV_HEADERS, export_expenses_csv, export_filename
from splitledger.expenses.models import Expense


def _rows(text):
    return list(csv.reader(io.StringIO(text)))


def test_header_only_for_no_expenses() -> None:
    assert _rows(export_expenses_csv([])) == [CSV_HEADERS]


def test_row_contents(dinner) -> None:
    rows = _rows(export_expenses_csv(
        [dinner],
        category_names={"food": "Food & Dining"},
        user_names={"alice": "Alice", "bob": "Bob", "carol": "Carol"},
    ))
    assert rows[1] == [
        "2024-05-01", "Dinner", "90.00", "Food & Dining", "Alice", "Alice; Bob; Carol", "30.00",
    ]


def test_per_person_share_matches_equal_split() -> None:
    expense = Expense(id="e", amount="10.00", payer_id="a", split_among=["a", "b", "c"],
                      description='Taxi, "airport"')
    row = _rows(export_expenses_csv([expense]))[1]
    assert row[1] == 'Taxi, "airport"'
    assert row[6] == "3.33"


def test_unknown_names(dinner) -> None:
    row = _rows(export_expenses_csv([dinner]))[1]
    assert row[3] == "Unknown"
    assert row[4] == "Unknown"
    assert row[5] == "Unknown; Unknown; Unknown"


def test_export_filename() -> None:
    assert export_filename(date(2024, 5, 15)) == "splitledger-expenses-2024-05-15.csv"
