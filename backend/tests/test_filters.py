"""Date filters and category totals."""
from datetime import date
from decimal import Decimal

import pytest

from splitledger.analytics import DateFilter, DateFilterType, category_totals, filter_by_date
from splitledger.expenses.models import Expense

# A Wednesday
TODAY = date(2024, 5, 15)


def _expense(eid, when, amount=10, category="food"):
    return Expense(id=eid, amount=amount, payer_id="a", split_among=["a", "b"],
                   date=when, category_id=category)


EXPENSES = [
    _expense("old", date(2024, 3, 31)),
    _expense("april", date(2024, 4, 20), 25, "travel"),
    _expense("may1", date(2024, 5, 1)),
    _expense("sunday", date(2024, 5, 12)),
    _expense("today", TODAY, 5, "travel"),
    _expense("undated", None),
]


def _ids(records):
    return [r.id for r in records]


class TestIntervals:

    def test_all_is_unbounded(self) -> None:
        assert DateFilter().interval(TODAY) is None

    def test_last_7_days(self) -> None:
        assert DateFilter(DateFilterType.LAST_7_DAYS).interval(TODAY) == (date(2024, 5, 8), TODAY)

    def test_this_week_starts_sunday(self) -> None:
        assert DateFilter(DateFilterType.THIS_WEEK).interval(TODAY) == (
            date(2024, 5, 12), date(2024, 5, 18),
        )

    def test_this_week_on_a_sunday(self) -> None:
        sunday = date(2024, 5, 12)
        assert DateFilter(DateFilterType.THIS_WEEK).interval(sunday)[0] == sunday

    def test_last_month_across_year(self) -> None:
        assert DateFilter(DateFilterType.LAST_MONTH).interval(date(2024, 1, 10)) == (
            date(2023, 12, 1), date(2023, 12, 31),
        )

    def test_this_month_leap_february(self) -> None:
        assert DateFilter(DateFilterType.THIS_MONTH).interval(date(2024, 2, 3)) == (
            date(2024, 2, 1), date(2024, 2, 29),
        )

    def test_custom_days_default(self) -> None:
        assert DateFilter(DateFilterType.CUSTOM_DAYS).interval(TODAY)[0] == date(2024, 5, 8)

    def test_custom_days_zero_falls_back_to_default(self) -> None:
        f = DateFilter.from_query({"filter": "customDays", "days": "0"})
        assert f.interval(TODAY) == (date(2024, 5, 8), TODAY)

    def test_custom_range_needs_both_bounds(self) -> None:
        assert DateFilter(DateFilterType.CUSTOM_RANGE, start_date="2024-05-01").interval(TODAY) is None

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValueError):
            DateFilter("fortnight")

    def test_from_query(self) -> None:
        f = DateFilter.from_query({"filter": "customDays", "days": "3"})
        assert f.custom_days == 3
        assert DateFilter.from_query({}).type == DateFilterType.ALL


class TestFilterByDate:

    def test_no_filter_keeps_everything(self) -> None:
        assert _ids(filter_by_date(EXPENSES, None)) == _ids(EXPENSES)
        assert _ids(filter_by_date(EXPENSES, DateFilter())) == _ids(EXPENSES)

    def test_this_month(self) -> None:
        result = filter_by_date(EXPENSES, DateFilter(DateFilterType.THIS_MONTH), TODAY)
        assert _ids(result) == ["may1", "sunday", "today"]

    def test_last_month(self) -> None:
        result = filter_by_date(EXPENSES, DateFilter(DateFilterType.LAST_MONTH), TODAY)
        assert _ids(result) == ["april"]

    def test_custom_range_is_inclusive(self) -> None:
        f = DateFilter(DateFilterType.CUSTOM_RANGE, start_date="2024-04-20", end_date="2024-05-01")
        assert _ids(filter_by_date(EXPENSES, f, TODAY)) == ["april", "may1"]


def test_category_totals() -> None:
    totals = category_totals(EXPENSES)
    assert list(totals.items()) == [("food", Decimal("40")), ("travel", Decimal("30"))]
