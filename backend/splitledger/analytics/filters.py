"""Date-range filtering for expense and payment lists."""
import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple, TypeVar

from splitledger.expenses.models import parse_date

R = TypeVar("R")


class DateFilterType:
    """Date filter type constants."""
    ALL = "all"
    LAST_7_DAYS = "last7days"
    LAST_30_DAYS = "last30days"
    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    CUSTOM_DAYS = "customDays"
    CUSTOM_RANGE = "customRange"

    CHOICES = (
        ALL, LAST_7_DAYS, LAST_30_DAYS, THIS_WEEK,
        THIS_MONTH, LAST_MONTH, CUSTOM_DAYS, CUSTOM_RANGE,
    )


# Also used when custom_days is 0
DEFAULT_CUSTOM_DAYS = 7


@dataclass(frozen=True)
class DateFilter:
    type: str = DateFilterType.ALL
    custom_days: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def __post_init__(self):
        if self.type not in DateFilterType.CHOICES:
            raise ValueError(f"Unknown date filter: {self.type!r}")
        if self.custom_days is not None and self.custom_days < 0:
            raise ValueError("custom_days must not be negative")
        object.__setattr__(self, "start_date", parse_date(self.start_date))
        object.__setattr__(self, "end_date", parse_date(self.end_date))

    def interval(self, today: Optional[date] = None) -> Optional[Tuple[date, date]]:
        """
        Inclusive (start, end) for this filter, or None when nothing is filtered.

        Weeks run Sunday to Saturday.
        """
        today = today or date.today()
        t = self.type

        if t == DateFilterType.LAST_7_DAYS:
            return today - timedelta(days=7), today
        if t == DateFilterType.LAST_30_DAYS:
            return today - timedelta(days=30), today
        if t == DateFilterType.THIS_WEEK:
            start = today - timedelta(days=(today.weekday() + 1) % 7)
            return start, start + timedelta(days=6)
        if t == DateFilterType.THIS_MONTH:
            return _month_bounds(today.year, today.month)
        if t == DateFilterType.LAST_MONTH:
            first = today.replace(day=1) - timedelta(days=1)
            return _month_bounds(first.year, first.month)
        if t == DateFilterType.CUSTOM_DAYS:
            days = self.custom_days or DEFAULT_CUSTOM_DAYS
            return today - timedelta(days=days), today
        if t == DateFilterType.CUSTOM_RANGE and self.start_date and self.end_date:
            return self.start_date, self.end_date
        return None

    @classmethod
    def from_query(cls, args) -> "DateFilter":
        """Build from request args: ``filter``, ``days``, ``start``, ``end``."""
        days = args.get("days")
        return cls(
            type=args.get("filter") or DateFilterType.ALL,
            custom_days=int(days) if days not in (None, "") else None,
            start_date=args.get("start"),
            end_date=args.get("end"),
        )


def _month_bounds(year: int, month: int) -> Tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def filter_by_date(
    records: Iterable[R],
    date_filter: Optional[DateFilter],
    today: Optional[date] = None,
) -> List[R]:
    """Keep the records whose ``date`` falls inside the filter's interval."""
    records = list(records)
    if date_filter is None:
        return records
    bounds = date_filter.interval(today)
    if bounds is None:
        return records
    start, end = bounds
    return [r for r in records if r.date is not None and start <= r.date <= end]
