from splitledger.analytics.filters import DateFilter, DateFilterType, filter_by_date
from splitledger.analytics.services import category_totals

__all__ = ["DateFilter", "DateFilterType", "filter_by_date", "category_totals"]
