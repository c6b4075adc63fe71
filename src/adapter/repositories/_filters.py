from datetime import datetime, time, timedelta
from typing import Optional, Tuple
from src.domain import ExportFilter


def date_bounds(filters: ExportFilter) -> Optional[Tuple[datetime, datetime]]:
    """[start of first day, start of the day after the last day) or None"""
    date_range = filters.effective_date_range()
    if date_range is None:
        return None
    start = datetime.combine(date_range.start, time.min)
    end = datetime.combine(date_range.end, time.min) + timedelta(days=1)
    return start, end
