"""
Date utility functions.
"""

from datetime import date, datetime
from typing import Any, Optional


class DateUtils:
    """Utility functions for date operations."""

    @staticmethod
    def parse_date(value: Any) -> Optional[date]:
        """Parse a date, datetime or ISO-8601 string; None when unparsable."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        text = str(value).strip()
        if not text:
            return None
        try:
            if "T" in text or " " in text:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
        except ValueError:
            return None

    @staticmethod
    def is_within(check_date: date, start: Optional[date], end: Optional[date]) -> bool:
        """Inclusive range check; a None bound is open."""
        if start is not None and check_date < start:
            return False
        if end is not None and check_date > end:
            return False
        return True

    @staticmethod
    def format_date_range(start_date: Optional[date], end_date: Optional[date]) -> str:
        """Format date range for display."""
        if start_date is None and end_date is None:
            return "All dates"
        if start_date is None:
            return f"Until {end_date.strftime('%b %d, %Y')}"
        if end_date is None:
            return f"From {start_date.strftime('%b %d, %Y')}"
        if start_date.year == end_date.year:
            if start_date.month == end_date.month:
                return f"{start_date.strftime('%b %d')} - {end_date.strftime('%d, %Y')}"
            return f"{start_date.strftime('%b %d')} - {end_date.strftime('%b %d, %Y')}"
        return f"{start_date.strftime('%b %d, %Y')} - {end_date.strftime('%b %d, %Y')}"
