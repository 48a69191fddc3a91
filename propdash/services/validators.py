"""
Validation functions for loosely typed list-view input.

Widgets and query strings hand the list views strings ("2", "desc", "");
these functions turn them into query values and raise ``ValidationError``
on input they cannot use. ``parse_query`` assembles a whole ``ListQuery``
and never raises: each bad clause is reported to the error handler and
replaced by its default.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from ..models.query import DateRange, ListQuery, PageSpec, SortDirection, SortSpec
from ..utils.date_utils import DateUtils
from .error_handler import ErrorHandler

logger = logging.getLogger(__name__)

_DIRECTION_ALIASES = {
    "asc": SortDirection.ASCENDING,
    "ascending": SortDirection.ASCENDING,
    "desc": SortDirection.DESCENDING,
    "descending": SortDirection.DESCENDING,
}


class ValidationError(Exception):
    """Custom exception for validation errors"""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


def parse_page_number(value: Any) -> int:
    """
    Parse a 1-based page number

    Args:
        value: Page number as int or numeric string

    Returns:
        The page number (may still be < 1; pagination clamps it)

    Raises:
        ValidationError: If value is not an integer
    """
    if value is None or isinstance(value, bool):
        raise ValidationError("Page number is required", "page", value)
    try:
        if isinstance(value, str):
            cleaned = value.strip()
            if not cleaned:
                raise ValidationError("Page number is required", "page", value)
            return int(cleaned)
        if isinstance(value, float) and not value.is_integer():
            raise ValidationError("Page number must be a whole number", "page", value)
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid page number format", "page", value)


def parse_page_size(value: Any, allowed: Optional[Sequence[int]] = None) -> int:
    """
    Parse a page size

    Args:
        value: Page size as int or numeric string
        allowed: Page sizes offered by the view, if restricted

    Returns:
        The page size

    Raises:
        ValidationError: If value is not a positive integer or not offered
    """
    if value is None or isinstance(value, bool):
        raise ValidationError("Page size is required", "page_size", value)
    try:
        size = int(str(value).strip())
    except ValueError:
        raise ValidationError("Invalid page size format", "page_size", value)
    if size < 1:
        raise ValidationError("Page size must be positive", "page_size", value)
    if allowed and size not in allowed:
        raise ValidationError(f"Page size must be one of: {list(allowed)}", "page_size", value)
    return size


def parse_sort_direction(value: Any) -> SortDirection:
    """Parse ``asc``/``ascending``/``desc``/``descending`` in any case."""
    if isinstance(value, SortDirection):
        return value
    direction = _DIRECTION_ALIASES.get(str(value or "").strip().lower())
    if direction is None:
        raise ValidationError("Sort direction must be ascending or descending", "sort_direction", value)
    return direction


def parse_date_bound(value: Any, field: str):
    """Parse an optional date bound; empty input means an open bound."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = DateUtils.parse_date(value)
    if parsed is None:
        raise ValidationError("Invalid date format", field, value)
    return parsed


def parse_query(
    raw: Mapping[str, Any],
    default_page_size: int = 10,
    allowed_page_sizes: Optional[Sequence[int]] = None,
    error_handler: Optional[ErrorHandler] = None,
) -> ListQuery:
    """
    Build a ListQuery from widget or URL parameters

    Recognized keys: ``search``, ``filters`` (mapping), ``sort_field``,
    ``sort_direction``, ``page``, ``page_size``, ``date_field``,
    ``date_from``, ``date_to``. Unknown keys are ignored.

    Args:
        raw: Loosely typed parameters
        default_page_size: Page size used when ``page_size`` is missing or bad
        allowed_page_sizes: Page sizes offered by the view
        error_handler: Receives every degraded clause

    Returns:
        A well-formed ListQuery
    """
    handler = error_handler or ErrorHandler()

    search_text = raw.get("search") or ""
    if not isinstance(search_text, str):
        search_text = str(search_text)

    filters: Dict[str, Any] = {}
    raw_filters = raw.get("filters") or {}
    if isinstance(raw_filters, Mapping):
        filters = {str(key): value for key, value in raw_filters.items()}
    else:
        handler.handle_validation_error("filters", raw_filters, "Filters must be a mapping", "parse_query")

    page_size = default_page_size
    if raw.get("page_size") not in (None, ""):
        try:
            page_size = parse_page_size(raw["page_size"], allowed_page_sizes)
        except ValidationError as e:
            handler.handle_validation_error(e.field, e.value, e.message, "parse_query")

    page_number = 1
    if raw.get("page") not in (None, ""):
        try:
            page_number = parse_page_number(raw["page"])
        except ValidationError as e:
            handler.handle_validation_error(e.field, e.value, e.message, "parse_query")

    sort = None
    sort_field = raw.get("sort_field")
    if sort_field:
        try:
            direction = parse_sort_direction(raw.get("sort_direction", SortDirection.DESCENDING))
            sort = SortSpec(field=str(sort_field), direction=direction)
        except ValidationError as e:
            handler.handle_validation_error(e.field, e.value, e.message, "parse_query")

    date_range = None
    date_field = raw.get("date_field")
    if date_field:
        start = end = None
        try:
            start = parse_date_bound(raw.get("date_from"), "date_from")
        except ValidationError as e:
            handler.handle_validation_error(e.field, e.value, e.message, "parse_query")
        try:
            end = parse_date_bound(raw.get("date_to"), "date_to")
        except ValidationError as e:
            handler.handle_validation_error(e.field, e.value, e.message, "parse_query")
        if start is not None or end is not None:
            date_range = DateRange(field=str(date_field), start=start, end=end)

    query = ListQuery(
        search_text=search_text,
        filters=filters,
        date_range=date_range,
        sort=sort,
        page=PageSpec(number=page_number, size=page_size),
    )
    logger.debug(f"Parsed list query: {query!r}")
    return query
