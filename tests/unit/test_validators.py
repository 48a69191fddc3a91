"""
Unit tests for list-view input validation
"""

from datetime import date

import pytest

from propdash.models.query import PageSpec, SortDirection
from propdash.services.error_handler import ErrorHandler
from propdash.services.validators import (
    ValidationError,
    parse_date_bound,
    parse_page_number,
    parse_page_size,
    parse_query,
    parse_sort_direction,
)


class TestPageNumber:
    """Test page number parsing"""

    def test_valid_page_numbers(self):
        assert parse_page_number(3) == 3
        assert parse_page_number(" 2 ") == 2
        assert parse_page_number(4.0) == 4

    def test_out_of_range_values_pass_through(self):
        """Test clamping is left to pagination"""
        assert parse_page_number(0) == 0
        assert parse_page_number("-2") == -2

    def test_invalid_page_numbers(self):
        with pytest.raises(ValidationError, match="Invalid page number format"):
            parse_page_number("two")
        with pytest.raises(ValidationError, match="whole number"):
            parse_page_number(2.5)
        with pytest.raises(ValidationError, match="required"):
            parse_page_number("")
        with pytest.raises(ValidationError, match="required"):
            parse_page_number(None)


class TestPageSize:
    """Test page size parsing"""

    def test_valid_page_sizes(self):
        assert parse_page_size("25") == 25
        assert parse_page_size(50, [10, 25, 50]) == 50

    def test_non_positive_page_size(self):
        with pytest.raises(ValidationError, match="must be positive"):
            parse_page_size(0)

    def test_page_size_not_offered(self):
        with pytest.raises(ValidationError, match="must be one of"):
            parse_page_size(30, [10, 25, 50])

    def test_invalid_page_size(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_page_size("lots")
        assert exc_info.value.field == "page_size"
        assert exc_info.value.value == "lots"


class TestSortDirection:
    """Test sort direction parsing"""

    @pytest.mark.parametrize("value", ["asc", "ASC", "ascending", " Ascending "])
    def test_ascending_aliases(self, value):
        assert parse_sort_direction(value) == SortDirection.ASCENDING

    @pytest.mark.parametrize("value", ["desc", "DESC", "descending", SortDirection.DESCENDING])
    def test_descending_aliases(self, value):
        assert parse_sort_direction(value) == SortDirection.DESCENDING

    def test_invalid_direction(self):
        with pytest.raises(ValidationError, match="ascending or descending"):
            parse_sort_direction("sideways")


class TestDateBound:
    """Test date bound parsing"""

    def test_open_bounds(self):
        assert parse_date_bound(None, "date_from") is None
        assert parse_date_bound("  ", "date_from") is None

    def test_iso_values(self):
        assert parse_date_bound("2025-10-03", "date_from") == date(2025, 10, 3)
        assert parse_date_bound("2025-10-03T14:30:00Z", "date_to") == date(2025, 10, 3)

    def test_invalid_date(self):
        with pytest.raises(ValidationError, match="Invalid date format") as exc_info:
            parse_date_bound("2025-13-01", "date_to")
        assert exc_info.value.field == "date_to"


class TestParseQuery:
    """Test building a query from raw parameters"""

    def test_full_query(self):
        query = parse_query(
            {
                "search": "tower",
                "filters": {"status": "Paid", "type": "all"},
                "sort_field": "amount",
                "sort_direction": "asc",
                "page": "2",
                "page_size": "25",
                "date_field": "date",
                "date_from": "2025-01-01",
                "date_to": "",
            },
            allowed_page_sizes=[10, 25, 50, 100],
        )
        assert query.search_text == "tower"
        assert query.filters == {"status": "Paid", "type": "all"}
        assert query.sort.field == "amount"
        assert query.sort.direction == SortDirection.ASCENDING
        assert query.page == PageSpec(number=2, size=25)
        assert query.date_range.start == date(2025, 1, 1)
        assert query.date_range.end is None

    def test_sort_defaults_to_descending(self):
        assert parse_query({"sort_field": "date"}).sort.direction == SortDirection.DESCENDING

    def test_empty_input(self):
        query = parse_query({}, default_page_size=25)
        assert query.search_text == ""
        assert query.sort is None
        assert query.date_range is None
        assert query.page == PageSpec(number=1, size=25)

    def test_bad_clauses_degrade_to_defaults(self):
        """Test every bad clause is reported and replaced"""
        handler = ErrorHandler()
        query = parse_query(
            {
                "filters": "status=Paid",
                "page": "abc",
                "page_size": "0",
                "sort_field": "amount",
                "sort_direction": "sideways",
                "date_field": "date",
                "date_from": "yesterday",
            },
            default_page_size=10,
            error_handler=handler,
        )

        assert query.filters == {}
        assert query.page == PageSpec(number=1, size=10)
        assert query.sort is None
        assert query.date_range is None
        assert [error["field"] for error in handler.handled] == [
            "filters", "page_size", "page", "sort_direction", "date_from",
        ]
        assert all(error["type"] == "ValidationError" for error in handler.handled)


class TestErrorHandler:
    """Test error result payloads"""

    def test_validation_error_payload(self):
        handler = ErrorHandler()
        result = handler.handle_validation_error("page", "abc", "Invalid page number format", "test")
        assert result["success"] is False
        assert result["field"] == "page"
        assert len(result["error_id"]) == 8
        assert handler.has_errors

    def test_exception_payload(self):
        handler = ErrorHandler()
        result = handler.handle_exception(ValueError("boom"), context="test")
        assert result["type"] == "ValueError"
        assert result["message"] == "Invalid input provided. Please check your data."
