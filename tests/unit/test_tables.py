"""
Unit tests for the list-view table helpers
"""

import pandas as pd

from propdash.models.query import ListQuery, PageSpec, ResultPage, SortDirection, SortSpec
from propdash.services.list_views import TRANSACTIONS
from propdash.ui.components.tables import (
    BaseTable,
    load_query,
    query_state_key,
    showing_caption,
    sort_label,
    store_query,
)


class TestQueryState:
    """Test query persistence in session state"""

    def test_first_render_gets_fresh_query(self, list_view_config):
        controller = TRANSACTIONS.controller(list_view_config)
        query = load_query({}, "transactions", controller)
        assert query == ListQuery(page=PageSpec(number=1, size=10))

    def test_stored_query_is_restored(self, list_view_config):
        controller = TRANSACTIONS.controller(list_view_config)
        state = {}
        store_query(state, "transactions", ListQuery(search_text="rent"))
        assert query_state_key("transactions") in state
        assert load_query(state, "transactions", controller).search_text == "rent"

    def test_views_keep_separate_queries(self, list_view_config):
        controller = TRANSACTIONS.controller(list_view_config)
        state = {}
        store_query(state, "invoices", ListQuery(search_text="north"))
        assert load_query(state, "transactions", controller).search_text == ""


class TestLabels:
    """Test header and caption text"""

    def test_sort_markers(self):
        sort = SortSpec(field="amount", direction=SortDirection.DESCENDING)
        assert sort_label("amount", sort) == "Amount ↓"
        assert sort_label("issue_date", sort) == "Issue Date ↕"
        assert sort_label("amount", SortSpec(field="amount", direction=SortDirection.ASCENDING)) == "Amount ↑"
        assert sort_label("amount", None) == "Amount ↕"

    def test_showing_caption(self):
        result = ResultPage(items=[1, 2, 3], total_matched=23, total_pages=3, page_number=3, page_size=10)
        assert showing_caption(result, "transactions") == "Showing 21 to 23 of 23 transactions"

    def test_empty_caption(self):
        assert showing_caption(ResultPage(), "clients") == "No records found"


class TestBaseTable:
    """Test DataFrame preparation"""

    def test_formatters_apply_to_known_columns(self):
        df = pd.DataFrame({"amount": [1200.0, 50.5], "status": ["Paid", "Pending"]})
        formatted = BaseTable._prepare_dataframe(df, {"amount": lambda v: f"SAR {v:,.2f}", "missing": str})
        assert list(formatted["amount"]) == ["SAR 1,200.00", "SAR 50.50"]
        assert list(df["amount"]) == [1200.0, 50.5]
