"""
Interactive List-View Tables for the Property Dashboard

The table owns the current ``ListQuery`` in ``st.session_state`` and hands
``(records, query)`` to the list-view engine on every rerun.
"""

import base64
from typing import Any, Callable, Dict, MutableMapping, Optional, Sequence

import pandas as pd
import streamlit as st

from ...models.query import DateRange, ListQuery, ResultPage, SortDirection, SortSpec
from ...services.list_view_controller import ELLIPSIS, ListViewController, toggle_sort
from ...services.list_views import ListViewDefinition
from ...utils.date_utils import DateUtils

SORT_MARKERS = {
    None: "↕",
    SortDirection.DESCENDING: "↓",
    SortDirection.ASCENDING: "↑",
}


def query_state_key(view_name: str) -> str:
    """Session-state key holding a view's query."""
    return f"list_query_{view_name}"


def load_query(state: MutableMapping[str, Any], view_name: str, controller: ListViewController) -> ListQuery:
    """Current query of a view, a fresh one on first render."""
    query = state.get(query_state_key(view_name))
    if isinstance(query, ListQuery):
        return query
    return controller.new_query()


def store_query(state: MutableMapping[str, Any], view_name: str, query: ListQuery) -> None:
    state[query_state_key(view_name)] = query


def sort_label(column: str, sort: Optional[SortSpec]) -> str:
    """Column header text with the column's sort marker."""
    title = column.replace("_", " ").title()
    direction = sort.direction if sort is not None and sort.field == column else None
    return f"{title} {SORT_MARKERS[direction]}"


def showing_caption(result: ResultPage, noun: str) -> str:
    if result.total_matched == 0:
        return "No records found"
    return f"Showing {result.first_index} to {result.last_index} of {result.total_matched} {noun}"


class BaseTable:
    """Base table component with common functionality"""

    @staticmethod
    def _prepare_dataframe(df: pd.DataFrame, formatters: Dict[str, Callable] = None) -> pd.DataFrame:
        """Prepare DataFrame for display with formatting"""
        if df.empty:
            return df

        display_df = df.copy()

        # Apply custom formatters
        if formatters:
            for column, formatter in formatters.items():
                if column in display_df.columns:
                    display_df[column] = display_df[column].apply(formatter)

        return display_df

    @staticmethod
    def _add_export_functionality(df: pd.DataFrame, filename: str = "data"):
        """Add a CSV download link"""
        csv = df.to_csv(index=False)
        b64 = base64.b64encode(csv.encode()).decode()
        href = f'<a href="data:file/csv;base64,{b64}" download="{filename}.csv">📄 Download CSV</a>'
        st.markdown(href, unsafe_allow_html=True)


class ListViewTable:
    """Searchable, filterable, sortable and paginated record table"""

    @staticmethod
    def render(
        view: ListViewDefinition,
        records: Sequence[Any],
        controller: Optional[ListViewController] = None,
        formatters: Dict[str, Callable] = None,
    ) -> ResultPage:
        """
        Render the list view for one record type

        Args:
            view: List view definition (fields, filters, sortable columns)
            records: Full record set
            controller: List-view engine; built from the view when omitted
            formatters: Dictionary of column display formatters

        Returns:
            The page shown
        """
        controller = controller or view.controller()
        state = st.session_state
        query = load_query(state, view.name, controller)
        prefix = f"{view.name}_table"

        st.subheader(view.title)

        # Search
        search_text = st.text_input(
            f"🔍 Search {view.title.lower()}",
            value=query.search_text,
            key=f"{prefix}_search",
        )
        if search_text != query.search_text:
            query = query.with_search(search_text)

        # Filters
        if view.filter_fields:
            filter_cols = st.columns(len(view.filter_fields) + 1)
            for column, field in zip(filter_cols, view.filter_fields):
                options = [view.default_filter] + controller.distinct_values(records, field)
                current = query.filters.get(field, view.default_filter)
                with column:
                    selected = st.selectbox(
                        field.replace("_", " ").title(),
                        options,
                        index=options.index(current) if current in options else 0,
                        key=f"{prefix}_filter_{field}",
                    )
                if selected != current:
                    query = query.with_filter(field, selected)

            with filter_cols[-1]:
                if st.button("Reset filters", key=f"{prefix}_reset"):
                    store_query(state, view.name, query.reset())
                    st.rerun()

        # Date range
        if view.date_field:
            with st.expander("🎛️ Advanced Filters"):
                current_range = query.date_range or DateRange(field=view.date_field)
                col1, col2 = st.columns(2)
                with col1:
                    start = st.date_input("From", value=current_range.start, key=f"{prefix}_date_from")
                with col2:
                    end = st.date_input("To", value=current_range.end, key=f"{prefix}_date_to")
                if (start, end) != (current_range.start, current_range.end):
                    query = query.with_date_range(DateRange(field=view.date_field, start=start, end=end))
                st.caption(DateUtils.format_date_range(start, end))

        # Sort headers
        if view.sortable_fields:
            sort_cols = st.columns(len(view.sortable_fields))
            for column, field in zip(sort_cols, view.sortable_fields):
                with column:
                    if st.button(sort_label(field, query.sort), key=f"{prefix}_sort_{field}"):
                        store_query(state, view.name, query.with_sort(toggle_sort(query.sort, field)))
                        st.rerun()

        result = controller.compute(records, query)
        if result.is_overrun and result.total_pages > 0:
            query = controller.clamp_page(query, result)
            result = controller.compute(records, query)
        store_query(state, view.name, query)

        if result.total_matched == 0:
            st.warning(showing_caption(result, view.name))
            return result

        df = result.to_dataframe()
        if view.columns:
            df = df[[column for column in view.columns if column in df.columns]]
        st.dataframe(BaseTable._prepare_dataframe(df, formatters), use_container_width=True)
        st.caption(showing_caption(result, view.name))

        ListViewTable._render_pagination(controller, query, result, view.name, prefix)

        BaseTable._add_export_functionality(df, view.name)
        return result

    @staticmethod
    def _render_pagination(
        controller: ListViewController,
        query: ListQuery,
        result: ResultPage,
        view_name: str,
        prefix: str,
    ) -> None:
        state = st.session_state
        links = controller.page_window(result)
        col_size, col_pages = st.columns([1, 3])

        with col_size:
            options = controller.config.page_size_options
            page_size = st.selectbox(
                "Rows per page",
                options,
                index=options.index(query.page.size) if query.page.size in options else 0,
                key=f"{prefix}_page_size",
            )
            if page_size != query.page.size:
                store_query(state, view_name, query.with_page_size(page_size))
                st.rerun()

        with col_pages:
            if len(links) <= 1:
                return
            link_cols = st.columns(len(links) + 2)
            with link_cols[0]:
                if st.button("‹", key=f"{prefix}_prev", disabled=not result.has_previous):
                    store_query(state, view_name, query.with_page(result.page_number - 1))
                    st.rerun()
            for position, (column, link) in enumerate(zip(link_cols[1:-1], links)):
                with column:
                    if link == ELLIPSIS:
                        st.write(ELLIPSIS)
                    elif st.button(
                        str(link),
                        key=f"{prefix}_page_{position}_{link}",
                        type="primary" if link == result.page_number else "secondary",
                    ):
                        store_query(state, view_name, query.with_page(link))
                        st.rerun()
            with link_cols[-1]:
                if st.button("›", key=f"{prefix}_next", disabled=not result.has_next):
                    store_query(state, view_name, query.with_page(result.page_number + 1))
                    st.rerun()
