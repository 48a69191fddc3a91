from .tables import BaseTable, ListViewTable, load_query, store_query, query_state_key, sort_label

__all__ = ["BaseTable", "ListViewTable", "load_query", "store_query", "query_state_key", "sort_label"]
