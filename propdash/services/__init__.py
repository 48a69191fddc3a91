"""
Service Layer

This module contains the list-view engine, the swipe gesture recognizer
and the supporting logging, validation and loading services.
"""

from .list_view_controller import ListViewController, toggle_sort, page_window
from .list_views import ListViewDefinition, LIST_VIEWS, get_list_view
from .swipe_gesture import SwipeGestureRecognizer
from .validators import ValidationError, parse_query
from .error_handler import ErrorHandler
from .record_loader import load_records, records_from_dataframe

__all__ = [
    "ListViewController",
    "toggle_sort",
    "page_window",
    "ListViewDefinition",
    "LIST_VIEWS",
    "get_list_view",
    "SwipeGestureRecognizer",
    "ValidationError",
    "parse_query",
    "ErrorHandler",
    "load_records",
    "records_from_dataframe",
]
