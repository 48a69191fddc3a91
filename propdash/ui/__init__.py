"""
UI Components

This module contains the Streamlit components of the dashboard.
"""

from .components.tables import ListViewTable

__all__ = ["ListViewTable"]
