"""
Utility helpers shared by the list-view engine and the UI layer.
"""

from .date_utils import DateUtils
from .field_access import MISSING, get_field, has_field

__all__ = ["DateUtils", "MISSING", "get_field", "has_field"]
