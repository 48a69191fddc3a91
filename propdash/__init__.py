"""
Property Dashboard - List Views and Touch Gestures

This package implements the interactive list-view engine (search, filters,
sorting, pagination) and the swipe gesture recognizer shared by the
dashboard's transaction, invoice, user, maintenance and client views.
"""

__version__ = "1.0.0"
__author__ = "Property Dashboard Team"
