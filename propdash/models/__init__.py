"""
Domain Models

This module contains the dashboard records, the list query value objects
and the touch gesture value objects.
"""

from .base import BaseModel, RecordModel
from .records import (
    Transaction,
    TransactionType,
    TransactionStatus,
    Invoice,
    InvoiceLineItem,
    InvoiceStatus,
    SystemUser,
    UserRole,
    UserStatus,
    MaintenanceRequest,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    Client,
    ClientStatus,
)
from .query import ListQuery, SortSpec, SortDirection, PageSpec, DateRange, ResultPage
from .gesture import SwipeDirection, SwipeEvent, TouchPoint, GestureState

__all__ = [
    # Base models
    "BaseModel",
    "RecordModel",

    # Records
    "Transaction",
    "TransactionType",
    "TransactionStatus",
    "Invoice",
    "InvoiceLineItem",
    "InvoiceStatus",
    "SystemUser",
    "UserRole",
    "UserStatus",
    "MaintenanceRequest",
    "MaintenanceCategory",
    "MaintenancePriority",
    "MaintenanceStatus",
    "Client",
    "ClientStatus",

    # Query models
    "ListQuery",
    "SortSpec",
    "SortDirection",
    "PageSpec",
    "DateRange",
    "ResultPage",

    # Gesture models
    "SwipeDirection",
    "SwipeEvent",
    "TouchPoint",
    "GestureState",
]
