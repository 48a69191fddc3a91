"""
Record Domain Models

Transactions, invoices, system users, maintenance requests and clients as
listed by the dashboard's tabular views. Date fields are kept as ISO-8601
strings, the form the datasets ship them in.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .base import BaseModel, RecordModel


class TransactionType(str, Enum):
    """Transaction type enumeration"""

    INCOME = "Income"
    EXPENSE = "Expense"


class TransactionStatus(str, Enum):
    """Transaction status enumeration"""

    PAID = "Paid"
    COMPLETED = "Completed"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class InvoiceStatus(str, Enum):
    """Invoice status enumeration"""

    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class UserRole(str, Enum):
    """Dashboard user roles"""

    ADMIN = "Admin"
    ACCOUNTANT = "Accountant"
    OWNER = "Owner"
    TECHNICIAN = "Technician"
    CLIENT = "Client"


class UserStatus(str, Enum):
    ACTIVE = "Active"
    PENDING = "Pending"
    SUSPENDED = "Suspended"


class MaintenanceCategory(str, Enum):
    AC = "AC"
    PLUMBING = "Plumbing"
    ELECTRICAL = "Electrical"
    CLEANING = "Cleaning"
    OTHER = "Other"


class MaintenancePriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    URGENT = "Urgent"


class MaintenanceStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class ClientStatus(str, Enum):
    ACTIVE = "Active"
    PROSPECT = "Prospect"
    ARCHIVED = "Archived"


class Transaction(RecordModel):
    """Income or expense booked against a property."""

    id: str
    date: str
    description: str
    property: str
    category: str
    type: TransactionType
    status: TransactionStatus
    amount: float
    method: Optional[str] = None
    reference: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float) -> float:
        """Validate amount is non-negative"""
        if v < 0:
            raise ValueError("Amount must be non-negative")
        return v


class InvoiceLineItem(BaseModel):
    description: str
    quantity: float = 1
    rate: float = 0
    amount: float = 0


class Invoice(RecordModel):
    """Invoice issued to a client for a property."""

    id: str
    client: str
    property_id: str
    issue_date: str
    due_date: str
    amount: float
    status: InvoiceStatus
    method: Optional[str] = None
    reference: Optional[str] = None
    line_items: List[InvoiceLineItem] = Field(default_factory=list)
    subtotal: Optional[float] = None
    vat: float = 0
    total: Optional[float] = None
    notes: Optional[str] = None
    paid_date: Optional[str] = None
    paid_amount: float = 0

    @property
    def payment_progress(self) -> float:
        """Percentage of the invoice total already paid."""
        total = self.total if self.total is not None else self.amount
        if not self.paid_amount or not total:
            return 0.0
        return (self.paid_amount / total) * 100


class SystemUser(RecordModel):
    """User account with access to the dashboard."""

    id: str
    name: str
    email: str
    role: UserRole
    status: UserStatus
    phone: Optional[str] = None
    created_at: str
    last_login: Optional[str] = None
    assigned_properties: List[str] = Field(default_factory=list)


class MaintenanceRequest(RecordModel):
    """Maintenance ticket raised for a property."""

    id: str
    property_id: str
    property_name: str
    category: MaintenanceCategory
    description: str
    priority: MaintenancePriority
    status: MaintenanceStatus
    assigned_to: Optional[str] = None
    assigned_to_id: Optional[str] = None
    created_by: str
    created_by_id: str
    created_at: str
    updated_at: str
    completed_at: Optional[str] = None
    estimated_cost: Optional[float] = None
    actual_cost: Optional[float] = None


class Client(RecordModel):
    """Property owner or prospect managed by the agency."""

    id: int
    name: str
    email: str
    phone: str
    properties: int = 0
    total_value: str = ""
    status: ClientStatus
    location: str
    last_activity: Optional[str] = None
