"""
Pytest configuration and fixtures for the Property Dashboard test suite
"""

import os
import sys

import pytest

# Add project root to Python path to allow imports from 'propdash'
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from propdash.config.settings import GestureConfig, ListViewConfig
from propdash.models.records import Client, Invoice, MaintenanceRequest, SystemUser, Transaction

PROPERTIES = ["North View Tower", "Al Arid Villa", "Al Narjis Complex"]
TRANSACTION_STATUSES = ["Paid", "Pending", "Overdue", "Completed"]
CATEGORIES = ["Rent", "Maintenance", "Utilities", "Insurance", "Service Fee"]


@pytest.fixture
def list_view_config():
    """List-view settings independent of the environment"""
    return ListViewConfig(
        default_page_size=10,
        page_size_options=[10, 25, 50, 100],
        max_page_links=7,
        filter_sentinels=["all", ""],
    )


@pytest.fixture
def gesture_config():
    """Gesture settings independent of the environment"""
    return GestureConfig(swipe_threshold=50, haptic_duration_ms=10, prevent_default_touch_move=False)


@pytest.fixture
def transactions():
    """25 transactions dated 2025-01-01..2025-01-25, stored out of date order"""
    records = []
    for position in range(25):
        day = (position * 7) % 25 + 1
        records.append(
            Transaction(
                id=f"TX-{day:03d}",
                date=f"2025-01-{day:02d}",
                description=f"{CATEGORIES[day % 5]} payment #{day}",
                property=PROPERTIES[day % 3],
                category=CATEGORIES[day % 5],
                type="Income" if day % 2 else "Expense",
                status=TRANSACTION_STATUSES[day % 4],
                amount=float(500 + (day * 130) % 900),
            )
        )
    return records


@pytest.fixture
def invoices():
    """Invoices as shipped in the dashboard datasets (camelCase keys)"""
    rows = [
        {"id": "INV-001", "client": "North View Tower", "propertyId": "NVT-001", "issueDate": "2025-10-01",
         "dueDate": "2025-10-10", "amount": 8000, "status": "Paid", "method": "Bank Transfer",
         "paidDate": "2025-10-09", "paidAmount": 8000, "total": 8000},
        {"id": "INV-002", "client": "Al Arid Villa", "propertyId": "AAV-004", "issueDate": "2025-09-25",
         "dueDate": "2025-10-05", "amount": 6500, "status": "Pending", "method": "Cash",
         "paidDate": None, "paidAmount": 0, "total": 6500},
        {"id": "INV-003", "client": "Al Narjis Complex", "propertyId": "ANC-007", "issueDate": "2025-09-10",
         "dueDate": "2025-09-20", "amount": 12000, "status": "Overdue", "method": "Bank Transfer",
         "paidDate": None, "paidAmount": 4000, "total": 12000},
        {"id": "INV-004", "client": "North View Tower", "propertyId": "NVT-002", "issueDate": "2025-10-03",
         "dueDate": "2025-10-13", "amount": 6500, "status": "Pending", "method": "Card",
         "paidDate": None, "paidAmount": 0, "total": 6500},
    ]
    return [Invoice.model_validate(row) for row in rows]


@pytest.fixture
def users():
    rows = [
        ("USR-001", "Ahmed Al-Rashid", "ahmed.rashid@klz.com", "Admin", "Active", "2024-01-15"),
        ("USR-002", "Sarah Al-Otaibi", "sarah.otaibi@klz.com", "Accountant", "Active", "2024-03-02"),
        ("USR-003", "Mohammed Ali", "mohammed.ali@klz.com", "Technician", "Pending", "2024-05-20"),
        ("USR-004", "Fatima Hassan", "fatima.hassan@email.com", "Owner", "Suspended", "2024-02-11"),
        ("USR-005", "Omar Khalid", "omar.khalid@email.com", "Client", "Active", "2024-06-30"),
    ]
    return [
        SystemUser(id=id_, name=name, email=email, role=role, status=status, created_at=created_at)
        for id_, name, email, role, status, created_at in rows
    ]


@pytest.fixture
def maintenance_requests():
    rows = [
        ("MR-001", "North View Tower", "AC", "AC not cooling in unit 4B", "Urgent", "New", "Ali Hassan",
         "2025-10-01T09:00:00"),
        ("MR-002", "Al Arid Villa", "Plumbing", "Leaking kitchen sink", "Medium", "In Progress", "Mohammed Ali",
         "2025-10-03T14:30:00"),
        ("MR-003", "Al Narjis Complex", "Electrical", "Lobby lights flickering", "High", "New", None,
         "2025-10-04T08:15:00"),
        ("MR-004", "North View Tower", "Cleaning", "Post-renovation cleaning", "Low", "Completed", "Ali Hassan",
         "2025-10-06T11:45:00"),
    ]
    return [
        MaintenanceRequest(
            id=id_,
            property_id=f"P-{position}",
            property_name=property_name,
            category=category,
            description=description,
            priority=priority,
            status=status,
            assigned_to=assigned_to,
            created_by="Sarah Al-Otaibi",
            created_by_id="USR-002",
            created_at=created_at,
            updated_at=created_at,
        )
        for position, (id_, property_name, category, description, priority, status, assigned_to, created_at)
        in enumerate(rows)
    ]


@pytest.fixture
def clients():
    rows = [
        (1, "Ahmed Al-Rashid", "ahmed.rashid@email.com", "Riyadh", "Active", 3),
        (2, "Sarah Al-Otaibi", "sarah.otaibi@email.com", "Jeddah", "Active", 5),
        (3, "Khalid Al-Mansour", "khalid.m@email.com", "Riyadh", "Prospect", 0),
        (4, "Noura Al-Saud", "noura.saud@email.com", "Dammam", "Archived", 1),
    ]
    return [
        Client(id=id_, name=name, email=email, phone="+966 50 000 0000", location=location,
               status=status, properties=properties)
        for id_, name, email, location, status, properties in rows
    ]
