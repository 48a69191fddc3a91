"""
List-view definitions for the dashboard's tabular views.

Each view pairs a record model with the fields its search box covers and
the filters its toolbar offers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Type

from ..config.settings import ListViewConfig
from ..models.base import RecordModel
from ..models.records import Client, Invoice, MaintenanceRequest, SystemUser, Transaction
from .list_view_controller import ListViewController


@dataclass(frozen=True)
class ListViewDefinition:
    """Static description of one list view."""

    name: str
    title: str
    record_type: Type[RecordModel]
    searchable_fields: Tuple[str, ...]
    filter_fields: Tuple[str, ...] = ()
    sortable_fields: Tuple[str, ...] = ()
    date_field: Optional[str] = None
    default_filter: str = "all"
    columns: Tuple[str, ...] = field(default=())

    @property
    def fields(self) -> List[str]:
        return list(self.record_type.model_fields)

    def controller(self, config: Optional[ListViewConfig] = None) -> ListViewController:
        """A controller bound to this view's fields."""
        return ListViewController(
            searchable_fields=self.searchable_fields,
            fields=self.fields,
            name=self.name,
            config=config,
        )


TRANSACTIONS = ListViewDefinition(
    name="transactions",
    title="Transactions",
    record_type=Transaction,
    searchable_fields=("description", "property", "category"),
    filter_fields=("property", "type", "status"),
    sortable_fields=("date", "description", "property", "category", "amount", "status"),
    date_field="date",
    columns=("id", "date", "description", "property", "category", "type", "amount", "status"),
)

INVOICES = ListViewDefinition(
    name="invoices",
    title="Invoices",
    record_type=Invoice,
    searchable_fields=("id", "client"),
    filter_fields=("status",),
    sortable_fields=("id", "client", "issue_date", "due_date", "amount", "status"),
    date_field="issue_date",
    columns=("id", "client", "issue_date", "due_date", "amount", "status", "method"),
)

USERS = ListViewDefinition(
    name="users",
    title="Users",
    record_type=SystemUser,
    searchable_fields=("name", "email"),
    filter_fields=("role", "status"),
    sortable_fields=("name", "email", "role", "status", "created_at", "last_login"),
    date_field="created_at",
    default_filter="All",
    columns=("id", "name", "email", "role", "status", "last_login"),
)

MAINTENANCE = ListViewDefinition(
    name="maintenance",
    title="Maintenance Requests",
    record_type=MaintenanceRequest,
    searchable_fields=("id", "property_name", "description", "assigned_to"),
    filter_fields=("status", "priority", "category", "assigned_to"),
    sortable_fields=("id", "property_name", "category", "priority", "status", "created_at"),
    date_field="created_at",
    default_filter="All",
    columns=("id", "property_name", "category", "priority", "status", "assigned_to", "created_at"),
)

CLIENTS = ListViewDefinition(
    name="clients",
    title="Clients",
    record_type=Client,
    searchable_fields=("name", "email", "location"),
    filter_fields=("status",),
    sortable_fields=("name", "properties", "location", "status"),
    default_filter="All",
    columns=("id", "name", "email", "phone", "location", "properties", "total_value", "status"),
)

LIST_VIEWS: Dict[str, ListViewDefinition] = {
    view.name: view for view in (TRANSACTIONS, INVOICES, USERS, MAINTENANCE, CLIENTS)
}


def get_list_view(name: str) -> ListViewDefinition:
    """Look up a list view by name."""
    try:
        return LIST_VIEWS[name]
    except KeyError:
        raise KeyError(f"Unknown list view '{name}'. Available: {sorted(LIST_VIEWS)}")
