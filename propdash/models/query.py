"""
List query and result page models.

A ``ListQuery`` is an immutable description of what a list view should show:
search text, field filters, an optional date range, an optional sort and the
requested page. Views keep the current query and derive new ones through the
``with_*`` helpers; the list-view engine turns ``(records, query)`` into a
``ResultPage``.
"""

from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd
from pydantic import ConfigDict, Field, field_validator

from .base import BaseModel


class SortDirection(str, Enum):
    """Sort direction enumeration"""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortSpec(BaseModel):
    """Single-key sort criterion."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    field: str
    direction: SortDirection = SortDirection.ASCENDING

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESCENDING


class PageSpec(BaseModel):
    """1-based page request."""

    model_config = ConfigDict(frozen=True)

    number: int = 1
    size: int = 10


class DateRange(BaseModel):
    """Inclusive date bounds on one record field. Either bound may be open."""

    model_config = ConfigDict(frozen=True)

    field: str
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_open(self) -> bool:
        return self.start is None and self.end is None


class ListQuery(BaseModel):
    """Immutable list-view query."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    search_text: str = ""
    filters: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    date_range: Optional[DateRange] = None
    sort: Optional[SortSpec] = None
    page: PageSpec = Field(default_factory=PageSpec)

    @field_validator("filters", mode="after")
    @classmethod
    def freeze_filters(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return _frozen(v)

    def with_search(self, text: str) -> "ListQuery":
        """New query with different search text, back on the first page."""
        return self.model_copy(update={"search_text": text or "", "page": self._first_page()})

    def with_filter(self, field: str, value: Any) -> "ListQuery":
        """New query with one filter replaced, back on the first page."""
        filters = dict(self.filters)
        filters[field] = value
        return self.model_copy(update={"filters": _frozen(filters), "page": self._first_page()})

    def without_filter(self, field: str) -> "ListQuery":
        filters = {key: value for key, value in self.filters.items() if key != field}
        return self.model_copy(update={"filters": _frozen(filters), "page": self._first_page()})

    def with_date_range(self, date_range: Optional[DateRange]) -> "ListQuery":
        return self.model_copy(update={"date_range": date_range, "page": self._first_page()})

    def with_sort(self, sort: Optional[SortSpec]) -> "ListQuery":
        return self.model_copy(update={"sort": sort})

    def with_page(self, number: int) -> "ListQuery":
        return self.model_copy(update={"page": PageSpec(number=number, size=self.page.size)})

    def with_page_size(self, size: int) -> "ListQuery":
        return self.model_copy(update={"page": PageSpec(number=1, size=size)})

    def reset(self) -> "ListQuery":
        """Clear search, filters, date range and sort. Page size is kept."""
        return ListQuery(page=self._first_page())

    def _first_page(self) -> PageSpec:
        return PageSpec(number=1, size=self.page.size)


class ResultPage(BaseModel):
    """One materialized page of a list view plus pagination metadata."""

    model_config = ConfigDict(frozen=True)

    items: List[Any] = Field(default_factory=list)
    total_matched: int = 0
    total_pages: int = 0
    page_number: int = 1
    page_size: int = 10
    skipped_clauses: List[str] = Field(default_factory=list)

    @property
    def first_index(self) -> int:
        """1-based position of the first item on this page, 0 when empty."""
        if not self.items:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        """1-based position of the last item on this page, 0 when empty."""
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return 1 < self.page_number <= self.total_pages

    @property
    def is_overrun(self) -> bool:
        """The requested page lies beyond the last available page."""
        return self.page_number > max(self.total_pages, 1)

    def to_dataframe(self) -> pd.DataFrame:
        """Items as a DataFrame for the table layer."""
        rows = [_record_to_row(item) for item in self.items]
        return pd.DataFrame(rows)


def _frozen(filters: Mapping[str, Any]) -> Mapping[str, Any]:
    """Read-only copy of a filter mapping."""
    return MappingProxyType(dict(filters))


def _record_to_row(record: Any) -> Dict[str, Any]:
    if hasattr(record, "to_row"):
        return record.to_row()
    if hasattr(record, "model_dump"):
        return record.model_dump()
    if isinstance(record, Mapping):
        return dict(record)
    return dict(vars(record))
